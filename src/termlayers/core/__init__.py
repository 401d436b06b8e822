"""Core data structures: layers, grids and the layer stack."""

from termlayers.core.layer import Layer
from termlayers.core.grid import Layer2D
from termlayers.core.arrangement import LayerArrangement, locate_idx

__all__ = ["Layer", "Layer2D", "LayerArrangement", "locate_idx"]
