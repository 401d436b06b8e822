"""Interactive prompt widgets."""

from termlayers.widgets.base import BasePrompt
from termlayers.widgets.prompt import AskPrompt, MaskPrompt
from termlayers.widgets.yesno import YesNoPrompt
from termlayers.widgets.choices import ChoicesPrompt

__all__ = [
    "BasePrompt",
    "AskPrompt",
    "MaskPrompt",
    "YesNoPrompt",
    "ChoicesPrompt",
]
