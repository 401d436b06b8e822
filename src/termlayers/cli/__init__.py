"""Command-line demos."""
