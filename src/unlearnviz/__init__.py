"""Interactive scatter plot for adding, selecting and forgetting labeled points."""
__version__ = "0.1.0"
