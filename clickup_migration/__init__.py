"""ClickUp Progress Step to status migration tool."""

__version__ = "0.1.0"
