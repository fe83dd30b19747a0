"""gridstack: fixed-column grid layout engine with drag, resize and cascade."""

__version__ = "0.1.0"
