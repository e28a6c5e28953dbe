"""roundcast — presentation state engine for a live quiz overlay."""

__version__ = "0.1.0"
