"""Icon Factory: AI icon set generation with tag-scoped SVG editing."""

__version__ = "0.1.0"
