"""checkcites-build — packaging helpers for the checkcites TeX tool."""

__version__ = "0.1.0"
