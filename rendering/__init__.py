"""Viewer-side rendering for the starlings simulation."""

from .birds import BirdMesh
from .grid import Grid
from .text import TextRenderer

__all__ = ["BirdMesh", "Grid", "TextRenderer"]
