"""Rendering adapters - Implementations of MapRendererPort.

- FoliumMapRenderer: interactive HTML route maps
"""

from .folium_adapter import FoliumMapRenderer

__all__ = ["FoliumMapRenderer"]
