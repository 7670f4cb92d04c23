"""Rendering port - Abstraction for route map generation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Station


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py

    Map renderers draw the stops of a route on an interactive map.
    """

    def render(
        self,
        stations: Sequence[Station],
        output_path: Path,
    ) -> Path:
        """Render a route on a map and save to file.

        Args:
            stations: Stops of the route, in travel order.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.
        """
        ...
