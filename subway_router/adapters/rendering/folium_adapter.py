"""Folium map renderer adapter.

Draws the stops of a route as markers joined by a polyline and saves
the interactive map as a standalone HTML file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import folium

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Station


def _stop_color(position: int, last: int) -> str:
    if position == 0:
        return "green"
    return "red" if position == last else "blue"


@dataclass
class FoliumMapRenderer:
    """Route map renderer backed by folium.

    This adapter implements MapRendererPort.

    Attributes:
        config: Zoom level and polyline color
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build_map(self, stations: Sequence[Station]) -> folium.Map:
        """Return a map with one marker per stop and the route drawn through them."""
        points = [station.location.as_point() for station in stations]
        route_map = folium.Map(
            location=points[0],
            zoom_start=self.config.zoom_start,
            control_scale=True,
        )

        last = len(stations) - 1
        for position, (station, point) in enumerate(zip(stations, points)):
            folium.Marker(
                location=point,
                popup=f"{position + 1}. {station.name} ({', '.join(station.lines)})",
                tooltip=station.code,
                icon=folium.Icon(color=_stop_color(position, last)),
            ).add_to(route_map)

        if len(points) > 1:
            folium.PolyLine(
                points, weight=4, color=self.config.line_color, opacity=0.8
            ).add_to(route_map)
            route_map.fit_bounds(points)
        return route_map

    def render(self, stations: Sequence[Station], output_path: Path) -> Path:
        """Render the stops of a route and save the map as HTML.

        Args:
            stations: Stops of the route, in travel order.
            output_path: Destination HTML file; parent directories are created.

        Returns:
            ``output_path``.

        Raises:
            RenderingError: If ``stations`` is empty or the file cannot be written.
        """
        if not stations:
            raise RenderingError(
                "Cannot render empty route",
                output_path=str(output_path),
                renderer_type="folium",
            )

        route_map = self.build_map(stations)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            route_map.save(str(output_path))
        except OSError as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Could not write map to {output_path}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info(
            "Map rendered",
            extra={"stops": len(stations), "output_path": str(output_path)},
        )
        return output_path
