"""Station resolver adapter.

Turns what a user typed into a node of the station graph:

1. an exact station id (transfer ids included),
2. an exact, case-insensitive station name,
3. the closest station name, using rapidfuzz, above a minimum score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from rapidfuzz import fuzz, process

from ...config import ResolverConfig, get_config
from ...domain.errors import StationNotFoundError
from ...network import TransitNetwork


def _normalize(name: str) -> str:
    return " ".join(name.casefold().split())


@dataclass
class StationResolver:
    """Resolve station ids and names against a transit network.

    This adapter implements StationResolverPort.

    Attributes:
        config: Resolver configuration (fuzzy matching switch and cutoff)
    """

    config: ResolverConfig = field(default_factory=lambda: get_config().resolver)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, network: TransitNetwork, query: str) -> int:
        """Resolve ``query`` to a node slot.

        Args:
            network: The network to search.
            query: Station id, exact name or approximate name.

        Returns:
            The node slot of the matching station.

        Raises:
            StationNotFoundError: If nothing matches.
        """
        text = query.strip()
        if not text:
            raise StationNotFoundError("Empty station query", query=query)

        index = network.index_of(text)
        if index is not None:
            return index

        wanted = _normalize(text)
        index = network.graph.find_node(lambda station: _normalize(station.name) == wanted)
        if index is not None:
            return index

        if self.config.fuzzy_matching:
            index = self._closest(network, wanted)
            if index is not None:
                return index

        self._logger.warning("Station not found", extra={"query": query})
        raise StationNotFoundError(f"Station not found: {query}", query=query)

    def _closest(self, network: TransitNetwork, wanted: str) -> Optional[int]:
        choices = {node.index: _normalize(node.value.name) for node in network.graph}
        match = process.extractOne(
            wanted,
            choices,
            scorer=fuzz.WRatio,
            score_cutoff=self.config.min_similarity_score,
        )
        if match is None:
            return None

        name, score, index = match
        self._logger.info(
            "Station matched by similarity",
            extra={"query": wanted, "station": name, "score": round(score, 1)},
        )
        return index
