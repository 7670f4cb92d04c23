"""Resolve adapters - Implementations of StationResolverPort."""

from .station_resolver import StationResolver

__all__ = ["StationResolver"]
