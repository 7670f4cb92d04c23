"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems and libraries:
- Station dataset (JSON file, geopy great-circle distances)
- Station lookup (rapidfuzz)
- Route solving (graph core)
- Map rendering (Folium)
- Caching (in-memory, null)
"""
