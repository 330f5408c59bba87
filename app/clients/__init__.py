"""
HTTP clients for consuming the NestFind API.
"""

from .map_viewport import MapViewportClient, Viewport

__all__ = ["MapViewportClient", "Viewport"]
