"""Rendering adapters - Implementations of RouteRendererPort."""

from .text_renderer import TextRouteRenderer, format_duration

__all__ = ["TextRouteRenderer", "format_duration"]
