"""Rendering port - Abstraction for presenting computed routes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RouteResult


class RouteRendererPort(Protocol):
    """Port for route presentation.

    Implementation: adapters/rendering/text_renderer.py
    """

    def render(self, route: RouteResult) -> str:
        """Render a single route.

        Args:
            route: The computed route.

        Returns:
            Human-readable description of the route.
        """
        ...

    def render_all(self, routes: Sequence[RouteResult]) -> str:
        """Render several routes as one report."""
        ...
