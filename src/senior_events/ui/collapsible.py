"""Collapsible panel state."""

from __future__ import annotations

import logging

from senior_events.rendering.surface import RenderingSurface

logger = logging.getLogger(__name__)


class CollapsibleController:
    """Tracks which panels are expanded and mirrors it on the surface."""

    def __init__(
        self,
        surface: RenderingSurface,
        open_icon: str = "−",
        closed_icon: str = "+",
    ) -> None:
        self.surface = surface
        self.open_icon = open_icon
        self.closed_icon = closed_icon
        self.open_panels: set[str] = set()

    def is_open(self, panel_id: str) -> bool:
        return panel_id in self.open_panels

    def toggle(self, panel_id: str) -> bool | None:
        """
        Flip ``panel_id`` between collapsed and expanded.

        Returns the new expanded state, or None when the panel is not on the
        surface.
        """
        if not self.surface.has_target(panel_id):
            logger.debug(f"Collapsible '{panel_id}' not on surface")
            return None

        expanded = not self.is_open(panel_id)
        if expanded:
            self.open_panels.add(panel_id)
        else:
            self.open_panels.discard(panel_id)

        icon = self.open_icon if expanded else self.closed_icon
        self.surface.set_collapsible(panel_id, expanded, icon)
        return expanded
