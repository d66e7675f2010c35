"""Detail modal controller: one open event at a time."""

from __future__ import annotations

import logging

from senior_events.monitoring.logging import with_context
from senior_events.rendering.card_renderer import render_detail
from senior_events.rendering.surface import RenderingSurface
from senior_events.schemas.event import CatalogState, DetailView

logger = logging.getLogger(__name__)

CANCEL_KEY = "Escape"


class ModalController:
    """Open/close state of the event detail modal."""

    def __init__(
        self,
        catalog: CatalogState,
        surface: RenderingSurface,
        modal_id: str = "event-modal",
        dismiss_id: str = "modal-close",
    ) -> None:
        self.catalog = catalog
        self.surface = surface
        self.modal_id = modal_id
        self.dismiss_id = dismiss_id
        self.open_event_key: str | None = None
        self.open_region: str | None = None
        self.current_detail: DetailView | None = None

    @property
    def is_open(self) -> bool:
        return self.open_event_key is not None

    def open(self, event_key: str, region: str | None = None) -> bool:
        """
        Show the detail view of ``event_key``, replacing any open one.

        ``region`` scopes the lookup to the grid the card belongs to. Focus
        moves to the dismiss control. Unknown keys and a missing modal
        element leave the state unchanged.
        """
        log = with_context(logger, region=region, event_key=event_key)
        event = self.catalog.find_event(event_key, region=region)
        if event is None:
            log.warning("Cannot open details: unknown event")
            return False
        if not self.surface.has_target(self.modal_id):
            log.debug(f"Modal '{self.modal_id}' not on surface; not opening")
            return False

        detail = render_detail(event)
        self.surface.render_modal(self.modal_id, detail)
        self.surface.set_modal_visible(self.modal_id, True)
        if self.surface.has_target(self.dismiss_id):
            self.surface.focus(self.dismiss_id)

        self.open_event_key = event_key
        self.open_region = region
        self.current_detail = detail
        return True

    def close(self) -> None:
        """Hide the modal. Closing an already closed modal is a no-op."""
        if self.surface.has_target(self.modal_id):
            self.surface.set_modal_visible(self.modal_id, False)
        self.open_event_key = None
        self.open_region = None
        self.current_detail = None

    def handle_key(self, key: str) -> bool:
        """Global key handler; Escape closes the modal wherever focus is."""
        if key != CANCEL_KEY:
            return False
        self.close()
        return True
