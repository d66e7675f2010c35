"""
Rendering surface contract.

The catalog core never touches markup. It pushes view models and visibility
decisions to a ``RenderingSurface`` and subscribes to the surface's user
events (input changed, item activated, key pressed, ...).

``InMemorySurface`` is the reference implementation: it keeps everything it
is told in plain attributes, which makes the core testable without a browser
and usable headless.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from enum import Enum
from typing import Callable, Iterable, Protocol, runtime_checkable

from senior_events.exceptions import MissingSurfaceTarget
from senior_events.schemas.event import DetailView, SummaryView, TrendCategory

logger = logging.getLogger(__name__)

SurfaceHandler = Callable[..., None]


class SurfaceEvent(str, Enum):
    """User events emitted by the surface, with their keyword payloads."""

    INPUT_CHANGED = "input_changed"  # value=
    ITEM_ACTIVATED = "item_activated"  # event_key=, region=
    ITEM_KEY = "item_key"  # event_key=, key=, region=
    KEY_PRESSED = "key_pressed"  # key=
    NAV_CLICKED = "nav_clicked"  # section=
    DISMISS_CLICKED = "dismiss_clicked"
    BACKDROP_CLICKED = "backdrop_clicked"
    COLLAPSIBLE_TOGGLED = "collapsible_toggled"  # panel_id=


def nav_target_id(section: str) -> str:
    """Target id of the navigation control for ``section``."""
    return f"nav-{section}"


@runtime_checkable
class RenderingSurface(Protocol):
    """What the core needs from whatever draws the page."""

    def has_target(self, target_id: str) -> bool: ...

    def render_grid(self, grid_id: str, cards: list[SummaryView]) -> None: ...

    def set_card_visible(self, grid_id: str, event_key: str, visible: bool) -> None: ...

    def set_empty_state(self, grid_id: str, shown: bool) -> None: ...

    def render_trends(self, container_id: str, categories: list[TrendCategory]) -> None: ...

    def render_modal(self, modal_id: str, detail: DetailView) -> None: ...

    def set_modal_visible(self, modal_id: str, visible: bool) -> None: ...

    def focus(self, target_id: str) -> None: ...

    def set_section_active(self, section: str, active: bool) -> None: ...

    def set_nav_active(self, section: str, active: bool) -> None: ...

    def set_collapsible(self, panel_id: str, expanded: bool, icon: str) -> None: ...

    def hide_loading(self, loading_id: str) -> None: ...

    def subscribe(self, event: SurfaceEvent, handler: SurfaceHandler) -> None: ...


class InMemorySurface:
    """
    Surface that records state instead of drawing it.

    Args:
        targets: Ids of the elements present on the page. ``None`` means every
            target exists; otherwise operations on unknown targets raise
            MissingSurfaceTarget.
    """

    def __init__(self, targets: Iterable[str] | None = None) -> None:
        self.targets: set[str] | None = set(targets) if targets is not None else None
        self.grids: dict[str, list[SummaryView]] = {}
        self.hidden_cards: dict[str, set[str]] = defaultdict(set)
        self.empty_states: set[str] = set()
        self.trends: dict[str, list[TrendCategory]] = {}
        self.modal_content: dict[str, DetailView] = {}
        self.visible_modals: set[str] = set()
        self.focused: str | None = None
        self.active_sections: set[str] = set()
        self.active_navs: set[str] = set()
        self.collapsibles: dict[str, tuple[bool, str]] = {}
        self.loading_hidden: set[str] = set()
        self._handlers: dict[SurfaceEvent, list[SurfaceHandler]] = defaultdict(list)

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------

    def has_target(self, target_id: str) -> bool:
        return self.targets is None or target_id in self.targets

    def _require(self, target_id: str) -> None:
        if not self.has_target(target_id):
            raise MissingSurfaceTarget(target_id)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_grid(self, grid_id: str, cards: list[SummaryView]) -> None:
        self._require(grid_id)
        self.grids[grid_id] = list(cards)
        self.hidden_cards[grid_id] = set()
        self.empty_states.discard(grid_id)

    def set_card_visible(self, grid_id: str, event_key: str, visible: bool) -> None:
        self._require(grid_id)
        if visible:
            self.hidden_cards[grid_id].discard(event_key)
        else:
            self.hidden_cards[grid_id].add(event_key)

    def set_empty_state(self, grid_id: str, shown: bool) -> None:
        self._require(grid_id)
        if shown:
            self.empty_states.add(grid_id)
        else:
            self.empty_states.discard(grid_id)

    def render_trends(self, container_id: str, categories: list[TrendCategory]) -> None:
        self._require(container_id)
        self.trends[container_id] = list(categories)

    def render_modal(self, modal_id: str, detail: DetailView) -> None:
        self._require(modal_id)
        self.modal_content[modal_id] = detail

    def set_modal_visible(self, modal_id: str, visible: bool) -> None:
        self._require(modal_id)
        if visible:
            self.visible_modals.add(modal_id)
        else:
            self.visible_modals.discard(modal_id)

    def focus(self, target_id: str) -> None:
        self._require(target_id)
        self.focused = target_id

    def set_section_active(self, section: str, active: bool) -> None:
        self._require(section)
        if active:
            self.active_sections.add(section)
        else:
            self.active_sections.discard(section)

    def set_nav_active(self, section: str, active: bool) -> None:
        self._require(nav_target_id(section))
        if active:
            self.active_navs.add(section)
        else:
            self.active_navs.discard(section)

    def set_collapsible(self, panel_id: str, expanded: bool, icon: str) -> None:
        self._require(panel_id)
        self.collapsibles[panel_id] = (expanded, icon)

    def hide_loading(self, loading_id: str) -> None:
        self._require(loading_id)
        self.loading_hidden.add(loading_id)

    # ------------------------------------------------------------------
    # Read helpers
    # ------------------------------------------------------------------

    def visible_cards(self, grid_id: str) -> list[str]:
        """Keys of the cards currently shown in ``grid_id``, in grid order."""
        hidden = self.hidden_cards.get(grid_id, set())
        return [card.key for card in self.grids.get(grid_id, []) if card.key not in hidden]

    def is_modal_open(self, modal_id: str) -> bool:
        return modal_id in self.visible_modals

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe(self, event: SurfaceEvent, handler: SurfaceHandler) -> None:
        self._handlers[event].append(handler)

    def emit(self, event: SurfaceEvent, **payload) -> None:
        """Dispatch a user event to every subscriber, in subscription order."""
        handlers = self._handlers.get(event, [])
        if not handlers:
            logger.debug(f"No subscriber for surface event {event.value}")
        for handler in list(handlers):
            handler(**payload)
