"""
Section Router.

Maps the location hash to the active section of the page and keeps the two in
sync. Writing the hash notifies hash-change listeners, which route back into
``navigate_to``; since the hash then already names the section, that second
pass does not write again, so there is no loop.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Protocol, runtime_checkable

from senior_events.rendering.surface import RenderingSurface, nav_target_id

logger = logging.getLogger(__name__)

LocationListener = Callable[[str], None]


def strip_hash(value: str | None) -> str:
    """``"#trends"`` -> ``"trends"``; ``None`` -> ``""``."""
    if not value:
        return ""
    return value[1:] if value.startswith("#") else value


@runtime_checkable
class Location(Protocol):
    """Externally observable location identifier (a URL fragment)."""

    def get(self) -> str: ...

    def set(self, value: str) -> None: ...

    def subscribe(self, listener: LocationListener) -> None: ...


class InMemoryLocation:
    """Location hash kept in memory; records every write."""

    def __init__(self, initial: str = "") -> None:
        self._value = strip_hash(initial)
        self.writes: list[str] = []
        self._listeners: list[LocationListener] = []

    def get(self) -> str:
        return self._value

    def set(self, value: str) -> None:
        value = strip_hash(value)
        self.writes.append(value)
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: LocationListener) -> None:
        self._listeners.append(listener)

    def change_externally(self, value: str) -> None:
        """Simulate the user editing the URL or using back/forward."""
        value = strip_hash(value)
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(value)


class SectionRouter:
    """
    Active-section state machine.

    Unknown section ids are rejected: the previous state is retained and the
    location is left untouched.
    """

    def __init__(
        self,
        sections: Iterable[str],
        location: Location,
        surface: RenderingSurface | None = None,
        default_section: str = "home",
    ) -> None:
        self.sections = list(sections)
        if default_section not in self.sections:
            raise ValueError(f"Default section '{default_section}' not in {self.sections}")
        self.location = location
        self.surface = surface
        self.default_section = default_section
        self.current_section: str | None = None
        self._listening = False

    def is_known(self, section: str) -> bool:
        return section in self.sections

    def start(self) -> str:
        """
        Resolve the initial section from the location and navigate there.

        An empty or unknown hash resolves to the default section. The hash
        listener is registered only on the first call.
        """
        if not self._listening:
            self.location.subscribe(self.handle_location_change)
            self._listening = True
        initial = strip_hash(self.location.get()) or self.default_section
        if not self.is_known(initial):
            logger.warning(
                f"Unknown initial section '{initial}'; using '{self.default_section}'"
            )
            initial = self.default_section
        self.navigate_to(initial)
        return initial

    def handle_location_change(self, value: str) -> None:
        """Hash-change listener."""
        self.navigate_to(strip_hash(value) or self.default_section)

    def navigate_to(self, section: str) -> bool:
        """
        Activate ``section``.

        Returns:
            True if the section is now active, False if it was rejected
        """
        if not self.is_known(section):
            logger.warning(
                f"Ignoring navigation to unknown section '{section}'; "
                f"staying on '{self.current_section}'"
            )
            return False

        self._update_surface(section)
        self.current_section = section

        if strip_hash(self.location.get()) != section:
            self.location.set(section)
        return True

    def _update_surface(self, section: str) -> None:
        if self.surface is None:
            return
        for other in self.sections:
            active = other == section
            if self.surface.has_target(nav_target_id(other)):
                self.surface.set_nav_active(other, active)
            if self.surface.has_target(other):
                self.surface.set_section_active(other, active)
            elif active:
                logger.debug(f"Section '{section}' has no element on the surface")
