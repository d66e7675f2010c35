"""
senior_events.app.

Application entrypoint for the events catalog.

Responsibilities
----------------
• Catalog loading (once per session)
• Rendering the region grids and the trends panel
• Wiring surface events to the filter, router, modal and collapsibles

All session state lives in one ``ApplicationState`` built by ``start()``;
there is no module-level application object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from senior_events.catalog.store import CatalogStore
from senior_events.configs.config import Config, UIConfig
from senior_events.configs.settings import Settings, get_settings
from senior_events.filtering.filter_engine import FilterEngine, FilterState
from senior_events.ingestion.search_index import SearchIndex
from senior_events.monitoring.logging import LoggingOptions, configure_logging
from senior_events.rendering.card_renderer import render_summary, render_trends
from senior_events.rendering.surface import RenderingSurface, SurfaceEvent
from senior_events.routing.section_router import Location, SectionRouter
from senior_events.schemas.event import CatalogState
from senior_events.ui.collapsible import CollapsibleController
from senior_events.ui.modal import ModalController

logger = logging.getLogger(__name__)

ACTIVATION_KEYS = ("Enter", " ")


@dataclass
class ApplicationState:
    """Everything the session holds after startup."""

    catalog: CatalogState
    index: SearchIndex
    filter_engine: FilterEngine
    router: SectionRouter
    modal: ModalController
    collapsibles: CollapsibleController
    filter_state: FilterState = field(default_factory=FilterState)


class EventsCatalogApp:
    """Connects the catalog core to a rendering surface and a location."""

    def __init__(
        self,
        surface: RenderingSurface,
        location: Location,
        settings: Settings | None = None,
        ui_config: UIConfig | None = None,
        store: CatalogStore | None = None,
    ) -> None:
        self.surface = surface
        self.location = location
        self.settings = settings or get_settings()
        self.ui_config = ui_config or Config.load_ui_config()
        self.store = store or CatalogStore(self.settings, self.ui_config)
        self.state: ApplicationState | None = None

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    async def start(self) -> ApplicationState:
        """
        Load the catalog and bring the page up.

        Calling ``start()`` again returns the existing state.
        """
        if self.state is not None:
            return self.state

        catalog = await self.store.load()
        index = SearchIndex.build(catalog.regions)
        grid_ids = {region_id: r.grid_id for region_id, r in self.ui_config.regions.items()}

        self.state = ApplicationState(
            catalog=catalog,
            index=index,
            filter_engine=FilterEngine(index, grid_ids, self.surface),
            router=SectionRouter(
                self.ui_config.sections,
                self.location,
                self.surface,
                default_section=self.ui_config.default_section,
            ),
            modal=ModalController(
                catalog,
                self.surface,
                modal_id=self.ui_config.modal.modal_id,
                dismiss_id=self.ui_config.modal.dismiss_id,
            ),
            collapsibles=CollapsibleController(
                self.surface,
                open_icon=self.ui_config.collapsible.open_icon,
                closed_icon=self.ui_config.collapsible.closed_icon,
            ),
        )

        self._subscribe()
        self.state.router.start()
        self.render_grids()
        self.render_trends()
        self._hide_loading()

        logger.info(
            f"Catalog page ready (source={catalog.source.value}, "
            f"events={catalog.total_events}, section={self.state.router.current_section})"
        )
        return self.state

    def _subscribe(self) -> None:
        handlers = {
            SurfaceEvent.INPUT_CHANGED: self.on_input_changed,
            SurfaceEvent.ITEM_ACTIVATED: self.on_item_activated,
            SurfaceEvent.ITEM_KEY: self.on_item_key,
            SurfaceEvent.KEY_PRESSED: self.on_key_pressed,
            SurfaceEvent.NAV_CLICKED: self.on_nav_clicked,
            SurfaceEvent.DISMISS_CLICKED: self.on_dismiss,
            SurfaceEvent.BACKDROP_CLICKED: self.on_dismiss,
            SurfaceEvent.COLLAPSIBLE_TOGGLED: self.on_collapsible_toggled,
        }
        for event, handler in handlers.items():
            self.surface.subscribe(event, handler)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_grids(self) -> None:
        """Render one card per event into each region grid."""
        for region_id, region in self.ui_config.regions.items():
            if not self.surface.has_target(region.grid_id):
                logger.debug(f"Grid '{region.grid_id}' not on surface; skipping '{region_id}'")
                continue
            events = self.state.catalog.regions.get(region_id, [])
            self.surface.render_grid(
                region.grid_id, [render_summary(e, region=region_id) for e in events]
            )

    def render_trends(self) -> None:
        """Render the trends panel when there are trends and a container."""
        trends = self.state.catalog.trends
        container_id = self.ui_config.trends.container_id
        if not trends or not self.surface.has_target(container_id):
            return
        self.surface.render_trends(
            container_id, render_trends(trends, self.ui_config.trends.titles)
        )

    def _hide_loading(self) -> None:
        if self.surface.has_target(self.ui_config.loading_id):
            self.surface.hide_loading(self.ui_config.loading_id)

    # ------------------------------------------------------------------
    # Surface event handlers
    # ------------------------------------------------------------------

    def on_input_changed(self, value: str = "") -> None:
        query = self.state.filter_state.capture(value)
        self.state.filter_engine.apply_regions(query)

    def on_item_activated(self, event_key: str, region: str | None = None) -> None:
        self.state.modal.open(event_key, region=region)

    def on_item_key(self, event_key: str, key: str, region: str | None = None) -> None:
        if key in ACTIVATION_KEYS:
            self.state.modal.open(event_key, region=region)

    def on_key_pressed(self, key: str) -> None:
        self.state.modal.handle_key(key)

    def on_nav_clicked(self, section: str) -> None:
        self.state.router.navigate_to(section)

    def on_dismiss(self) -> None:
        self.state.modal.close()

    def on_collapsible_toggled(self, panel_id: str) -> None:
        self.state.collapsibles.toggle(panel_id)


async def bootstrap(
    surface: RenderingSurface,
    location: Location,
    settings: Settings | None = None,
) -> EventsCatalogApp:
    """Configure logging from settings, then create and start the app."""
    settings = settings or get_settings()
    configure_logging(LoggingOptions(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON))
    app = EventsCatalogApp(surface, location, settings=settings)
    await app.start()
    return app
