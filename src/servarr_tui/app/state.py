"""AppState — the one mutable value behind the whole UI.

Owned by the Textual event loop. Key handlers, the tick and network results
all mutate it from that thread, one event at a time; the network worker only
ever sees the immutable RequestProps built here.

Polling policy (``on_tick``):

    first render      → first-render events, then a dispatch cycle
    routing / poll    → dispatch cycle, then the metadata events
    should_refresh    → dispatch cycle

// [LAW:single-enforcer] Navigation flags (is_routing) are set only by the
//   push/pop helpers here; handlers never touch NavigationStack directly.
"""

from __future__ import annotations

import logging
from enum import Enum

from servarr_tui.app.domain import ServarrDomain
from servarr_tui.app.radarr import RADARR
from servarr_tui.app.sonarr import SONARR
from servarr_tui.models.route import ActiveBlock, NavigationStack, Route
from servarr_tui.models.servarr_data.radarr_data import RadarrData
from servarr_tui.models.servarr_data.servarr_data import ServarrData
from servarr_tui.models.servarr_data.sonarr_data import SonarrData
from servarr_tui.models.tabs import TabRoute, TabState
from servarr_tui.models.text import HorizontallyScrollableText
from servarr_tui.network.client import NetworkError, NetworkOutcome, RequestProps
from servarr_tui.settings import Config, ServerConfig

logger = logging.getLogger(__name__)

DOMAINS: tuple[ServarrDomain, ...] = (RADARR, SONARR)
_BY_FAMILY = {domain.blocks: domain for domain in DOMAINS}
_BY_EVENTS = {domain.events: domain for domain in DOMAINS}

# Errors raised while turning a payload into models.
PARSE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def domain_for_route(route: Route) -> ServarrDomain:
    return _BY_FAMILY[route.family]


def domain_for_event(event: Enum) -> ServarrDomain:
    return _BY_EVENTS[type(event)]


class AppState:
    def __init__(self, config: Config | None = None, network=None):
        self.config = config or Config.from_dict({})
        self.network = network

        self.radarr_data = RadarrData()
        self.sonarr_data = SonarrData()

        self.domains = [d for d in DOMAINS if self.server_for(d) is not None]
        self.server_tabs = TabState(
            [TabRoute.for_block(d.title, d.default_block) for d in self.domains]
        )
        self.navigation = NavigationStack(self.server_tabs.get_active_route())

        self.error = HorizontallyScrollableText()
        self.is_loading = False
        self.is_routing = False
        self.should_refresh = False
        self.is_first_render = True
        self.should_ignore_quit_key = False
        self.should_quit = False
        self.tick_count = 0
        self.tick_until_poll = self.config.tick_until_poll

    # ─── Lookups ─────────────────────────────────────────────────────────

    def server_for(self, domain: ServarrDomain) -> ServerConfig | None:
        return getattr(self.config, domain.name)

    def get_current_route(self) -> Route:
        return self.navigation.current

    @property
    def domain(self) -> ServarrDomain:
        return domain_for_route(self.navigation.current)

    def data_for(self, domain: ServarrDomain) -> ServarrData:
        return domain.data(self)

    # ─── Navigation ──────────────────────────────────────────────────────

    def push_navigation_stack(self, route: Route | ActiveBlock) -> None:
        self.navigation.push(route)
        self.is_routing = True

    def pop_navigation_stack(self) -> None:
        self.navigation.pop()
        self.is_routing = True

    def pop_and_push_navigation_stack(self, route: Route | ActiveBlock) -> None:
        self.navigation.pop_and_push(route)
        self.is_routing = True

    def switch_server_tab(self, forward: bool = True) -> None:
        """Move to the next/previous server; its screens start from the default route."""
        if len(self.server_tabs) <= 1:
            return
        outgoing = self.data_for(self.domain)
        outgoing.reset_search()
        outgoing.reset_filter()
        if forward:
            self.server_tabs.next()
        else:
            self.server_tabs.previous()
        incoming = self.data_for(domain_for_route(self.server_tabs.get_active_route()))
        incoming.main_tabs.set_index(0)
        self.navigation.reset(self.server_tabs.get_active_route())
        self.should_ignore_quit_key = False
        self.clear_error()
        self.is_first_render = True
        self.is_routing = True
        logger.info("switched to %s", self.server_tabs.active_tab.title)

    # ─── Errors ──────────────────────────────────────────────────────────

    def handle_error(self, message: str) -> None:
        if self.error.text != message:
            self.error = HorizontallyScrollableText(message)

    def clear_error(self) -> None:
        self.error = HorizontallyScrollableText()

    # ─── Network ─────────────────────────────────────────────────────────

    def reset_tick_count(self) -> None:
        self.tick_count = 0

    def dispatch_network_event(self, event: Enum) -> None:
        domain = domain_for_event(event)
        server = self.server_for(domain)
        if server is None or self.network is None:
            logger.debug("skipping %s: no %s server", event.name, domain.name)
            return
        spec = domain.requests[event]
        request = spec.build(self)
        if request is None:
            logger.debug("skipping %s: nothing selected", event.name)
            return
        self.is_loading = True
        self.network.submit(
            RequestProps(event, server, spec.method, request.path, request.query, request.body)
        )

    def apply_network_result(self, outcome: NetworkOutcome) -> None:
        """Land one worker outcome in state. Never raises for bad payloads."""
        spec = domain_for_event(outcome.event).requests[outcome.event]
        try:
            if isinstance(outcome, NetworkError):
                if spec.on_error is not None:
                    spec.on_error(self, outcome)
                else:
                    self.handle_error(outcome.message)
                return
            try:
                spec.apply(self, outcome.payload)
            except PARSE_ERRORS as e:
                logger.error("failed to apply %s: %r", outcome.event.name, e)
                self.handle_error(f"Failed to parse response! {e}")
                return
            if spec.method != "GET":
                self.should_refresh = True
        finally:
            self.is_loading = False

    # ─── Tick ────────────────────────────────────────────────────────────

    def on_tick(self) -> None:
        domain = self.domain
        route = self.get_current_route()
        poll_due = self.tick_count % self.tick_until_poll == 0

        if self.is_first_render:
            self.is_first_render = False
            self.is_routing = False
            self.should_refresh = False
            for event in domain.first_render_events:
                self.dispatch_network_event(event)
            domain.dispatcher.dispatch(self, route)
        elif self.is_routing or poll_due:
            self.is_routing = False
            self.should_refresh = False
            domain.dispatcher.dispatch(self, route)
            for event in domain.metadata_events:
                self.dispatch_network_event(event)
        elif self.should_refresh:
            self.should_refresh = False
            domain.dispatcher.dispatch(self, route)

        self.tick_count += 1
