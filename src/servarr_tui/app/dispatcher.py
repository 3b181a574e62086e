"""Block dispatcher — which fetches and local effects a screen needs.

One dispatch cycle for a route:

    1. the block's actions, in declared order
       (the context block's, when the block itself declares none);
    2. the pending confirmation, if armed, fires as one more event
       and marks the app for refresh;
    3. the tick counter resets.

// [LAW:one-source-of-truth] Each domain declares its table once
//   (app/radarr.py, app/sonarr.py); nothing else maps blocks to fetches.
// [LAW:dataflow-not-control-flow] A block without actions is an empty
//   tuple, not a special case.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from servarr_tui.models.route import ActiveBlock, Route

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fetch:
    """Issue ``event``; when ``only_if`` is given, only while it holds."""

    event: Enum
    only_if: Callable[[AppState], bool] | None = None


Effect = Callable[["AppState"], None]
Action = Union[Fetch, Effect]


class BlockDispatcher:
    def __init__(self, data_attr: str, table: Mapping[ActiveBlock, Sequence[Action]]):
        self.data_attr = data_attr
        self._table: dict[ActiveBlock, tuple[Action, ...]] = {
            block: tuple(actions) for block, actions in table.items()
        }

    def actions_for(self, route: Route) -> tuple[Action, ...]:
        actions = self._table.get(route.block, ())
        if not actions and route.context is not None:
            actions = self._table.get(route.context, ())
        return actions

    def dispatch(self, app: AppState, route: Route) -> None:
        actions = self.actions_for(route)
        if not actions:
            logger.debug("no fetches for %s", route)
        for action in actions:
            if isinstance(action, Fetch):
                if action.only_if is None or action.only_if(app):
                    app.dispatch_network_event(action.event)
            else:
                action(app)
        self.check_for_prompt_action(app)
        app.reset_tick_count()

    def check_for_prompt_action(self, app: AppState) -> None:
        action = getattr(app, self.data_attr).pending.take()
        if action is None:
            return
        logger.debug("confirmed %s", action)
        app.dispatch_network_event(action)
        app.should_refresh = True
