"""Routes and the navigation stack.

A Route is one entry of modal history: the block being shown plus an optional
context block from the same family. The context tells a shared popup what it
sits on top of (e.g. the overview popup drawn over collection details), so
nesting is fixed at depth 2: primary + context.

// [LAW:single-enforcer] NavigationStack is the only writer of route history.
// [LAW:dataflow-not-control-flow] pop() on the root is a no-op, not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class ActiveBlock(Enum):
    """Base for every per-domain block enumeration."""


@dataclass(frozen=True)
class Route:
    block: ActiveBlock
    context: ActiveBlock | None = None

    def __post_init__(self) -> None:
        if self.context is not None and type(self.context) is not type(self.block):
            raise TypeError(
                f"context {self.context!r} is not in the same block family as {self.block!r}"
            )

    @property
    def family(self) -> type[ActiveBlock]:
        return type(self.block)

    def with_context(self, context: ActiveBlock | None) -> Route:
        return Route(self.block, context)


def as_route(target: Route | ActiveBlock) -> Route:
    """Accept a bare block wherever a route is expected."""
    if isinstance(target, Route):
        return target
    return Route(target)


class NavigationStack:
    """Last-in-is-current history of routes, never empty."""

    __slots__ = ("_routes",)

    def __init__(self, root: Route | ActiveBlock):
        self._routes: list[Route] = [as_route(root)]

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __repr__(self) -> str:
        return f"NavigationStack({self._routes!r})"

    @property
    def current(self) -> Route:
        return self._routes[-1]

    @property
    def root(self) -> Route:
        return self._routes[0]

    def push(self, route: Route | ActiveBlock) -> None:
        route = as_route(route)
        logger.debug("push %s", route)
        self._routes.append(route)

    def pop(self) -> Route | None:
        """Drop the top route. The root stays put."""
        if len(self._routes) <= 1:
            return None
        route = self._routes.pop()
        logger.debug("pop %s", route)
        return route

    def pop_and_push(self, route: Route | ActiveBlock) -> None:
        """Replace the top in one step; history beneath is untouched.

        On a depth-1 stack this replaces the root.
        """
        route = as_route(route)
        logger.debug("replace %s -> %s", self._routes[-1], route)
        self._routes[-1] = route

    def reset(self, root: Route | ActiveBlock) -> None:
        self._routes = [as_route(root)]

    def contains(self, block: ActiveBlock) -> bool:
        return any(route.block is block for route in self._routes)
