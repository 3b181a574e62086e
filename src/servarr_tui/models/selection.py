"""Wizard step sequences and the cursor that walks them.

A StepSequence is pure data: ordered steps, each a short row of alternative
blocks (one column for simple forms; two for the edit-indexer matrix, where
the row holds the left- and right-hand fields). Lookups by block go row-wise;
BlockSelectionState keeps an explicit (x, y) cursor for the form on screen.

// [LAW:dataflow-not-control-flow] Unknown blocks resolve to the first step.
//   This is a reset-to-start, logged at WARNING so a miswired handler shows
//   up in the log instead of silently restarting a form.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from servarr_tui.models.route import ActiveBlock

logger = logging.getLogger(__name__)


class StepSequence:
    __slots__ = ("name", "steps")

    def __init__(self, name: str, steps: Sequence[Sequence[ActiveBlock]]):
        if not steps or any(not row for row in steps):
            raise ValueError(f"{name}: every step needs at least one block")
        self.name = name
        self.steps: tuple[tuple[ActiveBlock, ...], ...] = tuple(tuple(row) for row in steps)

    @classmethod
    def single_column(cls, name: str, blocks: Sequence[ActiveBlock]) -> StepSequence:
        return cls(name, [(block,) for block in blocks])

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[tuple[ActiveBlock, ...]]:
        return iter(self.steps)

    def __contains__(self, block: object) -> bool:
        return any(block in row for row in self.steps)

    @property
    def first(self) -> ActiveBlock:
        return self.steps[0][0]

    @property
    def blocks(self) -> frozenset[ActiveBlock]:
        return frozenset(block for row in self.steps for block in row)

    def locate(self, block: ActiveBlock, last: bool = False) -> tuple[int, int] | None:
        """(row, column) of ``block`` in its first row, or its last row with ``last``."""
        rows = list(enumerate(self.steps))
        for y, row in reversed(rows) if last else rows:
            for x, candidate in enumerate(row):
                if candidate is block:
                    return y, x
        return None

    def block_at(self, row: int, column: int) -> ActiveBlock:
        step = self.steps[row % len(self.steps)]
        return step[min(column, len(step) - 1)]

    def next_step(self, block: ActiveBlock) -> ActiveBlock:
        return self._step(block, 1)

    def previous_step(self, block: ActiveBlock) -> ActiveBlock:
        return self._step(block, -1)

    def _step(self, block: ActiveBlock, delta: int) -> ActiveBlock:
        # A block repeated down the rows steps forward from its last row.
        position = self.locate(block, last=delta > 0)
        if position is None:
            logger.warning("%s: %s is not a step, restarting at %s", self.name, block, self.first)
            return self.first
        row, column = position
        return self.block_at(row + delta, column)


class BlockSelectionState:
    """(x, y) cursor over a StepSequence; y picks the step, x the alternative."""

    __slots__ = ("sequence", "x", "y")

    def __init__(self, sequence: StepSequence, x: int = 0, y: int = 0):
        self.sequence = sequence
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"BlockSelectionState({self.sequence.name!r}, x={self.x}, y={self.y})"

    def get_active_block(self) -> ActiveBlock:
        return self.sequence.block_at(self.y, self.x)

    def _row_len(self) -> int:
        return len(self.sequence.steps[self.y])

    def down(self) -> None:
        self.y = (self.y + 1) % len(self.sequence)
        self.x = min(self.x, self._row_len() - 1)

    def up(self) -> None:
        self.y = (self.y - 1) % len(self.sequence)
        self.x = min(self.x, self._row_len() - 1)

    def left(self) -> None:
        self.x = (self.x - 1) % self._row_len()

    def right(self) -> None:
        self.x = (self.x + 1) % self._row_len()

    def set_index(self, x: int, y: int) -> None:
        self.y = y % len(self.sequence)
        self.x = max(0, min(x, self._row_len() - 1))

    def select_block(self, block: ActiveBlock) -> bool:
        position = self.sequence.locate(block)
        if position is None:
            return False
        self.y, self.x = position
        return True
