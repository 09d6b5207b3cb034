"""Input buffering between host events and simulation ticks.

Key events arrive whenever the host delivers them; the simulation only looks
at input once per tick through :meth:`InputBuffer.consume`. Keys are opaque
hashables here, the adapter decides which host keys bind to which direction.
"""

from __future__ import annotations

import enum
from typing import Hashable, Mapping, NamedTuple


class Move(enum.Enum):
    NONE = 0
    LEFT = -1
    RIGHT = 1


class FrameInput(NamedTuple):
    jump: bool = False
    move: Move = Move.NONE


class InputBuffer:
    """Set of currently held keys plus a jump edge trigger."""

    def __init__(self, bindings: Mapping[Hashable, Move] | None = None) -> None:
        self.bindings: dict[Hashable, Move] = dict(bindings or {Move.LEFT: Move.LEFT, Move.RIGHT: Move.RIGHT})
        self.held: set[Hashable] = set()
        self.jump_requested = False

    def press(self, key: Hashable) -> None:
        self.held.add(key)

    def release(self, key: Hashable) -> None:
        self.held.discard(key)

    def request_jump(self) -> None:
        self.jump_requested = True

    def cancel_jump(self) -> None:
        self.jump_requested = False

    def clear(self) -> None:
        self.held.clear()
        self.jump_requested = False

    def current_move(self) -> Move:
        directions = {self.bindings.get(key, Move.NONE) for key in self.held}
        left = Move.LEFT in directions
        right = Move.RIGHT in directions
        if left and not right:
            return Move.LEFT
        if right and not left:
            return Move.RIGHT
        return Move.NONE

    def consume(self) -> FrameInput:
        """Sample the input for one tick; a jump request fires only once."""
        frame = FrameInput(jump=self.jump_requested, move=self.current_move())
        self.jump_requested = False
        return frame
