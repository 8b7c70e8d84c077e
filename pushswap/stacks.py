"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

OPERATIONS: tuple[str, ...] = (
    "pb",
    "pa",
    "sa",
    "sb",
    "ss",
    "ra",
    "rb",
    "rr",
    "rra",
    "rrb",
    "rrr",
)

_RULE = "       --------------------------------\n"
_TITLE = "       |     Pile A    |     Pile B    |\n"
_EMPTY_CELL = " " * 15


class Stacks:
    """Stacks A and B, each held with its top element first."""

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stacks):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> None:
        if source:
            target.appendleft(source.popleft())

    def sa(self) -> None:
        """Swap the two top elements of A."""
        self._swap(self.a)

    def sb(self) -> None:
        """Swap the two top elements of B."""
        self._swap(self.b)

    def ss(self) -> None:
        """Do sa and sb together."""
        self.sb()
        self.sa()

    def pa(self) -> None:
        """Move the top of B onto A."""
        self._push(self.b, self.a)

    def pb(self) -> None:
        """Move the top of A onto B."""
        self._push(self.a, self.b)

    def ra(self) -> None:
        """Send the top of A to its bottom."""
        self.a.rotate(-1)

    def rb(self) -> None:
        """Send the top of B to its bottom."""
        self.b.rotate(-1)

    def rr(self) -> None:
        """Do ra and rb together."""
        self.rb()
        self.ra()

    def rra(self) -> None:
        """Bring the bottom of A to its top."""
        self.a.rotate(1)

    def rrb(self) -> None:
        """Bring the bottom of B to its top."""
        self.b.rotate(1)

    def rrr(self) -> None:
        """Do rra and rrb together."""
        self.rra()
        self.rrb()

    def apply(self, operation: str) -> None:
        """Run the operation named by ``operation``; raise ValueError if unknown."""
        if operation not in OPERATIONS:
            raise ValueError(f"unknown operation: {operation!r}")
        getattr(self, operation)()

    def is_sorted(self) -> bool:
        """True when B is empty and A ascends from top to bottom."""
        if self.b:
            return False
        values = list(self.a)
        return all(upper <= lower for upper, lower in zip(values, values[1:]))

    def render(self) -> str:
        """Draw both stacks side by side, row 0 being the bottom."""
        a_rows = list(reversed(self.a))
        b_rows = list(reversed(self.b))
        lines = [_RULE, _TITLE, _RULE]
        for row in reversed(range(max(len(a_rows), len(b_rows)))):
            prefix = f"{row:>6} | "
            if row < len(a_rows) and row < len(b_rows):
                lines.append(f"{prefix}{a_rows[row]:>13} | {b_rows[row]:>13} |\n")
            elif row < len(a_rows):
                lines.append(f"{prefix}{a_rows[row]:>13} |{_EMPTY_CELL}|\n")
            else:
                lines.append(f"{row:>6} |{_EMPTY_CELL}| {b_rows[row]:>13} |\n")
        lines.append(_RULE + "\n")
        return "".join(lines)