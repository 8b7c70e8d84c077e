"""Produce a sequence of operations that sorts stack A by median splitting."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import islice

from .parsing import InvalidInputError, gather_tokens, parse_stack
from .stacks import Stacks


@dataclass(eq=False)
class _Chunk:
    """A run of elements that were moved together; ``moves`` is its size."""

    moves: int = 0


def sorted_target(values: Iterable[int]) -> list[int]:
    """Return the values in their final order, top of stack A first."""
    return sorted(values)


class _Solver:
    """Drive a Stacks instance to its sorted state, recording every step."""

    def __init__(self, stacks: Stacks) -> None:
        self.stacks = stacks
        # Sorted values indexed from the bottom of A: index 0 is the largest.
        self.target: list[int] = sorted_target(stacks.a)[::-1]
        self.chunks: list[_Chunk] = [_Chunk()]
        self.operations: list[str] = []

    def run(self) -> list[str]:
        self._split_initial()
        self._merge_back()
        return self.operations

    def _do(self, *operations: str) -> None:
        for operation in operations:
            self.stacks.apply(operation)
            self.operations.append(operation)

    def _a_settled(self) -> bool:
        """True when A, read from the bottom, holds the largest values in place."""
        bottom_up = list(reversed(self.stacks.a))
        return bottom_up == self.target[: len(bottom_up)]

    def _b_settled(self, count: int) -> bool:
        """True when the top ``count`` of B follow on from A in order."""
        start = len(self.stacks.a)
        top = list(islice(self.stacks.b, count))
        return top == self.target[start : start + count]

    def _top_three(self, stack: Sequence[int]) -> tuple[int, int, int]:
        return stack[0], stack[1], stack[2]

    # First pass: halve A around its median until three elements remain.

    def _split_initial(self) -> None:
        chunk = self.chunks[0]
        while not self._a_settled() and len(self.stacks.a) >= 4:
            pivot = self.target[(len(self.stacks.a) - 1) // 2]
            if chunk.moves:
                chunk = _Chunk()
                self.chunks.append(chunk)
            chunk.moves += self._partition_a(pivot)
        if not self._a_settled():
            self._sort_small_a()

    def _partition_a(self, pivot: int) -> int:
        pushed = 0
        for _ in range(len(self.stacks.a)):
            if self.stacks.a[0] < pivot:
                self._do("pb")
                pushed += 1
            else:
                self._do("ra")
        return pushed

    def _sort_small_a(self) -> None:
        if len(self.stacks.a) == 2:
            self._do("sa")
            return
        x0, x1, x2 = self._top_three(self.stacks.a)
        if x0 < x1 and x0 > x2 and x1 > x2:
            self._do("rra")
        elif x0 > x1 and x0 > x2 and x1 > x2:
            self._do("ra", "sa")
        elif x0 > x1 and x0 < x2 and x1 < x2:
            self._do("sa")
        elif x0 > x1 and x0 > x2 and x1 < x2:
            self._do("ra")
        else:
            self._do("sa", "ra")

    # Second pass: bring the chunks of B back, splitting large ones again.

    def _merge_back(self) -> None:
        head = self.chunks[0]
        while not (len(self.stacks.b) == 1 and self._a_settled()):
            current = self.chunks[-1]
            if current.moves <= 3:
                self._order_b(current)
                if len(self.chunks) > 1:
                    self.chunks.pop()
                    current = self.chunks[-1]
                else:
                    current.moves = 0
            else:
                self._many_moves(current)
            if current is head and current.moves == 0:
                return

    def _many_moves(self, current: _Chunk) -> None:
        self._split_b(current)
        while True:
            last = self.chunks[-1]
            if last.moves <= 3:
                if not self._a_settled():
                    self._order_a(last)
                if len(self.chunks) > 1:
                    self.chunks.pop()
                else:
                    last.moves = 0
                return
            index = last.moves // 2 + (len(self.stacks.a) - 1 - last.moves) + 1
            self._split_a(last, self.target[index])

    def _split_b(self, current: _Chunk) -> None:
        moves = current.moves
        pivot = self.target[moves // 2 + len(self.stacks.a)]
        back = _Chunk()
        self.chunks.append(back)
        current.moves = 0
        rotated = 0
        for _ in range(moves):
            if self.stacks.b[0] > pivot:
                self._do("pa")
                back.moves += 1
            else:
                self._do("rb")
                rotated += 1
                current.moves += 1
        self._do(*["rrb"] * rotated)

    def _split_a(self, last: _Chunk, pivot: int) -> None:
        pushed_chunk = _Chunk()
        self.chunks.insert(len(self.chunks) - 1, pushed_chunk)
        pushed = kept = 0
        for _ in range(last.moves):
            if self.stacks.a[0] < pivot:
                self._do("pb")
                pushed += 1
            else:
                self._do("ra")
                kept += 1
        self._do(*["rra"] * kept)
        last.moves = kept
        pushed_chunk.moves = pushed

    # Small chunks sorted in place.

    def _order_a(self, chunk: _Chunk) -> None:
        if chunk.moves == 2:
            if self.stacks.a[0] > self.stacks.a[1]:
                self._do("sa")
        elif chunk.moves == 3 and not self._a_settled():
            self._order_three_a()

    def _order_three_a(self) -> None:
        if self._a_settled():
            return
        x0, x1, x2 = self._top_three(self.stacks.a)
        if x0 < x1 and x0 > x2 and x1 > x2:
            self._do("ra", "sa", "rra", "sa")
        elif x0 > x1 and x0 > x2 and x1 > x2:
            self._do("sa", "ra", "sa", "rra", "sa")
        elif x0 > x1 and x0 < x2 and x1 < x2:
            self._do("sa")
        elif x0 > x1 and x0 > x2 and x1 < x2:
            self._do("sa", "ra", "sa", "rra")
        else:
            self._do("ra", "sa", "rra")

    def _order_b(self, chunk: _Chunk) -> None:
        count = chunk.moves
        if self._b_settled(count):
            self._do(*["pa"] * count)
            return
        if count == 1:
            self._do("pa")
        elif count == 2:
            if self.stacks.b[0] > self.stacks.b[1]:
                self._do("pa", "pa")
            else:
                self._do("sb", "pa", "pa")
        elif count == 3:
            self._order_three_b()

    def _order_three_b(self) -> None:
        y0, y1, y2 = self._top_three(self.stacks.b)
        if y0 < y1 and y0 > y2 and y1 > y2:
            self._do("sb", "pa", "pa", "pa")
        elif y0 > y1 and y0 > y2 and y1 > y2:
            self._do("pa", "pa", "pa")
        elif y0 > y1 and y0 < y2 and y1 < y2:
            self._do("rb", "sb", "pa", "rrb", "pa", "pa")
        elif y0 > y1 and y0 > y2 and y1 < y2:
            self._do("pa", "sb", "pa", "pa")
        elif y0 < y1 and y1 < y2 and y0 < y2:
            self._do("rb", "sb", "pa", "pa", "rrb", "pa")
        else:
            self._do("sb", "pa", "sb", "pa", "pa")


def solve(stacks: Stacks) -> list[str]:
    """Sort ``stacks`` in place and return the operations used, in order.

    Stack B must start empty.
    """
    if stacks.b:
        raise ValueError("stack B must start empty")
    return _Solver(stacks).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_stack(gather_tokens(args))
    except InvalidInputError:
        sys.stdout.write("Error\n")
        return 1
    operations = solve(Stacks(values))
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 1


if __name__ == "__main__":
    sys.exit(main())