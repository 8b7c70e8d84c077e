"""Check that a list of operations read from input sorts the given stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .parsing import InvalidInputError, gather_tokens, parse_stack
from .stacks import Stacks

_VISUAL_FLAG = "-v"


def read_instructions(stream: Iterable[str]) -> Iterator[str]:
    """Yield each line of ``stream`` without its newline.

    A last line with no newline after it is still yielded; nothing is
    yielded for the end of the stream after a final newline.
    """
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


def run_checker(
    stacks: Stacks,
    instructions: Iterable[str],
    visual: bool,
    out: TextIO,
) -> bool:
    """Apply ``instructions`` to ``stacks`` and write "OK" or "KO" to ``out``.

    With ``visual`` set, both stacks are drawn to ``out`` after every
    operation. Returns True when the stacks end up sorted. Raises
    ValueError at the first unknown instruction; no instruction after it
    is read and no verdict is written.
    """
    for instruction in instructions:
        stacks.apply(instruction)
        if visual:
            out.write(stacks.render())
    if stacks.is_sorted():
        out.write("OK\n")
        return True
    out.write("KO\n")
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and judge them against the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    visual = args[0] == _VISUAL_FLAG
    tokens = gather_tokens(args[1:] if visual else args)
    try:
        values = parse_stack(tokens)
    except InvalidInputError:
        sys.stdout.write("Error\n")
        return 0
    try:
        run_checker(Stacks(values), read_instructions(sys.stdin), visual, sys.stdout)
    except ValueError:
        sys.stdout.write("Error\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())