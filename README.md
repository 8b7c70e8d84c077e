# pushswap

Sort a list of integers using two stacks and eleven operations, and check
whether a given list of operations sorts it.

## The operations

Stack `a` starts with the numbers, the first number on top. Stack `b` starts
empty.

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

An operation on a stack with too few elements does nothing. The stacks are
sorted when `b` is empty and `a` is in ascending order from the top down.

## Installing

```
pip install .
```

## Commands

`push-swap` prints, one per line, a list of operations that sorts the numbers.
It splits `a` around its median, pushing the smaller half to `b`, and brings
the pieces back in order:

```
push-swap 2 1 3 6 5 8
push-swap "3 2 1"
```

`push-swap-checker` reads operations from standard input, one per line, runs
them, and prints `OK` if the result is sorted or `KO` if it is not:

```
push-swap 4 67 3 87 23 | push-swap-checker 4 67 3 87 23
```

Pass `-v` as the first argument to draw both stacks after each operation,
with row 0 at the bottom:

```
printf 'sa\npb\n' | push-swap-checker -v 3 1 2
```

Both commands accept the numbers as separate arguments, in one quoted
argument, or a mix of both; arguments are split on spaces, tabs and
newlines. Run with no arguments at all, they print nothing. They print
`Error` when a value is not an integer, is outside the 32-bit signed range,
or is repeated. The checker also prints `Error`, and no verdict, at the first
line that is not one of the eleven operations (an empty line included).

`push-swap` exits with status 1 whenever it was given arguments, including
on success; `push-swap-checker` always exits with status 0.

## Using it from Python

```python
import io

from pushswap.parsing import gather_tokens, parse_stack
from pushswap.solver import solve
from pushswap.stacks import Stacks
from pushswap.checker import run_checker

values = parse_stack(gather_tokens(["3 2 1"]))
operations = solve(Stacks(values))        # sorts in place, returns the operations

out = io.StringIO()
run_checker(Stacks(values), operations, False, out)   # True; out holds "OK\n"
```

- `pushswap.stacks.Stacks(a, b)` holds both stacks, top first, and provides
  each operation as a method, along with `apply(name)` (raises `ValueError`
  for an unknown name), `is_sorted()` and `render()`.
- `pushswap.parsing` has `split_whitespaces`, `gather_tokens` and
  `parse_stack`; the last raises `InvalidInputError` (a `ValueError`) for
  input that cannot be parsed.
- `pushswap.solver.solve(stacks)` raises `ValueError` if `b` is not empty;
  `sorted_target(values)` gives the final order of `a`.
- `pushswap.checker.read_instructions(stream)` yields the lines of a stream
  without their newlines, and `run_checker(stacks, instructions, visual, out)`
  writes the verdict to `out` and returns whether the stacks ended sorted.