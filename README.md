# pushswap

Sort a list of integers using two stacks, **a** and **b**, and a small fixed set
of operations. The program prints the sequence of operations that leaves stack
**a** sorted in ascending order, smallest value on top, with **b** empty.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of a                      |
| `sb`  | swap the top two elements of b                      |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of b onto a                            |
| `pb`  | move the top of a onto b                            |
| `ra`  | rotate a up: the top element goes to the bottom     |
| `rb`  | rotate b up                                         |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate a down: the bottom element goes to the top   |
| `rrb` | rotate b down                                       |
| `rrr` | `rra` and `rrb` together                            |

## Command line

```
push_swap 3 2 5 1 4
push_swap "3 2 5 1 4"
python -m pushswap.cli 3 2 5 1 4
```

Numbers may be given as separate arguments or as one space-separated argument.
Each operation is printed on its own line. An input that is already sorted
prints nothing.

Input is rejected with `Error` on standard output and exit status 1 when a
value holds anything other than digits after an optional leading `+` or `-`,
lies outside the 32-bit signed range, or appears twice. Running with no
arguments exits with status 1 and prints nothing.

## Library use

```python
from pushswap.solver import solve
from pushswap.stacks import Stacks

operations = solve([3, 2, 5, 1, 4])

stacks = Stacks.from_values([2, 1, 3])
stacks.sa()
print(stacks.values_a())  # [1, 2, 3]
print(stacks.moves)       # ['sa']
```

- `pushswap.stacks.Stacks` holds both stacks (index 0 is the top), offers the
  eleven operations as methods, and records each operation that takes effect
  in `moves`.
- `pushswap.solver.solve` returns the list of operation names that sorts the
  values given top first; `pushswap.solver.sort_stacks` sorts a `Stacks` in
  place.
- `pushswap.parsing.parse_arguments` checks command-line arguments and raises
  `pushswap.parsing.InputError` on bad input.

## What it does not do

The package only produces a sequence of operations. It has no command that
reads a sequence of operations and checks whether it sorts a given list.

## Tests

```
pip install -e ".[test]"
pytest
```