"""The sorting strategy: small cases by hand, larger ones by cheapest insertion."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from pushswap.stacks import Node, Stacks, find_node, is_sorted
from pushswap.targeting import (
    find_max,
    find_min,
    lowest_cost,
    prepare_push_to_a,
    prepare_push_to_b,
)


def _top(stack: Sequence[Node]) -> int | None:
    return stack[0].value if stack else None


def _bring_up(
    stack: Sequence[Node],
    value: int,
    upper: bool,
    forward: Callable[[], None],
    backward: Callable[[], None],
) -> None:
    step = forward if upper else backward
    while _top(stack) != value:
        step()


def _rotate_jointly(
    stacks: Stacks, a_value: int, b_value: int, upper: bool, a_first: bool
) -> None:
    """Rotate both stacks together, then finish each one alone."""
    if upper:
        both, step_a, step_b = stacks.rr, stacks.ra, stacks.rb
    else:
        both, step_a, step_b = stacks.rrr, stacks.rra, stacks.rrb
    while _top(stacks.a) != a_value and _top(stacks.b) != b_value:
        both()
    finish_a = lambda: _bring_up(stacks.a, a_value, True, step_a, step_a)  # noqa: E731
    finish_b = lambda: _bring_up(stacks.b, b_value, True, step_b, step_b)  # noqa: E731
    for finish in (finish_a, finish_b) if a_first else (finish_b, finish_a):
        finish()


def _rotate_apart(stacks: Stacks, a_node: Node, b_node: Node, a_first: bool) -> None:
    """Bring each node to the top of its own stack in its own direction."""
    finish_a = lambda: _bring_up(  # noqa: E731
        stacks.a, a_node.value, a_node.upper_half, stacks.ra, stacks.rra
    )
    finish_b = lambda: _bring_up(  # noqa: E731
        stacks.b, b_node.value, b_node.upper_half, stacks.rb, stacks.rrb
    )
    for finish in (finish_a, finish_b) if a_first else (finish_b, finish_a):
        finish()


def _target_of(stack: Sequence[Node], mover: Node) -> Node:
    target = find_node(stack, mover.target)
    if target is None:
        raise ValueError(f"target {mover.target} of {mover.value} is not on the stack")
    return target


def cheapest_in_a(stacks: Stacks) -> Node:
    """Pick the node of ``a`` to push next.

    When ``b`` holds exactly two values in ascending order it is rotated
    first. The scan takes the first node below the top whose cost is 1;
    failing that, the first node whose cost is the smallest value of 2 or
    more.
    """
    if len(stacks.b) == 2 and is_sorted(stacks.b):
        stacks.rb()
    ones = [node for node in stacks.a[1:] if node.cost == 1]
    if ones:
        return ones[0]
    usable = [node for node in stacks.a if node.cost >= 2]
    if not usable:
        raise ValueError("no node of stack a has a usable cost")
    best = min(node.cost for node in usable)
    return next(node for node in usable if node.cost == best)


def align_for_push_to_b(stacks: Stacks) -> None:
    """Rotate so the chosen node of ``a`` and its target in ``b`` are on top."""
    mover = cheapest_in_a(stacks)
    target = _target_of(stacks.b, mover)
    if mover.upper_half == target.upper_half:
        _rotate_jointly(stacks, mover.value, target.value, mover.upper_half, True)
    mover = cheapest_in_a(stacks)
    target = _target_of(stacks.b, mover)
    if mover.upper_half != target.upper_half:
        _rotate_apart(stacks, mover, target, True)


def align_for_push_to_a(stacks: Stacks) -> None:
    """Rotate so the cheapest node of ``b`` and its target in ``a`` are on top."""
    mover = lowest_cost(stacks.b)
    if mover is None:
        raise ValueError("stack b is empty")
    target = _target_of(stacks.a, mover)
    if mover.upper_half == target.upper_half:
        _rotate_jointly(stacks, target.value, mover.value, mover.upper_half, False)
    mover = lowest_cost(stacks.b)
    target = _target_of(stacks.a, mover)
    if mover.upper_half != target.upper_half:
        _rotate_apart(stacks, target, mover, False)


def push_cheapest_to_b(stacks: Stacks) -> None:
    """Push nodes from ``a`` to ``b`` until three or fewer remain, then sort ``a``."""
    while True:
        prepare_push_to_b(stacks)
        align_for_push_to_b(stacks)
        stacks.pb()
        if len(stacks.a) <= 3:
            sort_three(stacks)
            return


def push_back_to_a(stacks: Stacks) -> None:
    """Return every node of ``b`` to its place in ``a``."""
    while stacks.b:
        prepare_push_to_a(stacks)
        align_for_push_to_a(stacks)
        stacks.pa()


def seed_b(stacks: Stacks) -> None:
    """Push two nodes to ``b``, then possibly a third placed beside b's extremes."""
    stacks.pb()
    stacks.pb()
    biggest = find_max(stacks.b)
    smallest = find_min(stacks.b)
    if len(stacks.a) <= 3 or is_sorted(stacks.a):
        return
    top = stacks.a[0].value
    b_top_is_max = stacks.b[0].value == biggest.value
    outside = top > biggest.value or top < smallest.value
    if outside == b_top_is_max:
        stacks.pb()
    else:
        stacks.rb()
        stacks.pb()


def bring_min_to_top(stacks: Stacks) -> None:
    """Rotate ``a`` until its smallest value is on top, in the recorded direction."""
    smallest = find_min(stacks.a)
    if smallest is None:
        return
    _bring_up(stacks.a, smallest.value, smallest.upper_half, stacks.ra, stacks.rra)


def index_of_max(stack: Sequence[Node]) -> int:
    """Position of the first largest value in ``stack``."""
    if not stack:
        raise ValueError("stack is empty")
    biggest = max(node.value for node in stack)
    return next(pos for pos, node in enumerate(stack) if node.value == biggest)


def sort_three(stacks: Stacks) -> None:
    """Sort ``a`` when it holds three values; two values are swapped if needed."""
    if len(stacks.a) < 3:
        if not is_sorted(stacks.a):
            stacks.sa()
        return
    first, second, third = (node.value for node in stacks.a[:3])
    if first > second and first > third:
        stacks.ra()
    elif first < second and second > third:
        stacks.rra()
    if not is_sorted(stacks.a):
        stacks.sa()


def sort_four(stacks: Stacks) -> None:
    """Sort four values by parking the largest in ``b``."""
    rotations = {
        0: (),
        1: (stacks.ra,),
        2: (stacks.ra, stacks.ra),
        3: (stacks.rra,),
    }
    for move in rotations.get(index_of_max(stacks.a), ()):
        move()
    stacks.pb()
    sort_three(stacks)
    stacks.pa()
    stacks.ra()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` in place, recording every move."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        stacks.ra()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    else:
        seed_b(stacks)
        push_cheapest_to_b(stacks)
        push_back_to_a(stacks)
        bring_min_to_top(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort ``values`` (given top first)."""
    stacks = Stacks.from_values(values)
    sort_stacks(stacks)
    return stacks.moves