"""Cost and target bookkeeping that guides the solver's choice of moves."""

from __future__ import annotations

from typing import Optional, Sequence

from pushswap.stacks import Node, Stacks


def assign_positional_costs(stack: Sequence[Node]) -> None:
    """Set each node's cost to the rotations needed to reach the top, plus one.

    Nodes in the lower part count from the bottom, starting at 2.
    """
    size = len(stack)
    for position, node in enumerate(stack):
        node.cost = min(position + 1, size - position + 1)


def mark_halves(stack: Sequence[Node]) -> None:
    """Record each node's index and whether it lies in the upper half."""
    half = len(stack) // 2
    for position, node in enumerate(stack):
        node.index = position
        node.upper_half = position <= half


def find_min(stack: Sequence[Node]) -> Optional[Node]:
    """Return the first node with the smallest value, or None when empty."""
    return min(stack, key=lambda node: node.value, default=None)


def find_max(stack: Sequence[Node]) -> Optional[Node]:
    """Return the first node with the largest value, or None when empty."""
    return max(stack, key=lambda node: node.value, default=None)


def lowest_cost(stack: Sequence[Node]) -> Optional[Node]:
    """Return the first node with the smallest cost, or None when empty."""
    return min(stack, key=lambda node: node.cost, default=None)


def _require_targets(movers: Sequence[Node], targets: Sequence[Node], name: str) -> None:
    if movers and not targets:
        raise ValueError(f"stack {name} is empty; no target can be chosen")


def assign_targets_in_b(stacks: Stacks) -> None:
    """Give every node of ``a`` its place in ``b``.

    The target is the largest value in ``b`` not above the node, or the
    largest value of ``b`` when there is none. The target's cost is added
    and one is taken off.
    """
    _require_targets(stacks.a, stacks.b, "b")
    for node in stacks.a:
        below = [other for other in stacks.b if other.value <= node.value]
        fit = find_max(below) if below else find_max(stacks.b)
        node.cost += fit.cost
        node.target = fit.value
        node.cost -= 1


def assign_targets_in_a(stacks: Stacks) -> None:
    """Give every node of ``b`` its place in ``a``.

    The target is the smallest value in ``a`` not below the node, or the
    smallest value of ``a`` when there is none. The target's cost is added,
    plus one.
    """
    _require_targets(stacks.b, stacks.a, "a")
    for node in stacks.b:
        above = [other for other in stacks.a if other.value >= node.value]
        fit = find_min(above) if above else find_min(stacks.a)
        node.cost += fit.cost
        node.target = fit.value
        node.cost += 1


def _reset_positions(stacks: Stacks) -> None:
    assign_positional_costs(stacks.a)
    assign_positional_costs(stacks.b)


def prepare_push_to_b(stacks: Stacks) -> None:
    """Work out costs and targets for moving a node from ``a`` to ``b``."""
    _reset_positions(stacks)
    assign_targets_in_b(stacks)
    mark_halves(stacks.a)
    mark_halves(stacks.b)


def prepare_push_to_a(stacks: Stacks) -> None:
    """Work out costs and targets for moving a node from ``b`` back to ``a``."""
    _reset_positions(stacks)
    assign_targets_in_a(stacks)
    mark_halves(stacks.a)
    mark_halves(stacks.b)