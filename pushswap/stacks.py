"""The two stacks and the eleven moves that act on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence


@dataclass(eq=False)
class Node:
    """One number on a stack, with the scratch data the solver attaches to it."""

    value: int
    target: int = 0
    cost: int = 0
    upper_half: bool = False
    index: int = 0


def find_node(stack: Sequence[Node], value: int) -> Optional[Node]:
    """Return the first node holding ``value``, or None."""
    return next((node for node in stack if node.value == value), None)


def is_sorted(stack: Sequence[Node]) -> bool:
    """True when the values run in non-decreasing order from top to bottom."""
    return all(upper.value <= lower.value for upper, lower in zip(stack, stack[1:]))


def _swap(stack: list[Node]) -> None:
    stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[Node]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[Node]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``; index 0 is the top.

    Every move that takes effect is appended to ``moves`` by name.
    """

    a: list[Node] = field(default_factory=list)
    b: list[Node] = field(default_factory=list)
    moves: list[str] = field(default_factory=list)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Stacks":
        """Build stack ``a`` from values given top first; ``b`` starts empty."""
        return cls(a=[Node(value) for value in values])

    def values_a(self) -> list[int]:
        return [node.value for node in self.a]

    def values_b(self) -> list[int]:
        return [node.value for node in self.b]

    def sa(self) -> None:
        """Swap the two top elements of ``a``; nothing happens with fewer than two."""
        if len(self.a) < 2:
            return
        self.moves.append("sa")
        _swap(self.a)

    def sb(self) -> None:
        """Swap the two top elements of ``b``; nothing happens with fewer than two."""
        if len(self.b) < 2:
            return
        self.moves.append("sb")
        _swap(self.b)

    def ss(self) -> None:
        """Swap the tops of both stacks as a single move."""
        self.moves.append("ss")
        if len(self.a) >= 2:
            _swap(self.a)
        if len(self.b) >= 2:
            _swap(self.b)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens when ``b`` is empty."""
        if not self.b:
            return
        self.moves.append("pa")
        self.a.insert(0, self.b.pop(0))

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens when ``a`` is empty."""
        if not self.a:
            return
        self.moves.append("pb")
        self.b.insert(0, self.a.pop(0))

    def ra(self) -> None:
        """Send the top of ``a`` to its bottom."""
        if len(self.a) < 2:
            return
        self.moves.append("ra")
        _rotate(self.a)

    def rb(self) -> None:
        """Send the top of ``b`` to its bottom."""
        if len(self.b) < 2:
            return
        self.moves.append("rb")
        _rotate(self.b)

    def rr(self) -> None:
        """Rotate both stacks as a single move."""
        self.moves.append("rr")
        _rotate(self.a)
        _rotate(self.b)

    def rra(self) -> None:
        """Bring the bottom of ``a`` to its top."""
        if len(self.a) < 2:
            return
        self.moves.append("rra")
        _reverse_rotate(self.a)

    def rrb(self) -> None:
        """Bring the bottom of ``b`` to its top."""
        if len(self.b) < 2:
            return
        self.moves.append("rrb")
        _reverse_rotate(self.b)

    def rrr(self) -> None:
        """Reverse-rotate both stacks as a single move."""
        self.moves.append("rrr")
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)