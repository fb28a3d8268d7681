from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Union

from .._exceptions import InvalidConfiguration

Label = Union[str, Callable[[datetime], str], None]

NON_BUSINESS_LABEL = "non-business time"


class _Node:
    """Operator sugar shared by every constraint variant."""

    def __and__(self, other: Constraint) -> And:
        return And(self, other)

    def __or__(self, other: Constraint) -> Or:
        return Or(self, other)

    def __invert__(self) -> Not:
        return Not(self)

    def __sub__(self, other: Constraint) -> And:
        return Except(self, other)

    def __call__(self, instant: datetime) -> bool:
        return is_business_time(self, instant)


@dataclass(frozen=True)
class Leaf(_Node):
    """
    Opaque predicate ``instant -> bool``.

    The predicate must answer the same way for the same instant during one
    engine operation; a leaf backed by remote data is expected to memoise on
    its own side.  Nothing in the engine caches results.
    """

    predicate: Callable[[datetime], bool]
    label: Label = None

    def __repr__(self) -> str:
        name = getattr(self.predicate, "__name__", repr(self.predicate))
        return f"Leaf({name}, label={self.label!r})"


@dataclass(frozen=True)
class Not(_Node):
    inner: Constraint
    label: Label = None

    def __post_init__(self) -> None:
        _check(self.inner)


@dataclass(frozen=True, init=False)
class And(_Node):
    """True iff every child is true (vacuously true when empty)."""

    children: tuple[Constraint, ...] = field(default=())
    label: Label = None

    def __init__(self, *children: Constraint, label: Label = None) -> None:
        for child in children:
            _check(child)
        object.__setattr__(self, "children", tuple(children))
        object.__setattr__(self, "label", label)


@dataclass(frozen=True, init=False)
class Or(_Node):
    """True iff any child is true (vacuously false when empty)."""

    children: tuple[Constraint, ...] = field(default=())
    label: Label = None

    def __init__(self, *children: Constraint, label: Label = None) -> None:
        for child in children:
            _check(child)
        object.__setattr__(self, "children", tuple(children))
        object.__setattr__(self, "label", label)


Constraint = Union[Leaf, Not, And, Or]


def Except(base: Constraint, *exceptions: Constraint, label: Label = None) -> And:
    """``base`` holds and none of ``exceptions`` do."""
    if label is None and len(exceptions) == 1:
        label = exceptions[0].label
    return And(base, Not(Or(*exceptions), label=label))


def _check(node: object) -> None:
    if not isinstance(node, (Leaf, Not, And, Or)):
        raise InvalidConfiguration(
            f"Expected a constraint (Leaf, Not, And, Or); got {type(node).__name__}."
        )


# ── interpreter ──────────────────────────────────────────────────────────────

def is_business_time(node: Constraint, instant: datetime) -> bool:
    if isinstance(node, Leaf):
        return bool(node.predicate(instant))
    if isinstance(node, Not):
        return not is_business_time(node.inner, instant)
    if isinstance(node, And):
        return all(is_business_time(c, instant) for c in node.children)
    if isinstance(node, Or):
        return any(is_business_time(c, instant) for c in node.children)
    raise TypeError(f"Not a constraint: {node!r}")


def _render(label: Label, instant: datetime) -> str | None:
    if label is None:
        return None
    return label(instant) if callable(label) else label


def explain(node: Constraint, instant: datetime) -> str | None:
    """
    Name what makes ``instant`` non-business time under ``node``.

    Returns None when ``node`` holds.  A node's own label wins; otherwise an
    And defers to its first failing child and an Or to its first child.
    """
    if is_business_time(node, instant):
        return None
    own = _render(node.label, instant)
    if own is not None:
        return own
    if isinstance(node, And):
        for child in node.children:
            reason = explain(child, instant)
            if reason is not None:
                return reason
    if isinstance(node, Or) and node.children:
        return explain(node.children[0], instant)
    return NON_BUSINESS_LABEL
