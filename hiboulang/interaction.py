"""Interaction terms, their loop kinds and structural queries on lifelines."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import AbstractSet, Optional, Set, Tuple

from hiboulang.action import EmissionAction, ReceptionAction


class NonConformInteractionError(ValueError):
    """Raised when an operation meets a term it does not support."""

    def __init__(self, message: str = "non-conform interaction") -> None:
        super().__init__(message)


def _sort_key(value):
    """Sort key of one field of a term."""
    if isinstance(value, _Ordered):
        return value._key()
    if isinstance(value, EmissionAction):
        return (value.ms_id, value.orig_lf_id)
    if isinstance(value, ReceptionAction):
        return (value.ms_id, value.targ_lf_id)
    return value


class _Ordered(ABC):
    """Total order derived from the constructor rank and the fields of a term."""

    __slots__ = ()
    _FAMILY = ""
    _RANK = 0

    def _key(self) -> tuple:
        return (self._RANK, *(_sort_key(getattr(self, f.name)) for f in fields(self)))

    def _comparable(self, other) -> bool:
        return isinstance(other, _Ordered) and other._FAMILY == self._FAMILY

    def __lt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._key() >= other._key()


# ---------------------------------------------------------------- loop kinds


class LoopKind(_Ordered):
    """How successive iterations of a loop are composed.

    Kinds are ordered: head-first weak sequencing, then strict sequencing,
    then co-region loops ordered by their lifeline lists.
    """

    __slots__ = ()
    _FAMILY = "loop_kind"

    def is_more_permissive(self, other: "LoopKind") -> Optional[bool]:
        """Whether this kind allows at least as much as ``other``; None if incomparable."""
        if isinstance(self, CoregLoop) and isinstance(other, CoregLoop):
            if all(lf in self.lifelines for lf in other.lifelines):
                return True
            if all(lf in other.lifelines for lf in self.lifelines):
                return False
            return None
        if isinstance(self, CoregLoop) and isinstance(other, StrictSeq):
            return True
        if isinstance(self, StrictSeq) and isinstance(other, CoregLoop):
            return False
        if isinstance(self, StrictSeq) and isinstance(other, StrictSeq):
            return True
        return None

    def get_most_permissive(self, other: "LoopKind") -> Optional["LoopKind"]:
        """The more permissive of the two kinds, or None if incomparable."""
        result = self.is_more_permissive(other)
        if result is None:
            return None
        return self if result else other


@dataclass(frozen=True)
class HeadFirstWS(LoopKind):
    """Loop whose head iteration is weakly sequenced before the rest."""

    _RANK = 0


@dataclass(frozen=True)
class StrictSeq(LoopKind):
    """Loop whose iterations are strictly sequenced."""

    _RANK = 1


@dataclass(frozen=True)
class CoregLoop(LoopKind):
    """Loop whose iterations are concurrent on the given lifelines."""

    _RANK = 2

    lifelines: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lifelines", tuple(self.lifelines))


# -------------------------------------------------------------- interactions


class Interaction(_Ordered):
    """An interaction term.

    Terms are ordered by constructor (empty, emission, reception, co-region,
    strict, alternative, loop, and), then by their contents.
    """

    __slots__ = ()
    _FAMILY = "interaction"

    @abstractmethod
    def reverse_interaction(self) -> "Interaction":
        """The term with the order of every binary composition reversed."""

    @abstractmethod
    def express_empty(self) -> bool:
        """Whether the term accepts the empty trace."""

    @abstractmethod
    def avoids_all_of(self, lf_ids: AbstractSet[int]) -> bool:
        """Whether the term can be executed without any of the given lifelines."""

    @abstractmethod
    def involved_lifelines(self) -> Set[int]:
        """Every lifeline on which an action of the term occurs."""

    @abstractmethod
    def involves_any_of(self, lf_ids: AbstractSet[int]) -> bool:
        """Whether an action of the term occurs on one of the given lifelines."""


@dataclass(frozen=True)
class Empty(Interaction):
    """The term that accepts only the empty trace."""

    _RANK = 0

    def reverse_interaction(self) -> Interaction:
        return self

    def express_empty(self) -> bool:
        return True

    def avoids_all_of(self, lf_ids: AbstractSet[int]) -> bool:
        return True

    def involved_lifelines(self) -> Set[int]:
        return set()

    def involves_any_of(self, lf_ids: AbstractSet[int]) -> bool:
        return False


@dataclass(frozen=True)
class Emission(Interaction):
    """A single emission action."""

    _RANK = 1

    action: EmissionAction

    def reverse_interaction(self) -> Interaction:
        return self

    def express_empty(self) -> bool:
        return False

    def avoids_all_of(self, lf_ids: AbstractSet[int]) -> bool:
        return self.action.orig_lf_id not in lf_ids

    def involved_lifelines(self) -> Set[int]:
        return {self.action.orig_lf_id}

    def involves_any_of(self, lf_ids: AbstractSet[int]) -> bool:
        return self.action.orig_lf_id in lf_ids


@dataclass(frozen=True)
class Reception(Interaction):
    """A single reception action."""

    _RANK = 2

    action: ReceptionAction

    def reverse_interaction(self) -> Interaction:
        return self

    def express_empty(self) -> bool:
        return False

    def avoids_all_of(self, lf_ids: AbstractSet[int]) -> bool:
        return self.action.targ_lf_id not in lf_ids

    def involved_lifelines(self) -> Set[int]:
        return {self.action.targ_lf_id}

    def involves_any_of(self, lf_ids: AbstractSet[int]) -> bool:
        return self.action.targ_lf_id in lf_ids


class _Binary(Interaction):
    """Shared behaviour of terms with a left and a right operand."""

    __slots__ = ()
    left: Interaction
    right: Interaction

    def involved_lifelines(self) -> Set[int]:
        return self.left.involved_lifelines() | self.right.involved_lifelines()

    def involves_any_of(self, lf_ids: AbstractSet[int]) -> bool:
        return self.left.involves_any_of(lf_ids) or self.right.involves_any_of(lf_ids)


@dataclass(frozen=True)
class CoReg(_Binary):
    """Weak sequencing, concurrent on the lifelines listed in ``cr``."""

    _RANK = 3

    cr: Tuple[int, ...]
    left: Interaction
    right: Interaction

    def __post_init__(self) -> None:
        object.__setattr__(self, "cr", tuple(self.cr))

    def reverse_interaction(self) -> Interaction:
        return CoReg(self.cr, self.right.reverse_interaction(), self.left.reverse_interaction())

    def express_empty(self) -> bool:
        return self.left.express_empty() and self.right.express_empty()

    def avoids_all_of(self, lf_ids: AbstractSet[int]) -> bool:
        return self.left.avoids_all_of(lf_ids) and self.right.avoids_all_of(lf_ids)


@dataclass(frozen=True)
class Strict(_Binary):
    """Strict sequencing of two terms."""

    _RANK = 4

    left: Interaction
    right: Interaction

    def reverse_interaction(self) -> Interaction:
        return Strict(self.right.reverse_interaction(), self.left.reverse_interaction())

    def express_empty(self) -> bool:
        return self.left.express_empty() and self.right.express_empty()

    def avoids_all_of(self, lf_ids: AbstractSet[int]) -> bool:
        return self.left.avoids_all_of(lf_ids) and self.right.avoids_all_of(lf_ids)


@dataclass(frozen=True)
class Alt(_Binary):
    """Choice between two terms."""

    _RANK = 5

    left: Interaction
    right: Interaction

    def reverse_interaction(self) -> Interaction:
        return Alt(self.right.reverse_interaction(), self.left.reverse_interaction())

    def express_empty(self) -> bool:
        return self.left.express_empty() or self.right.express_empty()

    def avoids_all_of(self, lf_ids: AbstractSet[int]) -> bool:
        return self.left.avoids_all_of(lf_ids) or self.right.avoids_all_of(lf_ids)


@dataclass(frozen=True)
class Loop(Interaction):
    """Repetition of a term, zero or more times."""

    _RANK = 6

    kind: LoopKind
    body: Interaction

    def reverse_interaction(self) -> Interaction:
        return Loop(self.kind, self.body.reverse_interaction())

    def express_empty(self) -> bool:
        return True

    def avoids_all_of(self, lf_ids: AbstractSet[int]) -> bool:
        return True

    def involved_lifelines(self) -> Set[int]:
        return self.body.involved_lifelines()

    def involves_any_of(self, lf_ids: AbstractSet[int]) -> bool:
        return self.body.involves_any_of(lf_ids)


@dataclass(frozen=True)
class And(Interaction):
    """Conjunction of two terms; not supported by the structural queries."""

    _RANK = 7

    left: Interaction
    right: Interaction

    def reverse_interaction(self) -> Interaction:
        raise NonConformInteractionError()

    def express_empty(self) -> bool:
        raise NonConformInteractionError()

    def avoids_all_of(self, lf_ids: AbstractSet[int]) -> bool:
        raise NonConformInteractionError()

    def involved_lifelines(self) -> Set[int]:
        raise NonConformInteractionError()

    def involves_any_of(self, lf_ids: AbstractSet[int]) -> bool:
        raise NonConformInteractionError()