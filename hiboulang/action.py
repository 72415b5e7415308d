"""Emission and reception actions of an interaction."""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple


class _OrderedByMessage:
    """Orders actions by message identifier, then by lifeline identifier."""

    __slots__ = ()

    def _sort_key(self) -> Tuple[int, int]:
        raise NotImplementedError

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


@dataclass(frozen=True)
class EmissionAction(_OrderedByMessage):
    """A lifeline emitting a message, possibly towards gates."""

    orig_lf_id: int
    ms_id: int
    target_gates: Tuple[int, ...] = field(default=())

    def __init__(self, orig_lf_id: int, ms_id: int, target_gates: Iterable[int] = ()) -> None:
        object.__setattr__(self, "orig_lf_id", orig_lf_id)
        object.__setattr__(self, "ms_id", ms_id)
        object.__setattr__(self, "target_gates", tuple(target_gates))

    def _sort_key(self) -> Tuple[int, int]:
        return (self.ms_id, self.orig_lf_id)


@dataclass(frozen=True)
class ReceptionAction(_OrderedByMessage):
    """A lifeline receiving a message, possibly from a gate."""

    origin_gate: Optional[int]
    ms_id: int
    targ_lf_id: int

    def _sort_key(self) -> Tuple[int, int]:
        return (self.ms_id, self.targ_lf_id)