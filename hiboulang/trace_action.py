"""Observable actions that make up a trace."""

from dataclasses import dataclass
from enum import IntEnum


class TraceActionKind(IntEnum):
    """Kind of a trace action; receptions sort before emissions."""

    RECEPTION = 0
    EMISSION = 1


@dataclass(frozen=True, order=True)
class TraceAction:
    """A message emitted or received on a lifeline."""

    lf_id: int
    act_kind: TraceActionKind
    ms_id: int