"""Names of the lifelines, messages and gates an interaction refers to."""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


def _index_of(names: Tuple[str, ...], name: str) -> Optional[int]:
    try:
        return names.index(name)
    except ValueError:
        return None


def _name_at(names: Tuple[str, ...], index: int) -> Optional[str]:
    if 0 <= index < len(names):
        return names[index]
    return None


@dataclass(frozen=True)
class GeneralContext:
    """Maps identifiers to names for lifelines, messages and gates."""

    lf_names: Tuple[str, ...]
    ms_names: Tuple[str, ...]
    gt_names: Tuple[str, ...]

    def __init__(
        self,
        lf_names: Sequence[str],
        ms_names: Sequence[str],
        gt_names: Sequence[str],
    ) -> None:
        object.__setattr__(self, "lf_names", tuple(lf_names))
        object.__setattr__(self, "ms_names", tuple(ms_names))
        object.__setattr__(self, "gt_names", tuple(gt_names))

    def lf_id(self, lf_name: str) -> Optional[int]:
        """Identifier of the first lifeline with that name, or None."""
        return _index_of(self.lf_names, lf_name)

    def ms_id(self, ms_name: str) -> Optional[int]:
        """Identifier of the first message with that name, or None."""
        return _index_of(self.ms_names, ms_name)

    def gt_id(self, gt_name: str) -> Optional[int]:
        """Identifier of the first gate with that name, or None."""
        return _index_of(self.gt_names, gt_name)

    def lf_count(self) -> int:
        return len(self.lf_names)

    def ms_count(self) -> int:
        return len(self.ms_names)

    def gt_count(self) -> int:
        return len(self.gt_names)

    def all_lf_ids(self) -> list:
        """Every lifeline identifier, in increasing order."""
        return list(range(self.lf_count()))

    def lf_name(self, lf_id: int) -> Optional[str]:
        """Name of the lifeline, or None if the identifier is unknown."""
        return _name_at(self.lf_names, lf_id)

    def ms_name(self, ms_id: int) -> Optional[str]:
        """Name of the message, or None if the identifier is unknown."""
        return _name_at(self.ms_names, ms_id)

    def gt_name(self, gt_id: int) -> Optional[str]:
        """Name of the gate, or None if the identifier is unknown."""
        return _name_at(self.gt_names, gt_id)