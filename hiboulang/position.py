"""Positions of sub-terms within an interaction term."""

from dataclasses import dataclass


class Position:
    """Path from the root of an interaction to one of its sub-terms.

    ``str`` renders a compact path; ``repr`` renders the debugging form.
    """

    __slots__ = ()


@dataclass(frozen=True, repr=False)
class Epsilon(Position):
    """The root position."""

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "o"


@dataclass(frozen=True, repr=False)
class Left(Position):
    """A position within the left sub-term."""

    sub: Position

    def __str__(self) -> str:
        return f"1{self.sub}"

    __repr__ = __str__


@dataclass(frozen=True, repr=False)
class Right(Position):
    """A position within the right sub-term."""

    sub: Position

    def __str__(self) -> str:
        return f"2{self.sub}"

    __repr__ = __str__


@dataclass(frozen=True, repr=False)
class Both(Position):
    """A pair of positions, one in each sub-term."""

    left: Position
    right: Position

    def __str__(self) -> str:
        return f"(1{self.left},2{self.right})"

    def __repr__(self) -> str:
        return f"H1{self.left}_2{self.right}H"