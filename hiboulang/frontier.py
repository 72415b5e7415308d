"""Frontier of an interaction: the actions it may immediately express."""

from dataclasses import dataclass
from typing import AbstractSet, Iterable, List

from hiboulang.interaction import (
    Alt,
    And,
    CoReg,
    Emission,
    Empty,
    Interaction,
    Loop,
    NonConformInteractionError,
    Reception,
    Strict,
)
from hiboulang.position import Both, Epsilon, Left, Position, Right
from hiboulang.trace_action import TraceAction, TraceActionKind


@dataclass(frozen=True)
class FrontierElement:
    """An immediately executable action (or matched set of actions) and where it sits."""

    position: Position
    target_lf_ids: frozenset
    target_actions: frozenset
    max_loop_depth: int

    def __init__(
        self,
        position: Position,
        target_lf_ids: AbstractSet[int],
        target_actions: AbstractSet[TraceAction],
        max_loop_depth: int,
    ) -> None:
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "target_lf_ids", frozenset(target_lf_ids))
        object.__setattr__(self, "target_actions", frozenset(target_actions))
        object.__setattr__(self, "max_loop_depth", max_loop_depth)

    def _moved(self, position: Position) -> "FrontierElement":
        return FrontierElement(position, self.target_lf_ids, self.target_actions, self.max_loop_depth)


def _shift_left(frontier: Iterable[FrontierElement]) -> List[FrontierElement]:
    return [elt._moved(Left(elt.position)) for elt in frontier]


def _shift_right(frontier: Iterable[FrontierElement]) -> List[FrontierElement]:
    return [elt._moved(Right(elt.position)) for elt in frontier]


def global_frontier(interaction: Interaction, delayed_alt: bool) -> List[FrontierElement]:
    """Every frontier element of ``interaction``.

    With ``delayed_alt``, actions that both branches of an alternative can
    express identically are merged into a single element at a ``Both`` position.
    """
    return _frontier(interaction, delayed_alt, 0)


def _frontier(interaction: Interaction, delayed_alt: bool, depth: int) -> List[FrontierElement]:
    match interaction:
        case Empty():
            return []
        case Emission(action=action):
            act = TraceAction(action.orig_lf_id, TraceActionKind.EMISSION, action.ms_id)
            return [FrontierElement(Epsilon(), {action.orig_lf_id}, {act}, depth)]
        case Reception(action=action):
            act = TraceAction(action.targ_lf_id, TraceActionKind.RECEPTION, action.ms_id)
            return [FrontierElement(Epsilon(), {action.targ_lf_id}, {act}, depth)]
        case Strict(left=left, right=right):
            front = _shift_left(_frontier(left, delayed_alt, depth))
            if left.express_empty():
                front.extend(_shift_right(_frontier(right, delayed_alt, depth)))
            return front
        case CoReg(cr=cr, left=left, right=right):
            front = _shift_left(_frontier(left, delayed_alt, depth))
            concurrent = set(cr)
            for elt in _shift_right(_frontier(right, delayed_alt, depth)):
                if left.avoids_all_of(elt.target_lf_ids - concurrent):
                    front.append(elt)
            return front
        case Alt(left=left, right=right):
            left_front = _frontier(left, delayed_alt, depth)
            right_front = _frontier(right, delayed_alt, depth)
            if not delayed_alt:
                return _shift_left(left_front) + _shift_right(right_front)
            return _merge_alternatives(left_front, right_front)
        case Loop(body=body):
            return _shift_left(_frontier(body, delayed_alt, depth + 1))
        case And():
            raise NonConformInteractionError()
    raise NonConformInteractionError()


def _merge_alternatives(
    left_front: List[FrontierElement], right_front: List[FrontierElement]
) -> List[FrontierElement]:
    matched_left = set()
    matched_right = set()
    merged = []
    for li, l_elt in enumerate(left_front):
        for ri, r_elt in enumerate(right_front):
            if l_elt.target_actions == r_elt.target_actions:
                matched_left.add(li)
                matched_right.add(ri)
                merged.append(
                    FrontierElement(
                        Both(l_elt.position, r_elt.position),
                        l_elt.target_lf_ids | r_elt.target_lf_ids,
                        l_elt.target_actions | r_elt.target_actions,
                        max(l_elt.max_loop_depth, r_elt.max_loop_depth),
                    )
                )
    merged.extend(
        elt._moved(Left(elt.position)) for li, elt in enumerate(left_front) if li not in matched_left
    )
    merged.extend(
        elt._moved(Right(elt.position)) for ri, elt in enumerate(right_front) if ri not in matched_right
    )
    return merged