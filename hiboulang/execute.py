"""Execution of an action of an interaction at a given position."""

from dataclasses import dataclass, field
from typing import AbstractSet, Set

from hiboulang.interaction import (
    Alt,
    CoReg,
    CoregLoop,
    Emission,
    Empty,
    HeadFirstWS,
    Interaction,
    Loop,
    LoopKind,
    Reception,
    Strict,
    StrictSeq,
)
from hiboulang.position import Both, Epsilon, Left, Position, Right
from hiboulang.prune import prune, prune_with_affected


class ExecutionError(ValueError):
    """Raised when a position does not designate an executable action of a term."""


@dataclass
class ExecutionResult:
    """The follow-up term and the lifelines the execution affected."""

    interaction: Interaction
    affected_lifelines: Set[int] = field(default_factory=set)


def execute_interaction(
    interaction: Interaction,
    position: Position,
    tar_lf_ids: AbstractSet[int],
    get_affected: bool,
) -> ExecutionResult:
    """Execute the action(s) at ``position`` and return the follow-up term.

    ``tar_lf_ids`` are the lifelines of the executed action(s). When
    ``get_affected`` is true, the result also lists the lifelines whose
    behaviour the execution changed.
    """
    match position:
        case Epsilon():
            return _execute_leaf(interaction, get_affected)
        case Left(sub=sub):
            return _execute_left(interaction, sub, tar_lf_ids, get_affected)
        case Right(sub=sub):
            return _execute_right(interaction, sub, tar_lf_ids, get_affected)
        case Both(left=sub_left, right=sub_right):
            return _execute_both(interaction, sub_left, sub_right, tar_lf_ids, get_affected)
    raise ExecutionError(f"unknown position {position!r}")


def _execute_leaf(interaction: Interaction, get_affected: bool) -> ExecutionResult:
    match interaction:
        case Emission(action=action):
            return ExecutionResult(Empty(), {action.orig_lf_id} if get_affected else set())
        case Reception(action=action):
            return ExecutionResult(Empty(), {action.targ_lf_id} if get_affected else set())
    raise ExecutionError(f"no action to execute at the root of {interaction!r}")


def _follow_up_loop(
    old_body: Interaction,
    new_body: Interaction,
    kind: LoopKind,
    tar_lf_ids: AbstractSet[int],
) -> Interaction:
    original = Loop(kind, old_body)
    if isinstance(new_body, Empty):
        return original
    if isinstance(kind, StrictSeq):
        return Strict(new_body, original)
    if isinstance(kind, HeadFirstWS):
        return CoReg((), new_body, original)
    if isinstance(kind, CoregLoop):
        to_prune = set(tar_lf_ids) - set(kind.lifelines)
        pruned_loop = prune(original, to_prune)
        continuation = CoReg(kind.lifelines, new_body, original)
        if isinstance(pruned_loop, Empty):
            return continuation
        return CoReg(kind.lifelines, pruned_loop, continuation)
    raise ExecutionError(f"unknown loop kind {kind!r}")


def _execute_left(
    interaction: Interaction,
    sub: Position,
    tar_lf_ids: AbstractSet[int],
    get_affected: bool,
) -> ExecutionResult:
    match interaction:
        case Alt(left=left, right=right):
            result = execute_interaction(left, sub, tar_lf_ids, False)
            if get_affected:
                result.affected_lifelines = left.involved_lifelines() | right.involved_lifelines()
            return result
        case Loop(kind=kind, body=body):
            result = execute_interaction(body, sub, tar_lf_ids, False)
            affected = body.involved_lifelines() if get_affected else set()
            return ExecutionResult(
                _follow_up_loop(body, result.interaction, kind, tar_lf_ids), affected
            )
        case Strict(left=left, right=right):
            result = execute_interaction(left, sub, tar_lf_ids, get_affected)
            if isinstance(result.interaction, Empty):
                follow_up = right
            else:
                follow_up = Strict(result.interaction, right)
            return ExecutionResult(follow_up, result.affected_lifelines)
        case CoReg(cr=cr, left=left, right=right):
            result = execute_interaction(left, sub, tar_lf_ids, get_affected)
            if isinstance(result.interaction, Empty):
                follow_up = right
            else:
                follow_up = CoReg(cr, result.interaction, right)
            return ExecutionResult(follow_up, result.affected_lifelines)
    raise ExecutionError(f"trying to execute left on {interaction!r}")


def _execute_right(
    interaction: Interaction,
    sub: Position,
    tar_lf_ids: AbstractSet[int],
    get_affected: bool,
) -> ExecutionResult:
    match interaction:
        case Alt(left=left, right=right):
            result = execute_interaction(right, sub, tar_lf_ids, False)
            if get_affected:
                result.affected_lifelines = left.involved_lifelines() | right.involved_lifelines()
            return result
        case Strict(left=left, right=right):
            if not get_affected:
                return execute_interaction(right, sub, tar_lf_ids, False)
            result = execute_interaction(right, sub, tar_lf_ids, True)
            return ExecutionResult(
                result.interaction, left.involved_lifelines() | result.affected_lifelines
            )
        case CoReg(cr=cr, left=left, right=right):
            to_prune = set(tar_lf_ids) - set(cr)
            if get_affected:
                if to_prune:
                    new_left, affected = prune_with_affected(left, tar_lf_ids)
                else:
                    new_left, affected = left, set()
                result = execute_interaction(right, sub, tar_lf_ids, True)
                affected = affected | result.affected_lifelines
            else:
                new_left = prune(left, to_prune) if to_prune else left
                result = execute_interaction(right, sub, tar_lf_ids, False)
                affected = result.affected_lifelines
            new_right = result.interaction
            if isinstance(new_left, Empty):
                return ExecutionResult(new_right, affected)
            if isinstance(new_right, Empty):
                return ExecutionResult(new_left, affected)
            return ExecutionResult(CoReg(cr, new_left, new_right), affected)
    raise ExecutionError(f"trying to execute right on {interaction!r}")


def _execute_both(
    interaction: Interaction,
    sub_left: Position,
    sub_right: Position,
    tar_lf_ids: AbstractSet[int],
    get_affected: bool,
) -> ExecutionResult:
    match interaction:
        case Alt(left=left, right=right):
            result_left = execute_interaction(left, sub_left, tar_lf_ids, get_affected)
            result_right = execute_interaction(right, sub_right, tar_lf_ids, get_affected)
            affected = result_left.affected_lifelines | result_right.affected_lifelines
            if isinstance(result_left.interaction, Empty) and isinstance(
                result_right.interaction, Empty
            ):
                return ExecutionResult(Empty(), affected)
            return ExecutionResult(
                Alt(result_left.interaction, result_right.interaction), affected
            )
    raise ExecutionError(f"trying to execute both left and right on {interaction!r}")