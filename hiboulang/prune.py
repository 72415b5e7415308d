"""Pruning of interactions with respect to a set of lifelines.

Pruning keeps only the behaviours of a term that can be expressed
without any action on the given lifelines.
"""

from typing import AbstractSet, Set, Tuple

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


def _join_sequence(template: Interaction, left: Interaction, right: Interaction) -> Interaction:
    """Rebuild a strict or co-region composition, dropping empty operands."""
    if isinstance(left, Empty):
        return right
    if isinstance(right, Empty):
        return left
    if isinstance(template, CoReg):
        return CoReg(template.cr, left, right)
    return Strict(left, right)


def prune(interaction: Interaction, lf_ids: AbstractSet[int]) -> Interaction:
    """The sub-behaviour of ``interaction`` that avoids every lifeline in ``lf_ids``."""
    match interaction:
        case Empty():
            return Empty()
        case Emission() | Reception():
            return interaction
        case CoReg(left=left, right=right) | Strict(left=left, right=right):
            return _join_sequence(interaction, prune(left, lf_ids), prune(right, lf_ids))
        case Alt(left=left, right=right):
            if not left.avoids_all_of(lf_ids):
                return prune(right, lf_ids)
            if not right.avoids_all_of(lf_ids):
                return prune(left, lf_ids)
            pruned_left = prune(left, lf_ids)
            pruned_right = prune(right, lf_ids)
            left_empty = isinstance(pruned_left, Empty)
            right_empty = isinstance(pruned_right, Empty)
            if left_empty and right_empty:
                return Empty()
            if left_empty and isinstance(pruned_right, Loop):
                return pruned_right
            if right_empty and isinstance(pruned_left, Loop):
                return pruned_left
            return Alt(pruned_left, pruned_right)
        case Loop(kind=kind, body=body):
            if body.avoids_all_of(lf_ids):
                pruned_body = prune(body, lf_ids)
                if not isinstance(pruned_body, Empty):
                    return Loop(kind, pruned_body)
            return Empty()
        case And():
            raise NonConformInteractionError()
    raise NonConformInteractionError()


def prune_with_affected(
    interaction: Interaction, lf_ids: AbstractSet[int]
) -> Tuple[Interaction, Set[int]]:
    """Prune ``interaction`` and also return the lifelines the pruning affected."""
    match interaction:
        case Empty():
            return Empty(), set()
        case Emission() | Reception():
            return interaction, set()
        case CoReg(left=left, right=right) | Strict(left=left, right=right):
            pruned_left, affected = prune_with_affected(left, lf_ids)
            pruned_right, affected_right = prune_with_affected(right, lf_ids)
            affected |= affected_right
            return _join_sequence(interaction, pruned_left, pruned_right), affected
        case Alt(left=left, right=right):
            if left.avoids_all_of(lf_ids):
                if right.avoids_all_of(lf_ids):
                    pruned_left, affected = prune_with_affected(left, lf_ids)
                    pruned_right, affected_right = prune_with_affected(right, lf_ids)
                    affected |= affected_right
                    return Alt(pruned_left, pruned_right), affected
                kept = prune(left, lf_ids)
            else:
                kept = prune(right, lf_ids)
            return kept, left.involved_lifelines() | right.involved_lifelines()
        case Loop(kind=kind, body=body):
            if body.avoids_all_of(lf_ids):
                pruned_body, affected = prune_with_affected(body, lf_ids)
                if not isinstance(pruned_body, Empty):
                    return Loop(kind, pruned_body), affected
                return Empty(), affected
            return Empty(), body.involved_lifelines()
        case And():
            raise NonConformInteractionError()
    raise NonConformInteractionError()