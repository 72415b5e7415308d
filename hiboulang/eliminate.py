"""Removal of lifelines from interaction terms."""

from typing import AbstractSet

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


def eliminate_lifelines(interaction: Interaction, lfs_to_eliminate: AbstractSet[int]) -> Interaction:
    """The term with every action on the given lifelines removed."""
    match interaction:
        case Empty():
            return Empty()
        case Emission(action=action):
            return Empty() if action.orig_lf_id in lfs_to_eliminate else interaction
        case Reception(action=action):
            return Empty() if action.targ_lf_id in lfs_to_eliminate else interaction
        case CoReg(cr=cr, left=left, right=right):
            new_left = eliminate_lifelines(left, lfs_to_eliminate)
            new_right = eliminate_lifelines(right, lfs_to_eliminate)
            if isinstance(new_left, Empty):
                return new_right
            if isinstance(new_right, Empty):
                return new_left
            new_cr = tuple(lf for lf in cr if lf not in lfs_to_eliminate)
            return CoReg(new_cr, new_left, new_right)
        case Strict(left=left, right=right):
            new_left = eliminate_lifelines(left, lfs_to_eliminate)
            new_right = eliminate_lifelines(right, lfs_to_eliminate)
            if isinstance(new_left, Empty):
                return new_right
            if isinstance(new_right, Empty):
                return new_left
            return Strict(new_left, new_right)
        case Alt(left=left, right=right):
            new_left = eliminate_lifelines(left, lfs_to_eliminate)
            new_right = eliminate_lifelines(right, lfs_to_eliminate)
            if isinstance(new_left, Empty) and isinstance(new_right, Empty):
                return Empty()
            return Alt(new_left, new_right)
        case Loop(kind=kind, body=body):
            new_body = eliminate_lifelines(body, lfs_to_eliminate)
            if isinstance(new_body, Empty):
                return Empty()
            if isinstance(new_body, Loop):
                return Loop(min(kind, new_body.kind), new_body.body)
            return Loop(kind, new_body)
        case And():
            raise NonConformInteractionError()
    raise NonConformInteractionError()