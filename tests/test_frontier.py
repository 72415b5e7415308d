import pytest

from hiboulang.action import EmissionAction, ReceptionAction
from hiboulang.frontier import FrontierElement, global_frontier
from hiboulang.interaction import (
    Alt,
    And,
    CoReg,
    Emission,
    Empty,
    Loop,
    NonConformInteractionError,
    Reception,
    StrictSeq,
    Strict,
)
from hiboulang.position import Both, Epsilon, Left, Right
from hiboulang.trace_action import TraceAction, TraceActionKind


def emi(lf, ms):
    return Emission(EmissionAction(lf, ms))


def rec(lf, ms):
    return Reception(ReceptionAction(None, ms, lf))


def em_act(lf, ms):
    return TraceAction(lf, TraceActionKind.EMISSION, ms)


def positions(front):
    return [elt.position for elt in front]


@pytest.mark.parametrize("delayed", [False, True])
def test_empty_has_no_frontier(delayed):
    assert global_frontier(Empty(), delayed) == []


def test_emission_frontier():
    front = global_frontier(emi(1, 4), False)
    assert front == [FrontierElement(Epsilon(), {1}, {em_act(1, 4)}, 0)]


def test_reception_frontier():
    front = global_frontier(rec(2, 5), False)
    assert front == [
        FrontierElement(Epsilon(), {2}, {TraceAction(2, TraceActionKind.RECEPTION, 5)}, 0)
    ]


def test_strict_blocks_right_when_left_not_empty():
    front = global_frontier(Strict(emi(0, 0), emi(1, 1)), False)
    assert positions(front) == [Left(Epsilon())]


def test_strict_reaches_right_past_loop():
    i = Strict(Loop(StrictSeq(), emi(0, 0)), emi(1, 1))
    front = global_frontier(i, False)
    assert positions(front) == [Left(Left(Epsilon())), Right(Epsilon())]
    assert front[1].target_actions == frozenset({em_act(1, 1)})


def test_coreg_keeps_right_on_other_lifeline():
    i = CoReg((), emi(0, 0), emi(1, 1))
    assert positions(global_frontier(i, False)) == [Left(Epsilon()), Right(Epsilon())]


def test_coreg_blocks_right_on_same_lifeline_unless_concurrent():
    blocked = CoReg((), emi(0, 0), emi(0, 1))
    assert positions(global_frontier(blocked, False)) == [Left(Epsilon())]
    concurrent = CoReg((0,), emi(0, 0), emi(0, 1))
    assert positions(global_frontier(concurrent, False)) == [Left(Epsilon()), Right(Epsilon())]


def test_alt_not_delayed_lists_both_branches():
    i = Alt(emi(0, 0), emi(0, 0))
    assert positions(global_frontier(i, False)) == [Left(Epsilon()), Right(Epsilon())]


def test_alt_delayed_merges_identical_actions():
    i = Alt(emi(0, 0), Strict(emi(0, 0), emi(1, 1)))
    front = global_frontier(i, True)
    assert front == [
        FrontierElement(Both(Epsilon(), Left(Epsilon())), {0}, {em_act(0, 0)}, 0)
    ]


def test_alt_delayed_keeps_distinct_actions_apart():
    i = Alt(emi(0, 0), emi(1, 1))
    assert positions(global_frontier(i, True)) == [Left(Epsilon()), Right(Epsilon())]


def test_alt_delayed_takes_deepest_loop():
    i = Alt(Loop(StrictSeq(), emi(0, 0)), emi(0, 0))
    front = global_frontier(i, True)
    assert len(front) == 1
    assert front[0].position == Both(Left(Epsilon()), Epsilon())
    assert front[0].max_loop_depth == 1


def test_nested_loops_count_depth():
    i = Loop(StrictSeq(), Loop(StrictSeq(), emi(3, 3)))
    front = global_frontier(i, False)
    assert positions(front) == [Left(Left(Epsilon()))]
    assert front[0].max_loop_depth == 2


def test_and_is_rejected():
    with pytest.raises(NonConformInteractionError):
        global_frontier(And(emi(0, 0), emi(1, 1)), False)


def test_and_nested_is_rejected():
    with pytest.raises(NonConformInteractionError):
        global_frontier(Strict(Loop(StrictSeq(), And(emi(0, 0), Empty())), emi(1, 1)), True)


@pytest.mark.parametrize("delayed", [False, True])
def test_actions_lie_on_target_lifelines(delayed):
    i = Alt(
        CoReg((1,), Loop(StrictSeq(), rec(1, 2)), emi(1, 3)),
        Strict(Alt(emi(2, 0), rec(1, 2)), emi(0, 0)),
    )
    front = global_frontier(i, delayed)
    assert front
    for elt in front:
        assert {act.lf_id for act in elt.target_actions} <= elt.target_lf_ids


def test_elements_are_hashable_and_equal_by_value():
    a = FrontierElement(Epsilon(), [1, 1], [em_act(1, 0)], 0)
    b = FrontierElement(Epsilon(), {1}, {em_act(1, 0)}, 0)
    assert a == b
    assert len({a, b}) == 1