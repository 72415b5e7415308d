import pytest

from hiboulang.action import EmissionAction, ReceptionAction
from hiboulang.execute import ExecutionError, ExecutionResult, execute_interaction
from hiboulang.frontier import global_frontier
from hiboulang.interaction import (
    Alt,
    CoReg,
    CoregLoop,
    Emission,
    Empty,
    HeadFirstWS,
    Loop,
    Reception,
    Strict,
    StrictSeq,
)
from hiboulang.position import Both, Epsilon, Left, Right

EM0 = Emission(EmissionAction(0, 0))
EM1 = Emission(EmissionAction(1, 0))
RC1 = Reception(ReceptionAction(None, 0, 1))


def test_leaf_emission_with_affected():
    res = execute_interaction(EM0, Epsilon(), {0}, True)
    assert res.interaction == Empty()
    assert res.affected_lifelines == {0}


def test_leaf_reception_without_affected():
    res = execute_interaction(RC1, Epsilon(), {1}, False)
    assert res.interaction == Empty()
    assert res.affected_lifelines == set()


def test_leaf_on_non_action_raises():
    with pytest.raises(ExecutionError):
        execute_interaction(Empty(), Epsilon(), set(), True)


def test_strict_left_leaves_right_operand():
    res = execute_interaction(Strict(EM0, RC1), Left(Epsilon()), {0}, True)
    assert res.interaction == RC1
    assert res.affected_lifelines == {0}


def test_strict_right_after_empty_capable_left():
    loop = Loop(StrictSeq(), EM0)
    res = execute_interaction(Strict(loop, RC1), Right(Epsilon()), {1}, True)
    assert res.interaction == Empty()
    assert res.affected_lifelines == {0, 1}


def test_alt_left_discards_right_branch():
    res = execute_interaction(Alt(EM0, RC1), Left(Epsilon()), {0}, True)
    assert res.interaction == Empty()
    assert res.affected_lifelines == {0, 1}
    plain = execute_interaction(Alt(EM0, RC1), Left(Epsilon()), {0}, False)
    assert plain.affected_lifelines == set()


def test_alt_right_discards_left_branch():
    res = execute_interaction(Alt(Strict(EM0, RC1), EM1), Right(Epsilon()), {1}, False)
    assert res.interaction == Empty()


def test_strict_loop_unrolls():
    body = Strict(EM0, RC1)
    loop = Loop(StrictSeq(), body)
    res = execute_interaction(loop, Left(Left(Epsilon())), {0}, True)
    assert res.interaction == Strict(RC1, loop)
    assert res.affected_lifelines == {0, 1}


def test_loop_single_action_returns_loop():
    loop = Loop(StrictSeq(), EM0)
    res = execute_interaction(loop, Left(Epsilon()), {0}, False)
    assert res.interaction == loop


def test_head_first_loop_unrolls_into_coreg():
    body = Strict(EM0, RC1)
    loop = Loop(HeadFirstWS(), body)
    res = execute_interaction(loop, Left(Left(Epsilon())), {0}, False)
    assert res.interaction == CoReg((), RC1, loop)


def test_coreg_loop_keeps_pruned_copy_when_concurrent():
    kind = CoregLoop((0,))
    loop = Loop(kind, Strict(EM0, RC1))
    res = execute_interaction(loop, Left(Left(Epsilon())), {0}, False)
    assert res.interaction == CoReg((0,), loop, CoReg((0,), RC1, loop))


def test_coreg_loop_drops_pruned_copy_when_empty():
    kind = CoregLoop(())
    loop = Loop(kind, Strict(EM0, RC1))
    res = execute_interaction(loop, Left(Left(Epsilon())), {0}, False)
    assert res.interaction == CoReg((), RC1, loop)


def test_coreg_left_keeps_right_operand():
    res = execute_interaction(CoReg((), Strict(EM0, RC1), EM1), Left(Left(Epsilon())), {0}, True)
    assert res.interaction == CoReg((), RC1, EM1)
    assert res.affected_lifelines == {0}


def test_coreg_right_keeps_independent_left():
    term = CoReg((), EM0, RC1)
    res = execute_interaction(term, Right(Epsilon()), {1}, False)
    assert res.interaction == EM0
    assert res.affected_lifelines == set()
    res_aff = execute_interaction(term, Right(Epsilon()), {1}, True)
    assert res_aff.interaction == EM0
    assert res_aff.affected_lifelines == {1}


def test_coreg_right_prunes_left_alternative():
    term = CoReg((), Alt(EM1, EM0), RC1)
    res = execute_interaction(term, Right(Epsilon()), {1}, True)
    assert res.interaction == EM0
    assert res.affected_lifelines == {0, 1}
    plain = execute_interaction(term, Right(Epsilon()), {1}, False)
    assert plain.interaction == EM0


def test_coreg_right_concurrent_lifeline_skips_pruning():
    term = CoReg((1,), Alt(EM1, EM0), Strict(RC1, EM0))
    res = execute_interaction(term, Right(Left(Epsilon())), {1}, True)
    assert res.interaction == CoReg((1,), Alt(EM1, EM0), EM0)
    assert res.affected_lifelines == {1}


def test_both_on_alt_merges_results():
    res = execute_interaction(Alt(EM0, EM0), Both(Epsilon(), Epsilon()), {0}, True)
    assert res.interaction == Empty()
    assert res.affected_lifelines == {0}


def test_both_on_alt_keeps_remaining_branches():
    term = Alt(Strict(EM0, RC1), EM0)
    res = execute_interaction(term, Both(Left(Epsilon()), Epsilon()), {0}, False)
    assert res.interaction == Alt(RC1, Empty())


@pytest.mark.parametrize(
    "term, position",
    [
        (Loop(StrictSeq(), EM0), Right(Epsilon())),
        (Strict(EM0, RC1), Both(Epsilon(), Epsilon())),
        (EM0, Left(Epsilon())),
    ],
)
def test_invalid_positions_raise(term, position):
    with pytest.raises(ExecutionError):
        execute_interaction(term, position, {0}, False)


@pytest.mark.parametrize("delayed_alt", [False, True])
def test_frontier_elements_execute_and_affect_their_lifelines(delayed_alt):
    term = Strict(
        CoReg((1,), Alt(EM0, Strict(EM0, RC1)), Loop(HeadFirstWS(), EM1)),
        Alt(RC1, Loop(CoregLoop((0,)), Strict(EM0, RC1))),
    )
    frontier = global_frontier(term, delayed_alt)
    assert frontier
    for elt in frontier:
        res = execute_interaction(term, elt.position, elt.target_lf_ids, True)
        assert isinstance(res, ExecutionResult)
        assert elt.target_lf_ids <= res.affected_lifelines
        plain = execute_interaction(term, elt.position, elt.target_lf_ids, False)
        assert plain.interaction == res.interaction