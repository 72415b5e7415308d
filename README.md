# hiboulang

A small library for working with interaction terms, the terms that describe
sequence diagrams. It covers their syntax, the operations that rewrite them
and their operational semantics.

## Installation

```
pip install hiboulang
```

The package has no dependencies outside the standard library and needs
Python 3.10 or later.

## What it provides

- `hiboulang.general_context.GeneralContext` maps the names of lifelines,
  messages and gates to their numeric identifiers and back
  (`lf_id`, `ms_id`, `gt_id`, `lf_name`, `ms_name`, `gt_name`, the `*_count`
  methods and `all_lf_ids`). Unknown names and identifiers give `None`.
- `hiboulang.action` holds the atomic actions `EmissionAction` and
  `ReceptionAction`. Actions of the same kind are ordered by message
  identifier, then by lifeline identifier.
- `hiboulang.trace_action` holds `TraceAction` and `TraceActionKind`, the
  observable actions that make up a trace.
- `hiboulang.interaction` defines the interaction terms `Empty`, `Emission`,
  `Reception`, `Strict`, `CoReg`, `Alt`, `Loop` and `And`, and the loop kinds
  `HeadFirstWS`, `StrictSeq` and `CoregLoop`. Terms are immutable, hashable
  and totally ordered. They can be reversed (`reverse_interaction`), checked
  for whether they accept the empty trace (`express_empty`), and asked which
  lifelines they involve or avoid (`involved_lifelines`, `involves_any_of`,
  `avoids_all_of`). Loop kinds can be compared with `is_more_permissive` and
  `get_most_permissive`.
- `hiboulang.prune` keeps only the behaviours of a term that avoid a given
  set of lifelines (`prune`, `prune_with_affected`).
- `hiboulang.eliminate` erases every action on the given lifelines from a
  term (`eliminate_lifelines`).
- `hiboulang.position` addresses sub-terms (`Epsilon`, `Left`, `Right`,
  `Both`). `str` gives a compact path such as `12`, `repr` a debugging form.
- `hiboulang.frontier.global_frontier` lists the actions that can be executed
  immediately, as `FrontierElement`s. With `delayed_alt=True`, identical
  actions available in both branches of an `Alt` are merged into one element
  at a `Both` position.
- `hiboulang.execute.execute_interaction` executes the action at a position
  and returns an `ExecutionResult` holding the follow-up term and, on
  request, the affected lifelines.
- `hiboulang.palette` holds RGB colour tuples for lifelines, gates, messages
  and the rest of a drawn term.

## Example

```python
from hiboulang.action import EmissionAction, ReceptionAction
from hiboulang.interaction import Emission, Reception, Strict
from hiboulang.frontier import global_frontier
from hiboulang.execute import execute_interaction

# lifeline 0 sends message 0 to lifeline 1
term = Strict(
    Emission(EmissionAction(0, 0, [])),
    Reception(ReceptionAction(None, 0, 1)),
)

for element in global_frontier(term, False):
    result = execute_interaction(term, element.position, element.target_lf_ids, True)
    print(element.position, result.interaction, result.affected_lifelines)
```

## Errors

`And` terms are not supported by the structural queries, pruning,
elimination or frontier computation; these raise
`NonConformInteractionError`. Executing at a position that does not designate
an executable action of the term raises `ExecutionError`. Both are subclasses
of `ValueError`.

## What it does not do

The package works on terms built in Python. It has no parser for a textual
notation of interactions, no command-line tool, and does not draw diagrams or
write images: `hiboulang.palette` only provides colour values.

## Running the tests

```
pip install "hiboulang[test]"
pytest
```