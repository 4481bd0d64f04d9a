import pytest

from automaton import DFA, DFAState, SPARSE, TOTAL
from automaton_errors import AutomatonInvariantError
from determinize import nfa_to_dfa
from reachability import find_dangling_transitions, remove_unreachable_states
from subsets import enumerate_subsets


def make_dfa(alphabet, edges, initial, finals=()):
    dfa = DFA(alphabet)
    labels = []
    for state, _, target in edges:
        for label in (state, target):
            if label not in labels:
                labels.append(label)
    for label in labels:
        state = DFAState(label, (label,), is_final=label in finals, is_initial=label == initial)
        dfa.add_state(state)
    for state, symbol, target in edges:
        dfa.get_state(state).transitions[symbol] = target
    return dfa


def test_multi_character_labels_are_not_confused():
    dfa = make_dfa(
        ["a"],
        [("Q1", "a", "Q10"), ("Q10", "a", "Q1"), ("Q0", "a", "Q0")],
        initial="Q1",
        finals=("Q0", "Q10"),
    )
    remove_unreachable_states(dfa)
    assert dfa.labels() == ["Q1", "Q10"]
    assert dfa.final_states == ["Q10"]


def test_self_loops_and_cycles_terminate():
    dfa = make_dfa(
        ["a", "b"],
        [("A", "a", "A"), ("A", "b", "B"), ("B", "a", "C"), ("C", "a", "A"), ("C", "b", "C")],
        initial="A",
    )
    remove_unreachable_states(dfa)
    assert dfa.labels() == ["A", "B", "C"]


def test_initial_state_always_retained():
    dfa = make_dfa(["a"], [("B", "a", "C")], initial=None)
    dfa.add_state(DFAState("A", ("A",), is_initial=True))
    remove_unreachable_states(dfa)
    assert dfa.labels() == ["A"]
    assert dfa.initial_state == "A"


def test_dangling_target_is_reported():
    dfa = make_dfa(["a"], [("A", "a", "B")], initial="A")
    dfa.states = [dfa.get_state("A")]
    assert find_dangling_transitions(dfa) == [("A", "a", "B")]
    with pytest.raises(AutomatonInvariantError):
        remove_unreachable_states(dfa)


@pytest.mark.parametrize("policy", [SPARSE, TOTAL])
def test_pruned_dfa_is_closed(second_to_last_nfa, policy):
    subsets = enumerate_subsets(second_to_last_nfa.states, include_empty=(policy == TOTAL))
    dfa = nfa_to_dfa(second_to_last_nfa, subsets, ["0", "1"], policy)
    before = {state.label: state.is_final for state in dfa.states}

    remove_unreachable_states(dfa)

    labels = set(dfa.labels())
    assert dfa.initial_state in labels
    assert find_dangling_transitions(dfa) == []
    assert set(dfa.final_states) <= labels
    for state in dfa.states:
        assert state.is_final == before[state.label]
        assert state.is_final == ("q2" in state.subset)


def test_total_dead_state_pruned_when_never_hit(second_to_last_nfa):
    subsets = enumerate_subsets(second_to_last_nfa.states)
    dfa = nfa_to_dfa(second_to_last_nfa, subsets, ["0", "1"], TOTAL)
    assert dfa.get_state("A").subset == ()
    remove_unreachable_states(dfa)
    assert dfa.labels() == ["B", "E", "F", "H"]
    assert dfa.final_states == ["F", "H"]
