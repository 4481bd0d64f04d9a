from collections import deque

from automaton_errors import AutomatonInvariantError
from logging_config import get_logger

logger = get_logger(__name__)


def find_dangling_transitions(dfa):
    """Переходы, ведущие в состояния, которых нет в списке состояний ДКА."""
    labels = set(dfa.labels())
    return [
        (state, symbol, target)
        for state, symbol, target in dfa.iter_transitions()
        if target not in labels
    ]


# Удаление недостижимых состояний
def remove_unreachable_states(dfa):
    by_label = {state.label: state for state in dfa.states}
    reachable = set()
    queue = deque([dfa.initial_state])
    while queue:
        label = queue.popleft()
        if label in reachable:
            continue
        reachable.add(label)
        state = by_label.get(label)
        if state is None:
            continue  # висячая ссылка, будет обнаружена ниже
        for symbol in dfa.alphabet:
            nxt = state.transitions.get(symbol)
            if nxt is not None and nxt not in reachable:
                queue.append(nxt)

    removed = [state.label for state in dfa.states if state.label not in reachable]
    dfa.states = [state for state in dfa.states if state.label in reachable]
    dfa.final_states = [label for label in dfa.final_states if label in reachable]
    if removed:
        logger.debug(f"Удалены недостижимые состояния: {' '.join(removed)}")

    dangling = find_dangling_transitions(dfa)
    if dangling:
        raise AutomatonInvariantError(f"переходы в несуществующие состояния: {dangling}")
    return dfa
