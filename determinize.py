from automaton import DFA, DFAState, POLICIES, SPARSE, TOTAL
from automaton_errors import AutomatonInvariantError, UndeterminableInitialState
from logging_config import get_logger
from state_labels import get_state_char
from subsets import subset_index

logger = get_logger(__name__)


def subset_transitions(nfa, subset, alphabet):
    """Для каждого символа – объединение переходов НКА из всех состояний подмножества."""
    possible_paths = []
    for symbol in alphabet:
        target = set()
        for state in subset:
            target |= nfa.targets(state, symbol)
        possible_paths.append(frozenset(target))
    return possible_paths


def nfa_to_dfa(nfa, subsets, alphabet, policy=SPARSE):
    """
    Построение ДКА методом подмножеств.

    subsets – канонически упорядоченный список подмножеств (см. subsets.py),
    его порядок задаёт идентичность состояний ДКА. При политике "sparse"
    пустое объединение означает отсутствие перехода, при "total" переход
    ведёт в мёртвое состояние (пустое подмножество).
    """
    if policy not in POLICIES:
        raise ValueError(f"Неизвестная политика: {policy}")
    alphabet = list(alphabet)
    index = subset_index(subsets)

    dead = index.get(frozenset())
    if policy == TOTAL and dead is None:
        raise AutomatonInvariantError("для политики total нужен пустой набор состояний в списке подмножеств")

    initial = index.get(frozenset([nfa.initial_state]))
    if initial is None:
        raise UndeterminableInitialState(nfa.initial_state)

    final_states = set(nfa.final_states)

    # Первый проход: переходы каждого подмножества в виде индексов подмножеств
    targets = {}
    for i, subset in enumerate(subsets):
        if not subset:
            continue
        row = {}
        for symbol, union in zip(alphabet, subset_transitions(nfa, subset, alphabet)):
            if not union:
                if policy == TOTAL:
                    row[symbol] = dead
                continue
            if union not in index:
                raise AutomatonInvariantError(f"подмножество {sorted(union)} отсутствует в списке подмножеств")
            row[symbol] = index[union]
        targets[i] = row

    if policy == TOTAL:
        materialized = set(targets)
        if any(dead in row.values() for row in targets.values()):
            materialized.add(dead)
            targets[dead] = {symbol: dead for symbol in alphabet}
    else:
        materialized = {initial}
        for row in targets.values():
            materialized.update(row.values())

    order = sorted(materialized)
    labels = {i: get_state_char(position) for position, i in enumerate(order)}
    logger.debug(f"Подмножеств: {len(subsets)}, состояний ДКА: {len(order)}")

    dfa = DFA(alphabet, policy)
    for i in order:
        subset = subsets[i]
        state = DFAState(
            labels[i],
            subset,
            is_final=any(s in final_states for s in subset),
            is_initial=(i == initial),
        )
        for symbol, target in targets[i].items():
            state.transitions[symbol] = labels[target]
        dfa.add_state(state)
        logger.debug(f"{state.label} = {{{', '.join(subset)}}} -> {state.transitions}")

    return dfa
