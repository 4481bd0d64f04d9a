from collections import defaultdict

SPARSE = "sparse"
TOTAL = "total"
POLICIES = (SPARSE, TOTAL)


class NFA:
    def __init__(self, states, initial_state, final_states, transitions=None):
        # Порядок states – порядок первого появления во входном файле
        self.states = list(states)
        self.initial_state = initial_state
        self.final_states = list(final_states)
        self.transitions = {state: defaultdict(set) for state in self.states}
        for state, edges in (transitions or {}).items():
            for symbol, targets in edges.items():
                self.transitions[state][symbol].update(targets)

    def add_transition(self, state, symbol, next_state):
        self.transitions[state][symbol].add(next_state)

    def targets(self, state, symbol):
        edges = self.transitions.get(state)
        if edges is None or symbol not in edges:
            return set()
        return edges[symbol]

    def symbols(self):
        """Символы переходов в порядке их первого появления."""
        seen = []
        for state in self.states:
            for symbol in self.transitions[state]:
                if symbol not in seen:
                    seen.append(symbol)
        return seen


class DFAState:
    def __init__(self, label, subset, is_final=False, is_initial=False):
        self.label = label
        self.subset = tuple(subset)
        self.is_final = is_final
        self.is_initial = is_initial
        # symbol -> метка целевого состояния; отсутствие ключа = перехода нет
        self.transitions = {}

    def __repr__(self):
        return f"DFAState({self.label!r}, {self.subset!r})"


class DFA:
    def __init__(self, alphabet, policy=SPARSE):
        if policy not in POLICIES:
            raise ValueError(f"Неизвестная политика: {policy}")
        self.alphabet = list(alphabet)
        self.policy = policy
        self.states = []
        self.initial_state = None
        self.final_states = []

    def add_state(self, state: DFAState):
        self.states.append(state)
        if state.is_final:
            self.final_states.append(state.label)
        if state.is_initial:
            self.initial_state = state.label

    def labels(self):
        return [state.label for state in self.states]

    def get_state(self, label):
        for state in self.states:
            if state.label == label:
                return state
        raise KeyError(label)

    def iter_transitions(self):
        """(state, symbol, target) в порядке состояний, затем в порядке алфавита."""
        for state in self.states:
            for symbol in self.alphabet:
                if symbol in state.transitions:
                    yield state.label, symbol, state.transitions[symbol]
