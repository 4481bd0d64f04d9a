import os

from graphviz import Digraph


def build_dfa_graph(dfa):
    dot = Digraph(comment="DFA")
    dot.attr(rankdir="LR")

    for state in dfa.states:
        shape = "doublecircle" if state.is_final else "circle"
        dot.node(state.label, shape=shape)

    dot.node("", shape="none")
    dot.edge("", dfa.initial_state)

    # Параллельные дуги между одной парой состояний объединяются в одну
    edges = {}
    for state, symbol, target in dfa.iter_transitions():
        edges.setdefault((state, target), []).append(symbol)
    for (state, target), symbols in edges.items():
        dot.edge(state, target, label=",".join(symbols))
    return dot


def render_dfa_graph(dfa, filename, fmt="png"):
    dot = build_dfa_graph(dfa)
    output_path = os.path.splitext(filename)[0]
    return dot.render(output_path, format=fmt, cleanup=True)
