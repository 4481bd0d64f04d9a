"""
Pytest fixtures for the converter tests.
"""

import logging

import pytest

from automaton_io import parse_nfa_text


@pytest.fixture(autouse=True)
def reset_logging():
    """main() reconfigures the package logger; restore propagation for caplog."""
    yield
    logger = logging.getLogger("nfa2dfa")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def simple_text():
    """A loops on 0, goes to B on 1; B loops on both symbols."""
    return "A B\nA\nB\nA 0 A\nA 1 B\nB 0 B\nB 1 B\n"


@pytest.fixture
def missing_transition_text():
    """A has no transition on 1."""
    return "A B\nA\nB\nA 0 B\nB 0 B\nB 1 A\n"


@pytest.fixture
def single_state_text():
    return "A\nA\nA\nA 0 A\nA 1 A\n"


@pytest.fixture
def second_to_last_text():
    """Classic NFA: strings whose second-to-last symbol is 1."""
    return (
        "q0 q1 q2\n"
        "q0\n"
        "q2\n"
        "q0 0 q0\n"
        "q0 1 q0\n"
        "q0 1 q1\n"
        "q1 0 q2\n"
        "q1 1 q2\n"
    )


@pytest.fixture
def simple_nfa(simple_text):
    return parse_nfa_text(simple_text)


@pytest.fixture
def second_to_last_nfa(second_to_last_text):
    return parse_nfa_text(second_to_last_text)
