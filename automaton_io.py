import os
import tempfile

from automaton import NFA
from automaton_errors import InvalidFileContents, InvalidFileFormat, UnknownStateReference
from logging_config import get_logger

logger = get_logger(__name__)


def parse_nfa_text(text, strict=True):
    """
    Разбирает текстовое описание НКА.

    Формат:
      - Строка 1: состояния через пробел (порядок первого появления сохраняется).
      - Строка 2: начальное состояние.
      - Строка 3: конечные состояния через пробел (может быть пустой).
      - Строка 4 и далее: "<состояние> <символ> <следующее состояние>".

    В строгом режиме (strict=True) строка перехода, в которой меньше трёх
    слов, считается ошибкой формата; в нестрогом – пропускается с
    предупреждением. Ссылка на необъявленное состояние – ошибка в обоих режимах.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidFileContents("файл пуст или не является текстом")

    lines = [line.strip() for line in text.split("\n")]
    if len(lines) < 4:
        raise InvalidFileFormat(f"ожидается не менее 4 строк, получено {len(lines)}")

    states = list(dict.fromkeys(lines[0].split()))
    if not states:
        raise InvalidFileFormat("не заданы состояния", line_number=1)
    declared = set(states)

    initial = lines[1].split()
    if len(initial) != 1:
        raise InvalidFileFormat("ожидается ровно одно начальное состояние", line_number=2)
    initial_state = initial[0]
    if initial_state not in declared:
        raise UnknownStateReference(initial_state, line_number=2)

    final_states = list(dict.fromkeys(lines[2].split()))
    for state in final_states:
        if state not in declared:
            raise UnknownStateReference(state, line_number=3)

    nfa = NFA(states, initial_state, final_states)
    for line_number, line in enumerate(lines[3:], start=4):
        if not line:
            continue
        parts = line.split()
        if len(parts) < 3:
            if strict:
                raise InvalidFileFormat(f"некорректный переход: '{line}'", line_number=line_number)
            logger.warning(f"Строка {line_number} пропущена: '{line}'")
            continue
        current_state, char, next_state = parts[:3]
        for state in (current_state, next_state):
            if state not in declared:
                raise UnknownStateReference(state, line_number=line_number)
        nfa.add_transition(current_state, char, next_state)

    return nfa


def parse_nfa_file(path, strict=True):
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidFileContents(f"не удалось прочитать {path}: {e}") from e
    return parse_nfa_text(text, strict=strict)


def format_dfa(dfa):
    lines = [
        " ".join(dfa.labels()),
        dfa.initial_state,
        " ".join(dfa.final_states),
    ]
    for state, symbol, target in dfa.iter_transitions():
        lines.append(f"{state} {symbol} {target}")
    return "\n".join(lines) + "\n"


def write_dfa_file(dfa, path):
    """Записывает ДКА через временный файл, чтобы не оставить недописанный результат."""
    text = format_dfa(dfa)
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".nfa2dfa-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
