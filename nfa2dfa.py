#!/usr/bin/env python3
import sys
import argparse

from graphviz import ExecutableNotFound

from automaton import POLICIES, SPARSE, TOTAL
from automaton_errors import AutomatonError, ExponentialBlowupGuard
from automaton_io import format_dfa, parse_nfa_file, parse_nfa_text, write_dfa_file
from determinize import nfa_to_dfa
from dfa_graph import render_dfa_graph
from logging_config import get_logger, setup_logging
from reachability import remove_unreachable_states
from subsets import enumerate_subsets

logger = get_logger(__name__)

DEFAULT_ALPHABET = ("0", "1")
DEFAULT_MAX_STATES = 16


class ConversionConfig:
    def __init__(self, alphabet=DEFAULT_ALPHABET, policy=SPARSE, strict=True, max_states=DEFAULT_MAX_STATES):
        alphabet = list(alphabet)
        if not alphabet:
            raise ValueError("Алфавит не может быть пустым")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError(f"Символы алфавита повторяются: {alphabet}")
        if policy not in POLICIES:
            raise ValueError(f"Неизвестная политика: {policy}, ожидается одна из {POLICIES}")
        if max_states is not None and max_states <= 0:
            raise ValueError("max_states должно быть положительным")
        self.alphabet = alphabet
        self.policy = policy
        self.strict = strict
        self.max_states = max_states


def convert(nfa, config=None):
    """Возвращает (ДКА без недостижимых состояний, канонический список подмножеств)."""
    config = config or ConversionConfig()
    if config.max_states is not None and len(nfa.states) > config.max_states:
        raise ExponentialBlowupGuard(len(nfa.states), config.max_states)

    unknown = [symbol for symbol in nfa.symbols() if symbol not in config.alphabet]
    if unknown:
        logger.warning(f"Символы вне алфавита {config.alphabet} не учитываются: {' '.join(unknown)}")

    subsets = enumerate_subsets(nfa.states, include_empty=(config.policy == TOTAL))
    dfa = nfa_to_dfa(nfa, subsets, config.alphabet, config.policy)
    remove_unreachable_states(dfa)
    return dfa, subsets


def convert_text(text, config=None):
    config = config or ConversionConfig()
    nfa = parse_nfa_text(text, strict=config.strict)
    dfa, _ = convert(nfa, config)
    return format_dfa(dfa)


def convert_file(input_path, output_path, config=None, graph_path=None, show_subsets=False):
    config = config or ConversionConfig()
    nfa = parse_nfa_file(input_path, strict=config.strict)
    logger.info(f"НКА: {len(nfa.states)} состояний, начальное {nfa.initial_state}")

    dfa, subsets = convert(nfa, config)
    if show_subsets:
        logger.info("Подмножества: " + " ".join("{" + ",".join(s) + "}" for s in subsets))
    logger.info(f"ДКА: {' '.join(dfa.labels())}, начальное {dfa.initial_state}")

    if graph_path:
        rendered = render_dfa_graph(dfa, graph_path)
        logger.info(f"Граф ДКА сохранён в {rendered}")
    write_dfa_file(dfa, output_path)
    return dfa


def build_parser():
    parser = argparse.ArgumentParser(description="Детерминизация НКА методом подмножеств")
    parser.add_argument("input_file", help="Имя входного файла с НКА")
    parser.add_argument("output_file", help="Имя выходного файла с ДКА")
    parser.add_argument("-a", "--alphabet", nargs="+", default=list(DEFAULT_ALPHABET),
                        help="Символы алфавита в нужном порядке (по умолчанию: 0 1)")
    parser.add_argument("--policy", choices=POLICIES, default=SPARSE,
                        help="sparse – без мёртвого состояния, total – с мёртвым состоянием")
    parser.add_argument("--lenient", action="store_true",
                        help="Пропускать некорректные строки переходов вместо ошибки")
    parser.add_argument("--max-states", type=int, default=DEFAULT_MAX_STATES,
                        help="Максимальное число состояний НКА (0 – без ограничения)")
    parser.add_argument("--graph", help="Сохранить граф ДКА (png) по указанному пути")
    parser.add_argument("--show-subsets", action="store_true", help="Вывести список подмножеств")
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный журнал")
    parser.add_argument("--log-file", help="Файл журнала")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = "WARNING"
    if args.show_subsets:
        level = "INFO"
    if args.verbose:
        level = "DEBUG"
    setup_logging(level, args.log_file)

    try:
        config = ConversionConfig(
            alphabet=args.alphabet,
            policy=args.policy,
            strict=not args.lenient,
            max_states=args.max_states or None,
        )
    except ValueError as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 2

    try:
        convert_file(args.input_file, args.output_file, config, graph_path=args.graph,
                     show_subsets=args.show_subsets)
    except (AutomatonError, ExecutableNotFound) as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1

    print(f"Преобразование завершено. Результат записан в {args.output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
