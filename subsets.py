def sort_subsets(subsets, base_states):
    """
    Упорядочивает подмножества: сначала по мощности, затем по строке,
    склеенной из имён состояний в базовом порядке. Последний ключ (позиции
    состояний) различает случаи вроде ("A", "BC") и ("AB", "C").
    """
    position = {state: i for i, state in enumerate(base_states)}

    def key(subset):
        return (len(subset), "".join(subset), tuple(position[s] for s in subset))

    return sorted(subsets, key=key)


def enumerate_subsets(base_states, include_empty=True):
    """
    Строит все подмножества состояний НКА (2^n штук вместе с пустым).

    Каждое подмножество – кортеж имён в базовом порядке. Пустое подмножество
    после сортировки всегда получает индекс 0. Перебор экспоненциальный,
    ограничивать размер НКА должен вызывающий код.
    """
    base_states = list(dict.fromkeys(base_states))
    result = []

    # Рекурсивный выбор для каждого состояния: включить или пропустить
    def subsets(rest, acc):
        if not rest:
            if acc or include_empty:
                result.append(tuple(acc))
            return
        subsets(rest[1:], acc + [rest[0]])
        subsets(rest[1:], acc)

    subsets(base_states, [])
    return sort_subsets(result, base_states)


def subset_index(subsets):
    """Отображение frozenset(подмножество) -> канонический индекс."""
    index = {}
    for i, subset in enumerate(subsets):
        index.setdefault(frozenset(subset), i)
    return index
