class AutomatonError(Exception):
    """Базовая ошибка преобразования автомата."""


class InvalidFileContents(AutomatonError):
    pass


class InvalidFileFormat(AutomatonError):
    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f"строка {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class UnknownStateReference(AutomatonError):
    def __init__(self, state, line_number=None):
        message = f"состояние '{state}' не объявлено в первой строке"
        if line_number is not None:
            message = f"строка {line_number}: {message}"
        super().__init__(message)
        self.state = state
        self.line_number = line_number


class UndeterminableInitialState(AutomatonError):
    def __init__(self, state):
        super().__init__(f"не найдено подмножество {{{state}}} для начального состояния")
        self.state = state


class ExponentialBlowupGuard(AutomatonError):
    def __init__(self, state_count, limit):
        super().__init__(
            f"слишком много состояний НКА: {state_count} (допустимо не более {limit}), "
            f"число подмножеств растёт как 2^n"
        )
        self.state_count = state_count
        self.limit = limit


class AutomatonInvariantError(AutomatonError):
    """Нарушен инвариант построенного автомата (ошибка в программе, а не во входных данных)."""
