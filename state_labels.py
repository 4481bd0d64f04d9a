ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def get_state_char(index: int) -> str:
    """
    Возвращает имя состояния ДКА по его номеру: A..Z для 0..25,
    далее Q0, Q1, ... (нумерация Q начинается с нуля).
    """
    if index < 0:
        raise ValueError(f"Номер состояния не может быть отрицательным: {index}")
    if index >= len(ALPHABET):
        return f"Q{index - len(ALPHABET)}"
    return ALPHABET[index]
