"""Historial de operaciones completadas, de la más reciente a la más antigua."""

from number_text import number_to_text


def format_history_entry(lhs: float, operator, rhs: float, result: float) -> str:
    """Texto ``"<lhs> <op> <rhs> = <resultado>"`` con valores sin localizar."""
    return (
        f"{number_to_text(lhs)} {operator} {number_to_text(rhs)}"
        f" = {number_to_text(result)}"
    )


class HistoryLog:
    """Secuencia de solo inserción; la entrada 0 es la más reciente.

    Sólo el motor añade entradas. La interfaz lee mediante iteración,
    índices o ``entries``.
    """

    def __init__(self):
        self._entries: list[str] = []

    def record(self, entry: str):
        self._entries.insert(0, entry)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

    def __getitem__(self, index):
        return self._entries[index]
