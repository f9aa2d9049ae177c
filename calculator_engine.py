"""
Motor de la calculadora de escritorio.

Este módulo provee la clase CalculatorEngine que convierte pulsaciones
discretas (dígitos, operadores, borrar, signo, porcentaje, punto) en un
valor de pantalla y un historial de operaciones. No evalúa expresiones:
los operadores se encadenan de izquierda a derecha.

Contrato de interfaz:
    - input_digit(d), input_dot(), input_percent(), toggle_sign()
    - clear_last_char(), clear_display(), clear_all(), press_clear()
    - perform_operation(token)
    - display_value: texto invariante ('.' decimal), nunca vacío
    - history: tupla de entradas, la más reciente primero
"""

from __future__ import annotations

import logging
import math
import re

from history_log import HistoryLog, format_history_entry
from number_text import number_to_text, parse_number, to_fixed
from operations import Operator, apply_operation

log = logging.getLogger("calculator.engine")

_FRACTION_DIGITS_RE = re.compile(r"\.(\d*)")


class CalculatorEngine:
    """Máquina de estados de la calculadora; una instancia por ventana."""

    def __init__(self):
        self.accumulator: float | None = None
        self.display_value = "0"
        self.operator: Operator | None = None
        self.awaiting_new_operand = False
        self._history = HistoryLog()

    # ── Estado de solo lectura ───────────────────────────────────

    @property
    def history(self) -> tuple[str, ...]:
        return self._history.entries

    @property
    def clear_key_label(self) -> str:
        return "C" if self.display_value != "0" else "AC"

    # ── Entrada de operandos ─────────────────────────────────────

    def input_digit(self, digit: int):
        if not isinstance(digit, int) or isinstance(digit, bool) or not 0 <= digit <= 9:
            raise ValueError(f"Dígito inválido: {digit!r}")

        if self.awaiting_new_operand:
            self.display_value = str(digit)
            self.awaiting_new_operand = False
        elif self.display_value == "0":
            self.display_value = str(digit)
        else:
            self.display_value += str(digit)

    def input_dot(self):
        if "." in self.display_value:
            return
        self.display_value += "."
        self.awaiting_new_operand = False

    def input_percent(self):
        current = parse_number(self.display_value)
        if current == 0:
            return

        # Dos decimales más por cada porcentaje para no perder información
        match = _FRACTION_DIGITS_RE.search(self.display_value)
        fraction_digits = len(match.group(1)) if match else 0
        self.display_value = to_fixed(current / 100, fraction_digits + 2)

    def toggle_sign(self):
        self.display_value = number_to_text(parse_number(self.display_value) * -1)

    # ── Borrado ──────────────────────────────────────────────────

    def clear_last_char(self):
        remaining = self.display_value[:-1]
        self.display_value = remaining if remaining not in ("", "-") else "0"

    def clear_display(self):
        self.display_value = "0"

    def clear_all(self):
        """Reinicio completo; el historial se conserva a propósito."""
        self.accumulator = None
        self.display_value = "0"
        self.operator = None
        self.awaiting_new_operand = False

    def press_clear(self):
        """Tecla AC/C: primero borra la pantalla, después todo."""
        if self.display_value != "0":
            self.clear_display()
        else:
            self.clear_all()

    # ── Operadores ───────────────────────────────────────────────

    def perform_operation(self, next_operator):
        """Aplica el operador pendiente y deja ``next_operator`` en espera.

        Raises:
            ValueError: ``next_operator`` no es un operador conocido.
        """
        try:
            next_op = Operator(next_operator)
        except ValueError as exc:
            raise ValueError(f"Operador desconocido: {next_operator!r}") from exc

        input_value = parse_number(self.display_value)

        if self.accumulator is None:
            self.accumulator = input_value
        elif self.operator is not None:
            lhs = self.accumulator
            result = apply_operation(self.operator, lhs, input_value)
            self.accumulator = result
            self.display_value = number_to_text(result)

            if self.operator is not Operator.EQUALS:
                entry = format_history_entry(lhs, self.operator, input_value, result)
                self._history.record(entry)
                log.debug("operación: %s", entry)

            if not math.isfinite(result):
                log.warning("resultado no finito: %s", self.display_value)

        self.awaiting_new_operand = True
        self.operator = next_op
