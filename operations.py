"""Tabla de operadores binarios de la calculadora de escritorio."""

import math
from enum import Enum


class Operator(str, Enum):
    """Conjunto cerrado de operadores que acepta el motor."""

    DIVIDE = "/"
    MULTIPLY = "*"
    ADD = "+"
    SUBTRACT = "-"
    EQUALS = "="

    def __str__(self) -> str:
        return self.value


def _divide(lhs: float, rhs: float) -> float:
    # Semántica IEEE: dividir entre cero no lanza excepción
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


OPERATIONS = {
    Operator.DIVIDE: _divide,
    Operator.MULTIPLY: lambda lhs, rhs: lhs * rhs,
    Operator.ADD: lambda lhs, rhs: lhs + rhs,
    Operator.SUBTRACT: lambda lhs, rhs: lhs - rhs,
    # Identidad sobre el operando derecho: '=' repetido no reencadena
    Operator.EQUALS: lambda _lhs, rhs: rhs,
}


def apply_operation(token, lhs: float, rhs: float) -> float:
    """Combina ``lhs`` y ``rhs`` con el operador indicado.

    Raises:
        ValueError: el token no pertenece a la tabla de operadores.
    """
    try:
        operator = Operator(token)
    except ValueError as exc:
        raise ValueError(f"Operador desconocido: {token!r}") from exc
    return OPERATIONS[operator](lhs, rhs)
