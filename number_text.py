"""Conversión entre números y el texto invariante que guarda la pantalla.

El motor siempre trabaja con '.' como separador decimal. La
localización es responsabilidad exclusiva de ``display_formatter``.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Suficiente para representar exactamente cualquier float finito
EXACT_PRECISION = 1100

# Por encima de este valor el texto pasa a notación exponencial
PLAIN_UPPER_LIMIT = 1e21

_NUMBER_PREFIX_RE = re.compile(
    r"^\s*(?P<number>[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_number(text: str) -> float:
    """Lee el prefijo numérico más largo de ``text``.

    Devuelve NaN si el texto no empieza por un número, igual que
    la lectura tolerante de la pantalla: ``"3."`` -> 3, ``"1e+"`` -> 1.
    """
    match = _NUMBER_PREFIX_RE.match(text)
    if match is None:
        return math.nan
    return float(match.group("number"))


def number_to_text(value: float) -> str:
    """Texto más corto que representa ``value`` sin ambigüedad.

    Enteros sin '.0', decimales planos entre 1e-6 y 1e21 y notación
    exponencial (``1e+21``, ``1.5e-7``) fuera de ese rango.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    decimal_tuple = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in decimal_tuple.digits)
    k = len(digits)
    # Posición del punto decimal respecto al primer dígito
    n = decimal_tuple.exponent + k

    if k <= n <= 21:
        return f"{sign}{digits}{'0' * (n - k)}"
    if 0 < n <= 21:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"

    exponent = n - 1
    exp_text = f"e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    if k == 1:
        return f"{sign}{digits}{exp_text}"
    return f"{sign}{digits[0]}.{digits[1:]}{exp_text}"


def to_fixed(value: float, digits: int) -> str:
    """Texto en coma fija con exactamente ``digits`` decimales.

    Redondea el valor binario exacto alejándose de cero en los empates.
    """
    if not math.isfinite(value) or abs(value) >= PLAIN_UPPER_LIMIT:
        return number_to_text(value)

    if value == 0:
        value = 0.0  # descarta el -0

    with localcontext() as ctx:
        ctx.prec = EXACT_PRECISION
        quantum = Decimal(1).scaleb(-digits)
        fixed = Decimal(abs(value)).quantize(quantum, rounding=ROUND_HALF_UP)

    text = f"{fixed:f}"
    return f"-{text}" if value < 0 else text
