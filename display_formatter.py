"""
Formato de pantalla para la calculadora de escritorio.

Convierte el texto invariante del motor (``display_value``) en el
texto que ve el usuario: separadores de miles y decimal según la
configuración regional, como máximo 6 decimales, y conservando los
ceros finales y el punto que el usuario ya escribió ("1.50", "3.").

Contrato de interfaz:
    - format(raw: str) -> str
    - locale: babel.Locale usado para los símbolos numéricos
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from babel import Locale, default_locale
from babel.numbers import format_decimal, get_decimal_symbol

from number_text import EXACT_PRECISION, parse_number

FALLBACK_LOCALE = "en_US"

_DECIMAL_TAIL_RE = re.compile(r"\.\d*?(0*)$")
_NON_ZERO_DIGIT_RE = re.compile(r"[1-9]")


def resolve_locale(identifier=None) -> Locale:
    """Devuelve el ``Locale`` de Babel para ``identifier``.

    Acepta identificadores con guion ("es-MX") o guion bajo ("es_MX").
    Sin identificador se usa la configuración regional del entorno.

    Raises:
        babel.UnknownLocaleError: la configuración regional no existe.
        ValueError: el identificador está mal formado.
    """
    if isinstance(identifier, Locale):
        return identifier
    if not identifier:
        identifier = default_locale("LC_NUMERIC") or FALLBACK_LOCALE
    return Locale.parse(identifier.replace("-", "_"))


class DisplayFormatter:
    """Da formato regional al valor de pantalla sin perder lo escrito."""

    MAX_FRACTION_DIGITS = 6

    INFINITY_TEXT = "∞"
    NEGATIVE_INFINITY_TEXT = "-∞"
    NAN_TEXT = "NaN"

    def __init__(self, locale=None):
        self._locale = resolve_locale(locale)
        self._decimal_symbol = get_decimal_symbol(self._locale)
        self._quantum = Decimal(1).scaleb(-self.MAX_FRACTION_DIGITS)

    @property
    def locale(self) -> Locale:
        return self._locale

    # ── Formato principal ────────────────────────────────────────

    def format(self, raw: str) -> str:
        value = parse_number(raw)
        if not math.isfinite(value):
            return self._format_non_finite(value)

        formatted = self._format_grouped(value)

        # Recuperar ceros finales y punto que el formato regional descarta
        match = _DECIMAL_TAIL_RE.search(raw)
        if match:
            tail, zeros = match.group(0), match.group(1)
            if _NON_ZERO_DIGIT_RE.search(tail):
                formatted += zeros
            else:
                formatted += self._decimal_symbol + tail[1:]

        return formatted

    def _format_grouped(self, value: float) -> str:
        with localcontext() as ctx:
            ctx.prec = EXACT_PRECISION
            rounded = Decimal(abs(value)).quantize(
                self._quantum, rounding=ROUND_HALF_UP
            )
            if value < 0 and rounded:
                rounded = -rounded
            return format_decimal(
                rounded.normalize(),
                locale=self._locale,
                decimal_quantization=False,
            )

    def _format_non_finite(self, value: float) -> str:
        if math.isnan(value):
            return self.NAN_TEXT
        return self.INFINITY_TEXT if value > 0 else self.NEGATIVE_INFINITY_TEXT


def format_display(raw: str, locale=None) -> str:
    """Atajo funcional de ``DisplayFormatter(locale).format(raw)``."""
    return DisplayFormatter(locale).format(raw)
