"""
Motor de cálculo para la calculadora.

Este módulo provee la clase CalculatorEngine, que evalúa la
expresión con el analizador descendente de formula_evaluator y
da formato al resultado para la pantalla.

Contrato de interfaz:
    - evaluate(expression: str) -> str
    - format_result(value: float) -> str
"""

import logging
import math

from formula_evaluator import ParseError, evaluate


log = logging.getLogger(__name__)

_LONG_MIN = -(2 ** 63)
_LONG_MAX = 2 ** 63


def format_result(value: float) -> str:
    """Convierte el resultado numérico en texto para la pantalla.

    Los valores enteros (dentro del rango de 64 bits) se muestran sin
    parte decimal; el resto usa la representación más corta de Python.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and _LONG_MIN <= value < _LONG_MAX:
        return str(int(value))
    return repr(value)


class CalculatorEngine:
    """Evalúa expresiones aritméticas y devuelve el texto a mostrar."""

    # ── Evaluación principal ─────────────────────────────────────

    def evaluate(self, expression: str) -> str:
        """Evalúa la expresión y devuelve el resultado como cadena.

        Raises:
            ParseError: expresión mal formada.
        """
        try:
            value = evaluate(expression)
        except ParseError as exc:
            log.debug("Expresión rechazada %r: %s", expression, exc)
            raise
        return format_result(value)
