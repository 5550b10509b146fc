"""Parseo y evaluación de expresiones aritméticas para la calculadora.

Analizador descendente recursivo sin fase de tokenización: recorre la
cadena carácter a carácter y calcula el valor en la misma pasada.

Gramática (asociativa a la izquierda en cada nivel):

    expresión := término (('+' | '-') término)*
    término   := factor (('*' | '/' | '%') factor)*
    factor    := ('+' | '-') factor | '(' expresión ')' | número
    número    := dígitos con a lo sumo un punto decimal ("5." y ".5" valen)

Un ')' ausente se tolera: "(1+2" vale 3.
"""

import math


_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = _DIGITS | {"."}


class ParseError(ValueError):
    """Error único del evaluador: gramática violada o literal inválido."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (posición {position})")
        self.message = message
        self.position = position


# ── Aritmética IEEE-754 ──────────────────────────────────────────
#  Python lanza ZeroDivisionError con floats; aquí x/0 da ±inf
#  y 0/0 o x%0 dan NaN.

def _divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _remainder(a: float, b: float) -> float:
    if b == 0.0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


# ── Cursor de análisis ───────────────────────────────────────────

class _Cursor:
    """Estado transitorio de una sola evaluación."""

    def __init__(self, text: str):
        self._text = text
        self.position = -1
        self.current = None
        self._advance()

    def _advance(self):
        self.position += 1
        if self.position < len(self._text):
            self.current = self._text[self.position]
        else:
            self.current = None

    def _skip_whitespace(self):
        while self.current is not None and self.current.isspace():
            self._advance()

    def _eat(self, char: str) -> bool:
        self._skip_whitespace()
        if self.current == char:
            self._advance()
            return True
        return False

    def parse(self) -> float:
        value = self._expression()
        self._skip_whitespace()
        if self.current is not None:
            raise ParseError(f"Carácter inesperado '{self.current}'",
                             self.position)
        return value

    def _expression(self) -> float:
        value = self._term()
        while True:
            if self._eat("+"):
                value += self._term()
            elif self._eat("-"):
                value -= self._term()
            else:
                return value

    def _term(self) -> float:
        value = self._factor()
        while True:
            if self._eat("*"):
                value *= self._factor()
            elif self._eat("/"):
                value = _divide(value, self._factor())
            elif self._eat("%"):
                value = _remainder(value, self._factor())
            else:
                return value

    def _factor(self) -> float:
        if self._eat("+"):
            return +self._factor()
        if self._eat("-"):
            return -self._factor()

        if self._eat("("):
            value = self._expression()
            self._eat(")")
            return value

        if self.current is None:
            raise ParseError("Fin de expresión inesperado", self.position)
        if self.current not in _NUMBER_CHARS:
            raise ParseError(f"Carácter inesperado '{self.current}'",
                             self.position)
        return self._number()

    def _number(self) -> float:
        start = self.position
        while self.current is not None and self.current in _NUMBER_CHARS:
            self._advance()
        literal = self._text[start:self.position]
        try:
            return float(literal)
        except ValueError as exc:
            raise ParseError(f"Número inválido '{literal}'", start) from exc


def evaluate(expression: str) -> float:
    """Evalúa ``expression`` y devuelve su valor como float.

    Los espacios entre símbolos se ignoran. NaN e infinito son
    resultados válidos, no errores.

    Raises:
        ParseError: expresión vacía, carácter inesperado, literal
            numérico inválido, texto sobrante tras la expresión o
            anidamiento más profundo que el límite de recursión.
    """
    if not expression or not expression.strip():
        raise ParseError("Expresión vacía", 0)
    cursor = _Cursor(expression)
    try:
        return cursor.parse()
    except RecursionError as exc:
        raise ParseError("Expresión demasiado anidada", cursor.position) from exc

