"""Estado de entrada de la calculadora, independiente de tkinter.

Acumula las pulsaciones en una única cadena y aplica las reglas de
edición: reemplazo del último operador, limpieza del indicador
"Error" y evaluación al pulsar "=".
"""

from calculator_engine import CalculatorEngine
from formula_evaluator import ParseError


ERROR_TOKEN = "Error"
OPERATORS = "+-*/%"

# Teclas especiales (keysym de tk) → acción
_KEYSYM_ACTIONS = {
    "BackSpace": "backspace",
    "Delete":    "clear",
    "Escape":    "clear",
    "Return":    "equals",
    "KP_Enter":  "equals",
}


def key_to_action(keysym: str, char: str):
    """Traduce una pulsación de teclado a una acción, o None si se ignora."""
    if keysym in _KEYSYM_ACTIONS:
        return _KEYSYM_ACTIONS[keysym]
    if char == "=":
        return "equals"
    if char in (".", ","):
        return "insert:."
    if char and char in "0123456789":
        return f"insert:{char}"
    if char and char in OPERATORS:
        return f"operator:{char}"
    if char in ("c", "C"):
        return "clear"
    return None


class ExpressionInput:
    """Texto de la pantalla y reglas para modificarlo."""

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else CalculatorEngine()
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    # ── Despacho de acciones ─────────────────────────────────────

    def dispatch(self, action: str) -> str:
        """Aplica una acción del teclado o de un botón y devuelve el texto."""
        if action == "clear":
            self.clear()
        elif action == "backspace":
            self.backspace()
        elif action == "equals":
            self.calculate()
        elif action.startswith("operator:"):
            self.push_operator(action[9:])
        elif action.startswith("insert:"):
            self.push_text(action[7:])
        else:
            raise ValueError(f"Acción desconocida: {action}")
        return self._text

    # ── Edición ──────────────────────────────────────────────────

    def _clear_if_error(self):
        if self._text == ERROR_TOKEN:
            self._text = ""

    def push_text(self, text: str):
        """Añade dígitos ("7", "00") o el punto decimal."""
        self._clear_if_error()
        self._text += text

    def push_operator(self, op: str):
        if op not in OPERATORS:
            raise ValueError(f"Operador no permitido: {op}")
        self._clear_if_error()
        current = self._text

        # Solo '-' puede iniciar la expresión (número negativo)
        if not current:
            if op == "-":
                self._text = op
            return
        if current == "-":
            return

        if current[-1] in OPERATORS:
            self._text = current[:-1] + op
        else:
            self._text = current + op

    def backspace(self):
        if self._text and self._text != ERROR_TOKEN:
            self._text = self._text[:-1]

    def clear(self):
        self._text = ""

    # ── Cálculo ──────────────────────────────────────────────────

    def calculate(self):
        expr = self._text.strip()
        if not expr:
            return
        try:
            self._text = self.engine.evaluate(expr)
        except ParseError:
            self._text = ERROR_TOKEN
