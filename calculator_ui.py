"""
Interfaz gráfica de la calculadora.

Usa tkinter. Toda la lógica de edición vive en ExpressionInput;
aquí solo se construyen los widgets y se conectan los eventos.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine
from expression_input import ExpressionInput, key_to_action


log = logging.getLogger(__name__)

COLOR_FACTOR = 0.7


# ═════════════════════════════════════════════════════════════════
#  Utilidades de color
# ═════════════════════════════════════════════════════════════════

def _parse_hex(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def _to_hex(rgb) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def darker(color: str) -> str:
    """Oscurece el color multiplicando cada canal por COLOR_FACTOR."""
    return _to_hex(max(int(c * COLOR_FACTOR), 0) for c in _parse_hex(color))


def brighter(color: str) -> str:
    """Aclara el color; el negro puro pasa a un gris mínimo."""
    rgb = _parse_hex(color)
    floor = int(1.0 / (1.0 - COLOR_FACTOR))
    if rgb == (0, 0, 0):
        return _to_hex((floor, floor, floor))
    channels = []
    for c in rgb:
        if 0 < c < floor:
            c = floor
        channels.append(min(int(c / COLOR_FACTOR), 255))
    return _to_hex(channels)


# ═════════════════════════════════════════════════════════════════
#  Widget: botón con realce al pasar y al pulsar
# ═════════════════════════════════════════════════════════════════

class StyledButton:
    """tk.Button plano que se aclara al pasar el ratón y se oscurece al pulsar."""

    def __init__(self, parent, text: str, bg: str, fg: str, command, **kw):
        self._bg = bg
        self._button = tk.Button(
            parent, text=text, bg=bg, fg=fg,
            activebackground=brighter(bg), activeforeground=fg,
            relief="flat", bd=0, highlightthickness=0,
            cursor="hand2", command=command, **kw,
        )
        self._button.bind("<Enter>", lambda _e: self._paint(brighter(self._bg)))
        self._button.bind("<Leave>", lambda _e: self._paint(self._bg))
        self._button.bind("<ButtonPress-1>", lambda _e: self._paint(darker(self._bg)))
        self._button.bind("<ButtonRelease-1>", lambda _e: self._paint(self._bg))

    @property
    def widget(self):
        return self._button

    def _paint(self, color: str):
        self._button.config(bg=color, activebackground=color)


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paletas de colores ───────────────────────────────────────

    THEMES = {
        "dark": {
            "bg":         "#1C1C1E",
            "display_bg": "#242426",
            "display_fg": "#FFFFFF",
            "num":        "#2C2C2E",
            "num_fg":     "#FFFFFF",
            "op":         "#FF9500",
            "op_fg":      "#FFFFFF",
        },
        "light": {
            "bg":         "#F2F2F7",
            "display_bg": "#FFFFFF",
            "display_fg": "#1C1C1E",
            "num":        "#D1D1D6",
            "num_fg":     "#1C1C1E",
            "op":         "#FF9500",
            "op_fg":      "#FFFFFF",
        },
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)

    KEYPAD = [
        [("C",      "clear",      "num"), ("⌫", "backspace", "num"),
         ("%",      "operator:%", "num"), ("÷", "operator:/", "op")],
        [("7",      "insert:7",   "num"), ("8", "insert:8", "num"),
         ("9",      "insert:9",   "num"), ("×", "operator:*", "op")],
        [("4",      "insert:4",   "num"), ("5", "insert:5", "num"),
         ("6",      "insert:6",   "num"), ("−", "operator:-", "op")],
        [("1",      "insert:1",   "num"), ("2", "insert:2", "num"),
         ("3",      "insert:3",   "num"), ("+", "operator:+", "op")],
        [("00",     "insert:00",  "num"), ("0", "insert:0", "num"),
         (".",      "insert:.",   "num"), ("=", "equals", "op")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None, theme: str = "dark"):
        self.root = root
        self.C = self.THEMES.get(theme, self.THEMES["dark"])
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.input = ExpressionInput(
            engine if engine is not None else CalculatorEngine()
        )

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()

        self.root.focus_set()
        log.info("Calculadora iniciada (tema %s)", theme)

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_display = tkfont.Font(family="Segoe UI", size=28)
        self._f_btn     = tkfont.Font(family="Segoe UI", size=16)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=10, pady=5)
        frame.pack(fill="x", padx=25, pady=(30, 20))

        self.display_var = tk.StringVar()
        self.display = tk.Entry(
            frame, textvariable=self.display_var, state="readonly",
            font=self._f_display, fg=self.C["display_fg"],
            readonlybackground=self.C["display_bg"],
            relief="flat", justify="right", bd=0,
            takefocus=0,
        )
        self.display.pack(fill="x", ipady=6)

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=20, pady=(0, 20))

        for c in range(len(self.KEYPAD[0])):
            frame.columnconfigure(c, weight=1, uniform="key")
        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1, uniform="row")

        for r, row_def in enumerate(self.KEYPAD):
            for c, (text, action, kind) in enumerate(row_def):
                btn = StyledButton(
                    frame, text, bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    command=lambda a=action: self._on_key(a),
                    font=self._f_btn, takefocus=0,
                )
                btn.widget.grid(row=r, column=c, sticky="nsew",
                                padx=5, pady=5)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        action = key_to_action(event.keysym, event.char)
        if action is None:
            return None
        self._on_key(action)
        return "break"

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        self.display_var.set(self.input.dispatch(action))
