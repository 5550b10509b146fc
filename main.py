"""Punto de entrada de la calculadora."""

import logging
import os
import tkinter as tk

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp


WINDOW_GEOMETRY = "350x500"
THEME = os.getenv("CALC_THEME", "dark")
LOG_LEVEL = os.getenv("CALC_LOG_LEVEL", "WARNING").upper()


def _setup_logging():
    level = getattr(logging, LOG_LEVEL, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(level)
    if logger.handlers:
        return logger  # ya configurado

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    )
    logger.addHandler(handler)
    return logger


def main():
    _setup_logging()
    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    CalculatorApp(root, engine=CalculatorEngine(), theme=THEME)
    root.mainloop()


if __name__ == "__main__":
    main()
