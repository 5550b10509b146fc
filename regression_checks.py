from calculator_engine import CalculatorEngine, format_result
from expression_input import ERROR_TOKEN, ExpressionInput
from formula_evaluator import ParseError, evaluate
import math
import sys


def _outcome(expr: str) -> str:
	"""Texto que mostraría la pantalla para ``expr``."""
	try:
		return format_result(evaluate(expr))
	except ParseError:
		return ERROR_TOKEN


def _press(*actions: str) -> str:
	entry = ExpressionInput(CalculatorEngine())
	for action in actions:
		entry.dispatch(action)
	return entry.text


def collect_checks():
	"""Devuelve (nombre, esperado, obtenido) para cada caso de regresión."""
	cases = [
		("suma simple", "3+4", "7"),
		("paréntesis", "2*(3+4)", "14"),
		("precedencia", "3+4*(2-1)", "7"),
		("doble signo menos", "--5", "5"),
		("signos apilados", "-+-5", "5"),
		("división no entera", "10/4", "2.5"),
		("módulo", "7%2", "1"),
		("módulo sigue al dividendo", "-7%2", "-1"),
		("asociatividad izquierda", "8-3-2", "3"),
		("asociatividad izquierda en división", "8/4/2", "1"),
		("punto decimal al final", "5.", "5"),
		("punto decimal al inicio", ".5", "0.5"),
		("paréntesis sin cerrar", "(1+2", "3"),
		("paréntesis anidados sin cerrar", "((2*(3", "6"),
		("espacios ignorados", " 1 + 2 * 3 ", "7"),
		("división por cero", "5/0", "Infinity"),
		("división negativa por cero", "-5/0", "-Infinity"),
		("cero entre cero", "0/0", "NaN"),
		("módulo por cero", "5%0", "NaN"),
		("suma de decimales", "0.1+0.2", "0.30000000000000004"),
		("expresión vacía", "", ERROR_TOKEN),
		("solo espacios", "   ", ERROR_TOKEN),
		("texto sobrante", "3 3", ERROR_TOKEN),
		("literal con dos puntos", "1.2.3", ERROR_TOKEN),
		("punto aislado", ".", ERROR_TOKEN),
		("operador final", "3+", ERROR_TOKEN),
		("carácter desconocido", "3+a", ERROR_TOKEN),
		("paréntesis de cierre suelto", "1+2)", ERROR_TOKEN),
	]
	checks = [(name, expected, _outcome(expr)) for name, expr, expected in cases]

	checks.append((
		"operador reemplaza al anterior",
		"7*2",
		_press("insert:7", "operator:+", "operator:*", "insert:2"),
	))
	checks.append((
		"error se limpia con el siguiente dígito",
		"4",
		_press("insert:1", "insert:.", "insert:.", "equals", "insert:4"),
	))
	checks.append((
		"cálculo completo desde el teclado",
		"-14",
		_press("operator:-", "insert:7", "operator:*", "insert:2", "equals"),
	))
	return checks


def run_regressions():
	checks = collect_checks()
	failed = [name for name, expected, actual in checks if expected != actual]

	for name, expected, actual in checks:
		status = "OK" if expected == actual else "FAIL"
		print(f"{name}: {status}")
		if expected != actual:
			print(f"  expected: {expected}")
			print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


def inspect_expression(expr: str):
	"""Muestra el valor crudo, el texto formateado o el punto del error."""
	print(f"expression: {expr!r}")
	try:
		value = evaluate(expr)
	except ParseError as exc:
		print(f"error:      {exc.message}")
		print(f"            {expr}")
		print(f"            {' ' * exc.position}^")
		return
	print(f"value:      {value!r}")
	print(f"formatted:  {format_result(value)}")
	if math.isnan(value) or math.isinf(value):
		print("note:       valor especial IEEE-754, no es un error")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "3+4*(2-1"
	if "--inspect" in sys.argv:
		try:
			expr = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing expression after --inspect")
		inspect_expression(expr)
	else:
		run_regressions()
