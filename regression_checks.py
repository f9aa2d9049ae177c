from calculator_engine import CalculatorEngine
from display_formatter import DisplayFormatter
import sys


# Una letra por tecla: dígitos, operadores, '.', '%', '~' (signo),
# '<' (borrar carácter), 'C' (tecla AC/C), 'A' (borrar todo)
_KEY_ACTIONS = {
	".": lambda engine: engine.input_dot(),
	"%": lambda engine: engine.input_percent(),
	"~": lambda engine: engine.toggle_sign(),
	"<": lambda engine: engine.clear_last_char(),
	"C": lambda engine: engine.press_clear(),
	"A": lambda engine: engine.clear_all(),
}


def _press(engine: CalculatorEngine, key: str) -> None:
	if key.isdigit():
		engine.input_digit(int(key))
	elif key in "+-*/=":
		engine.perform_operation(key)
	elif key in _KEY_ACTIONS:
		_KEY_ACTIONS[key](engine)
	else:
		raise ValueError(f"Tecla desconocida: {key!r}")


def _walk(keys: str, *, locale: str = "en_US"):
	engine = CalculatorEngine()
	formatter = DisplayFormatter(locale)
	states = []

	for key in keys:
		_press(engine, key)
		states.append((key, engine.display_value, formatter.format(engine.display_value)))

	return engine, states


def inspect_states(keys: str, *, locale: str = "en_US", show: int = 0) -> None:
	"""Imprime el estado tras cada tecla y el historial final."""
	engine, states = _walk(keys, locale=locale)

	print("Key inspection")
	print(f"keys:           {keys}")
	print(f"locale:         {locale}")
	print(f"total states:   {len(states)}")

	limit = show if show > 0 else len(states)
	print("states:")
	for i, (key, raw, shown) in enumerate(states[:limit], start=1):
		print(f"  {i}. {key!r:5} raw={raw!r:24} shown={shown!r}")

	print(f"accumulator:    {engine.accumulator}")
	print(f"operator:       {engine.operator}")
	print("history:")
	for entry in engine.history:
		print(f"  {entry}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []
	formatter = DisplayFormatter("en_US")

	engine, _ = _walk("123")
	checks.append(("digits append from fresh state", engine.display_value == "123"))

	engine, _ = _walk("0007")
	checks.append(("leading zero is replaced", engine.display_value == "7"))

	engine, _ = _walk("..")
	checks.append(("second dot is ignored", engine.display_value.count(".") == 1))

	engine, _ = _walk("7+3=")
	checks.append(("chained computation shows result", engine.display_value == "10"))
	checks.append((
		"chained computation records history",
		engine.history == ("7 + 3 = 10",),
	))

	engine, _ = _walk("7+3==")
	checks.append(("repeated equals keeps result", engine.display_value == "10"))
	checks.append(("repeated equals adds no history", len(engine.history) == 1))

	engine, _ = _walk("2*3+4=")
	expected_actual.append(("2*3+4=", "10", engine.display_value))
	checks.append((
		"left-to-right chaining records every step",
		engine.history == ("6 + 4 = 10", "2 * 3 = 6"),
	))

	engine, _ = _walk("1<")
	checks.append(("backspace falls back to zero", engine.display_value == "0"))

	engine, _ = _walk("5~<")
	checks.append(("backspace never leaves a lone minus", engine.display_value == "0"))

	engine, _ = _walk("~")
	checks.append(("sign toggle on zero stays zero", engine.display_value == "0"))

	engine, _ = _walk("7+3=A")
	checks.append((
		"full reset keeps history",
		engine.accumulator is None
		and engine.operator is None
		and engine.display_value == "0"
		and engine.history == ("7 + 3 = 10",),
	))

	engine, _ = _walk("5C")
	checks.append(("clear key first clears display", engine.display_value == "0" and engine.clear_key_label == "AC"))

	engine, _ = _walk("50%")
	expected_actual.append(("50%", "0.50", engine.display_value))

	engine, _ = _walk("12.5%")
	expected_actual.append(("12.5%", "0.125", engine.display_value))

	engine, _ = _walk("1/0=")
	expected_actual.append(("1/0= shown", "∞", formatter.format(engine.display_value)))

	engine, _ = _walk("0/0=")
	expected_actual.append(("0/0= shown", "NaN", formatter.format(engine.display_value)))

	engine, _ = _walk("0.1+0.2=")
	expected_actual.append(("0.1+0.2= raw", "0.30000000000000004", engine.display_value))
	expected_actual.append(("0.1+0.2= shown", "0.3", formatter.format(engine.display_value)))

	expected_actual.append(("format 1.50", "1.50", formatter.format("1.50")))
	expected_actual.append(("format 3.", "3.", formatter.format("3.")))
	expected_actual.append(("format 1234567.5", "1,234,567.5", formatter.format("1234567.5")))
	expected_actual.append((
		"format 1234567.5 de_DE",
		"1.234.567,5",
		DisplayFormatter("de_DE").format("1234567.5"),
	))

	checks.extend(
		(f"{label} matches expected", expected == actual)
		for label, expected, actual in expected_actual
	)

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "7+3=="
	#   python regression_checks.py --inspect "1234.5%" --locale de_DE --show 3
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")

		def _read_arg(flag: str, default: str) -> str:
			if flag not in sys.argv:
				return default
			idx = sys.argv.index(flag)
			try:
				return sys.argv[idx + 1]
			except IndexError:
				raise SystemExit(f"Missing value for {flag}")

		try:
			show = int(_read_arg("--show", "0"))
		except ValueError:
			raise SystemExit("Invalid value for --show")

		inspect_states(keys, locale=_read_arg("--locale", "en_US"), show=show)
	else:
		run_regressions()
