"""
Interfaz gráfica de la calculadora de escritorio.

Usa tkinter. Cada pulsación invoca una única acción del motor y, al
volver, se pinta de nuevo la pantalla y el historial con el estado
resultante. Toda la lógica numérica vive en CalculatorEngine.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine
from display_formatter import DisplayFormatter

log = logging.getLogger("calculator.ui")


# ═════════════════════════════════════════════════════════════════
#  Acciones y atajos de teclado
# ═════════════════════════════════════════════════════════════════

_CHAR_ACTIONS = {
    "+": "op:+",
    "-": "op:-",
    "*": "op:*",
    "/": "op:/",
    "=": "op:=",
    ".": "dot",
    ",": "dot",
    "%": "percent",
}

_KEYSYM_ACTIONS = {
    "Return": "op:=",
    "KP_Enter": "op:=",
    "BackSpace": "backspace",
    "Escape": "clear",
    "F9": "sign",
}


def action_for_key(char: str, keysym: str):
    """Traduce un evento de teclado a una acción del teclado numérico."""
    if keysym in _KEYSYM_ACTIONS:
        return _KEYSYM_ACTIONS[keysym]
    if len(char) == 1 and char in "0123456789":
        return f"digit:{char}"
    return _CHAR_ACTIONS.get(char)


def dispatch_action(engine: CalculatorEngine, action: str):
    """Ejecuta en el motor la acción asociada a una tecla.

    Raises:
        ValueError: la acción no existe.
    """
    if action == "clear":
        engine.press_clear()
    elif action == "sign":
        engine.toggle_sign()
    elif action == "backspace":
        engine.clear_last_char()
    elif action == "dot":
        engine.input_dot()
    elif action == "percent":
        engine.input_percent()
    elif action.startswith("digit:"):
        engine.input_digit(int(action[6:]))
    elif action.startswith("op:"):
        engine.perform_operation(action[3:])
    else:
        raise ValueError(f"Acción desconocida: {action}")


def fit_scale(container_width: float, text_width: float, current_scale: float) -> float:
    """Escala para que un texto de ``text_width`` quepa en el contenedor.

    Reduce cuando no cabe y vuelve a 1 en cuanto vuelve a caber.
    """
    if text_width <= 0:
        return current_scale

    actual_scale = container_width / text_width
    if actual_scale == current_scale:
        return current_scale
    if actual_scale < 1:
        return actual_scale
    if current_scale < 1:
        return 1.0
    return current_scale


# ═════════════════════════════════════════════════════════════════
#  Widget: texto de pantalla que se encoge para caber
# ═════════════════════════════════════════════════════════════════

class ScalingText:
    """Label de solo lectura cuya fuente se reduce si el texto no cabe."""

    MIN_FONT_SIZE = 8

    def __init__(self, parent, base_font: tkfont.Font, **kw):
        self._base_font = base_font
        self._font = base_font.copy()
        self._scale = 1.0
        kw.setdefault("anchor", "e")
        self._label = tk.Label(parent, text="0", font=self._font, width=1, **kw)
        self._label.bind("<Configure>", lambda _e: self._rescale())

    @property
    def widget(self):
        return self._label

    @property
    def scale(self) -> float:
        return self._scale

    def set_text(self, text: str):
        self._label.config(text=text)
        self._rescale()

    def get_text(self) -> str:
        return self._label.cget("text")

    def _rescale(self):
        container_width = self._label.winfo_width()
        if container_width <= 1:
            # Todavía sin geometría asignada
            return

        # Se mide con la fuente base, igual que el ancho sin escalar
        text_width = self._base_font.measure(self.get_text())
        scale = fit_scale(container_width, text_width, self._scale)
        if scale == self._scale:
            return

        self._scale = scale
        base_size = abs(self._base_font.actual("size"))
        self._font.configure(size=max(self.MIN_FONT_SIZE, int(base_size * scale)))


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora de escritorio."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "func":       "#45475A",
        "func_fg":    "#CDD6F4",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "result_fg":  "#A6E3A1",
        "history_fg": "#BAC2DE",
    }

    # ── Definiciones del teclado ──────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "num", "op", "func", "special", "equals"

    KEYPAD = [
        [("AC",  "clear",     "special"), ("±", "sign", "special"),
         ("DEL", "backspace", "special"), ("÷", "op:/", "op")],

        [("1",  "digit:1",  "num"), ("2", "digit:2", "num"),
         ("3",  "digit:3",  "num"), ("×", "op:*", "op")],

        [("4",  "digit:4",  "num"), ("5", "digit:5", "num"),
         ("6",  "digit:6",  "num"), ("−", "op:-", "op")],

        [("7",  "digit:7",  "num"), ("8", "digit:8", "num"),
         ("9",  "digit:9",  "num"), ("+", "op:+", "op")],

        [(".",  "dot",      "num"), ("0", "digit:0", "num"),
         ("%",  "percent",  "func"), ("=", "op:=", "equals")],
    ]

    HISTORY_ROWS = 6

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None, formatter=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()
        self.formatter = formatter if formatter is not None else DisplayFormatter()
        self._clear_btn: tk.Button | None = None

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._create_history()
        self._bind_keyboard()
        self._refresh()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_result  = tkfont.Font(family="Consolas", size=32, weight="bold")
        self._f_btn     = tkfont.Font(family="Segoe UI", size=15)
        self._f_small   = tkfont.Font(family="Segoe UI", size=11)
        self._f_history = tkfont.Font(family="Consolas", size=11)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        tk.Button(
            frame, text="Copiar", font=self._f_small,
            bg=self.C["func"], fg=self.C["func_fg"],
            activebackground=self.C["special"], relief="flat",
            cursor="hand2", command=self._copy_result, padx=8,
        ).pack(side="right", padx=(6, 0))

        self.result_display = ScalingText(
            frame, self._f_result,
            bg=self.C["display_bg"], fg=self.C["result_fg"],
        )
        self.result_display.widget.pack(side="right", fill="x", expand=True)

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=2)

        cols = max(len(row) for row in self.KEYPAD)
        for c in range(cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            for c, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=c, sticky="nsew", padx=2, pady=2,
                         ipady=8)
                if action == "clear":
                    self._clear_btn = btn
            frame.rowconfigure(r, weight=1)

    # ── Historial ────────────────────────────────────────────────

    def _create_history(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=6, pady=(2, 6))

        tk.Label(
            frame, text="Historial", font=self._f_small,
            bg=self.C["bg"], fg=self.C["history_fg"], anchor="w",
        ).pack(fill="x")

        self.history_list = tk.Listbox(
            frame, height=self.HISTORY_ROWS, font=self._f_history,
            bg=self.C["display_bg"], fg=self.C["history_fg"],
            relief="flat", highlightthickness=0, activestyle="none",
        )
        self.history_list.pack(fill="x")

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        action = action_for_key(event.char, event.keysym)
        if action is None:
            return None
        self._on_key(action)
        return "break"

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        log.debug("tecla: %s", action)
        dispatch_action(self.engine, action)
        self._refresh()

    def _refresh(self):
        self.result_display.set_text(self.formatter.format(self.engine.display_value))
        if self._clear_btn is not None:
            self._clear_btn.config(text=self.engine.clear_key_label)

        self.history_list.delete(0, "end")
        for entry in self.engine.history:
            self.history_list.insert("end", entry)

    # ── Copiar resultado ─────────────────────────────────────────

    def _copy_result(self):
        self.root.clipboard_clear()
        self.root.clipboard_append(self.result_display.get_text())
