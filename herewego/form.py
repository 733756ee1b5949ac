"""Text inputs and two small keyboard-driven forms built on them."""

from __future__ import annotations

import argparse
import enum
import sys

from herewego.select import Action

_PROMPT = "> "
_ECHO_CHAR = "•"
_CURSOR = "_"
_FOCUSED_COLOR = 205
_BLURRED_COLOR = 240
_HELP_COLOR = 244

_NAV_KEYS = frozenset({"tab", "shift+tab", "enter", "up", "down"})
_NAMED_KEYS = frozenset({"tab", "shift+tab", "enter", "up", "down", "esc",
                         "ctrl+c", "ctrl+r", "backspace"})


def _style(text: str, color: int | None) -> str:
    if color is None:
        return text
    return f"\x1b[38;5;{color}m{text}\x1b[0m"


_FOCUSED_BUTTON = _style("[ Submit ]", _FOCUSED_COLOR)
_BLURRED_BUTTON = f"[ {_style('Submit', _BLURRED_COLOR)} ]"


class CursorMode(enum.Enum):
    """How the cursor of a text input is drawn."""

    BLINK = "blink"
    STATIC = "static"
    HIDE = "hide"

    def next(self) -> CursorMode:
        members = list(CursorMode)
        return members[(members.index(self) + 1) % len(members)]

    def __str__(self) -> str:
        return self.value


class TextInput:
    """Single-line text field; ``char_limit`` of 0 means unlimited."""

    def __init__(self, placeholder: str = "", char_limit: int = 0, password: bool = False) -> None:
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.password = password
        self.value = ""
        self.focused = False
        self.cursor_mode = CursorMode.BLINK
        self.color: int | None = None

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def insert(self, text: str) -> None:
        """Append ``text``, cut to what the character limit leaves room for."""
        if self.char_limit > 0:
            text = text[: max(0, self.char_limit - len(self.value))]
        self.value += text

    def backspace(self) -> None:
        self.value = self.value[:-1]

    def reset(self) -> None:
        self.value = ""

    def handle_key(self, key: str) -> None:
        """Edit the value for a key press; ignored unless focused."""
        if not self.focused:
            return
        if key == "backspace":
            self.backspace()
        elif len(key) == 1 and key.isprintable():
            self.insert(key)

    def view(self) -> str:
        cursor = _CURSOR if self.focused and self.cursor_mode is not CursorMode.HIDE else ""
        if self.value:
            shown = _ECHO_CHAR * len(self.value) if self.password else self.value
            body = _style(shown, self.color) + cursor
        else:
            body = cursor + _style(self.placeholder, _BLURRED_COLOR) if self.placeholder else cursor
        return _style(_PROMPT, self.color) + body


class FormModel:
    """Nickname, e-mail and password fields followed by a submit button."""

    def __init__(self) -> None:
        self.inputs = [
            TextInput("Nickname", 32),
            TextInput("Email", 64),
            TextInput("Password", 32, password=True),
        ]
        self.focus_index = 0
        self.cursor_mode = CursorMode.BLINK
        self._apply_focus()

    @property
    def values(self) -> list[str]:
        return [field.value for field in self.inputs]

    def _apply_focus(self) -> None:
        for i, field in enumerate(self.inputs):
            if i == self.focus_index:
                field.focus()
                field.color = _FOCUSED_COLOR
            else:
                field.blur()
                field.color = None

    def update(self, key: str) -> Action:
        """Handle one key; SELECT means the form was submitted."""
        if key in ("ctrl+c", "esc"):
            return Action.QUIT
        if key == "ctrl+r":
            self.cursor_mode = self.cursor_mode.next()
            for field in self.inputs:
                field.cursor_mode = self.cursor_mode
            return Action.NONE
        if key in _NAV_KEYS:
            if key == "enter" and self.focus_index == len(self.inputs):
                return Action.SELECT
            self.focus_index += -1 if key in ("up", "shift+tab") else 1
            if self.focus_index > len(self.inputs):
                self.focus_index = 0
            elif self.focus_index < 0:
                self.focus_index = len(self.inputs)
            self._apply_focus()
            return Action.NONE
        for field in self.inputs:
            field.handle_key(key)
        return Action.NONE

    def view(self) -> str:
        fields = "\n".join(field.view() for field in self.inputs)
        button = _FOCUSED_BUTTON if self.focus_index == len(self.inputs) else _BLURRED_BUTTON
        return (
            f"{fields}\n\n{button}\n\n"
            + _style("cursor mode is ", _BLURRED_COLOR)
            + _style(str(self.cursor_mode), _HELP_COLOR)
            + _style(" (ctrl+r to change style)", _BLURRED_COLOR)
        )


class EchoInputModel:
    """One input line; Enter shows what was typed above it."""

    def __init__(self) -> None:
        self.text = ""
        self.input = TextInput(char_limit=128)
        self.input.focus()
        self.input.cursor_mode = CursorMode.STATIC

    def update(self, key: str) -> Action:
        header = "msg type: KeyMsg\n"
        kind = "runes" if len(key) == 1 else key
        header += f"type: {kind}, string: {key} \n"
        if key in ("ctrl+c", "esc"):
            return Action.QUIT
        if key == "enter":
            self.text = header + "get input: " + self.input.value
            self.input.reset()
            return Action.NONE
        self.input.handle_key(key)
        return Action.NONE

    def view(self) -> str:
        return f"{self.text}\n         ||||    \n{self.input.view()}\n"


def _keys(line: str) -> list[str]:
    if not line:
        return ["enter"]
    if line in _NAMED_KEYS:
        return [line]
    return list(line)


def main(argv: list[str] | None = None) -> int:
    """Fill in a form; each input line is typed text, a key name, or empty for enter."""
    parser = argparse.ArgumentParser(description="Fill in a small terminal form.")
    parser.add_argument("--echo", action="store_true", help="show the single echo input instead")
    args = parser.parse_args(argv)

    model: FormModel | EchoInputModel = EchoInputModel() if args.echo else FormModel()
    while True:
        sys.stdout.write(model.view() + "\n")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            return 0
        for key in _keys(line.rstrip("\r\n")):
            action = model.update(key)
            if action is Action.QUIT:
                return 0
            if action is Action.SELECT and isinstance(model, FormModel):
                print("\n".join(model.values))
                return 0