"""Full-screen terminal front end for the kubernetes navigator."""

from __future__ import annotations

import argparse
import enum
import shutil
import subprocess
import sys

from herewego.kube import KubectlBackend, KubectlError, KubeNavigator
from herewego.select import Action
from herewego.viewport import Viewport, footer_view, header_view

_PROMPT = "> "


def string_join(joiner: str, *args: str) -> str:
    """Concatenate ``args``, putting ``joiner`` after every one of them."""
    return "".join(arg + joiner for arg in args)


def _height(text: str) -> int:
    return text.count("\n") + 1


class Mode(enum.Enum):
    """Whether keys go to the input line or only scroll the output."""

    INPUT = 1
    VISUAL = 2


class ScreenModel:
    """Header, output viewport, footer and an input line.

    ``update`` returns the action for the caller and, when a shell should be
    opened, the command line to run.
    """

    title = "hello"

    def __init__(self, navigator: KubeNavigator) -> None:
        self.navigator = navigator
        self.content = "here we go"
        self.ready = False
        self.mode = Mode.INPUT
        self.viewport = Viewport()
        self.input_text = ""
        self.focused = False

    def _header(self) -> str:
        return header_view(self.title, self.viewport.width)

    def _footer(self) -> str:
        return footer_view(self.viewport.scroll_percent(), self.viewport.width)

    def _input(self) -> str:
        return _PROMPT + self.input_text

    def _blur(self) -> None:
        self.input_text = ""
        self.focused = False

    def resize(self, width: int, height: int) -> None:
        margin = _height(self._header()) + _height(self._footer()) + _height(self._input())
        if self.mode is Mode.INPUT:
            self.focused = True
        else:
            self._blur()
        if not self.ready:
            self.viewport = Viewport(width, max(0, height - margin))
            self.viewport.set_content(self.content)
            self.ready = True
        else:
            self.viewport.width = width
            self.viewport.height = max(0, height - margin)

    def update(self, key: str) -> tuple[Action, list[str] | None]:
        if self.mode is Mode.INPUT:
            if key == "ctrl+c":
                return Action.QUIT, None
            if key == "esc":
                self.mode = Mode.VISUAL
                self._blur()
            elif key == "enter":
                argv = self.receive_input(self.input_text)
                if argv is not None:
                    return Action.NONE, argv
                self.input_text = ""
                self.viewport.goto_bottom()
        else:
            if key in ("ctrl+c", "q", "esc"):
                return Action.QUIT, None
            if key == "i":
                self.mode = Mode.INPUT
                self.focused = True
                return Action.NONE, None
        self.viewport.handle_key(key)
        self._edit(key)
        return Action.NONE, None

    def _edit(self, key: str) -> None:
        if not self.focused:
            return
        if key == "backspace":
            self.input_text = self.input_text[:-1]
        elif len(key) == 1 and key.isprintable():
            self.input_text += key

    def receive_input(self, text: str) -> list[str] | None:
        """Send ``text`` to the navigator and show its answer."""
        if text == "q":
            text = "back"
        result, argv = self.navigator.execute(text)
        self.content = result
        self.viewport.set_content(self.content)
        return argv

    def view(self) -> str:
        return f"{self._header()}\n{self.viewport.view()}\n{self._footer()}\n{self._input()}"


def _keys_for(model: ScreenModel, line: str) -> list[str]:
    if model.mode is Mode.VISUAL or line in ("esc", "ctrl+c"):
        return [line]
    return [*line, "enter"]


def main(argv: list[str] | None = None) -> int:
    """Browse namespaces and pods. Input mode: type text per line; 'esc' for visual mode."""
    parser = argparse.ArgumentParser(
        description="Browse kubernetes namespaces and pods through kubectl."
    )
    parser.add_argument("--kubectl", default="kubectl", help="kubectl executable")
    args = parser.parse_args(argv)

    model = ScreenModel(KubeNavigator(KubectlBackend(args.kubectl)))
    size = shutil.get_terminal_size()
    model.resize(size.columns, size.lines - 1)
    try:
        while True:
            sys.stdout.write(model.view() + "\n")
            sys.stdout.flush()
            line = sys.stdin.readline()
            if not line:
                return 0
            for key in _keys_for(model, line.rstrip("\r\n")):
                action, command = model.update(key)
                if action is Action.QUIT:
                    return 0
                if command is not None:
                    subprocess.run(command, check=False)
                    break
    except KubectlError as err:
        print(err, file=sys.stderr)
        return 1