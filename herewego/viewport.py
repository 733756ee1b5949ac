"""Scrollable text viewport, box-drawn header and footer, and a pager."""

from __future__ import annotations

import argparse
import shutil
import sys

from herewego.select import Action

_QUIT_KEYS = frozenset({"ctrl+c", "q", "esc"})
_PAGE_DOWN = frozenset({"pgdown", " ", "f"})
_PAGE_UP = frozenset({"pgup", "b"})
_HALF_DOWN = frozenset({"d", "ctrl+d"})
_HALF_UP = frozenset({"u", "ctrl+u"})
_LINE_DOWN = frozenset({"down", "j"})
_LINE_UP = frozenset({"up", "k"})


class Viewport:
    """A window of ``height`` lines onto a larger block of text."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.y_offset = 0
        self.lines: list[str] = []

    def set_content(self, content: str) -> None:
        """Replace the text; keeps the offset unless it is now past the end."""
        self.lines = content.replace("\r\n", "\n").split("\n")
        if self.y_offset > len(self.lines) - 1:
            self.goto_bottom()

    def _max_offset(self) -> int:
        return max(0, len(self.lines) - max(self.height, 0))

    def goto_top(self) -> None:
        self.y_offset = 0

    def goto_bottom(self) -> None:
        self.y_offset = self._max_offset()

    def line_down(self, n: int = 1) -> None:
        if n <= 0 or not self.lines:
            return
        self.y_offset = max(0, min(self.y_offset + n, self._max_offset()))

    def line_up(self, n: int = 1) -> None:
        if n <= 0 or not self.lines:
            return
        self.y_offset = max(0, self.y_offset - n)

    def handle_key(self, key: str) -> None:
        """Scroll in response to a key name; unknown keys are ignored."""
        if key in _PAGE_DOWN:
            self.line_down(self.height)
        elif key in _PAGE_UP:
            self.line_up(self.height)
        elif key in _HALF_DOWN:
            self.line_down(self.height // 2)
        elif key in _HALF_UP:
            self.line_up(self.height // 2)
        elif key in _LINE_DOWN:
            self.line_down(1)
        elif key in _LINE_UP:
            self.line_up(1)

    def scroll_percent(self) -> float:
        """Fraction of the scrollable range passed, between 0.0 and 1.0."""
        total = len(self.lines)
        if self.height >= total:
            return 1.0
        value = self.y_offset / (total - self.height)
        return max(0.0, min(1.0, value))

    def view(self) -> str:
        height = max(self.height, 0)
        top = min(self.y_offset, len(self.lines))
        visible = self.lines[top:top + height]
        if height > 0:
            visible += [""] * (height - len(visible))
        if self.width > 0:
            visible = [line[: self.width].ljust(self.width) for line in visible]
        return "\n".join(visible)


def _box(text: str, left: str, right: str) -> list[str]:
    edge = "─" * (len(text) + 2)
    return [f"╭{edge}╮", f"{left} {text} {right}", f"╰{edge}╯"]


def _height(text: str) -> int:
    return text.count("\n") + 1


def header_view(title: str, width: int) -> str:
    """Boxed title followed by a rule that fills the row up to ``width``."""
    top, middle, bottom = _box(title, "│", "├")
    fill = max(0, width - len(top))
    return "\n".join([top + " " * fill, middle + "─" * fill, bottom + " " * fill])


def footer_view(percent: float, width: int) -> str:
    """A rule followed by a boxed scroll percentage; ``percent`` is 0.0-1.0."""
    top, middle, bottom = _box(f"{percent * 100:3.0f}%", "┤", "│")
    fill = max(0, width - len(top))
    return "\n".join([" " * fill + top, "─" * fill + middle, " " * fill + bottom])


class PagerModel:
    """Full-screen pager: header, scrollable content, footer."""

    title = "Mr. Pager"

    def __init__(self, content: str = "") -> None:
        self.content = content
        self.ready = False
        self.viewport = Viewport()

    def _header(self) -> str:
        return header_view(self.title, self.viewport.width)

    def _footer(self) -> str:
        return footer_view(self.viewport.scroll_percent(), self.viewport.width)

    def resize(self, width: int, height: int) -> None:
        margin = _height(self._header()) + _height(self._footer())
        if not self.ready:
            self.viewport = Viewport(width, max(0, height - margin))
            self.viewport.set_content(self.content)
            self.ready = True
        else:
            self.viewport.width = width
            self.viewport.height = max(0, height - margin)

    def update(self, key: str) -> Action:
        if key in _QUIT_KEYS:
            return Action.QUIT
        self.viewport.handle_key(key)
        return Action.NONE

    def view(self) -> str:
        if not self.ready:
            return "\n  Initializing..."
        return f"{self._header()}\n{self.viewport.view()}\n{self._footer()}"


def main(argv: list[str] | None = None) -> int:
    """Page through numbered lines, reading one key name per input line."""
    parser = argparse.ArgumentParser(
        description="Page through 100 numbered lines. Type a key per line: j, k, f, b, d, u, q."
    )
    parser.parse_args(argv)

    model = PagerModel("".join(f"{i}\n" for i in range(100)))
    size = shutil.get_terminal_size()
    model.resize(size.columns, size.lines - 1)
    while True:
        sys.stdout.write(model.view() + "\n")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            return 0
        if model.update(line.rstrip("\r\n")) is Action.QUIT:
            return 0