"""Pager that follows lines arriving from a stream."""

from __future__ import annotations

import argparse
import os
import shutil
import sys
import threading
import time
from collections.abc import Iterator
from typing import IO, Any

from herewego.select import Action
from herewego.viewport import Viewport, footer_view, header_view

_QUIT_KEYS = frozenset({"ctrl+c", "q", "esc"})


def _height(text: str) -> int:
    return text.count("\n") + 1


class StreamViewModel:
    """Collects lines from a reader and shows the latest at the bottom."""

    title = "Mr. Pager"

    def __init__(self, reader: IO[Any] | None = None) -> None:
        self.reader = reader
        self.lines: list[str] = []
        self.ready = False
        self.viewport = Viewport()

    def add_line(self, line: str) -> None:
        """Append ``line`` and scroll to the bottom."""
        self.lines.append(line + "\n")
        self.viewport.set_content("".join(self.lines))
        self.viewport.goto_bottom()

    def read_lines(self) -> Iterator[str]:
        """Yield lines from the reader without their line endings."""
        if self.reader is None:
            return
        for raw in self.reader:
            line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            yield line

    def _header(self) -> str:
        return header_view(self.title, self.viewport.width)

    def _footer(self) -> str:
        return footer_view(self.viewport.scroll_percent(), self.viewport.width)

    def resize(self, width: int, height: int) -> None:
        margin = _height(self._header()) + _height(self._footer())
        if not self.ready:
            self.viewport = Viewport(width, max(0, height - margin))
            self.viewport.set_content("Init")
            self.ready = True
        else:
            self.viewport.width = width
            self.viewport.height = max(0, height - margin)

    def update(self, key: str) -> Action:
        if key in _QUIT_KEYS:
            return Action.QUIT
        if key == "a":
            self.add_line("add\n")
        elif key == "b":
            self.add_line("b\n")
        else:
            self.viewport.handle_key(key)
        return Action.NONE

    def view(self) -> str:
        if not self.ready:
            return "\n  Initializing..."
        return f"{self._header()}\n{self.viewport.view()}\n{self._footer()}"


def _render(model: StreamViewModel) -> None:
    sys.stdout.write(model.view() + "\n")
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Show a line written to a pipe every few seconds; keys are read per input line."""
    parser = argparse.ArgumentParser(description="Follow a stream of lines in a pager.")
    parser.add_argument("--interval", type=float, default=2.0, help="seconds between lines")
    args = parser.parse_args(argv)

    read_fd, write_fd = os.pipe()
    reader = os.fdopen(read_fd, "r")
    writer = os.fdopen(write_fd, "w")
    model = StreamViewModel(reader)
    lock = threading.Lock()

    def produce() -> None:
        try:
            while True:
                writer.write("hello\n")
                writer.flush()
                time.sleep(args.interval)
        except OSError:
            return

    def consume() -> None:
        for line in model.read_lines():
            with lock:
                model.add_line(line)
                _render(model)

    threading.Thread(target=produce, daemon=True).start()
    threading.Thread(target=consume, daemon=True).start()

    size = shutil.get_terminal_size()
    with lock:
        model.resize(size.columns, size.lines - 1)
        _render(model)
    for line in sys.stdin:
        with lock:
            if model.update(line.rstrip("\r\n")) is Action.QUIT:
                return 0
            _render(model)
    return 0