"""Keyboard-driven single choice selection."""

from __future__ import annotations

import argparse
import enum
import sys
from dataclasses import dataclass

_HEADER = "Navigate with up/down or k/j. Select with Enter\n\n"
_FOOTER = "\n(Press 'q' or 'esc' to quit)\n"


@dataclass(frozen=True)
class _Choice:
    key: str
    name: str


class Choices:
    """Ordered list of choices with a cursor on one of them."""

    def __init__(self) -> None:
        self._choices: list[_Choice] = []
        self.current = 0

    def add_choice(self, key: str, name: str) -> None:
        """Append a choice identified by ``key`` and shown as ``name``."""
        self._choices.append(_Choice(key, name))

    def choose(self) -> str:
        """Return the key under the cursor; raises IndexError when empty."""
        if not self._choices:
            raise IndexError("no choices to choose from")
        return self._choices[self.current].key

    def names(self) -> list[str]:
        return [choice.name for choice in self._choices]

    def next(self) -> bool:
        """Move the cursor down; return False if it is already at the end."""
        if self.current >= len(self._choices) - 1:
            return False
        self.current += 1
        return True

    def previous(self) -> bool:
        """Move the cursor up; return False if it is already at the start."""
        if self.current == 0:
            return False
        self.current -= 1
        return True

    def __len__(self) -> int:
        return len(self._choices)

    def render(self) -> str:
        lines = (
            f"{'[•]' if i == self.current else '[ ]'} {choice.name}\n"
            for i, choice in enumerate(self._choices)
        )
        return _HEADER + "".join(lines) + _FOOTER


class Action(enum.Enum):
    """What the caller should do after a key press."""

    NONE = "none"
    QUIT = "quit"
    SELECT = "select"


class SelectModel:
    """Selection screen reacting to key names such as ``"j"`` or ``"enter"``."""

    def __init__(self) -> None:
        self.choices = Choices()

    def add_choice(self, key: str, name: str) -> None:
        self.choices.add_choice(key, name)

    def update(self, key: str) -> tuple[Action, str | None]:
        """Handle one key press; on SELECT the chosen key comes along."""
        if key in ("ctrl+c", "q", "esc"):
            return Action.QUIT, None
        if key == "enter":
            return Action.SELECT, self.choices.choose()
        if key in ("down", "j"):
            self.choices.next()
        elif key in ("up", "k"):
            self.choices.previous()
        return Action.NONE, None

    def view(self) -> str:
        return self.choices.render()


def main(argv: list[str] | None = None) -> int:
    """Let the user pick a resource kind; prints the chosen key."""
    parser = argparse.ArgumentParser(
        description="Choose a resource kind. Type j/k/q per line; an empty line selects."
    )
    parser.parse_args(argv)

    model = SelectModel()
    model.add_choice("nb", "notebook")
    model.add_choice("pod", "pod")
    model.add_choice("svc", "service")

    while True:
        sys.stdout.write(model.view())
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            return 0
        key = line.strip() or "enter"
        action, chosen = model.update(key)
        if action is Action.QUIT:
            return 0
        if action is Action.SELECT:
            print(chosen)
            return 0