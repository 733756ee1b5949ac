"""Gift exchange draw: each winner draws the next giver."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable

_BANNER = "🎉" * 15
_RULE = "-------------------------"


class GiftDraw:
    """Seeded draws where nobody is drawn twice."""

    def __init__(self, people: Iterable[str]) -> None:
        self.people = list(people)
        if len(self.people) < 2:
            raise ValueError("a draw needs at least two people")
        self._remaining = len(self.people)

    @property
    def draws_left(self) -> int:
        return self._remaining - 1

    def draw(self, seed: int) -> str:
        """Pick one of the people not drawn yet, seeded by ``seed``."""
        if self.draws_left <= 0:
            raise RuntimeError("no draws left")
        roll = random.Random(seed).randrange(self._remaining)
        winner = self.people[roll]
        last = self._remaining - 1
        self.people[last], self.people[roll] = self.people[roll], self.people[last]
        self._remaining -= 1
        return winner

    def bonus_draw(self, seed: int) -> str:
        """Pick anyone except whoever was drawn first."""
        roll = random.Random(seed).randrange(len(self.people) - 1)
        return self.people[roll]


def _read_seed() -> int | None:
    while True:
        print("😄 请输入随机数种子：")
        line = sys.stdin.readline()
        if not line:
            return None
        try:
            return int(line.strip())
        except ValueError as err:
            print(err)
            print("🥸 非法的输入，请重试")


def _announce(message: str) -> None:
    print()
    print(_BANNER)
    print("🎉")
    print(message)
    print("🎉")
    print(_BANNER)
    print(_RULE)


def main(argv: list[str] | None = None) -> int:
    """Run a full draw, reading one seed per line from standard input."""
    parser = argparse.ArgumentParser(description="Run a seeded gift exchange draw.")
    parser.add_argument("people", nargs="+", help="names taking part")
    parser.add_argument("--bonus-from", default="", help="who offers the extra gift")
    args = parser.parse_args(argv)

    try:
        game = GiftDraw(args.people)
    except ValueError as err:
        parser.error(str(err))

    print("begin 💰roll gift !!")
    print("--------------------")
    while game.draws_left > 0:
        seed = _read_seed()
        if seed is None:
            return 1
        winner = game.draw(seed)
        _announce("🤗 你获得了 " + winner + " 的礼物 🎁")
        print()
        if game.draws_left > 0:
            print("😎 请" + winner + "开始抽奖 ")

    print(_RULE)
    print()
    print(args.bonus_from + "额外准备了一份礼物🥳")
    print()
    print("😎 开始抽奖 😎")
    seed = _read_seed()
    if seed is None:
        return 1
    _announce("🤗 恭喜 " + game.bonus_draw(seed) + " 获得了的礼物 🎁")
    return 0