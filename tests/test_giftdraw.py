import io

import pytest

from herewego.giftdraw import GiftDraw, main

PEOPLE = ["ann", "bob", "cy", "dee", "eve"]


def test_draws_are_distinct_and_from_people():
    game = GiftDraw(PEOPLE)
    winners = [game.draw(seed) for seed in (7, 7, 7, 7)]
    assert len(set(winners)) == len(winners)
    assert set(winners) <= set(PEOPLE)
    assert game.draws_left == 0


def test_draws_left_counts_down():
    game = GiftDraw(PEOPLE)
    assert game.draws_left == len(PEOPLE) - 1
    game.draw(1)
    assert game.draws_left == len(PEOPLE) - 2


def test_no_draw_after_exhaustion():
    game = GiftDraw(["ann", "bob"])
    game.draw(3)
    with pytest.raises(RuntimeError):
        game.draw(3)


def test_same_seeds_give_same_results():
    first = GiftDraw(PEOPLE)
    second = GiftDraw(PEOPLE)
    seeds = [11, 22, 33]
    assert [first.draw(s) for s in seeds] == [second.draw(s) for s in seeds]


def test_draw_does_not_change_the_input_list():
    names = list(PEOPLE)
    GiftDraw(names).draw(5)
    assert names == PEOPLE


@pytest.mark.parametrize("seed", range(10))
def test_bonus_never_goes_to_first_winner(seed):
    game = GiftDraw(PEOPLE)
    first = game.draw(seed)
    while game.draws_left:
        game.draw(seed + 1)
    assert game.bonus_draw(seed) != first
    assert game.bonus_draw(seed) in PEOPLE


def test_needs_two_people():
    with pytest.raises(ValueError):
        GiftDraw(["ann"])


def test_main_retries_bad_seed(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n1\n2\n"))
    assert main(["ann", "bob"]) == 0
    out = capsys.readouterr().out
    assert "🥸 非法的输入，请重试" in out
    assert "你获得了" in out
    assert "恭喜" in out


def test_main_stops_at_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["ann", "bob"]) == 1