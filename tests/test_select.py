import io

import pytest

from herewego.select import Action, Choices, SelectModel, main


def make_choices():
    choices = Choices()
    choices.add_choice("nb", "notebook")
    choices.add_choice("pod", "pod")
    choices.add_choice("svc", "service")
    return choices


def test_names_keep_insertion_order():
    assert make_choices().names() == ["notebook", "pod", "service"]


def test_choose_on_empty_raises():
    with pytest.raises(IndexError):
        Choices().choose()


def test_next_stops_at_end():
    choices = make_choices()
    assert choices.next() is True
    assert choices.next() is True
    assert choices.next() is False
    assert choices.choose() == "svc"


def test_previous_stops_at_start():
    choices = make_choices()
    assert choices.previous() is False
    choices.next()
    assert choices.previous() is True
    assert choices.choose() == "nb"


def test_next_on_empty_returns_false():
    assert Choices().next() is False


def test_render_marks_current():
    choices = Choices()
    choices.add_choice("a", "alpha")
    choices.add_choice("b", "beta")
    expected = (
        "Navigate with up/down or k/j. Select with Enter\n\n"
        "[•] alpha\n[ ] beta\n"
        "\n(Press 'q' or 'esc' to quit)\n"
    )
    assert choices.render() == expected
    choices.next()
    assert "[ ] alpha\n[•] beta\n" in choices.render()


@pytest.mark.parametrize("key", ["ctrl+c", "q", "esc"])
def test_quit_keys(key):
    model = SelectModel()
    model.add_choice("nb", "notebook")
    assert model.update(key) == (Action.QUIT, None)


def test_navigation_and_select():
    model = SelectModel()
    model.add_choice("nb", "notebook")
    model.add_choice("pod", "pod")
    assert model.update("j") == (Action.NONE, None)
    assert model.update("enter") == (Action.SELECT, "pod")
    assert model.update("up") == (Action.NONE, None)
    assert model.update("enter") == (Action.SELECT, "nb")
    model.update("down")
    model.update("down")
    assert model.update("enter") == (Action.SELECT, "pod")


def test_unknown_key_changes_nothing():
    model = SelectModel()
    model.add_choice("nb", "notebook")
    before = model.view()
    assert model.update("x") == (Action.NONE, None)
    assert model.view() == before


def test_enter_without_choices_raises():
    with pytest.raises(IndexError):
        SelectModel().update("enter")


def test_main_prints_selection(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("j\nj\n\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "svc"


def test_main_quit_prints_no_selection(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith("(Press 'q' or 'esc' to quit)\n")