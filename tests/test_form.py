import io

from herewego.form import CursorMode, EchoInputModel, FormModel, TextInput, main
from herewego.select import Action


def _type(model, text):
    for ch in text:
        model.update(ch)


def test_text_input_char_limit():
    field = TextInput(char_limit=4)
    field.insert("abcdef")
    assert field.value == "abcd"
    field.insert("x")
    assert field.value == "abcd"


def test_text_input_unlimited_by_default():
    field = TextInput()
    field.insert("a" * 500)
    assert len(field.value) == 500


def test_text_input_backspace_and_reset():
    field = TextInput()
    field.insert("hello")
    field.backspace()
    assert field.value == "hell"
    field.reset()
    assert field.value == ""


def test_password_is_masked():
    field = TextInput("Password", password=True)
    field.insert("secret")
    view = field.view()
    assert "•" * len("secret") in view
    assert "secret" not in view


def test_placeholder_shown_when_empty():
    field = TextInput("Nickname")
    assert "Nickname" in field.view()
    field.insert("zed")
    assert "Nickname" not in field.view()


def test_unfocused_input_ignores_keys():
    field = TextInput()
    field.handle_key("a")
    assert field.value == ""
    field.focus()
    field.handle_key("a")
    assert field.value == "a"


def test_cursor_mode_cycle():
    assert CursorMode.BLINK.next() is CursorMode.STATIC
    assert CursorMode.STATIC.next() is CursorMode.HIDE
    assert CursorMode.HIDE.next() is CursorMode.BLINK


def test_form_typing_goes_to_focused_field():
    form = FormModel()
    _type(form, "neo")
    form.update("tab")
    _type(form, "neo@example.com")
    assert form.values == ["neo", "neo@example.com", ""]


def test_form_focus_wraps_both_ways():
    form = FormModel()
    form.update("shift+tab")
    assert form.focus_index == len(form.inputs)
    form.update("down")
    assert form.focus_index == 0
    assert [f.focused for f in form.inputs] == [True, False, False]


def test_form_submit_on_button():
    form = FormModel()
    for _ in range(len(form.inputs)):
        assert form.update("enter") is Action.NONE
    assert "[ Submit ]" in form.view()
    assert form.update("enter") is Action.SELECT


def test_form_quit_keys():
    assert FormModel().update("esc") is Action.QUIT
    assert FormModel().update("ctrl+c") is Action.QUIT


def test_form_ctrl_r_changes_cursor_mode():
    form = FormModel()
    form.update("ctrl+r")
    assert form.cursor_mode is CursorMode.STATIC
    assert all(f.cursor_mode is CursorMode.STATIC for f in form.inputs)
    assert "static" in form.view()


def test_echo_model_enter_shows_input_and_resets():
    model = EchoInputModel()
    _type(model, "hi")
    model.update("enter")
    assert model.text.endswith("get input: hi")
    assert model.input.value == ""
    assert model.view().startswith(model.text + "\n         ||||    \n")


def test_echo_model_quits_on_escape():
    assert EchoInputModel().update("esc") is Action.QUIT


def test_main_prints_submitted_values(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("neo\ntab\nneo@example.com\ntab\ntab\n\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith("neo\nneo@example.com\n\n")