import pytest

from herewego.kube import KubeNavigator
from herewego.screen import Mode, ScreenModel, string_join
from herewego.select import Action


class FakeBackend:
    def namespaces(self):
        return ["default", "kube-system"]

    def pods(self, namespace):
        return [f"{namespace}-pod-a", f"{namespace}-pod-b"]

    def logs(self, namespace, pod):
        return f"log of {pod}"

    def exec_argv(self, namespace, pod):
        return ["kubectl", "exec", "-n", namespace, pod]


def make_model():
    model = ScreenModel(KubeNavigator(FakeBackend()))
    model.resize(80, 24)
    return model


def type_line(model, text):
    result = None
    for ch in text:
        model.update(ch)
    result = model.update("enter")
    return result


@pytest.mark.parametrize(
    "joiner, expected",
    [
        (", ", "1, 2, 3, 4, 5, "),
        ("\n", "1\n2\n3\n4\n5\n"),
        ("\r", "1\r2\r3\r4\r5\r"),
        ("\t", "1\t2\t3\t4\t5\t"),
    ],
)
def test_string_join(joiner, expected):
    assert string_join(joiner, "1", "2", "3", "4", "5") == expected


def test_string_join_empty():
    assert string_join(", ") == ""


def test_initial_content_before_resize():
    model = ScreenModel(KubeNavigator(FakeBackend()))
    assert model.content == "here we go"
    assert model.mode is Mode.INPUT
    model.update("a")
    assert model.input_text == ""


def test_view_fills_terminal_height():
    model = make_model()
    rows = model.view().split("\n")
    assert len(rows) == 24
    assert rows[-1] == "> "
    assert "here we go" in model.view()


def test_typing_and_backspace():
    model = make_model()
    for key in "ab1":
        model.update(key)
    assert model.input_text == "ab1"
    model.update("backspace")
    assert model.input_text == "ab"
    assert model.view().split("\n")[-1] == "> ab"


def test_enter_sends_to_navigator_and_clears_input():
    model = make_model()
    expected = KubeNavigator(FakeBackend()).execute("")[0]
    action, command = type_line(model, "")
    assert (action, command) == (Action.NONE, None)
    assert model.content == expected
    assert "0: default " in model.content
    assert model.input_text == ""


def test_q_is_sent_as_back():
    model = make_model()
    type_line(model, "")
    type_line(model, "q")
    assert "get input : back" in model.content


def test_exec_returns_command_and_keeps_input():
    model = make_model()
    type_line(model, "")
    type_line(model, "0")
    type_line(model, "2")
    action, command = type_line(model, "0")
    assert action is Action.NONE
    assert command == ["kubectl", "exec", "-n", "default", "default-pod-a"]
    assert model.content.endswith("wait a moment")
    assert model.input_text == "0"


def test_esc_switches_to_visual_and_i_back():
    model = make_model()
    model.update("x")
    model.update("esc")
    assert model.mode is Mode.VISUAL
    assert model.input_text == ""
    model.update("z")
    assert model.input_text == ""
    assert model.update("i") == (Action.NONE, None)
    assert model.mode is Mode.INPUT
    model.update("z")
    assert model.input_text == "z"


@pytest.mark.parametrize("key", ["q", "esc", "ctrl+c"])
def test_visual_quit_keys(key):
    model = make_model()
    model.update("esc")
    assert model.update(key) == (Action.QUIT, None)


def test_input_mode_quits_only_on_ctrl_c():
    model = make_model()
    assert model.update("q") == (Action.NONE, None)
    assert model.input_text == "q"
    assert model.update("ctrl+c") == (Action.QUIT, None)


def test_resize_in_visual_mode_blurs_input():
    model = make_model()
    model.update("esc")
    model.resize(100, 30)
    assert model.focused is False
    assert len(model.view().split("\n")) == 30