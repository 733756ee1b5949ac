"""Menu-driven navigation over kubernetes namespaces and pods via kubectl."""

from __future__ import annotations

import re
import subprocess
from typing import Protocol

_INTEGER = re.compile(r"[+-]?\d+")

_BACKWARD = {
    "/log": "/pod",
    "/exec": "/pod",
    "/pod": "/func",
    "/func": "/",
    "/": "/",
}


class KubectlError(RuntimeError):
    """kubectl could not be run or reported a failure."""


class KubectlBackend:
    """Reads cluster state by running the kubectl command."""

    def __init__(self, kubectl: str = "kubectl") -> None:
        self.kubectl = kubectl

    def _run(self, *args: str) -> str:
        try:
            done = subprocess.run(
                [self.kubectl, *args], capture_output=True, text=True, check=False
            )
        except OSError as err:
            raise KubectlError(str(err)) from err
        if done.returncode != 0:
            raise KubectlError(done.stderr.strip() or f"exit status {done.returncode}")
        return done.stdout

    def namespaces(self) -> list[str]:
        out = self._run("get", "namespaces", "-o", "jsonpath={.items[*].metadata.name}")
        return out.split()

    def pods(self, namespace: str) -> list[str]:
        out = self._run(
            "get", "pods", "-n", namespace, "-o", "jsonpath={.items[*].metadata.name}"
        )
        return out.split()

    def logs(self, namespace: str, pod: str) -> str:
        return self._run("logs", "-n", namespace, pod)

    def exec_argv(self, namespace: str, pod: str) -> list[str]:
        """Command line that opens an interactive shell in ``pod``."""
        return [
            self.kubectl, "exec", "-it", "-n", namespace, pod,
            "--", "sh", "-c", "clear; (bash || sh || ash)",
        ]


class Backend(Protocol):
    def namespaces(self) -> list[str]: ...
    def pods(self, namespace: str) -> list[str]: ...
    def logs(self, namespace: str, pod: str) -> str: ...
    def exec_argv(self, namespace: str, pod: str) -> list[str]: ...


class _BadIndex(Exception):
    pass


class KubeNavigator:
    """Walks namespace -> function -> pod menus from typed orders.

    ``execute`` returns the text to show and, when a shell should be
    opened, the command line to run; otherwise None.
    """

    def __init__(self, backend: Backend) -> None:
        self.backend = backend
        self.path = "/"
        self.namespace = ""
        self._handlers = {
            "/": self._show_namespaces,
            "/func": self._choose_namespace,
            "/pod": self._choose_function,
            "/log": self._log_pod,
            "/exec": self._exec_pod,
        }

    def execute(self, order: str) -> tuple[str, list[str] | None]:
        if order == "back":
            self.path = _BACKWARD[_BACKWARD[self.path]]
        handler = self._handlers.get(self.path)
        if handler is None:
            return "i don't understand the order", None
        try:
            result, argv = handler(order)
        except _BadIndex as err:
            result, argv = str(err), None
        return f"{self.path}  get input : {order}\n{result}", argv

    @staticmethod
    def _pick(order: str, items: list[str]) -> str:
        if not _INTEGER.fullmatch(order):
            raise _BadIndex("parse index error")
        index = int(order)
        if not 0 <= index < len(items):
            raise _BadIndex("index out of range")
        return items[index]

    @staticmethod
    def _listing(title: str, items: list[str]) -> str:
        return title + "".join(f"{i}: {name} \n" for i, name in enumerate(items))

    def _show_namespaces(self, order: str) -> tuple[str, None]:
        text = self._listing("choose a namespace\n", self.backend.namespaces())
        self.path = "/func"
        return text, None

    def _choose_namespace(self, order: str) -> tuple[str, None]:
        if order != "back":
            self.namespace = self._pick(order, self.backend.namespaces())
        self.path = "/pod"
        return "choose function \n" + "1: log \n" + "2: exec", None

    def _choose_function(self, order: str) -> tuple[str, None]:
        if order != "back":
            if not _INTEGER.fullmatch(order):
                raise _BadIndex("parse index error")
            choice = int(order)
            if choice == 1:
                self.path = "/log"
            elif choice == 2:
                self.path = "/exec"
            else:
                return "no such selection", None
        return self._listing("choose a pod\n", self.backend.pods(self.namespace)), None

    def _log_pod(self, order: str) -> tuple[str, None]:
        pod = self._pick(order, self.backend.pods(self.namespace))
        try:
            return self.backend.logs(self.namespace, pod), None
        except KubectlError as err:
            return f"get log error{err}", None

    def _exec_pod(self, order: str) -> tuple[str, list[str]]:
        pod = self._pick(order, self.backend.pods(self.namespace))
        return "wait a moment", self.backend.exec_argv(self.namespace, pod)