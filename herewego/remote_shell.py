"""Open an interactive shell in a kubernetes pod."""

from __future__ import annotations

import argparse
import subprocess
import sys
import time


def exec_argv(pod: str) -> list[str]:
    """Command line that opens bash inside ``pod``."""
    return ["kubectl", "exec", "-it", pod, "--", "bash"]


def _say(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def open_shell(pod: str, delay: float = 5.0) -> int | None:
    """Wait ``delay`` seconds, then attach the terminal to a shell in ``pod``.

    Returns the shell's exit status, or None if kubectl could not be run.
    """
    _say("begin")
    time.sleep(delay)
    result: int | None
    try:
        done = subprocess.run(exec_argv(pod), check=False)
    except OSError as err:
        _say(str(err))
        result = None
    else:
        result = done.returncode
        if result:
            _say(f"exit status {result}")
    _say("finished")
    return result


def main(argv: list[str] | None = None) -> int:
    """Open a shell in the named pod."""
    parser = argparse.ArgumentParser(description="Open an interactive shell in a pod.")
    parser.add_argument("pod", help="name of the pod")
    parser.add_argument("--delay", type=float, default=5.0, help="seconds to wait first")
    args = parser.parse_args(argv)
    return 0 if open_shell(args.pod, args.delay) == 0 else 1