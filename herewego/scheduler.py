"""Run a sync script once a day at a fixed time."""

from __future__ import annotations

import argparse
import subprocess
import sys
import time
from collections.abc import Callable
from datetime import datetime, timedelta


def _check_time(hour: int, minute: int) -> None:
    if not 0 <= hour <= 23:
        raise ValueError(f"hour {hour} out of range 0-23")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute {minute} out of range 0-59")


def next_run(now: datetime, hour: int, minute: int) -> datetime:
    """Return the first moment strictly after ``now`` at ``hour:minute``."""
    _check_time(hour, minute)
    candidate = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if candidate <= now:
        candidate += timedelta(days=1)
    return candidate


def run_sync(script: str, output: str) -> subprocess.Popen | None:
    """Start ``sh script output`` without waiting; None if it could not start."""
    try:
        return subprocess.Popen(["sh", str(script), str(output)])
    except OSError as err:
        print(err, file=sys.stderr)
        return None


class DailyJob:
    """Calls ``action`` every day at ``hour:minute``.

    ``clock`` and ``sleep`` may be replaced to drive the job from elsewhere.
    """

    def __init__(self, hour: int, minute: int, action: Callable[[], object]) -> None:
        _check_time(hour, minute)
        self.hour = hour
        self.minute = minute
        self.action = action
        self.clock: Callable[[], datetime] = datetime.now
        self.sleep: Callable[[float], object] = time.sleep

    def run_forever(self) -> None:
        """Wait for each due time and run the action; never returns normally."""
        while True:
            now = self.clock()
            due = next_run(now, self.hour, self.minute)
            self.sleep(max(0.0, (due - now).total_seconds()))
            self.action()


def _parse_at(text: str) -> tuple[int, int]:
    hour, sep, minute = text.partition(":")
    if not sep or not hour.isdigit() or not minute.isdigit():
        raise argparse.ArgumentTypeError(f"expected HH:MM, got {text!r}")
    try:
        _check_time(int(hour), int(minute))
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from err
    return int(hour), int(minute)


def main(argv: list[str] | None = None) -> int:
    """Run ``sh SCRIPT OUTPUT`` every day at the given time."""
    parser = argparse.ArgumentParser(description="Run a sync script once a day.")
    parser.add_argument("script", help="shell script to run")
    parser.add_argument("output", help="argument passed to the script")
    parser.add_argument("--at", type=_parse_at, default=(18, 20), help="time of day, HH:MM")
    args = parser.parse_args(argv)

    hour, minute = args.at
    job = DailyJob(hour, minute, lambda: run_sync(args.script, args.output))
    try:
        job.run_forever()
    except KeyboardInterrupt:
        pass
    return 0