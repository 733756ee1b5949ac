"""Run redis commands typed as plain text."""

from __future__ import annotations

import re
from typing import Any

import redis

_SPACES = re.compile(r"\s+")


def split_by_space(cmd: str) -> list[str]:
    """Split a command line on runs of whitespace, ignoring outer blanks."""
    return _SPACES.split(cmd.strip())


def _text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class RedisCommandClient:
    """Sends text commands to redis and formats the reply as text."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    @classmethod
    def connect(
        cls, host: str, port: int | str = 6379, password: str | None = None
    ) -> RedisCommandClient:
        """Create a client for the server at ``host:port``."""
        return cls(redis.Redis(host=host, port=int(port), password=password))

    def execute(self, cmd_text: str) -> str:
        """Run ``cmd_text``; list replies become one item per line."""
        args = split_by_space(cmd_text)
        prefix = " ".join(args)
        try:
            result = self.connection.execute_command(*args)
        except redis.exceptions.ResponseError as err:
            return f"{prefix}: {err}"
        if isinstance(result, (list, tuple)) and not any(
            isinstance(item, (list, tuple)) for item in result
        ):
            return "".join(f"{_text(item)}\n" for item in result)
        if result is None:
            return f"{prefix}: redis: nil"
        return f"{prefix}: {_text(result)}"