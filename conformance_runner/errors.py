"""Application errors."""

from __future__ import annotations

from collections.abc import Sequence


def _join_args(args: Sequence[str]) -> str:
    return " ".join(args)


class ConformanceRunnerError(Exception):
    """Base application error."""


class ExecFailureError(ConformanceRunnerError):
    """Execution failed due to invalid input or runtime failure."""


class MalformedArgumentError(ExecFailureError):
    """An extra arg is not of --key=value format (missing '=' or empty value)."""

    def __init__(self, item: str, args: Sequence[str]) -> None:
        self.item = item
        self.args_list = tuple(args)
        super().__init__(
            f"expected [[{item}]] in [[{_join_args(args)}]] to be of --key=value format"
        )


class InvalidKeyPrefixError(ExecFailureError):
    """An extra arg key does not start with the required prefix."""

    def __init__(self, key: str, args: Sequence[str], *, prefix: str = "--") -> None:
        self.key = key
        self.prefix = prefix
        self.args_list = tuple(args)
        super().__init__(
            f"expected key [{key}] in [[{_join_args(args)}]] to start with prefix {prefix}"
        )


class MalformedVersionError(ExecFailureError):
    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(
            f"invalid version: {version!r}: expected vMAJOR.MINOR.PATCH[+METADATA]"
        )
