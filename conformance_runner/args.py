"""Validation of the focus pattern and pass-through extra args."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .config import ConfigStore
from .errors import InvalidKeyPrefixError, MalformedArgumentError


FOCUS_KEY = "focus"
EXTRA_ARGS_KEY = "extra-args"

# Regex handed to the test framework; brackets are escaped on purpose.
DEFAULT_FOCUS = "\\[Conformance\\]"
KEY_PREFIX = "--"


@dataclass(frozen=True)
class ExtraArg:
    key: str
    value: str

    def render(self) -> str:
        return f"{self.key}={self.value}"


def parse_extra_arg(item: str, *, all_args: Sequence[str] | None = None) -> ExtraArg:
    """Split one `--key=value` entry on its first '='.

    `all_args` is only used as context in error messages.
    """

    context = list(all_args) if all_args is not None else [item]

    key, sep, value = item.partition("=")
    if not sep:
        raise MalformedArgumentError(item, context)
    if not key.startswith(KEY_PREFIX):
        raise InvalidKeyPrefixError(key, context, prefix=KEY_PREFIX)
    if not value:
        raise MalformedArgumentError(item, context)
    return ExtraArg(key=key, value=value)


def validate_args(store: ConfigStore) -> None:
    """Default the focus and check every extra arg, first failure wins.

    The store is schema-checked first. The focus default is written before
    extra args are scanned, so it persists in the store even when an extra
    arg is rejected.
    """

    store.check_schema()

    if not store.get_string(FOCUS_KEY):
        store.set(FOCUS_KEY, DEFAULT_FOCUS)

    extra_args = store.get_string_slice(EXTRA_ARGS_KEY)
    for item in extra_args:
        parse_extra_arg(item, all_args=extra_args)

    store.set(EXTRA_ARGS_KEY, extra_args)
