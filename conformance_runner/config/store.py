"""In-memory configuration store shared by the validators.

Values are either strings or sequences of strings. The store is not
thread-safe: callers must not mutate it while a validation call runs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import jsonschema

from ..errors import ExecFailureError


CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "focus": {"type": "string"},
        "skip": {"type": "string"},
        "extra-args": {
            "anyOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
            ]
        },
        "conformance-image": {"type": "string"},
        "busybox-image": {"type": "string"},
    },
}


def _format_path(error: jsonschema.ValidationError) -> str:
    if not error.path:
        return "$"
    parts = []
    for p in error.path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append("." + str(p))
    return "$" + "".join(parts)


def _copy_value(value: object) -> object:
    if isinstance(value, (list, tuple)):
        return list(value)
    return value


class ConfigStore:
    def __init__(self, initial: Mapping[str, object] | None = None) -> None:
        self._values: dict[str, object] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str, default: object = None) -> object:
        return _copy_value(self._values.get(key, default))

    def is_set(self, key: str) -> bool:
        return key in self._values

    def set(self, key: str, value: object) -> None:
        self._values[key] = _copy_value(value)

    def get_string(self, key: str) -> str:
        value = self._values.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ExecFailureError(
                f"Invalid config value: {key} must be a string, got {type(value).__name__}"
            )
        return value

    def get_string_slice(self, key: str) -> list[str]:
        """Return a list copy of a string-sequence value.

        A plain string is split on whitespace, so a single flag value such as
        "--a=1 --b=2" reads as two items.
        """

        value = self._values.get(key)
        if value is None or value == "":
            return []
        if isinstance(value, str):
            return value.split()
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            return list(value)
        raise ExecFailureError(
            f"Invalid config value: {key} must be a list of strings"
        )

    def snapshot(self) -> dict[str, object]:
        return {k: _copy_value(v) for k, v in self._values.items()}

    def check_schema(self) -> None:
        """Check the types of the known keys; unknown keys are not checked."""

        validator_cls = jsonschema.validators.validator_for(CONFIG_SCHEMA)
        validator = validator_cls(CONFIG_SCHEMA)

        errors = sorted(
            validator.iter_errors(self.snapshot()), key=lambda e: list(map(str, e.path))
        )
        if errors:
            rendered = "; ".join(f"{_format_path(e)}: {e.message}" for e in errors[:8])
            more = "" if len(errors) <= 8 else f" (+{len(errors) - 8} more)"
            raise ExecFailureError(f"Config validation failed: {rendered}{more}")
