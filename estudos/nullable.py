"""A JSON value that may be explicitly null."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Nullable:
    """A value that is either set or null; ``value`` reads as ``None`` when unset."""

    value: Any = None
    is_set: bool = False

    def __post_init__(self) -> None:
        if not self.is_set and self.value is not None:
            object.__setattr__(self, "value", None)

    def to_json(self) -> str:
        """Return the compact JSON text of the value, or ``null`` when unset."""
        if not self.is_set:
            return "null"
        return json.dumps(self.value, separators=(",", ":"))


def parse_nullable(data: Union[str, bytes, bytearray]) -> Nullable:
    """Parse JSON text; exactly ``null`` gives an unset value.

    Raises ``ValueError`` when the text is not valid JSON.
    """
    text = data.decode() if isinstance(data, (bytes, bytearray)) else data
    if text == "null":
        return Nullable()
    return Nullable(json.loads(text), True)