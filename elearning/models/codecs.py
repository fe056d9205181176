# elearning/models/codecs.py
from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator

OPTION_DELIMITER = "|"


def encode_options(options: Sequence[str]) -> str:
    """Join quiz options into their stored form."""
    for opt in options:
        if OPTION_DELIMITER in opt:
            raise ValueError(f"quiz option may not contain {OPTION_DELIMITER!r}: {opt!r}")
    return OPTION_DELIMITER.join(options)


def decode_options(raw: Optional[str]) -> List[str]:
    """Split a stored options string; trailing empty tokens are dropped."""
    if not raw:
        return []
    tokens = raw.split(OPTION_DELIMITER)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


class DelimitedList(TypeDecorator):
    """Text column exposed to the ORM as an ordered list of strings."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return encode_options(value)

    def process_result_value(self, value, dialect):
        return decode_options(value)
