"""Block policy shared between the engine, the settings and the middleware."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from honeypot.checks.signatures.exceptions import InvalidBlockStatusError


class BlockStatus(IntEnum):
    """Statuses a blocked request may receive."""

    GONE = 410  # permanent; scanners back off and search engines de-index
    NOT_FOUND = 404  # invites retries
    FORBIDDEN = 403  # may escalate scanner behaviour


ALLOWED_BLOCK_STATUSES = frozenset(int(s) for s in BlockStatus)


def validate_block_status(status: Any) -> int:
    if isinstance(status, bool) or not isinstance(status, int) or status not in ALLOWED_BLOCK_STATUSES:
        raise InvalidBlockStatusError(status, ALLOWED_BLOCK_STATUSES)
    return int(status)


def _as_pattern_tuple(value: Any) -> tuple:
    # A lone pattern is one rule, not an iterable of characters.
    if isinstance(value, (str, bytes, re.Pattern)):
        return (value,)
    return tuple(value or ())


@dataclass(frozen=True, slots=True)
class HoneypotOptions:
    """Caller configuration for the honeypot."""

    patterns: tuple = ()
    exclude: tuple = ()
    log: bool = True
    status: int = BlockStatus.GONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "patterns", _as_pattern_tuple(self.patterns))
        object.__setattr__(self, "exclude", _as_pattern_tuple(self.exclude))
        object.__setattr__(self, "status", validate_block_status(self.status))


DEFAULT_OPTIONS = HoneypotOptions()
