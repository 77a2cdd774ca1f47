# ./honeypot/checks/signatures/matcher.py
"""
Path normalization and first-match evaluation.

Evaluation is synchronous and holds no state between calls; the rule list it
receives is never modified.
"""

import re
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .signature import Signature

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_STATUS = 410

_SEPARATOR_RUN = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """
    Collapse runs of ``/`` into a single separator.

    Scanners send ``//blog`` or ``///admin`` hoping anchored signatures miss
    a path that is otherwise identical, so this runs on every request.
    """
    return _SEPARATOR_RUN.sub("/", path)


@dataclass(frozen=True)
class Decision:
    """Outcome of evaluating one request path."""

    blocked: bool
    path: str
    status: Optional[int] = None
    signature: Optional[Signature] = None

    @classmethod
    def allow(cls, path: str) -> "Decision":
        return cls(blocked=False, path=path)

    @classmethod
    def block(cls, path: str, status: int, signature: Signature) -> "Decision":
        return cls(blocked=True, path=path, status=status, signature=signature)

    @property
    def allowed(self) -> bool:
        return not self.blocked


def first_match(path: str, rules: Iterable[Signature]) -> Optional[Signature]:
    """
    Return the first rule matching an already normalized path.

    Stops at the first hit; later rules are not evaluated.
    """
    for rule in rules:
        if rule.matches(path):
            return rule
    return None


def decide(
    raw_path: str,
    rules: Iterable[Signature],
    status: int = DEFAULT_BLOCK_STATUS,
) -> Decision:
    """
    Normalize a raw path and evaluate it against the effective rules.

    Args:
        raw_path: Request path as received from the host
        rules: Effective, ordered rule list
        status: Status carried by a block decision

    Returns:
        Decision.block on the first matching rule, Decision.allow otherwise
    """
    path = normalize_path(raw_path)
    matched = first_match(path, rules)

    if matched is None:
        return Decision.allow(path)

    logger.debug(f"Path {path!r} matched {matched.family.value} signature {matched.pattern!r}")
    return Decision.block(path, status, matched)
