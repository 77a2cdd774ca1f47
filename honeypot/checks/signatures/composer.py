# ./honeypot/checks/signatures/composer.py
"""
Rule composition: merge caller additions into the built-in signatures and
drop caller exclusions.

Exclusion is by exact equality of pattern source text. Two regexes that match
the same paths but are written differently are different rules here, so
``^/admin(\\.php)?$`` excludes the built-in admin panel rule while
``^/admin(?:\\.php)?$`` excludes nothing.
"""

import re
import logging
from typing import Iterable, Tuple, Union

from .exceptions import SignatureCompilationError
from .signature import Signature

logger = logging.getLogger(__name__)

PatternLike = Union[str, re.Pattern, Signature]


def pattern_source(pattern: PatternLike) -> str:
    """
    Return the source text used to identify a rule.

    Raises:
        SignatureCompilationError: If a string pattern is not a valid regex
    """
    if isinstance(pattern, Signature):
        return pattern.pattern
    if isinstance(pattern, re.Pattern):
        return pattern.pattern

    try:
        re.compile(pattern)
    except (re.error, TypeError) as e:
        raise SignatureCompilationError(str(pattern), str(e)) from e
    return pattern


def compose(
    builtins: Iterable[Signature],
    additions: Iterable[PatternLike] = (),
    exclusions: Iterable[PatternLike] = (),
) -> Tuple[Signature, ...]:
    """
    Build the effective rule list.

    Args:
        builtins: Ordered built-in signatures
        additions: Caller signatures, appended after the built-ins
        exclusions: Patterns whose source text removes a matching built-in

    Returns:
        Immutable, ordered tuple of signatures

    Raises:
        SignatureCompilationError: If an addition or exclusion is malformed
    """
    builtins = tuple(builtins)
    excluded = {pattern_source(p) for p in exclusions}
    extra = [Signature.from_pattern(p) for p in additions]

    kept = [sig for sig in builtins if sig.pattern not in excluded]

    unused = excluded.difference(sig.pattern for sig in builtins)
    if unused:
        logger.debug(f"Exclusions matched no built-in signature: {sorted(unused)}")

    return tuple(kept) + tuple(extra)
