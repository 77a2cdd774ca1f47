# ./honeypot/checks/signatures/signature.py
"""
Signature data structures for probe detection.

A signature is a regular expression over the normalized request path. Its
anchoring (exact, prefix, suffix or anywhere) decides how much of the path
must match, and is the main guard against false positives: a root-level
resource must be anchored at the start so that the same name nested under an
application namespace is not blocked.

The anchoring is declared on every built-in signature and checked against the
pattern text when the signature is constructed.
"""

import re
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .exceptions import AnchoringMismatchError, SignatureCompilationError

logger = logging.getLogger(__name__)

DEFAULT_FLAGS = re.IGNORECASE

_INLINE_FLAGS = re.compile(r"^\(\?[aiLmsux]+\)")


class Anchoring(str, Enum):
    """How a signature is anchored to the path."""

    EXACT = "exact"  # ^...$
    PREFIX = "prefix"  # ^...
    SUFFIX = "suffix"  # ...$
    ANYWHERE = "anywhere"

    @classmethod
    def of(cls, pattern: str) -> "Anchoring":
        """
        Classify a pattern by its shape.

        Args:
            pattern: Regular expression source text

        Returns:
            Anchoring implied by a leading ``^`` and an unescaped trailing ``$``
            (a leading inline flag group such as ``(?i)`` is skipped)
        """
        pattern = _INLINE_FLAGS.sub("", pattern, count=1)
        starts = pattern.startswith("^")
        ends = _ends_with_anchor(pattern)

        if starts and ends:
            return cls.EXACT
        if starts:
            return cls.PREFIX
        if ends:
            return cls.SUFFIX
        return cls.ANYWHERE


def _ends_with_anchor(pattern: str) -> bool:
    if not pattern.endswith("$"):
        return False

    # An odd run of backslashes before the final $ escapes it.
    backslashes = len(pattern[:-1]) - len(pattern[:-1].rstrip("\\"))
    return backslashes % 2 == 0


class ProbeFamily(str, Enum):
    """Probe families used to group built-in signatures."""

    PHP = "php"
    SHELL = "shell"
    WORDPRESS = "wordpress"
    WORDPRESS_INTERNALS = "wordpress_internals"
    UPLOAD_DIRS = "upload_dirs"
    ADMIN_SUBDIRS = "admin_subdirs"
    CMS_DIRS = "cms_dirs"
    CMS_EXPLOITS = "cms_exploits"
    ADMIN_PANELS = "admin_panels"
    CMS_FRAMEWORKS = "cms_frameworks"
    SENSITIVE_FILES = "sensitive_files"
    BACKUP_FILES = "backup_files"
    CONFIG_FILES = "config_files"
    SERVER_INFO = "server_info"
    API_DOCS = "api_docs"
    ENV_LEAK = "env_leak"
    BACKUP_DIRS = "backup_dirs"
    DATABASE = "database"
    AUTH = "auth"
    DISCOVERY = "discovery"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Signature:
    """One path-matching rule."""

    pattern: str
    anchoring: Anchoring
    family: ProbeFamily = ProbeFamily.CUSTOM
    description: str = ""
    flags: int = DEFAULT_FLAGS
    compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "anchoring", Anchoring(self.anchoring))
        object.__setattr__(self, "family", ProbeFamily(self.family))

        actual = Anchoring.of(self.pattern)
        if actual is not self.anchoring:
            raise AnchoringMismatchError(
                self.pattern,
                declared=self.anchoring.value,
                actual=actual.value,
            )

        try:
            compiled = re.compile(self.pattern, self.flags)
        except re.error as e:
            raise SignatureCompilationError(self.pattern, str(e)) from e

        object.__setattr__(self, "compiled", compiled)

    @classmethod
    def from_pattern(
        cls,
        pattern: Union[str, re.Pattern, "Signature"],
        family: ProbeFamily = ProbeFamily.CUSTOM,
    ) -> "Signature":
        """
        Build a signature from caller-supplied input.

        Strings are compiled case-insensitively; compiled patterns keep their
        own flags. Anchoring is inferred from the pattern shape.

        Raises:
            SignatureCompilationError: If the pattern is not a valid regex
        """
        if isinstance(pattern, Signature):
            return pattern

        if isinstance(pattern, re.Pattern):
            source, flags = pattern.pattern, pattern.flags
        else:
            source, flags = pattern, DEFAULT_FLAGS

        if not isinstance(source, str):
            raise SignatureCompilationError(repr(source), "signature patterns must be text")

        return cls(
            pattern=source,
            anchoring=Anchoring.of(source),
            family=family,
            flags=flags,
        )

    @property
    def source(self) -> str:
        return self.pattern

    def matches(self, path: str) -> bool:
        return self.compiled.search(path) is not None
