"""
Probe Signature System

This package holds the rule engine that decides whether a request path is a
known scanner probe. Features include:

- An ordered, auditable set of built-in signatures grouped by probe family
- Explicit anchoring (exact, prefix, suffix, anywhere) on every signature
- Composition of caller additions and source-text exclusions
- Separator normalization and short-circuit first-match evaluation

Main Components:
- Signature: One path rule with its anchoring and family
- compose: Builds the immutable effective rule list
- decide: Normalizes a path and returns a Decision

Usage:
    from honeypot.checks.signatures import builtin_signatures, compose, decide

    rules = compose(builtin_signatures(), additions=[r"^/secret"], exclusions=[r"^/admin(\\.php)?$"])
    decision = decide("//blog", rules)
"""

from .signature import Anchoring, ProbeFamily, Signature
from .builtin import BUILTIN_SIGNATURES, builtin_signatures
from .composer import compose, pattern_source
from .matcher import DEFAULT_BLOCK_STATUS, Decision, decide, first_match, normalize_path
from .exceptions import (
    HoneypotError,
    SignatureCompilationError,
    AnchoringMismatchError,
    InvalidBlockStatusError,
)

__version__ = "1.0.0"

__all__ = [
    # Signature model
    'Anchoring',
    'ProbeFamily',
    'Signature',
    'BUILTIN_SIGNATURES',
    'builtin_signatures',

    # Composition
    'compose',
    'pattern_source',

    # Matching
    'DEFAULT_BLOCK_STATUS',
    'Decision',
    'decide',
    'first_match',
    'normalize_path',

    # Exceptions
    'HoneypotError',
    'SignatureCompilationError',
    'AnchoringMismatchError',
    'InvalidBlockStatusError',
]
