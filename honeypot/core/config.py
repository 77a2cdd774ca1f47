# honeypot/core/config.py

from __future__ import annotations

import logging
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from honeypot.checks.block_policy import ALLOWED_BLOCK_STATUSES, BlockStatus, HoneypotOptions
from honeypot.checks.signatures import Signature, builtin_signatures, pattern_source

logger = logging.getLogger(__name__)


class HoneypotSettings(BaseSettings):
    """
    Environment driven honeypot configuration.

    Lists are read as JSON, e.g. ``HONEYPOT_EXCLUDE='["^/admin(\\\\.php)?$"]'``.
    """

    # ── Signatures ──
    PATTERNS: List[str] = []
    EXCLUDE: List[str] = []

    # ── Response ──
    LOG_BLOCKED: bool = True
    BLOCK_STATUS: int = int(BlockStatus.GONE)

    model_config = SettingsConfigDict(
        env_prefix="HONEYPOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("BLOCK_STATUS")
    @classmethod
    def validate_block_status(cls, v: int) -> int:
        if v not in ALLOWED_BLOCK_STATUSES:
            raise ValueError(f"BLOCK_STATUS must be one of {sorted(ALLOWED_BLOCK_STATUSES)}")
        return v

    # ── helpers ──
    def to_options(self) -> HoneypotOptions:
        return HoneypotOptions(
            patterns=tuple(self.PATTERNS),
            exclude=tuple(self.EXCLUDE),
            log=self.LOG_BLOCKED,
            status=self.BLOCK_STATUS,
        )

    # ── Startup validation ──
    def validate_patterns(self) -> None:
        """
        Compile every configured pattern so a typo fails at startup.

        Exclusions that match no built-in are reported at debug level only.

        Raises:
            SignatureCompilationError: If any pattern is malformed
        """
        for pattern in self.PATTERNS:
            Signature.from_pattern(pattern)

        builtin_sources = {sig.pattern for sig in builtin_signatures()}
        for pattern in self.EXCLUDE:
            if pattern_source(pattern) not in builtin_sources:
                logger.debug("[CONFIG] exclusion %r matches no built-in signature", pattern)


settings = HoneypotSettings()
