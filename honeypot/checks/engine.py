"""Probe decision engine used by the host middleware."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from honeypot.checks.block_policy import DEFAULT_OPTIONS, HoneypotOptions
from honeypot.checks.signatures import Decision, Signature, builtin_signatures, compose, decide
from honeypot.ip.client import extract_client_ip

logger = logging.getLogger(__name__)
blocked_logger = logging.getLogger("honeypot.blocked")

__all__ = ["BlockRecord", "HoneypotEngine", "build_engine"]


@dataclass(frozen=True, slots=True)
class BlockRecord:
    client_ip: str
    method: str
    path: str
    signature: str

    @classmethod
    def from_request(
        cls,
        decision: Decision,
        method: str,
        headers: Mapping[str, Any] | None,
    ) -> "BlockRecord":
        return cls(
            client_ip=extract_client_ip(headers),
            method=str(method or "").upper(),
            path=decision.path,
            signature=decision.signature.pattern if decision.signature else "",
        )


class HoneypotEngine:
    """
    Holds the effective rule list for one middleware configuration.

    The rule list is composed once here and only read afterwards, so one
    engine can serve concurrent requests without locking.
    """

    def __init__(
        self,
        options: HoneypotOptions = DEFAULT_OPTIONS,
        builtins: Iterable[Signature] | None = None,
    ) -> None:
        self.options = options
        self.rules: tuple[Signature, ...] = compose(
            builtin_signatures() if builtins is None else builtins,
            additions=options.patterns,
            exclusions=options.exclude,
        )

        logger.debug(
            "Honeypot engine configured rules=%s status=%s log=%s",
            len(self.rules),
            options.status,
            options.log,
        )

    @property
    def status(self) -> int:
        return self.options.status

    def decide(self, path: str) -> Decision:
        """Decide on a raw request path without side effects."""
        return decide(path, self.rules, status=self.options.status)

    def inspect(
        self,
        path: str,
        method: str = "GET",
        headers: Mapping[str, Any] | None = None,
    ) -> Decision:
        """Decide on a request and log it when it is blocked and logging is on."""
        decision = self.decide(path)

        if decision.blocked and self.options.log:
            self._log_blocked(decision, method, headers)

        return decision

    def _log_blocked(
        self,
        decision: Decision,
        method: str,
        headers: Mapping[str, Any] | None,
    ) -> None:
        try:
            record = BlockRecord.from_request(decision, method, headers)
            blocked_logger.info(
                "Blocked [%s] %s %s",
                record.client_ip,
                record.method,
                record.path,
                extra={
                    "client_ip": record.client_ip,
                    "method": record.method,
                    "path": record.path,
                    "signature": record.signature,
                },
            )
        except Exception:
            logger.exception("Failed to log blocked request path=%s", decision.path)


def build_engine(**overrides: Any) -> HoneypotEngine:
    """Build an engine from keyword options (patterns, exclude, log, status)."""
    return HoneypotEngine(HoneypotOptions(**overrides))
