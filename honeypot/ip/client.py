"""Client identifier lookup for blocked-request logging."""

from __future__ import annotations

from typing import Any, Mapping

UNKNOWN_CLIENT = "unknown"


def _lowercase_headers(headers: Mapping[str, Any] | None) -> dict[str, str]:
    if not headers:
        return {}

    lowered: dict[str, str] = {}
    for key, value in headers.items():
        if not key or value is None:
            continue
        lowered.setdefault(str(key).lower(), str(value))

    return lowered


def extract_client_ip(headers: Mapping[str, Any] | None) -> str:
    """
    Return the best-effort client IP, or ``"unknown"`` when no header carries one.

    Headers are tried in trust order: the edge provider header, the first hop
    of X-Forwarded-For, then X-Real-IP.
    """
    lowered = _lowercase_headers(headers)

    edge_ip = lowered.get("cf-connecting-ip", "").strip()
    if edge_ip:
        return edge_ip

    forwarded = lowered.get("x-forwarded-for", "")
    if forwarded:
        first_ip = forwarded.split(",")[0].strip()
        if first_ip:
            return first_ip

    real_ip = lowered.get("x-real-ip", "").strip()
    if real_ip:
        return real_ip

    return UNKNOWN_CLIENT
