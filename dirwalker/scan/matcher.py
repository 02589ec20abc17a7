"""Content matcher deciding whether file bytes carry a translation marker."""

from __future__ import annotations

from .policy import DEFAULT_POLICY, ScanPolicy


def decode_content(raw: bytes) -> str:
    """Decode file bytes as UTF-8, replacing undecodable sequences."""
    return raw.decode("utf-8", errors="replace")


def matches(raw: bytes, policy: ScanPolicy = DEFAULT_POLICY) -> bool:
    """Return ``True`` when ``raw`` contains any of ``policy.markers``.

    Plain substring search over the decoded text: no case folding and no
    whitespace normalization. One marker is enough.
    """
    text = decode_content(raw)
    return any(marker in text for marker in policy.markers)


__all__ = [
    "decode_content",
    "matches",
]
