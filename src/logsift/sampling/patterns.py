"""Message pattern normalization.

Maps a log message to a stable template by replacing variable substrings
(identifiers, timestamps, addresses, counters) with fixed placeholder
tokens. Two messages that differ only in those values share a pattern,
which makes the pattern a deduplication key for diverse sampling.

Rules are applied in order. Order matters: an earlier rule's placeholder
must never be re-matched by a later rule, so more specific shapes come
first.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class NormalizationRule:
    """A single substitution applied to every match in the message."""

    name: str
    regex: re.Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.regex.sub(self.replacement, text)


DEFAULT_RULES: Tuple[NormalizationRule, ...] = (
    # UUIDs (canonical 8-4-4-4-12)
    NormalizationRule(
        "uuid",
        re.compile(
            r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
            re.IGNORECASE | re.ASCII,
        ),
        "{UUID}",
    ),
    # Long hex: trace IDs, hashes, object IDs
    NormalizationRule(
        "hex",
        re.compile(r"\b[0-9a-f]{16,}\b", re.IGNORECASE | re.ASCII),
        "{HEX}",
    ),
    # Short hex IDs
    NormalizationRule(
        "id",
        re.compile(r"\b[0-9a-f]{8,15}\b", re.IGNORECASE | re.ASCII),
        "{ID}",
    ),
    # ISO 8601 timestamps
    NormalizationRule(
        "timestamp",
        re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[.\dZ]*", re.ASCII),
        "{TS}",
    ),
    # IPv4 addresses
    NormalizationRule(
        "ipv4",
        re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b", re.ASCII),
        "{IP}",
    ),
    # Large numbers, after the shapes above so they stay intact
    NormalizationRule(
        "number",
        re.compile(r"\b\d{4,}\b", re.ASCII),
        "{N}",
    ),
)

MAX_PATTERN_LENGTH = 200


class PatternNormalizer:
    """Reduce messages to canonical patterns.

    Deterministic and side-effect free: the same message always yields the
    same pattern.
    """

    def __init__(
        self,
        rules: Sequence[NormalizationRule] = DEFAULT_RULES,
        max_length: int = MAX_PATTERN_LENGTH,
    ):
        self.rules = tuple(rules)
        self.max_length = max_length

    def normalize(self, message: Optional[str]) -> str:
        if not message:
            return ""

        normalized = message
        for rule in self.rules:
            normalized = rule.apply(normalized)

        return normalized[: self.max_length]


_DEFAULT_NORMALIZER = PatternNormalizer()


def normalize_to_pattern(message: Optional[str]) -> str:
    """Normalize ``message`` with the default rule table."""
    return _DEFAULT_NORMALIZER.normalize(message)
