"""
Remote service version classification.

TFE reports its version either in the legacy date-coded form (v202409-1)
or as a semantic version (1.2.3). Both are folded into a single integer
space so the controller can feature-gate on "new enough".

Encoding:
- Legacy:   year-month digits followed by the revision digit (v202409-1 -> 2024091)
- Semantic: SEMANTIC_VERSION_BASE + major*1_000_000 + minor*1_000 + patch

The encoding is one-way; there is no decoder.
"""

import re
import warnings
from typing import NamedTuple

# Oldest legacy release supporting the new behavior (v202409-1).
LEGACY_VERSION_THRESHOLD = 2024091
# Every semantic encoding starts at or above this value.
SEMANTIC_VERSION_BASE = 300_000_000

# Minor and patch each own a band of three decimal digits.
COMPONENT_LIMIT = 1_000

LEGACY_RE = re.compile(r"v([0-9]{6})-([0-9])")
SEMANTIC_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)(?:[-+].*)?", re.DOTALL)


class MalformedVersion(ValueError):
    """Raised when a version string matches neither known format."""

    def __init__(self, version: object, reason: str = ""):
        self.version = version
        message = f"malformed TFE version {version!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ClassificationResult(NamedTuple):
    encoded: int
    is_semantic: bool


def classify(version: str) -> ClassificationResult:
    """
    Classify and encode a TFE version string.

    The legacy format is tried first, then the semantic one.

    Args:
        version: Version string as reported by the remote service

    Returns:
        ClassificationResult with the encoded value and format flag

    Raises:
        MalformedVersion: If neither format matches, or a semantic
            minor/patch component would overflow into the next band
    """
    if not isinstance(version, str):
        raise MalformedVersion(version, "not a string")

    match = LEGACY_RE.fullmatch(version)
    if match:
        year_month, revision = match.groups()
        return ClassificationResult(int(year_month + revision), False)

    match = SEMANTIC_RE.fullmatch(version)
    if match:
        major, minor, patch = (int(group) for group in match.groups())
        if minor >= COMPONENT_LIMIT or patch >= COMPONENT_LIMIT:
            raise MalformedVersion(
                version, f"minor and patch must be below {COMPONENT_LIMIT}"
            )
        encoded = SEMANTIC_VERSION_BASE + major * 1_000_000 + minor * 1_000 + patch
        return ClassificationResult(encoded, True)

    raise MalformedVersion(version)


def parse_version(version: str) -> int:
    """Return only the encoded value of classify().

    Deprecated: use classify() to tell legacy and semantic versions apart.
    """
    warnings.warn(
        "parse_version() is deprecated, use classify() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return classify(version).encoded


def uses_modern_behavior(result: ClassificationResult) -> bool:
    """True for any semantic version and for legacy versions at or above the threshold."""
    return result.is_semantic or result.encoded >= LEGACY_VERSION_THRESHOLD
