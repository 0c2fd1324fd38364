"""Semantic version parsing and ordering."""

import re
from dataclasses import dataclass, field
from functools import total_ordering
from ..exceptions import ParseError

# Minor and patch are optional; leading zeros are accepted ("20.04.1").
SEMVER_PATTERN = re.compile(
    r"v?(?P<major>[0-9]+)(?:\.(?P<minor>[0-9]+))?(?:\.(?P<patch>[0-9]+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)


def _compare(a, b) -> int:
    return (a > b) - (a < b)


def _as_int(identifier: str):
    # Only plain digit runs are numeric; "-1" is alphanumeric
    if identifier.isascii() and identifier.isdigit():
        return int(identifier)
    return None


def _compare_identifier(a: str, b: str) -> int:
    """Compare one dot-separated pre-release identifier."""
    if a == b:
        return 0
    # A missing identifier sorts before a present one
    if a == "":
        return -1
    if b == "":
        return 1

    a_num = _as_int(a)
    b_num = _as_int(b)
    if a_num is None and b_num is None:
        return _compare(a, b)
    if a_num is None:
        return 1
    if b_num is None:
        return -1
    return _compare(a_num, b_num)


def compare_prerelease(a: str, b: str) -> int:
    """Compare two non-empty pre-release strings by semver precedence."""
    a_parts = a.split(".")
    b_parts = b.split(".")

    for i in range(max(len(a_parts), len(b_parts))):
        a_part = a_parts[i] if i < len(a_parts) else ""
        b_part = b_parts[i] if i < len(b_parts) else ""
        result = _compare_identifier(a_part, b_part)
        if result != 0:
            return result
    return 0


@total_ordering
@dataclass(frozen=True, eq=False)
class ParsedVersion:
    """A comparable semantic version. Build metadata does not affect ordering."""

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    metadata: str = ""
    original: str = field(default="", compare=False)

    def compare(self, other: "ParsedVersion") -> int:
        """Return -1, 0 or 1 as this version is lower, equal or higher."""
        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            if mine != theirs:
                return _compare(mine, theirs)

        if not self.prerelease and not other.prerelease:
            return 0
        # A release outranks any of its pre-releases
        if not self.prerelease:
            return 1
        if not other.prerelease:
            return -1
        return compare_prerelease(self.prerelease, other.prerelease)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        # Numeric identifiers hash by value so "01" and "1" agree with __eq__
        identifiers = tuple(
            part if _as_int(part) is None else _as_int(part)
            for part in (self.prerelease.split(".") if self.prerelease else [])
        )
        return hash((self.major, self.minor, self.patch, identifiers))

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.metadata:
            version += f"+{self.metadata}"
        return version


ZERO_VERSION = ParsedVersion(original="v0.0.0")


def parse_version(version: str) -> ParsedVersion:
    """Parse a version string such as "v1.20.0", "1.4.3" or "5.4.0-1029-aws".

    Raises:
        ParseError: if the whole string is not a semantic version.
    """
    if version is None:
        raise ParseError("", "no version reported")

    match = SEMVER_PATTERN.fullmatch(version)
    if not match:
        raise ParseError(version)

    return ParsedVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor") or 0),
        patch=int(match.group("patch") or 0),
        prerelease=match.group("prerelease") or "",
        metadata=match.group("metadata") or "",
        original=version,
    )
