"""Version extraction, comparison and skew detection."""

from .detector import SkewDetector, detect_skew
from .extractors import EXTRACTORS, VersionDimension, extract
from .versions import ZERO_VERSION, ParsedVersion, parse_version

__all__ = [
    "SkewDetector",
    "detect_skew",
    "EXTRACTORS",
    "VersionDimension",
    "extract",
    "ZERO_VERSION",
    "ParsedVersion",
    "parse_version",
]
