class KubeSkewError(Exception):
    """Base exception for kubeskew."""

    pass


class ConfigurationError(KubeSkewError):
    """Raised for unknown clusters and missing or invalid configuration."""

    pass


class FetchError(KubeSkewError):
    """Raised when a cluster's nodes cannot be listed."""

    pass


class ParseError(KubeSkewError):
    """Raised when a version string is not a recognizable semantic version."""

    def __init__(self, version: str, reason: str = "invalid semantic version"):
        self.version = version
        self.reason = reason
        super().__init__(f"could not parse version {version!r}: {reason}")
