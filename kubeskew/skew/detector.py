"""Fleet version-skew detection."""

from typing import List, Optional, Sequence, Tuple

from ..exceptions import ParseError
from ..model.node import Alert, AlertLevel, NodeFact
from ..utils.logger import get_logger
from .extractors import EXTRACTORS, VersionDimension, VersionGetter
from .versions import ZERO_VERSION, ParsedVersion, parse_version

logger = get_logger(__name__)

# Raw version reported until a node beats the zero version
LATEST_SENTINEL = "v0"


class SkewDetector:
    """Finds the newest version of a dimension and flags every node behind it.

    By default a single unparseable version abandons the whole dimension: the
    latest version is reported as "" and no alerts are raised. With
    ``skip_unparseable`` the offending node is logged and ignored instead.
    """

    def __init__(self, skip_unparseable: bool = False):
        self.skip_unparseable = skip_unparseable

    def detect(
        self,
        dimension: VersionDimension,
        nodes: Sequence[NodeFact],
        extract_fn: Optional[VersionGetter] = None,
    ) -> Tuple[str, List[Alert]]:
        """Return the latest raw version and the fleet-wide alerts.

        Per-node alerts are appended to each lagging node's ``alerts``.
        """
        dimension = VersionDimension(dimension)
        extract_fn = extract_fn or EXTRACTORS[dimension]
        alerts: List[Alert] = []

        if not nodes:
            return "", alerts

        latest = ZERO_VERSION
        latest_version = LATEST_SENTINEL
        parsed: List[Tuple[NodeFact, str, ParsedVersion]] = []

        for node in nodes:
            version = extract_fn(node)
            try:
                semver = parse_version(version)
            except ParseError as e:
                if not self.skip_unparseable:
                    logger.error(f"{dimension.value}: {e}")
                    return "", alerts
                logger.warning(f"{dimension.value}: skipping node {node.name}, {e}")
                continue

            parsed.append((node, version, semver))
            if semver > latest:
                latest = semver
                latest_version = version

        if not parsed:
            return "", alerts

        for node, version, semver in parsed:
            if semver < latest:
                node.alerts.append(
                    Alert(
                        level=AlertLevel.WARNING,
                        message=f"{dimension.value} version {version} is behind latest version: {latest_version}",
                    )
                )
                alerts.append(
                    Alert(
                        level=AlertLevel.WARNING,
                        message=f"Node {node.name} with version {version} is behind latest version: {latest_version}",
                    )
                )

        logger.debug(
            f"{dimension.value}: latest version {latest_version}, {len(alerts)} node(s) behind"
        )
        return latest_version, alerts


def detect_skew(
    dimension: VersionDimension,
    nodes: Sequence[NodeFact],
    extract_fn: Optional[VersionGetter] = None,
    skip_unparseable: bool = False,
) -> Tuple[str, List[Alert]]:
    """Run a one-off detection with a fresh SkewDetector."""
    return SkewDetector(skip_unparseable=skip_unparseable).detect(dimension, nodes, extract_fn)
