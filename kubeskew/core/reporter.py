"""Cluster health report generator."""

import json
import yaml
from datetime import datetime
from typing import List, Optional

from ..model.cluster import ClusterFetchResult, ClusterHealthSummary
from ..model.report import ReportFormat
from ..skew import VersionDimension
from ..utils.logger import get_logger

logger = get_logger(__name__)

GIB = 1024**3


def format_bytes(value: int) -> str:
    """Human-readable binary size, e.g. "15.6 GiB"."""
    return f"{value / GIB:.1f} GiB"


class SummaryReporter:
    """Renders fetch results as text, JSON or YAML."""

    def generate_report(
        self,
        results: List[ClusterFetchResult],
        output_format: ReportFormat,
        timestamp: Optional[datetime] = None,
    ) -> str:
        """Generate a report covering every fetched cluster."""
        timestamp = timestamp or datetime.now()
        logger.info(f"Generating {output_format.value} report for {len(results)} cluster(s)")

        if output_format == ReportFormat.JSON:
            return json.dumps(self._as_dict(results, timestamp), indent=2, default=str)
        elif output_format == ReportFormat.YAML:
            return yaml.dump(
                self._as_dict(results, timestamp), default_flow_style=False, sort_keys=False
            )
        else:
            return self._format_text_report(results, timestamp)

    def _as_dict(self, results: List[ClusterFetchResult], timestamp: datetime) -> dict:
        return {
            "timestamp": timestamp.isoformat(),
            "clusters": [result.model_dump(mode="json") for result in results],
        }

    def _format_text_report(self, results: List[ClusterFetchResult], timestamp: datetime) -> str:
        """Format report as human-readable text."""
        lines = []
        lines.append("=" * 80)
        lines.append("KUBERNETES NODE VERSION SKEW REPORT")
        lines.append("=" * 80)
        lines.append(f"Generated: {timestamp.strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append("")

        for result in results:
            if result.summary is None:
                lines.append(f"CLUSTER {result.cluster}")
                lines.append("-" * 40)
                lines.append(f"Fetch failed: {result.error}")
                lines.append("")
                continue
            lines.extend(self._format_cluster(result.summary))

        return "\n".join(lines)

    def _format_cluster(self, summary: ClusterHealthSummary) -> List[str]:
        lines = [f"CLUSTER {summary.name}", "-" * 40]
        lines.append(f"Nodes: {len(summary.nodes)}")
        lines.append(f"CPU: {summary.cpu} cores")
        lines.append(f"Memory: {format_bytes(summary.memory)}")
        lines.append(f"Ephemeral Storage: {format_bytes(summary.disk)}")
        lines.append("")

        lines.append("Latest Versions:")
        for dimension, version, alerts in (
            (VersionDimension.KERNEL, summary.kernel_version, summary.kernel_alerts),
            (VersionDimension.KUBELET, summary.kubelet_version, summary.kubelet_alerts),
            (VersionDimension.CONTAINER_RUNTIME, summary.cri_version, summary.cri_alerts),
            (VersionDimension.OS, summary.os_version, summary.os_alerts),
        ):
            lines.append(f"  {dimension.value}: {version or 'unknown'} ({len(alerts)} behind)")
            for alert in alerts:
                lines.append(f"    ⚠️  {alert.message}")
        lines.append("")

        lagging = [node for node in summary.nodes if node.alerts]
        if lagging:
            lines.append("Node Alerts:")
            for node in lagging:
                lines.append(f"- {node.name} ({node.internal_ip or 'no internal IP'})")
                for alert in node.alerts:
                    lines.append(f"  [{alert.level.value}] {alert.message}")
            lines.append("")

        return lines
