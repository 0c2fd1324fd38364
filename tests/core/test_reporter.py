"""Test summary report generation."""

import json
from datetime import datetime

import yaml

from kubeskew.core.reporter import SummaryReporter, format_bytes
from kubeskew.model.cluster import ClusterFetchResult, ClusterHealthSummary
from kubeskew.model.node import Alert, AlertLevel, NodeFact
from kubeskew.model.report import ReportFormat


class TestSummaryReporter:
    def setup_method(self):
        """Set up test fixtures."""
        self.reporter = SummaryReporter()
        self.timestamp = datetime(2024, 1, 1, 12, 0, 0)

        lagging = NodeFact(
            name="node2",
            internal_ip="10.0.0.2",
            kubelet_version="v1.19.0",
            alerts=[
                Alert(
                    level=AlertLevel.WARNING,
                    message="Kubelet version v1.19.0 is behind latest version: v1.20.0",
                )
            ],
        )
        summary = ClusterHealthSummary(
            name="prod",
            cpu=8,
            memory=16 * 1024**3,
            disk=100 * 1024**3,
            kubelet_version="v1.20.0",
            kernel_version="5.4.0-1029-aws",
            cri_version="1.4.3",
            os_version="",
            kubelet_alerts=[
                Alert(
                    level=AlertLevel.WARNING,
                    message="Node node2 with version v1.19.0 is behind latest version: v1.20.0",
                )
            ],
            nodes=[NodeFact(name="node1", kubelet_version="v1.20.0"), lagging],
        )
        self.results = [
            ClusterFetchResult(cluster="prod", summary=summary),
            ClusterFetchResult(cluster="broken", error="failed to list nodes"),
        ]

    def test_text_report(self):
        report = self.reporter.generate_report(self.results, ReportFormat.TEXT, self.timestamp)

        assert "KUBERNETES NODE VERSION SKEW REPORT" in report
        assert "Generated: 2024-01-01 12:00:00" in report
        assert "CLUSTER prod" in report
        assert "CPU: 8 cores" in report
        assert "Memory: 16.0 GiB" in report
        assert "Kubelet: v1.20.0 (1 behind)" in report
        assert "OS: unknown (0 behind)" in report
        assert "Node node2 with version v1.19.0 is behind latest version: v1.20.0" in report
        assert "- node2 (10.0.0.2)" in report
        assert "[warning] Kubelet version v1.19.0 is behind latest version: v1.20.0" in report
        assert "Fetch failed: failed to list nodes" in report
        assert "- node1" not in report

    def test_json_report(self):
        report = self.reporter.generate_report(self.results, ReportFormat.JSON, self.timestamp)
        data = json.loads(report)

        assert data["timestamp"] == "2024-01-01T12:00:00"
        prod, broken = data["clusters"]
        assert prod["summary"]["kubelet_version"] == "v1.20.0"
        assert prod["summary"]["kubelet_alerts"][0]["level"] == "warning"
        assert prod["summary"]["nodes"][1]["alerts"][0]["level"] == "warning"
        assert broken["summary"] is None
        assert broken["error"] == "failed to list nodes"

    def test_yaml_report(self):
        report = self.reporter.generate_report(self.results, ReportFormat.YAML, self.timestamp)
        data = yaml.safe_load(report)

        assert data["clusters"][0]["cluster"] == "prod"
        assert data["clusters"][0]["summary"]["cpu"] == 8
        assert data["clusters"][0]["summary"]["kubelet_alerts"][0]["level"] == "warning"

    def test_format_bytes(self):
        assert format_bytes(0) == "0.0 GiB"
        assert format_bytes(3 * 1024**3 // 2) == "1.5 GiB"
