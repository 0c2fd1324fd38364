"""Per-cluster node aggregation."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, List, Optional

from ..exceptions import ConfigurationError, KubeSkewError
from ..k8s import K8sClient, build_node_fact
from ..model.cluster import ClusterFetchResult, ClusterHealthSummary
from ..model.config import Config
from ..skew import SkewDetector, VersionDimension
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ClusterAggregator:
    """Builds health summaries from each configured cluster's nodes."""

    def __init__(self, clients: Dict[str, K8sClient], detector: Optional[SkewDetector] = None):
        self.clients = clients
        self.detector = detector or SkewDetector()

    @classmethod
    def from_config(cls, config: Config) -> "ClusterAggregator":
        """Create one client per configured cluster."""
        clients = {
            name: K8sClient(kubeconfig=cluster.kubeconfig, context=cluster.context, cluster=name)
            for name, cluster in config.clusters.items()
        }
        detector = SkewDetector(skip_unparseable=config.skew.skip_unparseable)
        return cls(clients, detector)

    @property
    def cluster_names(self) -> List[str]:
        return list(self.clients)

    def fetch(self, cluster: str) -> ClusterHealthSummary:
        """Fetch one cluster's nodes and compute its health summary.

        Raises:
            ConfigurationError: if no client is configured for the cluster.
            FetchError: if the cluster's nodes cannot be listed.
        """
        client = self.clients.get(cluster)
        if client is None:
            raise ConfigurationError(f"kubernetes client for cluster {cluster} not found")

        logger.info(f"Fetching nodes for cluster {cluster}")
        items = client.list_nodes()

        summary = ClusterHealthSummary(name=cluster)
        for item in items:
            node = build_node_fact(item)
            summary.cpu += node.cpu
            summary.memory += node.memory
            summary.disk += node.disk
            summary.nodes.append(node)

        nodes = summary.nodes
        summary.kernel_version, summary.kernel_alerts = self.detector.detect(
            VersionDimension.KERNEL, nodes
        )
        summary.kubelet_version, summary.kubelet_alerts = self.detector.detect(
            VersionDimension.KUBELET, nodes
        )
        summary.cri_version, summary.cri_alerts = self.detector.detect(
            VersionDimension.CONTAINER_RUNTIME, nodes
        )
        summary.os_version, summary.os_alerts = self.detector.detect(VersionDimension.OS, nodes)

        logger.info(
            f"Cluster {cluster}: {len(nodes)} node(s), "
            f"{len(summary.fleet_alerts)} version skew alert(s)"
        )
        return summary

    def fetch_all(
        self, clusters: Optional[Iterable[str]] = None, max_workers: int = 1
    ) -> List[ClusterFetchResult]:
        """Fetch several clusters independently.

        A failing cluster is reported in its result instead of aborting the run.
        Results keep the order of ``clusters``.
        """
        names = list(clusters) if clusters is not None else self.cluster_names
        results: Dict[str, ClusterFetchResult] = {}

        if max_workers <= 1 or len(names) <= 1:
            for name in names:
                results[name] = self._fetch_result(name)
        else:
            with ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="cluster_fetch"
            ) as executor:
                future_to_cluster = {executor.submit(self._fetch_result, name): name for name in names}
                for future in as_completed(future_to_cluster):
                    results[future_to_cluster[future]] = future.result()

        return [results[name] for name in names]

    def _fetch_result(self, cluster: str) -> ClusterFetchResult:
        try:
            return ClusterFetchResult(cluster=cluster, summary=self.fetch(cluster))
        except KubeSkewError as e:
            logger.error(f"Failed to fetch cluster {cluster}: {e}")
            return ClusterFetchResult(cluster=cluster, error=str(e))
