"""Kubernetes client wrapper."""

import subprocess
import json
from pathlib import Path
from typing import List, Tuple, Optional, Dict, Any

from ..exceptions import ConfigurationError, FetchError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class K8sClient:
    """Wrapper for kubectl commands against one cluster."""

    def __init__(
        self,
        kubeconfig: Optional[Path] = None,
        context: Optional[str] = None,
        cluster: Optional[str] = None,
    ):
        self.kubeconfig = Path(kubeconfig).expanduser() if kubeconfig else None
        self.context = context
        self.cluster = cluster or context or "default"
        self._verify_kubeconfig()
        self._verify_kubectl()

    def _verify_kubeconfig(self):
        """Fail early when the configured kubeconfig does not exist."""
        if self.kubeconfig and not self.kubeconfig.is_file():
            raise ConfigurationError(
                f"failed to read kubeconfig {self.kubeconfig} for cluster {self.cluster}"
            )

    def _verify_kubectl(self):
        """Verify kubectl is available and configured."""
        try:
            subprocess.run(
                ["kubectl", "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise RuntimeError("kubectl command not found. Please install kubectl.")
        except subprocess.CalledProcessError:
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str]) -> List[str]:
        """Build kubectl command with kubeconfig and context."""
        cmd = ["kubectl"]

        if self.kubeconfig:
            cmd.extend(["--kubeconfig", str(self.kubeconfig)])

        if self.context:
            cmd.extend(["--context", self.context])

        cmd.extend(args)
        return cmd

    def execute(self, args: List[str]) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output."""
        cmd = self._build_command(args)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.error(f"Command failed: {e.stderr}")
            return False, e.stderr

    def list_nodes(self) -> List[Dict[str, Any]]:
        """List all nodes of the cluster.

        Raises:
            FetchError: if kubectl fails or returns something other than a node list.
        """
        success, output = self.execute(["get", "nodes", "-o", "json"])
        if not success:
            raise FetchError(f"failed to list nodes for cluster {self.cluster}: {output.strip()}")

        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise FetchError(f"failed to parse node list for cluster {self.cluster}: {e}")

        if not isinstance(data, dict) or not isinstance(data.get("items", []), list):
            raise FetchError(f"unexpected node list for cluster {self.cluster}")

        return data.get("items", [])
