"""Main CLI interface using Typer."""

import logging
from pathlib import Path
from typing import Optional, List

import typer
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..core import ClusterAggregator, SummaryReporter, load_config
from ..model.cluster import ClusterFetchResult
from ..model.report import ReportFormat
from ..utils.logger import get_logger, set_log_level

# Create CLI app
app = typer.Typer(
    name="kubeskew",
    help="Detect node version skew across Kubernetes clusters",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)


def _version_cell(version: str, alert_count: int) -> str:
    """Format a latest-version cell, highlighting skew."""
    if not version:
        return "[red]unknown[/red]"
    if alert_count:
        return f"[yellow]{version} ({alert_count} behind)[/yellow]"
    return f"[green]{version}[/green]"


def _print_summary_table(results: List[ClusterFetchResult]) -> None:
    """Print one row per cluster."""
    table = Table(title="Cluster Version Skew", show_header=True, header_style="bold magenta")
    table.add_column("Cluster", style="cyan")
    table.add_column("Nodes", justify="right")
    table.add_column("CPU", justify="right")
    table.add_column("Kernel")
    table.add_column("Kubelet")
    table.add_column("CRI")
    table.add_column("OS")

    for result in results:
        summary = result.summary
        if summary is None:
            table.add_row(result.cluster, "-", "-", f"[red]{result.error}[/red]", "", "", "")
            continue

        table.add_row(
            summary.name,
            str(len(summary.nodes)),
            str(summary.cpu),
            _version_cell(summary.kernel_version, len(summary.kernel_alerts)),
            _version_cell(summary.kubelet_version, len(summary.kubelet_alerts)),
            _version_cell(summary.cri_version, len(summary.cri_alerts)),
            _version_cell(summary.os_version, len(summary.os_alerts)),
        )

    console.print(table)


@app.command()
def fetch(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to the kubeskew config file"
    ),
    clusters: List[str] = typer.Option(
        [], "--cluster", "-k", help="Cluster to fetch (can be used multiple times, default: all)"
    ),
    format: ReportFormat = typer.Option(
        ReportFormat.TEXT, "--format", "-f", help="Format for the written report"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Directory to write the report to"
    ),
    workers: int = typer.Option(4, "--workers", "-w", help="Clusters to fetch in parallel"),
    skip_unparseable: bool = typer.Option(
        False,
        "--skip-unparseable",
        help="Ignore nodes with unparseable versions instead of abandoning the dimension",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Fetch clusters and report node version skew."""
    if verbose:
        set_log_level(logging.DEBUG)

    try:
        config = load_config(config_path)
        if skip_unparseable:
            config.skew.skip_unparseable = True

        aggregator = ClusterAggregator.from_config(config)
        with console.status("[bold green]Fetching cluster nodes..."):
            results = aggregator.fetch_all(clusters or None, max_workers=workers)

        _print_summary_table(results)

        if output:
            extension_map = {
                ReportFormat.TEXT: "txt",
                ReportFormat.JSON: "json",
                ReportFormat.YAML: "yaml",
            }
            report_content = SummaryReporter().generate_report(results, format)

            output.mkdir(parents=True, exist_ok=True)
            report_path = output / f"skew-report.{extension_map[format]}"
            with open(report_path, "w") as f:
                f.write(report_content)

            console.print(f"[green]✓[/green] Report saved to: [cyan]{report_path}[/cyan]")

    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)

    failed = [result.cluster for result in results if not result.ok]
    if failed:
        logger.error(f"Failed to fetch {len(failed)} cluster(s): {', '.join(failed)}")
        raise typer.Exit(1)


@app.command()
def nodes(
    cluster: str = typer.Argument(..., help="Cluster to inspect"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to the kubeskew config file"
    ),
):
    """Show the nodes of one cluster with their versions and alerts."""
    try:
        config = load_config(config_path)
        aggregator = ClusterAggregator.from_config(config)
        summary = aggregator.fetch(cluster)

        table = Table(title=f"Nodes of {cluster}", show_header=True, header_style="bold magenta")
        table.add_column("Node", style="cyan")
        table.add_column("Internal IP")
        table.add_column("Kernel")
        table.add_column("Kubelet")
        table.add_column("Runtime")
        table.add_column("OS Image")
        table.add_column("Alerts", style="yellow")

        for node in summary.nodes:
            table.add_row(
                node.name,
                node.internal_ip,
                node.kernel_version,
                node.kubelet_version,
                node.container_runtime,
                node.os_image,
                "\n".join(alert.message for alert in node.alerts),
            )

        console.print(table)

    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def clusters(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to the kubeskew config file"
    ),
):
    """List configured clusters."""
    try:
        config = load_config(config_path)
    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Cluster", style="cyan")
    table.add_column("Kubeconfig")
    table.add_column("Context")

    for name, cluster in config.clusters.items():
        table.add_row(name, str(cluster.kubeconfig), cluster.context or "-")

    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]kubeskew[/bold] version {__version__}")
    console.print("A Kubernetes node version-skew inspector")


if __name__ == "__main__":
    app()
