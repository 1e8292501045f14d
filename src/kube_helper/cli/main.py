"""Main CLI entry point using Typer."""

from __future__ import annotations

import structlog
import typer
import yaml
from rich.console import Console

from kube_helper.core.config import load_config
from kube_helper.integrations.kubectl import KubectlClient
from kube_helper.logging.config import configure_logging
from kube_helper.tui.apps.dashboard import KubeHelperApp

app = typer.Typer(
    name="kube-helper",
    help="Terminal dashboard for Kubernetes namespaces, pods and logs.",
    add_completion=False,
)

console = Console(stderr=True)
logger = structlog.get_logger()


@app.command()
def main(
    search: str = typer.Argument(
        "",
        help="Only show namespaces whose name contains this text (case-insensitive).",
    ),
) -> None:
    """Browse namespaces, then pods, logs and describe output of one namespace."""
    try:
        config = load_config()
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Error:[/red] invalid configuration: {e}")
        raise typer.Exit(1) from e

    configure_logging(debug=config.debug, log_file=config.debug_log_file)
    logger.info("kube_helper_starting", search=search, context=config.context)

    client = KubectlClient(
        binary_path=config.kubectl_path,
        context=config.context,
        timeout=config.command_timeout,
    )
    tui = KubeHelperApp(client=client, config=config, search=search)
    try:
        tui.run()
    except Exception as e:
        logger.exception("kube_helper_crashed")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    if tui.return_code:
        logger.error("kube_helper_failed", return_code=tui.return_code)
        raise typer.Exit(1)
    logger.info("kube_helper_stopped")


if __name__ == "__main__":
    app()
