"""
Rendering functions for omzport output.

Everything human-readable goes to stderr so stdout stays free for
make output passing through.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from typing import Optional

from .version_manager import VersionInfo

console = Console(stderr=True)


def render_versions(remote: VersionInfo, local: VersionInfo,
                    out: Optional[Console] = None) -> None:
    """
    Render the upstream and local versions side by side.

    Args:
        remote: Version of the latest upstream commit
        local: Version recorded in the port Makefile
        out: Console to print to (defaults to stderr)
    """
    out = out or console

    table = Table(
        title="ohmyzsh port version",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("Source", style="cyan")
    table.add_column("Date")
    table.add_column("SHA")

    newer = remote.numeric_date > local.numeric_date
    table.add_row(
        "Upstream",
        f"[green]{remote.numeric_date}[/green]" if newer else str(remote.numeric_date),
        remote.sha,
    )
    table.add_row("Local", str(local.numeric_date), local.sha)

    out.print(table)
