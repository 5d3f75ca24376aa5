"""Display utilities for the startup screen."""

from rich.console import Console
from rich.table import Table

from burstpace import __version__
from burstpace.application.services import TransferResult
from burstpace.domain import ThrottleConfig

console = Console()


def format_rate(bytes_per_second: int) -> str:
    """Human readable transfer rate."""
    if bytes_per_second >= 1_000_000:
        return f"{bytes_per_second / 1_000_000:.1f} MB/s"
    if bytes_per_second >= 1_000:
        return f"{bytes_per_second / 1_000:.1f} kB/s"
    return f"{bytes_per_second} B/s"


def build_throttle_table(config: ThrottleConfig) -> Table:
    """Tabulate throttle settings."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    if not config.enabled:
        table.add_row("Throttle", "[yellow]disabled[/yellow] (passthrough)")
        return table

    table.add_row("Throttle", "[green]enabled[/green]")
    if config.burst_timeout > 0:
        table.add_row(
            "Burst",
            f"{format_rate(config.burst_limit)} for {config.burst_timeout}s",
        )
    else:
        table.add_row("Burst", "skipped")
    table.add_row("Sustained", format_rate(config.rate_limit))
    return table


def display_startup_screen(config: ThrottleConfig, url: str | None = None) -> None:
    """Print the startup banner with throttle settings."""
    console.print(f"[bold]burstpace[/bold] [dim]v{__version__}[/dim]")
    console.print(build_throttle_table(config))
    if url:
        console.print(f"Serving download at [bold blue]{url}[/bold blue]")
    console.print()


def display_transfer_result(result: TransferResult, target: str) -> None:
    """Print a one-line summary of a finished local transfer."""
    console.print(
        f"Wrote [bold]{result.bytes_sent:,}[/bold] bytes to {target} "
        f"({result.pauses} pauses, {result.seconds_waited:.1f}s waited)"
    )
