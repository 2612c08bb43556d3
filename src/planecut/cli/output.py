"""Rich console output for the planecut CLI."""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from planecut.utils import ProcessingStats

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    console.print(f"\n[bold]Planecut[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(path: str, job_count: int, mode: str | None) -> None:
    """Print the document path, its job count, and whether a mode is forced."""
    # Text keeps rich from reading brackets in the path as markup
    console.print(Text("  ").append(path))
    mode_str = f"{mode} (forced)" if mode else "per-job mode"
    console.print(f"  {job_count:,} jobs {SYM_DOT} {mode_str}")


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    mins, secs = divmod(seconds, 60)
    return f"{int(mins)}m {secs:.1f}s"


def print_summary(output_path: str, stats: ProcessingStats) -> None:
    """Print where the results went and how the run went.

    Args:
        output_path: Path of the written results document
        stats: Statistics of the finished run
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )
    console.print(Text("  ").append(output_path, style="bold"))

    error_style = "red" if stats.error_count else "green"
    console.print(
        f"  {stats.processed_count} jobs {SYM_DOT} {stats.polygons_emitted} polygons {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )
    if stats.avg_job_time_ms is not None:
        console.print(
            f"  {stats.avg_job_time_ms:.1f}ms avg per job "
            f"({stats.min_job_time_ms:.1f}-{stats.max_job_time_ms:.1f}ms range)"
        )


def print_job_errors(errors: list[tuple[str, str]], limit: int = 10) -> None:
    """Print a table of failed jobs, at most `limit` rows."""
    if not errors:
        return
    table = Table(show_header=True, header_style="bold red", box=None, padding=(0, 2))
    table.add_column("Job")
    table.add_column("Error")
    for name, message in errors[:limit]:
        table.add_row(name, message)
    console.print()
    console.print(table)
    if len(errors) > limit:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(errors) - limit} more)")


def print_location(x: float, y: float, location: str) -> None:
    console.print(f"  ({x:g}, {y:g}) {SYM_DOT} [bold]{location}[/bold]")


def print_error(message: str, details: str | None = None) -> None:
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancelled(processed: int | None = None, cancelled: int | None = None) -> None:
    """Print that the run was cancelled, with job counts when known."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    if processed is not None and cancelled is not None:
        console.print(f"  {processed} jobs completed {SYM_DOT} {cancelled} jobs cancelled")
    console.print("  No output file created")
