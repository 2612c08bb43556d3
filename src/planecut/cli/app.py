"""CLI application entry point for planecut.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from planecut import __version__
from planecut.cli.output import (
    console,
    create_progress,
    print_cancelled,
    print_document_info,
    print_error,
    print_header,
    print_job_errors,
    print_location,
    print_processing_info,
    print_step,
    print_summary,
)
from planecut.config import CropMode, LoggingConfig, PlanecutSettings, ProcessingConfig
from planecut.core import CropProcessor
from planecut.domain import Inside, OnEdge, OnVertex, PointLocation
from planecut.exceptions import (
    PlanecutError,
    ProcessingCancelledError,
    ShapeLoadError,
    ShapeSaveError,
)
from planecut.io import ShapeReader, ShapeWriter

# Create the Typer app
app = typer.Typer(
    name="planecut",
    help="Crop polygons against polygon frames and classify how shapes overlap.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Planecut[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Planecut geometry tools."""


@app.command()
def crop(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON crop document",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-cropped.json)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1 = no worker processes)",
            min=1,
        ),
    ] = None,
    mode: Annotated[
        str | None,
        typer.Option(
            "--mode",
            "-m",
            help="Force a crop mode on every job (inclusive|exclusive)",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Crop every subject polygon in a document against its frame.

    Example:
        planecut crop shapes.json

    This will create shapes-cropped.json holding the polygons produced by
    each job.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input path is not a file: {input_file}",
            details="Please provide a path to a JSON crop document.",
        )
        raise typer.Exit(code=1)

    mode_override: CropMode | None = None
    if mode is not None:
        try:
            mode_override = CropMode(mode.lower())
        except ValueError:
            print_error(
                f"Invalid mode: {mode}",
                details="Valid values: inclusive, exclusive",
            )
            raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = PlanecutSettings(
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        if not quiet:
            print_step("Loading document")

        reader = ShapeReader(input_file)
        reader.load()
        job_count = reader.job_count

        if not quiet:
            print_document_info(
                path=str(input_file),
                job_count=job_count,
                mode=mode_override.value if mode_override else None,
            )

        if job_count == 0:
            if not quiet:
                console.print("\nNo jobs found. Nothing to process.")
            raise typer.Exit(code=0)

        if not quiet:
            actual_workers = workers if workers else os.cpu_count() or 1
            print_step("Cropping")
            print_processing_info(actual_workers, is_auto=(workers is None))

        actual_output_path = output
        if actual_output_path is None:
            actual_output_path = ShapeWriter.get_output_path(input_file)

        processor = CropProcessor(settings, mode_override=mode_override)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Cropping {job_count} jobs",
                        total=job_count,
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    stats = processor.process(
                        input_path=input_file,
                        output_path=actual_output_path,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                stats = processor.process(
                    input_path=input_file,
                    output_path=actual_output_path,
                    max_workers=workers,
                )
        except ProcessingCancelledError as e:
            if not quiet:
                print_cancelled(e.processed_count, e.pending_count)
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
        except KeyboardInterrupt:
            if not quiet:
                print_cancelled()
            raise typer.Exit(code=130) from None

        if not quiet:
            print_summary(str(actual_output_path), stats)
            if verbose or stats.error_count:
                print_job_errors(stats.errors)

    except ShapeLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)
    except ShapeSaveError as e:
        print_error(f"Could not save results: {e.reason}")
        raise typer.Exit(code=1)
    except PlanecutError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _describe_location(location: PointLocation) -> str:
    if isinstance(location, OnVertex):
        return f"on vertex {location.index}"
    if isinstance(location, OnEdge):
        return f"on edge {location.index}"
    if isinstance(location, Inside):
        return "inside"
    return "outside"


@app.command()
def locate(
    polygon_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON polygon ({\"points\": [[x, y], ...]})",
            show_default=False,
        ),
    ],
    x: Annotated[float, typer.Argument(help="Point x coordinate")],
    y: Annotated[float, typer.Argument(help="Point y coordinate")],
) -> None:
    """Report where a point lies relative to a polygon.

    Vertex and edge indices refer to the polygon's counter-clockwise order.
    """
    try:
        polygon = ShapeReader(polygon_file).read_polygon()
        location = polygon.contains((x, y))
    except ShapeLoadError as e:
        print_error(f"Could not load polygon: {e.reason}")
        raise typer.Exit(code=1)
    except PlanecutError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_location(x, y, _describe_location(location))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
