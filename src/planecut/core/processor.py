"""Parallel processing orchestration for batch crops.

This module runs every job of a crop document, fanning jobs out to worker
processes with ProcessPoolExecutor.

Key components:
- crop_job: Top-level picklable function for parallel execution
- CropProcessor: Main orchestrator class for document processing
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from planecut.config import CropMode, GeometryConfig, PlanecutSettings, geometry_context
from planecut.core.crop import crop_polygon
from planecut.domain import Polygon
from planecut.exceptions import ProcessingCancelledError
from planecut.io import CropJob, ShapeReader, ShapeWriter
from planecut.utils import ProcessingLogger, ProcessingStats, configure_logging

ProgressCallback = Callable[[int, int, str, bool], None]


def crop_job(job_dict: dict[str, Any], geometry_dict: dict[str, Any]) -> dict[str, Any]:
    """Crop one subject/frame pair.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Installs the geometry tolerances, rebuilds the polygons under them, and
    crops.

    Args:
        job_dict: Serialized job with "name", "subject", "frame" and "mode"
        geometry_dict: Serialized geometry configuration

    Returns:
        Dictionary containing either:
        - Success: {"name": str, "polygons": [polygon_dict, ...], "duration_ms": float}
        - Error: {"error": str, "name": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        job = CropJob.model_validate(job_dict)
        mode = CropMode(job_dict["mode"])

        with geometry_context(GeometryConfig(**geometry_dict)):
            polygons = crop_polygon(job.subject_polygon(), job.frame_polygon(), mode)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": job_dict["name"],
            "polygons": [pg.to_dict() for pg in polygons],
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        tb = traceback.format_exc()
        return {
            "error": str(e),
            "name": job_dict.get("name", "unknown"),
            "traceback": tb,
            "duration_ms": duration_ms,
        }


class CropProcessor:
    """Orchestrates batch crop processing.

    Manages the complete workflow:
    1. Load the crop document
    2. Process jobs in parallel using worker processes
    3. Collect results and update statistics
    4. Save the results document

    Example:
        settings = PlanecutSettings()
        processor = CropProcessor(settings)
        stats = processor.process(
            input_path=Path("jobs.json"),
            output_path=Path("jobs-cropped.json"),
            max_workers=4
        )
    """

    def __init__(self, config: PlanecutSettings, mode_override: CropMode | None = None) -> None:
        """Initialize crop processor with configuration.

        Args:
            config: Planecut settings
            mode_override: Crop mode forced on every job, if given
        """
        self.config = config
        self.mode_override = mode_override
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def _job_to_dict(self, job: CropJob) -> dict[str, Any]:
        mode = self.mode_override or job.mode or self.config.processing.default_mode
        return {
            "name": job.name,
            "subject": [list(p) for p in job.subject],
            "frame": [list(p) for p in job.frame],
            "mode": CropMode(mode).value,
        }

    def process(
        self,
        input_path: Path,
        output_path: Path | None = None,
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> ProcessingStats:
        """Process a crop document with parallel job processing.

        Args:
            input_path: Path to the crop document
            output_path: Path for the results (auto-generated if None)
            max_workers: Maximum worker processes (None = config default)
            progress_callback: Optional callback(completed, total, job_name, success)
                for progress updates

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            ShapeLoadError: If the document cannot be loaded
            ShapeSaveError: If the results cannot be saved
            ProcessingCancelledError: If processing is cancelled by user
        """
        stats = ProcessingStats()
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        if output_path is None:
            output_path = ShapeWriter.get_output_path(input_path)

        self.logger.info(
            "Starting crop processing",
            input=str(input_path),
            output=str(output_path),
            max_workers=max_workers,
        )

        reader = ShapeReader(input_path)
        reader.load()
        jobs = list(reader.iter_jobs())
        self.logger.info("Document loaded", job_count=len(jobs))

        results = self._run_jobs(jobs, max_workers, stats, progress_callback)

        writer = ShapeWriter(output_path)
        for job in jobs:
            if job.name in results:
                writer.add_result(job.name, results[job.name])
        writer.save()

        stats.end_time = time.time()
        self.processing_logger.log_run_complete(stats)
        return stats

    def process_jobs(
        self,
        jobs: list[CropJob],
        max_workers: int | None = None,
    ) -> tuple[dict[str, list[Polygon]], ProcessingStats]:
        """Crop in-memory jobs without touching the filesystem.

        Args:
            jobs: Jobs to run
            max_workers: Maximum worker processes; 1 runs in this process

        Returns:
            (polygons by job name, statistics)
        """
        stats = ProcessingStats()
        stats.start_time = time.time()
        results = self._run_jobs(jobs, max_workers, stats, None)
        stats.end_time = time.time()
        return results, stats

    def _record_result(
        self,
        job_name: str,
        result: dict[str, Any],
        stats: ProcessingStats,
        results: dict[str, list[Polygon]],
    ) -> bool:
        if "error" in result:
            self.processing_logger.log_job_error(job_name, result["error"], result.get("traceback"))
            stats.record_error(job_name, result["error"])
            return False

        polygons = [Polygon.from_dict(d) for d in result["polygons"]]
        results[job_name] = polygons
        duration_ms = result.get("duration_ms", 0.0)
        self.processing_logger.log_job_complete(job_name, len(polygons), duration_ms)
        stats.record_success(len(polygons), duration_ms)
        return True

    def _run_jobs(
        self,
        jobs: list[CropJob],
        max_workers: int | None,
        stats: ProcessingStats,
        progress_callback: ProgressCallback | None,
    ) -> dict[str, list[Polygon]]:
        results: dict[str, list[Polygon]] = {}
        if not jobs:
            self.logger.info("No jobs to process")
            return results

        geometry_dict = self.config.geometry.model_dump()
        tasks: dict[str, dict[str, Any]] = {}
        for job in jobs:
            if job.name in tasks:
                self.processing_logger.log_job_skipped(job.name, "duplicate job name")
                stats.skipped_count += 1
                continue
            tasks[job.name] = self._job_to_dict(job)

        total = len(tasks)
        if max_workers == 1:
            completed = 0
            try:
                for name, job_dict in tasks.items():
                    self.processing_logger.log_job_start(name)
                    result = crop_job(job_dict, geometry_dict)
                    success = self._record_result(name, result, stats, results)
                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, name, success)
            except KeyboardInterrupt:
                raise self._cancelled(stats, total - completed) from None
            return results

        self.logger.info(
            "Starting parallel processing",
            job_count=total,
            max_workers=max_workers,
        )

        completed = 0
        pending_futures: dict[Future[dict[str, Any]], str] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for name, job_dict in tasks.items():
                self.processing_logger.log_job_start(name)
                future = executor.submit(crop_job, job_dict, geometry_dict)
                pending_futures[future] = name

            try:
                for future in as_completed(list(pending_futures)):
                    job_name = pending_futures.pop(future)
                    success = False

                    try:
                        success = self._record_result(job_name, future.result(), stats, results)
                    except Exception as e:
                        # Executor-level error
                        tb = traceback.format_exc()
                        self.processing_logger.log_job_error(job_name, str(e), tb)
                        stats.record_error(job_name, str(e))

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, job_name, success)

            except KeyboardInterrupt:
                for f in pending_futures:
                    f.cancel()
                executor.shutdown(wait=True, cancel_futures=True)
                raise self._cancelled(stats, len(pending_futures)) from None

        return results

    def _cancelled(self, stats: ProcessingStats, pending_count: int) -> ProcessingCancelledError:
        stats.record_cancelled(pending_count)
        stats.end_time = time.time()
        self.processing_logger.log_cancelled(stats)
        return ProcessingCancelledError(stats.processed_count, pending_count)
