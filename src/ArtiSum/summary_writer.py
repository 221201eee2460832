"""Appending the job summary to the CI step summary file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ArtiSum.config import SummaryConfig
from ArtiSum.models import BuildInfo, Operation, TransferResult
from ArtiSum.summary_renderer import render_job_summary

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_FILENAME = "github-action-summary.md"


class SummaryWriteError(Exception):
    """Raised when the summary file cannot be written."""


def resolve_summary_path(config: SummaryConfig) -> Path:
    """Return the configured summary file, or one in the working directory."""
    if config.summary_path:
        return Path(config.summary_path)
    return Path.cwd() / DEFAULT_SUMMARY_FILENAME


def write_job_summary(markdown: str, config: SummaryConfig) -> Path:
    """Append *markdown* to the summary file, creating it if needed."""
    path = resolve_summary_path(config)
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(markdown)
    except OSError as exc:
        raise SummaryWriteError(f"Cannot write job summary to {path}: {exc}") from exc
    logger.info("Wrote job summary to %s", path)
    return path


def generate_summary_markdown(
    result: TransferResult | None,
    operation: Operation = Operation.UPLOAD,
    config: SummaryConfig | None = None,
    builds: Sequence[BuildInfo] = (),
) -> Path | None:
    """Render the job summary and append it to the summary file.

    Returns the path written to, or None when there was nothing to report.
    """
    config = config or SummaryConfig.from_env()
    markdown = render_job_summary(
        result,
        builds,
        operation=operation,
        platform_url=config.platform_url,
        max_entries=config.max_tree_entries,
    )
    if not markdown:
        logger.debug("Nothing to write to the job summary")
        return None
    return write_job_summary(markdown, config)
