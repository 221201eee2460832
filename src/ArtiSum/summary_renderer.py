"""Markdown job summary assembly."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

from ArtiSum.file_tree import DEFAULT_MAX_ENTRIES, PathTree
from ArtiSum.models import BuildInfo, Operation, TransferDetails, TransferResult

BUILD_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"


def replace_protocol(url: str) -> str:
    """Downgrade https links to http.

    Summary links point at the platform itself; https URLs get masked as
    secrets by the CI log scrubber.
    """
    if url.startswith("https://"):
        return "http://" + url[len("https://"):]
    return url


def parse_build_time(timestamp: str) -> str:
    """Format a build-info timestamp as e.g. ``May 5, 2024 , 12:47:20``."""
    try:
        started = datetime.strptime(timestamp, BUILD_TIME_FORMAT)
    except (TypeError, ValueError):
        return "N/A"
    return f"{started:%b} {started.day}, {started:%Y , %H:%M:%S}"


def artifact_url(platform_url: str, target_path: str) -> str:
    """Return the platform UI link for an uploaded file, or "" without a platform."""
    if not platform_url:
        return ""
    base = replace_protocol(platform_url.rstrip("/"))
    return f"{base}/ui/repos/tree/General/{target_path.lstrip('/')}?clearFilter=true"


def render_build_info_table(builds: Sequence[BuildInfo]) -> str:
    """Render published builds as a Markdown table. Empty string for no builds."""
    if not builds:
        return ""

    parts: list[str] = [
        "\n\n|  Build Info |  Time Stamp | \n",
        "|---------|------------| \n",
    ]
    for build in builds:
        build_time = parse_build_time(build.started)
        build_url = replace_protocol(build.build_url)
        parts.append(
            f"| [{build.name} {build.number}]({build_url}) | {build_time} |\n"
        )
    parts.append("\n\n")
    return "".join(parts)


def build_file_tree(
    details: Iterable[TransferDetails],
    platform_url: str = "",
    max_entries: int = DEFAULT_MAX_ENTRIES,
) -> PathTree:
    """Collect uploaded target paths into a PathTree, linked when a platform is set."""
    tree = PathTree(max_entries=max_entries)
    for detail in details:
        tree.insert(detail.target_path, artifact_url(platform_url, detail.target_path))
    return tree


def _join_url(rt_url: str, target_path: str) -> str:
    if not rt_url:
        return target_path
    return f"{rt_url.rstrip('/')}/{target_path.lstrip('/')}"


def render_upload_summary(
    result: TransferResult,
    operation: Operation = Operation.UPLOAD,
    platform_url: str = "",
    max_entries: int = DEFAULT_MAX_ENTRIES,
) -> str:
    """Render the uploaded files (tree and table) and the failure count.

    The tree section is left out when more than *max_entries* files were
    uploaded; the table always lists every file.
    """
    parts: list[str] = []

    if result.success_count > 0:
        parts.append(f"## {operation.title}\n")

        tree_text = build_file_tree(result.successes, platform_url, max_entries).render()
        if tree_text:
            parts.append(f"<pre>\n{tree_text}</pre>\n\n")

        parts.append(
            "| Source Path 📁   | Target Path 🎯  | Sha256 🔢  |\n| --- | --- |--- |\n"
        )
        for detail in result.successes:
            target = _join_url(detail.rt_url, detail.target_path)
            parts.append(f"| {detail.source_path} | {target} | {detail.sha256} |\n")

    if result.fail_count > 0:
        parts.append(
            f"## [🚨Error] Failed uploading {result.fail_count} artifacts.\n"
        )

    return "".join(parts)


def render_job_summary(
    result: TransferResult | None = None,
    builds: Sequence[BuildInfo] = (),
    operation: Operation = Operation.UPLOAD,
    platform_url: str = "",
    max_entries: int = DEFAULT_MAX_ENTRIES,
) -> str:
    """Render the complete job summary document."""
    parts: list[str] = []
    if result is not None:
        parts.append(render_upload_summary(result, operation, platform_url, max_entries))
    parts.append(render_build_info_table(builds))
    return "".join(parts)
