"""Reading build-info and upload result files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ArtiSum.models import BuildInfo, TransferDetails, TransferResult


class SummaryDataError(Exception):
    """Raised when a summary data file cannot be read or parsed."""


def _read_json(path: str | Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise SummaryDataError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SummaryDataError(f"Invalid JSON in {path}: {exc}") from exc


def build_info_from_dict(data: dict) -> BuildInfo:
    """Convert a build-info JSON object into a BuildInfo."""
    return BuildInfo(
        name=str(data.get("name", "")),
        number=str(data.get("number", "")),
        started=data.get("started", ""),
        build_url=data.get("url") or data.get("buildUrl") or "",
    )


def load_build_infos(paths: Iterable[str | Path]) -> list[BuildInfo]:
    """Load one build-info document per file, in the given order."""
    builds: list[BuildInfo] = []
    for path in paths:
        data = _read_json(path)
        if not isinstance(data, dict):
            raise SummaryDataError(f"Expected a JSON object in {path}")
        builds.append(build_info_from_dict(data))
    return builds


def parse_path_list(text: str) -> list[TransferDetails]:
    """Parse pasted upload paths, one ``target_path [source_path]`` per line.

    Blank lines and lines starting with ``#`` are skipped.
    """
    details: list[TransferDetails] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        target, _, source = line.partition(" ")
        details.append(TransferDetails(source_path=source.strip(), target_path=target))
    return details


def load_transfer_result(path: str | Path) -> TransferResult:
    """Load an upload result file.

    Format::

        {"files": [{"sourcePath": ..., "targetPath": ..., "rtUrl": ..., "sha256": ...}],
         "failed": 0}
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise SummaryDataError(f"Expected a JSON object in {path}")

    successes: list[TransferDetails] = []
    for item in data.get("files", []):
        if "targetPath" not in item:
            raise SummaryDataError(f"Transfer record without targetPath in {path}")
        successes.append(
            TransferDetails(
                source_path=item.get("sourcePath", ""),
                target_path=item["targetPath"],
                rt_url=item.get("rtUrl", ""),
                sha256=item.get("sha256", ""),
            )
        )

    try:
        fail_count = int(data.get("failed", 0))
    except (TypeError, ValueError) as exc:
        raise SummaryDataError(f"Invalid failed count in {path}") from exc

    return TransferResult(successes=successes, fail_count=fail_count)
