"""Summary settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from ArtiSum.file_tree import DEFAULT_MAX_ENTRIES

ENV_MAX_TREE_ENTRIES = "ARTISUM_MAX_TREE_ENTRIES"
ENV_PLATFORM_URL = "ARTISUM_PLATFORM_URL"
ENV_STEP_SUMMARY = "GITHUB_STEP_SUMMARY"


@dataclass
class SummaryConfig:
    max_tree_entries: int = DEFAULT_MAX_ENTRIES
    platform_url: str = ""
    summary_path: str | None = None  # None: fall back to the working directory

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SummaryConfig:
        """Build a config from environment variables, using defaults for unset ones."""
        env = os.environ if environ is None else environ

        max_entries = DEFAULT_MAX_ENTRIES
        raw = env.get(ENV_MAX_TREE_ENTRIES, "").strip()
        if raw:
            try:
                max_entries = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_MAX_TREE_ENTRIES} must be an integer, got {raw!r}"
                ) from None
            if max_entries < 0:
                raise ValueError(f"{ENV_MAX_TREE_ENTRIES} must be >= 0, got {raw!r}")

        return cls(
            max_tree_entries=max_entries,
            platform_url=env.get(ENV_PLATFORM_URL, "").strip().rstrip("/"),
            summary_path=env.get(ENV_STEP_SUMMARY) or None,
        )
