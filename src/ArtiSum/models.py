"""Data classes for ArtiSum."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Operation(Enum):
    UPLOAD = "rt upload"
    PUBLISH = "publish"

    @property
    def title(self) -> str:
        return f"Command: {self.value}"


@dataclass
class TransferDetails:
    source_path: str
    target_path: str  # repo/dir/.../file
    rt_url: str = ""
    sha256: str = ""


@dataclass
class TransferResult:
    successes: list[TransferDetails] = field(default_factory=list)
    fail_count: int = 0

    @property
    def success_count(self) -> int:
        return len(self.successes)


@dataclass
class BuildInfo:
    name: str
    number: str
    started: str = ""
    build_url: str = ""
