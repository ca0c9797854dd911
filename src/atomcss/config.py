"""Run settings shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from atomcss.compiler import DEFAULT_MANIFEST_VERSION


@dataclass(frozen=True)
class AtomConfig:
    manifest_version: str = DEFAULT_MANIFEST_VERSION
    include_critical: bool = True
    strict: bool = False  # warnings fail `atomcss check`
    log_level: str = "WARNING"
