"""Style manifest: precomputed rules for a known token set, persisted as JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from atomcss.errors import ManifestError
from atomcss.model.rule import StyleRule, render_rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleManifest:
    """Snapshot of one compilation pass, keyed by a caller-supplied version."""

    version: str
    generated_at: str
    rules: dict[str, list[StyleRule]] = field(default_factory=dict)
    variants: dict[str, str] = field(default_factory=dict)
    critical: str = ""

    def css_for(self, tokens: Iterable[str]) -> str:
        """Serialize the precomputed rules of *tokens*, skipping unknown ones."""
        seen: set[str] = set()
        selected: list[StyleRule] = []
        for token in tokens:
            if token in seen:
                continue
            seen.add(token)
            selected.extend(self.rules.get(token, ()))
        return render_rules(selected)

    # --- persistence ----------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "generatedAt": self.generated_at,
            "rules": {
                token: [rule.to_dict() for rule in rules]
                for token, rules in self.rules.items()
            },
            "variants": dict(self.variants),
            "critical": self.critical,
        }

    @classmethod
    def from_dict(cls, data: Any) -> StyleManifest:
        if not isinstance(data, dict):
            raise ManifestError("manifest must be a JSON object")
        try:
            rules = {
                token: [StyleRule.from_dict(raw) for raw in raw_rules]
                for token, raw_rules in data.get("rules", {}).items()
            }
            return cls(
                version=data["version"],
                generated_at=data["generatedAt"],
                rules=rules,
                variants=dict(data.get("variants", {})),
                critical=data.get("critical", ""),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ManifestError(f"malformed manifest: {exc!r}") from exc

    def save(self, path: Path) -> None:
        """Serialise to JSON and write to *path*."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        logger.info("Wrote style manifest %s (%d tokens) to %s", self.version, len(self.rules), path)

    @classmethod
    def load(cls, path: Path) -> StyleManifest:
        """Deserialise a manifest from a JSON file at *path*."""
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ManifestError(f"invalid JSON: {exc}", path=str(path)) from exc
        try:
            return cls.from_dict(data)
        except ManifestError as exc:
            raise ManifestError(str(exc), path=str(path)) from exc
