"""Schemas for the export manifest.

This module defines the manifest contents and the fixed set of paths an
extraction run works with. Both are immutable once validated.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExportManifest(BaseModel):
    """Ordered list of the symbol names a build artifact exports."""

    exports: list[str] = Field(default_factory=list, description="Export names in harness order")

    @field_validator("exports")
    @classmethod
    def validate_unique(cls, v: list[str]) -> list[str]:
        """Reject repeated export names."""
        seen = set()
        for name in v:
            if name in seen:
                raise ValueError(f"duplicate export name: {name!r}")
            seen.add(name)
        return v

    def to_json(self) -> str:
        """Serialize as a compact JSON array of strings."""
        return json.dumps(self.exports, ensure_ascii=False, separators=(",", ":"))

    model_config = ConfigDict(frozen=True, extra="forbid")


class ExtractorPaths(BaseModel):
    """Paths derived from the tool's own location."""

    tool_dir: Path = Field(..., description="Directory containing the extractor")
    artifact_path: Path = Field(..., description="Compiled build artifact")
    manifest_path: Path = Field(..., description="Output manifest file")

    @field_validator("tool_dir")
    @classmethod
    def validate_tool_dir(cls, v: Path) -> Path:
        """Require an absolute tool directory."""
        if not v.is_absolute():
            raise ValueError(f"tool_dir must be absolute, got {v}")
        return v

    @property
    def build_dir(self) -> Path:
        return self.manifest_path.parent

    model_config = ConfigDict(frozen=True, extra="forbid")
