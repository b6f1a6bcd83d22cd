"""
Generator configuration model.

Loaded from an optional ``mimic.yml`` and then overridden by
environment variables and CLI flags (see ``mimic.core.config.loader``).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GeneratorConfig(BaseModel):
    """Settings for one generation run.

    Attributes:
        output_dir:         Root directory of the generated tree.
        log_level:          Console log level.
        log_file:           Optional log file path.
        prune:              Delete files under output_dir not produced by this run.
        top_level_comments: Extra header comments after the generated marker.
    """

    output_dir: Path = Path("gen")
    log_level: str = "WARNING"
    log_file: str | None = None
    prune: bool = False
    top_level_comments: list[str] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(_LEVELS)}")
        return level
