"""
Generator: orchestrates one generation run over a shared file pool.

Typical script:

    gen = mimic.new()
    with gen:
        prom = gen.with_path("providers", "prometheus")
        prom.add("prometheus.yaml", YAML(config))

Leaving the ``with`` block cleanly runs the write pass. If the block
raised, nothing is written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType

from mimic.core.encoding.base import Encoder
from mimic.core.pool import FilePool

GENERATED_COMMENT = "Generated by mimic. DO NOT EDIT."


class _RunState:
    """Per-run flag shared by a generator and all its children."""

    def __init__(self) -> None:
        self.generated = False


class Generator:
    """Entry point for generation scripts.

    Children created with ``with_path()`` or ``with_top_level_comment()``
    write into the same pool and share the single write pass.
    """

    def __init__(
        self,
        output_dir: Path | str = "gen",
        *,
        logger: logging.Logger | None = None,
        prune: bool = False,
        top_level_comments: list[str] | None = None,
        _pool: FilePool | None = None,
        _state: _RunState | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.prune = prune
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.pool = _pool if _pool is not None else FilePool(
            top_level_comments=[GENERATED_COMMENT, *(top_level_comments or [])],
            logger=self.logger,
        )
        self._state = _state if _state is not None else _RunState()

    def _child(self, pool: FilePool) -> Generator:
        return Generator(
            self.output_dir,
            logger=self.logger,
            prune=self.prune,
            _pool=pool,
            _state=self._state,
        )

    def with_path(self, *parts: str) -> Generator:
        """Generator rooted at a sub-directory of the current path."""
        return self._child(self.pool.with_path(*parts))

    def with_top_level_comment(self, comment: str) -> Generator:
        """Generator that adds ``comment`` to the header of every file."""
        return self._child(self.pool.with_top_level_comment(comment))

    def add(self, file_name: str, encoder: Encoder) -> str:
        """Stage a file at the current path. See ``FilePool.add``."""
        return self.pool.add(file_name, encoder)

    @property
    def generated(self) -> bool:
        return self._state.generated

    def generate(self) -> list[Path]:
        """Write all staged files. Only the first call does anything."""
        if self._state.generated:
            self.logger.debug("generate() already ran, skipping")
            return []
        written = self.pool.write(self.output_dir, prune=self.prune)
        self._state.generated = True
        return written

    def __enter__(self) -> Generator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.generate()
        else:
            self.logger.error("generation aborted, nothing written: %s", exc)
