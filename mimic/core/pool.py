"""
File pool: stages generated files in memory and writes them out once.

``add()`` never touches disk: it validates the name, drains the
encoder, prepends the pool's top-level comments and stores the bytes
under ``<path>/<file_name>``. Two adds resolving to the same path are
always a programming error, so the second one raises instead of
overwriting.

``write()`` is the only phase with I/O. It flushes every entry under
an output root and stops at the first failure.

Pools derived with ``with_path()`` / ``with_top_level_comment()`` share
the same entry map, so clashes are caught across the whole run.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from mimic.core.encoding.base import Encoder
from mimic.core.errors import (
    DirectoryCreationError,
    EncodingError,
    FilenameClashError,
    FileWriteError,
    InvalidFileNameError,
    InvalidPathError,
)


def _check_file_name(file_name: str) -> None:
    if (
        not file_name
        or file_name in (".", "..")
        or "/" in file_name
        or "\\" in file_name
        or os.path.basename(file_name) != file_name
    ):
        raise InvalidFileNameError(file_name)


def _split_segments(parts: Iterable[str]) -> tuple[str, ...]:
    """Split ``"a/b"`` style parts into clean relative segments."""
    segments: list[str] = []
    for part in parts:
        if not part or part.startswith(("/", "\\")) or os.path.isabs(part):
            raise InvalidPathError(part)
        for seg in PurePosixPath(part.replace("\\", "/")).parts:
            if seg == "..":
                raise InvalidPathError(part)
            if seg != ".":
                segments.append(seg)
    return tuple(segments)


class FilePool:
    """Accumulates rendered files keyed by their relative output path."""

    def __init__(
        self,
        path: Iterable[str] = (),
        top_level_comments: Iterable[str] = (),
        *,
        logger: logging.Logger | None = None,
        entries: dict[str, bytes] | None = None,
    ) -> None:
        self._path = _split_segments(path)
        self._comments = tuple(top_level_comments)
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._entries: dict[str, bytes] = {} if entries is None else entries

    # ── Views ───────────────────────────────────────────────────

    @property
    def path(self) -> tuple[str, ...]:
        return self._path

    @property
    def top_level_comments(self) -> tuple[str, ...]:
        return self._comments

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def with_path(self, *parts: str) -> FilePool:
        """Return a view rooted at ``path + parts`` sharing this pool's entries."""
        return FilePool(
            (*self._path, *_split_segments(parts)),
            self._comments,
            logger=self._logger,
            entries=self._entries,
        )

    def with_top_level_comment(self, comment: str) -> FilePool:
        """Return a view that also prepends ``comment`` to every added file."""
        return FilePool(
            self._path,
            (*self._comments, comment),
            logger=self._logger,
            entries=self._entries,
        )

    # ── Staging ─────────────────────────────────────────────────

    def add(self, file_name: str, encoder: Encoder) -> str:
        """Stage ``file_name`` at the current path with the encoder's output.

        Returns:
            The resolved relative path of the staged entry.

        Raises:
            InvalidFileNameError: ``file_name`` is not a bare name.
            EncodingError: The encoder's stream or a comment could not be
                rendered.
            FilenameClashError: Something was already staged at that path.
        """
        _check_file_name(file_name)

        try:
            content = encoder.read()
            if self._comments:
                header = b"".join(encoder.encode_comment(c) for c in self._comments)
                content = header + content
        except Exception as e:
            raise EncodingError(str(e), file_name=file_name) from e

        output = "/".join((*self._path, file_name))

        if output in self._entries:
            raise FilenameClashError(output)

        self._entries[output] = content
        self._logger.debug("staged file %s (%d bytes)", output, len(content))
        return output

    # ── Read-back ───────────────────────────────────────────────

    def entry(self, path: str) -> bytes:
        """Return the staged content at ``path`` (KeyError if absent)."""
        return self._entries[path]

    def paths(self) -> list[str]:
        """All staged paths, sorted."""
        return sorted(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # ── Write pass ──────────────────────────────────────────────

    def write(self, output_dir: Path | str, *, prune: bool = False) -> list[Path]:
        """Write every staged entry under ``output_dir``.

        Existing files are overwritten. The first filesystem error aborts
        the pass; files written before it are left in place.

        Args:
            output_dir: Root directory for the generated tree.
            prune: Also delete files under ``output_dir`` that are not
                part of this pool.

        Returns:
            Paths of the written files, in write order.
        """
        root = Path(output_dir)
        written: list[Path] = []

        for rel in sorted(self._entries):
            out = root / rel
            try:
                out.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
            except OSError as e:
                raise DirectoryCreationError(out.parent, e) from e

            self._logger.debug("writing file %s", out)
            try:
                out.write_bytes(self._entries[rel])
            except OSError as e:
                raise FileWriteError(out, e) from e
            written.append(out)

        self._logger.info("Wrote %d file(s) to %s", len(written), root)

        if prune:
            self.prune(root)
        return written

    def stale_files(self, output_dir: Path | str) -> list[Path]:
        """Files under ``output_dir`` that this pool would not produce."""
        root = Path(output_dir)
        if not root.is_dir():
            return []
        return sorted(
            p for p in root.rglob("*")
            if p.is_file() and p.relative_to(root).as_posix() not in self._entries
        )

    def prune(self, output_dir: Path | str) -> list[Path]:
        """Delete stale files and the empty directories they leave behind."""
        root = Path(output_dir)
        removed = self.stale_files(root)
        for path in removed:
            self._logger.info("removing stale file %s", path)
            try:
                path.unlink()
            except OSError as e:
                raise FileWriteError(path, e) from e

        # Deepest first so parents empty out before they are checked.
        dirs = sorted((p for p in root.rglob("*") if p.is_dir()), key=lambda p: len(p.parts), reverse=True)
        for d in dirs:
            if not any(d.iterdir()):
                try:
                    d.rmdir()
                except OSError as e:
                    raise FileWriteError(d, e) from e
        return removed
