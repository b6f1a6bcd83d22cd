"""
Encoder base: the capability the file pool consumes.

An encoder wraps one or more objects and exposes them as a byte
stream in some serialization format, plus a way to render free text
as a comment in that same format. The pool never inspects the objects
themselves; the caller picks the format when building each entry.
"""

from __future__ import annotations

import dataclasses
import io
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import PurePath
from typing import Any

from pydantic import BaseModel

from mimic.core.errors import EncodingError


def to_plain(obj: Any) -> Any:
    """Convert models, dataclasses and containers into plain data.

    pydantic models are dumped with their aliases and without ``None``
    fields, so optional fields left unset never show up in the output.
    Dataclasses follow the same rule.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: to_plain(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
            if getattr(obj, f.name) is not None
        }
    if isinstance(obj, Mapping):
        return {str(k): to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_plain(v) for v in obj]
    if isinstance(obj, (set, frozenset)):
        return sorted(to_plain(v) for v in obj)
    if isinstance(obj, PurePath):
        return str(obj)
    return obj


def comment_lines(comment: str, prefix: str) -> bytes:
    """Render ``comment`` line by line with a line-comment ``prefix``."""
    out = []
    for line in comment.splitlines() or [""]:
        out.append(f"{prefix} {line}".rstrip() + "\n")
    return "".join(out).encode("utf-8")


class Encoder(ABC):
    """Readable byte stream of objects rendered in one format.

    Marshalling happens lazily on the first ``read()``. Once the stream
    is drained, further reads return ``b""``.
    """

    def __init__(self) -> None:
        self._buffer: io.BytesIO | None = None

    @abstractmethod
    def marshal(self) -> bytes:
        """Render the wrapped objects to bytes."""

    @abstractmethod
    def encode_comment(self, comment: str) -> bytes:
        """Render ``comment`` in the format's comment syntax."""

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes of encoded output (all if negative)."""
        if self._buffer is None:
            try:
                data = self.marshal()
            except EncodingError:
                raise
            except Exception as e:
                raise EncodingError(f"{type(self).__name__}: {e}") from e
            self._buffer = io.BytesIO(data)
        return self._buffer.read(size)
