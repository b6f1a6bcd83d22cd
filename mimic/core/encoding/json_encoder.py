"""
JSON encoder.
"""

from __future__ import annotations

import json
from typing import Any

from mimic.core.encoding.base import Encoder, to_plain


class JSON(Encoder):
    """Encode a single object as indented JSON."""

    def __init__(self, obj: Any) -> None:
        super().__init__()
        self._obj = obj

    def marshal(self) -> bytes:
        return (json.dumps(to_plain(self._obj), indent=2, ensure_ascii=False) + "\n").encode("utf-8")

    def encode_comment(self, comment: str) -> bytes:
        # JSON has no comment syntax.
        return b""
