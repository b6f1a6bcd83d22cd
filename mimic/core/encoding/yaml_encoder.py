"""
YAML encoder.

Several objects become one multi-document stream, which is how
Kubernetes bundles (StatefulSet + Service + ConfigMap) are usually
shipped in a single file.
"""

from __future__ import annotations

from typing import Any

import yaml

from mimic.core.encoding.base import Encoder, comment_lines, to_plain


class YAML(Encoder):
    """Encode one or more objects as YAML documents separated by ``---``."""

    def __init__(self, *objs: Any) -> None:
        super().__init__()
        self._objs = objs

    def marshal(self) -> bytes:
        content = yaml.safe_dump_all(
            [to_plain(o) for o in self._objs],
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        return content.encode("utf-8")

    def encode_comment(self, comment: str) -> bytes:
        return comment_lines(comment, "#")
