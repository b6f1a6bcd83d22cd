"""
HCL encoder: HashiCorp configuration language (Terraform, Nomad, ...).

Mapping rules for a body:

    scalar / list of scalars   →  attribute        ``key = value``
    HCLMap                     →  object attribute ``key = { k = v }``
    mapping                    →  nested block     ``key { ... }``
    list of mappings           →  repeated blocks  ``key { ... }``

Labelled top-level blocks (``resource "aws_s3_bucket" "logs" { }``)
are built with ``HCLBlock``.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from mimic.core.encoding.base import Encoder, comment_lines, to_plain
from mimic.core.errors import EncodingError

_INDENT = "  "


class HCLMap(dict):
    """A mapping rendered as an object attribute instead of a block."""


@dataclass
class HCLBlock:
    """A top-level block with a type, optional labels and a body."""

    type: str
    labels: list[str] = field(default_factory=list)
    body: dict[str, Any] = field(default_factory=dict)


def _normalize(value: Any) -> Any:
    if isinstance(value, HCLBlock):
        return HCLBlock(value.type, list(value.labels), _normalize(value.body))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _normalize(to_plain(value))
    if isinstance(value, BaseModel):
        return _normalize(value.model_dump(mode="json", by_alias=True, exclude_none=True))
    if isinstance(value, HCLMap):
        return HCLMap({str(k): _normalize(v) for k, v in value.items()})
    if isinstance(value, Mapping):
        return {str(k): _normalize(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    return value


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    raise EncodingError(f"unsupported HCL value of type {type(value).__name__}")


def _expr(value: Any, depth: int) -> str:
    if isinstance(value, HCLMap):
        if not value:
            return "{}"
        pad = _INDENT * (depth + 1)
        width = max(len(k) for k in value)
        inner = [f"{pad}{k.ljust(width)} = {_expr(v, depth + 1)}" for k, v in value.items()]
        return "{\n" + "\n".join(inner) + "\n" + _INDENT * depth + "}"
    if isinstance(value, list):
        return "[" + ", ".join(_expr(v, depth) for v in value) + "]"
    return _scalar(value)


def _is_block_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and bool(value)
        and all(isinstance(v, Mapping) and not isinstance(v, HCLMap) for v in value)
    )


def _body(body: Mapping[str, Any], depth: int) -> list[str]:
    pad = _INDENT * depth
    attrs: list[tuple[str, Any]] = []
    blocks: list[tuple[str, Mapping[str, Any]]] = []

    for key, value in body.items():
        if isinstance(value, Mapping) and not isinstance(value, HCLMap):
            blocks.append((key, value))
        elif _is_block_list(value):
            blocks.extend((key, v) for v in value)
        else:
            attrs.append((key, value))

    lines: list[str] = []
    if attrs:
        width = max(len(k) for k, _ in attrs)
        lines.extend(f"{pad}{k.ljust(width)} = {_expr(v, depth)}" for k, v in attrs)

    for key, value in blocks:
        if lines:
            lines.append("")
        lines.extend(_block(key, [], value, depth))
    return lines


def _block(type_: str, labels: list[str], body: Mapping[str, Any], depth: int) -> list[str]:
    pad = _INDENT * depth
    header = " ".join([type_, *(json.dumps(label) for label in labels)])
    inner = _body(body, depth + 1)
    if not inner:
        return [f"{pad}{header} {{}}"]
    return [f"{pad}{header} {{", *inner, f"{pad}}}"]


class HCL(Encoder):
    """Encode a mapping, an ``HCLBlock`` or a list of them as HCL."""

    def __init__(self, obj: Any) -> None:
        super().__init__()
        self._obj = obj

    def marshal(self) -> bytes:
        obj = _normalize(self._obj)
        items = obj if isinstance(obj, list) else [obj]

        sections: list[str] = []
        for item in items:
            if isinstance(item, HCLBlock):
                lines = _block(item.type, item.labels, item.body, 0)
            elif isinstance(item, Mapping):
                lines = _body(item, 0)
            else:
                raise EncodingError(
                    f"HCL top level must be a mapping or HCLBlock, got {type(item).__name__}"
                )
            sections.append("\n".join(lines))

        return ("\n\n".join(sections) + "\n").encode("utf-8")

    def encode_comment(self, comment: str) -> bytes:
        return comment_lines(comment, "#")
