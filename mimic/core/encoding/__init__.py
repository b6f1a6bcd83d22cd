"""
Encoders: render objects into bytes for the file pool.

Each format is one ``Encoder`` subclass:

    from mimic.core.encoding import YAML, JSON, HCL
"""

from mimic.core.encoding.base import Encoder, to_plain
from mimic.core.encoding.hcl_encoder import HCL, HCLBlock, HCLMap
from mimic.core.encoding.json_encoder import JSON
from mimic.core.encoding.yaml_encoder import YAML

__all__ = [
    "Encoder",
    "HCL",
    "HCLBlock",
    "HCLMap",
    "JSON",
    "YAML",
    "to_plain",
]
