"""
Prometheus configuration models: the shape of ``prometheus.yml``.

Only the commonly generated parts are modelled. Durations are kept as
Prometheus duration strings (``"15s"``, ``"1m"``). Unset optional
fields are omitted when encoded, so ``YAML(Config())`` renders ``{}``.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_DURATION_RE = re.compile(r"^((\d+)y)?((\d+)w)?((\d+)d)?((\d+)h)?((\d+)m)?((\d+)s)?((\d+)ms)?$")


def _check_duration(value: str | None) -> str | None:
    if value is None:
        return value
    if value == "0" or (value and _DURATION_RE.match(value)):
        return value
    raise ValueError(f"invalid Prometheus duration {value!r}")


class _PromModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class GlobalConfig(_PromModel):
    scrape_interval: str | None = None
    scrape_timeout: str | None = None
    evaluation_interval: str | None = None
    external_labels: dict[str, str] | None = None

    @field_validator("scrape_interval", "scrape_timeout", "evaluation_interval")
    @classmethod
    def _duration(cls, value: str | None) -> str | None:
        return _check_duration(value)


class StaticConfig(_PromModel):
    targets: list[str] = Field(default_factory=list)
    labels: dict[str, str] | None = None


class RelabelConfig(_PromModel):
    source_labels: list[str] | None = None
    separator: str | None = None
    regex: str | None = None
    target_label: str | None = None
    replacement: str | None = None
    action: str | None = None


class ScrapeConfig(_PromModel):
    job_name: str
    scrape_interval: str | None = None
    scrape_timeout: str | None = None
    metrics_path: str | None = None
    scheme: str | None = None
    honor_labels: bool | None = None
    static_configs: list[StaticConfig] | None = None
    relabel_configs: list[RelabelConfig] | None = None

    @field_validator("scrape_interval", "scrape_timeout")
    @classmethod
    def _duration(cls, value: str | None) -> str | None:
        return _check_duration(value)


class AlertmanagerConfig(_PromModel):
    scheme: str | None = None
    path_prefix: str | None = None
    static_configs: list[StaticConfig] | None = None


class AlertingConfig(_PromModel):
    alertmanagers: list[AlertmanagerConfig] = Field(default_factory=list)


class RemoteWriteConfig(_PromModel):
    url: str
    name: str | None = None
    remote_timeout: str | None = None
    write_relabel_configs: list[RelabelConfig] | None = None


class RemoteReadConfig(_PromModel):
    url: str
    name: str | None = None
    remote_timeout: str | None = None
    read_recent: bool | None = None
    required_matchers: dict[str, str] | None = None


class Config(_PromModel):
    """Top-level ``prometheus.yml``."""

    global_config: GlobalConfig | None = Field(default=None, alias="global")
    alerting: AlertingConfig | None = None
    rule_files: list[str] | None = None
    scrape_configs: list[ScrapeConfig] | None = None
    remote_write: list[RemoteWriteConfig] | None = None
    remote_read: list[RemoteReadConfig] | None = None
