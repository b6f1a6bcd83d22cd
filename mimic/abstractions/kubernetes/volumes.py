"""
Volume helpers: keep a pod Volume and its container VolumeMount in sync.

A Kubernetes volume is declared twice: once on the pod (``volumes:``)
and once per container that mounts it (``volumeMounts:``), linked only
by name. These helpers declare both from one object, and for
ConfigMap/Secret backed volumes also produce the backing resource.

    cfg = ConfigAndMount(
        metadata=ObjectMeta(name="prometheus-config", namespace="monitoring"),
        mount=VolumeMount(name="prometheus-config", mount_path="/etc/prometheus"),
        data={"prometheus.yaml": rendered},
    )
    shared = VolumeAndMount(mount=VolumeMount(name="data", mount_path="/data"))

    vms = VolumesAndMounts([cfg.volume_and_mount(), shared])
    pod_spec = {"containers": [...], "volumes": vms.volumes()}
    container["volumeMounts"] = vms.volume_mounts()

    gen.add("prometheus.yaml", YAML(statefulset, cfg.config_map()))
"""

from __future__ import annotations

import base64
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mimic.core.encoding.base import to_plain


class _K8sModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ObjectMeta(_K8sModel):
    """Subset of ``metav1.ObjectMeta`` used by generated resources."""

    name: str
    namespace: str | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None


class VolumeMount(_K8sModel):
    """Container-side half of a volume."""

    name: str
    mount_path: str = Field(alias="mountPath")
    sub_path: str | None = Field(default=None, alias="subPath")
    read_only: bool | None = Field(default=None, alias="readOnly")


class VolumeAndMount(_K8sModel):
    """A pod volume and the mount that references it.

    ``source`` is the volume source body, e.g. ``{"emptyDir": {}}``
    (the default) or ``{"persistentVolumeClaim": {"claimName": "x"}}``.
    """

    mount: VolumeMount
    source: dict[str, Any] = Field(default_factory=lambda: {"emptyDir": {}})

    @property
    def name(self) -> str:
        return self.mount.name

    def volume(self) -> dict[str, Any]:
        return {"name": self.mount.name, **to_plain(self.source)}

    def volume_mount(self) -> dict[str, Any]:
        return to_plain(self.mount)


class ConfigAndMount(_K8sModel):
    """A ConfigMap plus the volume and mount exposing it to a container."""

    metadata: ObjectMeta
    mount: VolumeMount
    data: dict[str, str] = Field(default_factory=dict)

    def volume_and_mount(self) -> VolumeAndMount:
        return VolumeAndMount(
            mount=self.mount,
            source={"configMap": {"name": self.metadata.name}},
        )

    def config_map(self) -> dict[str, Any]:
        return {
            "apiVersion": "v1",
            "kind": "ConfigMap",
            "metadata": to_plain(self.metadata),
            "data": dict(self.data),
        }


class SecretAndMount(_K8sModel):
    """A Secret plus the volume and mount exposing it to a container.

    ``data`` holds raw values; they are base64-encoded in ``secret()``.
    """

    metadata: ObjectMeta
    mount: VolumeMount
    data: dict[str, str | bytes] = Field(default_factory=dict)
    type: str = "Opaque"

    def volume_and_mount(self) -> VolumeAndMount:
        return VolumeAndMount(
            mount=self.mount,
            source={"secret": {"secretName": self.metadata.name}},
        )

    def secret(self) -> dict[str, Any]:
        encoded = {}
        for key, value in self.data.items():
            raw = value.encode("utf-8") if isinstance(value, str) else value
            encoded[key] = base64.b64encode(raw).decode("ascii")
        return {
            "apiVersion": "v1",
            "kind": "Secret",
            "metadata": to_plain(self.metadata),
            "type": self.type,
            "data": encoded,
        }


class VolumesAndMounts(list):
    """List of ``VolumeAndMount`` with pod/container projections."""

    def volumes(self) -> list[dict[str, Any]]:
        return [vm.volume() for vm in self]

    def volume_mounts(self) -> list[dict[str, Any]]:
        return [vm.volume_mount() for vm in self]
