"""Resource types carrying annotations.

Only a small slice of the Kubernetes ``Ingress`` object is modelled:
metadata (name, namespace, annotations, labels) plus the raw ``spec``
mapping, which is kept opaque.  The resolver itself depends on nothing
but the ``AnnotatedResource`` protocol.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

DEFAULT_NAMESPACE = "default"


@runtime_checkable
class AnnotatedResource(Protocol):
    """Anything that exposes a read accessor for its annotation mapping."""

    def get_annotations(self) -> Mapping[str, str] | None: ...


@dataclass
class ObjectMeta:
    """Identity and metadata of a namespaced resource.

    Parameters
    ----------
    name:
        Resource name, unique within ``namespace``.
    namespace:
        Namespace the resource lives in.
    annotations:
        String-keyed, string-valued annotation mapping.
    labels:
        String-keyed, string-valued label mapping.
    """

    name: str
    namespace: str = DEFAULT_NAMESPACE
    annotations: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class Ingress:
    """An ingress resource with metadata and an opaque spec."""

    metadata: ObjectMeta
    spec: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def get_annotations(self) -> dict[str, str]:
        """Return the annotation mapping (may be empty)."""
        return self.metadata.annotations

    def set_annotations(self, annotations: Mapping[str, str]) -> None:
        """Replace the annotation mapping with a copy of ``annotations``."""
        self.metadata.annotations = dict(annotations)
