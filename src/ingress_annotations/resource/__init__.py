"""Annotated resource model and manifest loading.

Exports the ``Ingress`` resource, its ``ObjectMeta``, the
``AnnotatedResource`` protocol consumed by the resolver, and the
``ManifestSerializer`` used to load resources from YAML or JSON.
"""
from __future__ import annotations

from ingress_annotations.resource.nodes import AnnotatedResource, Ingress, ObjectMeta
from ingress_annotations.resource.serializer import ManifestError, ManifestSerializer

__all__ = [
    "AnnotatedResource",
    "Ingress",
    "ObjectMeta",
    "ManifestError",
    "ManifestSerializer",
]
