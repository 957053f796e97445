"""ingress-annotations — typed access to ingress annotations.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import ingress_annotations as ia

    ingress = ia.load_manifest(text)

    # Reads ingress.open-cluster-management.io/secure-backends, falling
    # back to icp.management.ibm.com/secure-backends
    secure = ia.get_bool_annotation("secure-backends", ingress)

    ia.annotation_with_prefix("secure-backends")
    'ingress.open-cluster-management.io/secure-backends'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from ingress_annotations.errors import (
    AnnotationError,
    InvalidAnnotationContentError,
    InvalidAnnotationNameError,
    MissingAnnotationsError,
)
from ingress_annotations.parser import (
    ANNOTATIONS_PREFIX,
    DEPRECATED_ANNOTATIONS_PREFIX,
    annotation_with_deprecated_prefix,
    annotation_with_prefix,
    get_bool_annotation,
    get_int_annotation,
    get_string_annotation,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from ingress_annotations.resource.nodes import Ingress


def load_manifest(text: str) -> "Ingress":
    """Parse a single YAML or JSON ingress manifest.

    JSON is a subset of YAML, so one loader handles both.

    Raises
    ------
    ingress_annotations.resource.ManifestError
        If the text is not a valid ingress manifest.
    """
    from ingress_annotations.resource.serializer import ManifestSerializer

    return ManifestSerializer().from_yaml(text)


__all__ = [
    "__version__",
    "ANNOTATIONS_PREFIX",
    "DEPRECATED_ANNOTATIONS_PREFIX",
    "AnnotationError",
    "MissingAnnotationsError",
    "InvalidAnnotationNameError",
    "InvalidAnnotationContentError",
    "annotation_with_prefix",
    "annotation_with_deprecated_prefix",
    "get_bool_annotation",
    "get_string_annotation",
    "get_int_annotation",
    "load_manifest",
]
