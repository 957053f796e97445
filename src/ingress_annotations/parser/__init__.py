"""Annotation resolver.

Exports the prefix constants, the key-construction helpers and the three
typed lookup functions.
"""
from __future__ import annotations

from ingress_annotations.parser.parser import (
    ANNOTATIONS_PREFIX,
    DEPRECATED_ANNOTATIONS_PREFIX,
    IngressAnnotation,
    annotation_with_deprecated_prefix,
    annotation_with_prefix,
    get_bool_annotation,
    get_int_annotation,
    get_string_annotation,
)

__all__ = [
    "ANNOTATIONS_PREFIX",
    "DEPRECATED_ANNOTATIONS_PREFIX",
    "IngressAnnotation",
    "annotation_with_prefix",
    "annotation_with_deprecated_prefix",
    "get_bool_annotation",
    "get_string_annotation",
    "get_int_annotation",
]
