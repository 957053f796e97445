"""Classified errors raised while reading ingress annotations."""
from __future__ import annotations

from ingress_annotations.errors.errors import (
    AnnotationError,
    InvalidAnnotationContentError,
    InvalidAnnotationNameError,
    MissingAnnotationsError,
    is_invalid_content,
    is_missing_annotations,
)

__all__ = [
    "AnnotationError",
    "MissingAnnotationsError",
    "InvalidAnnotationNameError",
    "InvalidAnnotationContentError",
    "is_missing_annotations",
    "is_invalid_content",
]
