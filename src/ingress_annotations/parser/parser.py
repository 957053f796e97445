"""Typed annotation lookup with deprecated-prefix fallback.

Annotations are addressed by a short name such as ``"secure-backends"``.
The name is first looked up under ``ANNOTATIONS_PREFIX`` and, when that
key is absent or holds an unparsable value, once more under
``DEPRECATED_ANNOTATIONS_PREFIX``.  The result of the second attempt is
final, success or failure.

Every function here is pure: nothing is cached, logged or mutated, so
all of them are safe to call from any number of threads.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ingress_annotations.errors import (
    InvalidAnnotationContentError,
    InvalidAnnotationNameError,
    MissingAnnotationsError,
)
from ingress_annotations.resource.nodes import AnnotatedResource

ANNOTATIONS_PREFIX = "ingress.open-cluster-management.io"
DEPRECATED_ANNOTATIONS_PREFIX = "icp.management.ibm.com"

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INT_PATTERN = re.compile(r"([+-]?)0*([0-9]+)")
_INT_MAX_DIGITS = 19
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

T = TypeVar("T")


class IngressAnnotation(ABC):
    """Base class for per-feature annotation parsers."""

    @abstractmethod
    def parse(self, ingress: Any) -> Any:
        """Extract the feature configuration from ``ingress``."""


# ---------------------------------------------------------------------------
# Key construction
# ---------------------------------------------------------------------------


def annotation_with_prefix(suffix: str) -> str:
    """Return ``suffix`` qualified with the canonical prefix."""
    return f"{ANNOTATIONS_PREFIX}/{suffix}"


def annotation_with_deprecated_prefix(suffix: str) -> str:
    """Return ``suffix`` qualified with the deprecated prefix."""
    return f"{DEPRECATED_ANNOTATIONS_PREFIX}/{suffix}"


# ---------------------------------------------------------------------------
# Value parsers
# ---------------------------------------------------------------------------


def _parse_bool(key: str, raw: str) -> bool:
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    raise InvalidAnnotationContentError(key, raw)


def _parse_string(key: str, raw: str) -> str:
    return raw


def _parse_int(key: str, raw: str) -> int:
    # int() alone would accept whitespace and "1_000"
    match = _INT_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidAnnotationContentError(key, raw)
    sign, digits = match.groups()
    # leading zeros are stripped; longer literals overflow 64 bits
    if len(digits) > _INT_MAX_DIGITS:
        raise InvalidAnnotationContentError(key, raw)
    value = int(sign + digits)
    if not _INT_MIN <= value <= _INT_MAX:
        raise InvalidAnnotationContentError(key, raw)
    return value


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _check_annotation(name: str, resource: AnnotatedResource | None) -> Mapping[str, str]:
    """Return the annotation mapping of ``resource`` or raise."""
    annotations = resource.get_annotations() if resource is not None else None
    if not annotations:
        raise MissingAnnotationsError()
    if not name:
        raise InvalidAnnotationNameError()
    return annotations


def _resolve_with(
    name: str,
    resource: AnnotatedResource | None,
    qualify: Callable[[str], str],
    parse: Callable[[str, str], T],
) -> T:
    """Look up and parse ``name`` under a single prefix."""
    annotations = _check_annotation(name, resource)
    key = qualify(name)
    if key not in annotations:
        raise MissingAnnotationsError()
    return parse(key, annotations[key])


def _resolve(
    name: str,
    resource: AnnotatedResource | None,
    parse: Callable[[str, str], T],
) -> T:
    try:
        return _resolve_with(name, resource, annotation_with_prefix, parse)
    except (MissingAnnotationsError, InvalidAnnotationContentError):
        # The deprecated attempt decides the outcome, even when it hides a
        # more specific error from the canonical key (kept as __context__).
        return _resolve_with(name, resource, annotation_with_deprecated_prefix, parse)


def get_bool_annotation(name: str, resource: AnnotatedResource | None) -> bool:
    """Extract a boolean from an annotation.

    Parameters
    ----------
    name:
        Annotation name without prefix, e.g. ``"secure-backends"``.
    resource:
        Resource whose annotations are consulted; may be ``None``.

    Returns
    -------
    bool
        The parsed value.

    Raises
    ------
    MissingAnnotationsError
        If the resource has no annotations or the key is absent under
        both prefixes.
    InvalidAnnotationNameError
        If ``name`` is empty.
    InvalidAnnotationContentError
        If the value read is not a boolean literal.
    """
    return _resolve(name, resource, _parse_bool)


def get_string_annotation(name: str, resource: AnnotatedResource | None) -> str:
    """Extract a string from an annotation.

    Any value is accepted, so only ``MissingAnnotationsError`` and
    ``InvalidAnnotationNameError`` can be raised.
    """
    return _resolve(name, resource, _parse_string)


def get_int_annotation(name: str, resource: AnnotatedResource | None) -> int:
    """Extract a base-10 signed 64-bit integer from an annotation.

    Raises the same errors as ``get_bool_annotation``.
    """
    return _resolve(name, resource, _parse_int)
