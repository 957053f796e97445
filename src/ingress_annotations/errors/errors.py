"""Error taxonomy for annotation resolution.

Exactly three kinds of failure exist.  Callers usually treat
``MissingAnnotationsError`` as "feature not configured" and everything
else as a real problem with the resource.
"""
from __future__ import annotations


class AnnotationError(Exception):
    """Base class for every annotation resolution failure."""


class MissingAnnotationsError(AnnotationError):
    """The resource has no annotations, or the requested key is absent."""

    def __init__(self) -> None:
        super().__init__("ingress rule without annotations")


class InvalidAnnotationNameError(AnnotationError):
    """An empty annotation name was requested."""

    def __init__(self) -> None:
        super().__init__("invalid annotation name")


class InvalidAnnotationContentError(AnnotationError):
    """The annotation exists but its value cannot be parsed.

    Parameters
    ----------
    name:
        Fully qualified annotation key that was read.
    value:
        The raw string value found under ``name``.
    """

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"the annotation {name} does not contain a valid value ({value})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidAnnotationContentError):
            return NotImplemented
        return (self.name, self.value) == (other.name, other.value)

    def __hash__(self) -> int:
        return hash((type(self), self.name, self.value))


def is_missing_annotations(exc: BaseException) -> bool:
    """Return True if ``exc`` means the annotation is simply not set."""
    return isinstance(exc, MissingAnnotationsError)


def is_invalid_content(exc: BaseException) -> bool:
    """Return True if ``exc`` reports an unparsable annotation value."""
    return isinstance(exc, InvalidAnnotationContentError)
