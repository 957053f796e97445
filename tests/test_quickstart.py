"""Test that the quickstart API works for ingress-annotations."""
from __future__ import annotations


def test_quickstart_imports() -> None:
    import ingress_annotations as ia

    assert callable(ia.get_bool_annotation)
    assert callable(ia.get_string_annotation)
    assert callable(ia.get_int_annotation)


def test_version(expected_version: str) -> None:
    import ingress_annotations as ia

    assert ia.__version__ == expected_version


def test_quickstart_load_and_resolve() -> None:
    import ingress_annotations as ia

    ingress = ia.load_manifest(
        "kind: Ingress\n"
        "metadata:\n"
        "  name: foo\n"
        "  annotations:\n"
        '    icp.management.ibm.com/secure-backends: "true"\n'
    )
    assert ia.get_bool_annotation("secure-backends", ingress) is True


def test_quickstart_missing_is_catchable() -> None:
    import pytest

    import ingress_annotations as ia

    ingress = ia.load_manifest("kind: Ingress\nmetadata:\n  name: foo\n")
    with pytest.raises(ia.AnnotationError):
        ia.get_string_annotation("secure-backends", ingress)
