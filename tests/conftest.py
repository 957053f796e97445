"""Shared test fixtures for ingress-annotations.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Mapping

import pytest

from ingress_annotations.resource import Ingress, ObjectMeta


def build_ingress(annotations: Mapping[str, str] | None = None) -> Ingress:
    """Return the ``default/foo`` ingress routing foo.bar.com/foo."""
    backend = {"service": {"name": "default-backend", "port": {"number": 80}}}
    ingress = Ingress(
        metadata=ObjectMeta(name="foo", namespace="default"),
        spec={
            "defaultBackend": backend,
            "rules": [
                {
                    "host": "foo.bar.com",
                    "http": {"paths": [{"path": "/foo", "backend": backend}]},
                }
            ],
        },
    )
    if annotations is not None:
        ingress.set_annotations(annotations)
    return ingress


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"
