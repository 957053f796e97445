"""Secret resolution collaborators used by feature parsers."""
from __future__ import annotations

from ingress_annotations.resolver.resolver import (
    AuthSSLCert,
    MockResolver,
    Resolver,
    SecretNotFoundError,
    StaticResolver,
)

__all__ = [
    "AuthSSLCert",
    "Resolver",
    "MockResolver",
    "StaticResolver",
    "SecretNotFoundError",
]
