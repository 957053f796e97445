"""Certificate lookup by secret name.

Feature parsers hold a ``Resolver`` and ask it for certificates named
``"<namespace>/<secret>"``.  How secrets are actually fetched is up to
the implementation; ``StaticResolver`` serves a fixed mapping and is
what the CLI and the tests use.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class AuthSSLCert:
    """A CA certificate extracted from a secret.

    Parameters
    ----------
    secret:
        ``namespace/name`` of the secret the certificate came from.
    ca_file_name:
        Path of the PEM file holding the CA bundle, if written to disk.
    pem_sha:
        SHA-1 of the PEM content, used to detect changes.
    """

    secret: str = ""
    ca_file_name: str = ""
    pem_sha: str = ""


class SecretNotFoundError(LookupError):
    """Raised when a resolver has no secret under the requested name."""

    def __init__(self, name: str) -> None:
        self.secret_name = name
        super().__init__(f"secret not found: {name}")


class Resolver(ABC):
    """Source of certificates referenced by annotations."""

    @abstractmethod
    def get_auth_certificate(self, name: str) -> AuthSSLCert | None:
        """Return the certificate stored in secret ``name``."""


class MockResolver(Resolver):
    """Resolver that knows no certificates and never fails."""

    def get_auth_certificate(self, name: str) -> AuthSSLCert | None:
        return None


class StaticResolver(Resolver):
    """Resolver backed by a fixed ``{"namespace/name": AuthSSLCert}`` mapping."""

    def __init__(self, certs: Mapping[str, AuthSSLCert] | None = None) -> None:
        self._certs = dict(certs or {})

    def get_auth_certificate(self, name: str) -> AuthSSLCert:
        try:
            return self._certs[name]
        except KeyError:
            raise SecretNotFoundError(name) from None
