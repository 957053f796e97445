"""Secure upstream configuration.

Reads three annotations:

``secure-backends``
    ``true`` to talk TLS to the backend service.
``secure-verify-ca-secret``
    Secret holding the CA used to verify the backend certificate.
``secure-client-ca-secret``
    Secret holding the CA bundle presented for client authentication.

A CA secret is only meaningful when ``secure-backends`` is on; setting
one on a plain backend is an error.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from ingress_annotations.errors import AnnotationError
from ingress_annotations.parser import IngressAnnotation, get_bool_annotation, get_string_annotation
from ingress_annotations.resolver import AuthSSLCert, Resolver
from ingress_annotations.resource import Ingress

logger = logging.getLogger(__name__)

T = TypeVar("T")

SECURE_BACKENDS = "secure-backends"
SECURE_VERIFY_CA_SECRET = "secure-verify-ca-secret"
SECURE_CLIENT_CA_SECRET = "secure-client-ca-secret"


class SecureUpstreamError(Exception):
    """Raised when the secure upstream annotations are inconsistent."""


@dataclass(frozen=True)
class SecureUpstreamConfig:
    """Parsed secure upstream settings for one ingress."""

    secure: bool = False
    ca_cert: AuthSSLCert = AuthSSLCert()
    client_ca_cert: AuthSSLCert = AuthSSLCert()


class SecureUpstreamParser(IngressAnnotation):
    """Build a ``SecureUpstreamConfig`` from ingress annotations.

    Parameters
    ----------
    resolver:
        Source of the certificates named by the CA secret annotations.
    """

    def __init__(self, resolver: Resolver) -> None:
        self._resolver = resolver

    def parse(self, ingress: Ingress) -> SecureUpstreamConfig:
        """Parse the secure upstream annotations of ``ingress``.

        Raises
        ------
        SecureUpstreamError
            If a CA secret is set on a non-secure backend, or a referenced
            secret cannot be resolved.
        """
        secure = self._optional(get_bool_annotation, SECURE_BACKENDS, ingress, False)
        ca = self._optional(get_string_annotation, SECURE_VERIFY_CA_SECRET, ingress, "")
        client_ca = self._optional(get_string_annotation, SECURE_CLIENT_CA_SECRET, ingress, "")

        if not secure:
            if ca:
                raise SecureUpstreamError(
                    f"trying to use CA from secret {ingress.namespace}/{ca} on a non secure backend"
                )
            if client_ca:
                raise SecureUpstreamError(
                    f"trying to use client CA from secret {ingress.namespace}/{client_ca} "
                    "on a non secure backend"
                )
            return SecureUpstreamConfig(secure=False)

        return SecureUpstreamConfig(
            secure=True,
            ca_cert=self._certificate(ingress, ca),
            client_ca_cert=self._certificate(ingress, client_ca),
        )

    def _certificate(self, ingress: Ingress, secret: str) -> AuthSSLCert:
        if not secret:
            return AuthSSLCert()
        name = f"{ingress.namespace}/{secret}"
        try:
            cert = self._resolver.get_auth_certificate(name)
        except Exception as exc:
            raise SecureUpstreamError(f"error obtaining certificate {name}: {exc}") from exc
        return cert if cert is not None else AuthSSLCert()

    @staticmethod
    def _optional(
        getter: Callable[[str, Ingress], T], name: str, ingress: Ingress, default: T
    ) -> T:
        try:
            return getter(name, ingress)
        except AnnotationError as exc:
            logger.debug("Annotation %s not usable on %s: %s", name, ingress.name, exc)
            return default
