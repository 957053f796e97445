"""Manifest serialization for ingress resources.

Converts Kubernetes-style manifests (``apiVersion``, ``kind``,
``metadata``, ``spec``) to and from ``Ingress`` objects.  JSON and YAML
share the same plain dict form.

Usage
-----
::

    from ingress_annotations.resource import ManifestSerializer

    serializer = ManifestSerializer()
    ingress = serializer.from_yaml(Path("ingress.yaml").read_text())
    text = serializer.to_json(ingress)
"""
from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from ingress_annotations.resource.nodes import DEFAULT_NAMESPACE, Ingress, ObjectMeta

logger = logging.getLogger(__name__)

INGRESS_KIND = "Ingress"
DEFAULT_API_VERSION = "networking.k8s.io/v1"


class ManifestError(ValueError):
    """Raised when a manifest cannot be turned into an ``Ingress``."""


class ManifestSerializer:
    """Load and dump ingress manifests.

    Parameters
    ----------
    api_version:
        ``apiVersion`` written by ``to_dict``.
    """

    def __init__(self, api_version: str = DEFAULT_API_VERSION) -> None:
        self._api_version = api_version

    # ------------------------------------------------------------------
    # dict form
    # ------------------------------------------------------------------

    def from_dict(self, data: object) -> Ingress:
        """Build an ``Ingress`` from a decoded manifest mapping.

        Raises
        ------
        ManifestError
            If the manifest is not a mapping, is not an Ingress, lacks
            ``metadata.name``, or has non-string annotation values.
        """
        if not isinstance(data, dict):
            raise ManifestError(f"manifest must be a mapping, got {type(data).__name__}")

        kind = data.get("kind", INGRESS_KIND)
        if kind != INGRESS_KIND:
            raise ManifestError(f"expected kind {INGRESS_KIND!r}, got {kind!r}")

        raw_meta = data.get("metadata") or {}
        if not isinstance(raw_meta, dict):
            raise ManifestError("metadata must be a mapping")
        name = raw_meta.get("name")
        if not isinstance(name, str) or not name:
            raise ManifestError("metadata.name is required")

        metadata = ObjectMeta(
            name=name,
            namespace=raw_meta.get("namespace") or DEFAULT_NAMESPACE,
            annotations=_string_map(raw_meta.get("annotations"), "metadata.annotations"),
            labels=_string_map(raw_meta.get("labels"), "metadata.labels"),
        )
        spec = data.get("spec") or {}
        if not isinstance(spec, dict):
            raise ManifestError("spec must be a mapping")

        logger.debug(
            "Loaded ingress %s/%s with %d annotation(s)",
            metadata.namespace,
            metadata.name,
            len(metadata.annotations),
        )
        return Ingress(metadata=metadata, spec=spec)

    def to_dict(self, ingress: Ingress) -> dict[str, Any]:
        """Return the manifest mapping for ``ingress``."""
        metadata: dict[str, Any] = {
            "name": ingress.metadata.name,
            "namespace": ingress.metadata.namespace,
        }
        if ingress.metadata.annotations:
            metadata["annotations"] = dict(ingress.metadata.annotations)
        if ingress.metadata.labels:
            metadata["labels"] = dict(ingress.metadata.labels)
        return {
            "apiVersion": self._api_version,
            "kind": INGRESS_KIND,
            "metadata": metadata,
            "spec": ingress.spec,
        }

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, ingress: Ingress, indent: int = 2) -> str:
        """Serialize an ``Ingress`` to a JSON string."""
        return json.dumps(self.to_dict(ingress), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Ingress:
        """Deserialize an ``Ingress`` from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestError(f"invalid JSON manifest: {exc}") from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, ingress: Ingress) -> str:
        """Serialize an ``Ingress`` to a YAML string."""
        return yaml.dump(self.to_dict(ingress), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> Ingress:
        """Deserialize an ``Ingress`` from a single-document YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ManifestError(f"invalid YAML manifest: {exc}") from exc
        return self.from_dict(data)

    def load_all_yaml(self, text: str) -> list[Ingress]:
        """Return every Ingress in a multi-document YAML stream.

        Empty documents and documents of other kinds are skipped.
        """
        try:
            documents = list(yaml.safe_load_all(text))
        except yaml.YAMLError as exc:
            raise ManifestError(f"invalid YAML manifest: {exc}") from exc

        ingresses: list[Ingress] = []
        for index, document in enumerate(documents):
            if document is None:
                continue
            if isinstance(document, dict) and document.get("kind", INGRESS_KIND) != INGRESS_KIND:
                logger.debug("Skipping document %d of kind %r", index, document.get("kind"))
                continue
            ingresses.append(self.from_dict(document))
        return ingresses


def _string_map(raw: object, where: str) -> dict[str, str]:
    """Validate a string-to-string mapping such as annotations or labels."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ManifestError(f"{where} must be a mapping")
    result: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ManifestError(
                f"{where}[{key!r}] must map a string to a string, got {type(value).__name__}"
            )
        result[key] = value
    return result
