"""Unit tests for ingress_annotations.resource — model and manifest serializer."""
from __future__ import annotations

import json
import logging

import pytest

from ingress_annotations.resource import (
    AnnotatedResource,
    Ingress,
    ManifestError,
    ManifestSerializer,
    ObjectMeta,
)

INGRESS_YAML = """\
apiVersion: networking.k8s.io/v1
kind: Ingress
metadata:
  name: foo
  namespace: team-a
  annotations:
    ingress.open-cluster-management.io/secure-backends: "true"
    icp.management.ibm.com/upstream-max-fails: "3"
spec:
  rules:
    - host: foo.bar.com
"""


class TestIngressModel:
    def test_defaults(self) -> None:
        ing = Ingress(metadata=ObjectMeta(name="foo"))
        assert ing.namespace == "default"
        assert ing.get_annotations() == {}
        assert ing.spec == {}

    def test_set_annotations_copies(self) -> None:
        source = {"a/b": "c"}
        ing = Ingress(metadata=ObjectMeta(name="foo"))
        ing.set_annotations(source)
        source["a/d"] = "e"
        assert ing.get_annotations() == {"a/b": "c"}

    def test_satisfies_protocol(self) -> None:
        assert isinstance(Ingress(metadata=ObjectMeta(name="foo")), AnnotatedResource)


class TestManifestSerializer:
    def test_from_yaml(self) -> None:
        ing = ManifestSerializer().from_yaml(INGRESS_YAML)
        assert ing.name == "foo"
        assert ing.namespace == "team-a"
        assert ing.get_annotations()["ingress.open-cluster-management.io/secure-backends"] == "true"
        assert ing.spec["rules"][0]["host"] == "foo.bar.com"

    def test_yaml_round_trip(self) -> None:
        serializer = ManifestSerializer()
        ing = serializer.from_yaml(INGRESS_YAML)
        assert serializer.from_yaml(serializer.to_yaml(ing)) == ing

    def test_json_round_trip(self) -> None:
        serializer = ManifestSerializer()
        ing = serializer.from_yaml(INGRESS_YAML)
        text = serializer.to_json(ing)
        assert json.loads(text)["kind"] == "Ingress"
        assert serializer.from_json(text) == ing

    def test_namespace_defaults(self) -> None:
        ing = ManifestSerializer().from_dict({"metadata": {"name": "foo"}})
        assert ing.namespace == "default"
        assert ing.get_annotations() == {}

    def test_to_dict_omits_empty_maps(self) -> None:
        data = ManifestSerializer().to_dict(Ingress(metadata=ObjectMeta(name="foo")))
        assert "annotations" not in data["metadata"]
        assert data["apiVersion"] == "networking.k8s.io/v1"

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"kind": "Service", "metadata": {"name": "foo"}},
            {"metadata": {}},
            {"metadata": "foo"},
            {"metadata": {"name": "foo", "annotations": ["a"]}},
            {"metadata": {"name": "foo", "annotations": {"replicas": 3}}},
            {"metadata": {"name": "foo"}, "spec": "bad"},
        ],
    )
    def test_invalid_manifests(self, data: object) -> None:
        with pytest.raises(ManifestError):
            ManifestSerializer().from_dict(data)

    def test_invalid_json(self) -> None:
        with pytest.raises(ManifestError):
            ManifestSerializer().from_json("{not json")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(ManifestError):
            ManifestSerializer().from_yaml("metadata: [unclosed")

    def test_load_all_yaml_skips_other_kinds(self, caplog: pytest.LogCaptureFixture) -> None:
        text = INGRESS_YAML + "---\nkind: Service\nmetadata:\n  name: svc\n---\n"
        with caplog.at_level(logging.DEBUG, logger="ingress_annotations.resource.serializer"):
            ingresses = ManifestSerializer().load_all_yaml(text)
        assert [ing.name for ing in ingresses] == ["foo"]
        assert "Skipping document 1" in caplog.text
