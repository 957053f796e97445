#!/usr/bin/env python3
"""Example: Quickstart — ingress-annotations

Minimal working example: load an ingress manifest, read typed
annotations, and parse the secure upstream settings.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install ingress-annotations
"""
from __future__ import annotations

import ingress_annotations as ia
from ingress_annotations.resolver import AuthSSLCert, StaticResolver
from ingress_annotations.secureupstream import SecureUpstreamParser

MANIFEST = '''
apiVersion: networking.k8s.io/v1
kind: Ingress
metadata:
  name: foo
  namespace: default
  annotations:
    ingress.open-cluster-management.io/secure-backends: "true"
    ingress.open-cluster-management.io/secure-verify-ca-secret: secure-verify-ca
    icp.management.ibm.com/upstream-max-fails: "3"
'''


def main() -> None:
    print(f"ingress-annotations version: {ia.__version__}")

    # Step 1: Load the manifest
    ingress = ia.load_manifest(MANIFEST)
    print(f"Loaded ingress {ingress.namespace}/{ingress.name}")

    # Step 2: Typed lookups, canonical prefix first
    print(f"secure-backends    = {ia.get_bool_annotation('secure-backends', ingress)}")
    print(f"upstream-max-fails = {ia.get_int_annotation('upstream-max-fails', ingress)} (deprecated key)")

    # Step 3: Missing annotations are an ordinary, catchable outcome
    try:
        ia.get_string_annotation("rewrite-target", ingress)
    except ia.MissingAnnotationsError as exc:
        print(f"rewrite-target     : {exc}")

    # Step 4: Higher-level parser with a secret resolver
    resolver = StaticResolver({"default/secure-verify-ca": AuthSSLCert(secret="default/secure-verify-ca")})
    config = SecureUpstreamParser(resolver).parse(ingress)
    print(f"secure upstream    : secure={config.secure} ca={config.ca_cert.secret}")


if __name__ == "__main__":
    main()
