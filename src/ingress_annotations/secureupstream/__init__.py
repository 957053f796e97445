"""Parser for the secure-backends family of annotations."""
from __future__ import annotations

from ingress_annotations.secureupstream.secureupstream import (
    SecureUpstreamConfig,
    SecureUpstreamError,
    SecureUpstreamParser,
)

__all__ = ["SecureUpstreamConfig", "SecureUpstreamError", "SecureUpstreamParser"]
