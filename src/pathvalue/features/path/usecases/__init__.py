"""Ports consumed by path values."""

from .ports import ClockDecoder, MetadataProvider, PathEncoder, ProbeResult

__all__ = ["ClockDecoder", "MetadataProvider", "PathEncoder", "ProbeResult"]
