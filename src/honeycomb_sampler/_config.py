"""Sampler configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SamplerConfig:
    """Immutable sampler configuration.

    ``sample_rate`` keeps on average 1-in-N traces: 0 drops everything,
    1 keeps everything. Validated when a sampler is built from it.
    """

    sample_rate: int = 1
