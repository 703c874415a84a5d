"""honeycomb_sampler: deterministic trace sampling for OpenTelemetry."""

from __future__ import annotations

from opentelemetry.sdk.trace.sampling import Decision, SamplingResult

from honeycomb_sampler._config import SamplerConfig
from honeycomb_sampler._errors import ConfigError, SamplerError
from honeycomb_sampler._sampler import SAMPLE_RATE_ATTRIBUTE, DeterministicSampler

__version__ = "0.1.0"

__all__ = [
    "SAMPLE_RATE_ATTRIBUTE",
    "ConfigError",
    "Decision",
    "DeterministicSampler",
    "SamplerConfig",
    "SamplerError",
    "SamplingResult",
    "__version__",
    "create_sampler",
]


def create_sampler(sample_rate: int = 1) -> DeterministicSampler:
    """Create a deterministic sampler keeping 1-in-``sample_rate`` traces.

    Usage::

        from opentelemetry.sdk.trace import TracerProvider

        provider = TracerProvider(sampler=honeycomb_sampler.create_sampler(20))
    """
    return DeterministicSampler.from_config(SamplerConfig(sample_rate=sample_rate))
