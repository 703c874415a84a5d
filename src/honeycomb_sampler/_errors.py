"""Exception hierarchy for the sampler package."""

from __future__ import annotations


class SamplerError(Exception):
    """Base exception for all honeycomb_sampler errors."""


class ConfigError(SamplerError, ValueError):
    """Raised when a sampler cannot be built from the given configuration.

    Covers invalid sample rates as well as a runtime that cannot provide the
    SHA-1 digest. Both are fatal at construction time; decisions never raise.
    """
