"""Deterministic trace sampler.

Every process that sees the same trace id and sample rate reaches the same
keep/drop decision without coordination. The decision is the first four bytes
of ``SHA-1(trace_id)``, read big-endian as an unsigned 32-bit integer, compared
against ``0xFFFFFFFF // sample_rate``. Other beeline implementations (Go,
Node.js, Java) use exactly this digest, byte order and prefix, so changing any
of them breaks cross-service agreement.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from opentelemetry.sdk.trace.sampling import Decision, Sampler, SamplingResult
from opentelemetry.trace import format_trace_id, get_current_span

from honeycomb_sampler._errors import ConfigError

if TYPE_CHECKING:
    from opentelemetry.context import Context
    from opentelemetry.trace import Link, SpanKind
    from opentelemetry.trace.span import TraceState
    from opentelemetry.util.types import Attributes

    from honeycomb_sampler._config import SamplerConfig

logger = logging.getLogger("honeycomb_sampler.sampler")

SAMPLE_RATE_ATTRIBUTE = "sample.rate"

_MAX_UINT32 = 0xFFFFFFFF
_ALWAYS_SAMPLE = 1
_NEVER_SAMPLE = 0


def _sha1(data: bytes) -> bytes:
    """Return the SHA-1 digest of ``data`` using a fresh hash object."""
    return hashlib.new("sha1", data, usedforsecurity=False).digest()


def _parent_trace_state(parent_context: Context | None) -> TraceState | None:
    span_context = get_current_span(parent_context).get_span_context()
    if span_context is None or not span_context.is_valid:
        return None
    return span_context.trace_state


class DeterministicSampler(Sampler):
    """Samples 1-in-N traces based on a hash of the trace id.

    A rate of 0 never samples and a rate of 1 always samples; neither hashes.
    Instances hold no mutable state and can be shared across threads.

    Usage::

        provider = TracerProvider(sampler=DeterministicSampler(10))
    """

    DESCRIPTION = "HoneycombDeterministicSampler"

    def __init__(self, sample_rate: int) -> None:
        if isinstance(sample_rate, bool) or not isinstance(sample_rate, int):
            raise ConfigError(
                f"Sample rate must be an integer, got {type(sample_rate).__name__}"
            )
        if sample_rate < 0:
            raise ConfigError(f"Sample rate must not be negative, got {sample_rate}")

        try:
            _sha1(b"")
        except ValueError as exc:
            logger.debug("SHA-1 digest unavailable", exc_info=True)
            raise ConfigError("Failed to load SHA-1 algorithm") from exc

        self._sample_rate = sample_rate
        # only consulted for rates above 1
        self._upper_bound = _MAX_UINT32 // max(sample_rate, _ALWAYS_SAMPLE)

        logger.debug(
            "Deterministic sampler configured: rate=%d upper_bound=%s",
            sample_rate,
            self.upper_bound,
        )

    @classmethod
    def from_config(cls, config: SamplerConfig) -> DeterministicSampler:
        """Build a sampler from a :class:`SamplerConfig`."""
        return cls(config.sample_rate)

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def upper_bound(self) -> int | None:
        """Largest hash prefix that is still sampled. None for rates 0 and 1."""
        if self._sample_rate > _ALWAYS_SAMPLE:
            return self._upper_bound
        return None

    def decide(self, trace_id: str) -> int:
        """Return the configured rate if the trace is kept, otherwise 0."""
        if self._sample_rate == _ALWAYS_SAMPLE:
            return _ALWAYS_SAMPLE
        if self._sample_rate == _NEVER_SAMPLE:
            return _NEVER_SAMPLE

        # lone surrogates become "?", as Java's String.getBytes(UTF_8) does
        digest = _sha1(trace_id.encode("utf-8", "replace"))
        # from_bytes never yields a negative value, so this compares unsigned
        hash_value = int.from_bytes(digest[:4], "big")
        if hash_value <= self._upper_bound:
            return self._sample_rate
        return _NEVER_SAMPLE

    def to_result(
        self,
        effective_rate: int,
        trace_state: TraceState | None = None,
    ) -> SamplingResult:
        """Wrap an effective rate in a SamplingResult.

        The ``sample.rate`` attribute is attached on drops too, so the intended
        rate is visible when debugging a decision.
        """
        decision = Decision.RECORD_AND_SAMPLE if effective_rate > 0 else Decision.DROP
        return SamplingResult(
            decision,
            {SAMPLE_RATE_ATTRIBUTE: effective_rate},
            trace_state,
        )

    def should_sample(
        self,
        parent_context: Context | None,
        trace_id: int | str,
        name: str,
        kind: SpanKind | None = None,
        attributes: Attributes = None,
        links: Sequence[Link] | None = None,
        trace_state: TraceState | None = None,
    ) -> SamplingResult:
        if isinstance(trace_id, int):
            trace_id = format_trace_id(trace_id)
        return self.to_result(
            self.decide(trace_id),
            _parent_trace_state(parent_context),
        )

    def get_description(self) -> str:
        return self.DESCRIPTION
