"""Tests for deterministic trace-level sampling behaviour."""

from __future__ import annotations

import pytest

from honeycomb_sampler import Decision, DeterministicSampler

# (trace id, sample rate, kept). Shared with the other beeline implementations:
# every agent must reach these exact outcomes for these inputs.
CROSS_IMPLEMENTATION_FIXTURES: list[tuple[str, int, bool]] = [
    # Go beeline datapoints at rate 2
    ("4YeYygWjTZ41zOBKUoYUaSVxPGm78rdU", 2, False),
    ("iow4KAFBl9u6lF4EYIcsFz60rXGvu7ph", 2, True),
    ("EgQMHtruEfqaqQqRs5nwaDXsegFGmB5n", 2, True),
    ("UnVVepVdyGIiwkHwofyva349tVu8QSDn", 2, True),
    ("rWuxi2uZmBEprBBpxLLFcKtXHA8bQkvJ", 2, True),
    ("8PV5LN1IGm5T0ZVIaakb218NvTEABNZz", 2, False),
    ("EMSmscnxwfrkKd1s3hOJ9bL4zqT1uud5", 2, True),
    ("YiLx0WGJrQAge2cVoAcCscDDVidbH4uE", 2, True),
    ("IjD0JHdQdDTwKusrbuiRO4NlFzbPotvg", 2, False),
    ("ADwiQogJGOS4X8dfIcidcfdT9fY2WpHC", 2, False),
    ("DyGaS7rUMoU5Z4gHhrh6s1RBo6QuJ8Vv", 2, True),
    ("sRhjFWYNoqidjeYmOE1mlL5zpv9Yo5Ka", 2, True),
    # W3C hex trace ids
    ("000000000063d76f0000000037fe0393", 2, False),
    ("000000000063d76f0000000037fe0393", 10, False),
    ("000000000063d76f0000000037fe0393", 17, False),
    ("000000000063d76f0000000037fe0393", 100, False),
    ("000000000001355600000000000ffafd", 3, True),
    ("000000000001355600000000000ffafd", 10, True),
    ("000000000000d88900000000000b2fb2", 3, True),
    ("000000000000d88900000000000b2fb2", 10, False),
    ("0000000000001eef000000000001991c", 10, False),
    ("000000000004788b00000000003b20a0", 10, True),
    ("000000000004788b00000000003b20a0", 17, True),
    ("000000000004788b00000000003b20a0", 100, False),
    # Edge inputs
    ("", 2, False),
    ("héllo-trace", 2, True),
    ("héllo-trace", 4, True),
    ("héllo-trace", 7, False),
]


@pytest.mark.parametrize(("trace_id", "rate", "kept"), CROSS_IMPLEMENTATION_FIXTURES)
def test_cross_implementation_fixtures(trace_id: str, rate: int, kept: bool) -> None:
    sampler = DeterministicSampler(rate)
    expected = rate if kept else 0
    assert sampler.decide(trace_id) == expected

    result = sampler.should_sample(None, trace_id, "fixture")
    assert result.decision.is_sampled() is kept
    assert dict(result.attributes) == {"sample.rate": expected}


def test_sampling_rate_1_keeps_all() -> None:
    """rate=1 keeps every trace."""
    sampler = DeterministicSampler(1)
    for i in range(200):
        result = sampler.should_sample(None, f"{i:032x}", "kept")
        assert result.decision == Decision.RECORD_AND_SAMPLE
        assert result.attributes["sample.rate"] == 1


def test_sampling_rate_0_drops_all() -> None:
    """rate=0 drops every trace."""
    sampler = DeterministicSampler(0)
    for i in range(200):
        result = sampler.should_sample(None, f"{i:032x}", "dropped")
        assert result.decision == Decision.DROP
        assert result.attributes["sample.rate"] == 0


@pytest.mark.parametrize("rate", [2, 5, 10, 1000])
def test_repeated_decisions_are_identical(rate: int) -> None:
    """Same id and rate give the same answer, on one sampler or a fresh one."""
    ids = [f"{i:032x}" for i in range(500)]
    first = DeterministicSampler(rate)
    baseline = [first.decide(tid) for tid in ids]

    assert [first.decide(tid) for tid in ids] == baseline
    assert [DeterministicSampler(rate).decide(tid) for tid in ids] == baseline


@pytest.mark.parametrize("rate", [2, 4, 10, 100])
def test_sampling_rate_approximate(rate: int) -> None:
    """The kept fraction over many ids is close to 1/rate (±20%)."""
    sampler = DeterministicSampler(rate)
    n = 10_000
    kept = sum(1 for i in range(n) if sampler.decide(f"{i:032x}"))
    expected = n / rate
    assert abs(kept - expected) <= 0.2 * expected, f"Expected ~{expected:.0f}, got {kept}"


def test_effective_rate_is_zero_or_configured() -> None:
    sampler = DeterministicSampler(7)
    outcomes = {sampler.decide(f"trace-{i}") for i in range(1000)}
    assert outcomes == {0, 7}
