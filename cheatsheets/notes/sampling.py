"""
Cheat sheet for `random`.
Use a dedicated `random.Random(seed)` instance for reproducible draws instead of seeding the module-level generator.
Exact drawn values are not asserted because they are an implementation detail; checks restate invariants only.
"""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Sequence
from typing import TypeVar

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises, expect_true

TOPIC = "sampling"
DEFAULT_SEED = 7

T = TypeVar("T")


def make_rng(seed: int | None = DEFAULT_SEED) -> random.Random:
    return random.Random(seed)


def pick_one(rng: random.Random, population: Sequence[T]) -> T:
    return rng.choice(population)


def sample_unique(rng: random.Random, population: Sequence[T], k: int) -> list[T]:
    """Draw `k` distinct positions without replacement."""

    return rng.sample(population, k)


def sample_with_replacement(rng: random.Random, population: Sequence[T], k: int) -> list[T]:
    return rng.choices(population, k=k)


def weighted_pick(rng: random.Random, population: Sequence[T], weights: Sequence[float], k: int = 1) -> list[T]:
    return rng.choices(population, weights=weights, k=k)


def shuffled(rng: random.Random, items: Sequence[T]) -> list[T]:
    copy = list(items)
    rng.shuffle(copy)
    return copy


def collect_checks(*, seed: int = DEFAULT_SEED) -> list[NoteCheck]:
    population = list(range(10))

    first = make_rng(seed)
    second = make_rng(seed)
    first_draws = [first.random() for _ in range(5)]
    second_draws = [second.random() for _ in range(5)]

    rng = make_rng(seed)
    one = pick_one(rng, population)
    unique = sample_unique(rng, population, 5)
    repeated = sample_with_replacement(rng, ["a", "b"], 20)
    never_zero = weighted_pick(rng, ["skip", "take"], [0, 1], k=50)
    cumulative = rng.choices(["low", "high"], cum_weights=[0, 10], k=25)
    mixed = shuffled(rng, population)
    randranges = [rng.randrange(0, 10, 2) for _ in range(50)]
    randints = [rng.randint(1, 6) for _ in range(50)]
    uniforms = [rng.uniform(1.5, 2.5) for _ in range(50)]

    return [
        expect_equal(TOPIC, "same_seed_reproduces_sequence", first_draws, second_draws),
        expect_true(TOPIC, "random_is_in_half_open_unit_interval", all(0.0 <= x < 1.0 for x in first_draws)),
        expect_true(TOPIC, "choice_returns_population_member", one in population, detail=one),
        expect_equal(TOPIC, "sample_returns_requested_size", len(unique), 5),
        expect_equal(TOPIC, "sample_is_without_replacement", len(set(unique)), 5),
        expect_raises(TOPIC, "sample_larger_than_population_raises", lambda: rng.sample(population, 11), ValueError),
        expect_raises(TOPIC, "choice_on_empty_sequence_raises", lambda: rng.choice([]), IndexError),
        expect_equal(TOPIC, "choices_may_exceed_population_size", len(repeated), 20),
        expect_true(TOPIC, "choices_draws_from_population", set(repeated) <= {"a", "b"}),
        expect_equal(TOPIC, "zero_weight_is_never_drawn", set(never_zero), {"take"}),
        expect_equal(TOPIC, "zero_cumulative_step_is_never_drawn", set(cumulative), {"high"}),
        expect_raises(TOPIC, "all_zero_weights_raise", lambda: weighted_pick(rng, ["a", "b"], [0, 0]), ValueError),
        expect_equal(TOPIC, "shuffle_preserves_multiset", Counter(mixed), Counter(population)),
        expect_equal(TOPIC, "shuffle_returns_none", rng.shuffle([1, 2]), None),
        expect_true(TOPIC, "randrange_excludes_stop_and_respects_step", all(x in {0, 2, 4, 6, 8} for x in randranges)),
        expect_true(TOPIC, "randint_includes_both_ends", all(1 <= x <= 6 for x in randints)),
        expect_true(TOPIC, "uniform_stays_within_bounds", all(1.5 <= x <= 2.5 for x in uniforms)),
    ]
