"""Unit tests for entity evaluation."""

import logging
import random

from dicer.entities import Outcome, RollEntity, Sign
from dicer.evaluate import evaluate


class TestBounds:
    def test_single_d6(self) -> None:
        outcome = evaluate([RollEntity.dice(1, 6)])
        assert (outcome.minimum, outcome.maximum) == (1, 6)

    def test_single_d6_in_range(self) -> None:
        for _ in range(50):
            assert 1 <= evaluate([RollEntity.dice(1, 6)]).total <= 6

    def test_two_d6(self) -> None:
        outcome = evaluate([RollEntity.dice(1, 6), RollEntity.dice(1, 6)])
        assert (outcome.minimum, outcome.maximum) == (2, 12)

    def test_subtracted_die_swaps_faces(self) -> None:
        outcome = evaluate([RollEntity.dice(1, 6), RollEntity.dice(1, 6, Sign.negative)])
        assert (outcome.minimum, outcome.maximum) == (-5, 5)

    def test_die_with_constants(self) -> None:
        outcome = evaluate(
            [
                RollEntity.dice(1, 20),
                RollEntity.constant(5),
                RollEntity.constant(2, Sign.negative),
            ]
        )
        assert (outcome.minimum, outcome.maximum) == (4, 23)

    def test_multiple_dice_per_term(self) -> None:
        outcome = evaluate([RollEntity.dice(3, 8, Sign.negative)])
        assert (outcome.minimum, outcome.maximum) == (-24, -3)

    def test_constants_only_are_exact(self) -> None:
        outcome = evaluate([RollEntity.constant(7), RollEntity.constant(10, Sign.negative)])
        assert outcome == Outcome(total=-3, minimum=-3, maximum=-3)

    def test_empty(self) -> None:
        assert evaluate([]) == Outcome(total=0, minimum=0, maximum=0)


class TestDraws:
    def test_exact_total_with_fixed_draws(self, fixed_rng) -> None:
        rng = fixed_rng(4, 2, 6)
        outcome = evaluate(
            [RollEntity.dice(2, 6), RollEntity.constant(3), RollEntity.dice(1, 6, Sign.negative)],
            rng=rng,
        )
        assert outcome.total == 4 + 2 + 3 - 6
        assert outcome.rolls == (4, 2, 6)

    def test_draw_ranges(self, fixed_rng) -> None:
        rng = fixed_rng(1, 1, 20)
        evaluate([RollEntity.dice(2, 4), RollEntity.dice(1, 20, Sign.negative)], rng=rng)
        assert rng.calls == [(1, 4), (1, 4), (1, 20)]

    def test_constants_do_not_draw(self, fixed_rng) -> None:
        rng = fixed_rng()
        evaluate([RollEntity.constant(1), RollEntity.constant(2, Sign.negative)], rng=rng)
        assert rng.calls == []

    def test_all_lowest_faces_hit_minimum(self, fixed_rng) -> None:
        entities = [RollEntity.dice(2, 6), RollEntity.dice(1, 8, Sign.negative)]
        outcome = evaluate(entities, rng=fixed_rng(1, 1, 8))
        assert outcome.total == outcome.minimum == 2 - 8

    def test_all_highest_faces_hit_maximum(self, fixed_rng) -> None:
        entities = [RollEntity.dice(2, 6), RollEntity.dice(1, 8, Sign.negative)]
        outcome = evaluate(entities, rng=fixed_rng(6, 6, 1))
        assert outcome.total == outcome.maximum == 12 - 1

    def test_seeded_random_is_reproducible(self) -> None:
        entities = [RollEntity.dice(10, 20)]
        first = evaluate(entities, rng=random.Random(42))
        second = evaluate(entities, rng=random.Random(42))
        assert first == second

    def test_accepts_iterator(self, fixed_rng) -> None:
        outcome = evaluate(iter([RollEntity.dice(1, 6)]), rng=fixed_rng(3))
        assert outcome.total == 3


class TestLogging:
    def test_injected_logger_receives_trace(self, fixed_rng, caplog) -> None:
        log = logging.getLogger("dicer.test.injected")
        with caplog.at_level(logging.DEBUG, logger="dicer.test.injected"):
            evaluate([RollEntity.dice(1, 6)], rng=fixed_rng(5), log=log)
        assert any(r.name == "dicer.test.injected" for r in caplog.records)
        assert "+1d6 rolled [5]" in caplog.text
