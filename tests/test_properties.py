"""
Algebraic laws of the spelling types.

The domains are small enough to check every combination, so these tests
are exhaustive rather than sampled.
"""

from concurrent.futures import ThreadPoolExecutor
from itertools import product

import pytest

from tonality import DELTA_ENHARMONIC, DELTA_SEMITONE
from tonality.core import Accidental, Interval, Key, Step, Tpc


class TestStepLaws:
    """Step and its conversions to Tpc."""

    def test_with_key_keeps_step(self, all_steps, all_keys) -> None:
        """Spelling a step in any key keeps its letter."""
        for step, key in product(all_steps, all_keys):
            assert step.with_key(key).step() is step

    def test_with_key_is_diatonic(self, all_steps, all_keys) -> None:
        """The spelling of a step in a key needs no alteration."""
        for step, key in product(all_steps, all_keys):
            tpc = step.with_key(key)
            assert tpc.alteration(key) == 0
            assert key.contains(tpc)

    def test_with_accidental_recomposes(self, all_steps) -> None:
        """Step and accidental can be read back from the spelling."""
        for step, accidental in product(all_steps, Accidental):
            tpc = step.with_accidental(accidental)
            assert tpc.step() is step
            assert tpc.accidental() is accidental

    def test_with_accidental_is_bijective(self, all_tpcs) -> None:
        """Every Tpc is exactly one step with one accidental."""
        spelled = {step.with_accidental(acc) for step, acc in product(Step, Accidental)}
        assert spelled == set(all_tpcs)

    def test_add_then_sub(self, all_steps) -> None:
        for step, n in product(all_steps, range(-20, 21)):
            assert (step + n) - n is step


class TestKeyLaws:
    """Key scales and roots."""

    def test_first_scale_degree_is_root(self, all_keys) -> None:
        for key in all_keys:
            assert key.root() is key.scale_degree(0)

    def test_scale_visits_every_step(self, all_keys) -> None:
        """Each major scale uses every letter exactly once."""
        for key in all_keys:
            assert sorted(tpc.step() for tpc in key.scale()) == list(Step)

    def test_scale_degree_matches_with_key(self, all_keys) -> None:
        for key, degree in product(all_keys, range(7)):
            tpc = key.scale_degree(degree)
            assert tpc.step().with_key(key) is tpc

    def test_key_is_subset_of_tpc(self, all_keys) -> None:
        for key in all_keys:
            assert Tpc.checked(key.value) is not None


class TestTpcLaws:
    """Spelling, alteration and transposition of Tpcs."""

    def test_alter_keeps_step(self, all_tpcs) -> None:
        for tpc, delta in product(all_tpcs, range(-5, 6)):
            altered = tpc.alter(delta)
            if altered is not None:
                assert altered.step() is tpc.step()

    def test_alter_fails_only_out_of_range(self, all_tpcs) -> None:
        for tpc, delta in product(all_tpcs, range(-5, 6)):
            level = tpc.accidental().value + delta
            assert (tpc.alter(delta) is None) == (not -2 <= level <= 2)

    def test_alteration_undoes_to_diatonic(self, all_tpcs, all_keys) -> None:
        """Removing the alteration yields the key's spelling of the step."""
        for tpc, key in product(all_tpcs, all_keys):
            diatonic = tpc.alter(-tpc.alteration(key))
            assert diatonic is tpc.step().with_key(key)

    def test_steps_accidentals_can_recompose(self, all_tpcs, all_keys) -> None:
        for tpc, key in product(all_tpcs, all_keys):
            step, accidental = tpc.altered_step(key)
            if accidental is None:
                assert step.with_key(key) is tpc
            else:
                assert step.with_accidental(accidental) is tpc

    def test_interval_addition_is_associative(self, all_tpcs, all_intervals) -> None:
        """Where both groupings are defined, they agree."""
        for tpc, i1, i2 in product(all_tpcs, all_intervals, all_intervals):
            combined = i1 + i2
            stepwise = tpc + i1
            if combined is None or stepwise is None:
                continue
            via_sum = tpc + combined
            via_steps = stepwise + i2
            if via_sum is not None and via_steps is not None:
                assert via_sum is via_steps

    def test_add_sub_inverse(self, all_tpcs, all_intervals) -> None:
        for tpc, interval in product(all_tpcs, all_intervals):
            raised = tpc + interval
            if raised is not None:
                assert raised - interval is tpc
                assert tpc.interval_to(raised) is interval

    def test_transposition_preserves_pitch_distance(self, all_tpcs, all_intervals) -> None:
        for tpc, interval in product(all_tpcs, all_intervals):
            raised = tpc + interval
            if raised is not None:
                distance = (raised.pitch_class() - tpc.pitch_class()) % 12
                assert distance == interval.semitones()

    def test_semitone_step(self, all_tpcs) -> None:
        """Seven fifths up raises by a semitone on the same letter."""
        for tpc in all_tpcs:
            raised = Tpc.checked(tpc.value + DELTA_SEMITONE)
            if raised is not None:
                assert raised.step() is tpc.step()
                assert raised.pitch_class() == (tpc.pitch_class() + 1) % 12
                assert raised.accidental().value == tpc.accidental().value + 1

    def test_enharmonic_iff_same_pitch_class(self, all_tpcs) -> None:
        for a, b in product(all_tpcs, all_tpcs):
            assert a.enharmonic(b) == (a.pitch_class() == b.pitch_class())
            assert a.enharmonic(b) == ((a.value - b.value) % DELTA_ENHARMONIC == 0)

    def test_every_pitch_class_has_a_spelling(self, all_tpcs) -> None:
        assert {tpc.pitch_class() for tpc in all_tpcs} == set(range(12))


class TestIntervalLaws:
    def test_enharmonic_iff_same_semitones(self, all_intervals) -> None:
        for a, b in product(all_intervals, all_intervals):
            assert a.enharmonic(b) == (a.semitones() == b.semitones())

    def test_short_names_are_unique(self, all_intervals) -> None:
        names = [interval.short_name() for interval in all_intervals]
        assert len(set(names)) == len(names)

    def test_neg_is_involution(self, all_intervals) -> None:
        for interval in all_intervals:
            assert -(-interval) is interval
            assert interval + (-interval) is Interval.Unison


class TestReferentialTransparency:
    """Identical inputs give identical outputs, from any thread."""

    @staticmethod
    def _all_results() -> list[object]:
        results: list[object] = []
        for tpc, key in product(Tpc, Key):
            results.append(tpc.altered_step(key))
            results.append(tpc.alteration(key))
        for tpc, interval in product(Tpc, Interval):
            results.append(tpc + interval)
        return results

    def test_repeatable(self) -> None:
        assert self._all_results() == self._all_results()

    @pytest.mark.parametrize("workers", [2, 8])
    def test_concurrent_callers_agree(self, workers: int) -> None:
        expected = self._all_results()
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self._all_results) for _ in range(workers)]
            for future in futures:
                assert future.result() == expected
