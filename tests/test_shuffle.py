"""
Tests for the shuffle engine and its random state.
"""

import io
import itertools
import threading
from collections import Counter

import pytest

from linesort.core.shuffle import RandomState, ShuffleEngine
from linesort.errors import InvariantViolation, UninitializedRandomState


def _shuffled(lines, seed):
    engine = ShuffleEngine(RandomState(seed))
    for line in lines:
        engine.append(line)
    engine.shuffle()
    return list(engine.iterate())


def test_random_state_is_lazy():
    state = RandomState()
    assert not state.initialized
    value = state.next(10)
    assert 0 <= value < 10
    assert state.initialized


def test_random_state_rejects_empty_range():
    with pytest.raises(ValueError):
        RandomState(1).next(0)


def test_draw_before_init_is_a_contract_fault():
    with pytest.raises(UninitializedRandomState):
        RandomState(1)._draw(5)


def test_random_state_fixed_seed_is_deterministic():
    a = RandomState(1234)
    b = RandomState(1234)
    assert [a.next(1000) for _ in range(20)] == [b.next(1000) for _ in range(20)]


def test_random_state_shared_between_threads():
    state = RandomState()
    results = []
    lock = threading.Lock()

    def worker():
        draws = [state.next(7) for _ in range(200)]
        with lock:
            results.extend(draws)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 1600
    assert all(0 <= r < 7 for r in results)


def test_shuffle_preserves_the_multiset():
    lines = ["a", "b", "b", "c", "d", "d", "d", "e"]
    assert Counter(_shuffled(lines, seed=7)) == Counter(lines)


def test_shuffle_is_deterministic_for_fixed_seed():
    lines = [f"line{i}" for i in range(50)]
    assert _shuffled(lines, seed=99) == _shuffled(lines, seed=99)
    assert _shuffled(lines, seed=99) != lines


def test_shuffle_of_empty_and_single():
    assert _shuffled([], seed=1) == []
    assert _shuffled(["only"], seed=1) == ["only"]


def test_every_permutation_is_reachable_and_roughly_uniform():
    state = RandomState(2024)
    counts = Counter()
    rounds = 6000
    for _ in range(rounds):
        engine = ShuffleEngine(state)
        for line in "abc":
            engine.append(line)
        engine.shuffle()
        counts["".join(engine.iterate())] += 1

    assert set(counts) == {"".join(p) for p in itertools.permutations("abc")}
    for n in counts.values():
        assert abs(n - rounds / 6) < rounds / 6 * 0.2


def test_shuffle_twice_is_an_error():
    engine = ShuffleEngine(RandomState(1))
    engine.append("a")
    engine.shuffle()
    with pytest.raises(InvariantViolation):
        engine.shuffle()


def test_append_after_shuffle_is_an_error():
    engine = ShuffleEngine(RandomState(1))
    engine.shuffle()
    with pytest.raises(InvariantViolation):
        engine.append("late")


def test_unshuffled_iteration_keeps_insertion_order():
    engine = ShuffleEngine(RandomState(1))
    for line in ["z", "a", "z"]:
        engine.append(line)
    assert list(engine.iterate()) == ["z", "a", "z"]


def test_finalize_and_emit_shuffles_once():
    engine = ShuffleEngine(RandomState(5))
    lines = [str(i) for i in range(10)]
    for line in lines:
        engine.ingest(line)
    out = io.StringIO()
    assert engine.finalize_and_emit(out, flush_per_line=True) == 10
    emitted = out.getvalue().splitlines()
    assert sorted(emitted) == sorted(lines)
    assert emitted == _shuffled(lines, seed=5)
