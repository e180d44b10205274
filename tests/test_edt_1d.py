import numpy as np
import pytest

from distance_transform import INF, edt_1d, dt1d, TransformConfig, NoFeatureError


def brute_force_1d(f):
    n = len(f)
    return np.array([min((q - p) ** 2 + f[p] for p in range(n)) for q in range(n)], dtype=float)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


def test_edt_1d_matches_brute_force(rng):
    for n in range(1, 51):
        f = rng.uniform(0.0, 100.0, n)
        np.testing.assert_allclose(edt_1d(f), brute_force_1d(f))


def test_edt_1d_with_sentinel_costs(rng):
    for n in (1, 2, 7, 33, 50):
        f = np.where(rng.random(n) < 0.2, 0.0, INF)
        f[rng.integers(0, n)] = 0.0
        np.testing.assert_allclose(edt_1d(f), brute_force_1d(f))


def test_edt_1d_reverse_symmetry(rng):
    f = rng.uniform(0.0, 30.0, 40)
    d = edt_1d(f)
    d_rev = edt_1d(f[::-1])
    np.testing.assert_allclose(d_rev, d[::-1])


def test_edt_1d_empty():
    d = edt_1d(np.zeros(0))
    assert d.shape == (0,)


def test_edt_1d_single_sample():
    np.testing.assert_array_equal(edt_1d(np.array([3.5])), [3.5])


def test_edt_1d_all_sentinel():
    d = edt_1d(np.full(6, INF))
    assert (d >= INF).all()


def test_dt1d_values():
    np.testing.assert_array_equal(dt1d([False, True, False, False]), [1.0, 0.0, 1.0, 4.0])
    np.testing.assert_array_equal(dt1d([True, False, False, False, True]), [0.0, 1.0, 4.0, 1.0, 0.0])


def test_dt1d_shift_invariance():
    n, c = 30, 5
    base = np.zeros(n, dtype=bool)
    base[[3, 11, 17]] = True
    shifted = np.roll(base, c)
    d = dt1d(base)
    d_shift = dt1d(shifted)
    np.testing.assert_array_equal(d_shift[c:], d[:n - c])


def test_dt1d_no_feature_policies():
    np.testing.assert_array_equal(dt1d([False] * 4), [INF] * 4)
    assert np.isinf(dt1d([False] * 4, TransformConfig(unreachable="inf"))).all()
    with pytest.raises(NoFeatureError):
        dt1d([False] * 4, TransformConfig(unreachable="raise"))
    assert dt1d([], TransformConfig(unreachable="raise")).shape == (0,)
