import logging
import math

import numpy as np
import pytest

from distance_transform import INF, FloatGrid, BoolGrid, TransformConfig, dt2d, sqrt_grid, min_max_scaling


def test_sqrt_grid():
    g = FloatGrid.from_array([[0.0, 4.0], [9.0, 16.0]])
    np.testing.assert_array_equal(sqrt_grid(g).to_array(), [[0.0, 2.0], [3.0, 4.0]])
    assert g.get(1, 0) == 4.0


def test_sqrt_of_transform():
    g = BoolGrid(5, 5)
    g.set(2, 2, True)
    d = sqrt_grid(dt2d(g))
    assert d.get(2, 0) == 2.0
    np.testing.assert_allclose(d.get(0, 0), np.sqrt(8.0))


def warnings_from(caplog):
    return [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]


@pytest.mark.parametrize("inf", [INF, 1e12])
def test_unreachable_warning_uses_given_sentinel(caplog, inf):
    cfg = TransformConfig(inf=inf)
    d2 = dt2d(BoolGrid(3, 3), cfg)
    with caplog.at_level(logging.WARNING, logger="distance_transform"):
        sqrt_grid(d2, cfg.inf)
        min_max_scaling(d2, inf=cfg.inf)
    msgs = warnings_from(caplog)
    assert any(m.startswith("sqrt_grid:") for m in msgs)
    assert any(m.startswith("min_max_scaling:") for m in msgs)


def test_no_warning_when_all_reachable(caplog):
    g = BoolGrid(4, 4)
    g.set(0, 0, True)
    with caplog.at_level(logging.WARNING, logger="distance_transform"):
        sqrt_grid(dt2d(g))
    assert warnings_from(caplog) == []


def test_min_max_scaling():
    g = FloatGrid.from_array([[0.0, 2.0], [4.0, 8.0]])
    np.testing.assert_allclose(min_max_scaling(g).to_array(), [[0.0, 63.75], [127.5, 255.0]])
    np.testing.assert_allclose(min_max_scaling(g, (10.0, 20.0)).to_array(), [[10.0, 12.5], [15.0, 20.0]])


def test_min_max_scaling_maps_unreachable_to_top():
    g = FloatGrid.from_array([[0.0, 2.0], [4.0, math.inf]])
    out = min_max_scaling(g).to_array()
    assert not np.isnan(out).any()
    np.testing.assert_allclose(out, [[0.0, 127.5], [255.0, 255.0]])

    g = FloatGrid.from_array([[0.0, 1e9], [4.0, 2.0]])
    np.testing.assert_allclose(min_max_scaling(g, inf=1e9).to_array(), [[0.0, 255.0], [255.0, 127.5]])


def test_min_max_scaling_constant_and_empty():
    const = min_max_scaling(FloatGrid(3, 2, fill=7.0))
    assert const.shape == (3, 2)
    assert all(v == 0.0 for _, _, v in const)
    assert min_max_scaling(FloatGrid(0, 3)).shape == (0, 3)
    assert all(v == 255.0 for _, _, v in min_max_scaling(FloatGrid(2, 2, fill=math.inf)))
