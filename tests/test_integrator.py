import math

import pytest

from lorenz.core.integrator import (
    HistoryBuffer,
    LorenzParams,
    SimulationState,
    TrailPoint,
    hue_to_rgb,
    step,
    z_to_hue,
)


def run(n, **kwargs):
    state = SimulationState(**kwargs)
    points = [step(state) for _ in range(n)]
    return state, points


def test_initial_state_and_constants():
    state = SimulationState()
    assert state.position == (0.01, 0.0, 0.0)
    assert state.params == LorenzParams(10.0, 28.0, 8.0 / 3.0, 0.01)
    assert len(state.history) == 0
    assert state.history.capacity == 5000


def test_single_step_matches_euler_formula():
    state = SimulationState()
    step(state)
    assert state.x == pytest.approx(0.009)
    assert state.y == pytest.approx(0.0028)
    assert state.z == 0.0
    assert state.steps == 1


def test_derivatives_use_pre_step_values():
    state = SimulationState(x=1.0, y=2.0, z=3.0)
    step(state)
    p = state.params
    assert state.x == 1.0 + p.sigma * (2.0 - 1.0) * p.dt
    assert state.y == 2.0 + (1.0 * (p.rho - 3.0) - 2.0) * p.dt
    assert state.z == 3.0 + (1.0 * 2.0 - p.beta * 3.0) * p.dt


@pytest.mark.parametrize("n", [0, 1, 10, 4999, 5000, 5001, 6200])
def test_history_length_is_bounded(n):
    state, _ = run(n)
    assert len(state.history) == min(n, 5000)
    assert state.steps == n


def test_eviction_is_fifo():
    state, points = run(5300)
    # step k (1-based) produced points[k - 1]
    assert state.history[0] is points[5300 - 4999 - 1]
    assert state.history[-1] is points[-1]
    assert list(state.history) == points[-5000:]


def test_boundary_after_5001_steps_drops_first_point():
    state, points = run(5001)
    assert len(state.history) == 5000
    assert state.history[0] is points[1]
    assert points[0] not in state.history.snapshot()


def test_runs_are_bit_identical():
    a, pa = run(3000)
    b, pb = run(3000)
    assert a.position == b.position
    assert [(p.x, p.y, p.z) for p in pa] == [(p.x, p.y, p.z) for p in pb]


def test_screen_projection_truncates_toward_zero():
    state, _ = run(2000)
    for point in state.history:
        assert point.screen_x == 800 // 2 + math.trunc(point.x * 10)
        assert point.screen_y == 600 // 2 + math.trunc(point.y * 10)


def test_projection_of_negative_fraction():
    state = SimulationState()
    assert state.project(-0.05, 0.05) == (400, 300)
    assert state.project(-0.15, 0.15) == (399, 301)


def test_resize_affects_only_new_points():
    state = SimulationState()
    first = step(state)
    state.resize(1000, 200)
    second = step(state)
    assert first.screen_x == 400 + math.trunc(first.x * 10)
    assert second.screen_x == 500 + math.trunc(second.x * 10)
    assert second.screen_y == 100 + math.trunc(second.y * 10)
    assert state.history[0] is first


def test_color_follows_z():
    state, _ = run(500)
    for point in state.history:
        assert point.color == hue_to_rgb((point.z + 30) / 60)


def test_reset_restores_initial_state():
    state = SimulationState(x=1.0, y=1.0, z=1.0)
    for _ in range(10):
        step(state)
    state.reset()
    assert state.position == (1.0, 1.0, 1.0)
    assert len(state.history) == 0
    assert state.steps == 0


@pytest.mark.parametrize(
    "hue, rgb",
    [
        (0.0, (255, 0, 0)),
        (1.0 / 3.0, (0, 255, 0)),
        (2.0 / 3.0, (0, 0, 255)),
        (0.5, (0, 255, 255)),
    ],
)
def test_hue_to_rgb_primaries(hue, rgb):
    assert hue_to_rgb(hue) == rgb


@pytest.mark.parametrize("hue", [0.1, 0.25, 0.7, 0.9])
def test_hue_wraps_instead_of_clamping(hue):
    assert hue_to_rgb(hue + 1.0) == hue_to_rgb(hue)
    assert hue_to_rgb(hue + 3.0) == hue_to_rgb(hue)
    assert hue_to_rgb(hue - 1.0) == hue_to_rgb(hue)


def test_z_outside_range_wraps():
    # z = 45 -> hue 1.25, same colour as hue 0.25 (not clamped red)
    assert hue_to_rgb(z_to_hue(45.0)) == hue_to_rgb(0.25)
    assert hue_to_rgb(z_to_hue(45.0)) != hue_to_rgb(1.0)


def test_history_buffer_rejects_bad_capacity():
    with pytest.raises(ValueError):
        HistoryBuffer(0)


def test_history_buffer_small_capacity():
    buf = HistoryBuffer(2)
    pts = [TrailPoint(i, i, (0, 0, 0), 0.0, 0.0, 0.0) for i in range(3)]
    for p in pts:
        buf.append(p)
    assert list(buf) == pts[1:]
    snap = buf.snapshot()
    buf.clear()
    assert len(buf) == 0
    assert snap == tuple(pts[1:])


def test_from_config_applies_overrides():
    state = SimulationState.from_config({
        "simulation": {"rho": 14.0, "history_size": 10, "initial_state": [1, 2, 3], "scale": 5},
        "display": {"width": 400, "height": 300},
    })
    assert state.params.rho == 14.0
    assert state.params.sigma == 10.0
    assert state.history.capacity == 10
    assert state.position == (1.0, 2.0, 3.0)
    assert state.project(1.0, -1.0) == (205, 145)
