"""
Tests for scene assembly: scaling, sampling, outlines and keyframes.
"""
import datetime as dt
import math
import pytest

from orrery.core.constants import JD_J2000
from orrery.objects.planet import Planet
from orrery.objects.solar_system import PLANETS
from orrery.physics.log_radial import map_log_radial
from orrery.physics.orbit import KeplerianElements, position_au
from orrery.simulation.scenario import Scenario, default_scenario
from orrery.simulation.scene import (
    SceneConfig, TimeSpan, build_scene, compute_rmax_au, keyframe_times,
    keyframes_px, orbit_outline_px,
)


def flat_elements(a, e):
    return KeplerianElements(
        a=a, a_rate=0.0, e=e, e_rate=0.0,
        i_deg=0.0, i_rate=0.0, L_deg=0.0, L_rate=0.0,
        lon_peri_deg=0.0, lon_peri_rate=0.0, node_deg=0.0, node_rate=0.0,
    )


def distance_to_polyline(p, pts):
    best = math.inf
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        dx, dy = bx - ax, by - ay
        seg2 = dx * dx + dy * dy
        t = 0.0 if seg2 == 0.0 else max(0.0, min(1.0, ((p[0] - ax) * dx + (p[1] - ay) * dy) / seg2))
        best = min(best, math.hypot(p[0] - (ax + t * dx), p[1] - (ay + t * dy)))
    return best


@pytest.fixture
def span():
    return TimeSpan.from_dates((2025, 1, 1), (2025, 3, 2))


@pytest.fixture
def config():
    return SceneConfig(view_half=400.0, r_px_max=380.0, step_days=5.0, dur_seconds=20.0, orbit_samples=180)


class TestSceneConfig:
    def test_defaults(self):
        c = SceneConfig()
        assert c.orbit_samples == 720
        assert c.rmax_padding == 1.03

    @pytest.mark.parametrize("kwargs, msg", [
        ({"view_half": 0.0}, "view_half must be positive"),
        ({"r_px_max": -1.0}, "r_px_max must be positive"),
        ({"step_days": 0.0}, "step_days must be positive"),
        ({"step_days": float("nan")}, "step_days must be positive"),
        ({"dur_seconds": 0.0}, "dur_seconds must be positive"),
        ({"orbit_samples": 2}, "orbit_samples must be >= 3"),
        ({"rmax_padding": 0.9}, "rmax_padding must be >= 1"),
        ({"view_half": float("nan")}, "view_half must be positive and finite"),
        ({"r_px_max": float("inf")}, "r_px_max must be positive and finite"),
        ({"r_px_max": float("nan")}, "r_px_max must be positive and finite"),
        ({"dur_seconds": float("inf")}, "dur_seconds must be positive and finite"),
        ({"dur_seconds": float("nan")}, "dur_seconds must be positive and finite"),
        ({"rmax_padding": float("nan")}, "rmax_padding must be >= 1 and finite"),
        ({"rmax_padding": float("inf")}, "rmax_padding must be >= 1 and finite"),
    ])
    def test_validation(self, kwargs, msg):
        with pytest.raises(ValueError, match=msg):
            SceneConfig(**kwargs)


class TestTimeSpan:
    def test_from_dates_accepts_date_objects(self):
        s = TimeSpan.from_dates(dt.date(2000, 1, 1), dt.date(2000, 1, 11))
        assert s.start_jd == 2451544.5
        assert s.duration_days == 10.0
        assert s.midpoint_jd == 2451549.5

    def test_end_before_start_rejected(self):
        with pytest.raises(ValueError, match="end_jd must be >= start_jd"):
            TimeSpan(start_jd=2451545.0, end_jd=2451544.0)

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError, match="finite"):
            TimeSpan(start_jd=float("inf"), end_jd=float("inf"))

    def test_zero_length_allowed(self):
        s = TimeSpan(start_jd=2451545.0, end_jd=2451545.0)
        assert s.duration_days == 0.0


class TestKeyframeTimes:
    def test_count_and_clamp_when_step_does_not_divide(self):
        s = TimeSpan(start_jd=2451545.0, end_jd=2451555.0)
        times = keyframe_times(s, 3.0)
        assert len(times) == math.floor(10 / 3) + 1 == 4
        assert times[:3] == [2451545.0, 2451548.0, 2451551.0]
        assert times[-1] == 2451555.0

    def test_even_division(self):
        s = TimeSpan(start_jd=2451545.0, end_jd=2451555.0)
        times = keyframe_times(s, 2.0)
        assert len(times) == 6
        assert times[0] == s.start_jd
        assert times[-1] == s.end_jd

    def test_never_overshoots(self):
        s = TimeSpan(start_jd=2460000.5, end_jd=2460365.5)
        for step in [0.7, 1.0, 3.3, 7.0, 200.0]:
            times = keyframe_times(s, step)
            assert max(times) == s.end_jd
            assert all(b > a for a, b in zip(times, times[1:]))

    def test_exact_multiple_with_float_rounding(self):
        # 0.3 / 0.1 is just below 3 in binary floating point
        times = keyframe_times(TimeSpan(start_jd=0.0, end_jd=0.3), 0.1)
        assert len(times) == 4
        assert times[0] == 0.0
        assert times[-1] == 0.3
        assert all(b > a for a, b in zip(times, times[1:]))

    def test_span_shorter_than_step_keeps_start(self):
        s = TimeSpan(start_jd=2451545.0, end_jd=2451547.0)
        assert keyframe_times(s, 5.0) == [2451545.0]

    def test_single_sample_for_empty_span(self):
        s = TimeSpan(start_jd=2451545.0, end_jd=2451545.0)
        assert keyframe_times(s, 1.0) == [2451545.0]

    def test_rejects_non_positive_step(self):
        s = TimeSpan(start_jd=2451545.0, end_jd=2451555.0)
        with pytest.raises(ValueError):
            keyframe_times(s, 0.0)


class TestComputeRmax:
    def test_single_body_fixture(self):
        body = Planet(name="Test", elements=flat_elements(5.0, 0.1), color="#fff")
        r = compute_rmax_au([body], JD_J2000)
        assert abs(r - 5.665) < 1e-12

    def test_uses_largest_aphelion(self):
        r = compute_rmax_au(PLANETS, JD_J2000)
        neptune = next(p for p in PLANETS if p.name == "Neptune").elements
        assert abs(r - neptune.a * (1 + neptune.e) * 1.03) < 1e-9

    def test_custom_padding(self):
        body = Planet(name="Test", elements=flat_elements(2.0, 0.5), color="#fff")
        assert compute_rmax_au([body], JD_J2000, padding=1.0) == 3.0

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="no planets"):
            compute_rmax_au([], JD_J2000)


class TestOutlineAndKeyframes:
    def test_outline_length_and_closure(self, config):
        el = PLANETS[3].elements
        pts = orbit_outline_px(el, JD_J2000, 31.0, config)
        assert len(pts) == config.orbit_samples + 1
        assert abs(pts[0][0] - pts[-1][0]) < 1e-9
        assert abs(pts[0][1] - pts[-1][1]) < 1e-9

    def test_outline_inside_r_px_max(self, config):
        r_max = compute_rmax_au(PLANETS, JD_J2000)
        for planet in PLANETS:
            for x, y in orbit_outline_px(planet.elements, JD_J2000, r_max, config):
                assert math.hypot(x, y) < config.r_px_max

    def test_keyframes_are_flipped_mapped_positions(self, config):
        el = PLANETS[2].elements
        times = [JD_J2000, JD_J2000 + 40.0]
        xs, ys = keyframes_px(el, times, 31.0, config)
        for jd, x, y in zip(times, xs, ys):
            mx, my = map_log_radial(*position_au(el, jd), 31.0, config.r_px_max)
            assert x == mx
            assert y == -my


class TestBuildScene:
    def test_body_order_follows_table(self, span, config):
        scene = build_scene(span, config)
        assert [b.name for b in scene.bodies] == [
            "Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune",
        ]

    def test_r_max_from_midpoint(self, span, config):
        scene = build_scene(span, config)
        assert scene.r_max_au == compute_rmax_au(PLANETS, span.midpoint_jd, config.rmax_padding)

    def test_keyframe_sequences_have_equal_length(self, span, config):
        scene = build_scene(span, config)
        n = len(keyframe_times(span, config.step_days))
        assert len(scene.times_jd) == n
        for body in scene.bodies:
            assert len(body.xs) == n
            assert len(body.ys) == n
            assert len(body.outline_px) == config.orbit_samples + 1

    def test_start_position_is_first_keyframe(self, span, config):
        scene = build_scene(span, config)
        earth = scene.bodies[2]
        x_au, y_au = position_au(PLANETS[2].elements, span.start_jd)
        mx, my = map_log_radial(x_au, y_au, scene.r_max_au, config.r_px_max)
        assert earth.start_px == (mx, -my)

    def test_markers_stay_close_to_their_outline(self, span, config):
        # The outline is the midpoint ellipse; over two months it barely moves
        scene = build_scene(span, config)
        for body in scene.bodies:
            for x, y in zip(body.xs, body.ys):
                assert distance_to_polyline((x, y), body.outline_px) < 1.0

    def test_deterministic(self, span, config):
        a = build_scene(span, config)
        b = build_scene(span, config)
        assert a.r_max_au == b.r_max_au
        for ba, bb in zip(a.bodies, b.bodies):
            assert ba.xs == bb.xs
            assert ba.ys == bb.ys
            assert ba.outline_px == bb.outline_px

    def test_custom_scenario(self, span, config):
        scenario = Scenario(name="Inner")
        for planet in PLANETS[:4]:
            scenario.add_planet(planet)
        scene = build_scene(span, config, scenario)
        assert [b.name for b in scene.bodies] == ["Mercury", "Venus", "Earth", "Mars"]
        mars = PLANETS[3].elements
        assert scene.r_max_au < 1.03 * 1.7
        assert scene.r_max_au > mars.a

    def test_default_config_and_scenario(self, span):
        scene = build_scene(span)
        assert scene.config == SceneConfig()
        assert len(scene.bodies) == len(default_scenario().planets)
