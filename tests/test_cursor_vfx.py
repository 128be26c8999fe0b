import math
from types import SimpleNamespace

import pytest

from gridfront.cursor_vfx import (
    ParticleTrail,
    PointHighlight,
    RngState,
    VfxMode,
    new_cursor_vfx,
    rotate_vec,
    vfx_mode_from_value,
)
from gridfront.geometry import Point


def make_settings(**overrides):
    values = dict(
        vfx_opacity=200.0,
        vfx_particle_lifetime=1.2,
        vfx_particle_density=7.0,
        vfx_particle_speed=10.0,
        vfx_particle_phase=1.5,
        vfx_particle_curl=1.0,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


CURSOR = Point(10.0, 20.0)


@pytest.mark.parametrize(
    "name,mode",
    [
        ("sonicboom", VfxMode.SONIC_BOOM),
        ("ripple", VfxMode.RIPPLE),
        ("wireframe", VfxMode.WIREFRAME),
        ("railgun", VfxMode.RAILGUN),
        ("torpedo", VfxMode.TORPEDO),
        ("pixiedust", VfxMode.PIXIE_DUST),
        ("", VfxMode.DISABLED),
    ],
)
def test_mode_names_round_trip(name, mode):
    assert vfx_mode_from_value(VfxMode.DISABLED, name) is mode
    assert mode.to_value() == name


def test_unknown_mode_name_keeps_current():
    assert vfx_mode_from_value(VfxMode.RIPPLE, "fireworks") is VfxMode.RIPPLE


def test_non_string_mode_keeps_current():
    assert vfx_mode_from_value(VfxMode.TORPEDO, 3) is VfxMode.TORPEDO


def test_mode_categories_are_exclusive():
    for mode in VfxMode:
        assert not (mode.is_highlight() and mode.is_trail())
    assert not VfxMode.DISABLED.is_highlight()
    assert not VfxMode.DISABLED.is_trail()


def test_rng_is_deterministic():
    a, b = RngState(), RngState()
    assert [a.next_u32() for _ in range(20)] == [b.next_u32() for _ in range(20)]


def test_rng_values_in_range():
    rng = RngState()
    for _ in range(500):
        assert 0 <= rng.next_u32() < 2**32
        assert 0.0 <= rng.next_f32() <= 1.0


def test_rng_produces_varied_values():
    rng = RngState()
    assert len({rng.next_u32() for _ in range(100)}) > 90


def test_rand_dir_bounds():
    rng = RngState()
    for _ in range(200):
        d = rng.rand_dir()
        assert -1.0 <= d.x <= 1.0
        assert -1.0 <= d.y <= 1.0


def test_rand_dir_normalized_is_unit_length():
    rng = RngState()
    for _ in range(100):
        assert rng.rand_dir_normalized().length() == pytest.approx(1.0)


def test_rotate_vec_quarter_turn():
    rotated = rotate_vec(Point(1.0, 0.0), math.pi / 2)
    assert rotated.x == pytest.approx(0.0, abs=1e-12)
    assert rotated.y == pytest.approx(1.0)


def test_rotate_vec_preserves_length():
    v = Point(3.0, -7.0)
    for angle in (0.1, 1.0, 2.5, -4.0):
        assert rotate_vec(v, angle).length() == pytest.approx(v.length())


def test_new_cursor_vfx_dispatch():
    highlight = new_cursor_vfx(VfxMode.RIPPLE)
    trail = new_cursor_vfx(VfxMode.TORPEDO)
    assert isinstance(highlight, PointHighlight) and highlight.mode is VfxMode.RIPPLE
    assert isinstance(trail, ParticleTrail) and trail.trail_mode is VfxMode.TORPEDO
    assert new_cursor_vfx(VfxMode.DISABLED) is None


def test_wrong_modes_rejected():
    with pytest.raises(ValueError):
        PointHighlight(VfxMode.RAILGUN)
    with pytest.raises(ValueError):
        ParticleTrail(VfxMode.SONIC_BOOM)


def test_point_highlight_finishes():
    highlight = PointHighlight(VfxMode.SONIC_BOOM)
    assert highlight.update(make_settings(), Point(), CURSOR, 0.01) is True
    assert highlight.update(make_settings(), Point(), CURSOR, 10.0) is False
    assert highlight.t == 1.0


def test_point_highlight_restart():
    highlight = PointHighlight(VfxMode.WIREFRAME)
    highlight.update(make_settings(), Point(), CURSOR, 10.0)
    highlight.restart(Point(5.0, 6.0))
    assert highlight.t == 0.0
    assert highlight.center_position == Point(5.0, 6.0)
    assert highlight.update(make_settings(), Point(), CURSOR, 0.01) is True


def test_trail_without_movement_is_idle():
    trail = ParticleTrail(VfxMode.RAILGUN)
    assert trail.update(make_settings(), Point(), CURSOR, 0.1) is False
    assert trail.particles == []


def test_trail_spawns_particles_on_movement():
    trail = ParticleTrail(VfxMode.RAILGUN)
    dest = Point(2000.0, 0.0)
    settings = make_settings()
    assert trail.update(settings, dest, CURSOR, 0.0) is True
    assert trail.previous_cursor_dest == dest
    assert trail.particles
    for particle in trail.particles:
        assert 0.0 <= particle.lifetime < settings.vfx_particle_lifetime
        assert 0.0 <= particle.pos.x <= 2000.0
        assert particle.pos.y == 0.0
        assert particle.rotation_speed == pytest.approx(math.pi)


def test_longer_travel_spawns_more_particles():
    near = ParticleTrail(VfxMode.RAILGUN)
    far = ParticleTrail(VfxMode.RAILGUN)
    near.update(make_settings(), Point(500.0, 0.0), CURSOR, 0.0)
    far.update(make_settings(), Point(2000.0, 0.0), CURSOR, 0.0)
    assert len(far.particles) > len(near.particles)


def test_trail_particles_die_out():
    trail = ParticleTrail(VfxMode.PIXIE_DUST)
    dest = Point(1000.0, 500.0)
    settings = make_settings()
    trail.update(settings, dest, CURSOR, 0.0)
    assert trail.update(settings, dest, CURSOR, settings.vfx_particle_lifetime + 1.0) is False
    assert trail.particles == []


def test_torpedo_speed_magnitude():
    trail = ParticleTrail(VfxMode.TORPEDO)
    settings = make_settings()
    trail.update(settings, Point(1500.0, 300.0), CURSOR, 0.0)
    assert trail.particles
    for particle in trail.particles:
        assert particle.speed.length() == pytest.approx(settings.vfx_particle_speed)
        assert abs(particle.rotation_speed) <= math.pi / 4 * settings.vfx_particle_curl + 1e-9


def test_pixie_dust_moves_downwards():
    trail = ParticleTrail(VfxMode.PIXIE_DUST)
    settings = make_settings()
    trail.update(settings, Point(1500.0, 0.0), CURSOR, 0.0)
    assert trail.particles
    for particle in trail.particles:
        assert particle.speed.y > 0.0
        assert particle.pos.y == pytest.approx(CURSOR.y * 0.5)


def test_trail_is_deterministic():
    a = ParticleTrail(VfxMode.TORPEDO)
    b = ParticleTrail(VfxMode.TORPEDO)
    a.update(make_settings(), Point(900.0, 900.0), CURSOR, 0.0)
    b.update(make_settings(), Point(900.0, 900.0), CURSOR, 0.0)
    assert a.particles == b.particles


def test_particles_move_with_their_speed():
    trail = ParticleTrail(VfxMode.RAILGUN)
    settings = make_settings(vfx_particle_curl=0.0)
    dest = Point(2000.0, 0.0)
    trail.update(settings, dest, CURSOR, 0.0)
    before = {id(p): (p.pos, p.speed) for p in trail.particles}
    trail.update(settings, dest, CURSOR, 0.1)
    for particle in trail.particles:
        pos, speed = before[id(particle)]
        assert particle.pos.x == pytest.approx(pos.x + speed.x * 0.1)
        assert particle.pos.y == pytest.approx(pos.y + speed.y * 0.1)
        assert particle.speed == speed