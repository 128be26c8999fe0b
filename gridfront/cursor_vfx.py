"""Visual effects that follow the cursor: highlights and particle trails."""

from __future__ import annotations

import enum
import logging
import math
import struct
from dataclasses import dataclass, field
from typing import Any

from gridfront.geometry import Point

logger = logging.getLogger(__name__)

_U64_MASK = (1 << 64) - 1
_U32_MASK = (1 << 32) - 1

_PCG_MULTIPLIER = 6_364_136_223_846_793_005
_PCG_INITIAL_STATE = 0x853C_49E6_748F_EA9B
_PCG_INCREMENT = ((0xDA3E_39CB_94B9_5BDB << 1) | 1) & _U64_MASK

_HIGHLIGHT_SPEED = 5.0


class VfxMode(enum.Enum):
    """Cursor effect selected by name in the settings."""

    SONIC_BOOM = "sonicboom"
    RIPPLE = "ripple"
    WIREFRAME = "wireframe"
    RAILGUN = "railgun"
    TORPEDO = "torpedo"
    PIXIE_DUST = "pixiedust"
    DISABLED = ""

    def to_value(self) -> str:
        return self.value

    def is_highlight(self) -> bool:
        return self in (VfxMode.SONIC_BOOM, VfxMode.RIPPLE, VfxMode.WIREFRAME)

    def is_trail(self) -> bool:
        return self in (VfxMode.RAILGUN, VfxMode.TORPEDO, VfxMode.PIXIE_DUST)


def vfx_mode_from_value(current: VfxMode, value: Any) -> VfxMode:
    """Convert a setting value to a mode, keeping ``current`` when it is not valid."""
    if not isinstance(value, str):
        logger.error("Expected a VfxMode string, but received %r", value)
        return current
    try:
        return VfxMode(value)
    except ValueError:
        logger.error("Expected a VfxMode name, but received %r", value)
        return current


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class RngState:
    """Small deterministic PCG-style random number generator."""

    def __init__(self) -> None:
        self.state = _PCG_INITIAL_STATE
        self.inc = _PCG_INCREMENT

    def next_u32(self) -> int:
        old_state = self.state
        self.state = (old_state * _PCG_MULTIPLIER + self.inc) & _U64_MASK

        rot = old_state >> 59
        xsh = (((old_state >> 18) ^ old_state) >> 27) & _U32_MASK
        return ((xsh >> rot) | (xsh << ((32 - rot) & 31))) & _U32_MASK

    def next_f32(self) -> float:
        """Return a value in [0, 1] obtained by scaling a 32-bit draw by 2**-32."""
        return _to_f32(math.ldexp(float(self.next_u32()), -32))

    def rand_dir(self) -> Point:
        """Return a vector whose coordinates lie in [-1, 1); it is not normalized."""
        x = self.next_f32()
        y = self.next_f32()
        return Point(x * 2.0 - 1.0, y * 2.0 - 1.0)

    def rand_dir_normalized(self) -> Point:
        return self.rand_dir().normalized()


def rotate_vec(v: Point, rot: float) -> Point:
    """Rotate ``v`` by ``rot`` radians."""
    sin = math.sin(rot)
    cos = math.cos(rot)
    return Point(v.x * cos - v.y * sin, v.x * sin + v.y * cos)


@dataclass
class Particle:
    pos: Point
    speed: Point
    rotation_speed: float
    lifetime: float


@dataclass
class PointHighlight:
    """An expanding shape centred on the cursor after it changes shape."""

    mode: VfxMode
    t: float = 0.0
    center_position: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        if not self.mode.is_highlight():
            raise ValueError(f"{self.mode!r} is not a highlight mode")

    def update(
        self,
        settings: Any,
        current_cursor_destination: Point,
        cursor_dimensions: Point,
        dt: float,
    ) -> bool:
        """Advance the effect; return whether it is still animating."""
        self.t = min(self.t + dt * _HIGHLIGHT_SPEED, 1.0)
        return self.t < 1.0

    def restart(self, position: Point) -> None:
        self.t = 0.0
        self.center_position = position


def _particle_count(distance_ratio: float, density: float) -> int:
    raw = distance_ratio**1.5 * density * 0.01
    if not math.isfinite(raw) or raw <= 0.0:
        return 0
    return int(raw)


@dataclass
class ParticleTrail:
    """Particles left behind the cursor as it travels."""

    trail_mode: VfxMode
    particles: list[Particle] = field(default_factory=list)
    previous_cursor_dest: Point = field(default_factory=Point)
    rng: RngState = field(default_factory=RngState)

    def __post_init__(self) -> None:
        if not self.trail_mode.is_trail():
            raise ValueError(f"{self.trail_mode!r} is not a trail mode")

    def _spawn_speed(self, settings: Any, t: float, travel: Point, ratio: float) -> Point:
        if self.trail_mode is VfxMode.RAILGUN:
            phase = t / math.pi * settings.vfx_particle_phase * ratio
            return Point(math.sin(phase), math.cos(phase)) * 2.0 * settings.vfx_particle_speed
        if self.trail_mode is VfxMode.TORPEDO:
            travel_dir = travel.normalized()
            particle_dir = (self.rng.rand_dir_normalized() - travel_dir * 1.5).normalized()
            return particle_dir * settings.vfx_particle_speed
        base_dir = self.rng.rand_dir_normalized()
        direction = Point(base_dir.x * 0.5, 0.4 + abs(base_dir.y))
        return direction * 3.0 * settings.vfx_particle_speed

    def _spawn_position(
        self, t: float, start: Point, travel: Point, cursor_dimensions: Point
    ) -> Point:
        if self.trail_mode is VfxMode.RAILGUN:
            return start + travel * t
        return (
            start
            + travel * self.rng.next_f32()
            + Point(0.0, cursor_dimensions.y * 0.5)
        )

    def _spawn_rotation(self, settings: Any) -> float:
        if self.trail_mode is VfxMode.RAILGUN:
            return math.pi * settings.vfx_particle_curl
        return (self.rng.next_f32() - 0.5) * (math.pi / 2.0) * settings.vfx_particle_curl

    def update(
        self,
        settings: Any,
        current_cursor_destination: Point,
        cursor_dimensions: Point,
        dt: float,
    ) -> bool:
        """Age, move and spawn particles; return whether any are still alive."""
        for particle in self.particles:
            particle.lifetime -= dt
        self.particles = [p for p in self.particles if p.lifetime > 0.0]

        for particle in self.particles:
            particle.pos = particle.pos + particle.speed * dt
            particle.speed = rotate_vec(particle.speed, dt * particle.rotation_speed)

        if current_cursor_destination != self.previous_cursor_dest:
            start = self.previous_cursor_dest
            travel = current_cursor_destination - start
            travel_distance = travel.length()
            if cursor_dimensions.y != 0.0:
                ratio = travel_distance / cursor_dimensions.y
            else:
                ratio = math.inf
            count = _particle_count(ratio, settings.vfx_particle_density)

            for i in range(count):
                t = i / count
                speed = self._spawn_speed(settings, t, travel, ratio)
                pos = self._spawn_position(t, start, travel, cursor_dimensions)
                rotation_speed = self._spawn_rotation(settings)
                self.particles.append(
                    Particle(pos, speed, rotation_speed, t * settings.vfx_particle_lifetime)
                )

            self.previous_cursor_dest = current_cursor_destination

        return bool(self.particles)

    def restart(self, position: Point) -> None:
        """Trails do not restart when the cursor changes shape."""


def new_cursor_vfx(mode: VfxMode) -> PointHighlight | ParticleTrail | None:
    """Create the effect for ``mode``, or None when effects are disabled."""
    if mode.is_highlight():
        return PointHighlight(mode)
    if mode.is_trail():
        return ParticleTrail(mode)
    return None