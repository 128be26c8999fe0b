"""Setting groups for the window, keyboard, renderer and cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from gridfront.cursor_vfx import VfxMode


@dataclass
class WindowSettings:
    """Settings of the main window."""

    PREFIX: ClassVar[str] = ""

    refresh_rate: int = 60
    no_idle: bool = False
    transparency: float = 1.0
    fullscreen: bool = False
    iso_layout: bool = False
    remember_window_size: bool = False
    hide_mouse_when_typing: bool = False


@dataclass
class KeyboardSettings:
    """Settings of keyboard input."""

    PREFIX: ClassVar[str] = "input"

    use_logo: bool = False


@dataclass
class RendererSettings:
    """Settings of window animation and floating window appearance."""

    PREFIX: ClassVar[str] = ""

    position_animation_length: float = 0.15
    scroll_animation_length: float = 0.3
    floating_opacity: float = 0.7
    floating_blur: bool = True
    debug_renderer: bool = False


@dataclass
class CursorSettings:
    """Settings of cursor animation and cursor effects."""

    PREFIX: ClassVar[str] = "cursor"

    antialiasing: bool = True
    animation_length: float = 0.06
    distance_length_adjust: bool = True
    animate_in_insert_mode: bool = True
    animate_command_line: bool = True
    trail_size: float = 0.7
    vfx_mode: VfxMode = VfxMode.DISABLED
    vfx_opacity: float = 200.0
    vfx_particle_lifetime: float = 1.2
    vfx_particle_density: float = 7.0
    vfx_particle_speed: float = 10.0
    vfx_particle_phase: float = 1.5
    vfx_particle_curl: float = 1.0