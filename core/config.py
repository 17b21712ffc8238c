"""core/config.py — Typed snapshots of the tuning sections.

The engine and its entities never read ``core.tuning`` directly; they
take one of these frozen dataclasses.  Defaults are the stock show
values, so ``ShowConfig()`` works without any file on disk::

    from core import tuning
    from core.config import ShowConfig

    tuning.load()
    cfg = ShowConfig.from_tuning()
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields

from core import tuning


def _from_section(cls, section: str):
    """Build *cls* from ``[section]`` keys, ignoring unknown ones.

    Values are coerced to the type of the field's default so a TOML
    ``5`` for a float field still yields ``5.0``.
    """
    raw = tuning.section(section)
    kwargs = {}
    for f in fields(cls):
        if f.name not in raw:
            continue
        default = f.default
        value = raw[f.name]
        if isinstance(default, bool):
            value = bool(value)
        elif isinstance(default, int):
            value = int(value)
        elif isinstance(default, float):
            value = float(value)
        kwargs[f.name] = value
    return cls(**kwargs)


@dataclass(frozen=True)
class FireworkConfig:
    speed: float = 5.0
    acceleration: float = 1.05
    brightness_min: float = 50.0
    brightness_max: float = 70.0
    trail_length: int = 3
    target_indicator: bool = True
    target_radius_min: float = 1.0
    target_radius_max: float = 8.0
    target_radius_step: float = 0.3

    @classmethod
    def from_tuning(cls) -> FireworkConfig:
        return _from_section(cls, "firework")


@dataclass(frozen=True)
class ParticleConfig:
    count: int = 80
    speed_min: float = 1.0
    speed_max: float = 10.0
    friction: float = 0.95
    gravity: float = 0.7
    transparency: float = 1.0
    decay_min: float = 0.015
    decay_max: float = 0.03
    brightness_min: float = 50.0
    brightness_max: float = 80.0
    hue_variance: float = 20.0
    trail_length: int = 5

    @classmethod
    def from_tuning(cls) -> ParticleConfig:
        return _from_section(cls, "particle")


@dataclass(frozen=True)
class LaunchConfig:
    """Trigger policy and colour rotation."""
    manual_min_ticks: int = 5
    auto_enabled: bool = True
    auto_min_ticks: int = 20
    auto_max_ticks: int = 80
    auto_target_ceiling: float = 0.5
    hue_step: float = 0.5

    @classmethod
    def from_tuning(cls) -> LaunchConfig:
        return _from_section(cls, "launch")


@dataclass(frozen=True)
class DisplayConfig:
    width: int = 960
    height: int = 640
    fps: int = 60
    cleanup_alpha: float = 0.3
    title: str = "Fireworks"

    @classmethod
    def from_tuning(cls) -> DisplayConfig:
        return _from_section(cls, "display")


@dataclass(frozen=True)
class ShowConfig:
    firework: FireworkConfig = field(default_factory=FireworkConfig)
    particle: ParticleConfig = field(default_factory=ParticleConfig)
    launch: LaunchConfig = field(default_factory=LaunchConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def from_tuning(cls) -> ShowConfig:
        return cls(
            firework=FireworkConfig.from_tuning(),
            particle=ParticleConfig.from_tuning(),
            launch=LaunchConfig.from_tuning(),
            display=DisplayConfig.from_tuning(),
        )
