"""
Bot tuning configuration.

Defaults come from defs. Any field can be overridden through a NAVALBOT_*
environment variable, e.g. NAVALBOT_MAX_AGGRESSION=0.2 or NAVALBOT_SEED=7.
"""

import os
from typing import Optional

from pydantic import BaseModel, Field

from . import defs

ENV_PREFIX = 'NAVALBOT_'


class BotConfig(BaseModel):
    max_aggression: float = Field(defs.MAX_AGGRESSION, ge=0.0, le=1.0)
    aim_bias_radius: float = Field(defs.AIM_BIAS_RADIUS, ge=0.0)
    max_level: int = Field(defs.MAX_BOAT_LEVEL, ge=2)
    terrain_samples: int = Field(defs.TERRAIN_SAMPLES, ge=1)
    speed_fraction: float = Field(defs.SPEED_FRACTION, ge=0.0)
    fire_arc: float = Field(defs.FIRE_ARC, ge=0.0)
    active_health_threshold: float = defs.ACTIVE_HEALTH_THRESHOLD
    rage_quit_chance: float = Field(defs.RAGE_QUIT_CHANCE, ge=0.0, le=1.0)
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, environ=None, **overrides):
        """Build a config from NAVALBOT_* variables, then explicit overrides."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None and raw != '':
                values[name] = raw
        values.update(overrides)
        return cls.model_validate(values)
