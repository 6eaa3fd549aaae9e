"""
Randomized bot personality.

Each bot rolls its traits once when constructed so that a fleet of bots
behaves with some variety:
- aggression: chance of acting on an opportunity each tick, and the health
  threshold below which a submarine dives. Squared so low values are common.
- aim_bias: fixed aim offset, giving more interesting hit patterns.
- level_ambition: highest boat level the bot will upgrade to.
"""

from dataclasses import dataclass

from .geometry import Vec2, gen_radius


@dataclass(frozen=True)
class Personality:
    aggression: float
    aim_bias: Vec2
    level_ambition: int

    @classmethod
    def generate(cls, rng, config):
        return cls(
            aggression=rng.random() ** 2 * config.max_aggression,
            aim_bias=gen_radius(rng, config.aim_bias_radius),
            level_ambition=rng.randrange(1, config.max_level),
        )
