"""
2D geometry for the naval arena.

Positions are (x, y) in meters with +x east and +y north. Angles are
radians measured counter-clockwise from +x and wrap to [-pi, pi).
"""

import math
from typing import NamedTuple


class Vec2(NamedTuple):
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Vec2(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Vec2(self.x - other[0], self.y - other[1])

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec2(self.x / scalar, self.y / scalar)

    def length_squared(self):
        return self.x * self.x + self.y * self.y

    def length(self):
        return math.sqrt(self.length_squared())

    def rotate(self, angle):
        """Rotate counter-clockwise by angle radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)


ZERO = Vec2(0.0, 0.0)


def wrap_angle(angle):
    """Wrap an angle into [-pi, pi)."""
    return (angle + math.pi) % (2.0 * math.pi) - math.pi


def angle_of(vec):
    """Direction of a vector. The zero vector points along +x."""
    return math.atan2(vec[1], vec[0])


def angle_diff(a, b):
    """Smallest absolute difference between two angles, in [0, pi]."""
    return abs(wrap_angle(a - b))


def to_vec(angle):
    return Vec2(math.cos(angle), math.sin(angle))


def gen_radius(rng, radius):
    """Uniformly random point within a disk of the given radius."""
    r = radius * math.sqrt(rng.random())
    return to_vec(rng.uniform(-math.pi, math.pi)) * r


class Transform(NamedTuple):
    position: Vec2 = ZERO
    direction: float = 0.0

    def __add__(self, other):
        """Compose: apply a transform expressed relative to this one."""
        return Transform(
            position=self.position + Vec2(*other.position).rotate(self.direction),
            direction=wrap_angle(self.direction + other.direction),
        )
