"""
Terrain height sampling.

A terrain answers sample(position) with a height, or None where it has no
data. Heights share the altitude scale in defs: anything at or above
SAND_LEVEL is land.
"""

from abc import ABC, abstractmethod
import math

from .defs import ALTITUDE_MIN, SAND_LEVEL


class Terrain(ABC):

    @abstractmethod
    def sample(self, position):
        """Height at position, or None if unavailable."""


class FlatTerrain(Terrain):
    """Open water everywhere."""

    def __init__(self, height=ALTITUDE_MIN):
        self.height = height

    def sample(self, position):
        return self.height


class HeightmapTerrain(Terrain):
    """Grid of heights centered on the world origin.

    heights[row][col] covers the cell whose lower-left corner is
    (col * cell_size - half_width, row * cell_size - half_height).
    Positions outside the grid have no sample.
    """

    def __init__(self, heights, cell_size):
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.heights = [list(row) for row in heights]
        self.cell_size = float(cell_size)
        self.rows = len(self.heights)
        self.cols = len(self.heights[0]) if self.heights else 0
        self._offset_x = self.cols * self.cell_size / 2
        self._offset_y = self.rows * self.cell_size / 2

    def sample(self, position):
        col = math.floor((position[0] + self._offset_x) / self.cell_size)
        row = math.floor((position[1] + self._offset_y) / self.cell_size)
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.heights[row][col]
        return None


def is_land_or_border(position, terrain, world_radius):
    """True if position is outside the world or on land."""
    if position[0] ** 2 + position[1] ** 2 > world_radius ** 2:
        return True
    height = terrain.sample(position)
    if height is None:
        height = ALTITUDE_MIN
    return height >= SAND_LEVEL
