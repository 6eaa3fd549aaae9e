"""
Static entity data table.

Every entity in the arena (boats, the weapons and aircraft they launch,
collectibles, obstacles) has an immutable EntityData record keyed by its
entity type name. The table is read-only once loaded and is safe to share
between any number of bots.

The bundled table lives in navalbot/data/entities.json; other tables can be
loaded with EntityRegistry.from_json().
"""

from __future__ import annotations

import json
import logging
import math
from importlib import resources
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, Field, model_validator

from .defs import EntityKind, EntitySubKind
from .errors import UnknownEntityTypeError
from .geometry import Transform, Vec2, angle_diff

logger = logging.getLogger('navalbot.entities')


def level_to_score(level: int) -> int:
    """Score required to reach a boat level. Level 1 is free."""
    return 10 * (level * level - 1)


class Armament(BaseModel):
    type: str
    turret: Optional[int] = None
    vertical: bool = False
    position_forward: float = 0.0
    position_side: float = 0.0
    angle: float = 0.0


class Turret(BaseModel):
    position_forward: float = 0.0
    position_side: float = 0.0
    angle: float = 0.0
    # Half-width of the allowed arc around angle. pi means unrestricted.
    azimuth: float = math.pi

    def within_azimuth(self, relative_angle: float) -> bool:
        """Whether a hull-relative angle lies inside this turret's arc."""
        return angle_diff(relative_angle, self.angle) <= self.azimuth


class EntityData(BaseModel):
    kind: EntityKind
    sub_kind: EntitySubKind
    level: int = 1
    max_health: float = Field(1.0, gt=0)  # seconds of damage
    length: float = 1.0
    width: float = 1.0
    radius: float = 0.0
    speed: float = 0.0
    npc: bool = False
    armaments: List[Armament] = Field(default_factory=list)
    turrets: List[Turret] = Field(default_factory=list)

    @model_validator(mode='after')
    def _check(self):
        if not self.radius:
            self.radius = 0.5 * math.hypot(self.length, self.width)
        for i, armament in enumerate(self.armaments):
            if armament.turret is not None and not 0 <= armament.turret < len(self.turrets):
                raise ValueError(f"armament {i} references missing turret {armament.turret}")
        return self


class EntityRegistry:
    """Read-only lookup of EntityData by entity type name.

    Usage:
        registry = EntityRegistry.default()
        data = registry.get(contact.entity_type)   # None if unknown
        choices = registry.spawn_options(bot=True)
    """

    def __init__(self, entities: Dict[str, EntityData]):
        self._entities = dict(entities)
        for name, data in self._entities.items():
            for armament in data.armaments:
                if armament.type not in self._entities:
                    logger.warning(f"{name}: armament type '{armament.type}' is not in the table")

    @classmethod
    def from_dict(cls, raw) -> EntityRegistry:
        return cls({name: EntityData.model_validate(entry) for name, entry in raw.items()})

    @classmethod
    def from_json(cls, path) -> EntityRegistry:
        with open(path, 'r') as f:
            raw = json.load(f)
        registry = cls.from_dict(raw)
        logger.info(f"Loaded {len(registry)} entity types from {path}")
        return registry

    @classmethod
    def default(cls) -> EntityRegistry:
        text = resources.files('navalbot').joinpath('data/entities.json').read_text()
        return cls.from_dict(json.loads(text))

    def __len__(self):
        return len(self._entities)

    def __contains__(self, entity_type):
        return entity_type in self._entities

    def __iter__(self) -> Iterator[str]:
        return iter(self._entities)

    def get(self, entity_type: Optional[str]) -> Optional[EntityData]:
        if entity_type is None:
            return None
        return self._entities.get(entity_type)

    def data(self, entity_type: str) -> EntityData:
        data = self.get(entity_type)
        if data is None:
            raise UnknownEntityTypeError(f"unknown entity type '{entity_type}'")
        return data

    def spawn_options(self, bot: bool) -> List[str]:
        """Boat types a new player (or bot, if bot is set) may spawn as."""
        return [
            name for name, data in self._entities.items()
            if data.kind == EntityKind.BOAT and data.level == 1 and (bot or not data.npc)
        ]

    def upgrade_options(self, entity_type: str, score: float, bot: bool) -> List[str]:
        """Boat types one level above entity_type that score can afford."""
        level = self.data(entity_type).level + 1
        if score < level_to_score(level):
            return []
        return [
            name for name, data in self._entities.items()
            if data.kind == EntityKind.BOAT and data.level == level and (bot or not data.npc)
        ]

    def armament_transform(self, entity_type: str, turret_angles, index: int) -> Transform:
        """Transform of an armament relative to its boat's hull.

        Turret-mounted armaments are offset from the turret, which itself
        is rotated to its current angle in turret_angles.
        """
        data = self.data(entity_type)
        armament = data.armaments[index]
        offset = Transform(Vec2(armament.position_forward, armament.position_side), armament.angle)
        if armament.turret is None:
            return offset
        turret = data.turrets[armament.turret]
        # Turrets without a reported angle sit at rest.
        turret_angle = turret_angles[armament.turret] if armament.turret < len(turret_angles) else turret.angle
        mount = Transform(Vec2(turret.position_forward, turret.position_side), turret_angle)
        return mount + offset
