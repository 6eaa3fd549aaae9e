"""
Per-tick world snapshot as seen by one bot.

Contact and Snapshot are the read-only views the bot controller consumes.
The simulation may back them however it likes; ContactState and
WorldSnapshot are plain in-memory backings used by the scenario runner
and the tests.
"""

from abc import ABC, abstractmethod

from .defs import ALTITUDE_ZERO, EntityKind
from .geometry import Transform, Vec2
from .terrain import FlatTerrain


class Contact(ABC):
    """An entity sensed this tick, possibly the bot's own boat."""

    @property
    @abstractmethod
    def id(self):
        ...

    @property
    @abstractmethod
    def player_id(self):
        """Owning player, or None for unowned entities."""

    @property
    @abstractmethod
    def entity_type(self):
        """Entity type name, or None if it could not be resolved."""

    @property
    @abstractmethod
    def transform(self):
        ...

    @property
    @abstractmethod
    def altitude(self):
        ...

    @property
    @abstractmethod
    def damage(self):
        """Health depleted, in seconds."""

    @property
    @abstractmethod
    def reloads(self):
        """Remaining reload ticks per armament."""

    @property
    @abstractmethod
    def turrets(self):
        """Current turret angles relative to the hull."""

    def is_boat(self, registry):
        data = registry.get(self.entity_type)
        return data is not None and data.kind == EntityKind.BOAT


class Snapshot(ABC):
    """Everything one bot can observe during a tick."""

    @property
    @abstractmethod
    def player_id(self):
        ...

    @abstractmethod
    def contacts(self):
        """Iterate contacts. The bot's own boat comes first while alive."""

    @property
    @abstractmethod
    def terrain(self):
        ...

    @property
    @abstractmethod
    def world_radius(self):
        ...

    @property
    @abstractmethod
    def score(self):
        ...


class ContactState(Contact):
    """Mutable in-memory contact."""

    def __init__(self, id, entity_type=None, player_id=None, position=(0.0, 0.0),
                 direction=0.0, altitude=ALTITUDE_ZERO, damage=0.0, reloads=None, turrets=None):
        self._id = id
        self._entity_type = entity_type
        self._player_id = player_id
        self._transform = Transform(Vec2(*position), direction)
        self._altitude = altitude
        self._damage = damage
        self._reloads = list(reloads) if reloads else []
        self._turrets = list(turrets) if turrets else []

    @property
    def id(self):
        return self._id

    @property
    def player_id(self):
        return self._player_id

    @property
    def entity_type(self):
        return self._entity_type

    @property
    def transform(self):
        return self._transform

    @transform.setter
    def transform(self, value):
        self._transform = value

    @property
    def altitude(self):
        return self._altitude

    @altitude.setter
    def altitude(self, value):
        self._altitude = value

    @property
    def damage(self):
        return self._damage

    @damage.setter
    def damage(self, value):
        self._damage = value

    @property
    def reloads(self):
        return self._reloads

    @property
    def turrets(self):
        return self._turrets

    def set_type(self, entity_type, registry):
        """Become a fresh entity of entity_type.

        Keeps identity, owner and transform. All armaments are replenished
        and turrets return to their rest angles.
        """
        data = registry.data(entity_type)
        self._entity_type = entity_type
        self._reloads = [0] * len(data.armaments)
        self._turrets = [turret.angle for turret in data.turrets]
        return self

    def __repr__(self):
        return f"ContactState(id={self._id!r}, entity_type={self._entity_type!r}, player_id={self._player_id!r})"


class WorldSnapshot(Snapshot):
    """In-memory snapshot over a list of contacts."""

    def __init__(self, player_id, contacts=(), terrain=None, world_radius=1000.0, score=0):
        self._player_id = player_id
        self._contacts = list(contacts)
        self._terrain = terrain if terrain is not None else FlatTerrain()
        self._world_radius = world_radius
        self._score = score

    @property
    def player_id(self):
        return self._player_id

    def contacts(self):
        return iter(self._contacts)

    @property
    def terrain(self):
        return self._terrain

    @property
    def world_radius(self):
        return self._world_radius

    @property
    def score(self):
        return self._score
