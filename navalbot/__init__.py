"""Navalbot: decision engine for AI-controlled vessels in a naval arena."""

from .bot import Bot, Lifecycle
from .commands import BotOutput, Control, Fire, Guidance, Spawn, Upgrade
from .config import BotConfig
from .entities import EntityData, EntityRegistry
from .errors import NavalBotError, NoSpawnOptionsError, ScenarioError, UnknownEntityTypeError
from .snapshot import Contact, ContactState, Snapshot, WorldSnapshot

__all__ = [
    "Bot",
    "Lifecycle",
    "BotConfig",
    "BotOutput",
    "Control",
    "Fire",
    "Guidance",
    "Spawn",
    "Upgrade",
    "EntityData",
    "EntityRegistry",
    "Contact",
    "ContactState",
    "Snapshot",
    "WorldSnapshot",
    "NavalBotError",
    "NoSpawnOptionsError",
    "ScenarioError",
    "UnknownEntityTypeError",
]
