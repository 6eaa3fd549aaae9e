"""
Shared test fixtures for the navalbot test suite.

Provides:
- A small entity table with every kind of armament on one boat
- Builders for contacts, snapshots and bots with pinned personalities
"""

import os
import random
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from navalbot.bot import Bot
from navalbot.config import BotConfig
from navalbot.entities import EntityRegistry
from navalbot.geometry import Vec2
from navalbot.personality import Personality
from navalbot.snapshot import ContactState, WorldSnapshot

PLAYER = 1
ENEMY = 2

# gunboat armaments, in index order:
#   0 torpedo facing forward
#   1 torpedo angled 0.5 rad to port
#   2 shell on the forward turret
#   3 sam, vertical launch
#   4 plane
TEST_TABLE = {
    "gunboat": {
        "kind": "boat", "sub_kind": "corvette", "level": 1,
        "max_health": 2.0, "length": 20.0, "width": 4.0, "radius": 10.0, "speed": 10.0,
        "turrets": [{"position_forward": 5.0, "angle": 0.0, "azimuth": 1.0}],
        "armaments": [
            {"type": "torpedo"},
            {"type": "torpedo", "angle": 0.5},
            {"type": "shell", "turret": 0},
            {"type": "sam", "vertical": True},
            {"type": "plane"},
        ],
    },
    "sub": {
        "kind": "boat", "sub_kind": "submarine", "level": 1,
        "max_health": 2.0, "length": 30.0, "width": 4.0, "speed": 12.0,
        "armaments": [{"type": "torpedo"}],
    },
    "rammer": {
        "kind": "boat", "sub_kind": "ram", "level": 1,
        "max_health": 2.0, "length": 20.0, "width": 6.0, "speed": 20.0,
    },
    "barge": {
        "kind": "boat", "sub_kind": "dredger", "level": 1, "npc": True,
        "max_health": 3.0, "length": 30.0, "width": 10.0, "speed": 5.0,
    },
    "cruiser": {
        "kind": "boat", "sub_kind": "cruiser", "level": 2,
        "max_health": 4.0, "length": 80.0, "width": 10.0, "speed": 15.0,
    },
    "raider": {
        "kind": "boat", "sub_kind": "pirate", "level": 2, "npc": True,
        "max_health": 3.0, "length": 50.0, "width": 9.0, "speed": 14.0,
    },
    "torpedo": {"kind": "weapon", "sub_kind": "torpedo", "length": 5.0, "width": 0.5, "speed": 25.0},
    "shell": {"kind": "weapon", "sub_kind": "shell", "length": 0.5, "width": 0.2, "speed": 400.0},
    "rocket": {"kind": "weapon", "sub_kind": "rocket", "length": 2.0, "width": 0.3, "speed": 150.0},
    "missile": {"kind": "weapon", "sub_kind": "missile", "length": 5.0, "width": 0.5, "speed": 200.0},
    "sam": {"kind": "weapon", "sub_kind": "sam", "length": 3.0, "width": 0.3, "speed": 300.0},
    "depth_charge": {"kind": "weapon", "sub_kind": "depth_charge", "length": 1.0, "width": 1.0},
    "mine": {"kind": "weapon", "sub_kind": "mine", "length": 2.0, "width": 2.0},
    "plane": {"kind": "aircraft", "sub_kind": "plane", "length": 10.0, "width": 12.0, "speed": 120.0},
    "heli": {"kind": "aircraft", "sub_kind": "heli", "length": 12.0, "width": 3.0, "speed": 60.0},
    "sonar_buoy": {"kind": "decoy", "sub_kind": "sonar", "length": 1.0, "width": 1.0},
    "barrel": {"kind": "collectible", "sub_kind": "barrel", "length": 1.0, "width": 1.0},
    "rock": {"kind": "obstacle", "sub_kind": "structure", "length": 40.0, "width": 40.0},
}


def make_registry():
    return EntityRegistry.from_dict(TEST_TABLE)


def make_contact(registry, entity_type, id, player_id=None, position=(0.0, 0.0), direction=0.0,
                 altitude=0.0, damage=0.0, reloads=None):
    """Contact of a known type, freshly replenished."""
    contact = ContactState(
        id=id, player_id=player_id, position=position, direction=direction,
        altitude=altitude, damage=damage,
    ).set_type(entity_type, registry)
    if reloads is not None:
        contact.reloads[:] = reloads
    return contact


def make_snapshot(contacts, player_id=PLAYER, terrain=None, world_radius=1e6, score=0):
    return WorldSnapshot(player_id, contacts, terrain=terrain, world_radius=world_radius, score=score)


def make_bot(registry, aggression=0.0, aim_bias=(0.0, 0.0), level_ambition=1, seed=0, **config):
    """Bot with a pinned personality and a seeded random stream."""
    bot = Bot(registry, config=BotConfig(**config), rng=random.Random(seed))
    bot.personality = Personality(
        aggression=aggression, aim_bias=Vec2(*aim_bias), level_ambition=level_ambition,
    )
    return bot


@pytest.fixture
def registry():
    return make_registry()
