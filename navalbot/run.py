#!/usr/bin/env python3
"""
Navalbot Scenario Runner - ticks a bot against a scripted scenario.

Usage:
    python -m navalbot.run --scenario scenarios/duel.json --ticks 50 --seed 7 \
        --results results/duel.json

The runner loads a JSON scenario (contacts, terrain, world radius, score),
calls Bot.update() once per tick and logs the commands it issues. It applies
just enough of them to keep the scenario moving: Spawn places the bot's boat,
Upgrade changes its type and Fire starts the armament's reload. Nothing else
in the world changes.

Scenario format:
    {
        "player_id": 1,
        "score": 0,
        "world_radius": 1000,
        "spawn_point": [0, 0],
        "entities": "custom_table.json",          (optional, relative path)
        "terrain": {"cell_size": 50, "heights": [[...], ...]},   (optional)
        "contacts": [
            {"id": 2, "entity_type": "skiff", "player_id": 2,
             "position": [100, 0], "direction": 3.14, "altitude": 0}
        ]
    }
"""

import argparse
import json
import logging
import os

from .bot import Bot
from .config import BotConfig
from .defs import TICKS_PER_SECOND
from .entities import EntityRegistry
from .errors import ScenarioError
from .snapshot import ContactState, WorldSnapshot
from .terrain import FlatTerrain, HeightmapTerrain

logger = logging.getLogger('navalbot.runner')

RELOAD_TICKS = 2 * TICKS_PER_SECOND


class Scenario:
    """Mutable world state for one bot run."""

    def __init__(self, player_id, contacts, terrain, world_radius, score, spawn_point, registry):
        self.player_id = player_id
        self.contacts = contacts
        self.terrain = terrain
        self.world_radius = world_radius
        self.score = score
        self.spawn_point = spawn_point
        self.registry = registry
        self.own_boat = None

    @classmethod
    def load(cls, path, registry=None):
        try:
            with open(path, 'r') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ScenarioError(f"cannot read scenario: {e}", path=path) from e

        if 'player_id' not in raw:
            raise ScenarioError("missing 'player_id'", path=path)

        if raw.get('entities'):
            table = os.path.join(os.path.dirname(os.path.abspath(path)), raw['entities'])
            registry = EntityRegistry.from_json(table)
        elif registry is None:
            registry = EntityRegistry.default()

        terrain = FlatTerrain()
        if raw.get('terrain'):
            terrain = HeightmapTerrain(raw['terrain']['heights'], raw['terrain']['cell_size'])

        contacts = []
        for entry in raw.get('contacts', []):
            try:
                contacts.append(_contact_from_dict(entry, registry))
            except (AttributeError, KeyError, TypeError) as e:
                raise ScenarioError(f"bad contact {entry!r}: {e}", path=path) from e

        return cls(
            player_id=raw['player_id'],
            contacts=contacts,
            terrain=terrain,
            world_radius=float(raw.get('world_radius', 1000.0)),
            score=raw.get('score', 0),
            spawn_point=tuple(raw.get('spawn_point', (0.0, 0.0))),
            registry=registry,
        )

    def snapshot(self):
        contacts = list(self.contacts)
        if self.own_boat is not None:
            contacts.insert(0, self.own_boat)
        return WorldSnapshot(
            self.player_id, contacts, terrain=self.terrain,
            world_radius=self.world_radius, score=self.score,
        )

    def apply(self, command):
        if command.type == 'spawn':
            self.own_boat = ContactState(
                id=f"player-{self.player_id}", player_id=self.player_id, position=self.spawn_point,
            ).set_type(command.entity_type, self.registry)
        elif command.type == 'upgrade' and self.own_boat is not None:
            self.own_boat.set_type(command.entity_type, self.registry)
        elif command.type == 'fire' and self.own_boat is not None:
            self.own_boat.reloads[command.index] = RELOAD_TICKS

    def advance(self):
        if self.own_boat is not None:
            reloads = self.own_boat.reloads
            for i, remaining in enumerate(reloads):
                reloads[i] = max(0, remaining - 1)


def _contact_from_dict(entry, registry):
    entity_type = entry.get('entity_type')
    contact = ContactState(
        id=entry['id'],
        entity_type=entity_type,
        player_id=entry.get('player_id'),
        position=tuple(entry.get('position', (0.0, 0.0))),
        direction=entry.get('direction', 0.0),
        altitude=entry.get('altitude', 0.0),
        damage=entry.get('damage', 0.0),
    )
    # Unknown types are kept as-is; the bot ignores what it cannot resolve.
    if entity_type in registry:
        contact.set_type(entity_type, registry)
    if 'reloads' in entry:
        contact.reloads[:] = entry['reloads']
    if 'turrets' in entry:
        contact.turrets[:] = entry['turrets']
    return contact


def run_scenario(scenario, bot, ticks):
    """Tick bot against scenario. Returns a JSON-serializable results dict."""
    history = []
    for tick in range(ticks):
        output = bot.update(scenario.snapshot())
        for command in output.commands:
            logger.info(f"tick {tick}: {command.model_dump_json()}")
            scenario.apply(command)
        history.append({
            'tick': tick,
            'commands': [command.model_dump() for command in output.commands],
            'quit': output.quit,
        })
        if output.quit:
            logger.info(f"Bot quit at tick {tick}")
            break
        scenario.advance()

    personality = bot.personality
    return {
        'player_id': scenario.player_id,
        'ticks': history,
        'lifecycle': bot.lifecycle.value,
        'personality': {
            'aggression': personality.aggression,
            'aim_bias': list(personality.aim_bias),
            'level_ambition': personality.level_ambition,
        },
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description='Navalbot scenario runner')
    parser.add_argument('--scenario', required=True,
                        help='Scenario JSON file')
    parser.add_argument('--ticks', type=int, default=20,
                        help='Number of ticks to run (default: 20)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the bot\'s random stream')
    parser.add_argument('--results', default=None,
                        help='Write results JSON to this path')
    parser.add_argument('--log-level', default='INFO',
                        help='Logging level (default: INFO)')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s [%(name)s] %(levelname)s: %(message)s',
    )

    config = BotConfig.from_env()
    if args.seed is not None:
        config = config.model_copy(update={'seed': args.seed})

    scenario = Scenario.load(args.scenario)
    bot = Bot(scenario.registry, config=config)
    logger.info(f"Running {args.scenario} for {args.ticks} ticks "
                f"(aggression={bot.aggression:.3f}, ambition={bot.level_ambition})")

    results = run_scenario(scenario, bot, args.ticks)

    if args.results:
        directory = os.path.dirname(args.results)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(args.results, 'w') as f:
            json.dump(results, f, indent=2)
        logger.info(f"Results written to {args.results}")

    return results


if __name__ == '__main__':
    main()
