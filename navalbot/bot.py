"""
Naval Bot - ship-controlling AI that plays like a player.

Each tick the owning simulation hands the bot a Snapshot and applies the
commands it returns. While its boat is alive the bot:
  - steers away from land, the world border and threats
  - steers toward collectibles and a comfortable spacing from allies
  - finds the best-aligned ready weapon against the nearest hostile
  - occasionally fires or upgrades, depending on its aggression

When its boat is gone it either respawns or, having played before,
sometimes rage-quits.

Example:
    bot = Bot(registry)
    output = bot.update(snapshot)
    for command in output.commands:
        executor.apply(command)
    if output.quit:
        executor.remove_player(snapshot.player_id)
"""

import enum
import logging
import random

from .commands import BotOutput, Control, Fire, Guidance, Spawn, Upgrade
from .config import BotConfig
from .defs import ALTITUDE_MIN, ALTITUDE_ZERO, EntitySubKind
from .entities import EntityRegistry
from .errors import NoSpawnOptionsError
from .geometry import angle_of
from .personality import Personality
from .steering import scan_contacts, terrain_repulsion
from .targeting import find_firing_solution

logger = logging.getLogger('navalbot.bot')


class Lifecycle(enum.Enum):
    NEVER_SPAWNED = 'never_spawned'
    ALIVE = 'alive'
    DEAD = 'dead'
    QUIT = 'quit'


class Bot:
    """AI controller for one player's boat.

    Owns only its personality, its lifecycle and its random stream; the
    snapshot and entity table are read-only.
    """

    def __init__(self, registry=None, config=None, rng=None):
        self.registry = registry if registry is not None else EntityRegistry.default()
        self.config = config if config is not None else BotConfig()
        if rng is None:
            rng = random.Random(self.config.seed)
        self.rng = rng
        self.personality = Personality.generate(self.rng, self.config)
        self.lifecycle = Lifecycle.NEVER_SPAWNED

    @property
    def aggression(self):
        return self.personality.aggression

    @property
    def aim_bias(self):
        return self.personality.aim_bias

    @property
    def level_ambition(self):
        return self.personality.level_ambition

    @property
    def spawned_at_least_once(self):
        return self.lifecycle is not Lifecycle.NEVER_SPAWNED

    def update(self, snapshot):
        """Decide this tick's commands. Returns a BotOutput."""
        if self.lifecycle is Lifecycle.QUIT:
            return BotOutput(quit=True)

        player_id = snapshot.player_id
        contacts = snapshot.contacts()
        boat = next(contacts, None)
        if boat is not None and not (boat.is_boat(self.registry) and boat.player_id == player_id):
            boat = None

        if boat is not None:
            if self.lifecycle is Lifecycle.NEVER_SPAWNED:
                logger.info(f"Player {player_id} spawned as {boat.entity_type}")
            self.lifecycle = Lifecycle.ALIVE
            return BotOutput(commands=self._play(snapshot, boat, contacts))

        if self.lifecycle is Lifecycle.ALIVE:
            self.lifecycle = Lifecycle.DEAD

        if self.spawned_at_least_once and self.rng.random() < self.config.rage_quit_chance:
            logger.info(f"Player {player_id} rage-quit")
            self.lifecycle = Lifecycle.QUIT
            return BotOutput(quit=True)

        options = self.registry.spawn_options(bot=True)
        if not options:
            raise NoSpawnOptionsError("there must be at least one entity type to spawn as")
        return BotOutput(commands=[Spawn(entity_type=self.rng.choice(options))])

    def _play(self, snapshot, boat, contacts):
        data = self.registry.data(boat.entity_type)
        health_percent = 1.0 - boat.damage / data.max_health

        movement = terrain_repulsion(
            boat, data, snapshot.terrain, snapshot.world_radius, self.config.terrain_samples,
        )
        scan = scan_contacts(boat, data, contacts, self.registry, snapshot.player_id, movement)

        solution = None
        if scan.closest_enemy is not None:
            enemy = scan.closest_enemy
            solution = find_firing_solution(boat, data, enemy.contact, enemy.data, self.registry)

        altitude_target = None
        if data.sub_kind == EntitySubKind.SUBMARINE:
            altitude_target = ALTITUDE_ZERO if health_percent > self.aggression else ALTITUDE_MIN

        commands = [Control(
            guidance=Guidance(
                direction_target=angle_of(scan.movement),
                velocity_target=data.speed * self.config.speed_fraction,
            ),
            altitude_target=altitude_target,
            aim_target=solution.position + self.aim_bias if solution is not None else None,
            active=health_percent >= self.config.active_health_threshold,
        )]

        if self.rng.random() < self.aggression:
            if solution is not None:
                if solution.angle_diff < self.config.fire_arc:
                    commands.append(Fire(index=solution.index, position_target=solution.position + self.aim_bias))
            elif data.level < self.level_ambition:
                options = self.registry.upgrade_options(boat.entity_type, snapshot.score, bot=True)
                if options:
                    entity_type = self.rng.choice(options)
                    logger.debug(f"Upgrading {boat.entity_type} -> {entity_type}")
                    commands.append(Upgrade(entity_type=entity_type))

        return commands
