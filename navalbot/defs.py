"""
Naval arena constants and entity classifications.

These define the kinds and sub-kinds used by the static entity table,
the altitude band contacts report, and the fixed tuning values the bot
controller is built around.
"""

import enum
import math

# --- Simulation constants ---
TICKS_PER_SECOND = 10
MAX_BOAT_LEVEL = 10

# Altitude band: negative is submerged, zero is the surface, positive is airborne.
ALTITUDE_MIN = -1.0
ALTITUDE_ZERO = 0.0
ALTITUDE_MAX = 1.0

# Terrain at or above this height is land.
SAND_LEVEL = 0.0

# --- Bot tuning ---
# Controls how chill the bots are. Too high and the waters fill with stray torpedoes.
MAX_AGGRESSION = 0.1
AIM_BIAS_RADIUS = 10.0
TERRAIN_SAMPLES = 10
SPEED_FRACTION = 0.8
FIRE_ARC = math.radians(60.0)
ACTIVE_HEALTH_THRESHOLD = 0.5
RAGE_QUIT_CHANCE = 1.0 / 3.0


class EntityKind(str, enum.Enum):
    BOAT = 'boat'
    WEAPON = 'weapon'
    AIRCRAFT = 'aircraft'
    DECOY = 'decoy'
    COLLECTIBLE = 'collectible'
    OBSTACLE = 'obstacle'


class EntitySubKind(str, enum.Enum):
    # Boats
    CARRIER = 'carrier'
    CORVETTE = 'corvette'
    CRUISER = 'cruiser'
    DESTROYER = 'destroyer'
    DREDGER = 'dredger'
    HOVERCRAFT = 'hovercraft'
    MTB = 'mtb'
    PIRATE = 'pirate'
    RAM = 'ram'
    SUBMARINE = 'submarine'
    TANKER = 'tanker'
    # Weapons
    DEPTH_CHARGE = 'depth_charge'
    MINE = 'mine'
    MISSILE = 'missile'
    ROCKET = 'rocket'
    SAM = 'sam'
    SHELL = 'shell'
    TORPEDO = 'torpedo'
    # Aircraft
    HELI = 'heli'
    PLANE = 'plane'
    # Decoys
    SONAR = 'sonar'
    # Collectibles
    BARREL = 'barrel'
    COIN = 'coin'
    CRATE = 'crate'
    SCORE = 'score'
    # Obstacles
    STRUCTURE = 'structure'


def is_airborne(altitude):
    return altitude > ALTITUDE_ZERO


def is_submerged(altitude):
    return altitude < ALTITUDE_ZERO
