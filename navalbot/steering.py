"""
Potential-field steering.

Terrain samples and sensor contacts each contribute a direction vector;
their sum is the heading the bot steers toward. Contributions decay with
squared distance so near things dominate and far things fade out.
"""

import math
from typing import NamedTuple, Optional

from .defs import TERRAIN_SAMPLES, EntityKind, EntitySubKind
from .geometry import ZERO, to_vec
from .terrain import is_land_or_border


def attract(target_delta, distance_squared):
    """Pull toward target_delta, weakening with distance."""
    return target_delta / (1.0 + distance_squared)


def repel(target_delta, distance_squared):
    return attract(-target_delta, distance_squared)


def spring(target_delta, desired_distance):
    """Pull toward (or push away from) a stand-off distance.

    Zero at the desired distance, negative inside it, positive outside,
    and saturating as the displacement grows.
    """
    displacement = target_delta.length() - desired_distance
    return target_delta * displacement / (displacement ** 2 + 1.0)


def terrain_repulsion(boat, data, terrain, world_radius, samples=TERRAIN_SAMPLES):
    """Push away from land and the world border around the hull."""
    movement = ZERO
    position = boat.transform.position
    for i in range(samples):
        delta = to_vec(i * 2.0 * math.pi / samples) * data.length
        if is_land_or_border(position + delta, terrain, world_radius):
            movement += repel(delta, data.length ** 2)
    return movement


class Hostile(NamedTuple):
    contact: object
    data: object
    distance_squared: float


class ContactScan(NamedTuple):
    movement: object
    closest_enemy: Optional[Hostile]


def scan_contacts(boat, data, contacts, registry, player_id, movement=ZERO):
    """Single pass over sensor contacts.

    Accumulates steering onto movement and tracks the nearest hostile boat,
    aircraft or missile. Contacts without resolvable entity data are skipped.
    """
    closest_enemy = None
    position = boat.transform.position

    for contact in contacts:
        if contact.id == boat.id:
            continue

        contact_data = registry.get(contact.entity_type)
        if contact_data is None:
            continue

        delta = contact.transform.position - position
        distance_squared = delta.length_squared()
        friendly = contact.player_id == player_id

        if contact_data.kind == EntityKind.COLLECTIBLE:
            movement += attract(delta, distance_squared)
        elif (not friendly or contact_data.kind == EntityKind.BOAT) and not (
            not friendly
            and contact_data.kind == EntityKind.BOAT
            and data.sub_kind == EntitySubKind.RAM
        ):
            movement += repel(delta, distance_squared)

        if friendly:
            if contact_data.kind == EntityKind.BOAT:
                movement = spring(delta, data.radius + contact_data.radius)
            continue

        if contact_data.kind == EntityKind.OBSTACLE:
            movement += repel(delta, distance_squared)
            continue

        hostile = contact_data.kind in (EntityKind.BOAT, EntityKind.AIRCRAFT) or (
            contact_data.kind == EntityKind.WEAPON and contact_data.sub_kind == EntitySubKind.MISSILE
        )
        if hostile and (closest_enemy is None or distance_squared < closest_enemy.distance_squared):
            closest_enemy = Hostile(contact, contact_data, distance_squared)

    return ContactScan(movement, closest_enemy)
