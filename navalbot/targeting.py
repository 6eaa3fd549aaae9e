"""
Firing solution search.

Given the nearest hostile, pick the ready armament that can hurt it and is
best aligned to fire at it. Alignment is the angular deviation between the
armament's current facing and the bearing to the target.
"""

import logging
from typing import NamedTuple

from .defs import EntityKind, EntitySubKind, is_airborne, is_submerged
from .geometry import angle_diff, angle_of, wrap_angle

logger = logging.getLogger('navalbot.targeting')

# What each armament sub-kind can engage.
VS_AIRBORNE = frozenset({EntitySubKind.SAM})
VS_SUBMERGED = frozenset({
    EntitySubKind.TORPEDO,
    EntitySubKind.PLANE,
    EntitySubKind.HELI,
    EntitySubKind.DEPTH_CHARGE,
})
VS_SURFACE = VS_SUBMERGED | {EntitySubKind.ROCKET, EntitySubKind.MISSILE, EntitySubKind.SHELL}


class FiringSolution(NamedTuple):
    index: int
    position: object
    angle_diff: float


def is_relevant(armament_data, target_data, target_altitude):
    """Whether an armament of armament_data's sub-kind can engage the target."""
    if target_data.kind in (EntityKind.AIRCRAFT, EntityKind.WEAPON):
        if is_airborne(target_altitude):
            return armament_data.sub_kind in VS_AIRBORNE
        return False
    if target_data.kind == EntityKind.BOAT:
        if is_submerged(target_altitude):
            return armament_data.sub_kind in VS_SUBMERGED
        return armament_data.sub_kind in VS_SURFACE
    return False


def find_firing_solution(boat, data, enemy, enemy_data, registry):
    """Best firing solution against enemy, or None.

    Armaments are considered in index order and the first one with the
    smallest deviation wins.
    """
    reloads = boat.reloads
    turrets = boat.turrets
    transform = boat.transform
    target = enemy.transform.position
    best = None

    for i, armament in enumerate(data.armaments):
        # A contact that was never replenished has no reload entries yet.
        if i >= len(reloads) or reloads[i] > 0:
            continue

        armament_data = registry.get(armament.type)
        if armament_data is None or armament_data.kind not in (EntityKind.WEAPON, EntityKind.AIRCRAFT):
            continue

        if not is_relevant(armament_data, enemy_data, enemy.altitude):
            continue

        if armament.turret is not None:
            turret = data.turrets[armament.turret]
            relative_bearing = wrap_angle(angle_of(target - transform.position) - transform.direction)
            current = turrets[armament.turret] if armament.turret < len(turrets) else turret.angle
            if not (turret.within_azimuth(current) and turret.within_azimuth(relative_bearing)):
                # Out of azimuth range; cannot fire.
                continue

        armament_transform = transform + registry.armament_transform(boat.entity_type, turrets, i)
        bearing = angle_of(target - armament_transform.position)

        if armament.vertical or armament_data.kind == EntityKind.AIRCRAFT:
            deviation = 0.0
        else:
            deviation = angle_diff(bearing, armament_transform.direction)

        if best is None or deviation < best.angle_diff:
            best = FiringSolution(i, target, deviation)

    if best is not None:
        logger.debug(f"Firing solution: armament {best.index} deviation {best.angle_diff:.3f}")
    return best
