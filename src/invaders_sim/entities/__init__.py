"""
Invaders Sim entities
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from invaders_sim.constants import (
    ALIEN_BULLET_VELOCITY,
    ALIEN_SIZE,
    BULLET_SIZE,
    PLAYER_BULLET_VELOCITY,
    PLAYER_SIZE,
)


def centered_collider(center: Position2D, size: Size2D) -> RectCollider:
    """
    Box of ``size`` centred on ``center``.

    Entities keep their centre as position; the collider wants its
    top-left corner. Touching edges count as intersecting.

    :param center: Centre of the box
    :type center: Position2D

    :param size: Extents of the box
    :type size: Size2D

    :return: RectCollider
    :rtype: RectCollider
    """
    return RectCollider(
        Position2D(center.x - size.width / 2, center.y - size.height / 2),
        size,
    )


class Faction(str, Enum):
    PLAYER = "player"
    ALIEN = "alien"


# Entities compare by identity so two aliens at the same spot stay distinct.
@dataclass(eq=False)
class Player:
    """
    Player ship
    """

    id: int
    position: Position2D
    exploding: bool = False
    explode_ticks: int = 0  # ticks left in the explosion flash

    size = Size2D(*PLAYER_SIZE)

    @property
    def collider(self) -> RectCollider:
        return centered_collider(self.position, self.size)


@dataclass(eq=False)
class Alien:
    """
    Alien entity
    """

    id: int
    position: Position2D

    size = Size2D(*ALIEN_SIZE)

    @property
    def collider(self) -> RectCollider:
        return centered_collider(self.position, self.size)


@dataclass(eq=False)
class Bullet:
    """
    Bullet entity
    """

    id: int
    position: Position2D
    velocity: Velocity2D
    faction: Faction

    size = Size2D(*BULLET_SIZE)

    @classmethod
    def fired_by(cls, faction: Faction, bullet_id: int, x: float, y: float):
        """
        Create a bullet with the fixed velocity of its faction.

        :param faction: Who fired it
        :type faction: Faction

        :param bullet_id: Identity for the new bullet
        :type bullet_id: int

        :param x: Spawn x
        :type x: float

        :param y: Spawn y
        :type y: float

        :return: Bullet
        :rtype: Bullet
        """
        if faction is Faction.PLAYER:
            velocity = Velocity2D(*PLAYER_BULLET_VELOCITY)
        else:
            velocity = Velocity2D(*ALIEN_BULLET_VELOCITY)
        return cls(bullet_id, Position2D(x, y), velocity, faction)

    @property
    def collider(self) -> RectCollider:
        return centered_collider(self.position, self.size)


@dataclass(frozen=True)
class EntityView:
    """
    Read-only view of an alien or a bullet.
    """

    id: int
    x: float
    y: float


@dataclass(frozen=True)
class PlayerView:
    id: int
    x: float
    y: float
    exploding: bool


def view_of(entity: Alien | Bullet) -> EntityView:
    return EntityView(entity.id, entity.position.x, entity.position.y)
