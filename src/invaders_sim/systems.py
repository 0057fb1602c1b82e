"""
Invaders Sim systems

Each system is one phase of a tick. The simulation runs them through a
``SystemPipeline`` sorted by ``order``; once a phase ends the game, the
remaining ones report themselves disabled for the rest of the tick.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from mini_arcade_core.scenes.systems import BaseSystem
from mini_arcade_core.spaces.geometry.bounds import Position2D

from invaders_sim.constants import (
    ALIEN_FIRE_INTERVAL,
    ALIEN_SCORE,
    FIELD_BOTTOM,
    FIELD_TOP,
    FORMATION_DROP,
    FORMATION_LEFT_EDGE,
    FORMATION_MAX_SPEED,
    FORMATION_RIGHT_EDGE,
    FORMATION_SPEEDUP,
    GROUND_Y,
    INVASION_MESSAGE,
    WIN_MESSAGE,
)
from invaders_sim.entities import Bullet, Faction
from invaders_sim.utils import logger
from invaders_sim.world import SimulationWorld


@dataclass
class TickContext:
    """
    What a system sees during one tick.
    """

    world: SimulationWorld
    rng: random.Random
    dt: float = 1.0  # one tick


class RunningGameSystem:
    """
    Base for tick phases: none of them run once the game is over.
    """

    def enabled(self, ctx: TickContext) -> bool:
        return not ctx.world.game_over


@dataclass
class PlayerExplosionSystem(RunningGameSystem):
    """
    Count the explosion flash down; the life is lost on the last tick.
    """

    name: str = "player_explosion"
    order: int = 10

    def step(self, ctx: TickContext):
        player = ctx.world.player
        if not player.exploding:
            return

        player.explode_ticks -= 1
        if player.explode_ticks > 0:
            return

        player.explode_ticks = 0
        player.exploding = False
        ctx.world.lose_life()


@dataclass
class BulletMoveSystem(RunningGameSystem):
    """Moves the bullets of one faction and drops those off the field."""

    faction: Faction
    name: str = "bullet_move"
    order: int = 20

    def step(self, ctx: TickContext):
        bullets = self._bullets(ctx.world)
        if not bullets:
            return

        alive: list[Bullet] = []
        for b in bullets:
            x, y = b.position.to_tuple()
            x, y = b.velocity.advance(x, y, ctx.dt)
            b.position = Position2D(x, y)
            if FIELD_TOP <= b.position.y <= FIELD_BOTTOM:
                alive.append(b)

        bullets[:] = alive

    def _bullets(self, world: SimulationWorld) -> list[Bullet]:
        if self.faction is Faction.PLAYER:
            return world.player_bullets
        return world.alien_bullets


@dataclass
class AlienFormationSystem(RunningGameSystem):
    """
    Move aliens as a formation:
    - Move horizontally
    - If any crossed a wall -> reverse direction, drop down, speed up
    """

    name: str = "alien_formation"
    order: int = 40

    def step(self, ctx: TickContext):
        w = ctx.world
        if not w.aliens:
            return

        dx = w.formation_direction * w.formation_speed
        for a in w.aliens:
            a.position.x += dx

        hit_wall = any(
            a.position.x > FORMATION_RIGHT_EDGE
            or a.position.x < FORMATION_LEFT_EDGE
            for a in w.aliens
        )
        if not hit_wall:
            return

        w.formation_direction = -w.formation_direction
        for a in w.aliens:
            a.position.y += FORMATION_DROP
        w.formation_speed = min(
            w.formation_speed + FORMATION_SPEEDUP, FORMATION_MAX_SPEED
        )
        logger.debug(
            f"Formation bounced, direction {w.formation_direction}, "
            f"speed {w.formation_speed:.1f}"
        )


@dataclass
class BulletAlienCollisionSystem(RunningGameSystem):
    """
    Kills aliens hit by player bullets and removes the bullet.

    A bullet is spent on the first alien it overlaps, in formation order.
    """

    name: str = "bullet_alien_collision"
    order: int = 50

    def step(self, ctx: TickContext):
        w = ctx.world
        if w.player_bullets and w.aliens:
            spent: list[Bullet] = []
            for b in w.player_bullets:
                collider = b.collider
                for a in w.aliens:
                    if collider.intersects(a.collider):
                        spent.append(b)
                        w.aliens.remove(a)
                        w.score += ALIEN_SCORE
                        logger.debug(
                            f"Bullet {b.id} killed alien {a.id}, "
                            f"score {w.score}"
                        )
                        break

            if spent:
                w.player_bullets[:] = [
                    b for b in w.player_bullets if b not in spent
                ]

        if not w.aliens:
            w.end_game(WIN_MESSAGE)


@dataclass
class BulletPlayerCollisionSystem(RunningGameSystem):
    name: str = "bullet_player_collision"
    order: int = 51

    def step(self, ctx: TickContext):
        w = ctx.world
        if not w.alien_bullets:
            return

        player_collider = w.player.collider
        alive: list[Bullet] = []
        for b in w.alien_bullets:
            if player_collider.intersects(b.collider):
                # already exploding -> player_hit ignores it
                w.player_hit()
                continue
            alive.append(b)

        w.alien_bullets[:] = alive


@dataclass
class AlienInvasionSystem(RunningGameSystem):
    """Ends the game once an alien reaches the ground or the ship."""

    name: str = "alien_invasion"
    order: int = 52

    def step(self, ctx: TickContext):
        w = ctx.world
        player_collider = w.player.collider
        for a in w.aliens:
            if a.position.y > GROUND_Y or a.collider.intersects(
                player_collider
            ):
                w.end_game(INVASION_MESSAGE)
                return


@dataclass
class AlienFireSystem(RunningGameSystem):
    name: str = "alien_fire"
    order: int = 60

    interval: int = ALIEN_FIRE_INTERVAL

    def step(self, ctx: TickContext):
        w = ctx.world
        w.alien_fire_ticks += 1
        if w.alien_fire_ticks < self.interval:
            return

        w.alien_fire_ticks = 0
        if not w.aliens:
            return

        shooter = ctx.rng.choice(w.aliens)
        x, y = shooter.position.to_tuple()
        bullet = w.spawn_bullet(Faction.ALIEN, x, y)
        logger.debug(f"Alien {shooter.id} fired bullet {bullet.id}")


def default_systems() -> list[BaseSystem[TickContext]]:
    """
    The phases of one tick, in the order they must run.

    :return: list of systems
    :rtype: list[BaseSystem[TickContext]]
    """
    return [
        PlayerExplosionSystem(),
        BulletMoveSystem(Faction.PLAYER, name="player_bullet_move", order=20),
        BulletMoveSystem(Faction.ALIEN, name="alien_bullet_move", order=30),
        AlienFormationSystem(),
        BulletAlienCollisionSystem(),
        BulletPlayerCollisionSystem(),
        AlienInvasionSystem(),
        AlienFireSystem(),
    ]
