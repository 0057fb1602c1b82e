"""
Invaders Sim world
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator

from mini_arcade_core.spaces.geometry.bounds import Position2D

from invaders_sim.constants import (
    ALIEN_COLS,
    ALIEN_GRID_GAP,
    ALIEN_GRID_ORIGIN,
    ALIEN_ROWS,
    FORMATION_START_SPEED,
    MAX_PLAYER_BULLETS,
    NO_LIVES_MESSAGE,
    PLAYER_EXPLOSION_TICKS,
    PLAYER_LIVES,
    PLAYER_MAX_X,
    PLAYER_MIN_X,
    PLAYER_START,
    PLAYER_STEP,
)
from invaders_sim.entities import (
    Alien,
    Bullet,
    EntityView,
    Faction,
    Player,
    PlayerView,
    view_of,
)
from invaders_sim.utils import logger


@dataclass
class SimulationWorld:  # pylint: disable=too-many-instance-attributes
    """
    Every entity and scalar of one game session.
    """

    player: Player
    aliens: list[Alien] = field(default_factory=list)
    player_bullets: list[Bullet] = field(default_factory=list)
    alien_bullets: list[Bullet] = field(default_factory=list)
    score: int = 0
    lives: int = PLAYER_LIVES
    game_over: bool = False
    end_message: str = ""
    formation_direction: int = 1  # 1 for right, -1 for left
    formation_speed: float = FORMATION_START_SPEED
    alien_fire_ticks: int = 0
    tick: int = 0
    ids: Iterator[int] = field(default_factory=itertools.count, repr=False)

    def next_id(self) -> int:
        return next(self.ids)

    def spawn_alien(self, x: float, y: float) -> Alien:
        alien = Alien(self.next_id(), Position2D(x, y))
        self.aliens.append(alien)
        return alien

    def spawn_bullet(self, faction: Faction, x: float, y: float) -> Bullet:
        """
        Append a bullet to the collection of its faction.

        No cap is applied here; ``shoot_player_bullet`` owns the player cap.
        """
        bullet = Bullet.fired_by(faction, self.next_id(), x, y)
        if faction is Faction.PLAYER:
            self.player_bullets.append(bullet)
        else:
            self.alien_bullets.append(bullet)
        return bullet

    def move_player_left(self):
        if self.game_over:
            return
        x = self.player.position.x - PLAYER_STEP
        if x > PLAYER_MIN_X:
            self.player.position.x = x

    def move_player_right(self):
        if self.game_over:
            return
        x = self.player.position.x + PLAYER_STEP
        if x < PLAYER_MAX_X:
            self.player.position.x = x

    def shoot_player_bullet(self) -> Bullet | None:
        if self.game_over:
            return None
        if len(self.player_bullets) >= MAX_PLAYER_BULLETS:
            return None
        x, y = self.player.position.to_tuple()
        bullet = self.spawn_bullet(Faction.PLAYER, x, y)
        logger.debug(f"Player fired bullet {bullet.id} at ({x}, {y})")
        return bullet

    def player_hit(self):
        """
        Start the explosion countdown unless one is already running.
        """
        if self.player.exploding:
            return
        self.player.exploding = True
        self.player.explode_ticks = PLAYER_EXPLOSION_TICKS
        logger.debug(f"Player hit at tick {self.tick}")

    def lose_life(self):
        self.lives -= 1
        logger.debug(f"Life lost, {self.lives} left")
        if self.lives <= 0:
            self.end_game(NO_LIVES_MESSAGE)

    def end_game(self, message: str):
        self.game_over = True
        self.end_message = message
        logger.debug(f"Game over at tick {self.tick}: {message}")

    def snapshot(self) -> SimulationSnapshot:
        player = self.player
        return SimulationSnapshot(
            player=PlayerView(
                player.id,
                player.position.x,
                player.position.y,
                player.exploding,
            ),
            aliens=tuple(view_of(a) for a in self.aliens),
            player_bullets=tuple(view_of(b) for b in self.player_bullets),
            alien_bullets=tuple(view_of(b) for b in self.alien_bullets),
            score=self.score,
            lives=self.lives,
            game_over=self.game_over,
            end_message=self.end_message,
        )


@dataclass(frozen=True)
class SimulationSnapshot:
    """
    Read-only picture of the world between two steps, for the renderer/HUD.
    """

    player: PlayerView
    aliens: tuple[EntityView, ...]
    player_bullets: tuple[EntityView, ...]
    alien_bullets: tuple[EntityView, ...]
    score: int
    lives: int
    game_over: bool
    end_message: str


def build_world(with_aliens: bool = True) -> SimulationWorld:
    """
    Create a fresh world: the player at its start spot and, unless told
    otherwise, the full 5x11 alien grid.

    :param with_aliens: Populate the alien grid
    :type with_aliens: bool

    :return: SimulationWorld
    :rtype: SimulationWorld
    """
    ids = itertools.count()
    world = SimulationWorld(
        player=Player(next(ids), Position2D(*PLAYER_START)),
        ids=ids,
    )

    if with_aliens:
        start_x, start_y = ALIEN_GRID_ORIGIN
        gap_x, gap_y = ALIEN_GRID_GAP
        for r in range(ALIEN_ROWS):
            for c in range(ALIEN_COLS):
                world.spawn_alien(start_x + c * gap_x, start_y + r * gap_y)

    logger.debug(f"World built with {len(world.aliens)} aliens")
    return world
