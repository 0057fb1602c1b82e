"""
Invaders Sim simulation
"""

from __future__ import annotations

import random

from mini_arcade_core.scenes.systems import SystemPipeline

from invaders_sim.entities import EntityView, PlayerView, view_of
from invaders_sim.systems import TickContext, default_systems
from invaders_sim.world import SimulationSnapshot, SimulationWorld, build_world


class Simulation:
    """
    Tick-stepped arcade shooter.

    The only writer of its world: drivers call the movement and fire commands
    and ``step``; renderers read the accessors or ``snapshot`` between steps.
    """

    def __init__(
        self,
        world: SimulationWorld | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        """
        :param world: World to drive; a fresh one is built when omitted
        :type world: SimulationWorld | None

        :param rng: Generator used to pick which alien fires
        :type rng: random.Random | None

        :param seed: Seed for a new generator, used when ``rng`` is omitted
        :type seed: int | None
        """
        self._world = world if world is not None else build_world()
        if rng is not None:
            self._rng = rng
        else:
            self._rng = random.Random(seed)
        self._pipeline: SystemPipeline[TickContext] = SystemPipeline()
        self._pipeline.extend(default_systems())
        self._ctx = TickContext(world=self._world, rng=self._rng)

    def step(self):
        """Advance one tick. Does nothing once the game is over."""
        w = self._world
        if w.game_over:
            return

        w.tick += 1
        self._pipeline.step(self._ctx)

    def move_player_left(self):
        self._world.move_player_left()

    def move_player_right(self):
        self._world.move_player_right()

    def shoot_player_bullet(self):
        self._world.shoot_player_bullet()

    @property
    def player(self) -> PlayerView:
        p = self._world.player
        return PlayerView(p.id, p.position.x, p.position.y, p.exploding)

    @property
    def aliens(self) -> tuple[EntityView, ...]:
        return tuple(view_of(a) for a in self._world.aliens)

    @property
    def player_bullets(self) -> tuple[EntityView, ...]:
        return tuple(view_of(b) for b in self._world.player_bullets)

    @property
    def alien_bullets(self) -> tuple[EntityView, ...]:
        return tuple(view_of(b) for b in self._world.alien_bullets)

    @property
    def score(self) -> int:
        return self._world.score

    @property
    def lives(self) -> int:
        return self._world.lives

    @property
    def game_over(self) -> bool:
        return self._world.game_over

    @property
    def end_message(self) -> str:
        return self._world.end_message

    @property
    def formation_speed(self) -> float:
        return self._world.formation_speed

    @property
    def formation_direction(self) -> int:
        return self._world.formation_direction

    @property
    def tick(self) -> int:
        return self._world.tick

    def snapshot(self) -> SimulationSnapshot:
        return self._world.snapshot()
