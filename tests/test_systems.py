"""Unit tests for the individual tick systems."""

from __future__ import annotations

import random

import pytest
from mini_arcade_core.scenes.systems import SystemPipeline

from invaders_sim.constants import WIN_MESSAGE
from invaders_sim.entities import Faction
from invaders_sim.systems import (
    AlienFireSystem,
    AlienFormationSystem,
    BulletAlienCollisionSystem,
    BulletMoveSystem,
    BulletPlayerCollisionSystem,
    PlayerExplosionSystem,
    TickContext,
    default_systems,
)
from invaders_sim.world import build_world

pytestmark = pytest.mark.unit


@pytest.fixture
def empty_world():
    return build_world(with_aliens=False)


@pytest.fixture
def ctx(empty_world):
    return TickContext(world=empty_world, rng=random.Random(0))


class TestPipeline:
    def test_phase_order(self):
        pipeline = SystemPipeline()
        pipeline.extend(reversed(default_systems()))
        names = [s.name for s in pipeline.systems]
        assert names == [
            "player_explosion",
            "player_bullet_move",
            "alien_bullet_move",
            "alien_formation",
            "bullet_alien_collision",
            "bullet_player_collision",
            "alien_invasion",
            "alien_fire",
        ]

    def test_orders_unique(self):
        orders = [s.order for s in default_systems()]
        assert len(set(orders)) == len(orders)


class TestPlayerExplosionSystem:
    def test_normal_player_untouched(self, ctx):
        PlayerExplosionSystem().step(ctx)
        assert ctx.world.player.exploding is False
        assert ctx.world.lives == 3

    def test_counts_down(self, ctx):
        ctx.world.player_hit()
        PlayerExplosionSystem().step(ctx)
        assert ctx.world.player.explode_ticks == 12
        assert ctx.world.player.exploding is True


class TestBulletMoveSystem:
    def test_only_moves_own_faction(self, ctx):
        ctx.world.spawn_bullet(Faction.PLAYER, 10.0, 300.0)
        ctx.world.spawn_bullet(Faction.ALIEN, 20.0, 300.0)
        BulletMoveSystem(Faction.ALIEN).step(ctx)
        assert ctx.world.player_bullets[0].position.y == 300.0
        assert ctx.world.alien_bullets[0].position.y == 305.0

    def test_keeps_insertion_order(self, ctx):
        first = ctx.world.spawn_bullet(Faction.PLAYER, 10.0, 300.0)
        ctx.world.spawn_bullet(Faction.PLAYER, 10.0, 2.0)
        third = ctx.world.spawn_bullet(Faction.PLAYER, 10.0, 200.0)
        BulletMoveSystem(Faction.PLAYER).step(ctx)
        assert ctx.world.player_bullets == [first, third]


class TestAlienFormationSystem:
    def test_no_aliens_no_bounce(self, ctx):
        AlienFormationSystem().step(ctx)
        assert ctx.world.formation_speed == 2.0

    def test_speed_never_above_cap(self, ctx):
        ctx.world.formation_speed = 8.0
        ctx.world.spawn_alien(775.0, 100.0)
        AlienFormationSystem().step(ctx)
        assert ctx.world.formation_direction == -1
        assert ctx.world.formation_speed == 8.0


class TestCollisionSystems:
    def test_empty_formation_is_a_win(self, ctx):
        BulletAlienCollisionSystem().step(ctx)
        assert ctx.world.game_over is True

    def test_alien_bullet_away_from_player_kept(self, ctx):
        ctx.world.spawn_bullet(Faction.ALIEN, 100.0, 550.0)
        BulletPlayerCollisionSystem().step(ctx)
        assert len(ctx.world.alien_bullets) == 1
        assert ctx.world.player.exploding is False

    def test_player_bullet_ignores_player(self, ctx):
        ctx.world.spawn_bullet(Faction.PLAYER, 400.0, 550.0)
        BulletPlayerCollisionSystem().step(ctx)
        assert ctx.world.player.exploding is False


class TestAlienFireSystem:
    def test_no_aliens_skips(self, ctx):
        ctx.world.alien_fire_ticks = 29
        AlienFireSystem().step(ctx)
        assert ctx.world.alien_fire_ticks == 0
        assert ctx.world.alien_bullets == []

    def test_counter_increments(self, ctx):
        AlienFireSystem().step(ctx)
        assert ctx.world.alien_fire_ticks == 1

    def test_fires_from_chosen_alien(self, ctx):
        alien = ctx.world.spawn_alien(250.0, 120.0)
        ctx.world.alien_fire_ticks = 29
        AlienFireSystem().step(ctx)
        (bullet,) = ctx.world.alien_bullets
        assert bullet.position.to_tuple() == (250.0, 120.0)
        assert bullet.faction is Faction.ALIEN
        assert bullet.id != alien.id


class TestGameOverGate:
    def test_every_phase_enabled_while_playing(self, ctx):
        assert all(s.enabled(ctx) for s in default_systems())

    def test_every_phase_disabled_after_game_over(self, ctx):
        ctx.world.end_game(WIN_MESSAGE)
        assert not any(s.enabled(ctx) for s in default_systems())

    def test_win_skips_later_phases_of_the_tick(self, empty_world):
        empty_world.spawn_bullet(Faction.ALIEN, 200.0, 300.0)
        empty_world.alien_fire_ticks = 29
        ctx = TickContext(world=empty_world, rng=random.Random(0))
        pipeline = SystemPipeline()
        pipeline.extend(default_systems())

        pipeline.step(ctx)

        assert empty_world.game_over is True
        assert empty_world.end_message == WIN_MESSAGE
        # bullets moved before the win; the fire counter after it did not tick
        assert empty_world.alien_bullets[0].position.y == 305.0
        assert empty_world.alien_fire_ticks == 29
