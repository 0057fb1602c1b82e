"""Tests for the pygame driver glue and renderer."""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from invaders_sim.app import InputState, Renderer, apply_input, default_settings
from invaders_sim.simulation import Simulation

pytestmark = pytest.mark.ui


@pytest.fixture
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


class TestApplyInput:
    def test_nothing_held(self):
        sim = Simulation(seed=0)
        before = sim.snapshot()
        apply_input(sim, InputState())
        assert sim.snapshot() == before

    def test_left_and_fire(self):
        sim = Simulation(seed=0)
        x = sim.player.x
        apply_input(sim, InputState(left=True, fire=True))
        assert sim.player.x == x - 5
        assert len(sim.player_bullets) == 1
        assert sim.player_bullets[0].x == x - 5

    def test_both_directions_cancel(self):
        sim = Simulation(seed=0)
        x = sim.player.x
        apply_input(sim, InputState(left=True, right=True))
        assert sim.player.x == x


class TestRenderer:
    def test_draws_player(self, pygame_fonts):
        settings = default_settings()
        surface = pygame.Surface((800, 600))
        sim = Simulation(seed=0)
        Renderer(settings).draw(surface, sim.snapshot())
        p = sim.player
        color = tuple(surface.get_at((int(p.x), int(p.y))))[:3]
        assert color == settings["renderer"]["player_color"]

    def test_draws_end_message_without_error(self, pygame_fonts):
        sim = Simulation(seed=0)
        for _ in range(20000):
            sim.step()
            if sim.game_over:
                break
        surface = pygame.Surface((800, 600))
        Renderer(default_settings()).draw(surface, sim.snapshot())
        assert sim.game_over is True
