"""
Pygame driver and renderer for the invaders simulation.
"""

from __future__ import annotations

from dataclasses import dataclass

import pygame
from mini_arcade_core.spaces.geometry.bounds import Size2D

from invaders_sim.constants import FPS, WINDOW_SIZE
from invaders_sim.entities import Alien, Bullet, Player
from invaders_sim.simulation import Simulation
from invaders_sim.utils import configure_logging, logger
from invaders_sim.world import SimulationSnapshot


@dataclass(frozen=True)
class InputState:
    """
    Held directions plus a one-shot fire pulse for a single tick.
    """

    left: bool = False
    right: bool = False
    fire: bool = False


def apply_input(simulation: Simulation, inputs: InputState):
    """
    Forward one tick of input to the simulation.

    :param simulation: Simulation to drive
    :type simulation: Simulation

    :param inputs: Input gathered for this tick
    :type inputs: InputState
    """
    if inputs.left:
        simulation.move_player_left()
    if inputs.right:
        simulation.move_player_right()
    if inputs.fire:
        simulation.shoot_player_bullet()


def centered_rect(x: float, y: float, size: Size2D) -> pygame.Rect:
    w, h = size.to_tuple()
    return pygame.Rect(int(x - w / 2), int(y - h / 2), int(w), int(h))


class Renderer:
    """
    Draws a snapshot. Owns no game state.
    """

    def __init__(self, settings: dict):
        colors = settings["renderer"]
        self._background = colors["background_color"]
        self._player_color = colors["player_color"]
        self._exploding_color = colors["exploding_color"]
        self._alien_color = colors["alien_color"]
        self._bullet_color = colors["bullet_color"]
        self._text_color = colors["text_color"]
        self._font = pygame.font.Font(None, settings["font_size"])

    def draw(self, surface: pygame.Surface, snapshot: SimulationSnapshot):
        surface.fill(self._background)

        p = snapshot.player
        color = self._exploding_color if p.exploding else self._player_color
        pygame.draw.rect(surface, color, centered_rect(p.x, p.y, Player.size))

        for a in snapshot.aliens:
            pygame.draw.rect(
                surface, self._alien_color, centered_rect(a.x, a.y, Alien.size)
            )

        for b in snapshot.player_bullets + snapshot.alien_bullets:
            pygame.draw.rect(
                surface, self._bullet_color, centered_rect(b.x, b.y, Bullet.size)
            )

        hud = self._font.render(
            f"Score: {snapshot.score}   Lives: {snapshot.lives}",
            True,
            self._text_color,
        )
        surface.blit(hud, (10, 10))

        if snapshot.game_over:
            message = self._font.render(
                f"{snapshot.end_message}  (ENTER to play again)",
                True,
                self._text_color,
            )
            surface.blit(
                message, message.get_rect(center=surface.get_rect().center)
            )


class InvadersApp:
    """
    Fixed-cadence loop: gather input, step, draw.
    """

    _clock = pygame.time.Clock()

    def __init__(self, settings: dict, seed: int | None = None):
        self._settings = settings
        self._seed = seed
        self._carry_on = True
        self._fire_pressed = False
        self.simulation = Simulation(seed=seed)

    def _set_screen(self) -> pygame.Surface:
        window = self._settings["window"]
        logger.debug("Setting screen")
        try:
            screen = pygame.display.set_mode((window["width"], window["height"]))
        except pygame.error as e:
            logger.error(f"Failed to open window: {e}")
            raise
        pygame.display.set_caption(window["title"])
        return screen

    def new_game(self):
        logger.info("Starting a new game")
        self.simulation = Simulation(seed=self._seed)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._carry_on = False
                elif event.key == pygame.K_SPACE:
                    self._fire_pressed = True
                elif event.key == pygame.K_RETURN and self.simulation.game_over:
                    self.new_game()

    def read_input(self) -> InputState:
        keys = pygame.key.get_pressed()
        inputs = InputState(
            left=bool(keys[pygame.K_LEFT]),
            right=bool(keys[pygame.K_RIGHT]),
            fire=self._fire_pressed,
        )
        self._fire_pressed = False
        return inputs

    def run(self):
        pygame.init()
        screen = self._set_screen()
        renderer = Renderer(self._settings)
        logger.info(f"Running at {self._settings['fps']} FPS")

        was_over = False
        while self._carry_on:
            self._clock.tick(self._settings["fps"])
            self.handle_events()
            apply_input(self.simulation, self.read_input())
            self.simulation.step()

            if self.simulation.game_over and not was_over:
                logger.info(
                    f"{self.simulation.end_message} "
                    f"Score: {self.simulation.score}"
                )
            was_over = self.simulation.game_over

            renderer.draw(screen, self.simulation.snapshot())
            pygame.display.flip()

        pygame.quit()


def default_settings() -> dict:
    """
    Window and renderer settings.

    :return: settings dictionary
    :rtype: dict
    """
    w_width, w_height = WINDOW_SIZE
    return {
        "window": {
            "width": w_width,
            "height": w_height,
            "title": "Invaders Sim (Pygame)",
        },
        "renderer": {
            "background_color": (30, 30, 30),
            "player_color": (80, 220, 80),
            "exploding_color": (230, 60, 60),
            "alien_color": (240, 240, 240),
            "bullet_color": (250, 220, 90),
            "text_color": (255, 255, 255),
        },
        "font_size": 28,
        "fps": FPS,
    }


def run(seed: int | None = None):
    """
    Main entry point.

    :param seed: Seed for alien fire, for a reproducible game
    :type seed: int | None
    """
    configure_logging()
    settings_data = default_settings()
    logger.info("Starting Invaders Sim...")
    logger.info(settings_data)
    InvadersApp(settings_data, seed=seed).run()


if __name__ == "__main__":
    run()
