"""Shared fixtures for the invaders simulation tests."""

from __future__ import annotations

import pytest

from invaders_sim.simulation import Simulation
from invaders_sim.world import SimulationWorld, build_world


@pytest.fixture
def world() -> SimulationWorld:
    """A full starting world: player plus the 5x11 grid."""
    return build_world()


@pytest.fixture
def sim(world: SimulationWorld) -> Simulation:
    return Simulation(world=world, seed=1234)


@pytest.fixture
def staged_world() -> SimulationWorld:
    """Player plus one alien parked top-left, out of everyone's way.

    Keeps the formation non-empty so a step does not end in a win.
    """
    w = build_world(with_aliens=False)
    w.spawn_alien(100.0, 100.0)
    return w


@pytest.fixture
def staged_sim(staged_world: SimulationWorld) -> Simulation:
    return Simulation(world=staged_world, seed=1234)
