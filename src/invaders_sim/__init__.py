"""
Invaders Sim: a tick-stepped arcade shooter simulation.
"""

from __future__ import annotations

from invaders_sim.entities import EntityView, Faction, PlayerView
from invaders_sim.simulation import Simulation
from invaders_sim.world import SimulationSnapshot, SimulationWorld, build_world

__all__ = [
    "EntityView",
    "Faction",
    "PlayerView",
    "Simulation",
    "SimulationSnapshot",
    "SimulationWorld",
    "build_world",
]
