"""Simulation engine, scenarios and comparison runs."""

from pid_lab.simulation.simulator import (
    DT,
    SimulationResult,
    simulate,
    simulate_pid,
    simulate_baseline,
)
from pid_lab.simulation.scenarios import (
    SimulationScenario,
    ScenarioLibrary,
    constant_profile,
    step_profile,
)
from pid_lab.simulation.comparison import (
    CompareMode,
    SweepRun,
    run_pid,
    run_baseline,
    run_comparison,
    run_gain_sweep,
)

__all__ = [
    "DT",
    "SimulationResult",
    "simulate",
    "simulate_pid",
    "simulate_baseline",
    "SimulationScenario",
    "ScenarioLibrary",
    "constant_profile",
    "step_profile",
    "CompareMode",
    "SweepRun",
    "run_pid",
    "run_baseline",
    "run_comparison",
    "run_gain_sweep",
]
