"""
PID Learning Lab
================

Closed-loop simulation of an underdamped second-order plant under a tunable
PID controller and a bang-bang baseline, with metrics for comparing them:
- Fixed-step simulation engine returning full trajectories
- Named setpoint scenarios and gain sweeps
- Settling, overshoot, error, oscillation and smoothness metrics
- Scorecard against the baseline and tuning hints
"""

from pid_lab.core.gains import PIDGains, PIDPresets
from pid_lab.core.controllers import ControllerKind
from pid_lab.simulation.simulator import (
    SimulationResult,
    simulate,
    simulate_pid,
    simulate_baseline,
)
from pid_lab.simulation.scenarios import SimulationScenario, ScenarioLibrary
from pid_lab.analyzer.metrics import ResponseMetrics, calculate_metrics
from pid_lab.analyzer.scorecard import Scorecard

__version__ = "1.0.0"
__all__ = [
    "PIDGains",
    "PIDPresets",
    "ControllerKind",
    "SimulationResult",
    "simulate",
    "simulate_pid",
    "simulate_baseline",
    "SimulationScenario",
    "ScenarioLibrary",
    "ResponseMetrics",
    "calculate_metrics",
    "Scorecard",
]
