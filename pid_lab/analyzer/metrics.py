"""
Performance metrics for simulation runs.
Uses numpy for vectorized calculations over the recorded trajectories.
"""

from typing import Dict
from dataclasses import dataclass, asdict
import numpy as np

from pid_lab.simulation.simulator import SimulationResult
from pid_lab.utils.math_utils import sign_changes

SETTLING_TOLERANCE = 0.5


@dataclass
class ResponseMetrics:
    """Summary indicators of one run."""
    settling_time: float
    max_overshoot: float
    final_error: float
    oscillations: int
    mean_absolute_error: float
    total_variation: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def tracking_error(result: SimulationResult) -> np.ndarray:
    """
    Error trace of a run.

    PID runs carry their recorded setpoint-minus-output error. Baseline runs
    record none, so output minus setpoint is derived from the trajectories.
    """
    if result.error is not None:
        return result.error
    return result.temp - result.setpoint


def max_overshoot(result: SimulationResult, clamp: bool = False) -> float:
    """
    Largest excursion of the output above the setpoint.

    Args:
        result: Simulation run
        clamp: Floor the value at 0, as used when scoring against the baseline
    """
    overshoot = float(np.max(result.temp - result.setpoint))
    return max(0.0, overshoot) if clamp else overshoot


def final_error(result: SimulationResult) -> float:
    """Absolute distance from the setpoint at the last sample."""
    return float(abs(result.temp[-1] - result.setpoint[-1]))


def settling_time(result: SimulationResult, tolerance: float = SETTLING_TOLERANCE) -> float:
    """
    First time the output comes within tolerance of the setpoint.

    The band only has to be touched once. Runs that never reach it report
    their full duration.
    """
    inside = np.abs(result.temp - result.setpoint) < tolerance
    if not np.any(inside):
        return result.duration
    return float(result.t[np.argmax(inside)])


def oscillation_count(result: SimulationResult) -> int:
    """Full oscillations: direction reversals of the output, halved."""
    return sign_changes(result.temp) // 2


def mean_absolute_error(result: SimulationResult) -> float:
    return float(np.mean(np.abs(tracking_error(result))))


def total_variation(result: SimulationResult) -> float:
    """Sum of absolute control changes between samples; lower is smoother."""
    return float(np.sum(np.abs(np.diff(result.control))))


def calculate_metrics(result: SimulationResult, clamp_overshoot: bool = False) -> ResponseMetrics:
    """
    Calculate all indicators for one run.

    Args:
        result: Simulation run
        clamp_overshoot: Report overshoot floored at 0, as shown to learners

    Raises:
        ValueError: If the run has fewer than 2 samples
    """
    if result.steps < 2:
        raise ValueError("Need at least 2 data points")

    return ResponseMetrics(
        settling_time=settling_time(result),
        max_overshoot=max_overshoot(result, clamp=clamp_overshoot),
        final_error=final_error(result),
        oscillations=oscillation_count(result),
        mean_absolute_error=mean_absolute_error(result),
        total_variation=total_variation(result),
    )
