"""
Tuning hints derived from a run's metrics.
"""

from typing import List

from pid_lab.analyzer.metrics import ResponseMetrics
from pid_lab.core.gains import PIDGains

HINT_START_P = "Start with P! Try Kp=3.0"
HINT_MORE_P = "Increase P for faster response"
HINT_ADD_I = "Add I (Ki~0.5) to eliminate error"
HINT_ADD_D = "Add D (Kd~3.0) to reduce overshoot"
HINT_OSCILLATIONS = "Too many oscillations! Increase D"


def tuning_hints(gains: PIDGains, metrics: ResponseMetrics) -> List[str]:
    """
    Suggest the next gain to adjust, most basic first.

    Args:
        gains: Gains the run used
        metrics: Metrics of that run

    Returns:
        Ordered hint messages; empty when nothing obvious is left to fix
    """
    hints = []
    if gains.kp == 0:
        hints.append(HINT_START_P)
    elif gains.kp < 2.0:
        hints.append(HINT_MORE_P)
    if metrics.final_error > 1.0 and gains.ki < 0.2:
        hints.append(HINT_ADD_I)
    if metrics.max_overshoot > 2.0 and gains.kd < 1.0:
        hints.append(HINT_ADD_D)
    if metrics.oscillations > 10 and gains.kd < 2.0:
        hints.append(HINT_OSCILLATIONS)
    return hints


def is_well_tuned(gains: PIDGains, metrics: ResponseMetrics) -> bool:
    """Full PID in use, no hints left, accurate and with little overshoot."""
    return (
        not tuning_hints(gains, metrics)
        and gains.kp > 0 and gains.ki > 0 and gains.kd > 0
        and metrics.final_error < 0.5
        and metrics.max_overshoot < 2.0
    )
