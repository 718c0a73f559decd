"""
Controller strategies for the lab.

Two actuation laws drive the same plant:
- PID: stateful, accumulates integral error and differentiates the error
  by backward difference. Output is saturated at the actuator limits, but
  the integral keeps accumulating while saturated (no anti-windup).
- Baseline: stateless bang-bang law with a deadband around the setpoint.

The simulation loop selects a law by ControllerKind rather than through a
class hierarchy.
"""

from dataclasses import dataclass
from enum import Enum

from pid_lab.core.gains import PIDGains
from pid_lab.utils.math_utils import clamp


# Actuator limits
OUTPUT_MIN = -100.0
OUTPUT_MAX = 100.0

# Baseline bang-bang law
BASELINE_DEADBAND = 1.5
BASELINE_HEAT = 50.0
BASELINE_COOL = -20.0


class ControllerKind(Enum):
    """Controller strategy selection."""
    PID = "pid"
    BASELINE = "baseline"


@dataclass
class PIDState:
    """Per-run PID memory. Create a fresh one for every simulation."""
    integral: float = 0.0
    prev_error: float = 0.0


def pid_step(
    gains: PIDGains,
    state: PIDState,
    error: float,
    index: int,
    dt: float
) -> float:
    """
    Compute one PID actuation and update the controller state.
    
    Args:
        gains: Controller gains
        state: Mutable controller state for this run
        error: Setpoint minus plant output
        index: Step index; the first step (0) has no derivative history
        dt: Timestep in seconds
        
    Returns:
        Actuation clipped to [OUTPUT_MIN, OUTPUT_MAX]
    """
    state.integral += error * dt
    derivative = (error - state.prev_error) / dt if index > 0 else 0.0
    
    output = gains.kp * error + gains.ki * state.integral + gains.kd * derivative
    
    state.prev_error = error
    return clamp(output, OUTPUT_MIN, OUTPUT_MAX)


def baseline_step(measurement: float, setpoint: float) -> float:
    """
    Bang-bang actuation with a deadband of BASELINE_DEADBAND either side.
    
    Heats hard below the band, cools gently above it, idles inside it.
    """
    if measurement < setpoint - BASELINE_DEADBAND:
        return BASELINE_HEAT
    if measurement > setpoint + BASELINE_DEADBAND:
        return BASELINE_COOL
    return 0.0
