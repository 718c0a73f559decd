"""
Second-order plant model.
Transfer function: G(s) = K * wn^2 / (s^2 + 2*zeta*wn*s + wn^2)
"""

from typing import Dict, NamedTuple
import math


# Lab plant: lightly damped so a badly tuned loop overshoots and rings.
NATURAL_FREQUENCY = 0.8
DAMPING_RATIO = 0.15
PROCESS_GAIN = 0.75


class PlantState(NamedTuple):
    """Position and velocity of the plant."""
    y: float
    y_dot: float = 0.0


def step(state: PlantState, control_input: float, dt: float) -> PlantState:
    """
    Advance the plant by one fixed timestep.
    
    State-space form:
        dy/dt     = y_dot
        dy_dot/dt = K*wn^2*u - 2*zeta*wn*y_dot - wn^2*y
    
    Integrated with explicit Euler on the velocity, then the position is
    advanced with the updated velocity.
    
    Args:
        state: Plant state before the step
        control_input: Clipped actuation u
        dt: Timestep in seconds
        
    Returns:
        Plant state after the step
    """
    wn2 = NATURAL_FREQUENCY ** 2
    y_ddot = (
        PROCESS_GAIN * wn2 * control_input
        - 2 * DAMPING_RATIO * NATURAL_FREQUENCY * state.y_dot
        - wn2 * state.y
    )
    y_dot = state.y_dot + y_ddot * dt
    y = state.y + y_dot * dt
    return PlantState(y, y_dot)


def steady_state_output(control_input: float) -> float:
    """Output the plant settles at under a constant input."""
    return PROCESS_GAIN * control_input


def characteristic_times() -> Dict[str, float]:
    """
    Analytical open-loop step response figures of the lab plant.
    
    Returns:
        Dictionary with damped_frequency, peak_time, rise_time,
        settling_time_2pct, settling_time_5pct, overshoot_percent
    """
    zeta = DAMPING_RATIO
    wn = NATURAL_FREQUENCY
    
    wd = wn * math.sqrt(1 - zeta**2)
    return {
        'damped_frequency': wd,
        'peak_time': math.pi / wd,
        'rise_time': (math.pi - math.atan2(math.sqrt(1 - zeta**2), zeta)) / wd,
        'settling_time_2pct': 4 / (zeta * wn),
        'settling_time_5pct': 3 / (zeta * wn),
        'overshoot_percent': 100 * math.exp(-zeta * math.pi / math.sqrt(1 - zeta**2)),
    }
