"""
Fixed-step closed-loop simulation of the lab plant.

Each call owns its plant and controller state, so runs are independent,
reproducible and safe to execute in parallel.
"""

from typing import Callable, Dict, Optional
from dataclasses import dataclass, replace
import logging
import math
import numpy as np

from pid_lab.core.controllers import ControllerKind, PIDState, pid_step, baseline_step
from pid_lab.core.gains import PIDGains
from pid_lab.plants import second_order
from pid_lab.plants.second_order import PlantState

logger = logging.getLogger(__name__)

DT = 0.05

SetpointProfile = Callable[[float], float]


@dataclass(frozen=True, eq=False)
class SimulationResult:
    """
    Trajectories of one simulation run.

    All arrays are read-only and share the same length. `error` is only
    recorded for PID runs and is None for the baseline.
    """
    t: np.ndarray
    temp: np.ndarray
    control: np.ndarray
    error: Optional[np.ndarray]
    setpoint: np.ndarray

    # Metadata
    controller: ControllerKind = ControllerKind.PID
    duration: float = 0.0
    dt: float = DT
    gains: Optional[PIDGains] = None
    name: str = ""

    @property
    def steps(self) -> int:
        """Number of recorded samples."""
        return len(self.t)

    @property
    def is_empty(self) -> bool:
        return len(self.t) == 0

    def with_name(self, name: str) -> 'SimulationResult':
        """Relabelled copy sharing the same trajectories."""
        return replace(self, name=name)

    def to_dict(self) -> Dict[str, np.ndarray]:
        """Convert to dictionary format."""
        data = {
            't': self.t,
            'temp': self.temp,
            'control': self.control,
            'setpoint': self.setpoint,
        }
        if self.error is not None:
            data['error'] = self.error
        return data


def _step_count(duration: float) -> int:
    if not math.isfinite(duration) or duration <= 0:
        return 0
    return int(math.floor(duration / DT))


def _freeze(values: np.ndarray) -> np.ndarray:
    values.flags.writeable = False
    return values


def simulate(
    kind: ControllerKind,
    gains: Optional[PIDGains],
    setpoint_profile: SetpointProfile,
    initial: float,
    duration: float,
    name: str = ""
) -> SimulationResult:
    """
    Run one closed-loop simulation.

    Each step samples the setpoint, computes the actuation from the current
    plant state, advances the plant and records the new output.

    Args:
        kind: Controller strategy to use
        gains: PID gains (ignored for the baseline)
        setpoint_profile: Function mapping time to target value
        initial: Initial plant output; the plant starts at rest
        duration: Simulated seconds; non-positive gives an empty result
        name: Optional label carried on the result

    Returns:
        SimulationResult with floor(duration / DT) samples
    """
    if kind is ControllerKind.PID and gains is None:
        raise ValueError("PID simulation requires gains")

    n_steps = _step_count(duration)
    logger.debug("Simulating %s for %s s (%d steps), gains=%s", kind.value, duration, n_steps, gains)

    timestamps = np.zeros(n_steps)
    temps = np.zeros(n_steps)
    controls = np.zeros(n_steps)
    setpoints = np.zeros(n_steps)
    errors = np.zeros(n_steps) if kind is ControllerKind.PID else None

    plant = PlantState(float(initial), 0.0)
    pid_state = PIDState()

    for i in range(n_steps):
        t = i * DT
        setpoint = float(setpoint_profile(t))

        if kind is ControllerKind.PID:
            error = setpoint - plant.y
            u = pid_step(gains, pid_state, error, i, DT)
            errors[i] = error
        else:
            u = baseline_step(plant.y, setpoint)

        plant = second_order.step(plant, u, DT)

        timestamps[i] = t
        temps[i] = plant.y
        controls[i] = u
        setpoints[i] = setpoint

    if n_steps:
        logger.debug("Finished %s run: final output %.4f", kind.value, temps[-1])

    return SimulationResult(
        t=_freeze(timestamps),
        temp=_freeze(temps),
        control=_freeze(controls),
        error=_freeze(errors) if errors is not None else None,
        setpoint=_freeze(setpoints),
        controller=kind,
        duration=duration,
        dt=DT,
        gains=gains.copy() if kind is ControllerKind.PID else None,
        name=name
    )


def simulate_pid(
    kp: float,
    ki: float,
    kd: float,
    setpoint_profile: SetpointProfile,
    initial: float,
    duration: float
) -> SimulationResult:
    """
    Simulate the plant under PID control.

    Example:
        >>> result = simulate_pid(3.0, 0.5, 0.0, lambda t: 22.0, 18.0, 50.0)
        >>> result.steps
        1000
    """
    return simulate(
        ControllerKind.PID, PIDGains(kp, ki, kd),
        setpoint_profile, initial, duration
    )


def simulate_baseline(
    setpoint_profile: SetpointProfile,
    initial: float,
    duration: float
) -> SimulationResult:
    """Simulate the plant under the bang-bang baseline (no error trace)."""
    return simulate(ControllerKind.BASELINE, None, setpoint_profile, initial, duration)
