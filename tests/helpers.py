"""Shared builders for hand-made simulation results."""

import numpy as np

from pid_lab.core.controllers import ControllerKind
from pid_lab.simulation.simulator import DT, SimulationResult


def make_result(temp, setpoint, control=None, error=None, duration=None, name=""):
    """Build a result from literal traces sampled every DT."""
    temp = np.asarray(temp, dtype=float)
    n = len(temp)
    if np.isscalar(setpoint):
        setpoint = np.full(n, float(setpoint))
    return SimulationResult(
        t=np.arange(n) * DT,
        temp=temp,
        control=np.zeros(n) if control is None else np.asarray(control, dtype=float),
        error=None if error is None else np.asarray(error, dtype=float),
        setpoint=np.asarray(setpoint, dtype=float),
        controller=ControllerKind.PID if error is not None else ControllerKind.BASELINE,
        duration=n * DT if duration is None else duration,
        name=name,
    )
