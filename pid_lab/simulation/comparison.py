"""
Side-by-side runs used to compare controllers and gain choices.
"""

from typing import List, Tuple
from dataclasses import dataclass
from enum import Enum
import logging

from pid_lab.core.controllers import ControllerKind
from pid_lab.core.gains import PIDGains, PIDPresets
from pid_lab.simulation.scenarios import SimulationScenario
from pid_lab.simulation.simulator import SimulationResult, simulate

logger = logging.getLogger(__name__)


class CompareMode(Enum):
    """Which gain a sweep varies."""
    P = "P"
    I = "I"
    D = "D"


# Swept values, the highlight tolerance against the caller's own gain,
# and a one-line lesson for each mode.
SWEEP_VALUES = {
    CompareMode.P: (1.0, 2.5, 4.5, 7.0),
    CompareMode.I: (0.0, 0.3, 0.8, 1.5),
    CompareMode.D: (0.0, 2.0, 4.5, 7.0),
}

HIGHLIGHT_TOLERANCE = {
    CompareMode.P: 0.3,
    CompareMode.I: 0.05,
    CompareMode.D: 0.3,
}

SWEEP_TITLES = {
    CompareMode.P: "P controls speed & initial overshoot",
    CompareMode.I: "I removes steady-state error (offset from target)",
    CompareMode.D: "D dampens oscillations & reduces overshoot",
}


@dataclass(frozen=True)
class SweepRun:
    """One member of a gain sweep."""
    label: str
    gains: PIDGains
    result: SimulationResult
    highlighted: bool = False


def run_pid(gains: PIDGains, scenario: SimulationScenario, name: str = "PID") -> SimulationResult:
    """Run the PID controller through a scenario."""
    return simulate(
        ControllerKind.PID, gains, scenario.setpoint_function,
        scenario.initial_value, scenario.duration, name=name
    )


def run_baseline(scenario: SimulationScenario, name: str = "Baseline") -> SimulationResult:
    """Run the bang-bang baseline through a scenario."""
    return simulate(
        ControllerKind.BASELINE, None, scenario.setpoint_function,
        scenario.initial_value, scenario.duration, name=name
    )


def run_comparison(
    gains: PIDGains,
    scenario: SimulationScenario
) -> Tuple[SimulationResult, SimulationResult]:
    """
    Run PID and baseline through the same scenario.
    
    Returns:
        (pid_result, baseline_result)
    """
    logger.debug("Comparing %s against baseline on %s", gains, scenario.name)
    return run_pid(gains, scenario), run_baseline(scenario)


def sweep_gains(mode: CompareMode, gains: PIDGains) -> List[Tuple[float, PIDGains]]:
    """
    Gain sets for a sweep.
    
    P sweeps Kp with the caller's Ki and Kd. I sweeps Ki at Kp=3.0 with the
    caller's Kd. D sweeps Kd at Kp=6.0, Ki=0.8.
    """
    values = SWEEP_VALUES[mode]
    if mode is CompareMode.P:
        return [(v, gains.copy(kp=v)) for v in values]
    if mode is CompareMode.I:
        return [(v, PIDGains(PIDPresets.I_DEMO_KP, v, gains.kd)) for v in values]
    return [(v, PIDGains(PIDPresets.D_DEMO_KP, PIDPresets.D_DEMO_KI, v)) for v in values]


def run_gain_sweep(
    mode: CompareMode,
    gains: PIDGains,
    scenario: SimulationScenario
) -> List[SweepRun]:
    """
    Run a family of PID simulations varying one gain.
    
    A run is highlighted when its swept value is close to the caller's own
    value of that gain.
    
    Args:
        mode: Gain to vary
        gains: The caller's current gains
        scenario: Scenario to run every member through
        
    Returns:
        One SweepRun per swept value, in sweep order
    """
    current = {CompareMode.P: gains.kp, CompareMode.I: gains.ki, CompareMode.D: gains.kd}[mode]
    tolerance = HIGHLIGHT_TOLERANCE[mode]
    
    runs = []
    for value, sweep in sweep_gains(mode, gains):
        label = f"K{mode.value.lower()}={value}"
        result = run_pid(sweep, scenario, name=label)
        runs.append(SweepRun(
            label=label,
            gains=sweep,
            result=result,
            highlighted=abs(value - current) < tolerance
        ))
    
    logger.debug("%s sweep on %s: %d runs", mode.value, scenario.name, len(runs))
    return runs


def sweep_description(mode: CompareMode, gains: PIDGains) -> str:
    """Fixed gains a sweep holds, for chart captions."""
    if mode is CompareMode.I:
        return f"Demo: Kp={PIDPresets.I_DEMO_KP}, Kd={gains.kd:.1f}"
    if mode is CompareMode.D:
        return f"Demo: Kp={PIDPresets.D_DEMO_KP}, Ki={PIDPresets.D_DEMO_KI}"
    return ""
