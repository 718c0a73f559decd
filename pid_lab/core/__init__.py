"""Controller gains and actuation laws."""

from pid_lab.core.gains import PIDGains, PIDPresets, GAIN_RANGES
from pid_lab.core.controllers import (
    ControllerKind,
    PIDState,
    pid_step,
    baseline_step,
    OUTPUT_MIN,
    OUTPUT_MAX,
    BASELINE_DEADBAND,
    BASELINE_HEAT,
    BASELINE_COOL,
)

__all__ = [
    "PIDGains",
    "PIDPresets",
    "GAIN_RANGES",
    "ControllerKind",
    "PIDState",
    "pid_step",
    "baseline_step",
    "OUTPUT_MIN",
    "OUTPUT_MAX",
    "BASELINE_DEADBAND",
    "BASELINE_HEAT",
    "BASELINE_COOL",
]
