"""Plant model for the lab simulations."""

from pid_lab.plants.second_order import (
    NATURAL_FREQUENCY,
    DAMPING_RATIO,
    PROCESS_GAIN,
    PlantState,
    step,
    steady_state_output,
    characteristic_times,
)

__all__ = [
    "NATURAL_FREQUENCY",
    "DAMPING_RATIO",
    "PROCESS_GAIN",
    "PlantState",
    "step",
    "steady_state_output",
    "characteristic_times",
]
