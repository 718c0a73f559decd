#!/usr/bin/env python3
"""
Learn Demo

Demonstrates:
- Building a controller up from P to PI to PID
- Gain sweeps showing what each term does
- Tuning hints from the run metrics
"""

import sys
import logging
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pid_lab.core.gains import PIDGains
from pid_lab.simulation.scenarios import ScenarioLibrary
from pid_lab.simulation.comparison import (
    CompareMode, SWEEP_TITLES, run_pid, run_gain_sweep, sweep_description
)
from pid_lab.analyzer.metrics import calculate_metrics
from pid_lab.analyzer.hints import tuning_hints, is_well_tuned
from pid_lab.analyzer.plots import ComparisonPlotter


def report(gains: PIDGains, scenario) -> None:
    result = run_pid(gains, scenario, name="Your PID")
    metrics = calculate_metrics(result, clamp_overshoot=True)
    
    print(f"\n{gains}")
    print(f"  Settling Time: {metrics.settling_time:.1f}s")
    print(f"  Max Overshoot: {metrics.max_overshoot:.2f}")
    print(f"  Final Error:   {metrics.final_error:.2f}")
    print(f"  Oscillations:  {metrics.oscillations}")
    
    hints = tuning_hints(gains, metrics)
    for hint in hints:
        print(f"  Hint: {hint}")
    if is_well_tuned(gains, metrics):
        print("  Well tuned! Fast, accurate and smooth.")


def main():
    print("=" * 60)
    print("PID Learning Lab: Build Your PID")
    print("=" * 60)
    
    scenario = ScenarioLibrary.constant()
    print(f"\nChallenge: {scenario.description} ({scenario.duration:.0f}s)")
    
    # P -> PI -> PID
    for gains in (PIDGains(), PIDGains(kp=3.0), PIDGains(kp=3.0, ki=0.5), PIDGains(kp=6.0, ki=0.8, kd=4.5)):
        report(gains, scenario)
    
    # Sweeps
    plotter = ComparisonPlotter()
    current = PIDGains(kp=3.0, ki=0.3, kd=2.0)
    _, high = scenario.setpoint_range()
    
    for mode in CompareMode:
        runs = run_gain_sweep(mode, current, scenario)
        caption = sweep_description(mode, current)
        print(f"\n{SWEEP_TITLES[mode]} {caption}")
        for run in runs:
            metrics = calculate_metrics(run.result, clamp_overshoot=True)
            marker = "*" if run.highlighted else " "
            print(f"  {marker} {run.label:8s} overshoot={metrics.max_overshoot:6.2f} "
                  f"final error={metrics.final_error:5.2f}")
        
        plotter.plot_response(
            [run.result for run in runs],
            title=SWEEP_TITLES[mode],
            ylim=(scenario.initial_value - 2, high + 6),
            highlighted=[run.highlighted for run in runs]
        )
    
    print("\nClose plot windows to exit.")
    ComparisonPlotter.show()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    main()
