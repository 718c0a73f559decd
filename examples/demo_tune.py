#!/usr/bin/env python3
"""
Tune Demo

Demonstrates:
- PID against the bang-bang baseline on the tune scenarios
- Scorecard on error, overshoot and smoothness
- Response and control effort charts
"""

import sys
import logging
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pid_lab.core.gains import PIDPresets
from pid_lab.simulation.scenarios import ScenarioLibrary
from pid_lab.simulation.comparison import run_comparison
from pid_lab.analyzer.scorecard import Scorecard
from pid_lab.analyzer.plots import ComparisonPlotter


def main():
    print("=" * 60)
    print("PID Learning Lab: Beat the Baseline")
    print("=" * 60)
    
    plotter = ComparisonPlotter()
    
    for gains in (PIDPresets.tune_default(), PIDPresets.well_damped()):
        for name, factory in ScenarioLibrary.tune_scenarios().items():
            scenario = factory()
            pid, base = run_comparison(gains, scenario)
            card = Scorecard.compare(pid, base)
            
            print(f"\n{scenario.description} with {gains}")
            print(f"  Avg Error:     {card.mae.pid:6.2f} vs {card.mae.base:6.2f} "
                  f"({card.mae.improvement:+.0f}%)")
            print(f"  Max Overshoot: {card.overshoot.pid:6.2f} vs {card.overshoot.base:6.2f} "
                  f"({card.overshoot.improvement:+.2f})")
            print(f"  Smoothness:    {card.smoothness.pid:6.0f} vs {card.smoothness.base:6.0f} "
                  f"({card.smoothness.improvement:+.0f}%)")
            print(f"  {card.verdict.headline} {card.verdict.message}")
    
    # Charts for the last scenario
    _, high = scenario.setpoint_range()
    plotter.plot_response(
        [pid, base],
        ylim=(scenario.initial_value - 2, max(high, float(base.temp.max())) + 2),
        show_tolerance_band=True
    )
    plotter.plot_control([pid, base])
    
    print("\nClose plot windows to exit.")
    ComparisonPlotter.show()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    main()
