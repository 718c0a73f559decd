"""
Unit tests for comparison runs and gain sweeps.
"""

import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pid_lab.core.controllers import ControllerKind
from pid_lab.core.gains import PIDGains
from pid_lab.simulation.comparison import (
    CompareMode,
    run_comparison,
    run_gain_sweep,
    sweep_description,
)
from pid_lab.simulation.scenarios import ScenarioLibrary
from pid_lab.simulation.simulator import simulate_pid


class TestRunComparison:
    """Test suite for run_comparison."""
    
    def test_pair(self):
        scenario = ScenarioLibrary.single_step()
        pid, base = run_comparison(PIDGains(2.0, 0.15, 0.0), scenario)
        assert pid.controller is ControllerKind.PID
        assert base.controller is ControllerKind.BASELINE
        assert (pid.name, base.name) == ("PID", "Baseline")
        assert pid.steps == base.steps == 600
        assert np.array_equal(pid.setpoint, base.setpoint)
    
    def test_matches_direct_simulation(self):
        scenario = ScenarioLibrary.double_step()
        pid, _ = run_comparison(PIDGains(2.0, 0.15, 0.0), scenario)
        direct = simulate_pid(2.0, 0.15, 0.0, scenario.setpoint_function, 18.0, 40.0)
        assert np.array_equal(pid.temp, direct.temp)


class TestGainSweep:
    """Test suite for run_gain_sweep."""
    
    def test_p_sweep_keeps_caller_ki_kd(self):
        runs = run_gain_sweep(CompareMode.P, PIDGains(2.4, 0.3, 1.0), ScenarioLibrary.constant())
        assert [r.gains for r in runs] == [
            PIDGains(1.0, 0.3, 1.0), PIDGains(2.5, 0.3, 1.0),
            PIDGains(4.5, 0.3, 1.0), PIDGains(7.0, 0.3, 1.0),
        ]
        assert [r.label for r in runs] == ["Kp=1.0", "Kp=2.5", "Kp=4.5", "Kp=7.0"]
        assert [r.highlighted for r in runs] == [False, True, False, False]
    
    def test_i_sweep_uses_demo_kp(self):
        runs = run_gain_sweep(CompareMode.I, PIDGains(7.0, 0.8, 2.0), ScenarioLibrary.constant())
        assert all(r.gains.kp == 3.0 and r.gains.kd == 2.0 for r in runs)
        assert [r.gains.ki for r in runs] == [0.0, 0.3, 0.8, 1.5]
        assert [r.highlighted for r in runs] == [False, False, True, False]
    
    def test_d_sweep_uses_demo_kp_ki(self):
        runs = run_gain_sweep(CompareMode.D, PIDGains(1.0, 0.0, 4.4), ScenarioLibrary.constant())
        assert all(r.gains.kp == 6.0 and r.gains.ki == 0.8 for r in runs)
        assert [r.gains.kd for r in runs] == [0.0, 2.0, 4.5, 7.0]
        assert [r.highlighted for r in runs] == [False, False, True, False]
    
    def test_nothing_highlighted_far_from_sweep(self):
        runs = run_gain_sweep(CompareMode.P, PIDGains(kp=8.0), ScenarioLibrary.constant())
        assert not any(r.highlighted for r in runs)
    
    def test_results_labelled_and_complete(self):
        scenario = ScenarioLibrary.multi_step()
        runs = run_gain_sweep(CompareMode.D, PIDGains(), scenario)
        assert all(r.result.steps == 1000 for r in runs)
        assert all(r.result.name == r.label for r in runs)
    
    def test_description(self):
        gains = PIDGains(kd=1.0)
        assert sweep_description(CompareMode.P, gains) == ""
        assert sweep_description(CompareMode.I, gains) == "Demo: Kp=3.0, Kd=1.0"
        assert sweep_description(CompareMode.D, gains) == "Demo: Kp=6.0, Ki=0.8"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
