"""
Unit tests for tuning hints.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pid_lab.analyzer.hints import (
    tuning_hints,
    is_well_tuned,
    HINT_START_P,
    HINT_MORE_P,
    HINT_ADD_I,
    HINT_ADD_D,
    HINT_OSCILLATIONS,
)
from pid_lab.analyzer.metrics import ResponseMetrics, calculate_metrics
from pid_lab.core.gains import PIDGains
from pid_lab.simulation.simulator import simulate_pid


def metrics(final_error=0.1, max_overshoot=0.5, oscillations=1):
    return ResponseMetrics(
        settling_time=5.0,
        max_overshoot=max_overshoot,
        final_error=final_error,
        oscillations=oscillations,
        mean_absolute_error=0.5,
        total_variation=50.0,
    )


class TestTuningHints:
    """Test suite for tuning_hints."""
    
    def test_start_with_p(self):
        assert tuning_hints(PIDGains(), metrics()) == [HINT_START_P]
    
    def test_more_p(self):
        assert tuning_hints(PIDGains(kp=1.5, ki=0.5, kd=3.0), metrics()) == [HINT_MORE_P]
    
    def test_add_i(self):
        hints = tuning_hints(PIDGains(kp=3.0), metrics(final_error=6.0))
        assert hints == [HINT_ADD_I]
    
    def test_add_d(self):
        hints = tuning_hints(PIDGains(kp=6.0, ki=0.8), metrics(max_overshoot=3.0))
        assert hints == [HINT_ADD_D]
    
    def test_oscillations(self):
        hints = tuning_hints(PIDGains(kp=6.0, ki=0.8, kd=1.5), metrics(oscillations=12))
        assert hints == [HINT_OSCILLATIONS]
    
    def test_order(self):
        hints = tuning_hints(PIDGains(kp=1.0), metrics(final_error=2.0, max_overshoot=3.0, oscillations=20))
        assert hints == [HINT_MORE_P, HINT_ADD_I, HINT_ADD_D, HINT_OSCILLATIONS]
    
    def test_no_hints(self):
        assert tuning_hints(PIDGains(kp=6.0, ki=0.8, kd=4.5), metrics()) == []
    
    def test_p_only_run_asks_for_integral(self):
        gains = PIDGains(kp=3.0)
        result = simulate_pid(gains.kp, gains.ki, gains.kd, lambda t: 22.0, 18.0, 50.0)
        assert HINT_ADD_I in tuning_hints(gains, calculate_metrics(result))


class TestIsWellTuned:
    """Test suite for is_well_tuned."""
    
    def test_well_tuned(self):
        assert is_well_tuned(PIDGains(kp=6.0, ki=0.8, kd=4.5), metrics())
    
    def test_requires_all_terms(self):
        assert not is_well_tuned(PIDGains(kp=6.0, ki=0.8, kd=0.0), metrics())
    
    def test_requires_accuracy(self):
        assert not is_well_tuned(PIDGains(kp=6.0, ki=0.8, kd=4.5), metrics(final_error=0.6))
    
    def test_requires_low_overshoot(self):
        assert not is_well_tuned(PIDGains(kp=6.0, ki=0.8, kd=4.5), metrics(max_overshoot=2.0))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
