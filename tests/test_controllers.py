"""
Unit tests for the PID and baseline actuation laws.
"""

import math
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pid_lab.core.gains import PIDGains
from pid_lab.core.controllers import (
    ControllerKind,
    PIDState,
    pid_step,
    baseline_step,
    OUTPUT_MIN,
    OUTPUT_MAX,
)

DT = 0.05


class TestPIDStep:
    """Test suite for pid_step."""
    
    def test_fresh_state(self):
        state = PIDState()
        assert state.integral == 0.0
        assert state.prev_error == 0.0
    
    def test_proportional_only(self):
        """P term is Kp * error."""
        state = PIDState()
        output = pid_step(PIDGains(kp=2.0), state, 5.0, 0, DT)
        assert output == pytest.approx(10.0)
    
    def test_state_update(self):
        """Integral accumulates error * dt; previous error is remembered."""
        state = PIDState()
        pid_step(PIDGains(kp=1.0), state, 5.0, 0, DT)
        pid_step(PIDGains(kp=1.0), state, 3.0, 1, DT)
        assert state.integral == pytest.approx(0.4)
        assert state.prev_error == 3.0
    
    def test_integral_term(self):
        state = PIDState()
        output = pid_step(PIDGains(ki=2.0), state, 10.0, 0, DT)
        # integral = 0.5, output = 1.0
        assert output == pytest.approx(1.0)
    
    def test_no_derivative_on_first_step(self):
        """First sample has no derivative history."""
        state = PIDState(prev_error=100.0)
        output = pid_step(PIDGains(kd=10.0), state, 5.0, 0, DT)
        assert output == 0.0
    
    def test_backward_difference_derivative(self):
        state = PIDState()
        gains = PIDGains(kd=0.1)
        pid_step(gains, state, 5.0, 0, DT)
        output = pid_step(gains, state, 6.0, 1, DT)
        # (6 - 5) / 0.05 * 0.1 = 2.0
        assert output == pytest.approx(2.0)
    
    def test_output_saturation(self):
        """Output is clipped to the actuator limits."""
        gains = PIDGains(kp=1000.0)
        assert pid_step(gains, PIDState(), 1.0, 0, DT) == OUTPUT_MAX
        assert pid_step(gains, PIDState(), -1.0, 0, DT) == OUTPUT_MIN
    
    def test_integral_winds_up_while_saturated(self):
        """Integral keeps growing while the output sits at the limit."""
        gains = PIDGains(ki=1.0)
        state = PIDState()
        for i in range(100):
            output = pid_step(gains, state, 1000.0, i, DT)
        assert output == OUTPUT_MAX
        assert state.integral == pytest.approx(5000.0)
    
    def test_nan_gain_propagates(self):
        """Non-finite gains give a non-finite output without raising."""
        output = pid_step(PIDGains(kp=float('nan')), PIDState(), 1.0, 0, DT)
        assert math.isnan(output)


class TestBaselineStep:
    """Test suite for the bang-bang baseline."""
    
    def test_heats_below_band(self):
        assert baseline_step(18.0, 22.0) == 50.0
        assert baseline_step(20.4, 22.0) == 50.0
    
    def test_cools_above_band(self):
        assert baseline_step(23.6, 22.0) == -20.0
        assert baseline_step(30.0, 22.0) == -20.0
    
    def test_idle_inside_band(self):
        """Band edges are inside the deadband."""
        assert baseline_step(20.5, 22.0) == 0.0
        assert baseline_step(22.0, 22.0) == 0.0
        assert baseline_step(23.5, 22.0) == 0.0
    
    def test_controller_kinds(self):
        assert {kind.value for kind in ControllerKind} == {"pid", "baseline"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
