"""
PID gain configuration.
Holds the three tunable gains with serialization and optional caller-side
range checking. The simulation engine accepts any real gains.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional, Tuple
import json

from pid_lab.utils.validators import validate_non_negative, validate_range


# Conventional slider ranges used by the lab front end.
GAIN_RANGES: Dict[str, Tuple[float, float]] = {
    'kp': (0.0, 8.0),
    'ki': (0.0, 2.0),
    'kd': (0.0, 8.0),
}


@dataclass
class PIDGains:
    """
    PID controller gains (Kp, Ki, Kd).
    
    Example:
        >>> gains = PIDGains(kp=3.0, ki=0.5)
        >>> gains.copy(kd=2.0)
        PIDGains(kp=3.0, ki=0.5, kd=2.0)
    """
    
    kp: float = 0.0  # Proportional gain
    ki: float = 0.0  # Integral gain
    kd: float = 0.0  # Derivative gain
    
    def validate(self, ranges: Optional[Dict[str, Tuple[float, float]]] = None) -> 'PIDGains':
        """
        Check the gains before handing them to the engine.
        
        Args:
            ranges: Optional mapping of gain name to inclusive (min, max);
                    without it gains only need to be finite and non-negative
            
        Returns:
            self, for chaining
            
        Raises:
            ValidationError: If any gain is negative, non-finite or out of range
        """
        for name, value in self.to_dict().items():
            if ranges is not None and name in ranges:
                low, high = ranges[name]
                validate_range(value, name, low, high)
            else:
                validate_non_negative(value, name)
        return self
    
    def copy(self, **changes) -> 'PIDGains':
        """Create a copy with optional gain overrides."""
        params = self.to_dict()
        params.update(changes)
        return PIDGains(**params)
    
    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PIDGains':
        """Create from dictionary; missing gains default to 0."""
        return cls(**{k: float(v) for k, v in data.items()})
    
    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)
    
    @classmethod
    def from_json(cls, json_str: str) -> 'PIDGains':
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))
    
    def __str__(self) -> str:
        return f"PIDGains(Kp={self.kp:.2f}, Ki={self.ki:.2f}, Kd={self.kd:.2f})"


class PIDPresets:
    """Starting gains used by the lab."""
    
    # Fixed gains the I and D comparisons hold while sweeping
    I_DEMO_KP = 3.0
    D_DEMO_KP = 6.0
    D_DEMO_KI = 0.8
    
    @staticmethod
    def learn_default() -> PIDGains:
        """Everything off; the learner builds P, then PI, then PID."""
        return PIDGains(kp=0.0, ki=0.0, kd=0.0)
    
    @staticmethod
    def tune_default() -> PIDGains:
        """Sluggish PI starting point for the beat-the-baseline exercise."""
        return PIDGains(kp=2.0, ki=0.15, kd=0.0)
    
    @staticmethod
    def proportional_only() -> PIDGains:
        return PIDGains(kp=3.0)
    
    @staticmethod
    def well_damped() -> PIDGains:
        """Fast, low-overshoot tuning for the lab plant."""
        return PIDGains(kp=6.0, ki=0.8, kd=4.5)
