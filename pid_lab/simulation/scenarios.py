"""
Setpoint profiles and the lab's named test scenarios.
"""

from typing import Callable, Dict, List, Sequence, Tuple
from dataclasses import dataclass
import bisect

from pid_lab.utils.validators import ValidationError, validate_callable, validate_positive


def constant_profile(value: float) -> Callable[[float], float]:
    """Profile that holds one target for the whole run."""
    def profile(t: float) -> float:
        return value
    return profile


def step_profile(levels: Sequence[float], change_times: Sequence[float]) -> Callable[[float], float]:
    """
    Piecewise-constant profile.

    levels[0] is active before change_times[0], levels[k] from
    change_times[k-1] up to (not including) change_times[k].

    Args:
        levels: Target values, one more than change_times
        change_times: Strictly increasing switch times in seconds

    Returns:
        Function mapping time to target value
    """
    levels = [float(v) for v in levels]
    change_times = [float(t) for t in change_times]

    if len(levels) != len(change_times) + 1:
        raise ValidationError(
            f"step_profile needs one more level than change times, "
            f"got {len(levels)} levels and {len(change_times)} times"
        )
    if any(b <= a for a, b in zip(change_times, change_times[1:])):
        raise ValidationError(f"change_times must be strictly increasing, got {change_times}")

    def profile(t: float) -> float:
        return levels[bisect.bisect_right(change_times, t)]
    return profile


@dataclass
class SimulationScenario:
    """
    A complete lab scenario: target profile, horizon and starting point.
    """

    name: str
    duration: float
    setpoint_function: Callable[[float], float]
    initial_value: float = 18.0
    description: str = ""

    def __post_init__(self):
        validate_positive(self.duration, "duration")
        validate_callable(self.setpoint_function, "setpoint_function")

    def get_setpoint(self, t: float) -> float:
        """Target value at time t."""
        return self.setpoint_function(t)

    def setpoint_range(self, dt: float = 0.05) -> Tuple[float, float]:
        """Lowest and highest target over the scenario, sampled every dt."""
        n = int(self.duration / dt)
        values = [self.setpoint_function(i * dt) for i in range(max(n, 1))]
        return min(values), max(values)


class ScenarioLibrary:
    """Pre-defined lab scenarios."""

    INITIAL_VALUE = 18.0

    # Learn challenges
    @staticmethod
    def constant() -> SimulationScenario:
        """Easy: constant target."""
        return SimulationScenario(
            name="Constant",
            duration=50.0,
            setpoint_function=constant_profile(22.0),
            initial_value=ScenarioLibrary.INITIAL_VALUE,
            description="Easy: Constant target"
        )

    @staticmethod
    def changing() -> SimulationScenario:
        """Hard: target moves once mid-run."""
        return SimulationScenario(
            name="Changing",
            duration=50.0,
            setpoint_function=step_profile([22.0, 24.0], [25.0]),
            initial_value=ScenarioLibrary.INITIAL_VALUE,
            description="Hard: Changing target"
        )

    @staticmethod
    def multi_step() -> SimulationScenario:
        """Expert: up, further up, then down."""
        return SimulationScenario(
            name="Multi-step",
            duration=50.0,
            setpoint_function=step_profile([22.0, 25.0, 21.0], [15.0, 30.0]),
            initial_value=ScenarioLibrary.INITIAL_VALUE,
            description="Expert: Multi-step"
        )

    # Tune scenarios
    @staticmethod
    def single_step() -> SimulationScenario:
        return SimulationScenario(
            name="Single Step",
            duration=30.0,
            setpoint_function=constant_profile(22.0),
            initial_value=ScenarioLibrary.INITIAL_VALUE,
            description="Single Step: 18→22°C"
        )

    @staticmethod
    def double_step() -> SimulationScenario:
        return SimulationScenario(
            name="Double Step",
            duration=40.0,
            setpoint_function=step_profile([22.0, 25.0], [20.0]),
            initial_value=ScenarioLibrary.INITIAL_VALUE,
            description="Double Step: 18→22→25°C"
        )

    @staticmethod
    def triple_step() -> SimulationScenario:
        return SimulationScenario(
            name="Triple Step",
            duration=50.0,
            setpoint_function=step_profile([22.0, 25.0, 20.0], [15.0, 32.0]),
            initial_value=ScenarioLibrary.INITIAL_VALUE,
            description="Triple Step: 18→22→25→20°C"
        )

    @staticmethod
    def custom(
        name: str,
        duration: float,
        setpoint_func: Callable[[float], float],
        initial_value: float = 18.0
    ) -> SimulationScenario:
        """Create a scenario from any total time -> target function."""
        return SimulationScenario(
            name=name,
            duration=duration,
            setpoint_function=setpoint_func,
            initial_value=initial_value
        )

    @classmethod
    def learn_challenges(cls) -> Dict[str, Callable[[], SimulationScenario]]:
        return {
            'constant': cls.constant,
            'changing': cls.changing,
            'multi_step': cls.multi_step,
        }

    @classmethod
    def tune_scenarios(cls) -> Dict[str, Callable[[], SimulationScenario]]:
        return {
            'single_step': cls.single_step,
            'double_step': cls.double_step,
            'triple_step': cls.triple_step,
        }

    @classmethod
    def names(cls) -> List[str]:
        return list(cls.learn_challenges()) + list(cls.tune_scenarios())

    @classmethod
    def get(cls, name: str) -> SimulationScenario:
        """
        Look up a named scenario.

        Raises:
            KeyError: If the name is unknown
        """
        factories = {**cls.learn_challenges(), **cls.tune_scenarios()}
        try:
            return factories[name]()
        except KeyError:
            raise KeyError(f"Unknown scenario {name!r}, expected one of {sorted(factories)}") from None
