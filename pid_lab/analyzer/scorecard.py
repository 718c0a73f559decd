"""
Scorecard of a PID run against the bang-bang baseline.

Three criteria are scored, each won when the PID value is strictly lower:
average tracking error, overshoot and control smoothness.
"""

from typing import Any, Dict
from dataclasses import dataclass
from enum import Enum

from pid_lab.analyzer.metrics import max_overshoot, mean_absolute_error, total_variation
from pid_lab.simulation.simulator import SimulationResult


class Verdict(Enum):
    """Overall rating by number of criteria won."""
    NEEDS_WORK = 0
    GOOD_START = 1
    GREAT = 2
    PERFECT = 3

    @property
    def headline(self) -> str:
        return _HEADLINES[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_HEADLINES = {
    Verdict.PERFECT: "PERFECT!",
    Verdict.GREAT: "GREAT!",
    Verdict.GOOD_START: "GOOD START!",
    Verdict.NEEDS_WORK: "NEEDS WORK",
}

_MESSAGES = {
    Verdict.PERFECT: "You beat baseline on ALL metrics! Expert-level tuning!",
    Verdict.GREAT: "2/3 metrics better. Fine-tune for perfection!",
    Verdict.GOOD_START: "1/3 metrics improved. Keep adjusting!",
    Verdict.NEEDS_WORK: "Try: Increase P for speed, add I for accuracy, add D for smoothness.",
}


def _percent_improvement(pid: float, base: float) -> float:
    if base == 0:
        return 0.0
    return (base - pid) / base * 100


@dataclass(frozen=True)
class MetricComparison:
    """One criterion evaluated for both controllers."""
    pid: float
    base: float
    improvement: float  # percent or absolute, see Scorecard

    @property
    def won(self) -> bool:
        return self.pid < self.base


@dataclass(frozen=True)
class Scorecard:
    """
    PID versus baseline on the same scenario.
    
    Error and smoothness improvements are percentages of the baseline value;
    overshoot improvement is absolute.
    """
    mae: MetricComparison
    overshoot: MetricComparison
    smoothness: MetricComparison

    @classmethod
    def compare(cls, pid_result: SimulationResult, baseline_result: SimulationResult) -> 'Scorecard':
        """
        Score a PID run against a baseline run.

        Each run is evaluated on its own; neither result is modified.
        """
        mae_pid = mean_absolute_error(pid_result)
        mae_base = mean_absolute_error(baseline_result)

        overshoot_pid = max_overshoot(pid_result, clamp=True)
        overshoot_base = max_overshoot(baseline_result, clamp=True)

        tv_pid = total_variation(pid_result)
        tv_base = total_variation(baseline_result)

        return cls(
            mae=MetricComparison(mae_pid, mae_base, _percent_improvement(mae_pid, mae_base)),
            overshoot=MetricComparison(overshoot_pid, overshoot_base, overshoot_base - overshoot_pid),
            smoothness=MetricComparison(tv_pid, tv_base, _percent_improvement(tv_pid, tv_base)),
        )

    @property
    def wins(self) -> int:
        return sum(m.won for m in (self.mae, self.overshoot, self.smoothness))

    @property
    def verdict(self) -> Verdict:
        return Verdict(self.wins)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {
            name: {'pid': m.pid, 'base': m.base, 'improvement': m.improvement, 'won': m.won}
            for name, m in (('mae', self.mae), ('overshoot', self.overshoot), ('smoothness', self.smoothness))
        }
