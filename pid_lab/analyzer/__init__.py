"""Metrics, scoring and charts for simulation runs."""

from pid_lab.analyzer.metrics import (
    ResponseMetrics,
    calculate_metrics,
    max_overshoot,
    final_error,
    settling_time,
    oscillation_count,
    mean_absolute_error,
    total_variation,
    tracking_error,
)
from pid_lab.analyzer.scorecard import Scorecard, MetricComparison, Verdict
from pid_lab.analyzer.hints import tuning_hints, is_well_tuned

__all__ = [
    "ResponseMetrics",
    "calculate_metrics",
    "max_overshoot",
    "final_error",
    "settling_time",
    "oscillation_count",
    "mean_absolute_error",
    "total_variation",
    "tracking_error",
    "Scorecard",
    "MetricComparison",
    "Verdict",
    "tuning_hints",
    "is_well_tuned",
]
