"""
Comparison charts for simulation runs.
"""

from typing import Optional, Sequence, Tuple
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from pid_lab.analyzer.metrics import SETTLING_TOLERANCE
from pid_lab.core.controllers import OUTPUT_MIN, OUTPUT_MAX
from pid_lab.simulation.simulator import SimulationResult


class ComparisonPlotter:
    """
    Overlay charts of several runs: plant output against the target, and
    the control effort each controller applied.
    """

    COLORS = ['#2E86AB', '#E53935', '#43A047', '#FB8C00', '#6A1B9A']

    def __init__(self, style: str = 'seaborn-v0_8-whitegrid'):
        """
        Initialize plotter.

        Args:
            style: Matplotlib style to use
        """
        try:
            plt.style.use(style)
        except OSError:
            plt.style.use('default')

    def _color(self, index: int) -> str:
        return self.COLORS[index % len(self.COLORS)]

    def plot_response(
        self,
        runs: Sequence[SimulationResult],
        title: str = "Temperature Tracking",
        ylabel: str = "Temperature (°C)",
        ylim: Optional[Tuple[float, float]] = None,
        show_tolerance_band: bool = False,
        highlighted: Optional[Sequence[bool]] = None,
        figsize: Tuple[int, int] = (10, 5)
    ) -> Figure:
        """
        Plot plant output of each run over the target of the first run.

        Args:
            runs: Results to overlay; empty runs are skipped
            title: Plot title
            ylabel: Y axis label
            ylim: Optional y axis limits
            show_tolerance_band: Shade the settling band around the target
            highlighted: Per-run flags, missing entries count as False;
                highlighted runs are drawn bold
            figsize: Figure size

        Returns:
            Matplotlib Figure
        """
        fig, ax = plt.subplots(figsize=figsize)
        flags = list(highlighted or [])
        flags += [False] * (len(runs) - len(flags))
        pairs = [(r, bold) for r, bold in zip(runs, flags) if not r.is_empty]
        runs = [r for r, _ in pairs]

        for i, (run, bold) in enumerate(pairs):
            ax.plot(run.t, run.temp, '-', color=self._color(i),
                    linewidth=3.0 if bold else 1.5, alpha=1.0 if bold else 0.8,
                    label=run.name or f"Run {i + 1}")

        if runs:
            reference = runs[0]
            ax.plot(reference.t, reference.setpoint, 'k--', linewidth=2, label='Target')
            if show_tolerance_band:
                ax.fill_between(reference.t,
                                reference.setpoint - SETTLING_TOLERANCE,
                                reference.setpoint + SETTLING_TOLERANCE,
                                color='green', alpha=0.1,
                                label=f'±{SETTLING_TOLERANCE} band')

        if ylim is not None:
            ax.set_ylim(*ylim)
        ax.set_xlabel('Time (s)')
        ax.set_ylabel(ylabel)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.legend(loc='lower right')
        ax.grid(True, alpha=0.3)

        plt.tight_layout()
        return fig

    def plot_control(
        self,
        runs: Sequence[SimulationResult],
        title: str = "Control Effort",
        ylabel: str = "Control Signal",
        figsize: Tuple[int, int] = (10, 4)
    ) -> Figure:
        """Plot the applied actuation of each run within the actuator range."""
        fig, ax = plt.subplots(figsize=figsize)

        for i, run in enumerate(r for r in runs if not r.is_empty):
            ax.step(run.t, run.control, where='post', color=self._color(i),
                    linewidth=1.2, label=run.name or f"Run {i + 1}")

        ax.axhline(y=0, color='gray', linestyle=':', alpha=0.5)
        ax.set_ylim(OUTPUT_MIN - 10, OUTPUT_MAX + 10)
        ax.set_xlabel('Time (s)')
        ax.set_ylabel(ylabel)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.legend(loc='upper right')
        ax.grid(True, alpha=0.3)

        plt.tight_layout()
        return fig

    @staticmethod
    def show():
        """Display all open plots."""
        plt.show()

    @staticmethod
    def save(fig: Figure, path: str, dpi: int = 150):
        """Save figure to file."""
        fig.savefig(path, dpi=dpi, bbox_inches='tight')
