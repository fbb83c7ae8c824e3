"""Gate-time sweeps of the error budget.

Sweeping the gate duration at fixed hardware shows where DRAG stops being
enough and where the decoherence floor takes over.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from pulselab.error_budget import compute_error_budget, estimate_drag_coherent_error
from pulselab.formatting import format_value
from pulselab.reference import DEFAULT_REFERENCE, ReferenceModel
from pulselab.schema import HardwareParams, Regime
from pulselab.validation import MIN_GATE_TIME_NS, ParameterValidationError, validate_params


@dataclass(frozen=True)
class GateTimeSweep:
    """Error budget components evaluated on a grid of gate times."""
    params: HardwareParams
    gate_times_ns: np.ndarray
    floor: np.ndarray
    gaussian: np.ndarray
    drag: np.ndarray
    grape: np.ndarray
    drag_coherent: np.ndarray
    regimes: List[Regime]

    def crossover_gate_time(self) -> Optional[float]:
        """
        Shortest swept gate time from which on every longer swept gate is
        classified drag_sufficient. None if the longest gate is not.
        """
        order = np.argsort(self.gate_times_ns)
        crossover = None
        for idx in order[::-1]:
            if self.regimes[idx] != "drag_sufficient":
                break
            crossover = float(self.gate_times_ns[idx])
        return crossover


def sweep_gate_time(
    params: HardwareParams,
    gate_times_ns: Sequence[float],
    reference: ReferenceModel = DEFAULT_REFERENCE,
) -> GateTimeSweep:
    """
    Evaluate the error budget for each gate time, keeping the rest of
    `params` fixed.

    Raises ParameterValidationError if `params` has validation errors, and
    ValueError for gate times below MIN_GATE_TIME_NS.
    """
    report = validate_params(params)
    if not report.ok:
        raise ParameterValidationError(report)

    gate_times = np.asarray(gate_times_ns, dtype=float)
    if gate_times.ndim != 1 or gate_times.size == 0:
        raise ValueError("gate_times_ns must be a non-empty 1D sequence.")
    if not np.all(np.isfinite(gate_times) & (gate_times >= MIN_GATE_TIME_NS)):
        raise ValueError(f"All gate times must be finite and at least {format_value(MIN_GATE_TIME_NS)} ns.")

    budgets = [compute_error_budget(replace(params, gate_time_ns=float(t)), reference) for t in gate_times]

    return GateTimeSweep(
        params=params,
        gate_times_ns=gate_times,
        floor=np.array([b.decoherence_floor.total for b in budgets]),
        gaussian=np.array([b.estimated_infidelity.gaussian for b in budgets]),
        drag=np.array([b.estimated_infidelity.drag for b in budgets]),
        grape=np.array([b.estimated_infidelity.grape for b in budgets]),
        drag_coherent=np.array(
            [estimate_drag_coherent_error(float(t), params.anharmonicity_mhz, reference) for t in gate_times]
        ),
        regimes=[b.regime for b in budgets],
    )


def plot_sweep(sweep: GateTimeSweep, ax=None, reference: ReferenceModel = DEFAULT_REFERENCE):
    """
    Plot infidelity versus gate time on log-log axes.
    Returns the matplotlib Axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))

    t = sweep.gate_times_ns
    ax.loglog(t, sweep.gaussian, "o-", label="Gaussian")
    ax.loglog(t, sweep.drag, "s-", label="DRAG")
    ax.loglog(t, sweep.grape, "^-", label="GRAPE")
    ax.loglog(t, sweep.floor, "k--", label="Decoherence floor")
    ax.axvline(reference.short_gate_threshold_ns, color="gray", linestyle=":", label="Short-gate threshold")

    p = sweep.params
    ax.set_xlabel("Gate time (ns)")
    ax.set_ylabel("Infidelity (1 - F)")
    ax.set_title(
        f"alpha/2pi = {format_value(p.anharmonicity_mhz)} MHz, "
        f"T1 = {format_value(p.t1_us)} us, T2 = {format_value(p.t2_us)} us"
    )
    ax.legend()
    ax.grid(True, which="both", alpha=0.3)
    return ax
