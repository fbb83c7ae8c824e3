"""Plain-text rendering of error budgets and robustness estimates."""

from typing import Sequence

from pulselab.reference import DEFAULT_REFERENCE, ReferenceModel
from pulselab.schema import ErrorBudget, RobustnessEstimate


def format_value(value: float) -> str:
    """Echo an input number at full precision, dropping a trailing ".0"."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_error_budget(budget: ErrorBudget) -> str:
    """
    Format an error budget as a readable text block.
    """
    p = budget.params
    floor = budget.decoherence_floor
    infidelity = budget.estimated_infidelity
    lines = [
        "=== Error Budget Analysis ===",
        f"Hardware: alpha/2pi = {format_value(p.anharmonicity_mhz)} MHz, "
        f"T1 = {format_value(p.t1_us)} us, T2 = {format_value(p.t2_us)} us",
        f"Gate time: {format_value(p.gate_time_ns)} ns",
        f"DRAG beta: {budget.drag_beta:.4f} ns",
        f"T2/T ratio: {budget.t2_over_t_ratio:.0f}",
        "",
        "Decoherence floor:",
        f"  T1 contribution:  {floor.t1_contribution:.2e}",
        f"  T2 contribution:  {floor.t2_contribution:.2e}",
        f"  Total floor:      {floor.total:.2e}",
        "",
        "Estimated total infidelity (1 - F):",
        f"  Gaussian: {infidelity.gaussian:.2e}",
        f"  DRAG:     {infidelity.drag:.2e}",
        f"  GRAPE:    {infidelity.grape:.2e}",
        "",
        f"Regime: {budget.regime}",
        "",
        f"Recommendation: {budget.recommendation}",
    ]
    return "\n".join(lines)


def _tag(robust: bool) -> str:
    return "(robust)" if robust else "(sensitive)"


def format_robustness(
    estimates: Sequence[RobustnessEstimate],
    gate_time_ns: float,
    reference: ReferenceModel = DEFAULT_REFERENCE,
) -> str:
    lines = [
        f"=== Robustness Estimates (±{reference.detuning_mhz:g} MHz detuning, "
        f"±{reference.amplitude_error * 100:g}% amplitude) ===",
        f"Gate time: {format_value(gate_time_ns)} ns",
        "",
    ]
    for r in estimates:
        lines += [
            f"{r.method}:",
            f"  Detuning min fidelity:  {r.detuning_min_fidelity:.4f} {_tag(r.detuning_robust)}",
            f"  Amplitude min fidelity: {r.amplitude_min_fidelity:.4f} {_tag(r.amplitude_robust)}",
            "",
        ]
    lines += [
        "Note: DRAG's superior detuning robustness is a key finding. GRAPE's",
        "richer spectral content makes it more sensitive to frequency shifts.",
    ]
    return "\n".join(lines)
