"""
pulselab: error budgets for transmon single-qubit gate calibration.

Public API (lazy-imported):
- error_budget: compute_error_budget, estimate_robustness, compute_decoherence_floor, compute_drag_beta
- validation: validate_params, checked_error_budget
- formatting: format_error_budget, format_robustness
- sweep: sweep_gate_time, plot_sweep
- qubits: transmon_anharmonicity_mhz, hardware_params_from_transmon

Versioning follows PEP 440; see __version__.
"""

from importlib.metadata import version, PackageNotFoundError
from .schema import HardwareParams, DecoherenceFloor, ErrorBudget, RobustnessEstimate
from .error_budget import (
    compute_decoherence_floor,
    compute_drag_beta,
    compute_error_budget,
    estimate_robustness,
)
from .validation import validate_params, checked_error_budget, ParameterValidationError
from .formatting import format_error_budget, format_robustness

try:
    __version__ = version("pulselab")
except PackageNotFoundError:
    # Fallback for editable or source usage without installed metadata
    __version__ = "0.1.0"

__all__ = [
    "HardwareParams",
    "DecoherenceFloor",
    "ErrorBudget",
    "RobustnessEstimate",
    "compute_decoherence_floor",
    "compute_drag_beta",
    "compute_error_budget",
    "estimate_robustness",
    "validate_params",
    "checked_error_budget",
    "ParameterValidationError",
    "format_error_budget",
    "format_robustness",
    "sweep_gate_time",
    "plot_sweep",
    "transmon_anharmonicity_mhz",
    "hardware_params_from_transmon",
    "__version__",
]


def __getattr__(name):
    if name in {"sweep_gate_time", "plot_sweep"}:
        from .sweep import sweep_gate_time, plot_sweep  # type: ignore

        return {"sweep_gate_time": sweep_gate_time, "plot_sweep": plot_sweep}[name]
    if name in {"transmon_anharmonicity_mhz", "hardware_params_from_transmon"}:
        from .qubits import transmon_anharmonicity_mhz, hardware_params_from_transmon  # type: ignore

        return {
            "transmon_anharmonicity_mhz": transmon_anharmonicity_mhz,
            "hardware_params_from_transmon": hardware_params_from_transmon,
        }[name]
    raise AttributeError(name)
