"""Physical sanity checks on hardware parameters.

Problems are collected into a ValidationReport instead of being raised one by
one, so a caller can show every issue at once. Errors block the computation;
warnings only block it unless the caller accepts them explicitly.
"""

import logging
from dataclasses import dataclass, field
from math import isfinite
from typing import List, Literal

from pulselab.error_budget import compute_error_budget
from pulselab.formatting import format_value
from pulselab.reference import DEFAULT_REFERENCE, ReferenceModel
from pulselab.schema import ErrorBudget, HardwareParams, SerializableMixin

logger = logging.getLogger(__name__)

NON_FINITE = "NonFiniteParameter"
NON_POSITIVE = "NonPositiveParameter"
UNPHYSICAL_DEPHASING = "UnphysicalDephasing"
UNUSUAL_ANHARMONICITY_SIGN = "UnusualAnharmonicitySign"
OUT_OF_RANGE = "OutOfRangeParameter"

# Below these the coherent-error power laws leave the range of a double.
MIN_GATE_TIME_NS = 1e-3
MIN_ABS_ANHARMONICITY_MHZ = 1e-3


@dataclass(frozen=True)
class ValidationIssue(SerializableMixin):
    kind: str
    field: str
    message: str
    severity: Literal["error", "warning"]


@dataclass
class ValidationReport:
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def ok(self) -> bool:
        """True when there are no errors (warnings are allowed)."""
        return not self.errors

    def render(self) -> str:
        lines = []
        for issue in self.issues:
            prefix = "Error" if issue.severity == "error" else "Warning"
            lines.append(f"{prefix}: {issue.message}")
        return "\n".join(lines)

    def serialize(self):
        return [i.serialize() for i in self.issues]


class ParameterValidationError(ValueError):
    """Raised when hardware parameters fail validation."""

    def __init__(self, report: ValidationReport):
        self.report = report
        super().__init__(report.render())


def validate_params(params: HardwareParams) -> ValidationReport:
    """
    Check hardware parameters before computing an error budget.

    - gate_time_ns, t1_us, t2_us must be positive (error)
    - every field must be finite, and alpha must be non-zero (error)
    - gate_time_ns and |alpha| must not be below MIN_GATE_TIME_NS and
      MIN_ABS_ANHARMONICITY_MHZ (error)
    - T2 > 2*T1 is unphysical (warning)
    - alpha > 0 is unusual for a transmon (warning)
    """
    report = ValidationReport()

    for name in ("anharmonicity_mhz", "gate_time_ns", "t1_us", "t2_us"):
        value = getattr(params, name)
        if not isfinite(value):
            report.issues.append(
                ValidationIssue(NON_FINITE, name, f"{name} must be a finite number, got {value}.", "error")
            )

    for name in ("gate_time_ns", "t1_us", "t2_us"):
        value = getattr(params, name)
        if isfinite(value) and value <= 0:
            report.issues.append(
                ValidationIssue(
                    NON_POSITIVE, name, f"{name} must be positive, got {format_value(value)}.", "error"
                )
            )

    if params.anharmonicity_mhz == 0:
        report.issues.append(
            ValidationIssue(
                NON_POSITIVE,
                "anharmonicity_mhz",
                "|anharmonicity_mhz| must be positive; a harmonic mode has no computational subspace.",
                "error",
            )
        )
    elif isfinite(params.anharmonicity_mhz) and abs(params.anharmonicity_mhz) < MIN_ABS_ANHARMONICITY_MHZ:
        report.issues.append(
            ValidationIssue(
                OUT_OF_RANGE,
                "anharmonicity_mhz",
                f"|anharmonicity_mhz| must be at least {format_value(MIN_ABS_ANHARMONICITY_MHZ)} MHz, "
                f"got {format_value(params.anharmonicity_mhz)}.",
                "error",
            )
        )

    if isfinite(params.gate_time_ns) and 0 < params.gate_time_ns < MIN_GATE_TIME_NS:
        report.issues.append(
            ValidationIssue(
                OUT_OF_RANGE,
                "gate_time_ns",
                f"gate_time_ns must be at least {format_value(MIN_GATE_TIME_NS)} ns, "
                f"got {format_value(params.gate_time_ns)}.",
                "error",
            )
        )

    if report.errors:
        return report

    if params.t2_us > 2 * params.t1_us:
        report.issues.append(
            ValidationIssue(
                UNPHYSICAL_DEPHASING,
                "t2_us",
                f"T2 ({format_value(params.t2_us)} us) exceeds 2*T1 ({format_value(2 * params.t1_us)} us). "
                f"This is physically impossible; T2 <= 2*T1 always. Please check your values.",
                "warning",
            )
        )

    if params.anharmonicity_mhz > 0:
        report.issues.append(
            ValidationIssue(
                UNUSUAL_ANHARMONICITY_SIGN,
                "anharmonicity_mhz",
                f"Positive anharmonicity ({format_value(params.anharmonicity_mhz)} MHz) is unusual for transmons. "
                f"Transmons typically have alpha < 0 (e.g., -200 MHz). "
                f"Did you mean {format_value(-abs(params.anharmonicity_mhz))} MHz?",
                "warning",
            )
        )

    for issue in report.warnings:
        logger.warning("%s: %s", issue.kind, issue.message)

    return report


def checked_error_budget(
    params: HardwareParams,
    accept_warnings: bool = False,
    reference: ReferenceModel = DEFAULT_REFERENCE,
) -> ErrorBudget:
    """
    Validate and compute the error budget.

    Raises ParameterValidationError if there are errors, or warnings that
    were not accepted.
    """
    report = validate_params(params)
    if not report.ok or (report.warnings and not accept_warnings):
        raise ParameterValidationError(report)
    return compute_error_budget(params, reference)
