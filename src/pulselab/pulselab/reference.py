# Reference constants for the error-budget scaling laws
from typing import Dict, NamedTuple


class ReferenceRule:
    """Named reference value used by the error budget models."""

    def __init__(self, name, description, value):
        """Initialize the ReferenceRule with parameters."""
        self.name = name
        self.description = description
        self.value = value

    def __str__(self):
        """String representation of the ReferenceRule."""
        return f"{self.name}: {self.description} = {self.value}"

    def __repr__(self):
        """String representation of the ReferenceRule for debugging."""
        return f"ReferenceRule(name={self.name}, description={self.description}, value={self.value})"


class RobustnessReference(NamedTuple):
    """Reference fidelities and degradation coefficients for one pulse method."""
    detuning_ref: float
    detuning_coef: float
    amplitude_ref: float
    amplitude_coef: float
    detuning_robust: bool
    amplitude_robust: bool


## Default reference rules
RR_SHORT_GATE_THRESHOLD = ReferenceRule(
    name="RR_SHORT_GATE_THRESHOLD",
    description="Gate time [ns] below which first-order DRAG is invalid",
    value=15.0,
)

RR_DRAG_SUFFICIENT_RATIO = ReferenceRule(
    name="RR_DRAG_SUFFICIENT_RATIO",
    description="DRAG coherent error over decoherence floor below which DRAG is sufficient",
    value=0.5,
)

RR_DETUNING_THRESHOLD = ReferenceRule(
    name="RR_DETUNING_THRESHOLD",
    description="Minimum fidelity under detuning to count as robust",
    value=0.98,
)

RR_AMPLITUDE_THRESHOLD = ReferenceRule(
    name="RR_AMPLITUDE_THRESHOLD",
    description="Minimum fidelity under amplitude error to count as robust",
    value=0.98,
)


class ReferenceModel:
    """Reference model containing the calibration point of the scaling laws.
    Default values correspond to a 20 ns gate on a transmon with alpha/2pi = -200 MHz
    (arXiv:2511.12799).
    """

    def __init__(self):
        """Initialize the ReferenceModel with parameters."""
        self.gate_time_ns = 20.0  # [ns] Reference gate duration
        self.anharmonicity_mhz = 200.0  # [MHz] Reference |alpha|/2pi

        """Coherent error at the reference point"""
        self.drag_error = 4.9e-4  # Residual DRAG coherent error
        self.gaussian_error = 2.8e-2  # Uncorrected Gaussian coherent error
        self.drag_exponent = 4  # Gate time exponent of the DRAG residual
        self.gaussian_exponent = 2  # Gate time exponent of the Gaussian error
        self.anharmonicity_exponent = 2

        """Robustness sweep (Table III)"""
        self.detuning_mhz = 5.0  # [MHz] +/- detuning range
        self.amplitude_error = 0.05  # +/- relative amplitude error
        self.robustness_table: Dict[str, RobustnessReference] = {
            "Gaussian": RobustnessReference(0.937, 0.03, 0.965, 0.02, False, False),
            "DRAG": RobustnessReference(0.990, 0.01, 0.990, 0.01, True, True),
            "GRAPE": RobustnessReference(0.931, 0.04, 0.994, 0.005, False, True),
        }

        # Per-instance copies of the default rules
        self.rules = {
            rule.name: ReferenceRule(rule.name, rule.description, rule.value)
            for rule in (
                RR_SHORT_GATE_THRESHOLD,
                RR_DRAG_SUFFICIENT_RATIO,
                RR_DETUNING_THRESHOLD,
                RR_AMPLITUDE_THRESHOLD,
            )
        }

    def get_rule(self, name):
        """Get a reference rule by its name."""
        return self.rules.get(name, None)

    @property
    def short_gate_threshold_ns(self) -> float:
        return self.rules["RR_SHORT_GATE_THRESHOLD"].value

    @property
    def drag_sufficient_ratio(self) -> float:
        return self.rules["RR_DRAG_SUFFICIENT_RATIO"].value

    @property
    def detuning_threshold(self) -> float:
        return self.rules["RR_DETUNING_THRESHOLD"].value

    @property
    def amplitude_threshold(self) -> float:
        return self.rules["RR_AMPLITUDE_THRESHOLD"].value

    def __str__(self):
        """String representation of the ReferenceModel."""
        return (
            f"ReferenceModel(gate_time_ns={self.gate_time_ns}, anharmonicity_mhz={self.anharmonicity_mhz}, "
            f"drag_error={self.drag_error}, gaussian_error={self.gaussian_error})"
        )

    def __repr__(self):
        return self.__str__()


DEFAULT_REFERENCE = ReferenceModel()
