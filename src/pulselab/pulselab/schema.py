from dataclasses import dataclass, asdict, fields
from typing import Dict, Any, Literal, Mapping

Regime = Literal["short_gate", "drag_sufficient", "grape_needed"]


@dataclass(frozen=True)
class SerializableMixin:
    def serialize(self) -> Dict[str, Any]:
        """
        Serialize the dataclass to a nested dictionary.
        """
        return asdict(self)


@dataclass(frozen=True)
class HardwareParams(SerializableMixin):
    """
    Transmon hardware parameters for a single-qubit gate.

        anharmonicity_mhz:  alpha/2pi in MHz (negative for transmons)
        t1_us:              relaxation time in microseconds
        t2_us:              dephasing time in microseconds (T2 <= 2*T1)
        gate_time_ns:       pulse duration in nanoseconds
    """
    anharmonicity_mhz: float
    t1_us: float
    t2_us: float
    gate_time_ns: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HardwareParams":
        """
        Build from a mapping, ignoring unknown keys.
        `alpha_mhz` is accepted as an alias for `anharmonicity_mhz`.
        """
        data = dict(data)
        if "anharmonicity_mhz" not in data and "alpha_mhz" in data:
            data["anharmonicity_mhz"] = data["alpha_mhz"]
        return cls(**{f.name: float(data[f.name]) for f in fields(cls)})


@dataclass(frozen=True)
class DecoherenceFloor(SerializableMixin):
    t1_contribution: float
    t2_contribution: float
    total: float


@dataclass(frozen=True)
class InfidelityEstimate(SerializableMixin):
    gaussian: float
    drag: float
    grape: float


@dataclass(frozen=True)
class ErrorBudget(SerializableMixin):
    params: HardwareParams
    decoherence_floor: DecoherenceFloor
    estimated_infidelity: InfidelityEstimate
    regime: Regime
    recommendation: str
    t2_over_t_ratio: float
    drag_beta: float


@dataclass(frozen=True)
class RobustnessEstimate(SerializableMixin):
    """
    Minimum fidelity of one pulse method under the reference detuning and
    amplitude perturbations.

    The `*_robust` flags are the static classification of each method and are
    not derived from the fidelities; `*_meets_threshold` compare the computed
    numbers against the thresholds instead.
    """
    method: str
    detuning_min_fidelity: float
    amplitude_min_fidelity: float
    detuning_robust: bool
    amplitude_robust: bool
    detuning_threshold: float = 0.98
    amplitude_threshold: float = 0.98

    @property
    def detuning_meets_threshold(self) -> bool:
        return self.detuning_min_fidelity >= self.detuning_threshold

    @property
    def amplitude_meets_threshold(self) -> bool:
        return self.amplitude_min_fidelity >= self.amplitude_threshold


@dataclass(frozen=True)
class SavedConfig(SerializableMixin):
    name: str
    params: HardwareParams
    created_at: str
