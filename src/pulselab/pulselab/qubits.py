"""Transmon anharmonicity from circuit parameters.

Lets a caller start from E_j and E_c (or the total capacitance) instead of a
measured anharmonicity.

References
----------
- Koch et al., Phys. Rev. A 76, 042319 (2007)
- Krantz et al., Appl. Phys. Rev. 6, 021318 (2019) / arXiv:1904.06560
"""

import logging
from typing import Optional

import scqubits as scq
from scipy.constants import e as e_0
from scipy.constants import Planck as h_0

from pulselab.schema import HardwareParams

logger = logging.getLogger(__name__)


def charging_energy_from_capacitance(C_sum: float) -> float:
    """
    Charging energy E_c/h in Hz from the total capacitance C_sum in F.
    https://arxiv.org/pdf/cond-mat/0703002 eq. 2.1*
    """
    return e_0**2 / (2 * C_sum) / h_0


def transmon_anharmonicity_mhz(
    E_j: float,
    E_c: Optional[float] = None,
    C_sum: Optional[float] = None,
    numerical: bool = True,
    ng: float = 0.3,
    ncut: int = 30,
) -> float:
    """
    Anharmonicity alpha/2pi in MHz of a fixed-frequency transmon.

    Energies are E/h in Hz (not E/hbar). Either E_c or C_sum must be given.
    With numerical=True the charge-basis Hamiltonian is diagonalized with
    scqubits; otherwise the asymptotic value alpha = -E_c is returned.
    """
    if E_c is None:
        if C_sum is None:
            raise ValueError("Either E_c or C_sum must be provided.")
        E_c = charging_energy_from_capacitance(C_sum)

    if not numerical:
        return -E_c / 1e6

    qmodel = scq.Transmon(EJ=E_j / 1e9, EC=E_c / 1e9, ng=ng, ncut=ncut, truncated_dim=4)
    alpha = float(qmodel.anharmonicity()) * 1e3  # GHz -> MHz
    logger.debug("scqubits transmon EJ/EC=%.1f: alpha=%.2f MHz", E_j / E_c, alpha)
    return alpha


def hardware_params_from_transmon(
    E_j: float,
    t1_us: float,
    t2_us: float,
    gate_time_ns: float,
    E_c: Optional[float] = None,
    C_sum: Optional[float] = None,
    **kwargs
) -> HardwareParams:
    """
    Initialize HardwareParams from transmon circuit energies.
    Extra keyword arguments are passed to transmon_anharmonicity_mhz.
    """
    return HardwareParams(
        anharmonicity_mhz=transmon_anharmonicity_mhz(E_j, E_c=E_c, C_sum=C_sum, **kwargs),
        t1_us=t1_us,
        t2_us=t2_us,
        gate_time_ns=gate_time_ns,
    )
