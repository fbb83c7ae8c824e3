import matplotlib

matplotlib.use("Agg")

import pytest

from pulselab.schema import HardwareParams


@pytest.fixture
def garnet():
    """IQM Garnet-like transmon driven with a 20 ns gate."""
    return HardwareParams(anharmonicity_mhz=-200.0, t1_us=37.0, t2_us=9.6, gate_time_ns=20.0)
