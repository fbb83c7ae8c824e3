from dataclasses import replace

import matplotlib.pyplot as plt
import numpy as np
import pytest

from pulselab.error_budget import compute_error_budget
from pulselab.sweep import plot_sweep, sweep_gate_time
from pulselab.validation import ParameterValidationError


def test_sweep_matches_single_budgets(garnet):
    sweep = sweep_gate_time(garnet, [10, 15, 20, 40, 80])

    for i, t in enumerate(sweep.gate_times_ns):
        budget = compute_error_budget(replace(garnet, gate_time_ns=float(t)))
        assert sweep.floor[i] == budget.decoherence_floor.total
        assert sweep.drag[i] == budget.estimated_infidelity.drag
        assert sweep.gaussian[i] == budget.estimated_infidelity.gaussian
        assert sweep.grape[i] == budget.estimated_infidelity.grape
        assert sweep.regimes[i] == budget.regime

    assert sweep.regimes == ["short_gate", "grape_needed", "drag_sufficient", "drag_sufficient", "drag_sufficient"]
    np.testing.assert_allclose(sweep.drag - sweep.floor, sweep.drag_coherent)
    assert np.all(sweep.grape <= sweep.drag)


def test_crossover(garnet):
    assert sweep_gate_time(garnet, [80, 10, 20, 15, 40]).crossover_gate_time() == 20.0
    assert sweep_gate_time(garnet, [10, 12]).crossover_gate_time() is None


def test_invalid_gate_times(garnet):
    with pytest.raises(ValueError):
        sweep_gate_time(garnet, [10, 0, 20])
    with pytest.raises(ValueError):
        sweep_gate_time(garnet, [])


def test_plot(garnet):
    sweep = sweep_gate_time(garnet, np.linspace(8, 100, 20))
    ax = plot_sweep(sweep)
    labels = [line.get_label() for line in ax.lines]
    assert labels == ["Gaussian", "DRAG", "GRAPE", "Decoherence floor", "Short-gate threshold"]
    assert ax.get_xscale() == "log"
    plt.close(ax.figure)


@pytest.mark.parametrize("field, value", [("anharmonicity_mhz", 0.0), ("t1_us", -1.0), ("t2_us", 0.0)])
def test_invalid_base_parameters(garnet, field, value):
    with pytest.raises(ParameterValidationError) as excinfo:
        sweep_gate_time(replace(garnet, **{field: value}), [10, 20])
    assert [i.field for i in excinfo.value.report.errors] == [field]


def test_gate_times_below_minimum(garnet):
    with pytest.raises(ValueError, match="at least 0.001 ns"):
        sweep_gate_time(garnet, [1e-80, 20])
