import logging
from dataclasses import replace

import pytest

from pulselab.validation import (
    NON_FINITE,
    NON_POSITIVE,
    OUT_OF_RANGE,
    UNPHYSICAL_DEPHASING,
    UNUSUAL_ANHARMONICITY_SIGN,
    ParameterValidationError,
    checked_error_budget,
    validate_params,
)


def test_valid_parameters(garnet):
    report = validate_params(garnet)
    assert report.ok
    assert report.issues == []
    assert report.render() == ""


@pytest.mark.parametrize("name", ["gate_time_ns", "t1_us", "t2_us"])
@pytest.mark.parametrize("value", [0.0, -5.0])
def test_non_positive_times_are_errors(garnet, name, value):
    report = validate_params(replace(garnet, **{name: value}))
    assert not report.ok
    assert [(i.kind, i.field) for i in report.errors] == [(NON_POSITIVE, name)]


def test_all_failing_fields_are_reported(garnet):
    report = validate_params(replace(garnet, gate_time_ns=-1.0, t1_us=0.0))
    assert {i.field for i in report.errors} == {"gate_time_ns", "t1_us"}


def test_non_finite_and_zero_anharmonicity(garnet):
    assert validate_params(replace(garnet, t2_us=float("nan"))).errors[0].kind == NON_FINITE
    assert validate_params(replace(garnet, gate_time_ns=float("inf"))).errors[0].kind == NON_FINITE
    zero = validate_params(replace(garnet, anharmonicity_mhz=0.0))
    assert [(i.kind, i.field) for i in zero.errors] == [(NON_POSITIVE, "anharmonicity_mhz")]


def test_unphysical_dephasing_is_a_warning(garnet):
    report = validate_params(replace(garnet, t1_us=10.0, t2_us=25.0))
    assert report.ok
    (warning,) = report.warnings
    assert warning.kind == UNPHYSICAL_DEPHASING
    assert "T2 (25 us) exceeds 2*T1 (20 us)" in warning.message


def test_t2_equal_to_twice_t1_is_fine(garnet):
    assert validate_params(replace(garnet, t1_us=10.0, t2_us=20.0)).issues == []


def test_positive_anharmonicity_suggests_negative(garnet):
    report = validate_params(replace(garnet, anharmonicity_mhz=220.0))
    (warning,) = report.warnings
    assert warning.kind == UNUSUAL_ANHARMONICITY_SIGN
    assert "Did you mean -220 MHz?" in warning.message


def test_warnings_are_logged(garnet, caplog):
    with caplog.at_level(logging.WARNING, logger="pulselab.validation"):
        validate_params(replace(garnet, anharmonicity_mhz=200.0))
    assert UNUSUAL_ANHARMONICITY_SIGN in caplog.text


def test_checked_error_budget(garnet):
    assert checked_error_budget(garnet).regime == "drag_sufficient"

    with pytest.raises(ParameterValidationError) as exc_info:
        checked_error_budget(replace(garnet, gate_time_ns=0.0))
    assert exc_info.value.report.errors[0].field == "gate_time_ns"
    assert isinstance(exc_info.value, ValueError)


def test_checked_error_budget_needs_warnings_accepted(garnet):
    params = replace(garnet, t1_us=10.0, t2_us=25.0)
    with pytest.raises(ParameterValidationError, match="physically impossible"):
        checked_error_budget(params)

    budget = checked_error_budget(params, accept_warnings=True)
    assert budget.decoherence_floor.t2_contribution == 0


def test_errors_cannot_be_accepted(garnet):
    with pytest.raises(ParameterValidationError):
        checked_error_budget(replace(garnet, t1_us=-1.0), accept_warnings=True)


def test_tiny_gate_time_and_anharmonicity_are_out_of_range(garnet):
    report = validate_params(replace(garnet, gate_time_ns=1e-80, anharmonicity_mhz=-1e-160))
    assert [(i.kind, i.field) for i in report.errors] == [
        (OUT_OF_RANGE, "anharmonicity_mhz"),
        (OUT_OF_RANGE, "gate_time_ns"),
    ]
    assert report.errors[1].message == "gate_time_ns must be at least 0.001 ns, got 1e-80."
    with pytest.raises(ParameterValidationError):
        checked_error_budget(replace(garnet, gate_time_ns=1e-80))


def test_smallest_accepted_gate_time_and_anharmonicity(garnet):
    params = replace(garnet, gate_time_ns=1e-3, anharmonicity_mhz=-1e-3)
    assert validate_params(params).ok
    budget = checked_error_budget(params)
    assert budget.regime == "short_gate"
