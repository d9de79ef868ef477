import pytest

from induction_motor_slip import (
    MotorParameters,
    DEFAULT_PARAMETERS,
    create_default_parameters,
    create_parameters_from_dict,
    check_parameter_ranges,
)


def test_default_parameters(params):
    assert params.Rs == 0.5
    assert params.Xs == 1.5
    assert params.Xm == 30
    assert params.Rr == 0.6
    assert params.Xr == 1.5
    assert params.poles == 4
    assert params.voltage == 400
    assert params.as_dict() == DEFAULT_PARAMETERS


def test_derived_quantities(params):
    assert params.pole_pairs == 2
    assert params.sync_speed == 1500
    assert params.X_total == 3.0


def test_parameters_are_immutable(params):
    with pytest.raises(AttributeError):
        params.Rr = 1.0


def test_replace_returns_new_value(params):
    updated = params.replace(Rr=1.2, poles=6)
    assert updated.Rr == 1.2
    assert updated.poles == 6
    assert params.Rr == 0.6
    assert updated.sync_speed == 1000


@pytest.mark.parametrize("field, value", [
    ('Rs', 0.0),
    ('Rs', -0.5),
    ('Rr', 0.0),
    ('Xm', 0.0),
    ('Xs', -0.1),
    ('Xr', -0.1),
    ('voltage', 0.0),
    ('poles', 0),
    ('poles', 3),
    ('poles', -2),
    ('poles', 4.5),
])
def test_invalid_parameters_rejected(params, field, value):
    with pytest.raises(ValueError):
        params.replace(**{field: value})


def test_zero_leakage_reactance_allowed(params):
    updated = params.replace(Xs=0.0, Xr=0.0)
    assert updated.X_total == 0.0


def test_create_from_dict_fills_defaults():
    params = create_parameters_from_dict({'voltage': 230})
    assert params.voltage == 230
    assert params.Rs == DEFAULT_PARAMETERS['Rs']


def test_create_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown"):
        create_parameters_from_dict({'Rfe': 100})


def test_range_check_default_motor_in_range():
    check = check_parameter_ranges(create_default_parameters())
    assert check['in_range']
    assert check['warnings'] == []


def test_range_check_reports_out_of_range_values(params):
    check = check_parameter_ranges(params.replace(voltage=50, Xm=80, poles=14))
    assert not check['in_range']
    assert len(check['warnings']) == 3
    assert any(w.startswith("voltage=50") and "minimum" in w for w in check['warnings'])
    assert any(w.startswith("Xm=80") and "maximum" in w for w in check['warnings'])


def test_repr_mentions_sync_speed(params):
    assert "1500 rpm" in repr(params)


def test_equal_values_compare_equal():
    assert create_default_parameters() == MotorParameters(**DEFAULT_PARAMETERS)
