import matplotlib
matplotlib.use("Agg")

import pytest

from induction_motor_slip import MotorParameters, create_default_parameters


@pytest.fixture
def params():
    """Default 4-pole, 400 V motor."""
    return create_default_parameters()


@pytest.fixture
def motor_variants():
    """A handful of valid motors covering the typical input ranges."""
    return [
        create_default_parameters(),
        MotorParameters(Rs=0.1, Xs=0.1, Xm=1, Rr=0.1, Xr=0.1, poles=2, voltage=100),
        MotorParameters(Rs=10, Xs=10, Xm=50, Rr=10, Xr=10, poles=12, voltage=1000),
        MotorParameters(Rs=2.0, Xs=0.0, Xm=20, Rr=0.8, Xr=0.0, poles=6, voltage=230),
        MotorParameters(Rs=0.3, Xs=3.0, Xm=40, Rr=4.0, Xr=2.5, poles=8, voltage=690),
    ]
