import pytest

from gostsign.dataclass import DomainParameters, ECPoint
from tests.vectors import SMALL_CURVE, curve_points


@pytest.fixture
def small_curve() -> DomainParameters:
    return SMALL_CURVE


@pytest.fixture
def small_points() -> list[ECPoint]:
    return curve_points(SMALL_CURVE)
