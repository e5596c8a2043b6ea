# File: tests/unit/test_airfoils.py
"""
Unit tests for airfoil polars
"""

import pytest
import math
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from rotor_bem.core.airfoils import (
    Airfoil,
    AirfoilException,
    linear_polar,
    airfoil_from_config,
)


@pytest.fixture
def alpha_deg():
    return np.arange(-10.0, 10.5, 1.0)


class TestLinearPolar:
    """Thin-airfoil polar"""

    def test_default(self):
        af = linear_polar()
        assert af(0.1, 1e6, 0.1) == pytest.approx((2 * math.pi * 0.1, 0.0))

    def test_zero_lift_angle(self):
        af = linear_polar(cl_alpha=5.7, alpha0=-0.03, cd0=0.012)
        cl, cd = af(-0.03, 1e6, 0.0)
        assert cl == pytest.approx(0.0)
        assert cd == 0.012

    def test_total_for_any_angle(self):
        af = linear_polar()
        for alpha in (-math.pi, -1.0, 0.0, 2.5, math.pi):
            cl, cd = af(alpha, 0.0, 0.0)
            assert math.isfinite(cl)
            assert math.isfinite(cd)


class TestTabulatedAirfoil:
    """Spline-fitted polar data"""

    def test_single_reynolds(self, alpha_deg):
        alpha = np.radians(alpha_deg)
        af = Airfoil(alpha, 2 * math.pi * alpha, np.full_like(alpha, 0.01))

        assert af.one_Re
        cl, cd = af(0.05, 3e5, 0.1)
        assert cl == pytest.approx(2 * math.pi * 0.05, abs=1e-6)
        assert cd == pytest.approx(0.01, abs=1e-6)

    def test_reynolds_ignored_for_single_polar(self, alpha_deg):
        alpha = np.radians(alpha_deg)
        af = Airfoil(alpha, 2 * math.pi * alpha, np.full_like(alpha, 0.01))
        assert af(0.05, 1e4, 0.0) == af(0.05, 1e7, 0.0)

    def test_multiple_reynolds(self, alpha_deg):
        alpha = np.radians(alpha_deg)
        cl = np.column_stack([2 * math.pi * alpha, 2 * math.pi * alpha])
        cd = np.column_stack([np.full_like(alpha, 0.02), np.full_like(alpha, 0.01)])

        af = Airfoil(alpha, cl, cd, Re=[1e5, 1e6])

        assert not af.one_Re
        assert af(0.0, 1e5, 0.0)[1] == pytest.approx(0.02, abs=1e-6)
        assert af(0.0, 1e6, 0.0)[1] == pytest.approx(0.01, abs=1e-6)

    def test_returns_floats(self, alpha_deg):
        alpha = np.radians(alpha_deg)
        af = Airfoil(alpha, 2 * math.pi * alpha, np.full_like(alpha, 0.01))
        cl, cd = af(0.05, 1e6, 0.0)
        assert isinstance(cl, float)
        assert isinstance(cd, float)

    def test_from_degrees(self, alpha_deg):
        af = Airfoil.from_degrees(alpha_deg, 0.1 * alpha_deg, np.full_like(alpha_deg, 0.01))
        cl, _ = af(math.radians(4.0), 1e6, 0.0)
        assert cl == pytest.approx(0.4, abs=1e-6)
        assert "n_Re=1" in repr(af)


class TestAirfoilValidation:
    """Malformed data"""

    def test_decreasing_alpha(self):
        with pytest.raises(AirfoilException, match="increasing"):
            Airfoil([0.1, 0.0, -0.1], [0.6, 0.0, -0.6], [0.01, 0.01, 0.01])

    def test_single_alpha(self):
        with pytest.raises(AirfoilException):
            Airfoil([0.0], [0.0], [0.01])

    def test_shape_mismatch(self):
        with pytest.raises(AirfoilException, match="does not match"):
            Airfoil([0.0, 0.1, 0.2], [0.0, 0.6, 1.2], [0.01, 0.01])

    def test_row_count(self):
        with pytest.raises(AirfoilException, match="rows"):
            Airfoil([0.0, 0.1, 0.2], [0.0, 0.6], [0.01, 0.01])

    def test_columns_without_reynolds(self):
        with pytest.raises(AirfoilException, match="without Reynolds"):
            Airfoil([0.0, 0.1, 0.2], np.zeros((3, 2)), np.zeros((3, 2)))

    def test_reynolds_count(self):
        with pytest.raises(AirfoilException, match="columns"):
            Airfoil([0.0, 0.1, 0.2], np.zeros((3, 2)), np.zeros((3, 2)), Re=[1e5, 1e6, 1e7])


class TestAirfoilFromConfig:
    """Configuration entries"""

    def test_linear(self):
        af = airfoil_from_config({'type': 'linear', 'cl_alpha': 6.0, 'cd0': 0.01})
        assert af(0.1, 1e6, 0.0) == pytest.approx((0.6, 0.01))

    def test_default_type_is_linear(self):
        af = airfoil_from_config({})
        assert af(0.1, 1e6, 0.0) == pytest.approx((2 * math.pi * 0.1, 0.0))

    def test_table(self, alpha_deg):
        af = airfoil_from_config({
            'type': 'table',
            'alpha_deg': list(alpha_deg),
            'cl': list(0.1 * alpha_deg),
            'cd': [0.01] * len(alpha_deg),
        })
        assert isinstance(af, Airfoil)

    def test_table_missing_column(self):
        with pytest.raises(AirfoilException, match="missing"):
            airfoil_from_config({'type': 'table', 'alpha_deg': [0, 1, 2], 'cl': [0, 0.1, 0.2]})

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown airfoil type"):
            airfoil_from_config({'type': 'xfoil'})


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
