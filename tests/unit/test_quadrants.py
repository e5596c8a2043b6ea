# File: tests/unit/test_quadrants.py
"""
Unit tests for quadrant ordering and bracket search
"""

import pytest
import math
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from rotor_bem.components.quadrants import (
    EPSILON,
    NPTS,
    Q1, Q2, Q3, Q4,
    QUADRANTS,
    quadrant_order,
    backward_search,
    search_quadrant,
)


class TestQuadrantBounds:
    """Quadrants avoid phi = 0 and phi = +/-pi"""

    def test_bounds(self):
        assert Q1 == (EPSILON, math.pi / 2)
        assert Q2 == (-math.pi / 2, -EPSILON)
        assert Q3 == (math.pi / 2, math.pi - EPSILON)
        assert Q4 == (-math.pi + EPSILON, -math.pi / 2)

    def test_lookup(self):
        assert QUADRANTS['Q3'] is Q3
        assert NPTS == 20


class TestQuadrantOrder:
    """Search order from inflow signs"""

    @pytest.mark.parametrize("Vx, Vy, expected", [
        (10.0, 30.0, (Q1, Q2, Q3, Q4)),
        (-10.0, 30.0, (Q2, Q1, Q4, Q3)),
        (10.0, -30.0, (Q3, Q4, Q1, Q2)),
        (-10.0, -30.0, (Q4, Q3, Q2, Q1)),
    ])
    def test_general_case(self, Vx, Vy, expected):
        order, startfrom90 = quadrant_order(Vx, Vy, 0.2)
        assert order == expected
        assert startfrom90 is False

    @pytest.mark.parametrize("Vy, theta, expected", [
        (30.0, 0.2, (Q1, Q2)),
        (30.0, -0.2, (Q2, Q1)),
        (-30.0, 0.2, (Q3, Q4)),
        (-30.0, -0.2, (Q4, Q3)),
    ])
    def test_axial_inflow_zero(self, Vy, theta, expected):
        order, startfrom90 = quadrant_order(0.0, Vy, theta)
        assert order == expected
        assert startfrom90 is False

    @pytest.mark.parametrize("Vx, theta, expected", [
        (10.0, 0.2, (Q1, Q3)),
        (-10.0, 0.2, (Q2, Q4)),
        (10.0, 2.0, (Q3, Q1)),
        (-10.0, -2.0, (Q4, Q2)),
    ])
    def test_tangential_inflow_zero(self, Vx, theta, expected):
        order, startfrom90 = quadrant_order(Vx, 0.0, theta)
        assert order == expected
        assert startfrom90 is True

    def test_near_zero_uses_tolerance(self):
        order, _ = quadrant_order(1e-8, 30.0, 0.2)
        assert order == (Q1, Q2)

    def test_no_inflow(self):
        assert quadrant_order(0.0, 0.0, 0.2) == ((), False)


class TestBackwardSearch:
    """Scan direction within a quadrant"""

    def test_from_zero(self):
        assert backward_search(Q1, False) is False
        assert backward_search(Q2, False) is True
        assert backward_search(Q3, False) is False
        assert backward_search(Q4, False) is True

    def test_from_ninety(self):
        assert backward_search(Q1, True) is True
        assert backward_search(Q2, True) is False
        assert backward_search(Q3, True) is False
        assert backward_search(Q4, True) is False


class TestSearchQuadrant:
    """Bracket search within one quadrant"""

    def test_finds_bracket(self):
        bracket = search_quadrant(lambda phi: phi - 0.7, Q1, False)
        assert bracket is not None
        phiL, phiU = bracket
        assert phiL < 0.7 < phiU

    def test_backward_returns_ordered_bracket(self):
        bracket = search_quadrant(lambda phi: phi + 0.7, Q2, False)
        phiL, phiU = bracket
        assert phiL < -0.7 < phiU

    def test_no_sign_change(self):
        assert search_quadrant(lambda phi: 1.0, Q1, False) is None

    def test_root_closest_to_start(self):
        f = lambda phi: (phi - 0.3) * (phi - 1.2)
        phiL, _ = search_quadrant(f, Q1, False)
        assert phiL < 0.3

        phiL, _ = search_quadrant(f, Q1, True)
        assert phiL < 1.2 and phiL > 0.3


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
