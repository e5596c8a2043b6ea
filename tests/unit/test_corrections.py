# File: tests/unit/test_corrections.py
"""
Unit tests for correction models and calculator
"""

import pytest
import math
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from rotor_bem.core.geometry import Rotor
from rotor_bem.corrections.models import (
    AVAILABLE_CORRECTIONS,
    MachCorrection,
    TipCorrection,
    NoMachCorrection,
    PrandtlGlauert,
    KarmanTsien,
    NoReCorrection,
    SkinFriction,
    NoRotationCorrection,
    DuSeligEggers,
    NoTipCorrection,
    PrandtlTipOnly,
    Prandtl,
    get_correction,
)
from rotor_bem.corrections.calculator import (
    apply_airfoil_corrections,
    tip_loss_factor,
    correction_from_config,
    available_corrections,
)


class TestMachCorrections:
    """Test compressibility corrections"""

    def test_none(self):
        assert NoMachCorrection().apply(0.5, 0.01, 0.6) == (0.5, 0.01)

    def test_prandtl_glauert(self):
        cl, cd = PrandtlGlauert().apply(0.5, 0.01, 0.6)
        assert cl == pytest.approx(0.625)
        assert cd == 0.01

    def test_karman_tsien(self):
        cl, cd = KarmanTsien().apply(0.5, 0.01, 0.6)
        assert cl == pytest.approx(1.0 / (0.8 / 0.5 + 0.36 / 3.6))
        assert cd == 0.01

    def test_karman_tsien_incompressible_limit(self):
        cl, _ = KarmanTsien().apply(0.8, 0.01, 0.0)
        assert cl == pytest.approx(0.8)

    def test_supersonic_gives_nan(self):
        with np.errstate(invalid='ignore'):
            cl, _ = PrandtlGlauert().apply(0.5, 0.01, 1.5)
        assert math.isnan(cl)

    def test_base_class_not_implemented(self):
        with pytest.raises(NotImplementedError):
            MachCorrection().apply(0.5, 0.01, 0.3)


class TestReynoldsCorrections:
    """Test Reynolds number corrections"""

    def test_none(self):
        assert NoReCorrection().apply(0.5, 0.01, 1e5) == (0.5, 0.01)

    def test_skin_friction(self):
        cl, cd = SkinFriction(Re0=1e6, p=0.2).apply(0.5, 0.01, 5e5)
        assert cl == 0.5
        assert cd == pytest.approx(0.01 * 2**0.2)

    def test_skin_friction_at_reference(self):
        _, cd = SkinFriction(Re0=1e6).apply(0.5, 0.01, 1e6)
        assert cd == pytest.approx(0.01)

    def test_laminar_exponent(self):
        _, cd = SkinFriction(Re0=1e6, p=0.5).apply(0.5, 0.01, 4e6)
        assert cd == pytest.approx(0.005)


class TestRotationCorrections:
    """Test rotational augmentation"""

    def test_none(self):
        assert NoRotationCorrection().apply(0.5, 0.01, 0.1, 0.5, 7.0, 0.1, 0.2) == (0.5, 0.01)

    def test_on_linear_lift_curve_unchanged(self):
        alpha = 0.1
        cl_lin = 2 * math.pi * alpha
        cl, cd = DuSeligEggers().apply(cl_lin, 0.01, 0.1, 0.5, 7.0, alpha, 0.2)
        assert cl == pytest.approx(cl_lin)
        assert cd == pytest.approx(0.01)

    def test_stalled_section(self):
        alpha, phi = 0.4, 0.5
        cr, rR, tsr = 0.2, 0.3, 5.0
        cl0, cd0 = 1.0, 0.1

        cl, cd = DuSeligEggers().apply(cl0, cd0, cr, rR, tsr, alpha, phi)

        Lambda = tsr / math.sqrt(1 + tsr**2)
        crx = cr**(1.0 / (Lambda * rR))
        fcl = 1.0 / (2 * math.pi) * (1.6 * cr / 0.1267 * (1 - crx) / (1 + crx) - 1)
        deltacl = fcl * (2 * math.pi * alpha - cl0)
        deltacd = deltacl * (math.sin(phi) - 0.12 * math.cos(phi)) \
            / (math.cos(phi) + 0.12 * math.sin(phi))

        assert cl == pytest.approx(cl0 + deltacl)
        assert cd == pytest.approx(cd0 + deltacd)

    def test_infinite_tip_speed_ratio(self):
        cl, cd = DuSeligEggers().apply(1.0, 0.1, 0.2, 0.3, np.inf, 0.4, 0.5)
        assert math.isfinite(cl)
        assert math.isfinite(cd)


class TestTipCorrections:
    """Test hub/tip loss factors"""

    def test_none(self):
        assert NoTipCorrection().factor(0.5, 0.1, 1.0, 0.3, 3) == 1.0

    def test_prandtl_tip_only(self):
        F = PrandtlTipOnly().factor(0.5, 0.1, 1.0, 0.3, 3)
        f = 1.5 * (1.0 / 0.5 - 1) / math.sin(0.3)
        assert F == pytest.approx(2 / math.pi * math.acos(math.exp(-f)))

    def test_hub_reduces_factor(self):
        tip = PrandtlTipOnly().factor(0.15, 0.1, 1.0, 0.3, 3)
        both = Prandtl().factor(0.15, 0.1, 1.0, 0.3, 3)
        assert both < tip

    @pytest.mark.parametrize("model", [PrandtlTipOnly(), Prandtl()])
    def test_bounded(self, model):
        for r in np.linspace(0.11, 0.99, 9):
            for phi in (-2.5, -1.0, -0.01, 0.01, 0.5, 1.5, 3.0):
                F = model.factor(r, 0.1, 1.0, phi, 3)
                assert 0.0 < F <= 1.0 + 1e-12

    def test_zero_hub_radius(self):
        with np.errstate(divide='ignore'):
            F = Prandtl().factor(0.5, 0.0, 1.0, 0.3, 3)
        assert F == pytest.approx(PrandtlTipOnly().factor(0.5, 0.0, 1.0, 0.3, 3))

    def test_base_class_not_implemented(self):
        with pytest.raises(NotImplementedError):
            TipCorrection().factor(0.5, 0.1, 1.0, 0.3, 3)


class TestRegistry:
    """Test correction lookup"""

    def test_all_families_have_none(self):
        for kind, variants in AVAILABLE_CORRECTIONS.items():
            assert 'none' in variants

    def test_get_correction(self):
        assert isinstance(get_correction('mach', 'Prandtl_Glauert'), PrandtlGlauert)
        assert get_correction('reynolds', 'skin_friction', Re0=2e5) == SkinFriction(Re0=2e5)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="not available"):
            get_correction('tip', 'goldstein')

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown correction kind"):
            get_correction('wake', 'none')

    def test_available_corrections(self):
        assert available_corrections('tip') == ['none', 'prandtl_tip_only', 'prandtl']
        assert set(available_corrections()) == {'mach', 'reynolds', 'rotation', 'tip'}


class TestCorrectionFromConfig:
    """Test configuration entries"""

    def test_none_entry(self):
        assert isinstance(correction_from_config('rotation', None), NoRotationCorrection)

    def test_string_entry(self):
        assert isinstance(correction_from_config('mach', 'karman_tsien'), KarmanTsien)

    def test_mapping_entry(self):
        corr = correction_from_config('reynolds', {'name': 'skin_friction', 'Re0': 1e6, 'p': 0.5})
        assert corr == SkinFriction(Re0=1e6, p=0.5)

    def test_instance_passthrough(self):
        corr = DuSeligEggers(a=1.2)
        assert correction_from_config('rotation', corr) is corr

    def test_mapping_without_name(self):
        with pytest.raises(ValueError, match="'name'"):
            correction_from_config('reynolds', {'Re0': 1e6})

    def test_wrong_family_instance(self):
        with pytest.raises(ValueError):
            correction_from_config('tip', PrandtlGlauert())


class TestCalculator:
    """Test correction chain on a rotor"""

    def test_order_mach_then_reynolds(self):
        rotor = Rotor(
            Rhub=0.1, Rtip=1.0, B=3,
            mach_correction=PrandtlGlauert(),
            re_correction=SkinFriction(Re0=1e6, p=0.2),
        )
        cl, cd = apply_airfoil_corrections(rotor, 0.5, 0.01, 5e5, 0.6, 0.1, 0.5, 7.0, 0.1, 0.2)
        assert cl == pytest.approx(0.625)
        assert cd == pytest.approx(0.01 * 2**0.2)

    def test_tip_loss_factor_uses_rotor(self):
        rotor = Rotor(Rhub=0.1, Rtip=1.0, B=3, tip_correction=NoTipCorrection())
        assert tip_loss_factor(rotor, 0.5, 0.3) == 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
