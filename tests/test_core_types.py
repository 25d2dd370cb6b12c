import dataclasses
import math
from decimal import Decimal

import pytest

from physunits.config import ToleranceConfig
from physunits.measures import Length, Mass, Time


class TestConstruction:
    def test_base_value_is_float(self) -> None:
        length = Length(5)
        assert length.base_value == 5.0
        assert type(length.base_value) is float

    def test_from_base_value(self) -> None:
        assert Length.from_base_value(2.5) == Length(2.5)

    def test_from_unit(self) -> None:
        assert Length.from_unit(2.0, 1000.0).base_value == pytest.approx(2000.0)

    def test_non_finite_accepted(self) -> None:
        assert math.isinf(Mass(float("inf")).base_value)
        assert math.isnan(Mass(float("nan")).base_value)

    def test_negative_accepted(self) -> None:
        assert Mass(-5.0).base_value == -5.0

    @pytest.mark.parametrize("value", ["5", None, (1.0,)])
    def test_non_number_rejected(self, value) -> None:
        with pytest.raises(TypeError):
            Length(value)

    def test_decimal_accepted(self) -> None:
        assert Length(Decimal("1.25")) == Length(1.25)

    def test_int_too_large_for_float_rejected(self) -> None:
        with pytest.raises(TypeError):
            Length(10**400)

    def test_immutable(self) -> None:
        length = Length(1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            length.base_value = 2.0  # type: ignore[misc]

    def test_to_factor(self) -> None:
        assert Length(1500.0).to(1000.0) == pytest.approx(1.5)


class TestComparison:
    def test_equal_by_value(self) -> None:
        assert Length(3.0) == Length(3.0)
        assert Length(3.0) != Length(4.0)

    def test_different_types_never_equal(self) -> None:
        assert Length(1.0) != Time(1.0)

    def test_ordering(self) -> None:
        assert Length(1.0) < Length(2.0)
        assert max(Length(1.0), Length(3.0), Length(2.0)) == Length(3.0)

    def test_ordering_different_types_raises(self) -> None:
        with pytest.raises(TypeError):
            _ = Length(1.0) < Time(2.0)

    def test_hashable(self) -> None:
        assert len({Length(1.0), Length(1.0), Length(2.0)}) == 2

    def test_nan_never_equal_even_same_object(self) -> None:
        x = float("nan")
        a = Length(x)
        assert Length(x) != Length(x)
        assert not (a == a)
        assert not (a <= a)
        assert not (a >= a)
        assert not (a < Length(1.0))

    def test_ordering_operators(self) -> None:
        assert Length(1.0) <= Length(1.0)
        assert Length(2.0) >= Length(1.0)
        assert Length(2.0) > Length(1.0)
        assert sorted([Length(3.0), Length(1.0), Length(2.0)]) == [Length(1.0), Length(2.0), Length(3.0)]

    def test_isclose_default_tolerance(self) -> None:
        assert Length(0.1 + 0.2).isclose(Length(0.3))
        assert not Length(1.0).isclose(Length(1.001))

    def test_isclose_explicit_tolerance(self) -> None:
        assert Length(1.0).isclose(Length(1.001), rel_tol=1e-2)
        assert Length(0.0).isclose(Length(1e-12), abs_tol=1e-9)

    def test_isclose_different_types_raises(self) -> None:
        with pytest.raises(TypeError):
            Length(1.0).isclose(Time(1.0))


class TestArithmetic:
    def test_add_subtract(self) -> None:
        assert Length(2.0) + Length(3.0) == Length(5.0)
        assert Length(2.0) - Length(3.0) == Length(-1.0)
        assert Length(2.0).add(Length(1.0)) == Length(3.0)
        assert Length(2.0).subtract(Length(1.0)) == Length(1.0)

    def test_scalar_multiply_both_sides(self) -> None:
        assert Length(2.0) * 3 == Length(6.0)
        assert 3 * Length(2.0) == Length(6.0)
        assert Length(2.0).multiply(0.5) == Length(1.0)

    def test_scalar_divide(self) -> None:
        assert Length(6.0) / 3.0 == Length(2.0)
        assert Length(6.0).divide(4.0) == Length(1.5)

    def test_ratio_of_same_type(self) -> None:
        ratio = Length(6.0) / Length(3.0)
        assert isinstance(ratio, float)
        assert ratio == pytest.approx(2.0)
        assert Length(1.0).divide_by(Length(4.0)) == pytest.approx(0.25)

    def test_neg_abs(self) -> None:
        assert -Length(2.0) == Length(-2.0)
        assert abs(Length(-2.0)) == Length(2.0)

    def test_result_is_new_instance(self) -> None:
        a = Length(1.0)
        b = a + Length(0.0)
        assert b == a
        assert b is not a

    def test_mixing_quantities_raises(self) -> None:
        with pytest.raises(TypeError):
            _ = Length(1.0) + Time(1.0)
        with pytest.raises(TypeError):
            Length(1.0).add(Mass(1.0))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            _ = Length(1.0) * Length(2.0)

    def test_decimal_scalar(self) -> None:
        assert Length(2.0) * Decimal("1.5") == Length(3.0)
        assert Length(3.0) / Decimal("2") == Length(1.5)

    def test_scalar_too_large_for_float_rejected(self) -> None:
        with pytest.raises(TypeError):
            _ = Length(1.0) * 10**400
        with pytest.raises(TypeError):
            Length(1.0).divide(10**400)

    def test_scalar_division_by_zero(self) -> None:
        assert Length(1.0) / 0.0 == Length(math.inf)
        assert math.isnan((Length(0.0) / 0).base_value)

    def test_ratio_division_by_zero(self) -> None:
        assert Length(-1.0) / Length(0.0) == -math.inf
        assert math.isnan(Length(0.0).divide_by(Length(0.0)))


class TestToleranceConfig:
    def test_defaults(self) -> None:
        cfg = ToleranceConfig()
        assert cfg.rel_tol == pytest.approx(1e-9)
        assert cfg.abs_tol == 0.0

    @pytest.mark.parametrize("rel_tol,abs_tol", [(-1e-9, 0.0), (1e-9, -1.0)])
    def test_invariants(self, rel_tol: float, abs_tol: float) -> None:
        with pytest.raises(ValueError):
            ToleranceConfig(rel_tol=rel_tol, abs_tol=abs_tol)
