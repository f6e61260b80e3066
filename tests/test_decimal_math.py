"""十進位數學函數測試"""

import decimal
import math
from decimal import Decimal

import pytest

from geodatum import GeoArgumentError
from geodatum.core.geometry import decimal_math as dm


class TestMakeContext:

    def test_precision_and_rounding(self):
        ctx = dm.make_context(20, 'HALF_UP')
        assert ctx.prec == 20
        assert ctx.rounding == decimal.ROUND_HALF_UP

    def test_defaults(self):
        assert dm.DATUM_CONTEXT.prec == 34
        assert dm.AGGREGATE_CONTEXT.prec == 16
        assert dm.DATUM_CONTEXT.rounding == decimal.ROUND_HALF_EVEN

    @pytest.mark.parametrize('precision', [0, 6, 51])
    def test_precision_out_of_range(self, precision):
        with pytest.raises(ValueError):
            dm.make_context(precision)

    def test_unknown_rounding(self):
        with pytest.raises(ValueError):
            dm.make_context(20, 'CEILING')

    @pytest.mark.parametrize('precision', ['40', 40.0, True, None])
    def test_precision_must_be_int(self, precision):
        with pytest.raises(ValueError):
            dm.make_context(precision)

    @pytest.mark.parametrize('rounding', [None, 1, ['HALF_UP']])
    def test_rounding_must_be_name(self, rounding):
        with pytest.raises(ValueError):
            dm.make_context(20, rounding)


class TestToDecimal:

    def test_float_goes_through_str(self):
        assert dm.to_decimal(0.1) == Decimal('0.1')

    def test_passthrough(self):
        value = Decimal('1.25')
        assert dm.to_decimal(value) is value

    @pytest.mark.parametrize('value', [None, True, 'x', float('nan'), Decimal('Infinity'), object()])
    def test_rejects(self, value):
        with pytest.raises(GeoArgumentError):
            dm.to_decimal(value)


class TestTrig:

    @pytest.mark.parametrize('x', ['0', '0.5', '1', '-2.5', '3.14159', '10', '-123.456', '1000'])
    def test_sin_matches_float(self, x):
        result = dm.sin(Decimal(x), dm.DATUM_CONTEXT)
        assert float(result) == pytest.approx(math.sin(float(x)), abs=1e-12)

    @pytest.mark.parametrize('x', ['0', '0.5', '1', '-2.5', '3.14159', '10', '-123.456', '1000'])
    def test_cos_matches_float(self, x):
        result = dm.cos(Decimal(x), dm.DATUM_CONTEXT)
        assert float(result) == pytest.approx(math.cos(float(x)), abs=1e-12)

    def test_pythagorean_identity(self):
        ctx = dm.DATUM_CONTEXT
        x = Decimal('0.6963')
        s = dm.sin(x, ctx)
        c = dm.cos(x, ctx)
        identity = ctx.add(ctx.multiply(s, s), ctx.multiply(c, c))
        assert abs(identity - 1) < Decimal('1e-30')

    def test_result_rounded_to_context(self):
        ctx = dm.make_context(10)
        result = dm.sin(Decimal(1), ctx)
        assert len(result.as_tuple().digits) <= 10

    def test_pi_digits(self):
        assert str(dm.pi(dm.make_context(10))) == '3.141592654'

    def test_ignores_thread_context(self):
        x = Decimal('0.75')
        expected = dm.sin(x, dm.DATUM_CONTEXT)
        with decimal.localcontext() as local:
            local.prec = 3
            assert dm.sin(x, dm.DATUM_CONTEXT) == expected
