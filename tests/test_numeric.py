#
# Datasize - Numeric Helpers Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from hypothesis import given
from hypothesis import strategies as st

# Local ----------------------------------------------------------------------------------------------------------------
from datasize.decimals import UnitDecimals
from datasize.numeric import EXA_BOUNDARIES, MAX_INT64, POWERS_OF_TEN, digit_count, exa_minor_digit
from datasize.units import Base, SizeUnit, PEBI


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDigitCount:

    @pytest.mark.parametrize("digits", range(1, 13))
    def test_boundaries(self, digits):
        """Exact counts at 10**(n-1) and 10**n - 1 for every supported width."""
        lowest = 0 if digits == 1 else 10 ** (digits - 1)
        highest = 10 ** digits - 1
        assert digit_count(lowest) == digits
        assert digit_count(highest) == digits
        assert digit_count(-highest) == digits

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(9, 1, id="9"),
            pytest.param(10, 2, id="10"),
            pytest.param(12, 2, id="12"),
            pytest.param(99, 2, id="99"),
            pytest.param(100, 3, id="100"),
            pytest.param(123_456, 6, id="123456"),
            pytest.param(1_234_567_890, 10, id="1234567890"),
            pytest.param(999_999_999_999, 12, id="max"),
            pytest.param(-7, 1, id="negative"),
        ],
    )
    def test_values(self, value, expected):
        assert digit_count(value) == expected

    @given(st.integers(min_value=-(10 ** 12) + 1, max_value=10 ** 12 - 1))
    def test_matches_str_length(self, value):
        assert digit_count(value) == len(str(abs(value)))

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(10 ** 12, id="1e12"),
            pytest.param(-(10 ** 12), id="minus-1e12"),
            pytest.param(MAX_INT64, id="max-int64"),
        ],
    )
    def test_too_large(self, value):
        with pytest.raises(ValueError, match="too large"):
            digit_count(value)

    @pytest.mark.parametrize("value", [1.0, "1", None, True])
    def test_type_error(self, value):
        with pytest.raises(TypeError):
            digit_count(value)


class TestExaMinorDigit:

    @pytest.mark.parametrize("base", list(Base))
    def test_boundaries_are_exact_tenths(self, base):
        """Each boundary is the smallest remainder whose first decimal is k."""
        divider = SizeUnit.EXA.threshold(base)
        for k, boundary in enumerate(EXA_BOUNDARIES[base], start=1):
            assert boundary * 10 // divider == k
            assert (boundary - 1) * 10 // divider == k - 1

    @pytest.mark.parametrize("base", list(Base))
    def test_bucket_edges(self, base):
        divider = SizeUnit.EXA.threshold(base)
        edges = [0, 1, divider - 1]
        for boundary in EXA_BOUNDARIES[base]:
            edges += [boundary - 1, boundary, boundary + 1]
        for remainder in edges:
            assert exa_minor_digit(remainder, base) == remainder * 10 // divider

    @given(data=st.data(), base=st.sampled_from(list(Base)))
    def test_matches_truncation(self, data, base):
        divider = SizeUnit.EXA.threshold(base)
        remainder = data.draw(st.integers(min_value=0, max_value=divider - 1))
        assert exa_minor_digit(remainder, base) == remainder * 10 // divider

    @pytest.mark.parametrize(
        "pebibytes, expected",
        [
            pytest.param(0, 0, id="zero"),
            pytest.param(100, 0, id="100-PiB"),
            pytest.param(102, 0, id="102-PiB"),
            pytest.param(103, 1, id="103-PiB"),
            pytest.param(512, 5, id="512-PiB"),
            pytest.param(1023, 9, id="1023-PiB"),
        ],
    )
    def test_binary_pebibytes(self, pebibytes, expected):
        assert exa_minor_digit(pebibytes * PEBI, Base.BINARY) == expected

    @pytest.mark.parametrize("base", list(Base))
    def test_out_of_range(self, base):
        with pytest.raises(ValueError):
            exa_minor_digit(-1, base)
        with pytest.raises(ValueError):
            exa_minor_digit(SizeUnit.EXA.threshold(base), base)


class TestOverflowBound:

    @pytest.mark.parametrize("base", list(Base))
    @pytest.mark.parametrize(
        "unit",
        [SizeUnit.KILO, SizeUnit.MEGA, SizeUnit.GIGA, SizeUnit.TERA, SizeUnit.PETA],
        ids=lambda u: u.name.lower(),
    )
    def test_worst_case_product_fits_int64(self, unit, base):
        """Largest remainder times 10**max_places stays within signed 64-bit range."""
        _, max_places = UnitDecimals.LIMITS[unit.name.lower()]
        worst_remainder = unit.threshold(base) - 1
        assert worst_remainder * POWERS_OF_TEN[max_places] <= MAX_INT64

    @pytest.mark.parametrize("base", list(Base))
    def test_exa_product_would_overflow(self, base):
        """Exa needs the bucket helper even for a single decimal place."""
        worst_remainder = SizeUnit.EXA.threshold(base) - 1
        assert SizeUnit.EXA.threshold(base) + worst_remainder <= MAX_INT64
        assert worst_remainder * 10 > MAX_INT64
