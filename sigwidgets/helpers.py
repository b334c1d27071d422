"""Formatting and small numeric helpers shared by the widgets."""

from __future__ import annotations

import math
import re
import sys
import time
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

_EPSILON = sys.float_info.epsilon

_SUPER_INDEX = str.maketrans("0123456789+-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁺⁻")

_SUB_MULTIPLIERS = (1.0, 1e3, 1e6, 1e9, 1e12, 1e15)
_SUPER_MULTIPLIERS = (1.0, 1e-3, 1e-6, 1e-9, 1e-12)

_FILTER_EXTENSION = re.compile(r".*\(\*\.([a-zA-Z0-9]*)\)")

DEGREE_SIGN = "º"


@dataclass
class KahanState:
    """Running compensated sums for mean and RMS computation."""

    mean_sum: complex = 0j
    mean_c: complex = 0j
    rms_sum: float = 0.0
    rms_c: float = 0.0
    count: int = 0


def _log10(value: float) -> float:
    """log10 that yields -inf for zero and nan for nan instead of raising."""
    if math.isnan(value):
        return math.nan
    if value == 0:
        return -math.inf
    return math.log10(value)


def _floor(value: float) -> float:
    if math.isfinite(value):
        return float(math.floor(value))
    return value


def _round_half_away(value: float) -> int:
    if value < 0:
        return -_round_half_away(-value)
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def _number(value: float) -> str:
    """Shortest general representation, six significant digits."""
    return format(value, "g")


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _trunc_div(a: int, b: int) -> int:
    return int(a / b)


def to_super_index(text: str) -> str:
    """Replace digits and signs with their superscript forms."""
    return text.translate(_SUPER_INDEX)


def format_power_of_10(value: float) -> str:
    """Format a value as mantissa × 10^exponent, in engineering style."""
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"

    exponent = _floor(_log10(abs(value)))
    have_exponent = math.isfinite(exponent)

    if have_exponent:
        i_exponent = int(exponent)
        if 0 <= i_exponent < 3:
            i_exponent = 0
        have_exponent = i_exponent != 0
    else:
        i_exponent = 0

    mantissa = value / (10.0 ** i_exponent)
    result = _number(mantissa)

    if have_exponent:
        result = "" if result == "1" else result + "×"
        result += "10" + to_super_index(_number(exponent))

    return result


def format_binary_quantity(quantity: int, units: str = "B") -> str:
    """Format a quantity with binary (Ki, Mi, Gi) prefixes."""
    magnitude = abs(quantity)

    if magnitude < 1 << 10:
        return f"{quantity} " + ("bytes" if units == "B" else units)
    if magnitude < 1 << 20:
        return f"{quantity / (1 << 10):.3f} Ki{units}"
    if magnitude < 1 << 30:
        return f"{quantity / (1 << 20):.3f} Mi{units}"
    return f"{quantity / (1 << 30):.3f} Gi{units}"


def _split_decimal(value: float, precision: int) -> Tuple[int, int]:
    seconds = int(math.floor(value))
    frac = value - seconds
    decimal_part = 0

    if precision > 0:
        multiplier = 10.0 ** (precision - 1)
        decimal_part = _round_half_away(multiplier * frac)
        if abs(decimal_part - multiplier) < 1:
            decimal_part = 0
            seconds += 1

    return seconds, decimal_part


def _format_seconds(value: float, precision: int, digits: int) -> str:
    seconds, decimal_part = _split_decimal(value, precision)

    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    seconds %= 60
    minutes %= 60
    hours %= 24

    if days > 0:
        text = f"{days}d {hours}:{minutes:02d}:{seconds:02d}"
        if days >= 10:
            precision -= 8
            decimal_part //= 10_000_000
        else:
            precision -= 7
            decimal_part //= 1_000_000
    elif hours > 0:
        text = f"{hours}:{minutes:02d}:{seconds:02d}"
        if hours >= 10:
            precision -= 6
            decimal_part //= 100_000
        else:
            precision -= 5
            decimal_part //= 10_000
    elif minutes > 0:
        text = f"{minutes}:{seconds:02d}"
        if minutes >= 10:
            precision -= 4
            decimal_part //= 1000
        else:
            precision -= 3
            decimal_part //= 100
    else:
        text = str(seconds)
        precision -= digits

    if precision > 0:
        text += f".{decimal_part:0{precision}d}"

    if minutes == 0 and hours == 0:
        text += " s"

    return text


def _format_unix(value: float, precision: int) -> str:
    seconds, decimal_part = _split_decimal(value, precision)
    text = time.strftime("%Y/%m/%d %H:%M:%S", time.localtime(seconds))
    if precision > 0:
        text += f".{decimal_part:0{precision}d}"
    return text


def _format_dms(value: float) -> str:
    degrees = int(value)
    value -= degrees
    minutes = int(value * 60)
    value -= minutes / 60.0
    seconds = int(value * 3600)
    return f"{degrees:02d}{DEGREE_SIGN} {minutes:02d}' {seconds:02d}\""


def format_quantity(
    value: float, precision: int, units: str = "s", sign: bool = False
) -> str:
    """Format a physical quantity with SI prefixes and special time/angle units."""
    if math.isinf(value):
        return ("-∞ " if value < 0 else "∞ ") + units
    if math.isnan(value):
        return "NaN " + units
    if abs(value) < _EPSILON:
        return "0 " + units

    text = ""

    if units in (DEGREE_SIGN, "deg"):
        if value < 0 and not sign:
            value += 360
        elif value > 180 and sign:
            value -= 360
        if value < 0:
            value = -value
            text += "-"
    else:
        if value < 0:
            value = -value
            text += "-"
        elif sign:
            text += "+"

    digits = int(math.floor(math.log10(value))) + 1

    if digits > 0:
        if units == "s":
            return text + _format_seconds(value, precision, digits)
        if units == "unix":
            return text + _format_unix(value, precision)
        if units == "deg":
            return text + _format_dms(value)

        multiplier = 10.0 ** (precision - 1)
        value = _round_half_away(value * multiplier) / multiplier

        prefix = _clamp((digits - 1) // 3, 0, 0 if units == "dB" else 4)
        digits -= 3 * prefix
        decimals = precision - digits if precision > digits else 0
        prefixes = ("", "k", "M", "G", "T")

        text += f"{value * _SUPER_MULTIPLIERS[prefix]:.{decimals}f}"
        return text + " " + prefixes[prefix] + units

    multiplier = 10.0 ** (precision - digits)
    value = _round_half_away(value * multiplier) / multiplier
    if value > 0:
        digits = int(math.floor(math.log10(value))) + 1

    prefix = _clamp(_trunc_div(3 - digits, 3), 0, 0 if units == "dB" else 5)
    digits += 3 * prefix
    decimals = precision - digits if precision > digits else 0
    prefixes = ("", "m", "µ", "n", "p", "f")

    text += f"{value * _SUB_MULTIPLIERS[prefix]:.{decimals}f}"
    return text + " " + prefixes[prefix] + units


def format_quantity_auto(value: float, units: str = "s") -> str:
    """Format a quantity with a precision derived from its own magnitude."""
    digits = 0
    if abs(value) > 0:
        digits = int(math.floor(math.log10(abs(value))))
    return format_quantity(value, digits, units)


def format_quantity_from_delta(
    value: float, delta: float, units: str = "s", sign: bool = False
) -> str:
    """Format a quantity with enough digits to resolve steps of size delta."""
    ratio = abs(value / delta)
    significant = 0
    if ratio >= 1:
        significant = int(math.ceil(math.log10(ratio))) + 1
    return format_quantity(value, significant, units, sign)


def ensure_extension(path: str, ext: str) -> str:
    """Append .ext to path if its file name has no suffix."""
    name = path.rpartition("/")[2]
    suffix = name.rpartition(".")[2] if "." in name else ""
    if not suffix:
        return f"{path}.{ext}"
    return path


def extract_filter_extension(filter_expr: str) -> str:
    """Extract the extension from a file dialog filter such as 'Text (*.txt)'."""
    match = _FILTER_EXTENSION.search(filter_expr)
    return match.group(1) if match else ""


def format_real(value: float) -> str:
    """Format a real number in %g style."""
    return "%g" % value


def format_complex(value: complex) -> str:
    """Format a complex number as 'a + bi' or 'a - bi'."""
    real, imag = value.real, value.imag
    if imag < 0:
        tail = " - " + format_real(-imag)
    else:
        tail = " + " + format_real(imag)
    return format_real(real) + tail + "i"


def format_scientific(value: float) -> str:
    """Format a number in signed, left-aligned scientific notation."""
    return "%+-14.6e" % value


def format_integer_part(value: float) -> str:
    """Format the floor of a number as an integer."""
    return str(math.floor(value))


def kahan_mean_and_rms(
    data: Iterable[complex], state: Optional[KahanState] = None
) -> Tuple[complex, float]:
    """Accumulate samples with Kahan summation and return (mean, rms).

    If a state is given it is updated in place, so successive calls
    continue the same running statistics.
    """
    if state is None:
        state = KahanState()

    added = 0
    for sample in data:
        sample = complex(sample)
        mean_y = sample - state.mean_c
        rms_y = (sample.real * sample.real + sample.imag * sample.imag) - state.rms_c

        mean_t = state.mean_sum + mean_y
        rms_t = state.rms_sum + rms_y

        state.mean_c = (mean_t - state.mean_sum) - mean_y
        state.rms_c = (rms_t - state.rms_sum) - rms_y

        state.mean_sum = mean_t
        state.rms_sum = rms_t
        added += 1

    state.count += added

    if state.count == 0:
        return complex(math.nan, math.nan), math.nan

    mean = state.mean_sum / state.count
    rms = math.sqrt(state.rms_sum / state.count)
    return mean, rms


def calc_limits(
    data: Iterable[complex], current: Optional[Tuple[complex, complex]] = None
) -> Tuple[complex, complex]:
    """Return the per-component (min, max) of the samples.

    Real and imaginary parts are bounded independently. If current limits
    are given, they are widened rather than started from scratch.
    """
    if current is not None:
        low, high = complex(current[0]), complex(current[1])
        min_real, min_imag = low.real, low.imag
        max_real, max_imag = high.real, high.imag
    else:
        min_real = min_imag = math.inf
        max_real = max_imag = -math.inf

    for sample in data:
        sample = complex(sample)
        min_real = min(min_real, sample.real)
        min_imag = min(min_imag, sample.imag)
        max_real = max(max_real, sample.real)
        max_imag = max(max_imag, sample.imag)

    return complex(min_real, min_imag), complex(max_real, max_imag)