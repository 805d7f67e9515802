"""Arbitrary-precision non-negative decimal integers.

This module provides BigDecimal, a mutable decimal integer stored as a
buffer of digit characters plus an orientation flag:
- lsd_first=False: buffer holds the most significant digit first
- lsd_first=True: buffer holds the least significant digit first

Carry-propagating operations (increment, addition, subtraction) want the
units digit at index 0, while construction from text and display want it
last. Instead of reversing on every call, the buffer is reoriented only
when an algorithm needs to grow it at the least significant end, and all
digit reads go through a single logical-position to physical-index
mapping.

Usage pattern:
    from digitnum import BigDecimal

    a = BigDecimal("999999999999999999999999999999")
    a += 1
    str(a)  # "1000000000000000000000000000000"

    b = BigDecimal(30) - BigDecimal(10)
    b *= 2          # 40
    b <<= 3         # 40000
    b.decrement()   # 39999

Subtracting a larger value or decrementing zero raises Underflow.
"""

from __future__ import annotations

import sys
from typing import TextIO

import structlog

from digitnum.config import ArithmeticConfig, MultiplyStrategy, get_default_config
from digitnum.errors import NegativeValue, Underflow
from digitnum.types import DIGIT_CHARS, validate_digit_string

logger = structlog.get_logger()

_ZERO = "0"
_NINE = "9"
_DIGIT_VALUE = {ch: value for value, ch in enumerate(DIGIT_CHARS)}


class BigDecimal:
    """Non-negative decimal integer of unbounded size.

    Values are mutable: the in-place operators (+=, -=, *=, <<=, >>=) and
    increment()/decrement() update the instance itself, while the binary
    operators return a new instance. Because they are mutable, instances
    are not hashable.

    Equality and ordering are defined on the numeric value; two instances
    with different orientations compare equal when they denote the same
    number. Plain non-negative ints are accepted on either side of every
    arithmetic and comparison operator.

    Invariant: after every public operation the buffer is canonical, i.e.
    either empty (zero) or its most significant digit is not '0'.
    """

    __slots__ = ("_digits", "_reversed")
    _digits: list[str]
    _reversed: bool

    def __init__(
        self, value: int | str | BigDecimal | None = None, lsd_first: bool = False
    ) -> None:
        """Create a BigDecimal.

        Args:
            value: Non-negative int, digit string, or BigDecimal to copy.
                None (the default) creates zero.
            lsd_first: For digit strings only, True if the string lists the
                least significant digit first

        Raises:
            MalformedDigits: If a digit string contains a non-digit symbol
            NegativeValue: If an int source is negative
            TypeError: If value has an unsupported type
        """
        self._digits = []
        self._reversed = False
        if value is not None:
            self.assign(value, lsd_first)

    def assign(self, value: int | str | BigDecimal, lsd_first: bool = False) -> BigDecimal:
        """Replace the value in place.

        An int, or a string without lsd_first, leaves the buffer most
        significant digit first. A BigDecimal source keeps its orientation.

        Returns:
            self, for chaining

        Raises:
            MalformedDigits: If a digit string contains a non-digit symbol
            NegativeValue: If an int source is negative
            TypeError: If value has an unsupported type
        """
        if isinstance(value, BigDecimal):
            if lsd_first:
                raise TypeError("lsd_first applies only to digit strings")
            if value is not self:
                self._digits = list(value._digits)
                self._reversed = value._reversed
            return self

        if isinstance(value, str):
            self._digits = list(validate_digit_string(value))
            self._reversed = lsd_first
        elif isinstance(value, int) and not isinstance(value, bool):
            if lsd_first:
                raise TypeError("lsd_first applies only to digit strings")
            if value < 0:
                raise NegativeValue(f"BigDecimal cannot be negative: {value}")
            self._digits = list(str(value))
            self._reversed = False
        else:
            raise TypeError(
                f"BigDecimal requires int, str or BigDecimal, got {type(value).__name__}"
            )

        self.trim()
        return self

    def copy(self) -> BigDecimal:
        """Return an independent copy with the same orientation."""
        result = BigDecimal.__new__(BigDecimal)
        result._digits = list(self._digits)
        result._reversed = self._reversed
        return result

    def __copy__(self) -> BigDecimal:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> BigDecimal:
        return self.copy()

    # --- Representation ---

    @property
    def lsd_first(self) -> bool:
        """True if the buffer currently stores the least significant digit first."""
        return self._reversed

    @property
    def num_digits(self) -> int:
        """Number of stored digits (0 for zero)."""
        return len(self._digits)

    def _index(self, position: int) -> int:
        """Map a logical position (0 = units digit) to a buffer index."""
        if self._reversed:
            return position
        return len(self._digits) - 1 - position

    def _digit(self, position: int) -> int:
        """Digit value at a logical position, 0 past the most significant digit."""
        if position >= len(self._digits):
            return 0
        return _DIGIT_VALUE[self._digits[self._index(position)]]

    def reverse(self) -> None:
        """Physically reverse the buffer and flip the orientation.

        The numeric value does not change.
        """
        self._digits.reverse()
        self._reversed = not self._reversed

    def _orient_lsd_first(self) -> None:
        if not self._reversed:
            self.reverse()

    def trim(self) -> None:
        """Drop zero digits from the most significant end.

        The orientation is preserved: zeros are popped from the back of a
        least-significant-first buffer and sliced off the front otherwise.
        """
        digits = self._digits
        if self._reversed:
            while digits and digits[-1] == _ZERO:
                digits.pop()
            return

        leading = 0
        while leading < len(digits) and digits[leading] == _ZERO:
            leading += 1
        if leading:
            del digits[:leading]

    def _pad_to(self, length: int) -> None:
        """Widen the buffer to length digits with high-order zeros.

        Leaves the buffer least significant digit first, so the zeros land
        at the physical back.
        """
        if length < len(self._digits):
            raise ValueError(f"Cannot pad {len(self._digits)} digits down to {length}")
        if length == len(self._digits):
            return
        self._orient_lsd_first()
        self._digits.extend(_ZERO * (length - len(self._digits)))

    def clear(self) -> None:
        """Reset to zero (empty buffer, most significant digit first)."""
        self._digits = []
        self._reversed = False

    def __str__(self) -> str:
        if not self._digits:
            return _ZERO
        if self._reversed:
            return "".join(self._digits[::-1])
        return "".join(self._digits)

    def __repr__(self) -> str:
        return f"BigDecimal('{self}')"

    def __int__(self) -> int:
        return int(str(self))

    def print(self, file: TextIO | None = None) -> None:
        """Write the decimal text to file (default: sys.stdout)."""
        out = sys.stdout if file is None else file
        out.write(str(self))

    def println(self, file: TextIO | None = None) -> None:
        """Write the decimal text and a newline to file (default: sys.stdout)."""
        out = sys.stdout if file is None else file
        out.write(str(self))
        out.write("\n")

    # --- Ordering ---

    def _compare_digits(self, other: BigDecimal) -> int:
        # Canonical buffers: more digits means a larger value
        if len(self._digits) != len(other._digits):
            return -1 if len(self._digits) < len(other._digits) else 1

        for position in range(len(self._digits) - 1, -1, -1):
            mine = self._digits[self._index(position)]
            theirs = other._digits[other._index(position)]
            if mine != theirs:
                return -1 if mine < theirs else 1
        return 0

    def _ordering(self, other: object) -> int | None:
        if isinstance(other, BigDecimal):
            return self._compare_digits(other)
        if isinstance(other, int) and not isinstance(other, bool):
            if other < 0:
                return 1
            return self._compare_digits(BigDecimal(other))
        return None

    def compare(self, other: BigDecimal | int) -> int:
        """Three-way comparison by numeric value.

        Returns:
            -1 if self < other, 0 if equal, +1 if self > other

        Raises:
            TypeError: If other is not a BigDecimal or int
        """
        result = self._ordering(other)
        if result is None:
            raise TypeError(f"Cannot compare BigDecimal with {type(other).__name__}")
        return result

    def __eq__(self, other: object) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __lt__(self, other: BigDecimal | int) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: BigDecimal | int) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: BigDecimal | int) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: BigDecimal | int) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def is_zero(self) -> bool:
        """True if every stored digit is '0' or the buffer is empty."""
        return all(ch == _ZERO for ch in self._digits)

    def is_one(self) -> bool:
        """True if the value is exactly one."""
        if self.is_zero():
            return False
        copy = self.copy()
        copy.decrement()
        return copy.is_zero()

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero()

    # --- Increment / decrement ---

    def increment(self) -> BigDecimal:
        """Add one in place (prefix increment).

        Returns:
            self
        """
        self._orient_lsd_first()
        digits = self._digits
        for index, ch in enumerate(digits):
            if ch != _NINE:
                digits[index] = DIGIT_CHARS[_DIGIT_VALUE[ch] + 1]
                return self
            digits[index] = _ZERO
        digits.append("1")
        return self

    def decrement(self) -> BigDecimal:
        """Subtract one in place (prefix decrement).

        Returns:
            self

        Raises:
            Underflow: If the value is zero
        """
        if self.is_zero():
            logger.debug("big_decimal_underflow", operation="decrement")
            raise Underflow("Underflow: cannot decrement 0")

        self._orient_lsd_first()
        digits = self._digits
        for index, ch in enumerate(digits):
            if ch != _ZERO:
                digits[index] = DIGIT_CHARS[_DIGIT_VALUE[ch] - 1]
                break
            digits[index] = _NINE
        self.trim()
        return self

    def post_increment(self) -> BigDecimal:
        """Add one in place and return a copy of the previous value (postfix increment)."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> BigDecimal:
        """Subtract one in place and return a copy of the previous value (postfix decrement).

        Raises:
            Underflow: If the value is zero
        """
        previous = self.copy()
        self.decrement()
        return previous

    # --- Additive arithmetic ---

    def _add(self, other: BigDecimal) -> None:
        if len(self._digits) < len(other._digits):
            self._pad_to(len(other._digits))
        self._orient_lsd_first()

        # other is read through its own mapping, so it is never reoriented.
        # Reads of position i happen before the write, so other may be self.
        digits = self._digits
        carry = 0
        for position in range(len(digits)):
            total = _DIGIT_VALUE[digits[position]] + other._digit(position) + carry
            digits[position] = DIGIT_CHARS[total % 10]
            carry = total // 10
        if carry:
            digits.append("1")
        self.trim()

    def _subtract(self, other: BigDecimal) -> None:
        if len(other._digits) > len(self._digits):
            self._raise_subtract_underflow(other)

        self._orient_lsd_first()

        result = []
        borrow = 0
        for position, ch in enumerate(self._digits):
            diff = _DIGIT_VALUE[ch] - other._digit(position) - borrow
            result.append(DIGIT_CHARS[(diff + 10) % 10])
            borrow = 1 if diff < 0 else 0
        if borrow:
            self._raise_subtract_underflow(other)

        self._digits = result
        self.trim()

    def _raise_subtract_underflow(self, other: BigDecimal) -> None:
        logger.debug(
            "big_decimal_underflow",
            operation="subtract",
            minuend_digits=len(self._digits),
            subtrahend_digits=len(other._digits),
        )
        raise Underflow(f"Underflow: {self} - {other} is negative")

    def __iadd__(self, other: BigDecimal | int) -> BigDecimal:
        rhs = _as_big_decimal(other)
        if rhs is None:
            return NotImplemented
        self._add(rhs)
        return self

    def __isub__(self, other: BigDecimal | int) -> BigDecimal:
        """Subtract in place.

        Raises:
            Underflow: If other is larger than self (value is left unchanged)
        """
        rhs = _as_big_decimal(other)
        if rhs is None:
            return NotImplemented
        self._subtract(rhs)
        return self

    def __add__(self, other: BigDecimal | int) -> BigDecimal:
        rhs = _as_big_decimal(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result._add(rhs)
        return result

    def __radd__(self, other: int) -> BigDecimal:
        result = _as_big_decimal(other)
        if result is None:
            return NotImplemented
        result._add(self)
        return result

    def __sub__(self, other: BigDecimal | int) -> BigDecimal:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        rhs = _as_big_decimal(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result._subtract(rhs)
        return result

    def __rsub__(self, other: int) -> BigDecimal:
        """Subtract self from other (other - self).

        Raises:
            Underflow: If result would be negative
        """
        result = _as_big_decimal(other)
        if result is None:
            return NotImplemented
        result._subtract(self)
        return result

    # --- Multiplicative arithmetic ---

    def multiply(
        self, other: BigDecimal | int, config: ArithmeticConfig | None = None
    ) -> BigDecimal:
        """Multiply in place using the configured strategy.

        With MultiplyStrategy.REPEATED_ADDITION (the default) the cost is
        proportional to the numeric value of the smaller operand: fine for
        multipliers in the thousands, impractical for large ones. Use
        MultiplyStrategy.LONG for large operands.

        Args:
            other: Multiplier
            config: Arithmetic config (default: get_default_config())

        Returns:
            self

        Raises:
            TypeError: If other is not a BigDecimal or int
        """
        rhs = _as_big_decimal(other)
        if rhs is None:
            raise TypeError(f"Cannot multiply BigDecimal by {type(other).__name__}")
        cfg = get_default_config() if config is None else config

        logger.debug(
            "big_decimal_multiply",
            strategy=cfg.multiply_strategy.value,
            lhs_digits=len(self._digits),
            rhs_digits=len(rhs._digits),
        )

        if cfg.multiply_strategy is MultiplyStrategy.LONG:
            product = self._long_product(rhs)
        else:
            product = self._repeated_addition_product(rhs, cfg.repeated_addition_warn_limit)

        self._digits = product._digits
        self._reversed = product._reversed
        return self

    def _repeated_addition_product(self, other: BigDecimal, warn_limit: int) -> BigDecimal:
        # Count down the smaller operand, adding the larger one each step
        if self._compare_digits(other) < 0:
            counter, addend = self.copy(), other
        else:
            counter, addend = other.copy(), self

        if counter > warn_limit:
            logger.warning(
                "repeated_addition_large_counter",
                counter_digits=len(counter._digits),
                warn_limit=warn_limit,
            )

        counter._orient_lsd_first()
        product = BigDecimal()
        while counter:
            product._add(addend)
            counter.decrement()
        return product

    def _long_product(self, other: BigDecimal) -> BigDecimal:
        product = BigDecimal()
        if self.is_zero() or other.is_zero():
            return product

        lhs = [self._digit(position) for position in range(len(self._digits))]
        rhs = [other._digit(position) for position in range(len(other._digits))]

        # An n-digit by m-digit product has at most n + m digits
        columns = [0] * (len(lhs) + len(rhs))
        for i, x in enumerate(lhs):
            if x == 0:
                continue
            carry = 0
            for j, y in enumerate(rhs):
                total = columns[i + j] + x * y + carry
                columns[i + j] = total % 10
                carry = total // 10
            k = i + len(rhs)
            while carry:
                total = columns[k] + carry
                columns[k] = total % 10
                carry = total // 10
                k += 1

        product._digits = [DIGIT_CHARS[d] for d in columns]
        product._reversed = True
        product.trim()
        return product

    def __imul__(self, other: BigDecimal | int) -> BigDecimal:
        if _as_big_decimal(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: BigDecimal | int) -> BigDecimal:
        if _as_big_decimal(other) is None:
            return NotImplemented
        return self.copy().multiply(other)

    def __rmul__(self, other: int) -> BigDecimal:
        result = _as_big_decimal(other)
        if result is None:
            return NotImplemented
        return result.multiply(self)

    # --- Power-of-ten shifts ---

    def __ilshift__(self, count: int) -> BigDecimal:
        """Multiply by 10**count in place by appending zero digits.

        Raises:
            ValueError: If count is negative
        """
        if not isinstance(count, int) or isinstance(count, bool):
            return NotImplemented
        if count < 0:
            raise ValueError(f"Shift count cannot be negative: {count}")

        zeros = [_ZERO] * count
        if self._reversed:
            self._digits[:0] = zeros
        else:
            self._digits.extend(zeros)
        # Shifting zero must not leave a run of zeros behind
        self.trim()
        return self

    def __irshift__(self, count: int) -> BigDecimal:
        """Integer-divide by 10**count in place, discarding the dropped digits.

        Raises:
            ValueError: If count is negative
        """
        if not isinstance(count, int) or isinstance(count, bool):
            return NotImplemented
        if count < 0:
            raise ValueError(f"Shift count cannot be negative: {count}")

        if count > len(self._digits):
            self.clear()
        elif self._reversed:
            del self._digits[:count]
        else:
            del self._digits[len(self._digits) - count :]
        return self

    def __lshift__(self, count: int) -> BigDecimal:
        result = self.copy()
        return result.__ilshift__(count)

    def __rshift__(self, count: int) -> BigDecimal:
        result = self.copy()
        return result.__irshift__(count)


def _as_big_decimal(value: object) -> BigDecimal | None:
    """Return value as a BigDecimal, or None if it has an unsupported type.

    Ints are converted with the integer constructor (a new instance);
    BigDecimal values are returned as-is.

    Raises:
        NegativeValue: If value is a negative int
    """
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigDecimal(value)
    return None
