"""The Suzy hardware math unit: 16x16 multiply and 32/16 divide."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple, Union

_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


class MathRegister(str, Enum):
    """The byte-wide math registers.

    ``AB * CD -> EFGH`` (accumulated into ``JKLM``) and
    ``EFGH / NP -> ABCD`` with the remainder in ``JKLM``.
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    P = "P"


# Register -> (attribute holding the 32-bit value, bit shift of the byte)
_LAYOUT: Dict[MathRegister, Tuple[str, int]] = {
    MathRegister.D: ("abcd", 0),
    MathRegister.C: ("abcd", 8),
    MathRegister.B: ("abcd", 16),
    MathRegister.A: ("abcd", 24),
    MathRegister.H: ("efgh", 0),
    MathRegister.G: ("efgh", 8),
    MathRegister.F: ("efgh", 16),
    MathRegister.E: ("efgh", 24),
    MathRegister.M: ("jklm", 0),
    MathRegister.L: ("jklm", 8),
    MathRegister.K: ("jklm", 16),
    MathRegister.J: ("jklm", 24),
    MathRegister.P: ("np", 0),
    MathRegister.N: ("np", 8),
}


def _sign_convert(word: int) -> Tuple[int, int]:
    """Return (magnitude, sign) of a 16-bit value as the hardware sees it.

    The hardware tests the sign after subtracting one, so 0x8000 counts
    as positive and 0x0000 as negative.
    """
    if (word - 1) & 0x8000:
        return ((word ^ _U16) + 1) & _U16, -1
    return word, 1


class MathUnit:
    """Register-level model of the math coprocessor."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Put every register in its power-on state."""
        # All ones at start-up; some software depends on it.
        self.abcd = _U32
        self.efgh = _U32
        self.jklm = _U32
        self.np = _U16
        self.ab_sign = 1
        self.cd_sign = 1
        self.efgh_sign = 1
        self.signed_math = False
        self.accumulate = False
        self.mathbit = False
        self.last_carry = False
        self.math_in_progress = False

    @property
    def ab(self) -> int:
        return (self.abcd >> 16) & _U16

    @ab.setter
    def ab(self, value: int) -> None:
        self.abcd = (self.abcd & _U16) | ((value & _U16) << 16)

    @property
    def cd(self) -> int:
        return self.abcd & _U16

    @cd.setter
    def cd(self, value: int) -> None:
        self.abcd = (self.abcd & 0xFFFF0000) | (value & _U16)

    def _set_byte(self, register: MathRegister, data: int) -> None:
        attr, shift = _LAYOUT[register]
        current = getattr(self, attr)
        current = (current & ~(0xFF << shift)) | ((data & 0xFF) << shift)
        setattr(self, attr, current & _U32)

    def poke(self, register: Union[str, MathRegister], data: int) -> None:
        """Write one math register, with the hardware's side effects."""
        register = MathRegister(register)
        data &= 0xFF
        self._set_byte(register, data)

        if register is MathRegister.D:
            # Writing D also writes C with zero, which redoes the sign.
            self.poke(MathRegister.C, 0)
        elif register is MathRegister.C:
            if self.signed_math:
                self.cd, self.cd_sign = _sign_convert(self.cd)
        elif register is MathRegister.B:
            self._set_byte(MathRegister.A, 0)
        elif register is MathRegister.A:
            if self.signed_math:
                self.ab, self.ab_sign = _sign_convert(self.ab)
            self.multiply()
        elif register is MathRegister.P:
            self._set_byte(MathRegister.N, 0)
        elif register is MathRegister.H:
            self._set_byte(MathRegister.G, 0)
        elif register is MathRegister.F:
            self._set_byte(MathRegister.E, 0)
        elif register is MathRegister.E:
            self.divide()
        elif register is MathRegister.M:
            self._set_byte(MathRegister.L, 0)
            self.mathbit = False
        elif register is MathRegister.K:
            self._set_byte(MathRegister.J, 0)

    def peek(self, register: Union[str, MathRegister]) -> int:
        """Read one math register byte."""
        attr, shift = _LAYOUT[MathRegister(register)]
        return (getattr(self, attr) >> shift) & 0xFF

    def multiply(self) -> None:
        """AB * CD into EFGH, negated for a negative signed result,
        added into JKLM when accumulating."""
        self.mathbit = False
        self.efgh = (self.ab * self.cd) & _U32
        if self.signed_math:
            self.efgh_sign = self.ab_sign + self.cd_sign
            if not self.efgh_sign:
                self.efgh = ((self.efgh ^ _U32) + 1) & _U32
        if self.accumulate:
            self.jklm = (self.jklm + self.efgh) & _U32

    def divide(self) -> None:
        """Unsigned EFGH / NP: quotient to ABCD, remainder to JKLM.

        Dividing by zero gives an all-ones quotient, zero remainder and
        sets the math bit.
        """
        self.mathbit = False
        if self.np:
            self.abcd = (self.efgh // self.np) & _U32
            self.jklm = (self.efgh % self.np) & _U32
        else:
            self.abcd = _U32
            self.jklm = 0
            self.mathbit = True