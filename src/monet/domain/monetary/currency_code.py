from __future__ import annotations

from typing import Final

from monet.domain.errors import InvalidCodeError

CODE_LENGTH: Final[int] = 3
_ALLOWED_BYTES: Final[frozenset[int]] = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ")


class CurrencyCode:
    """Three-letter currency identifier such as `USD` or `CHF`.

    Stored as exactly 3 bytes, each an uppercase ASCII letter. Lowercase input is
    rejected rather than normalized, so `CurrencyCode.from_str(code.to_str()) == code`
    holds for every valid code.

    Attributes:
        code (bytes): The raw 3-byte code.
    """

    __slots__ = ("_code",)

    def __init__(self, code: bytes):
        """Initialize from raw bytes.

        Args:
            code: Exactly 3 bytes from `A-Z`.

        Raises:
            InvalidCodeError: If $code is not 3 uppercase ASCII letters.
        """
        # Raise: code must be 3 bytes from the A-Z alphabet
        if not isinstance(code, (bytes, bytearray)) or len(code) != CODE_LENGTH or any(b not in _ALLOWED_BYTES for b in code):
            raise InvalidCodeError(code)

        self._code = bytes(code)

    @classmethod
    def from_str(cls, code: str) -> CurrencyCode:
        """Parse a currency code from a string like "USD".

        Raises:
            InvalidCodeError: If $code is not a str of exactly 3 uppercase ASCII letters.
        """
        if not isinstance(code, str) or not code.isascii():
            raise InvalidCodeError(code)
        try:
            return cls(code.encode("ascii"))
        except InvalidCodeError:
            raise InvalidCodeError(code) from None

    @classmethod
    def coerce(cls, code: CurrencyCode | str) -> CurrencyCode:
        """Return $code as CurrencyCode, parsing it when given as str."""
        if isinstance(code, CurrencyCode):
            return code
        return cls.from_str(code)

    @property
    def code(self) -> bytes:
        return self._code

    def as_bytes(self) -> bytes:
        return self._code

    def to_str(self) -> str:
        """Return the code as string; always succeeds since the bytes are ASCII."""
        return self._code.decode("ascii")

    @property
    def iso_exponent(self) -> int:
        """Number of minor-unit digits defined by ISO 4217 (2 when the code is not registered)."""
        from monet.domain.monetary.currency_registry import iso_exponent_of

        return iso_exponent_of(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyCode):
            return False
        return self._code == other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.to_str()}')"
