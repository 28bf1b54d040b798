"""The static Huffman code of HPACK."""

from __future__ import annotations

from dataclasses import dataclass

EOS = 256


@dataclass(frozen=True)
class HuffmanCode:
    """A Huffman code left-aligned in 32 bits, with its length in bits."""

    code: int
    bit_length: int


# Indexed by symbol value; the last entry is the end-of-string symbol.
_TABLE: tuple[HuffmanCode, ...] = tuple(
    HuffmanCode(code, length)
    for code, length in (
        (0xFFC00000, 13), (0xFFFFB000, 23), (0xFFFFFE20, 28), (0xFFFFFE30, 28),
        (0xFFFFFE40, 28), (0xFFFFFE50, 28), (0xFFFFFE60, 28), (0xFFFFFE70, 28),
        (0xFFFFFE80, 28), (0xFFFFEA00, 24), (0xFFFFFFF0, 30), (0xFFFFFE90, 28),
        (0xFFFFFEA0, 28), (0xFFFFFFF4, 30), (0xFFFFFEB0, 28), (0xFFFFFEC0, 28),
        (0xFFFFFED0, 28), (0xFFFFFEE0, 28), (0xFFFFFEF0, 28), (0xFFFFFF00, 28),
        (0xFFFFFF10, 28), (0xFFFFFF20, 28), (0xFFFFFFF8, 30), (0xFFFFFF30, 28),
        (0xFFFFFF40, 28), (0xFFFFFF50, 28), (0xFFFFFF60, 28), (0xFFFFFF70, 28),
        (0xFFFFFF80, 28), (0xFFFFFF90, 28), (0xFFFFFFA0, 28), (0xFFFFFFB0, 28),
        (0x50000000, 6), (0xFE000000, 10), (0xFE400000, 10), (0xFFA00000, 12),
        (0xFFC80000, 13), (0x54000000, 6), (0xF8000000, 8), (0xFF400000, 11),
        (0xFE800000, 10), (0xFEC00000, 10), (0xF9000000, 8), (0xFF600000, 11),
        (0xFA000000, 8), (0x58000000, 6), (0x5C000000, 6), (0x60000000, 6),
        (0x00000000, 5), (0x08000000, 5), (0x10000000, 5), (0x64000000, 6),
        (0x68000000, 6), (0x6C000000, 6), (0x70000000, 6), (0x74000000, 6),
        (0x78000000, 6), (0x7C000000, 6), (0xB8000000, 7), (0xFB000000, 8),
        (0xFFF80000, 15), (0x80000000, 6), (0xFFB00000, 12), (0xFF000000, 10),
        (0xFFD00000, 13), (0x84000000, 6), (0xBA000000, 7), (0xBC000000, 7),
        (0xBE000000, 7), (0xC0000000, 7), (0xC2000000, 7), (0xC4000000, 7),
        (0xC6000000, 7), (0xC8000000, 7), (0xCA000000, 7), (0xCC000000, 7),
        (0xCE000000, 7), (0xD0000000, 7), (0xD2000000, 7), (0xD4000000, 7),
        (0xD6000000, 7), (0xD8000000, 7), (0xDA000000, 7), (0xDC000000, 7),
        (0xDE000000, 7), (0xE0000000, 7), (0xE2000000, 7), (0xE4000000, 7),
        (0xFC000000, 8), (0xE6000000, 7), (0xFD000000, 8), (0xFFD80000, 13),
        (0xFFFE0000, 19), (0xFFE00000, 13), (0xFFF00000, 14), (0x88000000, 6),
        (0xFFFA0000, 15), (0x18000000, 5), (0x8C000000, 6), (0x20000000, 5),
        (0x90000000, 6), (0x28000000, 5), (0x94000000, 6), (0x98000000, 6),
        (0x9C000000, 6), (0x30000000, 5), (0xE8000000, 7), (0xEA000000, 7),
        (0xA0000000, 6), (0xA4000000, 6), (0xA8000000, 6), (0x38000000, 5),
        (0xAC000000, 6), (0xEC000000, 7), (0xB0000000, 6), (0x40000000, 5),
        (0x48000000, 5), (0xB4000000, 6), (0xEE000000, 7), (0xF0000000, 7),
        (0xF2000000, 7), (0xF4000000, 7), (0xF6000000, 7), (0xFFFC0000, 15),
        (0xFF800000, 11), (0xFFF40000, 14), (0xFFE80000, 13), (0xFFFFFFC0, 28),
        (0xFFFE6000, 20), (0xFFFF4800, 22), (0xFFFE7000, 20), (0xFFFE8000, 20),
        (0xFFFF4C00, 22), (0xFFFF5000, 22), (0xFFFF5400, 22), (0xFFFFB200, 23),
        (0xFFFF5800, 22), (0xFFFFB400, 23), (0xFFFFB600, 23), (0xFFFFB800, 23),
        (0xFFFFBA00, 23), (0xFFFFBC00, 23), (0xFFFFEB00, 24), (0xFFFFBE00, 23),
        (0xFFFFEC00, 24), (0xFFFFED00, 24), (0xFFFF5C00, 22), (0xFFFFC000, 23),
        (0xFFFFEE00, 24), (0xFFFFC200, 23), (0xFFFFC400, 23), (0xFFFFC600, 23),
        (0xFFFFC800, 23), (0xFFFEE000, 21), (0xFFFF6000, 22), (0xFFFFCA00, 23),
        (0xFFFF6400, 22), (0xFFFFCC00, 23), (0xFFFFCE00, 23), (0xFFFFEF00, 24),
        (0xFFFF6800, 22), (0xFFFEE800, 21), (0xFFFE9000, 20), (0xFFFF6C00, 22),
        (0xFFFF7000, 22), (0xFFFFD000, 23), (0xFFFFD200, 23), (0xFFFEF000, 21),
        (0xFFFFD400, 23), (0xFFFF7400, 22), (0xFFFF7800, 22), (0xFFFFF000, 24),
        (0xFFFEF800, 21), (0xFFFF7C00, 22), (0xFFFFD600, 23), (0xFFFFD800, 23),
        (0xFFFF0000, 21), (0xFFFF0800, 21), (0xFFFF8000, 22), (0xFFFF1000, 21),
        (0xFFFFDA00, 23), (0xFFFF8400, 22), (0xFFFFDC00, 23), (0xFFFFDE00, 23),
        (0xFFFEA000, 20), (0xFFFF8800, 22), (0xFFFF8C00, 22), (0xFFFF9000, 22),
        (0xFFFFE000, 23), (0xFFFF9400, 22), (0xFFFF9800, 22), (0xFFFFE200, 23),
        (0xFFFFF800, 26), (0xFFFFF840, 26), (0xFFFEB000, 20), (0xFFFE2000, 19),
        (0xFFFF9C00, 22), (0xFFFFE400, 23), (0xFFFFA000, 22), (0xFFFFF600, 25),
        (0xFFFFF880, 26), (0xFFFFF8C0, 26), (0xFFFFF900, 26), (0xFFFFFBC0, 27),
        (0xFFFFFBE0, 27), (0xFFFFF940, 26), (0xFFFFF100, 24), (0xFFFFF680, 25),
        (0xFFFE4000, 19), (0xFFFF1800, 21), (0xFFFFF980, 26), (0xFFFFFC00, 27),
        (0xFFFFFC20, 27), (0xFFFFF9C0, 26), (0xFFFFFC40, 27), (0xFFFFF200, 24),
        (0xFFFF2000, 21), (0xFFFF2800, 21), (0xFFFFFA00, 26), (0xFFFFFA40, 26),
        (0xFFFFFFD0, 28), (0xFFFFFC60, 27), (0xFFFFFC80, 27), (0xFFFFFCA0, 27),
        (0xFFFEC000, 20), (0xFFFFF300, 24), (0xFFFED000, 20), (0xFFFF3000, 21),
        (0xFFFFA400, 22), (0xFFFF3800, 21), (0xFFFF4000, 21), (0xFFFFE600, 23),
        (0xFFFFA800, 22), (0xFFFFAC00, 22), (0xFFFFF700, 25), (0xFFFFF780, 25),
        (0xFFFFF400, 24), (0xFFFFF500, 24), (0xFFFFFA80, 26), (0xFFFFE800, 23),
        (0xFFFFFAC0, 26), (0xFFFFFCC0, 27), (0xFFFFFB00, 26), (0xFFFFFB40, 26),
        (0xFFFFFCE0, 27), (0xFFFFFD00, 27), (0xFFFFFD20, 27), (0xFFFFFD40, 27),
        (0xFFFFFD60, 27), (0xFFFFFFE0, 28), (0xFFFFFD80, 27), (0xFFFFFDA0, 27),
        (0xFFFFFDC0, 27), (0xFFFFFDE0, 27), (0xFFFFFE00, 27), (0xFFFFFB80, 26),
        (0xFFFFFFFC, 30),
    )
)

_CODE_LENGTHS = (5, 6, 7, 8, 10, 11, 12, 13, 14, 15, 19, 20, 21, 22, 23, 24, 25, 26, 27, 28, 30)

_BY_CODE = {entry: symbol for symbol, entry in enumerate(_TABLE)}


def encode(value: int) -> HuffmanCode:
    """Return the Huffman code of a byte value or of :data:`EOS`."""
    if not 0 <= value <= EOS:
        raise ValueError(f"No Huffman code for value {value}")
    return _TABLE[value]


def decode(code: HuffmanCode) -> int | None:
    """Return the symbol of ``code``, or ``None`` when it is not a valid code."""
    return _BY_CODE.get(code)


def allowed_code_lengths() -> tuple[int, ...]:
    """Return every code length in use, shortest first."""
    return _CODE_LENGTHS


def estimate_len(data) -> int:
    """Return the length in bits of ``data`` once Huffman encoded."""
    return sum(_TABLE[byte].bit_length for byte in bytes(data))