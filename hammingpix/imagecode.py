"""Draw a text as a grid of coloured cells and read it back.

The grid starts with a red cell, then the Hamming-coded message length
(16 cells), a green separator, the Hamming-coded message and a blue end
cell. Black cells are 1 bits, white cells are 0 bits.
"""

from __future__ import annotations

import os
from enum import Enum

from PIL import Image, ImageDraw

from .binary import (
    BITS_PER_BYTE,
    ascii_to_bits,
    bits_to_ascii,
    bits_to_hamming,
    bits_to_string,
    byte_to_hamming,
    hamming_to_bits,
    hamming_to_byte,
    string_to_bits,
)

CELL_SIZE = 10
SIZE_BITS = 16
MARKER_BITS = 3
MAX_LENGTH = 255

_BORDER = (0, 0, 0)


class Cell(Enum):
    """A grid cell; the value is its RGB colour."""

    START = (230, 41, 55)
    SEPARATOR = (0, 228, 48)
    END = (0, 121, 241)
    ZERO = (255, 255, 255)
    ONE = (0, 0, 0)
    BACKGROUND = (245, 245, 245)

    @classmethod
    def for_bit(cls, bit: int) -> Cell:
        return cls.ZERO if bit == 0 else cls.ONE


class DecodeError(ValueError):
    """The image does not hold a readable code."""


def grid_size(bit_count: int) -> int:
    """Return the side of the smallest square grid holding ``bit_count`` cells."""
    size = 0
    while size * size < bit_count:
        size += 1
    return size


def _message_length(text: str | bytes) -> int:
    length = len(text.encode("utf-8") if isinstance(text, str) else bytes(text))
    if length > MAX_LENGTH:
        raise ValueError(f"message is {length} bytes long, at most {MAX_LENGTH} fit")
    return length


def _bit_count(length: int) -> int:
    return length * 2 * 16 + MARKER_BITS + SIZE_BITS


def _cell_sequence(text: str | bytes) -> list[Cell]:
    length = _message_length(text)
    size_cells = [
        Cell.for_bit(bit)
        for codeword in byte_to_hamming(ascii_to_bits(length))
        for bit in codeword
    ]
    message_cells = [
        Cell.for_bit(bit)
        for codeword in bits_to_hamming(string_to_bits(text))
        for bit in codeword
    ]
    target = _bit_count(length)
    cells = [Cell.START]
    count = 1
    while count < target:
        cells.extend(size_cells)
        count += len(size_cells)
        if count == SIZE_BITS + 1:
            cells.append(Cell.SEPARATOR)
            count += 1
        cells.extend(message_cells)
        count += len(message_cells)
        cells.append(Cell.END)
    return cells


def layout(text: str | bytes) -> list[list[Cell]]:
    """Return the square grid of cells for ``text``, row by row."""
    size = grid_size(_bit_count(_message_length(text)))
    cells = _cell_sequence(text)[: size * size]
    cells.extend([Cell.BACKGROUND] * (size * size - len(cells)))
    return [cells[row * size : (row + 1) * size] for row in range(size)]


def render(text: str | bytes) -> Image.Image:
    """Draw the code for ``text`` as an RGB image."""
    grid = layout(text)
    side = len(grid) * CELL_SIZE
    image = Image.new("RGB", (side, side), Cell.BACKGROUND.value)
    draw = ImageDraw.Draw(image)
    for row_index, row in enumerate(grid):
        for column_index, cell in enumerate(row):
            if cell is Cell.BACKGROUND:
                continue
            left = column_index * CELL_SIZE
            top = row_index * CELL_SIZE
            draw.rectangle(
                [left, top, left + CELL_SIZE - 1, top + CELL_SIZE - 1],
                fill=cell.value,
            )
    if side:
        draw.rectangle([0, 0, side - 1, side - 1], outline=_BORDER)
    return image


def save_code(text: str | bytes, path: str | os.PathLike[str]) -> None:
    """Render the code for ``text`` and write it to ``path`` as PNG."""
    render(text).save(path, format="PNG")


def _pixel(image: Image.Image, x: int, y: int) -> tuple[int, int, int]:
    if not (0 <= x < image.width and 0 <= y < image.height):
        raise DecodeError(f"pixel ({x}, {y}) is outside the image")
    return image.getpixel((x, y))


def _is_start(color: tuple[int, int, int]) -> bool:
    r, g, b = color
    return r > 200 and g < 100 and b < 100


def _is_separator(color: tuple[int, int, int]) -> bool:
    r, g, b = color
    return g > 180 and r < 120 and b < 120


def _centre(column: int, row: int) -> tuple[int, int]:
    return column * CELL_SIZE + CELL_SIZE // 2, row * CELL_SIZE + CELL_SIZE // 2


def decode(image: Image.Image) -> str:
    """Read the message drawn in ``image``."""
    rgb = image.convert("RGB")
    width = rgb.width // CELL_SIZE

    if not _is_start(_pixel(rgb, *_centre(0, 0))):
        raise DecodeError("start marker not found in the image")

    row, column = 0, 1
    size_code: list[list[int]] = []
    for _ in range(2):
        codeword = []
        for _ in range(BITS_PER_BYTE):
            if column >= width:
                column, row = 0, row + 1
            r, g, b = _pixel(rgb, *_centre(column, row))
            codeword.append(0 if (r + g + b) // 3 > 127 else 1)
            column += 1
        size_code.append(codeword)
    length = bits_to_ascii(hamming_to_byte(size_code))

    if column >= width:
        column, row = 0, row + 1
    if not _is_separator(_pixel(rgb, *_centre(column, row))):
        row, column = _find_separator_nearby(rgb, width, row, column)
    column += 1

    message_code: list[list[int]] = []
    for _ in range(length * 4):
        codeword = []
        for _ in range(BITS_PER_BYTE):
            if column >= width:
                column, row = 0, row + 1
            if row >= width:
                raise DecodeError(f"row {row} is outside the grid")
            r, _, _ = _pixel(rgb, *_centre(column, row))
            codeword.append(0 if r > 180 else 1)
            column += 1
        message_code.append(codeword)

    return bits_to_string(hamming_to_bits(message_code)[:length])


def _find_separator_nearby(
    image: Image.Image, width: int, row: int, column: int
) -> tuple[int, int]:
    for test_column in range(column - 1, column + 2):
        for test_row in range(row - 1, row + 2):
            if test_column < 0 or test_row < 0 or test_column >= width:
                continue
            x, y = test_column * CELL_SIZE, test_row * CELL_SIZE
            if x >= image.width or y >= image.height:
                continue
            if _is_separator(image.getpixel((x, y))):
                return test_row, test_column
    raise DecodeError("separator marker not found")


def decode_file(path: str | os.PathLike[str]) -> str:
    """Read the message drawn in the image file at ``path``."""
    with Image.open(path) as image:
        return decode(image)