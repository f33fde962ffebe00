import pytest
from PIL import Image, ImageDraw

from hammingpix.imagecode import (
    CELL_SIZE,
    Cell,
    DecodeError,
    decode,
    decode_file,
    grid_size,
    layout,
    render,
    save_code,
)


@pytest.mark.parametrize("count", [1, 2, 16, 17, 19, 51, 100, 8179])
def test_grid_size_is_smallest_square(count):
    size = grid_size(count)
    assert size * size >= count
    assert (size - 1) * (size - 1) < count


def test_grid_size_pinned():
    assert grid_size(0) == 0
    assert grid_size(19) == 5


def test_layout_is_square_and_starts_with_marker():
    grid = layout("axel")
    assert all(len(row) == len(grid) for row in grid)
    assert grid[0][0] is Cell.START
    flat = [cell for row in grid for cell in row]
    assert flat.count(Cell.START) == 1
    assert flat.count(Cell.SEPARATOR) == 1
    assert flat[17] is Cell.SEPARATOR
    assert len(flat) >= 4 * 32 + 19


def test_layout_size_cells_are_bits():
    flat = [cell for row in layout("hi") for cell in row]
    assert set(flat[1:17]) <= {Cell.ZERO, Cell.ONE}
    assert Cell.END in flat


def test_layout_rejects_long_message():
    with pytest.raises(ValueError):
        layout("x" * 256)


def test_render_dimensions_and_start_pixel():
    image = render("axel")
    side = len(layout("axel")) * CELL_SIZE
    assert image.size == (side, side)
    assert image.getpixel((5, 5)) == Cell.START.value


@pytest.mark.parametrize("text", ["axel", "Hello World!", "", "a", "héllo wörld", "x" * 255])
def test_round_trip(text):
    assert decode(render(text)) == text


def test_file_round_trip(tmp_path):
    path = tmp_path / "code.png"
    save_code("Hello World!", path)
    assert decode_file(path) == "Hello World!"


def test_missing_start_marker():
    image = Image.new("RGB", (50, 50), (255, 255, 255))
    with pytest.raises(DecodeError):
        decode(image)


def test_missing_separator():
    image = render("axel")
    width = image.width // CELL_SIZE
    row, column = divmod(17, width)
    draw = ImageDraw.Draw(image)
    left, top = column * CELL_SIZE, row * CELL_SIZE
    draw.rectangle([left, top, left + CELL_SIZE - 1, top + CELL_SIZE - 1], fill=(255, 255, 255))
    with pytest.raises(DecodeError):
        decode(image)


def test_truncated_image():
    image = render("Hello World!")
    cropped = image.crop((0, 0, image.width, 3 * CELL_SIZE))
    with pytest.raises(DecodeError):
        decode(cropped)