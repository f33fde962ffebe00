# hammingpix

hammingpix turns a short text message into a square grid of coloured cells,
saved as a PNG image, and reads such an image back into text.

## The code

The text is taken as UTF-8 bytes; at most 255 bytes fit. Each byte is split
into two 4-bit halves, and each half becomes an 8-bit codeword
`[p1, p2, d1, p4, d2, d3, d4, p8]`: three Hamming parity bits plus an overall
parity bit. Every byte therefore takes 16 cells.

Cells are 10×10 pixels and are laid out row by row:

- a red cell marks the start;
- 16 cells hold the coded message length (black is 1, white is 0);
- a green cell separates the length from the message;
- the coded message cells follow;
- a blue cell marks the end.

The grid is the smallest square that holds all of these cells. Any cells left
over are filled by repeating the coded length and message, and the image gets
a one-pixel black border.

When reading, the data bits are taken from each codeword as they are; the
parity bits are not used to correct errors.

## Installation

```
pip install .
```

## Command line

```
hammingpix [-o OUTPUT]
```

The command asks whether to convert a message into an image (`0`) or an image
back into a message (anything else).

- In mode `0` it reads a line of text and writes the image to `OUTPUT`
  (default `code.png`). A message longer than 255 bytes is refused.
- Otherwise it asks for an image file name, decodes the image and prints
  `Decoded message: ...`.

Errors (a message too long, a file that cannot be read or written, a missing
start or separator marker) are printed to standard error and the command
exits with status 1.

The command does not open a window or show the grid on screen; it writes the
image file directly.

## Library use

```python
from hammingpix.imagecode import save_code, decode_file

save_code("Hello World!", "code.png")
print(decode_file("code.png"))   # Hello World!
```

`hammingpix.imagecode` also provides:

- `grid_size(bit_count)`: side of the smallest square grid holding that many cells;
- `layout(text)`: the grid as a list of rows of `Cell` values;
- `render(text)`: the code as a Pillow RGB image;
- `decode(image)`: read the message from a Pillow image;
- `Cell`: the cell kinds, each valued by its RGB colour;
- `DecodeError` (a `ValueError`): raised when an image holds no readable code.

Lower-level helpers live in `hammingpix.binary`:

```python
from hammingpix.binary import string_to_bits, bits_to_hamming, hamming_to_bits, bits_to_string

rows = string_to_bits("axel")        # one list of 8 bits per byte
coded = bits_to_hamming(rows)        # two 8-bit codewords per byte
assert bits_to_string(hamming_to_bits(coded)) == "axel"
```

It also has `ascii_to_bits`, `bits_to_ascii`, `byte_to_hamming`,
`hamming_to_byte` and `format_bits` (rows of bits as lines of digits).

`hammingpix.resources.search_and_set_resource_dir(folder_name, app_dir=None)`
looks for a directory in the working directory, then in `app_dir` (by default
the running script's directory) and up to three levels above it, changes into
the first one found and returns whether it found one.

## Running the tests

```
pip install .[test]
pytest
```