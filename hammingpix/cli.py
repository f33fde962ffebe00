"""Interactive command: turn a message into an image code or read one back."""

from __future__ import annotations

import argparse
import sys

from .imagecode import DecodeError, decode_file, save_code

DEFAULT_OUTPUT = "code.png"


def _ask(question: str) -> str:
    print("---")
    print(question)
    print("---")
    return sys.stdin.readline().rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="hammingpix",
        description="Encode a message as a Hamming-coded image, or decode one.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"image written when encoding (default: {DEFAULT_OUTPUT})",
    )
    args = parser.parse_args(argv)

    choice = _ask(
        "Do you want to (0) convert a message into an image or (1) convert an image into a message?"
    )
    if choice.startswith("0"):
        text = _ask("Which text do you want to convert?")
        try:
            save_code(text, args.output)
        except (ValueError, OSError) as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        print(f"Code saved to {args.output}")
        return 0

    path = _ask("What is the name of your file?")
    try:
        message = decode_file(path)
    except (DecodeError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(f"Decoded message: {message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())