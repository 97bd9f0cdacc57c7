import sys
import time

import fire  # noqa

from huffcodec.errors import HuffmanError
from huffcodec.huffman import Huffman

SOURCE_FILENAME = "source.txt"
ENCODED_FILENAME = "encoded.txt"


def read_text(path: str) -> str:
    # newline="" keeps "\r\n" and "\n" exactly as stored
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def encode(
    in_file: str = SOURCE_FILENAME,
    out_file: str = ENCODED_FILENAME,
    verbose: bool = False,
    progress: bool = False,
) -> None:
    """Encode ``in_file`` into a Huffman document at ``out_file``."""
    print("\nEncoding...")
    start = time.perf_counter()

    text = read_text(in_file)

    result = Huffman(verbose=verbose, progress=progress).encode_text(text)
    write_text(out_file, result.serialize())

    report(out_file, start)
    print(f"Alphabet size: {len(result.codes)}")
    print(f"Bits per symbol: {result.bits_per_symbol:.4f}")


def decode(
    in_file: str = ENCODED_FILENAME,
    out_file: str = SOURCE_FILENAME,
    progress: bool = False,
) -> None:
    """Decode the Huffman document ``in_file`` back into text at ``out_file``."""
    print("\nDecoding...")
    start = time.perf_counter()

    document = read_text(in_file)
    decoded = Huffman(progress=progress).decode(document)
    write_text(out_file, decoded)

    report(out_file, start)


def report(out_file: str, start: float) -> None:
    duration = (time.perf_counter() - start) * 1000
    print(f"\nDone! Check {out_file} for the result. Execution took {duration:.3f} milliseconds")  # noqa


def main() -> None:
    try:
        fire.Fire({"encode": encode, "decode": decode})
    except HuffmanError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
