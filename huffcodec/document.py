"""Text serialization of a code table plus its bitstream.

A document looks like::

    a:10;b:0;c:11
    1010000111

Each entry is one symbol character, a colon and its code. Entries are joined
by ``;`` and the last one is terminated by a newline; the final line is the
bitstream. The symbol always sits at the first position of an entry, so it
may itself be ``:``, ``;``, a newline or a binary digit.
"""
import re
from collections.abc import Iterator
from dataclasses import dataclass

from huffcodec.abc import CodeTable, Symbol
from huffcodec.errors import InvalidFormat


DOCUMENT_RE = re.compile(r"(?:.:[01]+;)*.:[01]+\n[01]+", re.DOTALL)
ENTRY_RE = re.compile(r"(.):([01]+)([;\n])", re.DOTALL)


@dataclass(frozen=True)
class EncodedDocument:
    entries: tuple[tuple[Symbol, str], ...]
    bitstream: str

    @classmethod
    def from_code_table(cls, codes: CodeTable, bitstream: str) -> "EncodedDocument":
        return cls(tuple(codes.items()), bitstream)

    def serialize(self) -> str:
        table = ";".join(f"{symbol}:{code}" for symbol, code in self.entries)
        return f"{table}\n{self.bitstream}"

    @classmethod
    def split(cls, text: str) -> "EncodedDocument":
        """Split an already validated document into entries and bitstream."""
        entries = tuple((symbol, code) for symbol, code, _ in iter_entries(text))
        # the bitstream holds no newline, so the last one ends the table
        return cls(entries, text[text.rindex("\n") + 1:])


def validate(text: str) -> None:
    if DOCUMENT_RE.fullmatch(text) is None:
        raise InvalidFormat("Invalid encoding: document does not match the expected format")  # noqa


def iter_entries(text: str) -> Iterator[tuple[Symbol, str, str]]:
    """Yield ``(symbol, code, separator)`` for each table entry.

    The separator of the last entry is the newline before the bitstream.
    ``text`` must already have passed :func:`validate`.
    """
    pos = 0
    while True:
        m = ENTRY_RE.match(text, pos)
        if m is None:
            raise InvalidFormat(f"Malformed table entry at offset {pos}")
        yield m.group(1), m.group(2), m.group(3)
        if m.group(3) == "\n":
            return
        pos = m.end()
