import enum
from dataclasses import dataclass

import tqdm  # noqa

from huffcodec.abc import CodeTable, FrequencyTable, ReverseCodeTable, TextCodec
from huffcodec.codes import derive_code_table
from huffcodec.document import EncodedDocument, validate
from huffcodec.errors import DuplicateCode, InvalidFormat, TruncatedStream
from huffcodec.frequency import build_frequency_table
from huffcodec.tree import build_tree


def ch(s: str) -> str:
    if s.isprintable() and not s.isspace():
        return s
    elif s == "\n":
        return "\\n"
    return repr(s)


class DecodeState(enum.Enum):
    AWAITING_HEADER = "awaiting_header"
    PARSING_TABLE = "parsing_table"
    PARSING_STREAM = "parsing_stream"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class EncodeResult:
    document: EncodedDocument
    frequencies: FrequencyTable
    codes: CodeTable
    length: int

    @property
    def bits_per_symbol(self) -> float:
        return len(self.document.bitstream) / self.length

    def serialize(self) -> str:
        return self.document.serialize()


class Huffman(TextCodec):
    def __init__(self, verbose: bool = False, progress: bool = False) -> None:
        self.verbose = verbose
        self.progress = progress
        self.state = DecodeState.AWAITING_HEADER

    def encode(self, text: str) -> str:
        return self.encode_text(text).serialize()

    def encode_text(self, text: str) -> EncodeResult:
        F = build_frequency_table(text)
        root = build_tree(F)
        codes = derive_code_table(root)

        bits: list[str] = []
        for s in tqdm.tqdm(text, desc="Encoding", disable=not self.progress):
            bits.append(codes[s])

        result = EncodeResult(
            document=EncodedDocument.from_code_table(codes, "".join(bits)),
            frequencies=F,
            codes=codes,
            length=len(text),
        )

        if self.verbose:
            self.print_code_table(result)

        return result

    def print_code_table(self, result: EncodeResult) -> None:
        print(f"\nCode table ({result.bits_per_symbol} bits per symbol on average):")  # noqa
        for s, code in result.codes.items():
            print(f"{ch(s)} (Unicode {ord(s)}, weight {result.frequencies[s]}): {code}")  # noqa

    def decode(self, document: str) -> str:
        self.state = DecodeState.AWAITING_HEADER
        try:
            decoded = self._decode(document)
        except Exception:
            self.state = DecodeState.FAILED
            raise
        self.state = DecodeState.DONE
        return decoded

    def _decode(self, document: str) -> str:
        validate(document)
        self.state = DecodeState.PARSING_TABLE

        doc = EncodedDocument.split(document)
        reverse = self.restore_reverse_code_table(doc)
        self.state = DecodeState.PARSING_STREAM

        return self.restore_content(doc.bitstream, reverse)

    def restore_reverse_code_table(self, doc: EncodedDocument) -> ReverseCodeTable:
        reverse: ReverseCodeTable = {}
        seen: set[str] = set()
        for s, code in doc.entries:
            if s in seen:
                raise InvalidFormat(f"Symbol {ch(s)} is listed more than once")  # noqa
            if code in reverse:
                raise DuplicateCode(
                    f"Code {code} is assigned to both {ch(reverse[code])} and {ch(s)}"  # noqa
                )
            seen.add(s)
            reverse[code] = s
        return reverse

    def restore_content(self, bitstream: str, reverse: ReverseCodeTable) -> str:
        max_len = max(len(code) for code in reverse)
        decoded: list[str] = []
        start = 0

        with tqdm.tqdm(
            total=len(bitstream), desc="Decoding", disable=not self.progress
        ) as pbar:
            for i in range(len(bitstream)):
                nbits = i + 1 - start
                if nbits > max_len:
                    # longer than any code, so no later bit can complete it
                    raise TruncatedStream(
                        f"Decoding failed: bits {bitstream[start:i + 1]} at offset {start} do not form a code"  # noqa
                    )
                s = reverse.get(bitstream[start:i + 1])
                if s is not None:
                    decoded.append(s)
                    start = i + 1
                pbar.update(1)

        if start != len(bitstream):
            raise TruncatedStream(
                f"Decoding failed: remaining bits {bitstream[start:]} do not form a code"  # noqa
            )

        return "".join(decoded)
