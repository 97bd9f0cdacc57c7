from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TypeAlias


# Type aliases shared by the Huffman stages
Symbol: TypeAlias = str
FrequencyTable: TypeAlias = Mapping[Symbol, int]
CodeTable: TypeAlias = dict[Symbol, str]
ReverseCodeTable: TypeAlias = dict[str, Symbol]


class TextCodec(ABC):
    @abstractmethod
    def encode(self, text: str) -> str:
        pass

    @abstractmethod
    def decode(self, document: str) -> str:
        pass
