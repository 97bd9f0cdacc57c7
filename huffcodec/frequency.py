from collections import Counter
from collections.abc import Iterable
from types import MappingProxyType

from huffcodec.abc import FrequencyTable, Symbol
from huffcodec.errors import EmptyInput


def build_frequency_table(symbols: Iterable[Symbol]) -> FrequencyTable:
    """Count each distinct symbol.

    Keys keep the order in which symbols first appear, which is what makes
    tree construction reproducible. The returned mapping is read-only.
    """
    counts: Counter[Symbol] = Counter(symbols)
    if not counts:
        raise EmptyInput("Nothing to encode: input contains no symbols")
    return MappingProxyType(dict(counts))
