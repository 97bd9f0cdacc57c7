class HuffmanError(ValueError):
    """Base class for every failure raised by the codec."""


class EmptyInput(HuffmanError):
    """There are no symbols to encode."""


class InvalidFormat(HuffmanError):
    """A serialized document does not match the expected grammar."""


class DuplicateCode(HuffmanError):
    """Two distinct symbols share one code in a serialized table."""


class TruncatedStream(HuffmanError):
    """The bitstream ends in the middle of a code."""
