from .emoji import Emoji, SequenceType, html_decimal, html_hexadecimal
from .errors import UnsupportedModifierError
from .fitzpatrick import Fitzpatrick

__all__ = [
    "Emoji",
    "Fitzpatrick",
    "SequenceType",
    "UnsupportedModifierError",
    "html_decimal",
    "html_hexadecimal",
]
