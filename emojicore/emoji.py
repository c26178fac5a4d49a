import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Protocol, Sequence, Tuple, Union

from .errors import UnsupportedModifierError

logger = logging.getLogger(__name__)


class Modifier(Protocol):
    unicode: str


class SequenceType(IntEnum):
    NONE = 0
    BASE_SKIN_GENDER = 1
    GENDER_SKIN_BASE = 2


def html_decimal(code: int) -> str:
    return f"&#{code};"


def html_hexadecimal(code: int) -> str:
    return f"&#x{code:x};"


def join_surrogates(text: str) -> str:
    # paired surrogates become one astral char, lone ones are kept as is
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


@dataclass(frozen=True, eq=False, repr=False)
class Emoji:
    description: str
    sequence_type: Union[SequenceType, int]
    aliases: Sequence[str]
    tags: Sequence[str]
    unicode: str
    emoji_char: str = ""

    supports_fitzpatrick: bool = field(init=False)
    codepoints: Tuple[int, ...] = field(init=False)
    html_dec: str = field(init=False)
    html_hex: str = field(init=False)

    def __post_init__(self) -> None:
        sequence_type = SequenceType(self.sequence_type)
        object.__setattr__(self, "sequence_type", sequence_type)
        object.__setattr__(
            self, "supports_fitzpatrick", sequence_type != SequenceType.NONE
        )
        object.__setattr__(self, "aliases", tuple(self.aliases))
        object.__setattr__(self, "tags", tuple(self.tags))

        codepoints = tuple(ord(char) for char in join_surrogates(self.unicode))
        object.__setattr__(self, "codepoints", codepoints)
        object.__setattr__(
            self, "html_dec", "".join(html_decimal(code) for code in codepoints)
        )
        object.__setattr__(
            self, "html_hex", "".join(html_hexadecimal(code) for code in codepoints)
        )

    def unicode_with_modifier(self, fitzpatrick: Optional[Modifier] = None) -> str:
        if not self.supports_fitzpatrick:
            logger.debug(
                "Refusing modifier %r for %r, sequence type is NONE",
                fitzpatrick,
                self.unicode,
            )
            raise UnsupportedModifierError(
                "Cannot get the unicode with a fitzpatrick modifier, "
                "the emoji doesn't support fitzpatrick.",
                emoji=self,
            )

        if fitzpatrick is None:
            return self.unicode

        return self.unicode + fitzpatrick.unicode

    def __repr__(self) -> str:
        return (
            f"Emoji(description={self.description!r}, "
            f"supports_fitzpatrick={self.supports_fitzpatrick}, "
            f"aliases={list(self.aliases)!r}, "
            f"tags={list(self.tags)!r}, "
            f"unicode={self.unicode!r}, "
            f"html_dec={self.html_dec!r}, "
            f"html_hex={self.html_hex!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Emoji):
            return NotImplemented
        return self.unicode == other.unicode

    def __hash__(self) -> int:
        return hash(self.unicode)
