from enum import Enum


class Fitzpatrick(Enum):
    TYPE_1_2 = "\U0001f3fb"  # light skin tone
    TYPE_3 = "\U0001f3fc"  # medium-light skin tone
    TYPE_4 = "\U0001f3fd"  # medium skin tone
    TYPE_5 = "\U0001f3fe"  # medium-dark skin tone
    TYPE_6 = "\U0001f3ff"  # dark skin tone

    @property
    def unicode(self) -> str:
        return self.value
