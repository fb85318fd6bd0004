from enum import IntEnum


class TextFormat(IntEnum):
    """
    Format markers stored alongside rich text values.
    """
    HTML = 1
    PLAIN = 2
    MARKDOWN = 4

    @classmethod
    def choices(cls):
        return tuple((option.value, option.name.title()) for option in cls)
