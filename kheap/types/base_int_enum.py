from enum import IntEnum


class BaseIntEnum(IntEnum):
    def __str__(self):
        return self.name.lower()

    def __format__(self, format_spec):
        return format(str(self), format_spec)

    @classmethod
    def from_str(cls, string: str):
        for member in cls:
            if str(member) == string.lower():
                return member
        raise ValueError(f"{string} is not a valid {cls.__name__}")
