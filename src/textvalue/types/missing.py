from typing import Any, Final, TypeGuard, final

__all__ = (
    "MISSING",
    "Missing",
    "is_missing",
    "not_missing",
)


class MissingType(type):
    """
    Metaclass for the Missing type implementing the singleton pattern.

    Only one instance of Missing ever exists, so it can be compared with `is`.
    """

    _instance: Any = None

    def __call__(cls) -> Any:
        if cls._instance is None:
            cls._instance = super().__call__()

        return cls._instance


@final
class Missing(metaclass=MissingType):
    """
    Marker of a value which was not provided yet. Use MISSING constant for its value.

    Builders keep required attributes as MISSING until a setter is called,
    which keeps "not set" apart from any value a caller could pass, None included.
    """

    __slots__ = ()
    __match_args__ = ()

    def __bool__(self) -> bool:
        return False

    def __hash__(self) -> int:
        return hash(self.__class__)

    def __eq__(
        self,
        value: object,
    ) -> bool:
        return value is MISSING

    def __str__(self) -> str:
        return "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __setattr__(
        self,
        __name: str,
        __value: Any,
    ) -> None:
        raise AttributeError("Missing can't be modified")

    def __delattr__(
        self,
        __name: str,
    ) -> None:
        raise AttributeError("Missing can't be modified")

    def __copy__(self) -> "Missing":
        return self

    def __deepcopy__(
        self,
        memo: dict[int, Any] | None,
    ) -> "Missing":
        return self


MISSING: Final[Missing] = Missing()


def is_missing(
    check: Any | Missing,
    /,
) -> TypeGuard[Missing]:
    return check is MISSING


def not_missing[Value](
    check: Value | Missing,
    /,
) -> TypeGuard[Value]:
    return check is not MISSING
