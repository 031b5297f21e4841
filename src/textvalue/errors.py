from collections.abc import Sequence

__all__ = (
    "IllegalState",
    "InvalidArgument",
)


class InvalidArgument(ValueError):
    """Raised when an absent or mistyped value is passed for an attribute.

    The message is the name of the offending attribute, so `str(exc)` reads
    `text` for a missing text value and `instance` for a missing source object.

    Attributes:
        attribute: Name of the attribute or argument which got the invalid value.
    """

    __slots__ = ("attribute",)

    def __init__(
        self,
        *,
        attribute: str,
    ) -> None:
        super().__init__(attribute)
        self.attribute: str = attribute


class IllegalState(RuntimeError):
    """Raised when a value is built before all of its required attributes were set.

    Attributes:
        type_name: Display name of the type which could not be built.
        missing: Names of required attributes without a value.

    Example:
        ```python
        try:
            ImmutableB.builder().build()
        except IllegalState as exc:
            print(exc.missing)  # ('text',)
        ```
    """

    __slots__ = (
        "missing",
        "type_name",
    )

    def __init__(
        self,
        *,
        type_name: str,
        missing: Sequence[str],
    ) -> None:
        super().__init__(
            f"Cannot build {type_name}, some of required attributes are not set {list(missing)}"
        )
        self.type_name: str = type_name
        self.missing: tuple[str, ...] = tuple(missing)
