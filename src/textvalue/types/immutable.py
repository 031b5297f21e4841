from collections.abc import Mapping
from logging import Logger, getLogger
from typing import (
    Any,
    ClassVar,
    NoReturn,
    Self,
    dataclass_transform,
    final,
    get_origin,
    get_type_hints,
)

from textvalue.errors import IllegalState
from textvalue.utils.hashing import HASH_SEED, mix_hash, value_hash
from textvalue.validation import validated_attribute

__all__ = ("Immutable",)

_logger: Logger = getLogger(__name__)


@dataclass_transform(
    kw_only_default=True,
    frozen_default=True,
)
class ImmutableMeta(type):
    __slots__: tuple[str, ...]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        *,
        label: str | None = None,
        **kwargs: Any,
    ) -> type:
        value_type = type.__new__(
            mcs,
            name,
            bases,
            namespace,
            **kwargs,
        )

        value_type.__ATTRIBUTES__ = _collect_attributes(value_type)  # pyright: ignore[reportAttributeAccessIssue]
        value_type.__LABEL__ = label or name  # pyright: ignore[reportAttributeAccessIssue]
        value_type.__slots__ = tuple(value_type.__ATTRIBUTES__.keys())  # pyright: ignore[reportAttributeAccessIssue]
        value_type.__match_args__ = value_type.__slots__  # pyright: ignore[reportAttributeAccessIssue]

        # Only mark subclasses as final (not the base Immutable class itself)
        if name != "Immutable":
            value_type = final(value_type)

        return value_type


def _collect_attributes(
    cls: type[Any],
) -> Mapping[str, Any]:
    attributes: dict[str, Any] = {}
    for key, annotation in get_type_hints(cls, localns={cls.__name__: cls}).items():
        if key.startswith("__"):
            continue  # do not dunder specials

        if get_origin(annotation) is ClassVar:
            continue  # do not include ClassVars

        attributes[key] = annotation

    return attributes


class Immutable(metaclass=ImmutableMeta):
    """
    Base for immutable value types with required, annotated attributes.

    Attributes are collected from class annotations. All of them are required,
    checked against their annotated type on construction and frozen afterwards.
    Instances compare by attribute values, hash with a seeded multiplicative mix
    stable across interpreter runs and print as `Label{name=value, ...}` where
    the label defaults to the class name and can be set with a `label` class
    keyword.

    Examples
    --------
    ```python
    class Point(Immutable, label="P"):
        x: int
        y: int

    str(Point(x=1, y=2))  # P{x=1, y=2}
    ```
    """

    __ATTRIBUTES__: ClassVar[Mapping[str, Any]]
    __LABEL__: ClassVar[str]

    def __init__(
        self,
        **kwargs: Any,
    ) -> None:
        unexpected: set[str] = kwargs.keys() - self.__ATTRIBUTES__.keys()
        if unexpected:
            raise TypeError(
                f"Unexpected attributes for {self.__class__.__qualname__}: {sorted(unexpected)}"
            )

        missing: tuple[str, ...] = tuple(
            name for name in self.__ATTRIBUTES__.keys() if name not in kwargs
        )
        if missing:
            _logger.debug(
                "Refusing to create %s without required attributes %s",
                self.__LABEL__,
                list(missing),
            )
            raise IllegalState(
                type_name=self.__LABEL__,
                missing=missing,
            )

        for name, annotation in self.__ATTRIBUTES__.items():
            object.__setattr__(
                self,
                name,
                validated_attribute(
                    kwargs[name],
                    attribute=name,
                    annotation=annotation,
                ),
            )

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if self is other:
            return True

        if other.__class__ is not self.__class__:
            return NotImplemented

        return all(
            getattr(self, name) == getattr(other, name) for name in self.__ATTRIBUTES__.keys()
        )

    def __hash__(self) -> int:
        result: int = HASH_SEED
        for name in self.__ATTRIBUTES__.keys():
            result = mix_hash(result, value_hash(getattr(self, name)))

        return result

    def __str__(self) -> str:
        attributes: str = ", ".join(f"{name}={getattr(self, name)}" for name in self.__slots__)
        return f"{self.__LABEL__}{{{attributes}}}"

    def __repr__(self) -> str:
        return str(self)

    def __setattr__(
        self,
        name: str,
        value: Any,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__}"
            f" attribute - '{name}' cannot be modified"
        )

    def __delattr__(
        self,
        name: str,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__}"
            f" attribute - '{name}' cannot be deleted"
        )

    def __copy__(self) -> Self:
        return self  # Immutable, no need to provide an actual copy

    def __deepcopy__(
        self,
        memo: dict[int, Any] | None,
    ) -> Self:
        return self  # Immutable, no need to provide an actual copy

    def __replace__(
        self,
        **changes: Any,
    ) -> Self:
        if changes.keys() <= self.__ATTRIBUTES__.keys() and all(
            getattr(self, name) == value for name, value in changes.items()
        ):
            return self  # equal values, nothing to copy

        return self.__class__(
            **{
                **{name: getattr(self, name) for name in self.__ATTRIBUTES__.keys()},
                **changes,
            }
        )
