from logging import Logger, getLogger
from typing import Any, Protocol, Self, final, runtime_checkable

from textvalue.errors import IllegalState, InvalidArgument
from textvalue.types import MISSING, Immutable, Missing, is_missing
from textvalue.validation import required_text

__all__ = (
    "ImmutableB",
    "ImmutableBBuilder",
    "Textual",
)

_logger: Logger = getLogger(__name__)


@runtime_checkable
class Textual(Protocol):
    """
    Anything which can provide a text value for ImmutableB.

    Used as the source for `ImmutableB.copy_of` and `ImmutableBBuilder.from_`.
    """

    def get_text(self) -> str: ...


class ImmutableB(Immutable, label="B"):
    """
    Immutable value holding a single required text.

    Instances are created with the builder, by copying any Textual source or
    directly with keyword arguments. The text can't be changed afterwards,
    `with_text` produces a new value instead.

    Examples
    --------
    ```python
    value = ImmutableB.builder().text("hello").build()
    str(value)  # B{text=hello}
    value.with_text("hello") is value  # True
    ```
    """

    text: str

    @classmethod
    def builder(cls) -> "ImmutableBBuilder":
        return ImmutableBBuilder()

    @classmethod
    def copy_of(
        cls,
        instance: Textual,
        /,
    ) -> "ImmutableB":
        """
        Make an immutable copy of any Textual value.

        ImmutableB instances are returned as they are, other sources are read
        through their `get_text` accessor.

        Parameters
        ----------
        instance : Textual
            The value to copy

        Returns
        -------
        ImmutableB
            The same instance if already immutable, a new one otherwise

        Raises
        ------
        InvalidArgument
            If the instance is None or provides no text
        """
        if isinstance(instance, ImmutableB):
            _logger.debug("Reusing immutable instance %s", instance)
            return instance

        return ImmutableBBuilder().from_(instance).build()

    def get_text(self) -> str:
        return self.text

    def with_text(
        self,
        value: str,
        /,
    ) -> "ImmutableB":
        """
        Copy this value with a new text.

        Parameters
        ----------
        value : str
            The new text

        Returns
        -------
        ImmutableB
            This instance when the text is equal, a new instance otherwise

        Raises
        ------
        InvalidArgument
            If the value is None
        """
        required_text(value)
        if self.text == value:
            return self

        return ImmutableB(text=value)

    def __replace__(
        self,
        **changes: Any,
    ) -> "ImmutableB":
        if changes.keys() - {"text"}:
            raise TypeError(f"Unexpected attributes for ImmutableB: {sorted(changes.keys())}")

        if "text" not in changes:
            return self

        return self.with_text(changes["text"])


@final
class ImmutableBBuilder:
    """
    Collects values for ImmutableB and validates them before building.

    Builder is not thread-safe and should not be stored, use it immediately
    to create an instance and drop it afterwards.
    """

    __slots__ = ("_text",)

    def __init__(self) -> None:
        self._text: str | Missing = MISSING

    def from_(
        self,
        instance: Textual,
        /,
    ) -> Self:
        """
        Fill the builder with values of the provided instance.

        Parameters
        ----------
        instance : Textual
            The instance to copy values from

        Returns
        -------
        Self
            This builder for chained calls

        Raises
        ------
        InvalidArgument
            If the instance is None or its text is None
        """
        if instance is None:
            raise InvalidArgument(attribute="instance")

        return self.text(instance.get_text())

    def text(
        self,
        text: str,
        /,
    ) -> Self:
        self._text = required_text(text)
        return self

    def build(self) -> ImmutableB:
        """
        Build a new ImmutableB.

        Returns
        -------
        ImmutableB
            The built instance

        Raises
        ------
        IllegalState
            If any of required attributes was not set
        """
        if is_missing(self._text):
            _logger.debug("Cannot build B without text")
            raise IllegalState(
                type_name="B",
                missing=("text",),
            )

        return ImmutableB(text=self._text)
