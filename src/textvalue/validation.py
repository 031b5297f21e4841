from typing import Any

from textvalue.errors import InvalidArgument

__all__ = (
    "required_text",
    "validated_attribute",
)


def required_text(
    value: Any,
    /,
    *,
    attribute: str = "text",
) -> str:
    """
    Ensure that the value is an actual string.

    Parameters
    ----------
    value : Any
        The value to check
    attribute : str, default="text"
        Name of the attribute reported when the check fails

    Returns
    -------
    str
        The same value, unchanged

    Raises
    ------
    InvalidArgument
        If the value is None or not a string
    """
    if value is None or not isinstance(value, str):
        raise InvalidArgument(attribute=attribute)

    return value


def validated_attribute(
    value: Any,
    /,
    *,
    attribute: str,
    annotation: Any,
) -> Any:
    if annotation is str:
        return required_text(value, attribute=attribute)

    if value is None:
        raise InvalidArgument(attribute=attribute)

    # only plain classes are checked, generic annotations are taken as is
    if isinstance(annotation, type) and not isinstance(value, annotation):
        raise InvalidArgument(attribute=attribute)

    return value
