import pytest

from textvalue import IllegalState, Immutable, InvalidArgument


class Point(Immutable, label="P"):
    x: int
    y: int


class Named(Immutable):
    name: str


def test_attributes_are_collected_in_order() -> None:
    assert tuple(Point.__ATTRIBUTES__.keys()) == ("x", "y")
    assert Point.__match_args__ == ("x", "y")


def test_str_uses_label_or_class_name() -> None:
    assert str(Point(x=1, y=2)) == "P{x=1, y=2}"
    assert str(Named(name="value")) == "Named{name=value}"


def test_missing_attributes_are_listed() -> None:
    with pytest.raises(IllegalState) as excinfo:
        Point()  # pyright: ignore[reportCallIssue]

    assert excinfo.value.type_name == "P"
    assert excinfo.value.missing == ("x", "y")
    assert str(excinfo.value) == "Cannot build P, some of required attributes are not set ['x', 'y']"


def test_unexpected_attributes_are_rejected() -> None:
    with pytest.raises(TypeError):
        Point(x=1, y=2, z=3)  # pyright: ignore[reportCallIssue]


def test_attribute_types_are_checked() -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        Point(x=1, y="2")  # pyright: ignore[reportArgumentType]

    assert excinfo.value.attribute == "y"

    with pytest.raises(InvalidArgument):
        Point(x=None, y=2)  # pyright: ignore[reportArgumentType]


def test_equality_and_hash_follow_values() -> None:
    assert Point(x=1, y=2) == Point(x=1, y=2)
    assert hash(Point(x=1, y=2)) == hash(Point(x=1, y=2))
    assert Point(x=1, y=2) != Point(x=2, y=1)
    assert hash(Point(x=1, y=2)) != hash(Point(x=2, y=1))


def test_different_types_are_not_equal() -> None:
    class Other(Immutable):
        x: int
        y: int

    assert Point(x=1, y=2) != Other(x=1, y=2)


def test_replace_copies_only_on_change() -> None:
    point = Point(x=1, y=2)

    assert point.__replace__(x=1) is point
    assert point.__replace__(y=3) == Point(x=1, y=3)

    with pytest.raises(TypeError):
        point.__replace__(z=3)


def test_subclasses_are_final() -> None:
    assert getattr(Point, "__final__", False) is True
    assert getattr(Immutable, "__final__", False) is False


def test_modification_errors_name_attribute() -> None:
    point = Point(x=1, y=2)

    with pytest.raises(AttributeError, match="'x' cannot be modified"):
        point.x = 3  # pyright: ignore[reportAttributeAccessIssue]

    with pytest.raises(AttributeError, match="'y' cannot be deleted"):
        del point.y  # pyright: ignore[reportAttributeAccessIssue]
