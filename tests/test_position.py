import pytest

from geoshapes.errors import GeometryDecodeError, MalformedPosition, MalformedStructure
from geoshapes.position import Position, decode_position, encode_position


def test_construct_2d():
    position = Position.from_tuple((1.0, 2.0))
    assert position.longitude == 1.0
    assert position.latitude == 2.0
    assert position.altitude is None
    assert not position.has_altitude()


def test_construct_3d():
    position = Position.from_tuple((1.0, 2.0, 3.0))
    assert position.longitude == 1.0
    assert position.latitude == 2.0
    assert position.altitude == 3.0
    assert position.has_altitude()


def test_encodes_2d():
    assert encode_position(Position(longitude=1.0, latitude=2.0)) == [1.0, 2.0]


def test_encodes_3d():
    position = Position(longitude=1.0, latitude=2.0, altitude=3.0)
    assert encode_position(position) == [1.0, 2.0, 3.0]
    assert position.to_list() == [1.0, 2.0, 3.0]
    assert position.to_tuple() == (1.0, 2.0, 3.0)


def test_decodes_2d():
    position = decode_position([1.0, 2.0])
    assert position == Position(longitude=1.0, latitude=2.0)
    assert position.altitude is None


def test_decodes_3d():
    position = Position.from_list([1.0, 2.0, 3.0])
    assert position == Position(longitude=1.0, latitude=2.0, altitude=3.0)


def test_decodes_integers_as_floats():
    position = decode_position([1, 2, 3])
    assert position == Position(1.0, 2.0, 3.0)
    assert isinstance(position.longitude, float)
    assert isinstance(position.altitude, float)


def test_altitude_presence_is_part_of_equality():
    assert Position(1.0, 2.0) != Position(1.0, 2.0, 0.0)


def test_position_is_immutable():
    position = Position(1.0, 2.0)
    with pytest.raises(AttributeError):
        position.longitude = 5.0  # type: ignore[misc]


@pytest.mark.parametrize("value", [[], [1.0], [1.0, 2.0, 3.0, 4.0]])
def test_rejects_wrong_arity(value):
    with pytest.raises(MalformedPosition) as excinfo:
        decode_position(value)
    assert excinfo.value.found_length == len(value)


def test_missing_element_reported_at_its_index():
    with pytest.raises(MalformedPosition) as excinfo:
        decode_position([1.0])
    assert excinfo.value.index == 1
    assert "invalid length 1" in str(excinfo.value)

    with pytest.raises(MalformedPosition) as excinfo:
        decode_position([])
    assert excinfo.value.index == 0


def test_excess_element_is_not_truncated():
    with pytest.raises(MalformedPosition) as excinfo:
        decode_position([1.0, 2.0, 3.0, 4.0, 5.0])
    assert excinfo.value.found_length == 5
    assert excinfo.value.index == 3


def test_from_tuple_rejects_wrong_arity():
    with pytest.raises(MalformedPosition):
        Position.from_tuple((1.0,))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "value", [1.0, "1,2", {"longitude": 1.0, "latitude": 2.0}, None]
)
def test_rejects_non_arrays(value):
    with pytest.raises(MalformedStructure):
        decode_position(value)


def test_rejects_non_numeric_element_at_its_index():
    with pytest.raises(MalformedStructure) as excinfo:
        decode_position([1.0, "2.0"], path="$.coordinates")
    assert excinfo.value.path == "$.coordinates[1]"


def test_rejects_booleans():
    with pytest.raises(MalformedStructure):
        decode_position([True, 2.0])


def test_decode_errors_are_value_errors():
    assert issubclass(MalformedPosition, GeometryDecodeError)
    assert issubclass(MalformedStructure, GeometryDecodeError)
    with pytest.raises(ValueError):
        decode_position([1.0])


def test_rejects_integer_too_large_for_float():
    with pytest.raises(MalformedStructure) as excinfo:
        decode_position([10**400, 0], path="$.coordinates")
    assert excinfo.value.path == "$.coordinates[0]"
