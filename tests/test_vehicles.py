import pytest

from travelbooking.vehicles import (
    Bus,
    KeyValues,
    Train,
    Van,
    parse_key_value,
    vehicle_from_line,
)


def test_parse_key_value_reads_all_fields():
    assert parse_key_value("ID=V1 Capacity=40 Route=R AC=Yes") == KeyValues("V1", 40, "R", True)


def test_parse_key_value_ignores_unknown_tokens():
    fields = parse_key_value("junk ID=X Other=1 AC=No")
    assert fields.vehicle_id == "X"
    assert fields.ac is False


def test_parse_key_value_does_not_read_compartments():
    assert parse_key_value("Compartments=5 ID=T1") == KeyValues(vehicle_id="T1")


def test_parse_key_value_bad_capacity_raises():
    with pytest.raises(ValueError):
        parse_key_value("ID=V1 Capacity=abc")


def test_bus_line_format():
    assert Bus("B1", 40, "City").to_line() == "Type=Bus ID=B1 Capacity=40 Route=City"


def test_van_describe_format():
    assert Van("V1", 8, True).describe() == "[Van] ID: V1, Capacity: 8, AC: Yes"


def test_train_describe_mentions_compartments():
    text = Train("T1", 200, 12).describe()
    assert text.startswith("[Train] ID: T1")
    assert "Compartments: 12" in text


@pytest.mark.parametrize(
    "vehicle",
    [Bus("B1", 40, "City"), Van("V1", 8, True), Van("V2", 6, False), Train("T1", 200)],
)
def test_round_trip(vehicle):
    assert vehicle_from_line(vehicle.to_line()) == vehicle


def test_train_compartments_not_restored():
    assert vehicle_from_line(Train("T1", 200, 12).to_line()) == Train("T1", 200)


def test_kind_matches_line_type():
    for vehicle in (Bus("B"), Train("T"), Van("V")):
        assert vehicle.to_line().startswith(f"Type={vehicle.kind} ")


@pytest.mark.parametrize(
    "line",
    [
        "Type=Plane ID=X Capacity=3",
        "Kind=Bus ID=X Capacity=3",
        "Type=Bus Capacity=3",
        "Type=Bus",
        " Type=Bus ID=X",
        "Type=Van ID=X Capacity=many",
    ],
)
def test_bad_lines_raise(line):
    with pytest.raises(ValueError):
        vehicle_from_line(line)