import pytest

from consumo.room import Room


def test_new_room_is_empty():
    room = Room("Sala")
    assert room.name == "Sala"
    assert room.total_consumption() == 0.0
    assert room.appliance_names() == []
    assert room.appliance_listing() == ""


def test_names_are_sorted():
    room = Room("Cozinha")
    room.add_appliance("microondas", 1.0)
    room.add_appliance("geladeira", 2.0)
    room.add_appliance("airfryer", 0.5)
    assert room.appliance_names() == ["airfryer", "geladeira", "microondas"]
    assert list(room.appliances) == ["airfryer", "geladeira", "microondas"]


def test_total_consumption_sums_appliances():
    room = Room("Sala")
    room.add_appliance("TV", 1.5)
    room.add_appliance("Lampada", 2.5)
    assert room.total_consumption() == pytest.approx(4.0)


def test_adding_same_name_replaces():
    room = Room("Sala")
    room.add_appliance("TV", 1.5)
    room.add_appliance("TV", 3.0)
    assert room.appliance_names() == ["TV"]
    assert room.total_consumption() == pytest.approx(3.0)


def test_remove_appliance():
    room = Room("Sala")
    room.add_appliance("TV", 1.5)
    room.add_appliance("Radio", 0.5)
    room.remove_appliance("TV")
    assert room.appliance_names() == ["Radio"]
    assert room.total_consumption() == pytest.approx(0.5)


def test_remove_unknown_is_noop():
    room = Room("Sala")
    room.add_appliance("TV", 1.5)
    room.remove_appliance("Geladeira")
    assert room.appliance_names() == ["TV"]


def test_listing_format():
    room = Room("Cozinha")
    room.add_appliance("geladeira", 1.5)
    room.add_appliance("forno", 2.0)
    assert room.appliance_listing() == "forno: 2.000000 kWh\ngeladeira: 1.500000 kWh\n"


def test_rename():
    room = Room("Sala")
    room.name = "Quarto"
    assert room.name == "Quarto"