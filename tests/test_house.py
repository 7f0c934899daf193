import io

import pytest

from consumo.house import House
from consumo.room import Room


def _room(name, **appliances):
    room = Room(name)
    for appliance, consumption in appliances.items():
        room.add_appliance(appliance, consumption)
    return room


def test_empty_house():
    house = House()
    assert house.rooms == ()
    assert house.total_consumption() == 0.0
    assert house.describe_rooms() == []


def test_rooms_keep_insertion_order():
    house = House()
    house.add_room(Room("Sala"))
    house.add_room(Room("Cozinha"))
    assert [room.name for room in house.rooms] == ["Sala", "Cozinha"]


def test_total_is_sum_of_rooms():
    house = House()
    sala = _room("Sala", TV=1.5)
    cozinha = _room("Cozinha", geladeira=2.5, forno=1.0)
    house.add_room(sala)
    house.add_room(cozinha)
    expected = sala.total_consumption() + cozinha.total_consumption()
    assert house.total_consumption() == pytest.approx(expected)


def test_remove_room_removes_first_match_only():
    house = House()
    first = Room("Quarto")
    second = Room("Quarto")
    house.add_room(first)
    house.add_room(second)
    house.remove_room("Quarto")
    assert len(house.rooms) == 1
    assert house.rooms[0] is second


def test_remove_unknown_room_is_noop():
    house = House()
    house.add_room(Room("Sala"))
    house.remove_room("Garagem")
    assert [room.name for room in house.rooms] == ["Sala"]


def test_get_room_returns_live_room():
    house = House()
    house.add_room(Room("Sala"))
    house.get_room("Sala").add_appliance("TV", 2.0)
    assert house.total_consumption() == pytest.approx(2.0)


def test_get_missing_room_raises():
    house = House()
    with pytest.raises(KeyError):
        house.get_room("Sala")


def test_describe_and_print_rooms():
    house = House()
    house.add_room(_room("Sala", TV=1.5))
    house.add_room(Room("Quarto"))
    assert house.describe_rooms() == ["Sala: 1.50 kWh", "Quarto: 0.00 kWh"]
    out = io.StringIO()
    house.print_rooms(out)
    assert out.getvalue() == "Sala: 1.50 kWh\nQuarto: 0.00 kWh\n"