"""A house made of rooms."""

from __future__ import annotations

import sys
from typing import TextIO

from consumo.room import Room


class House:
    """An ordered collection of rooms."""

    def __init__(self) -> None:
        self._rooms: list[Room] = []

    @property
    def rooms(self) -> tuple[Room, ...]:
        """The rooms, in the order they were added."""
        return tuple(self._rooms)

    def add_room(self, room: Room) -> None:
        """Append a room."""
        self._rooms.append(room)

    def remove_room(self, name: str) -> None:
        """Remove the first room with this name; an unknown name does nothing."""
        for room in self._rooms:
            if room.name == name:
                self._rooms.remove(room)
                return

    def total_consumption(self) -> float:
        """Sum of the consumption of every room, in kWh."""
        return sum((room.total_consumption() for room in self._rooms), 0.0)

    def get_room(self, name: str) -> Room:
        """The first room with this name; raises KeyError if there is none."""
        for room in self._rooms:
            if room.name == name:
                return room
        raise KeyError(name)

    def describe_rooms(self) -> list[str]:
        """One line per room: 'name: consumption kWh' with two decimals."""
        return [f"{room.name}: {room.total_consumption():.2f} kWh" for room in self._rooms]

    def print_rooms(self, out: TextIO | None = None) -> None:
        """Write the room descriptions, one per line."""
        stream = sys.stdout if out is None else out
        for line in self.describe_rooms():
            print(line, file=stream)