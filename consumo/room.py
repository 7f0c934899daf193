"""A room holding named appliances with their consumption."""

from __future__ import annotations


class Room:
    """A named room; appliances are kept by name, listed in name order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._appliances: dict[str, float] = {}

    def __repr__(self) -> str:
        return f"Room({self.name!r})"

    @property
    def appliances(self) -> dict[str, float]:
        """A name-ordered copy of the appliances and their consumption."""
        return dict(sorted(self._appliances.items()))

    def add_appliance(self, name: str, consumption: float) -> None:
        """Add an appliance, replacing the consumption of one with the same name."""
        self._appliances[name] = consumption

    def remove_appliance(self, name: str) -> None:
        """Remove an appliance; removing an unknown one does nothing."""
        self._appliances.pop(name, None)

    def total_consumption(self) -> float:
        """Sum of the consumption of all appliances, in kWh."""
        return sum(self._appliances.values(), 0.0)

    def appliance_names(self) -> list[str]:
        """Appliance names in sorted order."""
        return sorted(self._appliances)

    def appliance_listing(self) -> str:
        """One line per appliance, 'name: consumption kWh', in name order."""
        return "".join(
            f"{name}: {consumption:.6f} kWh\n"
            for name, consumption in sorted(self._appliances.items())
        )