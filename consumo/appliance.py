"""Household appliances and their energy consumption in kWh."""

from __future__ import annotations

from dataclasses import dataclass, field

HOURS_PER_DAY = 24.0


@dataclass
class Appliance:
    """An appliance used for some hours a day over a simulated number of days."""

    power: int = 0
    quantity: int = 0
    hours_used: float = 0.0
    days: int = 0
    has_standby: bool = False
    standby_power: float = 0.0
    kwh: float = field(default=0.0, init=False)

    def calc_kwh(self) -> float:
        """Compute, store and return the consumption in kWh, standby included."""
        active = (self.power * self.hours_used * self.days * self.quantity) / 1000.0
        standby = 0.0
        if self.has_standby:
            standby_hours = HOURS_PER_DAY - self.hours_used
            standby = (self.standby_power * standby_hours * self.days * self.quantity) / 1000.0
        self.kwh = active + standby
        return self.kwh

    def set_standby(self, has_standby: bool = False, standby_power: float = 0.0) -> None:
        """Set whether the appliance draws standby power, and how much."""
        self.has_standby = has_standby
        self.standby_power = standby_power


class Refrigerator(Appliance):
    """An appliance that runs all day long."""

    def __init__(self, power: int = 1, quantity: int = 1, days: int = 1) -> None:
        super().__init__(power=power, quantity=quantity, hours_used=HOURS_PER_DAY, days=days)