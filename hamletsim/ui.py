"""Console observer that prints settlement events."""

from __future__ import annotations

import sys
from typing import Mapping, TextIO

from hamletsim.buildings import BuildingType, ResourceType
from hamletsim.settlement import SettlementObserver


class ConsoleObserver(SettlementObserver):
    """Writes a line of text for every settlement event."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def on_day_advanced(self, day: int) -> None:
        print(f"\nSettlement advanced by a day. Current day: {day}", file=self.out)

    def on_building_constructed(self, building_type: BuildingType) -> None:
        print(f"\nBuilt: {building_type} !!", file=self.out)

    def on_building_upgraded(self, building_type: BuildingType, level: int) -> None:
        print(f"\nUpgraded: {building_type} to level {level} !!", file=self.out)

    def on_resources_changed(self, resources: Mapping[ResourceType, int]) -> None:
        lines = ["\nResources updated:"]
        lines.extend(f"  {resource} : {amount}" for resource, amount in resources.items())
        print("\n".join(lines), file=self.out)