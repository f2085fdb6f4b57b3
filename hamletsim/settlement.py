"""Settlements that share a resource pool and report changes to observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Mapping

from hamletsim.buildings import (
    Building,
    BuildingType,
    ResourceMap,
    ResourceType,
    build_cost,
    create_building,
)


class SettlementObserver(ABC):
    """Receives notifications about what happens in a settlement."""

    @abstractmethod
    def on_day_advanced(self, day: int) -> None:
        """Called after a settlement has advanced to ``day``."""

    @abstractmethod
    def on_building_constructed(self, building_type: BuildingType) -> None:
        """Called after a new building has been constructed."""

    @abstractmethod
    def on_building_upgraded(self, building_type: BuildingType, level: int) -> None:
        """Called after a building has been upgraded to ``level``."""

    @abstractmethod
    def on_resources_changed(self, resources: Mapping[ResourceType, int]) -> None:
        """Called with a read-only view of the resources after they changed."""


class Settlement(ABC):
    """A settlement working on a resource pool that may be shared with others."""

    def __init__(self, resources: ResourceMap) -> None:
        self.resources = resources
        self._observers: list[SettlementObserver] = []

    def add_observer(self, observer: SettlementObserver) -> None:
        """Register ``observer`` for all future notifications."""
        self._observers.append(observer)

    def add_resources(self, produced: Mapping[ResourceType, int]) -> None:
        """Add ``produced`` to the pool and notify observers."""
        for resource, amount in produced.items():
            self.resources[resource] = self.resources.get(resource, 0) + amount
        self._notify_resources_changed()

    def consume_resources(self, cost: Mapping[ResourceType, int]) -> None:
        """Take ``cost`` out of the pool and notify observers."""
        for resource, amount in cost.items():
            self.resources[resource] = self.resources.get(resource, 0) - amount
        self._notify_resources_changed()

    @abstractmethod
    def advance_day(self, day: int) -> None:
        """Run the settlement for ``day``."""

    def _notify_day_advanced(self, day: int) -> None:
        for observer in self._observers:
            observer.on_day_advanced(day)

    def _notify_building_constructed(self, building_type: BuildingType) -> None:
        for observer in self._observers:
            observer.on_building_constructed(building_type)

    def _notify_building_upgraded(self, building_type: BuildingType, level: int) -> None:
        for observer in self._observers:
            observer.on_building_upgraded(building_type, level)

    def _notify_resources_changed(self) -> None:
        view = MappingProxyType(self.resources)
        for observer in self._observers:
            observer.on_resources_changed(view)


class MajorSettlement(Settlement):
    """A settlement that produces through buildings, upgrades them and builds more."""

    def __init__(self, resources: ResourceMap) -> None:
        super().__init__(resources)
        self.buildings: list[Building] = []

    def advance_day(self, day: int) -> None:
        """Collect production, then upgrade what can be upgraded, then build."""
        self._collect_production(day)
        self._upgrade_buildings()
        self._construct_buildings()

    def _collect_production(self, day: int) -> None:
        produced: ResourceMap = {}
        for building in self.buildings:
            amount = building.resource_for_day(day)
            produced[building.resource] = produced.get(building.resource, 0) + amount
        self.add_resources(produced)

    def _upgrade_buildings(self) -> None:
        for building in self.buildings:
            if not building.can_upgrade(self.resources):
                continue
            self.consume_resources(building.upgrade_cost())
            building.upgrade()
            self._notify_building_upgraded(building.building_type, building.level)

    def _construct_buildings(self) -> None:
        for building_type in BuildingType:
            cost = build_cost(building_type)
            affordable = all(
                self.resources.get(resource, None) is not None
                and self.resources[resource] >= required
                for resource, required in cost.items()
            )
            if not affordable:
                continue
            self.consume_resources(cost)
            self.buildings.append(create_building(building_type))
            self._notify_building_constructed(building_type)


class MinorSettlement(Settlement):
    """A settlement without buildings that yields a fixed bundle at an interval."""

    DAILY_PRODUCTION: Mapping[ResourceType, int] = MappingProxyType(
        {ResourceType.WOOD: 2, ResourceType.BRICK: 1, ResourceType.FOOD: 1}
    )
    PRODUCTION_INTERVAL = 3

    def advance_day(self, day: int) -> None:
        """Add the fixed production on interval days, then report the new day."""
        if day % self.PRODUCTION_INTERVAL == 0:
            self.add_resources(self.DAILY_PRODUCTION)
        self._notify_day_advanced(day)