"""Resource and building definitions, and the buildings a settlement can own."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ResourceType(Enum):
    """Kinds of resource a settlement stores and produces."""

    WOOD = "Wood"
    STONE = "Stone"
    BRICK = "Brick"
    FOOD = "Food"

    def __str__(self) -> str:
        return self.value


class BuildingType(Enum):
    """Kinds of building a settlement can construct."""

    FARMHOUSE = "Farmhouse"
    BRICKWORKS = "Brickworks"
    LUMBER_CAMP = "LumberCamp"
    QUARRY = "Quarry"

    def __str__(self) -> str:
        return self.value


ResourceMap = dict[ResourceType, int]

_BUILD_COSTS: Mapping[BuildingType, Mapping[ResourceType, int]] = MappingProxyType(
    {
        BuildingType.FARMHOUSE: MappingProxyType(
            {ResourceType.STONE: 1, ResourceType.BRICK: 5}
        ),
        BuildingType.BRICKWORKS: MappingProxyType(
            {ResourceType.WOOD: 2, ResourceType.STONE: 3}
        ),
        BuildingType.LUMBER_CAMP: MappingProxyType(
            {ResourceType.BRICK: 2, ResourceType.FOOD: 3}
        ),
        BuildingType.QUARRY: MappingProxyType(
            {ResourceType.FOOD: 3, ResourceType.WOOD: 3, ResourceType.BRICK: 3}
        ),
    }
)


def build_cost(building_type: BuildingType) -> ResourceMap:
    """Return a fresh copy of the resources needed to construct a building type."""
    try:
        return dict(_BUILD_COSTS[building_type])
    except (KeyError, TypeError):
        raise ValueError(f"Unknown building type: {building_type!r}") from None


@dataclass
class Building:
    """A building that produces one resource at a fixed day interval."""

    level: int
    max_level: int
    production_amount: int
    production_interval: int
    resource: ResourceType
    building_type: BuildingType

    def __post_init__(self) -> None:
        if self.level < 0 or self.max_level <= 0 or self.level > self.max_level:
            raise ValueError("Invalid building levels")

    @property
    def at_max_level(self) -> bool:
        return self.level >= self.max_level

    def resource_for_day(self, day: int) -> int:
        """Return the amount produced on ``day``; zero on days off the interval."""
        if day % self.production_interval == 0:
            return self.production_amount
        return 0

    def upgrade_cost(self) -> ResourceMap:
        """Return the resources needed to upgrade from the current level."""
        return {
            resource: base * self.level
            for resource, base in build_cost(self.building_type).items()
        }

    def can_upgrade(self, available: Mapping[ResourceType, int]) -> bool:
        """Tell whether ``available`` covers an upgrade and the level allows one."""
        if self.at_max_level:
            return False
        return all(
            resource in available and available[resource] >= required
            for resource, required in self.upgrade_cost().items()
        )

    def upgrade(self) -> None:
        """Raise the level by one and production by two."""
        self.level += 1
        self.production_amount += 2


_DEFAULT_SPECS: Mapping[BuildingType, tuple[int, int, int, int, ResourceType]] = (
    MappingProxyType(
        {
            BuildingType.FARMHOUSE: (1, 5, 2, 2, ResourceType.FOOD),
            BuildingType.BRICKWORKS: (1, 4, 2, 3, ResourceType.BRICK),
            BuildingType.LUMBER_CAMP: (1, 4, 1, 1, ResourceType.WOOD),
            BuildingType.QUARRY: (1, 3, 3, 2, ResourceType.STONE),
        }
    )
)


def create_building(building_type: BuildingType) -> Building:
    """Create a new building of ``building_type`` with its default settings."""
    try:
        level, max_level, amount, interval, resource = _DEFAULT_SPECS[building_type]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown building type: {building_type!r}") from None
    return Building(level, max_level, amount, interval, resource, building_type)