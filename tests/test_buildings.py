import pytest

from hamletsim.buildings import (
    Building,
    BuildingType,
    ResourceType,
    build_cost,
    create_building,
)


def _plenty() -> dict:
    return {resource: 1000 for resource in ResourceType}


def test_enum_names_print_as_source_names():
    camp = create_building(BuildingType.LUMBER_CAMP)
    farm = create_building(BuildingType.FARMHOUSE)
    assert str(camp.building_type) == "LumberCamp"
    assert str(camp.resource) == "Wood"
    assert str(farm.building_type) == "Farmhouse"
    assert sorted(str(r) for r in build_cost(BuildingType.FARMHOUSE)) == ["Brick", "Stone"]


def test_farmhouse_build_cost():
    assert build_cost(BuildingType.FARMHOUSE) == {
        ResourceType.STONE: 1,
        ResourceType.BRICK: 5,
    }


def test_quarry_build_cost():
    assert build_cost(BuildingType.QUARRY) == {
        ResourceType.FOOD: 3,
        ResourceType.WOOD: 3,
        ResourceType.BRICK: 3,
    }


def test_build_cost_returns_independent_copy():
    cost = build_cost(BuildingType.BRICKWORKS)
    cost[ResourceType.WOOD] = 999
    assert build_cost(BuildingType.BRICKWORKS)[ResourceType.WOOD] == 2


def test_build_cost_unknown_type():
    with pytest.raises(ValueError):
        build_cost("Castle")


@pytest.mark.parametrize(
    "building_type, max_level, amount, interval, resource",
    [
        (BuildingType.FARMHOUSE, 5, 2, 2, ResourceType.FOOD),
        (BuildingType.BRICKWORKS, 4, 2, 3, ResourceType.BRICK),
        (BuildingType.LUMBER_CAMP, 4, 1, 1, ResourceType.WOOD),
        (BuildingType.QUARRY, 3, 3, 2, ResourceType.STONE),
    ],
)
def test_create_building_defaults(building_type, max_level, amount, interval, resource):
    building = create_building(building_type)
    assert building.building_type is building_type
    assert building.level == 1
    assert building.max_level == max_level
    assert building.production_amount == amount
    assert building.production_interval == interval
    assert building.resource is resource


def test_create_building_unknown_type():
    with pytest.raises(ValueError):
        create_building(None)


def test_create_building_gives_fresh_instances():
    first = create_building(BuildingType.QUARRY)
    second = create_building(BuildingType.QUARRY)
    first.upgrade()
    assert second.level == 1


@pytest.mark.parametrize(
    "level, max_level",
    [(-1, 3), (1, 0), (4, 3), (0, -2)],
)
def test_invalid_levels_rejected(level, max_level):
    with pytest.raises(ValueError):
        Building(level, max_level, 1, 1, ResourceType.WOOD, BuildingType.LUMBER_CAMP)


def test_level_zero_and_level_equal_max_are_valid():
    low = Building(0, 2, 1, 1, ResourceType.WOOD, BuildingType.LUMBER_CAMP)
    top = Building(2, 2, 1, 1, ResourceType.WOOD, BuildingType.LUMBER_CAMP)
    assert low.level == 0
    assert top.at_max_level


def test_resource_for_day_follows_interval():
    farm = create_building(BuildingType.FARMHOUSE)
    produced = [farm.resource_for_day(day) for day in range(6)]
    assert produced == [farm.production_amount, 0] * 3


def test_lumber_camp_produces_every_day():
    camp = create_building(BuildingType.LUMBER_CAMP)
    assert all(camp.resource_for_day(day) == camp.production_amount for day in range(10))


def test_upgrade_cost_at_level_one_equals_build_cost():
    for building_type in BuildingType:
        building = create_building(building_type)
        assert building.upgrade_cost() == build_cost(building_type)


def test_upgrade_cost_scales_with_level():
    brickworks = create_building(BuildingType.BRICKWORKS)
    brickworks.upgrade()
    base = build_cost(BuildingType.BRICKWORKS)
    assert brickworks.upgrade_cost() == {r: a * 2 for r, a in base.items()}


def test_upgrade_raises_level_and_production():
    farm = create_building(BuildingType.FARMHOUSE)
    before = farm.production_amount
    farm.upgrade()
    assert farm.level == 2
    assert farm.production_amount == before + 2


def test_can_upgrade_with_enough_resources():
    farm = create_building(BuildingType.FARMHOUSE)
    assert farm.can_upgrade(build_cost(BuildingType.FARMHOUSE))


def test_can_upgrade_fails_when_short():
    farm = create_building(BuildingType.FARMHOUSE)
    available = build_cost(BuildingType.FARMHOUSE)
    available[ResourceType.BRICK] -= 1
    assert not farm.can_upgrade(available)


def test_can_upgrade_fails_when_resource_missing():
    farm = create_building(BuildingType.FARMHOUSE)
    assert not farm.can_upgrade({ResourceType.STONE: 100})


def test_can_upgrade_level_zero_needs_key_present():
    building = Building(0, 3, 1, 1, ResourceType.WOOD, BuildingType.LUMBER_CAMP)
    assert not building.can_upgrade({})
    assert building.can_upgrade({ResourceType.BRICK: 0, ResourceType.FOOD: 0})


def test_can_upgrade_false_at_max_level():
    quarry = create_building(BuildingType.QUARRY)
    while not quarry.at_max_level:
        quarry.upgrade()
    assert quarry.level == quarry.max_level
    assert not quarry.can_upgrade(_plenty())


def test_can_upgrade_does_not_change_available():
    farm = create_building(BuildingType.FARMHOUSE)
    available = _plenty()
    farm.can_upgrade(available)
    assert available == _plenty()