"""Tests for the food service."""

from uuid import uuid4

import pytest

from calorie_tracker.domain.foods import FoodInput, ParsedFood
from calorie_tracker.services.cache import QueryCache
from calorie_tracker.services.foods import FoodService
from tests.conftest import InMemoryFoodRepository


def _parsed(index: int, errors: tuple[str, ...] = ()) -> ParsedFood:
    return ParsedFood(
        row_index=index + 2,
        name=f"Food {index}",
        calories_per_100g=100,
        protein_per_100g=1,
        carbs_per_100g=2,
        fats_per_100g=3,
        errors=errors,
    )


def test_list_foods_is_cached_until_a_food_changes() -> None:
    repository = InMemoryFoodRepository()
    service = FoodService(repository, cache=QueryCache())
    user_id = uuid4()
    repository.add(user_id, "Rice", 130)

    assert [food.name for food in service.list_foods(user_id)] == ["Rice"]
    service.list_foods(user_id)
    assert repository.list_calls == 1

    service.create_food(user_id, FoodInput(name="Apple", calories_per_100g=52))
    names = [food.name for food in service.list_foods(user_id)]

    assert names == ["Apple", "Rice"]
    assert repository.list_calls == 2


def test_update_and_delete_food() -> None:
    repository = InMemoryFoodRepository()
    service = FoodService(repository)
    user_id = uuid4()
    food = repository.add(user_id, "Rice", 130)

    updated = service.update_food(
        user_id, food.id, FoodInput(name="Brown rice", calories_per_100g=123)
    )
    assert updated.name == "Brown rice"
    assert updated.id == food.id

    service.delete_food(user_id, food.id)
    assert service.list_foods(user_id) == []


def test_update_of_unknown_or_foreign_food_returns_none() -> None:
    cache = QueryCache()
    repository = InMemoryFoodRepository()
    service = FoodService(repository, cache=cache)
    owner = uuid4()
    other = uuid4()
    food = repository.add(owner, "Rice", 130)
    service.list_foods(other)
    payload = FoodInput(name="Brown rice", calories_per_100g=123)

    assert service.update_food(other, food.id, payload) is None
    assert service.update_food(owner, uuid4(), payload) is None
    assert repository.foods[food.id].name == "Rice"
    assert cache.get(("foods", other, None)) is not None


def test_food_input_rejects_negative_and_blank_values() -> None:
    with pytest.raises(ValueError):
        FoodInput(name="  ", calories_per_100g=10)
    with pytest.raises(ValueError):
        FoodInput(name="Rice", calories_per_100g=-1)


def test_import_inserts_valid_rows_in_batches() -> None:
    repository = InMemoryFoodRepository()
    service = FoodService(repository)
    user_id = uuid4()
    rows = [_parsed(index) for index in range(23)]
    rows.append(_parsed(23, errors=("Invalid calories",)))

    summary = service.import_foods(user_id, rows)

    assert summary.imported == 23
    assert summary.skipped == 1
    assert summary.batches == 3
    assert repository.batch_sizes == [10, 10, 3]
    assert len(repository.foods) == 23


def test_import_failure_keeps_earlier_batches_and_invalidates_cache() -> None:
    cache = QueryCache()
    repository = InMemoryFoodRepository(fail_on_batch=1)
    service = FoodService(repository, cache=cache)
    user_id = uuid4()
    service.list_foods(user_id)

    with pytest.raises(RuntimeError):
        service.import_foods(user_id, [_parsed(index) for index in range(15)])

    assert repository.batch_sizes == [10]
    assert len(service.list_foods(user_id)) == 10
