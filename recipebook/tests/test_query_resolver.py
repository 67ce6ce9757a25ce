from __future__ import annotations

from collections.abc import Sequence

import pytest

from recipebook.application.use_cases.recipes.list_recipes import ListRecipesUseCase
from recipebook.application.use_cases.recipes.query_resolver import (
    ByIngredient,
    ByName,
    ListAll,
    PagedSearch,
    resolve_recipe_query,
)
from recipebook.domain.pagination import Page, SortDirection
from recipebook.domain.recipes.entities import Recipe, RecipeIngredient
from recipebook.shared.errors import BadPaginationError, BadSortFieldError


class RecordingRecipeRepository:
    """Answers every query and remembers which one was asked."""

    def __init__(self, recipes: Sequence[Recipe]) -> None:
        self._recipes = list(recipes)
        self.calls: list[tuple] = []

    def _sorted(self) -> list[Recipe]:
        return sorted(self._recipes, key=lambda r: r.id)

    def list_all(self) -> list[Recipe]:
        self.calls.append(("list_all",))
        return self._sorted()

    def search_by_name(self, term: str) -> list[Recipe]:
        self.calls.append(("search_by_name", term))
        return [r for r in self._sorted() if r.matches_name(term)]

    def search_by_ingredient(self, term: str) -> list[Recipe]:
        self.calls.append(("search_by_ingredient", term))
        return [r for r in self._sorted() if r.matches_ingredient(term)]

    def search_paged(self, term, page_number, page_size, sort_by="id", sort_direction=SortDirection.ASC):
        self.calls.append(("search_paged", term, page_number, page_size, sort_by, sort_direction))
        matches = [r for r in self._sorted() if not term or r.matches_name(term)]
        return Page.paginate(matches, page_number=page_number, page_size=page_size)


RECIPES = [
    Recipe(id=1, name="Tomato Soup", ingredients=(RecipeIngredient("tomato"),)),
    Recipe(id=2, name="Salad", ingredients=(RecipeIngredient("lettuce"), RecipeIngredient("tomato"))),
    Recipe(id=3, name="Onion Soup", ingredients=(RecipeIngredient("onion"),)),
]


@pytest.fixture()
def repo() -> RecordingRecipeRepository:
    return RecordingRecipeRepository(RECIPES)


def test_name_wins_over_every_other_parameter() -> None:
    query = resolve_recipe_query(
        {"name": "soup", "ingredient": "tomato", "page": "1", "pageSize": "2", "term": "x"}
    )
    assert query == ByName(term="soup")


def test_ingredient_wins_over_paging() -> None:
    query = resolve_recipe_query({"ingredient": "tomato", "page": "1", "pageSize": "2"})
    assert query == ByIngredient(term="tomato")


def test_paging_requires_both_page_and_page_size() -> None:
    assert resolve_recipe_query({"page": "1"}) == ListAll()
    assert resolve_recipe_query({"pageSize": "5"}) == ListAll()
    assert resolve_recipe_query({"term": "soup"}) == ListAll()


def test_paged_search_collects_sort_options() -> None:
    query = resolve_recipe_query(
        {"page": "2", "pageSize": "5", "term": "soup", "sortBy": "name", "sortDirection": "DESC"}
    )
    assert query == PagedSearch(
        term="soup", page_number=2, page_size=5, sort_by="name", sort_direction=SortDirection.DESC
    )


def test_paged_search_defaults() -> None:
    query = resolve_recipe_query({"page": "1", "pageSize": "5", "term": "  "})
    assert query == PagedSearch(term=None, page_number=1, page_size=5)


def test_empty_name_is_still_a_name_search() -> None:
    assert resolve_recipe_query({"name": ""}) == ByName(term="")


def test_no_parameters_lists_everything() -> None:
    assert resolve_recipe_query({}) == ListAll()


@pytest.mark.parametrize(
    "params",
    [
        {"page": "0", "pageSize": "5"},
        {"page": "1", "pageSize": "0"},
        {"page": "abc", "pageSize": "5"},
        {"page": "1", "pageSize": "-3"},
        {"page": "1", "pageSize": "101"},
    ],
)
def test_bad_paging_values_are_rejected(params: dict[str, str]) -> None:
    with pytest.raises(BadPaginationError):
        resolve_recipe_query(params, max_page_size=100)


def test_unknown_sort_field_is_rejected() -> None:
    with pytest.raises(BadSortFieldError) as exc_info:
        resolve_recipe_query({"page": "1", "pageSize": "5", "sortBy": "calories"})
    assert exc_info.value.status == 422


def test_name_search_returns_soups(repo: RecordingRecipeRepository) -> None:
    result = ListRecipesUseCase(recipes=repo).execute({"name": "soup"})

    assert [r.id for r in result] == [1, 3]
    assert repo.calls == [("search_by_name", "soup")]


def test_ingredient_search_ignores_paging(repo: RecordingRecipeRepository) -> None:
    result = ListRecipesUseCase(recipes=repo).execute(
        {"ingredient": "tomato", "page": "1", "pageSize": "1"}
    )

    assert [r.id for r in result] == [1, 2]
    assert repo.calls[0] == ("search_by_ingredient", "tomato")


def test_second_page_of_one(repo: RecordingRecipeRepository) -> None:
    page = ListRecipesUseCase(recipes=repo).execute({"page": "2", "pageSize": "1"})

    assert isinstance(page, Page)
    assert [r.id for r in page.items] == [2]
    assert page.total_pages == 3
    assert page.total_items == 3
    assert repo.calls == [("search_paged", None, 2, 1, "id", SortDirection.ASC)]


def test_list_all_when_no_parameters(repo: RecordingRecipeRepository) -> None:
    result = ListRecipesUseCase(recipes=repo).execute({})

    assert [r.id for r in result] == [1, 2, 3]
    assert repo.calls == [("list_all",)]
