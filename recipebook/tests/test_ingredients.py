from __future__ import annotations

import pytest

from recipebook.application.use_cases.ingredients.manage_ingredients import (
    DeleteIngredientUseCase,
    GetIngredientUseCase,
    ListIngredientsUseCase,
    SaveIngredientUseCase,
)
from recipebook.domain.chefs.entities import ChefIdentity
from recipebook.domain.pagination import Page
from recipebook.infrastructure.repositories.ingredients.sqlalchemy_ingredient_repository import (
    SqlAlchemyIngredientRepository,
)
from recipebook.shared.errors import (
    BadPaginationError,
    DuplicateIngredientError,
    IngredientNotFoundError,
)

CHEF = ChefIdentity(id=1, username="remy")


@pytest.fixture()
def repo(session_factory) -> SqlAlchemyIngredientRepository:
    return SqlAlchemyIngredientRepository(session_factory)


@pytest.fixture()
def save(repo: SqlAlchemyIngredientRepository) -> SaveIngredientUseCase:
    return SaveIngredientUseCase(ingredients=repo)


@pytest.fixture()
def seeded(repo: SqlAlchemyIngredientRepository, save: SaveIngredientUseCase):
    for name in ("Tomato", "Basil", "Cherry Tomato", "Garlic", "Onion"):
        save.execute(CHEF, name)
    return repo


def test_save_assigns_ids_in_order(seeded: SqlAlchemyIngredientRepository) -> None:
    assert [(i.id, i.name) for i in seeded.list_all()][:2] == [(1, "Tomato"), (2, "Basil")]


def test_search_is_substring(seeded: SqlAlchemyIngredientRepository) -> None:
    assert [i.name for i in seeded.search("tomato")] == ["Tomato", "Cherry Tomato"]


def test_list_page_and_search_page(seeded: SqlAlchemyIngredientRepository) -> None:
    page = seeded.list_page(2, 2)
    assert [i.id for i in page.items] == [3, 4]
    assert page.total_pages == 3

    filtered = seeded.search_page("o", 1, 2)
    assert filtered.total_items == 3
    assert [i.name for i in filtered.items] == ["Tomato", "Cherry Tomato"]

    assert seeded.list_page(10, 2).items == ()


def test_find_by_name_ignores_case(seeded: SqlAlchemyIngredientRepository) -> None:
    found = seeded.find_by_name("garlic")
    assert found is not None and found.id == 4


def test_duplicate_name_conflicts(seeded, save: SaveIngredientUseCase) -> None:
    with pytest.raises(DuplicateIngredientError):
        save.execute(CHEF, "basil")


def test_rename_keeps_id(seeded, save: SaveIngredientUseCase) -> None:
    renamed = save.execute(CHEF, "Thai Basil", 2)

    assert renamed.id == 2
    assert GetIngredientUseCase(ingredients=seeded).execute(2).name == "Thai Basil"


def test_rename_to_own_name_is_allowed(seeded, save: SaveIngredientUseCase) -> None:
    assert save.execute(CHEF, "Basil", 2).name == "Basil"


def test_rename_missing_ingredient(seeded, save: SaveIngredientUseCase) -> None:
    with pytest.raises(IngredientNotFoundError):
        save.execute(CHEF, "Saffron", 99)


def test_delete(seeded: SqlAlchemyIngredientRepository) -> None:
    delete = DeleteIngredientUseCase(ingredients=seeded)
    delete.execute(CHEF, 1)

    with pytest.raises(IngredientNotFoundError):
        GetIngredientUseCase(ingredients=seeded).execute(1)
    with pytest.raises(IngredientNotFoundError):
        delete.execute(CHEF, 1)


def test_list_use_case_precedence(seeded: SqlAlchemyIngredientRepository) -> None:
    use_case = ListIngredientsUseCase(ingredients=seeded, max_page_size=10)

    assert len(use_case.execute({})) == 5
    assert [i.name for i in use_case.execute({"term": "garl"})] == ["Garlic"]
    assert [i.name for i in use_case.execute({"term": "garl", "page": "1"})] == ["Garlic"]

    page = use_case.execute({"term": "tomato", "page": "1", "pageSize": "1"})
    assert isinstance(page, Page)
    assert page.total_pages == 2

    with pytest.raises(BadPaginationError):
        use_case.execute({"page": "1", "pageSize": "11"})


def test_search_and_lookup_fold_accented_case(repo, save: SaveIngredientUseCase) -> None:
    save.execute(CHEF, "ÉCHALOTE")

    assert [i.name for i in repo.search("écha")] == ["ÉCHALOTE"]
    assert repo.find_by_name("échalote") is not None
    with pytest.raises(DuplicateIngredientError):
        save.execute(CHEF, "Échalote")


def test_deleted_ingredient_id_is_not_reused(repo, save: SaveIngredientUseCase) -> None:
    save.execute(CHEF, "Sage")
    doomed = save.execute(CHEF, "Rue")
    DeleteIngredientUseCase(ingredients=repo).execute(CHEF, doomed.id)

    assert save.execute(CHEF, "Sorrel").id > doomed.id
