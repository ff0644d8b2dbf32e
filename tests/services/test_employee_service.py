"""Employee Service — tests for name uniqueness and project-reference checks.

Tests cover:
    - create: case-insensitive duplicate detection, reference check, defaults
    - update: self-match allowed, other employee's name rejected
    - update: references checked in order, first missing id reported, nothing written
    - update: empty projects list skips the reference loop
    - find_one / find_all / delete not-found behavior
"""

import pytest

from staffing.core.errors import NotFoundError, ValidationError


def _project_lookups(project_repo) -> list[str]:
    return [arg for name, arg in project_repo.calls if name == "find_by_id"]


# ─── create ──────────────────────────────────────────────────────

async def test_create_defaults(employee_service):
    employee = await employee_service.create({"name": "Ada", "post": "Engineer"})
    assert employee["active"] is True
    assert employee["projects"] == []
    assert employee["admission"] is not None


async def test_create_duplicate_name_is_case_insensitive(employee_service, employee_repo):
    await employee_service.create({"name": "Test", "post": "QA"})
    with pytest.raises(ValidationError, match="Employee already exists"):
        await employee_service.create({"name": "test", "post": "QA"})
    assert len(employee_repo.rows) == 1


async def test_create_duplicate_accented_name(employee_service, employee_repo):
    await employee_service.create({"name": "Émile", "post": "QA"})
    with pytest.raises(ValidationError, match="Employee already exists"):
        await employee_service.create({"name": "émile", "post": "QA"})
    assert len(employee_repo.rows) == 1


async def test_create_with_valid_projects(employee_service, project_repo):
    project = project_repo.seed(name="Apollo", start_date=None)
    employee = await employee_service.create(
        {"name": "Ada", "post": "Engineer", "projects": [project["id"], project["id"]]},
    )
    assert employee["projects"] == [project["id"], project["id"]]


async def test_create_with_missing_project(employee_service, employee_repo):
    with pytest.raises(NotFoundError, match="Project ghost not found"):
        await employee_service.create(
            {"name": "Ada", "post": "Engineer", "projects": ["ghost"]},
        )
    assert employee_repo.rows == {}


# ─── find ────────────────────────────────────────────────────────

async def test_find_one_missing(employee_service):
    with pytest.raises(NotFoundError, match="Employee not found"):
        await employee_service.find_one("nobody")


async def test_find_all_returns_every_employee(employee_service, employee_repo):
    assert await employee_service.find_all() == []
    employee_repo.seed(name="Ada")
    employee_repo.seed(name="Grace")
    names = {e["name"] for e in await employee_service.find_all()}
    assert names == {"Ada", "Grace"}


# ─── update: name ────────────────────────────────────────────────

async def test_update_same_name_on_same_id_allowed(employee_service, employee_repo):
    ada = employee_repo.seed(name="Ada")
    updated = await employee_service.update(ada["id"], {"name": "ADA", "post": "Lead"})
    assert updated["name"] == "ADA"
    assert updated["post"] == "Lead"


async def test_update_to_other_employees_name_fails(employee_service, employee_repo):
    employee_repo.seed(name="Ada")
    grace = employee_repo.seed(name="Grace")
    with pytest.raises(ValidationError, match="Name already exists"):
        await employee_service.update(grace["id"], {"name": "ada"})
    assert employee_repo.rows[grace["id"]]["name"] == "Grace"


# ─── update: project references ──────────────────────────────────

async def test_update_first_missing_project_wins(
    employee_service, employee_repo, project_repo,
):
    ada = employee_repo.seed(name="Ada")
    valid = project_repo.seed(name="Apollo", start_date=None)

    with pytest.raises(NotFoundError) as exc:
        await employee_service.update(
            ada["id"],
            {"post": "Lead", "projects": [valid["id"], "missing-1", "missing-2"]},
        )

    assert exc.value.message == "Project missing-1 not found"
    assert exc.value.http_status == 404
    assert _project_lookups(project_repo) == [valid["id"], "missing-1"]
    assert ("update", ada["id"]) not in employee_repo.calls
    assert employee_repo.rows[ada["id"]]["post"] == "Engineer"


async def test_update_with_valid_projects(employee_service, employee_repo, project_repo):
    ada = employee_repo.seed(name="Ada")
    p1 = project_repo.seed(name="Apollo", start_date=None)
    p2 = project_repo.seed(name="Gemini", start_date=None)
    updated = await employee_service.update(ada["id"], {"projects": [p2["id"], p1["id"]]})
    assert updated["projects"] == [p2["id"], p1["id"]]


async def test_update_empty_projects_clears_without_lookups(
    employee_service, employee_repo, project_repo,
):
    project = project_repo.seed(name="Apollo", start_date=None)
    ada = employee_repo.seed(name="Ada", projects=[project["id"]])

    updated = await employee_service.update(ada["id"], {"projects": []})

    assert updated["projects"] == []
    assert _project_lookups(project_repo) == []


async def test_update_missing_employee(employee_service):
    with pytest.raises(NotFoundError, match="Employee not found"):
        await employee_service.update("nobody", {"post": "Lead"})


async def test_update_name_checked_before_projects(
    employee_service, employee_repo, project_repo,
):
    employee_repo.seed(name="Ada")
    grace = employee_repo.seed(name="Grace")
    with pytest.raises(ValidationError, match="Name already exists"):
        await employee_service.update(grace["id"], {"name": "Ada", "projects": ["x"]})
    assert _project_lookups(project_repo) == []


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_existing(employee_service, employee_repo):
    ada = employee_repo.seed(name="Ada")
    await employee_service.delete(ada["id"])
    assert ada["id"] not in employee_repo.rows


async def test_delete_missing(employee_service):
    with pytest.raises(NotFoundError, match="Employee not found"):
        await employee_service.delete("nobody")
