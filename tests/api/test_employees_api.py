"""Employee Routes — end-to-end through FastAPI, the service, and SQLite.

Tests cover:
    - POST 201 with defaults; 400 on case-insensitive duplicate
    - GET list / by id, 404 for unknown and malformed ids
    - PATCH self-rename allowed, foreign name 400, missing project 404 with no changes
    - PATCH with empty projects clears references
    - DELETE 204 then 404
"""

from uuid import uuid4


async def test_create_employee_defaults(client):
    res = await client.post(
        "/api/v1/employees", json={"name": "Ada", "post": "Engineer"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["active"] is True
    assert body["projects"] == []
    assert body["admission"]


async def test_create_employee_case_insensitive_duplicate(client, create_employee):
    await create_employee(name="Test")
    res = await client.post(
        "/api/v1/employees", json={"name": "test", "post": "QA"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Employee already exists"


async def test_create_employee_with_projects(client, create_project):
    project = await create_project()
    res = await client.post("/api/v1/employees", json={
        "name": "Ada", "post": "Engineer",
        "projects": [project["id"], project["id"]],
        "admission": "2021-05-01T09:00:00Z",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["projects"] == [project["id"], project["id"]]
    assert body["admission"].startswith("2021-05-01T09:00:00")


async def test_create_employee_missing_post_returns_400(client):
    res = await client.post("/api/v1/employees", json={"name": "Ada"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_list_and_get_employee(client, create_employee):
    assert (await client.get("/api/v1/employees")).json() == []
    ada = await create_employee()

    listed = (await client.get("/api/v1/employees")).json()
    assert [e["id"] for e in listed] == [ada["id"]]

    res = await client.get(f"/api/v1/employees/{ada['id']}")
    assert res.status_code == 200
    assert res.json()["name"] == "Ada"


async def test_list_also_served_at_all(client, create_employee):
    ada = await create_employee()
    res = await client.get("/api/v1/employees/all")
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == [ada["id"]]


async def test_get_employee_not_found(client):
    for employee_id in (str(uuid4()), "garbage"):
        res = await client.get(f"/api/v1/employees/{employee_id}")
        assert res.status_code == 404
        assert res.json()["error"]["message"] == "Employee not found"


async def test_patch_same_name_same_employee(client, create_employee):
    ada = await create_employee(name="Ada")
    res = await client.patch(
        f"/api/v1/employees/{ada['id']}", json={"name": "Ada", "post": "Lead"},
    )
    assert res.status_code == 200
    assert res.json()["post"] == "Lead"


async def test_patch_other_employees_name(client, create_employee):
    await create_employee(name="Ada")
    grace = await create_employee(name="Grace")
    res = await client.patch(
        f"/api/v1/employees/{grace['id']}", json={"name": "ADA"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Name already exists"


async def test_patch_missing_project_applies_nothing(
    client, create_employee, create_project,
):
    ada = await create_employee()
    project = await create_project()
    missing = str(uuid4())

    res = await client.patch(f"/api/v1/employees/{ada['id']}", json={
        "post": "Lead", "projects": [project["id"], missing],
    })
    assert res.status_code == 404
    assert res.json()["error"]["message"] == f"Project {missing} not found"

    fetched = (await client.get(f"/api/v1/employees/{ada['id']}")).json()
    assert fetched["post"] == "Engineer"
    assert fetched["projects"] == []


async def test_patch_empty_projects_clears_references(
    client, create_employee, create_project,
):
    project = await create_project()
    ada = await create_employee(projects=[project["id"]])
    assert ada["projects"] == [project["id"]]

    res = await client.patch(
        f"/api/v1/employees/{ada['id']}", json={"projects": []},
    )
    assert res.status_code == 200
    assert res.json()["projects"] == []


async def test_patch_unknown_employee(client):
    res = await client.patch(f"/api/v1/employees/{uuid4()}", json={"post": "x"})
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Employee not found"


async def test_delete_employee(client, create_employee):
    ada = await create_employee()
    res = await client.delete(f"/api/v1/employees/{ada['id']}")
    assert res.status_code == 204

    res = await client.delete(f"/api/v1/employees/{ada['id']}")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Employee not found"
