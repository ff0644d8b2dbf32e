"""Service test fixtures — engines wired to in-memory repository fakes."""

import pytest

from staffing.services.employee_service import EmployeeService
from staffing.services.project_service import ProjectService
from tests.services.fake_repositories import (
    FakeEmployeeRepository, FakeProjectRepository,
)


@pytest.fixture
def project_repo():
    return FakeProjectRepository()


@pytest.fixture
def employee_repo():
    return FakeEmployeeRepository()


@pytest.fixture
def project_service(project_repo):
    return ProjectService(project_repo)


@pytest.fixture
def employee_service(employee_repo, project_repo):
    return EmployeeService(employee_repo, project_repo)
