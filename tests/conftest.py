"""Shared pytest fixtures and configuration."""

from datetime import date

import pytest

from student_registry.lifecycle import StudentInput


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def john_input() -> StudentInput:
    """Input for the reference student John Doe."""
    return StudentInput(
        first_name="John",
        last_name="Doe",
        email="john.doe@test.com",
        date_of_birth=date(2000, 1, 15),
    )


@pytest.fixture
def jane_input() -> StudentInput:
    """Input for a second, distinct student."""
    return StudentInput(
        first_name="Jane",
        last_name="Roe",
        email="jane.roe@test.com",
        date_of_birth=date(2001, 6, 30),
    )


@pytest.fixture
def john_payload() -> dict[str, str]:
    """JSON body for creating John Doe through the API."""
    return {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@test.com",
        "dateOfBirth": "2000-01-15",
    }
