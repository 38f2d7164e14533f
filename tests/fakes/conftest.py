"""
Test Fixtures and Helpers for Fake Repositories.

This module provides helper functions for overriding FastAPI dependencies
with fake implementations.

Usage:
    from tests.fakes.conftest import override_dependency

    def test_something(app, client):
        repo = FakeLogRepository()
        override_dependency(app, get_log_repo, repo)

        # Now the API will use your fake
        response = client.get("/logs")
        assert response.status_code == 200
"""

from typing import Any, Callable, Type

from fastapi import FastAPI

# Type for dependency getters
RepoGetter = Callable[..., Any]


def override_dependency(
    app: FastAPI,
    getter: RepoGetter,
    implementation: Any,
) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application under test
        getter: The dependency getter function (e.g., get_log_repo)
        implementation: The fake implementation instance or factory

    Example:
        repo = FakeLogRepository()
        override_dependency(app, get_log_repo, lambda: repo)
    """
    # Handle both direct instances and factory functions
    if callable(implementation) and not isinstance(implementation, type):
        # It's a factory function, use it directly
        app.dependency_overrides[getter] = implementation
    else:
        # It's an instance, wrap in a lambda
        app.dependency_overrides[getter] = lambda: implementation


def override_with_fake(
    app: FastAPI,
    getter: RepoGetter,
    fake_class: Type,
    **kwargs,
) -> Any:
    """
    Create and override with a fake repository instance.

    Returns:
        The created fake instance (for seeding data etc.)

    Example:
        repo = override_with_fake(app, get_log_repo, FakeLogRepository)
        repo.seed("guest", {...})
    """
    fake_instance = fake_class(**kwargs)
    override_dependency(app, getter, fake_instance)
    return fake_instance
