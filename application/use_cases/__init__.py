"""
Application Use Cases for the GymBuddy API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import ImportPlanUseCase

    use_case = ImportPlanUseCase(plan_repo=plan_repo, enricher=enricher)
    result = await use_case.execute(document, scope="guest", language=Language.ES)
"""

from application.use_cases.import_plan import ImportPlanResult, ImportPlanUseCase

__all__ = [
    "ImportPlanUseCase",
    "ImportPlanResult",
]
