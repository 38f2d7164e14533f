"""
KeyValueStore-backed implementation of PlanRepository.

Stored plans are passed through the plan normalizer on load, so documents
written by older clients (legacy field names, missing ids) still load.
"""
from application.ports import KeyValueStore
from domain.converters import normalize_plan
from domain.models import Plan
from infrastructure.storage.scoped_documents import GUEST_SCOPE, ScopedJsonDocuments

DEFAULT_PLAN_KEY = "gymbuddy_plan"


class KeyValuePlanRepository:
    """PlanRepository over any KeyValueStore."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        base_key: str = DEFAULT_PLAN_KEY,
        guest_scope: str = GUEST_SCOPE,
    ):
        self._documents = ScopedJsonDocuments(store, base_key, guest_scope=guest_scope)

    def key_for(self, scope: str) -> str:
        return self._documents.key_for(scope)

    async def load(self, scope: str) -> Plan:
        return normalize_plan(self._documents.read(scope))

    async def save(self, plan: Plan, scope: str) -> None:
        self._documents.write(plan.to_document(), scope)
