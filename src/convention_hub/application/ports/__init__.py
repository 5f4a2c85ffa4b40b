"""Application ports - interfaces for external adapters."""

from convention_hub.application.ports.mutation_guard import GuardVerdict, MutationGuard
from convention_hub.application.ports.permission_resolver import PermissionResolver
from convention_hub.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "GuardVerdict",
    "MutationGuard",
    "PermissionResolver",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
