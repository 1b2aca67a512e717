"""Bodies of the operating-state and admin-state update endpoints."""
from __future__ import annotations

from core_contracts.dtos.base import ContractModel
from core_contracts.models.common import AdminState, OperatingState

__all__ = ["UpdateOperatingStateRequest", "UpdateAdminStateRequest"]


class UpdateOperatingStateRequest(ContractModel):
    operating_state: OperatingState


class UpdateAdminStateRequest(ContractModel):
    admin_state: AdminState
