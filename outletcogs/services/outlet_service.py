"""
Outlet Service - Outlet and revenue policy management
"""

import logging
from typing import List, Optional

from outletcogs.exceptions import ConflictError, NotFoundError, ValidationError
from outletcogs.models.outlets import Outlet, PolicyUpdate, RevenuePolicy
from outletcogs.storage.repository import CogsRepository

logger = logging.getLogger(__name__)


class OutletService:
    """CRUD for outlets and their policies."""

    def __init__(self, repository: CogsRepository):
        self.repository = repository

    def list_outlets(self) -> List[Outlet]:
        return self.repository.list_outlets()

    def get_outlet(self, outlet_id: int) -> Outlet:
        outlet = self.repository.get_outlet(outlet_id)
        if not outlet:
            raise NotFoundError("Outlet", outlet_id)
        return outlet

    def create_outlet(self, name: str, description: Optional[str] = None) -> Outlet:
        name = name.strip()
        if not name:
            raise ValidationError("Outlet name must not be blank")
        if self.repository.get_outlet_by_name(name):
            raise ConflictError(f"Outlet already exists: {name}", details={"name": name})
        return self.repository.create_outlet(name, description)

    def get_policy(self, outlet_id: int) -> RevenuePolicy:
        outlet = self.get_outlet(outlet_id)
        policy = self.repository.get_policy(outlet_id)
        if not policy:
            raise NotFoundError("Revenue policy", outlet.name)
        return policy

    def set_policy(self, outlet_id: int, update: PolicyUpdate) -> RevenuePolicy:
        """Create or replace an outlet's policy."""
        self.get_outlet(outlet_id)
        policy = RevenuePolicy(outlet_id=outlet_id, **update.model_dump())
        logger.info(f"Saving revenue policy for outlet {outlet_id}")
        return self.repository.save_policy(policy)
