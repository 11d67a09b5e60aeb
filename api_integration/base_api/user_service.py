"""
api_integration/base_api/user_service.py

Example resource client for the users API.

| Operation         | Method | Endpoint      | Payload |
|-------------------|--------|---------------|---------|
| create(attrs)     | POST   | /users        | attrs   |
| update(id, attrs) | PUT    | /users/{id}   | attrs   |
| delete(id)        | DELETE | /users/{id}   | -       |
| get(id)           | GET    | /users/{id}   | -       |

Every method returns exactly what BaseService.perform_request returns.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from api_integration.base_api.base_service import BaseService
from api_integration.base_api.resource_client import ResourceClient, ResourceId, crud_operations
from schemas.result_schema import ApiResult

USER_OPERATIONS = crud_operations("/users")


class UserService:
    def __init__(self, executor: Optional[BaseService] = None) -> None:
        self.resource = ResourceClient(executor or BaseService(), USER_OPERATIONS)

    def create(self, attrs: Mapping[str, Any]) -> ApiResult:
        return self.resource.call("create", payload=attrs)

    def update(self, user_id: ResourceId, attrs: Mapping[str, Any]) -> ApiResult:
        return self.resource.call("update", resource_id=user_id, payload=attrs)

    def delete(self, user_id: ResourceId) -> ApiResult:
        return self.resource.call("delete", resource_id=user_id)

    def get(self, user_id: ResourceId) -> ApiResult:
        return self.resource.call("get", resource_id=user_id)
