"""
api_integration/base_api/resource_client.py

Table-driven resource access.

A resource is described by a mapping of operation name to
ResourceOperation (verb + endpoint template + whether the caller's
attributes are sent). ResourceClient.call() turns one entry into exactly
one BaseService.perform_request() call and returns its Result untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

from api_integration.base_api.base_service import BaseService
from api_integration.utils.errors import UnknownOperationError
from schemas.request_schema import HttpMethod
from schemas.result_schema import ApiResult

ResourceId = Union[int, str]


@dataclass(frozen=True)
class ResourceOperation:
    method: HttpMethod
    endpoint: str
    sends_payload: bool = False

    def render_endpoint(self, resource_id: Optional[ResourceId] = None) -> str:
        if resource_id is None:
            return self.endpoint
        # ids may contain reserved characters; keep them inside one path segment
        return self.endpoint.format(id=quote(str(resource_id), safe=""))


def crud_operations(collection_path: str) -> dict[str, ResourceOperation]:
    """Standard create/update/delete/get table for a collection path."""
    member_path = collection_path.rstrip("/") + "/{id}"
    return {
        "create": ResourceOperation(HttpMethod.POST, collection_path, sends_payload=True),
        "update": ResourceOperation(HttpMethod.PUT, member_path, sends_payload=True),
        "delete": ResourceOperation(HttpMethod.DELETE, member_path),
        "get": ResourceOperation(HttpMethod.GET, member_path),
    }


class ResourceClient:
    def __init__(self, executor: BaseService, operations: Mapping[str, ResourceOperation]) -> None:
        self.executor = executor
        self.operations = dict(operations)

    def call(
        self,
        operation: str,
        *,
        resource_id: Optional[ResourceId] = None,
        payload: Optional[Mapping[str, Any]] = None,
    ) -> ApiResult:
        try:
            op = self.operations[operation]
        except KeyError as exc:
            raise UnknownOperationError(operation) from exc

        return self.executor.perform_request(
            endpoint=op.render_endpoint(resource_id),
            method=op.method,
            payload=payload if op.sends_payload else None,
        )
