"""HTTP client for the employees API."""
import logging
from typing import Any, Callable, List, Mapping, Optional

import httpx

from employee_directory.core import config
from employee_directory.client.exceptions import EmployeeAPIError
from employee_directory.client.responses import (
    EmployeeRecord,
    decode_employee,
    decode_employee_list,
    error_message,
)

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


def env_token() -> Optional[str]:
    return config.API_TOKEN


def _require_id(employee_id: Any) -> Any:
    if employee_id is None or employee_id == "":
        raise ValueError("Employee id is required")
    return employee_id


class EmployeeAPI:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        token_provider: Optional[TokenProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url or config.API_BASE_URL
        self.token_provider = token_provider or env_token
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else config.API_TIMEOUT,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "EmployeeAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def get_all_employees(self) -> List[EmployeeRecord]:
        payload = await self._request("GET", "/employees")
        return decode_employee_list(payload)

    async def get_employee_by_id(self, employee_id: Any) -> EmployeeRecord:
        payload = await self._request("GET", f"/employees/{_require_id(employee_id)}")
        return decode_employee(payload)

    async def create_employee(self, employee_data: Mapping[str, Any]) -> EmployeeRecord:
        payload = await self._request("POST", "/employees", json=dict(employee_data))
        return decode_employee(payload)

    async def update_employee(self, employee_id: Any, employee_data: Mapping[str, Any]) -> EmployeeRecord:
        payload = await self._request(
            "PUT", f"/employees/{_require_id(employee_id)}", json=dict(employee_data)
        )
        return decode_employee(payload)

    async def delete_employee(self, employee_id: Any) -> EmployeeRecord:
        payload = await self._request("DELETE", f"/employees/{_require_id(employee_id)}")
        return decode_employee(payload)

    def _auth_headers(self) -> dict:
        token = self.token_provider()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def _request(self, method: str, url: str, json: Optional[dict] = None) -> Any:
        try:
            response = await self.client.request(method, url, json=json, headers=self._auth_headers())
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %r", method, url, e)
            raise EmployeeAPIError(str(e) or type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_error:
            message = error_message(payload, f"Request failed with status code {response.status_code}")
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, message)
            detail = payload.get("error") if isinstance(payload, dict) else None
            raise EmployeeAPIError(message, response.status_code, detail)

        return payload
