"""HTTP client for the employee procedures."""
import json
from typing import Any, Optional
import httpx
from pydantic import TypeAdapter
from employee_manager.schemas import Employee

_employee_list = TypeAdapter(list[Employee])


class RPCError(Exception):
    """Error envelope returned by the server."""

    def __init__(self, code: str, message: str, http_status: int, issues: Optional[list] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.issues = issues or []


class EmployeeClient:
    def __init__(self, base_url: str = "http://localhost:3001", prefix: str = "/trpc",
                 http_client: Optional[httpx.Client] = None):
        self._http = http_client or httpx.Client(base_url=base_url)
        self._prefix = prefix.rstrip("/")

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def query(self, procedure: str, payload: Any = None) -> Any:
        params = {"input": json.dumps(payload)} if payload is not None else None
        response = self._http.get(f"{self._prefix}/{procedure}", params=params)
        return self._unwrap(response)

    def mutate(self, procedure: str, payload: Any) -> Any:
        response = self._http.post(f"{self._prefix}/{procedure}", json=payload)
        return self._unwrap(response)

    @staticmethod
    def _unwrap(response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            response.raise_for_status()
            raise
        if "error" in body:
            error = body["error"]
            data = error.get("data") or {}
            raise RPCError(
                code=data.get("code", "INTERNAL_SERVER_ERROR"),
                message=error.get("message", ""),
                http_status=data.get("httpStatus", response.status_code),
                issues=data.get("issues"),
            )
        response.raise_for_status()
        return body["result"]["data"]

    def get_all(self) -> list[Employee]:
        return _employee_list.validate_python(self.query("employee.getAll"))

    def get_by_id(self, employee_id: int) -> Employee:
        return Employee.model_validate(self.query("employee.getById", {"id": employee_id}))

    def search(self, query: str) -> list[Employee]:
        return _employee_list.validate_python(self.query("employee.search", {"query": query}))

    def create(self, payload: dict) -> Employee:
        return Employee.model_validate(self.mutate("employee.create", payload))

    def update(self, employee_id: int, changes: dict) -> Employee:
        return Employee.model_validate(self.mutate("employee.update", {"id": employee_id, **changes}))

    def delete(self, employee_id: int) -> Employee:
        return Employee.model_validate(self.mutate("employee.delete", {"id": employee_id}))
