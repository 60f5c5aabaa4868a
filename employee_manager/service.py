import logging
from typing import Any, Callable, Literal, NamedTuple
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from employee_manager.core.errors import NotFound, StoreFailure, ValidationFailed
from employee_manager.schemas import Employee, EmployeeCreate, EmployeeId, EmployeeUpdate, SearchQuery
from employee_manager.store import EmployeeStore

logger = logging.getLogger(__name__)


def _parse(schema: type[BaseModel], payload: Any):
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        issues = [
            {"path": list(err["loc"]), "message": err["msg"], "code": err["type"]}
            for err in exc.errors()
        ]
        raise ValidationFailed(issues) from None


class EmployeeService:
    """Employee procedures: validate input, call the store, type the outcome."""

    def __init__(self, store: EmployeeStore):
        self.store = store

    def _call(self, operation: str, fn: Callable, *args):
        try:
            return fn(*args)
        except SQLAlchemyError:
            logger.exception("store failure during %s", operation)
            raise StoreFailure(f"Failed to {operation}") from None

    def get_all(self, payload: Any = None) -> list[Employee]:
        return self._call("list employees", self.store.list_all)

    def get_by_id(self, payload: Any) -> Employee:
        params = _parse(EmployeeId, payload)
        employee = self._call("load employee", self.store.get, params.id)
        if employee is None:
            raise NotFound(f"Employee {params.id} not found")
        return employee

    def create(self, payload: Any) -> Employee:
        data = _parse(EmployeeCreate, payload)
        employee = self._call("create employee", self.store.insert, data.model_dump())
        logger.info("employee %s created", employee.id, extra={"employee_id": employee.id})
        return employee

    def update(self, payload: Any) -> Employee:
        data = _parse(EmployeeUpdate, payload)
        employee = self._call("update employee", self.store.update, data.id, data.changes())
        if employee is None:
            raise NotFound(f"Employee {data.id} not found")
        logger.info("employee %s updated", employee.id, extra={"employee_id": employee.id})
        return employee

    def delete(self, payload: Any) -> Employee:
        params = _parse(EmployeeId, payload)
        employee = self._call("delete employee", self.store.delete, params.id)
        if employee is None:
            raise NotFound(f"Employee {params.id} not found")
        logger.info("employee %s deleted", employee.id, extra={"employee_id": employee.id})
        return employee

    def search(self, payload: Any) -> list[Employee]:
        params = _parse(SearchQuery, payload)
        return self._call("search employees", self.store.search, params.query)


class Procedure(NamedTuple):
    kind: Literal["query", "mutation"]
    method: str


PROCEDURES: dict[str, Procedure] = {
    "employee.getAll":  Procedure("query", "get_all"),
    "employee.getById": Procedure("query", "get_by_id"),
    "employee.search":  Procedure("query", "search"),
    "employee.create":  Procedure("mutation", "create"),
    "employee.update":  Procedure("mutation", "update"),
    "employee.delete":  Procedure("mutation", "delete"),
}
