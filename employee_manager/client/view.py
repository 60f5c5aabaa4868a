"""View model behind the employee table.

Holds what the screen shows (rows, search box, the add/edit form) and the
form's lifecycle: IDLE -> EDITING -> SAVING -> IDLE, or back to EDITING with
``error`` set when the save is rejected. Every successful mutation drops the
cached employee queries so the next ``rows()`` refetches from the server.
"""
import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Callable, Optional
import httpx
from employee_manager.client.cache import QueryCache, query_key
from employee_manager.client.rpc import EmployeeClient, RPCError
from employee_manager.schemas import Employee

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this employee?"
CLIENT_ERRORS = (RPCError, httpx.HTTPError)


class ViewState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SAVING = "saving"


@dataclass
class EmployeeForm:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    department: str = ""
    position: str = ""
    salary: float = 0.0

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeForm":
        values = {f.name: getattr(employee, f.name) for f in fields(cls)}
        values["phone"] = values["phone"] or ""
        return cls(**values)

    def to_payload(self) -> dict:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone or None,
            "department": self.department,
            "position": self.position,
            "salary": self.salary,
        }


class EmployeeView:
    def __init__(self, client: EmployeeClient, confirm: Callable[[str], bool],
                 cache: Optional[QueryCache] = None):
        self.client = client
        self.confirm = confirm
        self.cache = cache if cache is not None else QueryCache()
        self.state = ViewState.IDLE
        self.form: Optional[EmployeeForm] = None
        self.editing: Optional[Employee] = None
        self.error: Optional[str] = None
        self.search_query = ""
        self._displayed: list[Employee] = []

    # -- list / search --

    def set_search(self, query: str) -> None:
        self.search_query = query

    @property
    def is_loading(self) -> bool:
        return query_key("employee.getAll") not in self.cache

    @property
    def is_saving(self) -> bool:
        return self.state is ViewState.SAVING

    def rows(self) -> list[Employee]:
        """Search results while the search box is non-empty, otherwise everyone."""
        if self.search_query:
            key = query_key("employee.search", {"query": self.search_query})
            loader = lambda: self.client.search(self.search_query)
        else:
            key = query_key("employee.getAll")
            loader = self.client.get_all
        try:
            self._displayed = self.cache.fetch(key, loader)
        except CLIENT_ERRORS as exc:
            logger.warning("fetch failed: %s", exc)
            self.error = str(exc)
        return self._displayed

    # -- form --

    def open_create(self) -> EmployeeForm:
        return self._open(None)

    def open_edit(self, employee: Employee) -> EmployeeForm:
        return self._open(employee)

    def _open(self, employee: Optional[Employee]) -> EmployeeForm:
        self.editing = employee
        self.form = EmployeeForm.from_employee(employee) if employee else EmployeeForm()
        self.error = None
        self.state = ViewState.EDITING
        return self.form

    def cancel(self) -> None:
        self.state = ViewState.IDLE
        self.form = None
        self.editing = None
        self.error = None

    def submit(self) -> Optional[Employee]:
        if self.state is not ViewState.EDITING:
            raise RuntimeError(f"cannot submit while {self.state.value}")
        self.state = ViewState.SAVING
        payload = self.form.to_payload()
        try:
            if self.editing is not None:
                saved = self.client.update(self.editing.id, payload)
            else:
                saved = self.client.create(payload)
        except CLIENT_ERRORS as exc:
            self.state = ViewState.EDITING
            self.error = str(exc)
            return None
        self.cache.invalidate("employee.")
        self.cancel()
        return saved

    # -- delete --

    def delete(self, employee_id: int) -> bool:
        if not self.confirm(DELETE_PROMPT):
            return False
        try:
            self.client.delete(employee_id)
        except CLIENT_ERRORS as exc:
            self.error = str(exc)
            return False
        self.cache.invalidate("employee.")
        return True
