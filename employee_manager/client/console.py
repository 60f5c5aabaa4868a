# employee_manager/client/console.py
"""Terminal front end for the employee table.

Commands: ``/text`` search (empty ``/`` clears), ``a`` add, ``e <id>`` edit,
``d <id>`` delete, ``r`` refresh, ``q`` quit.
"""
from typing import Callable, Optional
import pandas as pd
from employee_manager.client.rpc import EmployeeClient
from employee_manager.client.view import EmployeeForm, EmployeeView
from employee_manager.core.config import get_settings
from employee_manager.core.logging import configure_logging
from employee_manager.schemas import Employee

HELP = "Commands: /text search, / clear search, a add, e <id> edit, d <id> delete, r refresh, q quit"
COLUMNS = ["ID", "Name", "Email", "Department", "Position", "Salary", "Status"]
FORM_LABELS = [
    ("first_name", "First Name"),
    ("last_name", "Last Name"),
    ("email", "Email"),
    ("phone", "Phone (Optional)"),
    ("department", "Department"),
    ("position", "Position"),
    ("salary", "Salary"),
]


def employees_frame(rows: list[Employee]) -> pd.DataFrame:
    records = [{
        "ID": e.id,
        "Name": e.full_name if not e.phone else f"{e.full_name} ({e.phone})",
        "Email": e.email,
        "Department": e.department,
        "Position": e.position,
        "Salary": f"${e.salary:,.2f}",
        "Status": "Active" if e.is_active else "Inactive",
    } for e in rows]
    return pd.DataFrame(records, columns=COLUMNS)


def render_table(rows: list[Employee]) -> str:
    if not rows:
        return "No employees found."
    return employees_frame(rows).to_string(index=False)


def _parse_salary(raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        return 0.0


def fill_form(form: EmployeeForm, ask: Callable[[str], str]) -> EmployeeForm:
    """Prompt for each field; an empty answer keeps the current value."""
    for attr, label in FORM_LABELS:
        current = getattr(form, attr)
        answer = ask(f"{label} [{current}]: ").strip()
        if not answer:
            continue
        setattr(form, attr, _parse_salary(answer) if attr == "salary" else answer)
    return form


class Console:
    def __init__(self, view: EmployeeView, ask: Callable[[str], str] = input,
                 out: Callable[[str], None] = print):
        self.view = view
        self.ask = ask
        self.out = out

    def show(self) -> None:
        if self.view.search_query:
            self.out(f'Search: "{self.view.search_query}"')
        self.out(render_table(self.view.rows()))
        if self.view.error:
            self.out(f"Error: {self.view.error}")
            self.view.error = None

    def _find(self, arg: str) -> Optional[Employee]:
        try:
            employee_id = int(arg)
        except ValueError:
            self.out(f"Not an employee id: {arg!r}")
            return None
        for e in self.view.rows():
            if e.id == employee_id:
                return e
        self.out(f"Employee {employee_id} is not in the table.")
        return None

    def edit(self, employee: Optional[Employee]) -> None:
        form = self.view.open_edit(employee) if employee else self.view.open_create()
        self.out("Edit Employee" if employee else "Add New Employee")
        while True:
            fill_form(form, self.ask)
            self.out("Saving...")
            if self.view.submit() is not None:
                return
            self.out(f"Error: {self.view.error}")
            if self.ask("Try again? [Y/n] ").strip().lower() == "n":
                self.view.cancel()
                return

    def handle(self, line: str) -> bool:
        """Run one command; returns False when the user quits."""
        line = line.strip()
        cmd, _, arg = line.partition(" ")
        if cmd == "q":
            return False
        if line.startswith("/"):
            self.view.set_search(line[1:])
        elif cmd == "a":
            self.edit(None)
        elif cmd == "e":
            employee = self._find(arg)
            if employee:
                self.edit(employee)
        elif cmd == "d":
            employee = self._find(arg)
            if employee and self.view.delete(employee.id):
                self.out(f"Deleted {employee.full_name}.")
        elif cmd == "r":
            self.view.cache.invalidate("employee.")
        elif cmd:
            self.out(HELP)
        return True

    def loop(self) -> None:
        self.out("Employee Management System")
        while True:
            self.show()
            try:
                line = self.ask("> ")
            except EOFError:
                return
            if not self.handle(line):
                return


def confirm_prompt(message: str) -> bool:
    return input(f"{message} [y/N] ").strip().lower() == "y"


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    with EmployeeClient(base_url=settings.API_URL, prefix=settings.RPC_PREFIX) as client:
        Console(EmployeeView(client, confirm=confirm_prompt)).loop()


if __name__ == "__main__":
    main()
