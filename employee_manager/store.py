"""Persistence boundary for employee rows.

The store maps each operation onto one short-lived session and hands back
``schemas.Employee`` records, so nothing outside this module touches ORM
instances. It does no business validation.
"""
from typing import Optional
from sqlalchemy import select, or_
from sqlalchemy.orm import Session, sessionmaker
from employee_manager.db import Base, build_engine, build_session_factory
from employee_manager.models import Employee as EmployeeRow
from employee_manager.schemas import Employee

SEARCH_COLUMNS = (
    EmployeeRow.first_name,
    EmployeeRow.last_name,
    EmployeeRow.email,
    EmployeeRow.department,
    EmployeeRow.position,
)
NEWEST_FIRST = (EmployeeRow.created_at.desc(), EmployeeRow.id.desc())


class EmployeeStore:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, url: str, create_schema: bool = True) -> "EmployeeStore":
        engine = build_engine(url)
        if create_schema:
            Base.metadata.create_all(engine)
        return cls(build_session_factory(engine))

    def _session(self) -> Session:
        return self._session_factory()

    def insert(self, data: dict) -> Employee:
        with self._session() as db:
            row = EmployeeRow(**data)
            db.add(row)
            db.commit()
            db.refresh(row)
            return Employee.model_validate(row)

    def get(self, employee_id: int) -> Optional[Employee]:
        with self._session() as db:
            row = db.get(EmployeeRow, employee_id)
            return Employee.model_validate(row) if row is not None else None

    def update(self, employee_id: int, changes: dict) -> Optional[Employee]:
        with self._session() as db:
            row = db.get(EmployeeRow, employee_id)
            if row is None:
                return None
            for field, value in changes.items():
                setattr(row, field, value)
            db.commit()
            db.refresh(row)
            return Employee.model_validate(row)

    def delete(self, employee_id: int) -> Optional[Employee]:
        with self._session() as db:
            row = db.get(EmployeeRow, employee_id)
            if row is None:
                return None
            removed = Employee.model_validate(row)
            db.delete(row)
            db.commit()
            return removed

    def list_all(self) -> list[Employee]:
        with self._session() as db:
            rows = db.scalars(select(EmployeeRow).order_by(*NEWEST_FIRST)).all()
            return [Employee.model_validate(r) for r in rows]

    def search(self, query: str) -> list[Employee]:
        # autoescape keeps % and _ literal
        clause = or_(*(col.contains(query, autoescape=True) for col in SEARCH_COLUMNS))
        with self._session() as db:
            rows = db.scalars(select(EmployeeRow).where(clause).order_by(*NEWEST_FIRST)).all()
            return [Employee.model_validate(r) for r in rows]
