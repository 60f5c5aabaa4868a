from __future__ import annotations

import pytest

from employee_manager.core.errors import NotFound, StoreFailure
from employee_manager.service import PROCEDURES, EmployeeService
from tests.helpers import ada


def test_create_assigns_id_hire_date_and_active(service):
    created = service.create(ada(phone="555-0101"))

    assert isinstance(created.id, int)
    assert created.hire_date is not None
    assert created.is_active is True
    assert (created.first_name, created.last_name, created.email) == ("Ada", "Lovelace", "ada@x.com")
    assert (created.department, created.position, created.salary) == ("Engineering", "Analyst", 90000)
    assert created.phone == "555-0101"


def test_get_all_is_newest_first(service):
    first = service.create(ada(email="grace@x.com", firstName="Grace"))
    second = service.create(ada())

    assert [e.id for e in service.get_all()] == [second.id, first.id]


def test_get_by_id_returns_record(service):
    created = service.create(ada())
    assert service.get_by_id({"id": created.id}) == created


def test_get_by_id_unknown_is_not_found(service):
    with pytest.raises(NotFound):
        service.get_by_id({"id": 12345})


def test_update_changes_only_supplied_fields(service):
    created = service.create(ada())

    updated = service.update({"id": created.id, "salary": 95000})

    assert updated.salary == 95000
    assert updated.first_name == "Ada"
    assert updated.email == created.email
    assert updated.hire_date == created.hire_date
    assert updated.created_at == created.created_at
    assert service.get_by_id({"id": created.id}).salary == 95000


def test_update_can_deactivate(service):
    created = service.create(ada())
    assert service.update({"id": created.id, "isActive": False}).is_active is False


def test_update_unknown_is_not_found(service):
    with pytest.raises(NotFound):
        service.update({"id": 999, "salary": 1})


def test_delete_then_get_is_not_found(service):
    created = service.create(ada())

    removed = service.delete({"id": created.id})

    assert removed.id == created.id
    with pytest.raises(NotFound):
        service.get_by_id({"id": created.id})
    assert service.get_all() == []


def test_delete_unknown_is_not_found(service):
    with pytest.raises(NotFound):
        service.delete({"id": 1})


def test_ids_are_not_reused_after_delete(service):
    created = service.create(ada())
    service.delete({"id": created.id})
    again = service.create(ada())
    assert again.id != created.id


def test_search_matches_any_text_field(service):
    ada_row = service.create(ada())
    grace = service.create(ada(firstName="Grace", lastName="Hopper", email="grace@navy.mil",
                               department="Research", position="Admiral"))

    assert [e.id for e in service.search({"query": "Lovel"})] == [ada_row.id]
    assert [e.id for e in service.search({"query": "navy"})] == [grace.id]
    assert [e.id for e in service.search({"query": "Admir"})] == [grace.id]
    assert [e.id for e in service.search({"query": "Analy"})] == [ada_row.id]


def test_search_department_substring_newest_first(service):
    a = service.create(ada())
    service.create(ada(email="bob@x.com", firstName="Bob", department="Sales"))
    c = service.create(ada(email="carol@x.com", firstName="Carol", department="Platform Engineering"))

    assert [e.id for e in service.search({"query": "Engineer"})] == [c.id, a.id]


def test_search_without_match_is_empty(service):
    service.create(ada())
    assert service.search({"query": "zzz-nobody"}) == []


def test_search_treats_wildcards_literally(service):
    service.create(ada())
    assert service.search({"query": "%"}) == []
    assert service.search({"query": "_"}) == []


def test_duplicate_email_is_opaque_store_failure(service):
    service.create(ada())
    with pytest.raises(StoreFailure) as info:
        service.create(ada(firstName="Other"))
    assert info.value.message == "Failed to create employee"
    assert len(service.get_all()) == 1


class BrokenStore:
    def list_all(self):
        from sqlalchemy.exc import OperationalError
        raise OperationalError("SELECT", {}, Exception("connection refused"))


def test_store_errors_are_wrapped():
    with pytest.raises(StoreFailure):
        EmployeeService(BrokenStore()).get_all()


def test_registry_names_every_procedure():
    assert set(PROCEDURES) == {
        "employee.getAll", "employee.getById", "employee.create",
        "employee.update", "employee.delete", "employee.search",
    }
    for proc in PROCEDURES.values():
        assert callable(getattr(EmployeeService, proc.method))


def test_salary_is_stored_unrounded(service):
    created = service.create(ada(salary=1234.567))
    assert created.salary == 1234.567
    assert service.get_by_id({"id": created.id}).salary == 1234.567
