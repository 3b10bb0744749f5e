"""Department and employee roster offered by the add-item form.

The roster mirrors the static lists the calendar screen ships with; it is
not a master table and the store does not check items against it.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from api.models.schemas import Employee

DEPARTMENTS = [
    "Production",
    "Quality Control",
    "Design",
    "Management",
    "Sales",
    "Inventory",
    "Export",
    "Raw Materials",
    "Packaging",
]


class Roster:
    """Mutable collection of employees grouped by department."""

    def __init__(self, departments: Optional[List[str]] = None) -> None:
        self._departments: List[str] = list(departments or DEPARTMENTS)
        self._employees: Dict[str, Employee] = {}

    def register(self, employee: Employee) -> None:
        if employee.department not in self._departments:
            self._departments.append(employee.department)
        self._employees[employee.id] = employee

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def departments(self) -> List[str]:
        return list(self._departments)

    def employees(self, department: Optional[str] = None) -> List[Employee]:
        """Return employees, narrowed to ``department`` when one is chosen."""

        if not department:
            return list(self._employees.values())
        return [emp for emp in self._employees.values() if emp.department == department]

    def in_department(self, employee_id: str, department: str) -> bool:
        employee = self._employees.get(employee_id)
        return employee is not None and employee.department == department


def _default_roster() -> Roster:
    roster = Roster()
    for emp_id, name, department in [
        ("1", "John Smith", "Production"),
        ("2", "Sarah Johnson", "Production"),
        ("3", "Mike Wilson", "Quality Control"),
        ("4", "Emily Davis", "Quality Control"),
        ("5", "David Brown", "Design"),
        ("6", "Lisa Garcia", "Design"),
        ("7", "Robert Miller", "Management"),
        ("8", "Jennifer Taylor", "Sales"),
        ("9", "Christopher Anderson", "Sales"),
        ("10", "Amanda Thomas", "Inventory"),
        ("11", "James Martinez", "Export"),
        ("12", "Maria Rodriguez", "Raw Materials"),
        ("13", "Kevin Lee", "Packaging"),
    ]:
        roster.register(Employee(id=emp_id, name=name, department=department))
    return roster


roster = _default_roster()
"""Module-level roster used by the API routes."""
