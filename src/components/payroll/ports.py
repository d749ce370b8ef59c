"""
Payroll component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from .models import EmployeeRecord


class EmployeeRepoPort(Protocol):
    """Append-only storage for employee records."""

    def append(self, record: EmployeeRecord) -> EmployeeRecord:
        """Store a new record at the end of the collection."""
        ...

    def get_all(self) -> list[EmployeeRecord]:
        """All records in registration order."""
        ...

    def count(self) -> int:
        """Number of stored records."""
        ...
