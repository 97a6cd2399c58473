import threading
from typing import Dict, List, Optional
from uuid import UUID
from app.models import Employee


class EmployeeStore:
    """Process-local record store keyed by employee UUID.

    Every operation is atomic on its own. Writers and snapshots share one
    lock; ``get`` is a single dict lookup and takes no lock.
    """

    def __init__(self):
        self._records: Dict[UUID, Employee] = {}
        self._lock = threading.Lock()

    def put(self, employee_id: UUID, record: Employee) -> None:
        with self._lock:
            self._records[employee_id] = record

    def get(self, employee_id: UUID) -> Optional[Employee]:
        return self._records.get(employee_id)

    def remove(self, employee_id: UUID) -> Optional[Employee]:
        with self._lock:
            return self._records.pop(employee_id, None)

    def list_all(self) -> List[Employee]:
        # new list; callers can't reach the backing dict
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._records
