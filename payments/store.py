# payments/store.py
from threading import Lock
from typing import Dict, List, Optional

from payments.models import PaymentRecord


class PaymentRecordStore:
    """In-memory payment records keyed by payment id. Lives as long as the process."""

    def __init__(self):
        self._lock = Lock()
        self._records: Dict[str, PaymentRecord] = {}

    def put(self, payment_id: str, record: PaymentRecord) -> None:
        # same id replaces the previous record
        with self._lock:
            self._records[payment_id] = record

    def get(self, payment_id: str) -> Optional[PaymentRecord]:
        with self._lock:
            return self._records.get(payment_id)

    def all(self) -> List[PaymentRecord]:
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, payment_id: object) -> bool:
        with self._lock:
            return payment_id in self._records
