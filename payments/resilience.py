# payments/resilience.py
from collections import Counter, deque
from threading import Lock
from datetime import datetime, timezone
from typing import Optional, Dict, Any


class ResilienceState:
    """Outcomes of /pay on the active gateway, shown on the /resilience dashboard."""

    def __init__(self, gateway_name: str, max_events: int = 100):
        self._lock = Lock()
        self.gateway_name = gateway_name
        self.pay_success = 0
        self.pay_fail = 0
        self.fail_by_status: Counter = Counter()  # 400 rejected vs 500 gateway fault
        self.consecutive_failures = 0
        self.amount_billed = 0.0
        self.last_success: Optional[Dict[str, Any]] = None
        self.last_error: Optional[Dict[str, Any]] = None
        self.events = deque(maxlen=max_events)  # ring buffer

    def _now(self) -> str:
        return datetime.now(timezone.utc).isoformat()

    def record_success(self, payment_id: str, amount: float, correlation_id: Optional[str] = None):
        now = self._now()
        with self._lock:
            self.pay_success += 1
            self.consecutive_failures = 0
            self.amount_billed += amount
            self.last_success = {"ts": now, "payment_id": payment_id, "amount": amount}
            self.events.append({
                "ts": now, "type": "pay_success", "status_code": 200,
                "gateway": self.gateway_name, "payment_id": payment_id,
                "amount": amount, "correlation_id": correlation_id,
            })

    def record_failure(self, payment_id: Optional[str], status_code: int, error: Exception | str,
                       correlation_id: Optional[str] = None):
        now = self._now()
        error = str(error)
        with self._lock:
            self.pay_fail += 1
            self.fail_by_status[status_code] += 1
            self.consecutive_failures += 1
            self.last_error = {
                "ts": now, "payment_id": payment_id,
                "status_code": status_code, "error": error,
            }
            self.events.append({
                "ts": now,
                "type": "pay_rejected" if status_code < 500 else "pay_failure",
                "status_code": status_code, "gateway": self.gateway_name,
                "payment_id": payment_id, "error": error,
                "correlation_id": correlation_id,
            })

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "gateway": self.gateway_name,
                "pay_success": self.pay_success,
                "pay_fail": self.pay_fail,
                "fail_by_status": {str(k): v for k, v in sorted(self.fail_by_status.items())},
                "consecutive_failures": self.consecutive_failures,
                "amount_billed": self.amount_billed,
                "last_success": self.last_success,
                "last_error": self.last_error,
                "recent": list(self.events),
            }
