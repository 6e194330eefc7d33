"""Billing ledger with payment notification.

Observers registered with ``subscribe`` are called synchronously, in
registration order, each time a bill is paid. An observer that raises stops
the fan-out and the exception reaches the caller of ``pay``.
"""

import itertools
import logging
from decimal import Decimal
from typing import Callable, Dict, List

from hospital_admin.logging_audit import log_audit_event
from hospital_admin.models.billing import Bill, Charge

logger = logging.getLogger(__name__)

BillObserver = Callable[[Bill], None]


class BillingLedger:
    """Opens bills, accumulates charges and announces payments.

    Example:
        >>> ledger = BillingLedger()
        >>> handle = ledger.subscribe(lambda bill: print(bill.total))
        >>> bill = ledger.open(patient.id)
        >>> ledger.add_charge(bill, Charge("Lab Test", Decimal("1200")))
        >>> ledger.pay(bill)
        1200
    """

    def __init__(self) -> None:
        self._bills: List[Bill] = []
        self._observers: Dict[int, BillObserver] = {}
        self._handles = itertools.count(1)

    def open(self, patient_id: str) -> Bill:
        """Create an empty bill for a patient and record it in the ledger."""
        bill = Bill(patient_id=patient_id)
        self._bills.append(bill)
        logger.debug(f"Opened bill {bill.id} for patient {patient_id}")
        return bill

    def add_charge(self, bill: Bill, charge: Charge) -> Bill:
        """Append a charge to the bill and return it.

        Amounts are not range-checked here.
        """
        if bill.is_paid:
            logger.warning(f"Adding a charge to bill {bill.id} after payment")
        return bill.add_charge(charge)

    def total(self, bill: Bill) -> Decimal:
        return bill.total

    def pay(self, bill: Bill) -> None:
        """Mark the bill paid and notify every observer with it."""
        if bill.is_paid:
            logger.warning(f"Bill {bill.id} has already been paid; notifying again")
        bill.is_paid = True

        log_audit_event(
            "BILL_PAID",
            {
                "status": "success",
                "bill_id": bill.id,
                "patient_id": bill.patient_id,
                "amount": bill.total,
            },
        )

        for observer in list(self._observers.values()):
            observer(bill)

    def subscribe(self, observer: BillObserver) -> int:
        """Register a payment observer.

        Returns:
            Handle to pass to unsubscribe
        """
        handle = next(self._handles)
        self._observers[handle] = observer
        return handle

    def unsubscribe(self, handle: int) -> bool:
        """Remove a payment observer.

        Returns:
            True if the handle was registered
        """
        return self._observers.pop(handle, None) is not None

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def all(self) -> List[Bill]:
        """All bills in the order they were opened."""
        return list(self._bills)

    def bills_for(self, patient_id: str) -> List[Bill]:
        return [bill for bill in self._bills if bill.patient_id == patient_id]
