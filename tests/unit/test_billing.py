"""Unit tests for the billing ledger and payment observers."""

from decimal import Decimal
from typing import List

import pytest

from hospital_admin.models.billing import Bill, Charge
from hospital_admin.services.billing import BillingLedger


@pytest.fixture
def ledger() -> BillingLedger:
    return BillingLedger()


class TestLedgerBills:
    """Test opening bills and accumulating charges."""

    def test_open_records_unpaid_bill(self, ledger: BillingLedger) -> None:
        # Act
        bill = ledger.open("PAT-1")

        # Assert
        assert bill.patient_id == "PAT-1"
        assert bill.is_paid is False
        assert ledger.total(bill) == Decimal("0")
        assert ledger.all() == [bill]

    def test_add_charge_updates_total(self, ledger: BillingLedger) -> None:
        bill = ledger.open("PAT-1")

        ledger.add_charge(bill, Charge("Consultation Fee", Decimal("500")))
        ledger.add_charge(bill, Charge("Lab Test", Decimal("1200")))

        assert ledger.total(bill) == Decimal("1700")

    def test_negative_amounts_are_not_rejected(self, ledger: BillingLedger) -> None:
        bill = ledger.open("PAT-1")

        ledger.add_charge(bill, Charge("Refund", Decimal("-100")))

        assert ledger.total(bill) == Decimal("-100")

    def test_bills_for_patient(self, ledger: BillingLedger) -> None:
        first = ledger.open("PAT-1")
        ledger.open("PAT-2")
        third = ledger.open("PAT-1")

        assert ledger.bills_for("PAT-1") == [first, third]


class TestPaymentObservers:
    """Test subscribe, unsubscribe and payment fan-out."""

    def test_observers_called_in_registration_order(self, ledger: BillingLedger) -> None:
        # Arrange
        calls: List[str] = []
        ledger.subscribe(lambda bill: calls.append("first"))
        ledger.subscribe(lambda bill: calls.append("second"))
        bill = ledger.open("PAT-1")

        # Act
        ledger.pay(bill)

        # Assert
        assert calls == ["first", "second"]
        assert bill.is_paid is True

    def test_observers_receive_the_paid_bill(self, ledger: BillingLedger) -> None:
        received: List[Bill] = []
        ledger.subscribe(received.append)
        ledger.subscribe(received.append)
        bill = ledger.open("PAT-1")
        ledger.add_charge(bill, Charge("Lab Test", Decimal("1200")))

        ledger.pay(bill)

        assert received[0] is bill
        assert received[1] is bill
        assert received[0].is_paid is True

    def test_pay_without_observers(self, ledger: BillingLedger) -> None:
        bill = ledger.open("PAT-1")

        ledger.pay(bill)

        assert bill.is_paid is True

    def test_failing_observer_stops_fan_out(self, ledger: BillingLedger) -> None:
        """Test an exception from an observer reaches the payer."""
        # Arrange
        calls: List[str] = []

        def explode(bill: Bill) -> None:
            raise RuntimeError("observer failed")

        ledger.subscribe(explode)
        ledger.subscribe(lambda bill: calls.append("late"))
        bill = ledger.open("PAT-1")

        # Act & Assert
        with pytest.raises(RuntimeError, match="observer failed"):
            ledger.pay(bill)

        assert calls == []
        assert bill.is_paid is True

    def test_unsubscribe_stops_notifications(self, ledger: BillingLedger) -> None:
        # Arrange
        calls: List[str] = []
        handle = ledger.subscribe(lambda bill: calls.append("gone"))
        ledger.subscribe(lambda bill: calls.append("kept"))

        # Act
        removed = ledger.unsubscribe(handle)
        ledger.pay(ledger.open("PAT-1"))

        # Assert
        assert removed is True
        assert calls == ["kept"]
        assert ledger.observer_count == 1

    def test_unsubscribe_unknown_handle(self, ledger: BillingLedger) -> None:
        handle = ledger.subscribe(lambda bill: None)
        ledger.unsubscribe(handle)

        assert ledger.unsubscribe(handle) is False

    def test_same_callback_subscribed_twice_gets_two_handles(self, ledger: BillingLedger) -> None:
        calls: List[Bill] = []
        first = ledger.subscribe(calls.append)
        second = ledger.subscribe(calls.append)

        ledger.pay(ledger.open("PAT-1"))

        assert first != second
        assert len(calls) == 2

    def test_paying_twice_notifies_again(self, ledger: BillingLedger) -> None:
        calls: List[Bill] = []
        ledger.subscribe(calls.append)
        bill = ledger.open("PAT-1")

        ledger.pay(bill)
        ledger.pay(bill)

        assert len(calls) == 2
