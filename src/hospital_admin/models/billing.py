"""Billing data models.

This module defines the Charge line item and the Bill aggregate.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from hospital_admin.utils.id_generator import BILL_PREFIX, generate_id


@dataclass(frozen=True)
class Charge:
    """A single billed service.

    Attributes:
        description: Service or charge description
        amount: Amount in currency units
    """

    description: str
    amount: Decimal


@dataclass(eq=False)
class Bill:
    """A patient's bill made of charge line items.

    Charges can only be appended. The total is derived from the current
    charges every time it is read.

    Attributes:
        patient_id: Roster id of the billed patient
        charges: Line items in the order they were added
        is_paid: Set once the bill has been passed to BillingLedger.pay
        id: Generated bill identifier

    Example:
        >>> bill = Bill(patient_id="PAT-1")
        >>> bill.add_charge(Charge("Consultation Fee", Decimal("500")))
        >>> bill.add_charge(Charge("Lab Test", Decimal("1200")))
        >>> bill.total
        Decimal('1700')
    """

    patient_id: str
    charges: List[Charge] = field(default_factory=list)
    is_paid: bool = False
    id: str = field(init=False, default_factory=lambda: generate_id(BILL_PREFIX))

    def add_charge(self, charge: Charge) -> "Bill":
        """Append a charge and return this bill."""
        self.charges.append(charge)
        return self

    @property
    def total(self) -> Decimal:
        return sum((charge.amount for charge in self.charges), Decimal("0"))
