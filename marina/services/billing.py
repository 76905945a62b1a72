"""
Billing Engine

Monthly charges are a flat rate per foot of boat length, set by where
the boat is kept:

    slip     $12.50 / ft
    land     $14.00 / ft
    trailer  $25.00 / ft
    storage  $11.20 / ft

CRITICAL: apply_monthly_fees keeps no record of which month it billed.
Running it twice in one month bills the fleet twice; that is the
operator's call, not the engine's.
"""

from decimal import Decimal
from typing import Mapping, Optional

import structlog

from marina.config import get_settings
from marina.models.vessel import LocationCategory, Vessel
from marina.services.storage.memory import FleetStore


logger = structlog.get_logger(__name__)


class BillingError(Exception):
    """Base exception for billing operations."""
    pass


class PaymentExceedsBalanceError(BillingError):
    """
    The payment is not less than the balance owed.

    A payment equal to the balance is rejected too.
    """

    def __init__(self, name: str, amount: Decimal, balance: Decimal):
        self.name = name
        self.amount = amount
        self.balance = balance
        super().__init__(f"That is more than the amount owed, ${balance:.2f}")


def default_rates() -> dict[LocationCategory, Decimal]:
    """Per-foot monthly rates from settings."""
    billing = get_settings().billing
    return {
        LocationCategory.SLIP: billing.slip,
        LocationCategory.LAND: billing.land,
        LocationCategory.TRAILER: billing.trailer,
        LocationCategory.STORAGE: billing.storage,
    }


class BillingEngine:
    """Computes monthly charges and applies payments to a fleet."""

    def __init__(self, rates: Optional[Mapping[LocationCategory, Decimal]] = None):
        self._rates = dict(rates) if rates is not None else default_rates()
        missing = set(LocationCategory) - set(self._rates)
        if missing:
            raise ValueError(
                f"No rate for: {', '.join(sorted(c.value for c in missing))}"
            )

    def rate_for(self, category: LocationCategory) -> Decimal:
        return self._rates[category]

    def monthly_charge(self, vessel: Vessel) -> Decimal:
        """One month's charge for a vessel: length times its category rate."""
        return vessel.length_feet * self.rate_for(vessel.location_category)

    def apply_monthly_fees(self, fleet: FleetStore) -> Decimal:
        """
        Add one month's charge to every vessel's balance.

        Returns the total amount billed across the fleet.
        """
        total = Decimal("0")
        for vessel in fleet:
            charge = self.monthly_charge(vessel)
            vessel.outstanding_fees += charge
            total += charge
        logger.debug("monthly_fees_applied", vessels=len(fleet), total=str(total))
        return total

    def record_payment(self, fleet: FleetStore, name: str, amount: Decimal) -> Decimal:
        """
        Take a payment off a vessel's balance.

        Returns:
            The new balance

        Raises:
            NotFoundError: If no vessel has that name
            PaymentExceedsBalanceError: If amount >= balance (nothing changes)
        """
        vessel = fleet.find_by_name(name)
        if amount >= vessel.outstanding_fees:
            raise PaymentExceedsBalanceError(vessel.name, amount, vessel.outstanding_fees)
        vessel.outstanding_fees -= amount
        return vessel.outstanding_fees
