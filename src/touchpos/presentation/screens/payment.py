from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from touchpos.core.events import ClearCart

from .base import BaseScreen

logger = logging.getLogger(__name__)

PAYMENT_METHODS = ("card", "cash", "mobile")
LAST_RECEIPT_KEY = "last_receipt"


class PaymentScreen(BaseScreen):
    template_name = "payment.html"

    def context(self) -> Dict[str, Any]:
        return {
            "receipt": self.cart_manager.generate_receipt_data(),
            "methods": PAYMENT_METHODS,
        }

    async def complete_payment(self, method: str = "card") -> Optional[Dict[str, Any]]:
        """
        Store the receipt, empty the cart and return home.

        Returns the receipt, or None when the cart is empty or the method
        is not supported.
        """
        if method not in PAYMENT_METHODS:
            logger.warning(f"Unsupported payment method: {method}")
            return None
        if self.cart_manager.is_empty():
            return None

        receipt = self.cart_manager.generate_receipt_data()
        receipt["method"] = method
        receipt["paid_at"] = datetime.now(timezone.utc).isoformat()
        self.storage_manager.set(LAST_RECEIPT_KEY, receipt)

        await self.app.dispatch(ClearCart())
        await self.navigate("home")
        return receipt
