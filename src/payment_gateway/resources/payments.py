"""Generic payments resource for the Payment Gateway SDK."""
from __future__ import annotations

import logging
from typing import Any

from .base import BaseResource

logger = logging.getLogger(__name__)


class PaymentsResource(BaseResource):
    """Resource for payment processing.

    Request and response shapes are owned by the gateway, so bodies pass
    through as plain JSON (a model's ``to_dict()`` is used when given one).
    """

    path = "/api"
    error_code = "ERROR"

    def process(self, request: Any) -> Any:
        logger.debug("Processing payment")
        return self._call(
            "POST",
            "process",
            action="Failed to process payment",
            body=request,
            translate=False,
        )

    def status(self, payment_id: str) -> Any:
        logger.debug("Checking payment status %s", payment_id)
        return self._call(
            "GET",
            payment_id,
            "status",
            action="Failed to check payment status",
            translate=False,
        )
