"""Aviso best-effort de pagamento falho para o Apps Script.

Roda fora do ciclo de resposta do webhook: falhas são registradas em
log e nunca chegam à resposta devolvida ao Stripe.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from utils.errors import RelayError

if TYPE_CHECKING:
    from app.domain.checkout import PaymentFailureNotice
    from app.protocols.http_client import RelayHttpClientProtocol
    from config.settings import RelaySettings

logger = logging.getLogger(__name__)


class NotifyPaymentFailedUseCase:
    """Envia o evento PAYMENT_FAILED; devolve True se o Apps Script aceitou."""

    def __init__(self, http_client: RelayHttpClientProtocol, settings: RelaySettings) -> None:
        self._http = http_client
        self._settings = settings

    async def execute(self, notice: PaymentFailureNotice) -> bool:
        url = self._settings.apps_script_url
        if not url:
            logger.info(
                "payment_failed_notice_skipped",
                extra={"reason": "APPS_SCRIPT_URL not configured"},
            )
            return False

        try:
            result = await self._http.call(
                url,
                "POST",
                json=notice.to_relay_event(),
                timeout_seconds=self._settings.notify_timeout_seconds,
                upstream="apps_script",
            )
        except RelayError as exc:
            logger.warning(
                "payment_failed_notice_error",
                extra={
                    "error_kind": exc.kind,
                    "error": exc.message,
                    "correlation_id": get_correlation_id(),
                },
            )
            return False

        if not result.succeeded:
            logger.warning(
                "payment_failed_notice_rejected",
                extra={"status_code": result.status_code, "correlation_id": get_correlation_id()},
            )
            return False

        logger.info(
            "payment_failed_notice_sent",
            extra={"notice_kind": notice.kind, "correlation_id": get_correlation_id()},
        )
        return True
