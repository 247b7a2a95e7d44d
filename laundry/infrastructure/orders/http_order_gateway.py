from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from laundry.application.dto.order_payload import OrderPayloadDTO
from laundry.application.exceptions import OrderGatewayError, OrderNotFoundError
from laundry.application.ports.order_gateway import OrderGatewayPort
from laundry.core.config import settings
from laundry.domain.entities.booking import BookingRequest
from laundry.domain.entities.order import OrderRecord


class HttpOrderGateway(OrderGatewayPort):
    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.ORDER_API_BASE_URL or "").rstrip("/")
        if not self._base_url:
            raise ValueError("ORDER_API_BASE_URL is required for the HTTP order gateway")
        self._api_key = api_key or settings.ORDER_API_KEY
        self._client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.ORDER_API_TIMEOUT,
            transport=transport,
        )
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def submit_booking(self, request: BookingRequest) -> str:
        url = f"{self._base_url}/orders"
        try:
            response = await self._client.post(url, json=request.to_payload(), headers=self._headers())
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._logger.error("Error submitting booking", extra={"reason": str(e)})
            raise OrderGatewayError(f"Order submission failed: {e}") from e

        order_id = data.get("orderId") or data.get("id")
        if not order_id:
            raise OrderGatewayError("No order id returned from order API")

        self._logger.info("Order created", extra={"order_id": order_id})
        return str(order_id)

    async def get_order(self, order_id: str) -> OrderRecord:
        url = f"{self._base_url}/orders/{order_id}"
        try:
            response = await self._client.get(url, headers=self._headers())
            if response.status_code == 404:
                raise OrderNotFoundError(order_id)
            response.raise_for_status()
            payload = OrderPayloadDTO.model_validate(response.json())
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            self._logger.error("Error reading order", extra={"order_id": order_id, "reason": str(e)})
            raise OrderGatewayError(f"Order read failed: {e}") from e
        return payload.to_record()

    async def aclose(self) -> None:
        await self._client.aclose()
