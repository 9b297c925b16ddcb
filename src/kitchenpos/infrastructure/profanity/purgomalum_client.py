"""PurgoMalum-backed implementation of the ProfanityChecker port.

PurgoMalum answers ``GET /service/containsprofanity?text=...`` with a
plain ``true`` or ``false`` body. Failures are not retried; they
surface to the caller as ProfanityServiceError.
"""

from __future__ import annotations

import logging

import httpx

from kitchenpos.domain.exceptions import ProfanityServiceError
from kitchenpos.domain.service.profanity_checker import ProfanityChecker

logger = logging.getLogger(__name__)


class PurgomalumProfanityChecker(ProfanityChecker):

    PATH = "/service/containsprofanity"

    def __init__(
        self,
        base_url: str = "https://www.purgomalum.com",
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def contains_profanity(self, text: str) -> bool:
        logger.debug("Checking %r for profanity", text)
        try:
            with httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.get(self.PATH, params={"text": text})
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ProfanityServiceError(
                f"Profanity check failed: {exc}"
            ) from exc

        body = response.text.strip().lower()
        if body not in ("true", "false"):
            raise ProfanityServiceError(f"Unexpected profanity service reply: {body!r}")
        return body == "true"
