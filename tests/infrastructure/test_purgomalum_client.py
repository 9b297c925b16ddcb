"""Tests for the PurgoMalum adapter against an httpx.MockTransport."""

import logging

import httpx
import pytest

from kitchenpos.domain.exceptions import ProfanityServiceError
from kitchenpos.infrastructure.profanity.purgomalum_client import (
    PurgomalumProfanityChecker,
)


def _checker(handler) -> PurgomalumProfanityChecker:
    return PurgomalumProfanityChecker(
        base_url="https://purgomalum.test/",
        transport=httpx.MockTransport(handler),
    )


class TestPurgomalumProfanityChecker:

    def test_sends_text_as_query_parameter(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="false")

        assert _checker(handler).contains_profanity("Chicken & Pasta") is False
        assert seen[0].url.path == "/service/containsprofanity"
        assert seen[0].url.params["text"] == "Chicken & Pasta"

    def test_true_reply_means_profane(self):
        checker = _checker(lambda request: httpx.Response(200, text="true\n"))
        assert checker.contains_profanity("whatever") is True

    def test_server_error_raises(self):
        checker = _checker(lambda request: httpx.Response(503))
        with pytest.raises(ProfanityServiceError, match="Profanity check failed"):
            checker.contains_profanity("Chicken")

    def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(ProfanityServiceError):
            _checker(handler).contains_profanity("Chicken")

    def test_unexpected_body_raises(self):
        checker = _checker(lambda request: httpx.Response(200, text="maybe"))
        with pytest.raises(ProfanityServiceError, match="Unexpected"):
            checker.contains_profanity("Chicken")

    def test_logs_checked_text(self, caplog):
        checker = _checker(lambda request: httpx.Response(200, text="false"))
        with caplog.at_level(logging.DEBUG, logger="kitchenpos.infrastructure.profanity"):
            checker.contains_profanity("Chicken & Pasta")
        assert "'Chicken & Pasta'" in caplog.text
