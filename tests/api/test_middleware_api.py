"""
API tests for the request middleware chain.

Tests cover:
- One request log line with method, URL and elapsed time
- Faults inside a route become 500 and are logged once
- The server keeps serving after a fault
- Chain order
"""

import logging
import re

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.responses import PlainTextResponse

from quote_proxy.middleware import (
    MIDDLEWARE_CHAIN,
    MethodValidatorMiddleware,
    RecoveryMiddleware,
    RequestLoggerMiddleware,
)

TEST_PANIC_MESSAGE = "Test panic"


@pytest.fixture
def faulty_app(app: FastAPI) -> FastAPI:
    """Application with an extra route that always raises."""

    @app.get("/boom")
    def boom():
        raise RuntimeError(TEST_PANIC_MESSAGE)

    return app


class TestRequestLogger:
    """Tests for the request logging middleware."""

    def test_logs_method_url_and_elapsed(self, client: TestClient, caplog):
        with caplog.at_level(logging.INFO, logger="quote_proxy.middleware.request_logger"):
            client.get("/healthz")

        messages = [
            r.getMessage() for r in caplog.records
            if r.name == "quote_proxy.middleware.request_logger"
        ]
        assert len(messages) == 1
        assert re.fullmatch(r'\[GET\] "http://testserver/healthz" \d+\.\d{3}ms', messages[0])

    def test_elapsed_comes_from_clock(self, caplog):
        ticks = iter([10.0, 10.25])
        app = FastAPI()
        app.add_middleware(RequestLoggerMiddleware, clock=lambda: next(ticks))

        @app.get("/ping")
        def ping():
            return PlainTextResponse("pong")

        with caplog.at_level(logging.INFO, logger="quote_proxy.middleware.request_logger"):
            TestClient(app).get("/ping?x=1")

        assert '[GET] "http://testserver/ping?x=1" 250.000ms' in caplog.messages

    def test_rejected_methods_are_not_logged(self, client: TestClient, caplog):
        with caplog.at_level(logging.INFO, logger="quote_proxy.middleware.request_logger"):
            client.delete("/healthz")

        assert not [
            r for r in caplog.records if r.name == "quote_proxy.middleware.request_logger"
        ]


class TestRecovery:
    """Tests for the fault recovery middleware."""

    def test_fault_becomes_500(self, faulty_app: FastAPI, caplog):
        """
        GIVEN a route that raises mid-request
        WHEN I call it
        THEN response is 500 with the standard status text and one panic line is logged
        """
        with TestClient(faulty_app) as client:
            with caplog.at_level(logging.ERROR, logger="quote_proxy.middleware.recovery"):
                response = client.get("/boom")

        assert response.status_code == 500
        assert response.text == "Internal Server Error"
        panic_lines = [m for m in caplog.messages if m.startswith("panic:")]
        assert panic_lines == [f"panic: {TEST_PANIC_MESSAGE}"]

    def test_server_keeps_serving_after_fault(self, faulty_app: FastAPI):
        with TestClient(faulty_app) as client:
            assert client.get("/boom").status_code == 500
            response = client.get("/healthz")

        assert response.status_code == 200
        assert response.text == "ok\n"

    def test_fault_is_still_logged_as_request(self, faulty_app: FastAPI, caplog):
        with TestClient(faulty_app) as client:
            with caplog.at_level(logging.INFO, logger="quote_proxy.middleware.request_logger"):
                client.get("/boom")

        assert any(m.startswith('[GET] "http://testserver/boom"') for m in caplog.messages)


class TestChainOrder:
    """Tests for the middleware registration order."""

    def test_chain_order_outermost_first(self):
        assert MIDDLEWARE_CHAIN == (
            MethodValidatorMiddleware,
            RequestLoggerMiddleware,
            RecoveryMiddleware,
        )

    def test_app_stack_matches_chain(self, app: FastAPI):
        # user_middleware lists the outermost middleware first
        assert tuple(m.cls for m in app.user_middleware) == MIDDLEWARE_CHAIN
