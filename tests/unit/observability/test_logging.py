"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from esl.cache import TaggedCache
from esl.observability.logging import JsonLoggerFactory, PayloadRedactor, get_logger
from esl.testing import InMemoryKeyValueStore


@pytest.fixture
def restore_logging():  # type: ignore[no-untyped-def]
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestPayloadRedactor:
    def test_redacts_payload_fields(self) -> None:
        event = PayloadRedactor()(None, "info", {"event": "x", "value": {"card": 1}, "key": "k"})
        assert event == {"event": "x", "value": "[REDACTED]", "key": "k"}

    def test_custom_fields(self) -> None:
        event = PayloadRedactor(frozenset({"secret"}))(None, "info", {"Secret": "s", "value": 1})
        assert event == {"Secret": "[REDACTED]", "value": 1}


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("esl.test", namespace="shop").info("hello")
        assert logs == [{"event": "hello", "log_level": "info", "namespace": "shop"}]

    def test_cache_logs_flush_tag(self) -> None:
        cache = TaggedCache(InMemoryKeyValueStore(), "shop")
        with structlog.testing.capture_logs() as logs:
            cache.flush_tag("price")
        assert {"event": "cache.flush_tag", "log_level": "info", "namespace": "shop", "tag": "price", "version": 2} in logs

    def test_cache_logs_flush_failure(self) -> None:
        store = InMemoryKeyValueStore()
        cache = TaggedCache(store, "shop")
        store.fail_next(operations={"increment"})
        with structlog.testing.capture_logs() as logs:
            assert cache.flush() is False
        assert logs == [{"event": "cache.flush_failed", "log_level": "debug", "namespace": "shop"}]


class TestJsonLoggerFactory:
    def test_renders_json(self, restore_logging, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
        JsonLoggerFactory.configure(logging.DEBUG)
        get_logger("esl.test").info("cache.set", key="product_42", value="secret")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "cache.set"
        assert payload["key"] == "product_42"
        assert payload["value"] == "[REDACTED]"
        assert payload["level"] == "info"
        assert payload["logger"] == "esl.test"
        assert "timestamp" in payload
