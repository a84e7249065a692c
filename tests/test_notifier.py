"""Notifier — release-stage filter, request construction, dispatch."""

import asyncio
import json
import logging

import pytest

from bugsnag_notify import NOTIFY_URL, SerializationError, Severity, TransportError, notify, should_send
from bugsnag_notify.notifier import build_request


def _with_stages(config, stage, stages):
    return config.model_copy(update={"release_stage": stage, "notify_release_stages": tuple(stages)})


class TestShouldSend:
    @pytest.mark.parametrize("stage", ["production", "staging", "development", ""])
    def test_empty_allow_list_always_sends(self, config, stage):
        assert should_send(_with_stages(config, stage, []))

    def test_listed_stage_sends(self, config):
        assert should_send(_with_stages(config, "staging", ["production", "staging"]))

    def test_unlisted_stage_suppressed(self, config):
        assert not should_send(_with_stages(config, "development", ["production"]))


def test_request_wire_contract(config):
    request = build_request(config, Severity.ERROR, "Auth failed", {"accountType": "premium"})
    assert request.method == "POST"
    assert request.url == "https://notify.bugsnag.com" == NOTIFY_URL
    assert request.headers == {"Bugsnag-Api-Key": "abc123def456", "Bugsnag-Payload-Version": "5"}
    body = json.loads(request.body.decode("utf-8"))
    assert body["events"][0]["metaData"] == {"accountType": "premium"}


@pytest.mark.asyncio
async def test_notify_sends_exactly_once(config, transport):
    await notify(config, Severity.WARNING, "Slow query", {"ms": 1200}, transport=transport)
    assert len(transport.requests) == 1
    body = json.loads(transport.requests[0].body)
    assert body["events"][0]["severity"] == "warning"
    assert body["events"][0]["metaData"] == {"ms": 1200}


@pytest.mark.asyncio
async def test_suppressed_stage_skips_transport(config, transport, caplog):
    cfg = _with_stages(config, "development", ["production", "staging"])
    with caplog.at_level(logging.INFO, logger="bugsnag_notify.notifier"):
        await notify(cfg, Severity.ERROR, "Auth failed", {}, transport=transport)
    assert transport.requests == []
    records = [r for r in caplog.records if r.name == "bugsnag_notify.notifier"]
    assert len(records) == 1
    assert "Auth failed" in records[0].getMessage()
    assert "development" in records[0].getMessage()
    assert "abc123def456" not in caplog.text


@pytest.mark.asyncio
async def test_token_never_logged(config, transport, caplog):
    with caplog.at_level(logging.DEBUG, logger="bugsnag_notify"):
        await notify(config, Severity.INFO, "hello", {}, transport=transport)
    assert "abc123def456" not in caplog.text


@pytest.mark.asyncio
async def test_serialization_failure_stops_before_send(config, transport):
    with pytest.raises(SerializationError):
        await notify(config, Severity.ERROR, "x", {"thing": object()}, transport=transport)
    assert transport.requests == []


@pytest.mark.asyncio
async def test_transport_failure_propagates(config, failing_transport):
    with pytest.raises(TransportError):
        await notify(config, Severity.ERROR, "x", {}, transport=failing_transport)
    assert len(failing_transport.requests) == 1  # no retry


@pytest.mark.asyncio
async def test_concurrent_notifies_are_independent(config, transport):
    await asyncio.gather(*(
        notify(config, Severity.INFO, f"event {i}", {"i": i}, transport=transport)
        for i in range(10)
    ))
    assert len(transport.requests) == 10
    seen = sorted(json.loads(r.body)["events"][0]["metaData"]["i"] for r in transport.requests)
    assert seen == list(range(10))
