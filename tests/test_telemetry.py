from __future__ import annotations

from typing import Iterator

import pytest

from atto.runtime import telemetry


@pytest.fixture
def quiet_telemetry() -> Iterator[None]:
    telemetry.configure(preset="quiet")
    yield
    telemetry.configure()


def test_get_logger_is_cached(quiet_telemetry: None) -> None:
    assert telemetry.get_logger("atto.test") is telemetry.get_logger("atto.test")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="chatty")


def test_span_collects_metadata(quiet_telemetry: None) -> None:
    with telemetry.span(
        "test::span", component=True, metadata={"cursor": (1, 2)}
    ) as handle:
        handle.add_metadata("status", "ok")

    assert handle.component_name == "test::span"
    assert handle.metadata == {"cursor": "(1, 2)", "status": "ok"}


def test_span_reraises_errors(quiet_telemetry: None) -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::boom", component="tests"):
            raise RuntimeError("boom")


def test_record_event_accepts_levels(quiet_telemetry: None) -> None:
    telemetry.record_event("test.event", data={"value": 1})
    telemetry.record_event("test.event", level="warning", data={"value": [1, 2]})

    with pytest.raises(ValueError):
        telemetry.record_event("test.event", level="shout")
