"""Unit tests for correlation ID management."""

from uuid import UUID

from box_equality.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


def test_generate_correlation_id_is_uuid4() -> None:
    assert UUID(generate_correlation_id()).version == 4


def test_generated_ids_are_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()


def test_set_and_get() -> None:
    set_correlation_id("abc")
    try:
        assert get_correlation_id() == "abc"
    finally:
        set_correlation_id("")


def test_processor_adds_id_when_set() -> None:
    set_correlation_id("run-1")
    try:
        event = correlation_id_processor(None, "info", {"event": "x"})
    finally:
        set_correlation_id("")

    assert event["correlation_id"] == "run-1"


def test_processor_leaves_event_alone_when_unset() -> None:
    assert correlation_id_processor(None, "info", {"event": "x"}) == {"event": "x"}
