"""
Tests for environment driven configuration.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from temporal_support.config import SupportConfig


def test_defaults(monkeypatch) -> None:
    for name in (
        "TEMPORAL_HOST",
        "TEMPORAL_NAMESPACE",
        "TEMPORAL_TASK_QUEUE",
        "TEMPORAL_RETRY_INITIAL_INTERVAL",
        "TEMPORAL_RETRY_BACKOFF_COEFFICIENT",
        "TEMPORAL_RETRY_MAXIMUM_INTERVAL",
        "TEMPORAL_RETRY_MAXIMUM_ATTEMPTS",
        "TEMPORAL_RETRY_NON_RETRYABLE_ERRORS",
    ):
        monkeypatch.delenv(name, raising=False)

    config = SupportConfig()

    assert config.host == "localhost:7233"
    assert config.namespace == "default"
    assert config.default_task_queue == "default"
    policy = config.default_retry_policy
    assert policy.initial_interval == timedelta(seconds=1)
    assert policy.backoff_coefficient == 2.0
    assert policy.maximum_interval == timedelta(seconds=60)
    assert policy.maximum_attempts == 3
    assert policy.non_retryable_error_types is None


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("TEMPORAL_HOST", "temporal.internal:7233")
    monkeypatch.setenv("TEMPORAL_TASK_QUEUE", "orders")
    monkeypatch.setenv("TEMPORAL_RETRY_MAXIMUM_ATTEMPTS", "10")
    monkeypatch.setenv("TEMPORAL_RETRY_NON_RETRYABLE_ERRORS", "ValueError, AuthenticationError,")

    config = SupportConfig()

    assert config.host == "temporal.internal:7233"
    assert config.default_task_queue == "orders"
    assert config.default_retry_policy.maximum_attempts == 10
    assert config.default_retry_policy.non_retryable_error_types == ["ValueError", "AuthenticationError"]


@pytest.mark.parametrize(
    "name, value",
    [
        ("TEMPORAL_TASK_QUEUE", ""),
        ("TEMPORAL_RETRY_BACKOFF_COEFFICIENT", "0.5"),
        ("TEMPORAL_RETRY_MAXIMUM_ATTEMPTS", "-1"),
    ],
)
def test_rejects_invalid_environment(monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        SupportConfig()
