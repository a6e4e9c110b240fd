"""
Tests for the TaskQueue and RetryPolicy attributes.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from temporal_support.attribute import RetryPolicy, TaskQueue
from temporal_support.exceptions import AttributeUsageError
from temporal_support.internal.attribute import AttributeForActivity, AttributeForWorkflow


class CustomError(Exception):
    pass


def test_task_queue_positional_and_keyword() -> None:
    assert TaskQueue("billing").name == "billing"
    assert TaskQueue(name="billing") == TaskQueue("billing")


def test_task_queue_rejects_empty_name() -> None:
    with pytest.raises(ValidationError):
        TaskQueue("")


def test_attributes_target_activities_and_workflows() -> None:
    for attribute in (TaskQueue("q"), RetryPolicy()):
        assert isinstance(attribute, AttributeForActivity)
        assert isinstance(attribute, AttributeForWorkflow)


def test_attributes_are_immutable() -> None:
    queue = TaskQueue("billing")

    with pytest.raises(ValidationError):
        queue.name = "other"


def test_decorator_returns_class() -> None:
    @TaskQueue("billing")
    class Billing:
        pass

    assert Billing.__name__ == "Billing"


def test_not_repeatable() -> None:
    with pytest.raises(AttributeUsageError):
        @TaskQueue("one")
        @TaskQueue("two")
        class Twice:
            pass


def test_repeating_on_subclass_is_allowed() -> None:
    @TaskQueue("parent")
    class Parent:
        pass

    @TaskQueue("child")
    class Child(Parent):
        pass

    assert Child is not None


def test_only_decorates_classes() -> None:
    with pytest.raises(AttributeUsageError):
        @TaskQueue("fn")
        def function():
            pass


def test_retry_policy_defaults() -> None:
    policy = RetryPolicy()

    assert policy.attempts == 0
    assert policy.init_interval is None
    assert policy.max_interval is None
    assert policy.backoff is None
    assert policy.non_retryables == ()


def test_retry_policy_converts_intervals() -> None:
    policy = RetryPolicy(init_interval=5, max_interval="PT1M")

    assert policy.init_interval == timedelta(seconds=5)
    assert policy.max_interval == timedelta(minutes=1)


def test_retry_policy_zero_interval_is_unset() -> None:
    assert RetryPolicy(init_interval=0).init_interval is None


def test_retry_policy_converts_non_retryables() -> None:
    policy = RetryPolicy(non_retryables=[CustomError, "ValueError"])

    assert policy.non_retryables == ("CustomError", "ValueError")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"attempts": -1},
        {"backoff": 0.5},
        {"init_interval": -3},
        {"init_interval": "soon"},
        {"init_interval": 10, "max_interval": 5},
    ],
)
def test_retry_policy_rejects_invalid_values(kwargs) -> None:
    with pytest.raises(ValueError):
        RetryPolicy(**kwargs)
