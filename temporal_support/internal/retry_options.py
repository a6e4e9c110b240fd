"""
Builds the SDK retry policy from call-site values and a RetryPolicy attribute.
"""

from typing import Optional, Sequence, Union

from temporalio import common

from ..attribute.retry_policy import RetryPolicy
from ..exceptions import InvalidOptionError
from .intervals import Interval, to_timedelta

NonRetryable = Union[str, type]


def _type_names(non_retryables: Sequence[NonRetryable]) -> list:
    names = []
    for item in non_retryables:
        name = item.__name__ if isinstance(item, type) else item
        if name not in names:
            names.append(name)
    return names


def create(
    retry_attempts: Optional[int] = None,
    retry_init_interval: Optional[Interval] = None,
    retry_max_interval: Optional[Interval] = None,
    retry_backoff: Optional[float] = None,
    non_retryables: Sequence[NonRetryable] = (),
    attribute: Optional[RetryPolicy] = None,
) -> Optional[common.RetryPolicy]:
    """
    Merge explicit retry parameters with attribute defaults.

    Explicit values win. ``retry_attempts=0`` is explicit and means
    unlimited attempts, while zero intervals count as not set. A non-empty
    ``non_retryables`` replaces the attribute's list.

    Returns:
        The SDK RetryPolicy, or None when neither the call site nor the
        attribute sets anything
    """
    init_interval = to_timedelta(retry_init_interval, "retry_init_interval")
    max_interval = to_timedelta(retry_max_interval, "retry_max_interval")
    names = _type_names(non_retryables)

    if attribute is not None:
        if retry_attempts is None and attribute.attempts:
            retry_attempts = attribute.attempts
        init_interval = init_interval or attribute.init_interval
        max_interval = max_interval or attribute.max_interval
        if retry_backoff is None:
            retry_backoff = attribute.backoff
        names = names or list(attribute.non_retryables)

    if retry_attempts is not None and retry_attempts < 0:
        raise InvalidOptionError(f"retry_attempts must not be negative, got {retry_attempts}")
    if retry_backoff is not None and retry_backoff < 1.0:
        raise InvalidOptionError(f"retry_backoff must be at least 1.0, got {retry_backoff}")
    # An unset initial interval falls back to the SDK default
    effective_init = init_interval or common.RetryPolicy().initial_interval
    if max_interval and max_interval < effective_init:
        raise InvalidOptionError(
            f"retry_max_interval must not be shorter than the initial interval {effective_init}"
        )

    if (
        retry_attempts is None
        and init_interval is None
        and max_interval is None
        and retry_backoff is None
        and not names
    ):
        return None

    policy = common.RetryPolicy()
    if retry_attempts is not None:
        policy.maximum_attempts = retry_attempts
    if init_interval is not None:
        policy.initial_interval = init_interval
    if max_interval is not None:
        policy.maximum_interval = max_interval
    if retry_backoff is not None:
        policy.backoff_coefficient = retry_backoff
    if names:
        policy.non_retryable_error_types = names
    return policy
