"""
Activity stub factory.

Stubs are plain option holders, creating one is safe anywhere. Calling
through a stub schedules the activity and therefore must happen inside a
workflow.
"""

import logging
from typing import Any, Callable, Optional, Sequence, Type, Union

from temporalio import workflow

from ..attribute import RetryPolicy, TaskQueue
from ..internal import retry_options
from ..internal.attribute import AttributeCollection, AttributeForActivity, AttributeReader
from ..internal.definitions import activity_name
from ..internal.intervals import Interval, to_timedelta
from ..internal.retry_options import NonRetryable
from ..options import ActivityOptions

logger = logging.getLogger(__name__)


class ActivityMethod:
    """Awaitable proxy for one ``@activity.defn`` method of a stub."""

    def __init__(self, method: Callable, options: ActivityOptions):
        self._method = method
        self._options = options

    @property
    def name(self) -> str:
        return activity_name(self._method)

    async def __call__(self, *args: Any) -> Any:
        workflow.logger.debug(f"Executing activity {self.name}")
        return await workflow.execute_activity_method(
            self._method, args=list(args), **self._options.to_kwargs()
        )

    def start(self, *args: Any) -> workflow.ActivityHandle:
        """Schedule the activity and return its handle without waiting."""
        workflow.logger.debug(f"Starting activity {self.name}")
        return workflow.start_activity_method(
            self._method, args=list(args), **self._options.to_kwargs()
        )


class ActivityStub:
    """
    Typed activity stub.

    Every ``@activity.defn`` method of the activity class is reachable as an
    attribute and awaited like the method itself:

        greeting = await stub.say_hello("World")
    """

    def __init__(self, activity_class: type, options: ActivityOptions):
        self.activity_class = activity_class
        self.options = options

    def __getattr__(self, name: str) -> ActivityMethod:
        if name.startswith("_"):
            raise AttributeError(name)
        method = getattr(self.activity_class, name, None)
        if method is None or activity_name(method) is None:
            raise AttributeError(
                f"{self.activity_class.__qualname__} has no activity method {name!r}"
            )
        return ActivityMethod(method, self.options)

    def __repr__(self) -> str:
        return f"ActivityStub({self.activity_class.__qualname__}, {self.options!r})"


class UntypedActivityStub:
    """Activity stub addressing activities by their registered name."""

    def __init__(self, options: ActivityOptions):
        self.options = options

    async def execute(
        self,
        name: str,
        *args: Any,
        result_type: Optional[Type] = None,
    ) -> Any:
        workflow.logger.debug(f"Executing activity {name}")
        return await workflow.execute_activity(
            name, args=list(args), result_type=result_type, **self.options.to_kwargs()
        )

    def start(
        self,
        name: str,
        *args: Any,
        result_type: Optional[Type] = None,
    ) -> workflow.ActivityHandle:
        workflow.logger.debug(f"Starting activity {name}")
        return workflow.start_activity(
            name, args=list(args), result_type=result_type, **self.options.to_kwargs()
        )

    def __repr__(self) -> str:
        return f"UntypedActivityStub({self.options!r})"


def _read_attributes(activity_class: type) -> AttributeCollection:
    return AttributeReader.collection_from_class(activity_class, [AttributeForActivity])


def activity_stub(
    activity_class: Optional[type] = None,
    *,
    task_queue: Optional[str] = None,
    retry_attempts: Optional[int] = None,
    retry_init_interval: Optional[Interval] = None,
    retry_max_interval: Optional[Interval] = None,
    retry_backoff: Optional[float] = None,
    non_retryables: Sequence[NonRetryable] = (),
    schedule_to_start_timeout: Interval = 0,
    start_to_close_timeout: Interval = 0,
    schedule_to_close_timeout: Interval = 0,
    heartbeat_timeout: Interval = 0,
    activity_id: Optional[Any] = None,
    cancellation_type: Optional[workflow.ActivityCancellationType] = None,
) -> Union[ActivityStub, UntypedActivityStub]:
    """
    Create an activity stub.

    Note: the returned stub must be called in workflow context only.

    Args:
        activity_class: Class holding ``@activity.defn`` methods. When not
            set an untyped stub is created.
        task_queue: Task queue to schedule on. Defaults to the class's
            TaskQueue attribute, then to the workflow's own queue.
        retry_attempts: Maximum number of attempts. 0 means unlimited and
            relies on ``schedule_to_close_timeout`` to stop.
        retry_init_interval: Backoff interval for the first retry. If
            ``retry_backoff`` is 1.0 it is used for all retries.
        retry_max_interval: Cap of the backoff interval. Default is 100x
            ``retry_init_interval``.
        retry_backoff: Coefficient used to calculate the next retry
            interval, at least 1.0.
        non_retryables: Error types (classes or names) the server will not
            retry.
        schedule_to_start_timeout: Time the activity can wait in the task
            queue before a worker picks it up.
        start_to_close_timeout: Maximum execution time once sent to a worker.
        schedule_to_close_timeout: Overall time the workflow is willing to
            wait. Either this or ``start_to_close_timeout`` is required.
        heartbeat_timeout: Maximum time between activity heartbeats.
        activity_id: Business level activity ID, rarely needed.
        cancellation_type: Whether to wait for a cancelled activity to
            complete.

    Intervals accept ``timedelta``, seconds, or strings like ``"PT30S"``
    and ``"5 minutes"``. Zero timeouts are not set.

    Returns:
        ActivityStub when ``activity_class`` is given, else UntypedActivityStub
    """
    attributes = (
        _read_attributes(activity_class) if activity_class is not None else AttributeCollection()
    )

    retry_policy = retry_options.create(
        retry_attempts=retry_attempts,
        retry_init_interval=retry_init_interval,
        retry_max_interval=retry_max_interval,
        retry_backoff=retry_backoff,
        non_retryables=non_retryables,
        attribute=attributes.first(RetryPolicy),
    )

    if task_queue is None:
        attribute = attributes.first(TaskQueue)
        task_queue = attribute.name if attribute is not None else None

    options = ActivityOptions(
        task_queue=task_queue,
        schedule_to_start_timeout=to_timedelta(schedule_to_start_timeout, "schedule_to_start_timeout"),
        start_to_close_timeout=to_timedelta(start_to_close_timeout, "start_to_close_timeout"),
        schedule_to_close_timeout=to_timedelta(schedule_to_close_timeout, "schedule_to_close_timeout"),
        heartbeat_timeout=to_timedelta(heartbeat_timeout, "heartbeat_timeout"),
        retry_policy=retry_policy,
        cancellation_type=cancellation_type,
        activity_id=str(activity_id) if activity_id is not None else None,
    )

    if activity_class is None:
        logger.debug(f"Created untyped activity stub: {options!r}")
        return UntypedActivityStub(options)
    logger.debug(f"Created activity stub for {activity_class.__qualname__}: {options!r}")
    return ActivityStub(activity_class, options)
