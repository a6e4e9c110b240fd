"""
Workflow stub factories.

``workflow_stub`` builds a client side stub that starts workflows through a
``temporalio.client.Client``. ``child_workflow_stub`` builds a stub used
inside a workflow to start child workflows.
"""

import logging
import uuid
from typing import Any, Callable, Mapping, Optional, Sequence, Type, Union

from temporalio import workflow
from temporalio.client import Client, WorkflowHandle
from temporalio.common import WorkflowIDReusePolicy

from ..attribute import RetryPolicy, TaskQueue
from ..config import support_config
from ..exceptions import InvalidOptionError
from ..internal import retry_options
from ..internal.attribute import AttributeCollection, AttributeForWorkflow, AttributeReader
from ..internal.definitions import workflow_run_fn
from ..internal.intervals import Interval, to_timedelta
from ..internal.retry_options import NonRetryable
from ..options import ChildWorkflowOptions, WorkflowOptions

logger = logging.getLogger(__name__)

WorkflowType = Union[type, str]


def _resolve(workflow_type: WorkflowType) -> tuple:
    """Return ``(target, attributes)`` for a workflow class or type name."""
    if isinstance(workflow_type, str):
        if not workflow_type:
            raise InvalidOptionError("Workflow type name must not be empty")
        return workflow_type, AttributeCollection()

    run_fn = workflow_run_fn(workflow_type)
    if run_fn is None:
        raise InvalidOptionError(
            f"{workflow_type!r} is not a workflow class, decorate it with @workflow.defn"
        )
    attributes = AttributeReader.collection_from_class(workflow_type, [AttributeForWorkflow])
    return run_fn, attributes


def _task_queue(task_queue: Optional[str], attributes: AttributeCollection) -> Optional[str]:
    if task_queue is not None:
        return task_queue
    attribute = attributes.first(TaskQueue)
    return attribute.name if attribute is not None else None


def _type_name(target: Union[Callable, str]) -> str:
    return target if isinstance(target, str) else target.__qualname__


class WorkflowStub:
    """
    Client side workflow stub.

    One stub may start any number of executions. Without an explicit
    ``workflow_id`` each start gets a fresh UUID.
    """

    def __init__(self, client: Client, target: Union[Callable, str], options: WorkflowOptions):
        self.client = client
        self.target = target
        self.options = options

    def _workflow_id(self) -> str:
        return self.options.workflow_id or str(uuid.uuid4())

    async def start(self, *args: Any, result_type: Optional[Type] = None) -> WorkflowHandle:
        """Start the workflow and return its handle."""
        workflow_id = self._workflow_id()
        logger.info(f"Starting workflow {_type_name(self.target)} with ID: {workflow_id}")
        kwargs = self.options.to_kwargs()
        if result_type is not None:
            kwargs["result_type"] = result_type
        return await self.client.start_workflow(
            self.target, args=list(args), id=workflow_id, **kwargs
        )

    async def execute(self, *args: Any, result_type: Optional[Type] = None) -> Any:
        """Start the workflow and wait for its result."""
        handle = await self.start(*args, result_type=result_type)
        return await handle.result()

    async def signal_with_start(
        self,
        signal: str,
        *args: Any,
        signal_args: Sequence[Any] = (),
    ) -> WorkflowHandle:
        """Signal the workflow, starting it first if it is not running."""
        workflow_id = self._workflow_id()
        logger.info(
            f"Signal-with-start {signal} on workflow {_type_name(self.target)} with ID: {workflow_id}"
        )
        return await self.client.start_workflow(
            self.target,
            args=list(args),
            id=workflow_id,
            start_signal=signal,
            start_signal_args=list(signal_args),
            **self.options.to_kwargs(),
        )

    def __repr__(self) -> str:
        return f"WorkflowStub({_type_name(self.target)}, {self.options!r})"


class ChildWorkflowStub:
    """Child workflow stub, usable in workflow context only."""

    def __init__(self, target: Union[Callable, str], options: ChildWorkflowOptions):
        self.target = target
        self.options = options

    async def start(self, *args: Any) -> workflow.ChildWorkflowHandle:
        """Start the child workflow and return its handle."""
        # workflow.uuid4() is deterministic across replays
        workflow_id = self.options.workflow_id or str(workflow.uuid4())
        workflow.logger.debug(
            f"Starting child workflow {_type_name(self.target)} with ID: {workflow_id}"
        )
        return await workflow.start_child_workflow(
            self.target, args=list(args), id=workflow_id, **self.options.to_kwargs()
        )

    async def execute(self, *args: Any) -> Any:
        """Start the child workflow and wait for its result."""
        handle = await self.start(*args)
        return await handle

    def __repr__(self) -> str:
        return f"ChildWorkflowStub({_type_name(self.target)}, {self.options!r})"


def workflow_stub(
    client: Client,
    workflow_type: WorkflowType,
    *,
    workflow_id: Optional[str] = None,
    task_queue: Optional[str] = None,
    retry_attempts: Optional[int] = None,
    retry_init_interval: Optional[Interval] = None,
    retry_max_interval: Optional[Interval] = None,
    retry_backoff: Optional[float] = None,
    non_retryables: Sequence[NonRetryable] = (),
    execution_timeout: Interval = 0,
    run_timeout: Interval = 0,
    task_timeout: Interval = 0,
    id_reuse_policy: Optional[WorkflowIDReusePolicy] = None,
    cron_schedule: Optional[str] = None,
    memo: Optional[Mapping[str, Any]] = None,
    search_attributes: Optional[Any] = None,
    start_delay: Interval = 0,
    eager_start: bool = False,
) -> WorkflowStub:
    """
    Create a client side workflow stub.

    Args:
        client: Connected Temporal client
        workflow_type: ``@workflow.defn`` class, or a workflow type name for
            an untyped stub
        workflow_id: Fixed workflow ID. Generated per start when not set.
        task_queue: Defaults to the class's TaskQueue attribute, then to
            ``support_config.default_task_queue``.
        retry_attempts: Maximum number of attempts, 0 means unlimited.
        retry_init_interval: Backoff interval for the first retry.
        retry_max_interval: Cap of the backoff interval.
        retry_backoff: Backoff coefficient, at least 1.0.
        non_retryables: Error types the server will not retry.
        execution_timeout: Total time including retries and continue-as-new.
        run_timeout: Time of a single workflow run.
        task_timeout: Time of a single workflow task.
        id_reuse_policy: How to treat a previously used workflow ID.
        cron_schedule: Cron schedule for the workflow.
        memo: Non-indexed values attached to the workflow.
        search_attributes: Indexed search attributes.
        start_delay: Delay before the first workflow task is dispatched.
        eager_start: Request eager execution on a local worker.

    Intervals accept ``timedelta``, seconds, or strings. Zero is not set.
    """
    target, attributes = _resolve(workflow_type)

    options = WorkflowOptions(
        workflow_id=workflow_id,
        task_queue=_task_queue(task_queue, attributes) or support_config.default_task_queue,
        execution_timeout=to_timedelta(execution_timeout, "execution_timeout"),
        run_timeout=to_timedelta(run_timeout, "run_timeout"),
        task_timeout=to_timedelta(task_timeout, "task_timeout"),
        id_reuse_policy=id_reuse_policy,
        retry_policy=retry_options.create(
            retry_attempts=retry_attempts,
            retry_init_interval=retry_init_interval,
            retry_max_interval=retry_max_interval,
            retry_backoff=retry_backoff,
            non_retryables=non_retryables,
            attribute=attributes.first(RetryPolicy),
        ),
        cron_schedule=cron_schedule or None,
        memo=memo or None,
        search_attributes=search_attributes,
        start_delay=to_timedelta(start_delay, "start_delay"),
        request_eager_start=eager_start,
    )
    logger.debug(f"Created workflow stub for {_type_name(target)}: {options!r}")
    return WorkflowStub(client, target, options)


def child_workflow_stub(
    workflow_type: WorkflowType,
    *,
    workflow_id: Optional[str] = None,
    task_queue: Optional[str] = None,
    retry_attempts: Optional[int] = None,
    retry_init_interval: Optional[Interval] = None,
    retry_max_interval: Optional[Interval] = None,
    retry_backoff: Optional[float] = None,
    non_retryables: Sequence[NonRetryable] = (),
    execution_timeout: Interval = 0,
    run_timeout: Interval = 0,
    task_timeout: Interval = 0,
    id_reuse_policy: Optional[WorkflowIDReusePolicy] = None,
    parent_close_policy: Optional[workflow.ParentClosePolicy] = None,
    cancellation_type: Optional[workflow.ChildWorkflowCancellationType] = None,
    cron_schedule: Optional[str] = None,
    memo: Optional[Mapping[str, Any]] = None,
    search_attributes: Optional[Any] = None,
) -> ChildWorkflowStub:
    """
    Create a child workflow stub.

    Note: the returned stub must be used in workflow context only.

    Takes the same options as ``workflow_stub`` except the client and start
    specific ones, plus the child specific ``parent_close_policy`` and
    ``cancellation_type``. Without a task queue the child runs on the
    parent's queue.
    """
    target, attributes = _resolve(workflow_type)

    options = ChildWorkflowOptions(
        workflow_id=workflow_id,
        task_queue=_task_queue(task_queue, attributes),
        execution_timeout=to_timedelta(execution_timeout, "execution_timeout"),
        run_timeout=to_timedelta(run_timeout, "run_timeout"),
        task_timeout=to_timedelta(task_timeout, "task_timeout"),
        id_reuse_policy=id_reuse_policy,
        retry_policy=retry_options.create(
            retry_attempts=retry_attempts,
            retry_init_interval=retry_init_interval,
            retry_max_interval=retry_max_interval,
            retry_backoff=retry_backoff,
            non_retryables=non_retryables,
            attribute=attributes.first(RetryPolicy),
        ),
        parent_close_policy=parent_close_policy,
        cancellation_type=cancellation_type,
        cron_schedule=cron_schedule or None,
        memo=memo or None,
        search_attributes=search_attributes,
    )
    logger.debug(f"Created child workflow stub for {_type_name(target)}: {options!r}")
    return ChildWorkflowStub(target, options)
