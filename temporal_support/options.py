"""
Immutable option values assembled by the stub factories.

Each model mirrors the keyword arguments of the SDK call it feeds.
``to_kwargs()`` drops everything that is not set so the SDK applies its own
defaults for those.
"""

from datetime import timedelta
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from temporalio.common import RetryPolicy, WorkflowIDReusePolicy
from temporalio.workflow import (
    ActivityCancellationType,
    ChildWorkflowCancellationType,
    ParentClosePolicy,
)


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def to_kwargs(self) -> Dict[str, Any]:
        """Return the set options as SDK keyword arguments."""
        return {
            name: value
            for name, value in ((name, getattr(self, name)) for name in type(self).model_fields)
            if value is not None and value is not False
        }


class ActivityOptions(_Options):
    """Options for ``workflow.execute_activity`` and friends."""

    task_queue: Optional[str] = None
    schedule_to_close_timeout: Optional[timedelta] = None
    schedule_to_start_timeout: Optional[timedelta] = None
    start_to_close_timeout: Optional[timedelta] = None
    heartbeat_timeout: Optional[timedelta] = None
    retry_policy: Optional[RetryPolicy] = None
    cancellation_type: Optional[ActivityCancellationType] = None
    activity_id: Optional[str] = None


class _WorkflowOptions(_Options):
    task_queue: Optional[str] = None
    execution_timeout: Optional[timedelta] = None
    run_timeout: Optional[timedelta] = None
    task_timeout: Optional[timedelta] = None
    id_reuse_policy: Optional[WorkflowIDReusePolicy] = None
    retry_policy: Optional[RetryPolicy] = None
    cron_schedule: Optional[str] = None
    memo: Optional[Mapping[str, Any]] = None
    search_attributes: Optional[Any] = None


class WorkflowOptions(_WorkflowOptions):
    """
    Options for ``Client.start_workflow``.

    ``workflow_id`` is kept apart from ``to_kwargs()``: when it is not set
    the stub generates a fresh id for every start.
    """

    workflow_id: Optional[str] = None
    start_delay: Optional[timedelta] = None
    request_eager_start: bool = False

    def to_kwargs(self) -> Dict[str, Any]:
        kwargs = super().to_kwargs()
        kwargs.pop("workflow_id", None)
        return kwargs


class ChildWorkflowOptions(_WorkflowOptions):
    """Options for ``workflow.start_child_workflow``."""

    workflow_id: Optional[str] = None
    parent_close_policy: Optional[ParentClosePolicy] = None
    cancellation_type: Optional[ChildWorkflowCancellationType] = None

    def to_kwargs(self) -> Dict[str, Any]:
        kwargs = super().to_kwargs()
        kwargs.pop("workflow_id", None)
        return kwargs
