"""
Declarative attributes and stub factories for the Temporal Python SDK.

    from temporal_support import TaskQueue, RetryPolicy, activity_stub

    @TaskQueue("billing")
    @RetryPolicy(attempts=5, init_interval="10 seconds")
    class BillingActivities:
        @activity.defn
        async def charge(self, order_id: str) -> str:
            ...

    # inside a workflow
    billing = activity_stub(BillingActivities, start_to_close_timeout=60)
    receipt = await billing.charge(order_id)
"""

from .attribute import RetryPolicy, TaskQueue
from .exceptions import AttributeUsageError, InvalidOptionError, TemporalSupportError
from .factory import (
    ActivityStub,
    ChildWorkflowStub,
    UntypedActivityStub,
    WorkflowStub,
    activity_stub,
    child_workflow_stub,
    workflow_stub,
)
from .interceptor import RetryPolicyInterceptor
from .internal.attribute import (
    AttributeCollection,
    AttributeForActivity,
    AttributeForWorkflow,
    AttributeReader,
)
from .options import ActivityOptions, ChildWorkflowOptions, WorkflowOptions

__all__ = [
    "ActivityOptions",
    "ActivityStub",
    "AttributeCollection",
    "AttributeForActivity",
    "AttributeForWorkflow",
    "AttributeReader",
    "AttributeUsageError",
    "ChildWorkflowOptions",
    "ChildWorkflowStub",
    "InvalidOptionError",
    "RetryPolicy",
    "RetryPolicyInterceptor",
    "TaskQueue",
    "TemporalSupportError",
    "UntypedActivityStub",
    "WorkflowOptions",
    "WorkflowStub",
    "activity_stub",
    "child_workflow_stub",
    "workflow_stub",
]
