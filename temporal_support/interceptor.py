"""
Worker interceptor supplying a default retry policy.

Usage:
    worker = Worker(
        client,
        task_queue="my-queue",
        workflows=[MyWorkflow],
        activities=[...],
        interceptors=[RetryPolicyInterceptor()],
    )
"""

import dataclasses
from typing import Optional, Type

from temporalio import workflow
from temporalio.common import RetryPolicy
from temporalio.worker import (
    Interceptor,
    StartActivityInput,
    StartChildWorkflowInput,
    StartLocalActivityInput,
    WorkflowInboundInterceptor,
    WorkflowInterceptorClassInput,
    WorkflowOutboundInterceptor,
)

from .config import support_config


class _RetryPolicyOutbound(WorkflowOutboundInterceptor):
    """Fills ``retry_policy`` on outgoing commands that have none."""

    retry_policy: RetryPolicy

    def start_activity(self, input: StartActivityInput) -> workflow.ActivityHandle:
        if input.retry_policy is None:
            input = dataclasses.replace(input, retry_policy=self.retry_policy)
        return super().start_activity(input)

    def start_local_activity(self, input: StartLocalActivityInput) -> workflow.ActivityHandle:
        if input.retry_policy is None:
            input = dataclasses.replace(input, retry_policy=self.retry_policy)
        return super().start_local_activity(input)

    async def start_child_workflow(self, input: StartChildWorkflowInput) -> workflow.ChildWorkflowHandle:
        if input.retry_policy is None:
            input = dataclasses.replace(input, retry_policy=self.retry_policy)
        return await super().start_child_workflow(input)


class RetryPolicyInterceptor(Interceptor):
    """
    Apply a default retry policy to activities, local activities and child
    workflows scheduled without one.

    Args:
        retry_policy: Policy to apply. Defaults to
            ``support_config.default_retry_policy``.
    """

    def __init__(self, retry_policy: Optional[RetryPolicy] = None):
        self.retry_policy = retry_policy or support_config.default_retry_policy

    def outbound_class(self) -> Type[WorkflowOutboundInterceptor]:
        """Outbound interceptor class bound to this interceptor's policy."""
        return type(
            "RetryPolicyOutbound",
            (_RetryPolicyOutbound,),
            {"retry_policy": self.retry_policy},
        )

    def workflow_interceptor_class(
        self, input: WorkflowInterceptorClassInput
    ) -> Optional[Type[WorkflowInboundInterceptor]]:
        outbound_class = self.outbound_class()

        class _Inbound(WorkflowInboundInterceptor):
            def init(self, outbound: WorkflowOutboundInterceptor) -> None:
                super().init(outbound_class(outbound))

        return _Inbound

    def __repr__(self) -> str:
        return f"RetryPolicyInterceptor({self.retry_policy!r})"
