"""
Hello world workflows built on temporal_support stubs.
"""

from temporalio import workflow

with workflow.unsafe.imports_passed_through():
    from ..attribute import TaskQueue
    from ..factory import activity_stub, child_workflow_stub
    from .activities import SimpleActivities
    from .shared import SAMPLE_TASK_QUEUE_NAME


@TaskQueue(SAMPLE_TASK_QUEUE_NAME)
@workflow.defn
class SimpleHelloWorldWorkflow:
    """Greets ``name`` through a typed activity stub configured by attributes."""

    @workflow.run
    async def run(self, name: str) -> dict:
        # Task queue and retry policy come from the SimpleActivities attributes
        activities = activity_stub(SimpleActivities, start_to_close_timeout=10)

        greeting = await activities.say_hello(name)
        letter_count = await activities.count_letters(name)
        summary = await activities.create_summary(name, greeting, letter_count)

        workflow.logger.info(f"Greeted {name} through {activities!r}")
        return summary


@workflow.defn
class UntypedHelloWorkflow:
    """Calls an activity by name through an untyped stub."""

    @workflow.run
    async def run(self, name: str) -> int:
        activities = activity_stub(
            task_queue=SAMPLE_TASK_QUEUE_NAME,
            start_to_close_timeout="10 seconds",
        )
        return await activities.execute("count_letters", name, result_type=int)


@workflow.defn
class RetryingHelloWorkflow:
    """Relies on the SimpleActivities retry policy to get past failures."""

    @workflow.run
    async def run(self, name: str) -> str:
        activities = activity_stub(SimpleActivities, start_to_close_timeout=10)
        return await activities.flaky_greeting(name)


@TaskQueue(SAMPLE_TASK_QUEUE_NAME)
@workflow.defn
class ParentHelloWorkflow:
    """Runs SimpleHelloWorldWorkflow as a child workflow."""

    @workflow.run
    async def run(self, name: str) -> dict:
        child = child_workflow_stub(SimpleHelloWorldWorkflow, execution_timeout="1 minute")
        return await child.execute(name)


@workflow.defn
class UntypedRetryingWorkflow:
    """Calls flaky_greeting by name, so no retry policy attribute applies."""

    @workflow.run
    async def run(self, name: str) -> str:
        activities = activity_stub(
            task_queue=SAMPLE_TASK_QUEUE_NAME,
            start_to_close_timeout=10,
        )
        return await activities.execute("flaky_greeting", name, result_type=str)
