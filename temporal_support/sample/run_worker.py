"""
Temporal worker for the hello world sample.

Run this in a separate terminal before running the workflow client.

Usage:
    python -m temporal_support.sample.run_worker

Environment Variables:
    TEMPORAL_HOST: Temporal server host (default: localhost:7233)
    TEMPORAL_NAMESPACE: Temporal namespace (default: default)
"""

import asyncio
from typing import Sequence

from temporalio.client import Client
from temporalio.worker import Interceptor, Worker
from temporalio.worker.workflow_sandbox import SandboxedWorkflowRunner, SandboxRestrictions

from ..config import support_config
from ..interceptor import RetryPolicyInterceptor
from .activities import SimpleActivities
from .shared import SAMPLE_TASK_QUEUE_NAME
from .workflows import (
    ParentHelloWorkflow,
    RetryingHelloWorkflow,
    SimpleHelloWorldWorkflow,
    UntypedHelloWorkflow,
    UntypedRetryingWorkflow,
)


def create_worker(
    client: Client,
    task_queue: str = SAMPLE_TASK_QUEUE_NAME,
    interceptors: Sequence[Interceptor] = (),
) -> Worker:
    """Create a worker running every sample workflow and activity."""
    activities = SimpleActivities()
    return Worker(
        client,
        task_queue=task_queue,
        workflows=[
            SimpleHelloWorldWorkflow,
            UntypedHelloWorkflow,
            UntypedRetryingWorkflow,
            RetryingHelloWorkflow,
            ParentHelloWorkflow,
        ],
        activities=[
            activities.say_hello,
            activities.count_letters,
            activities.create_summary,
            activities.flaky_greeting,
        ],
        interceptors=list(interceptors),
        # temporal_support is deterministic, no need to re-import it per workflow run
        workflow_runner=SandboxedWorkflowRunner(
            restrictions=SandboxRestrictions.default.with_passthrough_modules("temporal_support")
        ),
    )


async def main() -> None:
    """Start the sample Temporal worker."""
    print(f"Connecting to Temporal at {support_config.host}, namespace: {support_config.namespace}")

    client: Client = await Client.connect(
        support_config.host,
        namespace=support_config.namespace,
    )

    print("Connected to Temporal server")

    worker = create_worker(client, interceptors=[RetryPolicyInterceptor()])

    print(f"Starting worker for task queue: {SAMPLE_TASK_QUEUE_NAME}")
    print("Press Ctrl+C to stop the worker")

    try:
        await worker.run()
    except KeyboardInterrupt:
        print("\nWorker stopped by user")
    except Exception as e:
        print(f"Worker failed: {e}")
        raise


if __name__ == "__main__":
    asyncio.run(main())
