"""
Workflow client for the hello world sample.

Usage:
    python -m temporal_support.sample.run_workflow [name]

If no name is provided, it defaults to "World".
"""

import asyncio
import sys
import traceback
from datetime import datetime

from temporalio.client import Client, WorkflowFailureError

from ..config import support_config
from ..factory import workflow_stub
from .workflows import SimpleHelloWorldWorkflow


async def main() -> None:
    """Run the hello world workflow through a workflow stub."""
    name = sys.argv[1] if len(sys.argv) > 1 else "World"

    print(f"Starting hello world workflow for: {name}")
    print(f"Connecting to Temporal at {support_config.host}")

    try:
        client: Client = await Client.connect(
            support_config.host,
            namespace=support_config.namespace,
        )

        print("Connected to Temporal server")

        # Task queue comes from the TaskQueue attribute on the workflow
        stub = workflow_stub(
            client,
            SimpleHelloWorldWorkflow,
            workflow_id=f"hello-world-{name.lower()}-{datetime.now().strftime('%Y%m%d-%H%M%S')}",
            execution_timeout="5 minutes",
        )

        print(f"Starting workflow with ID: {stub.options.workflow_id}")
        result = await stub.execute(name)

        print("\nWorkflow completed successfully!")
        print("Results:")
        print(f"  • Greeting: {result['greeting']}")
        print(f"  • Letters: {result['letter_count']}")
        print(f"  • Workflow complete: {result['workflow_complete']}")

    except WorkflowFailureError as e:
        print(f"\nWorkflow failed: {e}")
        print(f"Traceback: {traceback.format_exc()}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nWorkflow interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
