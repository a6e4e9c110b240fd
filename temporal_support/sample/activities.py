"""
Hello world activities for the temporal_support sample.

The task queue is declared once on the base class and inherited, the retry
policy is declared on the implementation.
"""

from temporalio import activity

from ..attribute import RetryPolicy, TaskQueue
from .shared import SAMPLE_TASK_QUEUE_NAME


@TaskQueue(SAMPLE_TASK_QUEUE_NAME)
class HelloActivitiesBase:
    """Base class pinning every hello world activity to the sample queue."""


@RetryPolicy(attempts=5, init_interval=1, max_interval="10 seconds", backoff=2.0)
class SimpleActivities(HelloActivitiesBase):
    """Activities called through typed and untyped stubs by the sample workflows."""

    @activity.defn
    async def say_hello(self, name: str) -> str:
        activity.logger.info(f"Greeting {name} on {activity.info().task_queue}")
        return f"Hello, {name}! Scheduled through an activity stub."

    @activity.defn
    async def count_letters(self, text: str) -> int:
        """Alphabetic characters in ``text``, used by the untyped stub sample."""
        return sum(1 for c in text if c.isalpha())

    @activity.defn
    async def create_summary(self, name: str, greeting: str, letter_count: int) -> dict:
        """Collect the results of the other activities into one payload."""
        activity.logger.info(f"Summarizing {letter_count} letters for {name}")
        return {
            "name": name,
            "greeting": greeting,
            "letter_count": letter_count,
            "workflow_complete": True,
        }

    @activity.defn
    async def flaky_greeting(self, name: str) -> str:
        """Fails on the first two attempts, so it only succeeds when retried."""
        attempt = activity.info().attempt
        if attempt < 3:
            raise RuntimeError(f"Attempt {attempt} failed for {name}")
        return f"Hello, {name}! Succeeded on attempt {attempt}."
