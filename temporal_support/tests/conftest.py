"""
Shared fixtures for temporal_support tests.

Unit tests never reach a Temporal server: the workflow-side SDK entry points
are replaced by recorders and the client is a fake.
"""

import logging
import uuid

import pytest
from temporalio import workflow

from temporal_support.internal.attribute import AttributeReader

FIXED_UUID = uuid.UUID(int=1)

# Stands in for temporalio.workflow.logger, which needs a running workflow
WORKFLOW_LOGGER = "temporal_support.tests.workflow"


@pytest.fixture(autouse=True)
def clear_attribute_cache():
    AttributeReader.clear_cache()
    yield
    AttributeReader.clear_cache()


class FakeChildHandle:
    """Awaitable stand-in for a child workflow handle."""

    def __init__(self, result):
        self.result = result

    async def _wait(self):
        return self.result

    def __await__(self):
        return self._wait().__await__()


@pytest.fixture
def sdk_calls(monkeypatch):
    """Record calls to the workflow-side SDK functions used by the stubs."""
    calls = []

    def patch(name, result, is_async):
        if is_async:
            async def fake(*args, **kwargs):
                calls.append((name, args, kwargs))
                return result
        else:
            def fake(*args, **kwargs):
                calls.append((name, args, kwargs))
                return result
        monkeypatch.setattr(workflow, name, fake)

    patch("execute_activity_method", "activity-result", True)
    patch("execute_activity", "activity-result", True)
    patch("start_activity_method", "activity-handle", False)
    patch("start_activity", "activity-handle", False)
    patch("start_child_workflow", FakeChildHandle("child-result"), True)
    monkeypatch.setattr(workflow, "uuid4", lambda: FIXED_UUID)
    monkeypatch.setattr(workflow, "logger", logging.getLogger(WORKFLOW_LOGGER))
    return calls


class FakeWorkflowHandle:
    def __init__(self, id, result):
        self.id = id
        self._result = result

    async def result(self):
        return self._result


class FakeClient:
    """Records start_workflow calls the way temporalio.client.Client receives them."""

    def __init__(self):
        self.calls = []

    async def start_workflow(self, workflow, *, args, id, **kwargs):
        self.calls.append((workflow, args, id, kwargs))
        return FakeWorkflowHandle(id, f"result-{id}")


@pytest.fixture
def fake_client():
    return FakeClient()
