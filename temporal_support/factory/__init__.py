from .activity_stub import ActivityMethod, ActivityStub, UntypedActivityStub, activity_stub
from .workflow_stub import ChildWorkflowStub, WorkflowStub, child_workflow_stub, workflow_stub

__all__ = [
    "ActivityMethod",
    "ActivityStub",
    "ChildWorkflowStub",
    "UntypedActivityStub",
    "WorkflowStub",
    "activity_stub",
    "child_workflow_stub",
    "workflow_stub",
]
