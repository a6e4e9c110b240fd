"""
Lookups of the definitions the SDK attaches to ``@activity.defn`` functions
and ``@workflow.defn`` classes.

The SDK exposes no public reader for these, so this is the only module that
touches ``activity._Definition`` and ``workflow._Definition``. Both helpers
are known to work with temporalio 1.7 up to, but excluding, 2.0, the range
pinned in pyproject.toml.
"""

from typing import Callable, Optional

from temporalio import activity, workflow


def activity_name(fn: Callable) -> Optional[str]:
    """Registered activity name of ``fn``, or None if it is not an activity."""
    defn = activity._Definition.from_callable(fn)
    return defn.name if defn is not None else None


def workflow_run_fn(workflow_class: type) -> Optional[Callable]:
    """The ``@workflow.run`` method of ``workflow_class``, or None if it is not a workflow."""
    defn = workflow._Definition.from_class(workflow_class)
    return defn.run_fn if defn is not None else None
