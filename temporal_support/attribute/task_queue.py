from pydantic import Field

from ..internal.attribute import Attribute, AttributeForActivity, AttributeForWorkflow


class TaskQueue(Attribute, AttributeForActivity, AttributeForWorkflow):
    """
    Default task queue for an activity or workflow class.

    Usage:
        @TaskQueue("billing")
        class BillingActivities:
            ...
    """

    name: str = Field(min_length=1)

    def __init__(self, name: str, **data):
        super().__init__(name=name, **data)
