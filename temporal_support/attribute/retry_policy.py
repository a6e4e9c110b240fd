from datetime import timedelta
from typing import Optional, Tuple

from pydantic import Field, ValidationInfo, field_validator, model_validator

from ..internal.attribute import Attribute, AttributeForActivity, AttributeForWorkflow
from ..internal.intervals import to_timedelta


class RetryPolicy(Attribute, AttributeForActivity, AttributeForWorkflow):
    """
    Default retry policy for an activity or workflow class.

    Values given at the call site always win over the attribute.

    Attributes:
        attempts: Maximum number of attempts, 0 means unlimited
        init_interval: Backoff interval for the first retry
        max_interval: Cap of the backoff interval, server default is 100x
            ``init_interval``
        backoff: Coefficient applied to the interval after each retry, at
            least 1.0
        non_retryables: Error type names that stop retrying; exception
            classes are accepted and stored by name
    """

    attempts: int = Field(default=0, ge=0)
    init_interval: Optional[timedelta] = None
    max_interval: Optional[timedelta] = None
    backoff: Optional[float] = Field(default=None, ge=1.0)
    non_retryables: Tuple[str, ...] = ()

    @field_validator("init_interval", "max_interval", mode="before")
    @classmethod
    def convert_interval(cls, v, info: ValidationInfo):
        return to_timedelta(v, info.field_name)

    @field_validator("non_retryables", mode="before")
    @classmethod
    def convert_non_retryables(cls, v):
        if isinstance(v, (str, type)):
            v = [v]
        return tuple(item.__name__ if isinstance(item, type) else item for item in v)

    @model_validator(mode="after")
    def check_intervals(self):
        if self.init_interval and self.max_interval and self.max_interval < self.init_interval:
            raise ValueError("max_interval must not be shorter than init_interval")
        return self
