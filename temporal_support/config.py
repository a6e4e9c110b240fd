"""
Configuration management for temporal_support.

Centralized configuration loading from environment variables with sensible defaults.
"""

import os
from datetime import timedelta
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from temporalio.common import RetryPolicy

# Load environment variables from .env file
load_dotenv()


def _split_names(value: str) -> List[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


class SupportConfig(BaseModel):
    """Configuration for Temporal connection and stub defaults."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_default=True)

    # Temporal server settings
    host: str = Field(default_factory=lambda: os.getenv("TEMPORAL_HOST", "localhost:7233"))
    namespace: str = Field(default_factory=lambda: os.getenv("TEMPORAL_NAMESPACE", "default"))

    # Used by client workflow stubs when neither the call site nor a
    # TaskQueue attribute names a queue
    default_task_queue: str = Field(
        default_factory=lambda: os.getenv("TEMPORAL_TASK_QUEUE", "default")
    )

    # Retry policy settings, applied by RetryPolicyInterceptor
    retry_initial_interval_seconds: float = Field(
        default_factory=lambda: float(os.getenv("TEMPORAL_RETRY_INITIAL_INTERVAL", "1"))
    )
    retry_backoff_coefficient: float = Field(
        default_factory=lambda: float(os.getenv("TEMPORAL_RETRY_BACKOFF_COEFFICIENT", "2.0"))
    )
    retry_maximum_interval_seconds: float = Field(
        default_factory=lambda: float(os.getenv("TEMPORAL_RETRY_MAXIMUM_INTERVAL", "60"))
    )
    retry_maximum_attempts: int = Field(
        default_factory=lambda: int(os.getenv("TEMPORAL_RETRY_MAXIMUM_ATTEMPTS", "3"))
    )
    retry_non_retryable_error_types: List[str] = Field(
        default_factory=lambda: _split_names(os.getenv("TEMPORAL_RETRY_NON_RETRYABLE_ERRORS", ""))
    )

    @field_validator("default_task_queue")
    @classmethod
    def validate_task_queue(cls, v):
        if not v:
            raise ValueError("TEMPORAL_TASK_QUEUE must not be empty")
        return v

    @field_validator("retry_backoff_coefficient")
    @classmethod
    def validate_backoff(cls, v):
        if v < 1.0:
            raise ValueError("TEMPORAL_RETRY_BACKOFF_COEFFICIENT must be at least 1.0")
        return v

    @field_validator("retry_maximum_attempts")
    @classmethod
    def validate_attempts(cls, v):
        if v < 0:
            raise ValueError("TEMPORAL_RETRY_MAXIMUM_ATTEMPTS must not be negative")
        return v

    @property
    def default_retry_policy(self) -> RetryPolicy:
        """Get the default retry policy for activities and child workflows."""
        return RetryPolicy(
            initial_interval=timedelta(seconds=self.retry_initial_interval_seconds),
            backoff_coefficient=self.retry_backoff_coefficient,
            maximum_interval=timedelta(seconds=self.retry_maximum_interval_seconds),
            maximum_attempts=self.retry_maximum_attempts,
            non_retryable_error_types=self.retry_non_retryable_error_types or None,
        )


# Global configuration instance
support_config = SupportConfig()
