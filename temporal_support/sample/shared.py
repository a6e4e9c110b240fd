"""
Shared constants for the hello world sample.
"""

SAMPLE_TASK_QUEUE_NAME = "HELLO_WORLD_TASK_QUEUE"
