"""
Tests for AttributeReader and AttributeCollection.
"""

import gc
import weakref

import pytest

from temporal_support.attribute import RetryPolicy, TaskQueue
from temporal_support.exceptions import AttributeUsageError
from temporal_support.internal.attribute import (
    AttributeCollection,
    AttributeForActivity,
    AttributeForWorkflow,
    AttributeReader,
)

from .stubs import (
    AbstractAttributed,
    ActivityNote,
    ChildAttributed,
    FinalAttributed,
    NotAttributed,
    ParentInterfaceAttributed,
)


def _queue_names(collection: AttributeCollection):
    return [attribute.name for attribute in collection.all(TaskQueue)]


def test_own_attribute_wins() -> None:
    collection = AttributeReader.collection_from_class(FinalAttributed)

    assert collection.first(TaskQueue).name == "test-queue-final"


def test_walks_whole_hierarchy_nearest_first() -> None:
    collection = AttributeReader.collection_from_class(FinalAttributed)

    assert _queue_names(collection) == [
        "test-queue-final",
        "test-queue-abstract",
        "test-queue-interface",
        "test-queue-parent-interface",
        "test-queue-parent-parent-interface",
    ]


def test_inherits_from_parent_without_own_attributes() -> None:
    collection = AttributeReader.collection_from_class(ChildAttributed)

    assert collection.first(TaskQueue).name == "test-queue-abstract"


def test_reads_interface_chain() -> None:
    collection = AttributeReader.collection_from_class(ParentInterfaceAttributed)

    assert _queue_names(collection) == [
        "test-queue-parent-interface",
        "test-queue-parent-parent-interface",
    ]
    # RetryPolicy is only declared at the top of the chain
    assert collection.first(RetryPolicy).attempts == 7


def test_first_returns_none_when_missing() -> None:
    collection = AttributeReader.collection_from_class(NotAttributed)

    assert collection.first(TaskQueue) is None
    assert collection.all(TaskQueue) == ()
    assert len(collection) == 0


def test_filters_by_target_marker() -> None:
    for_activity = AttributeReader.collection_from_class(FinalAttributed, [AttributeForActivity])
    for_workflow = AttributeReader.collection_from_class(FinalAttributed, [AttributeForWorkflow])

    assert for_activity.first(ActivityNote).text == "final"
    assert for_workflow.first(ActivityNote) is None
    # TaskQueue applies to both
    assert for_workflow.first(TaskQueue).name == "test-queue-final"


def test_collection_is_iterable_in_order() -> None:
    collection = AttributeReader.collection_from_class(FinalAttributed)

    attributes = list(collection)
    assert isinstance(attributes[0], ActivityNote)
    assert isinstance(attributes[1], TaskQueue)
    assert len(collection) == len(attributes)


def test_result_is_cached() -> None:
    first = AttributeReader.collection_from_class(AbstractAttributed)
    second = AttributeReader.collection_from_class(AbstractAttributed)

    assert first is second


def test_decorating_clears_cache() -> None:
    class Subject:
        pass

    before = AttributeReader.collection_from_class(Subject)
    TaskQueue("late-queue")(Subject)
    after = AttributeReader.collection_from_class(Subject)

    assert before.first(TaskQueue) is None
    assert after.first(TaskQueue).name == "late-queue"


def test_rejects_non_class() -> None:
    with pytest.raises(AttributeUsageError):
        AttributeReader.collection_from_class(FinalAttributed())


def test_cache_does_not_keep_classes_alive() -> None:
    """Workflow modules re-imported per run create new classes each time."""

    def read_temporary_class():
        @TaskQueue("temporary-queue")
        class Temporary:
            pass

        collection = AttributeReader.collection_from_class(Temporary, [AttributeForWorkflow])
        assert collection.first(TaskQueue).name == "temporary-queue"
        return weakref.ref(Temporary)

    refs = [read_temporary_class() for _ in range(3)]
    gc.collect()

    assert all(ref() is None for ref in refs)
    assert len(AttributeReader._cache) == 0
