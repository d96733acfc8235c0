"""
Finalizer lifecycle guard for managed resources.

A finalizer marks an outstanding cleanup obligation. The controller
registers it before doing stateful work and removes it only after the
cleanup finished. The guard only reads a snapshot; updating the resource
is up to the caller and its store.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Collection, FrozenSet, Optional, Protocol, runtime_checkable


@runtime_checkable
class ManagedResource(Protocol):
    """Any object exposing a deletion marker and a set of finalizers."""

    def get_deletion_timestamp(self) -> Optional[datetime]: ...

    def get_finalizers(self) -> Collection[str]: ...


def contains_finalizer(resource: ManagedResource, finalizer: str) -> bool:
    return finalizer in resource.get_finalizers()


def needs_finalizer_registration(resource: ManagedResource, finalizer: str) -> bool:
    """
    True when the resource is not marked for deletion and does not carry
    the finalizer yet. Otherwise, False.
    """
    return resource.get_deletion_timestamp() is None and not contains_finalizer(resource, finalizer)


def is_finalization_candidate(resource: ManagedResource, finalizer: str) -> bool:
    """
    True when the resource is marked for deletion and still carries the
    finalizer. Otherwise, False.
    """
    return resource.get_deletion_timestamp() is not None and contains_finalizer(resource, finalizer)


@dataclass(frozen=True)
class ResourceSnapshot:
    """Immutable view of a resource's deletion marker and finalizers."""

    deletion_timestamp: Optional[datetime] = None
    finalizers: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        # Accept any iterable of tokens; membership is all that matters.
        object.__setattr__(self, "finalizers", frozenset(self.finalizers))

    def get_deletion_timestamp(self) -> Optional[datetime]:
        return self.deletion_timestamp

    def get_finalizers(self) -> FrozenSet[str]:
        return self.finalizers

    def with_finalizer(self, finalizer: str) -> "ResourceSnapshot":
        return replace(self, finalizers=self.finalizers | {finalizer})

    def without_finalizer(self, finalizer: str) -> "ResourceSnapshot":
        return replace(self, finalizers=self.finalizers - {finalizer})

    def mark_for_deletion(self, when: Optional[datetime] = None) -> "ResourceSnapshot":
        """Set the deletion marker. An existing marker is never overwritten."""
        if self.deletion_timestamp is not None:
            return self
        return replace(self, deletion_timestamp=when or datetime.now(timezone.utc))
