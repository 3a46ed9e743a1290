"""Port interfaces for list/watch data sources.

These protocols define the contracts the data source adapters implement and
the client surface they depend on. The core depends only on these
interfaces, not on the Kubernetes client library.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from kubestatepy.core.models import StatefulSet


@dataclass(frozen=True)
class WatchEvent:
    """One change notification from a watch stream.

    Attributes:
        type: Event type (ADDED, MODIFIED, DELETED or BOOKMARK).
        object: The object the event refers to. None for BOOKMARK events,
            which only report progress.
        resource_version: Resource version the stream has reached.
    """

    type: str
    object: StatefulSet | None
    resource_version: str = ""


@runtime_checkable
class ListerWatcher(Protocol):
    """Port for retrieving a snapshot and a stream of changes for one kind.

    Reconnection, resync and caching belong to the caller driving it.
    """

    def list(self, **options: Any) -> list[StatefulSet]:
        """Return every object currently in scope."""
        ...

    def watch(self, **options: Any) -> Iterator[WatchEvent]:
        """Stream change events until the caller stops consuming."""
        ...


@runtime_checkable
class StatefulSetsAPI(Protocol):
    """The slice of ``kubernetes.client.AppsV1Api`` the data source uses."""

    def list_namespaced_stateful_set(self, namespace: str, **kwargs: Any) -> Any:
        ...

    def list_stateful_set_for_all_namespaces(self, **kwargs: Any) -> Any:
        ...


@runtime_checkable
class WatchPort(Protocol):
    """The slice of ``kubernetes.watch.Watch`` the data source uses."""

    def stream(
        self, func: Callable[..., Any], *args: Any, **kwargs: Any
    ) -> Iterator[dict[str, Any]]:
        ...

    def stop(self) -> None:
        ...
