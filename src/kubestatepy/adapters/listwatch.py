"""Kubernetes list/watch data source for StatefulSets.

Wraps ``kubernetes.client.AppsV1Api`` and ``kubernetes.watch.Watch`` and
converts the client's ``V1StatefulSet`` models into the domain
``StatefulSet`` consumed by the metric families. Errors raised by the client
(``ApiException``, connection errors) propagate unchanged; reconnection and
backoff belong to whoever drives the list/watch loop.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from kubernetes.watch import Watch

from kubestatepy.core.models import (
    ObjectMeta,
    StatefulSet,
    StatefulSetSpec,
    StatefulSetStatus,
)
from kubestatepy.core.ports import StatefulSetsAPI, WatchEvent, WatchPort

logger = logging.getLogger(__name__)


def statefulset_from_api(obj: Any) -> StatefulSet:
    """Convert a ``V1StatefulSet`` into the domain model.

    Missing spec or status blocks and unset counters are tolerated:
    counters become 0, strings become "" and ``spec.replicas`` stays None.
    """
    meta = obj.metadata
    spec = obj.spec
    status = obj.status
    return StatefulSet(
        metadata=ObjectMeta(
            name=meta.name or "",
            namespace=meta.namespace or "",
            creation_timestamp=meta.creation_timestamp,
            generation=meta.generation or 0,
            labels=dict(meta.labels or {}),
            annotations=dict(meta.annotations or {}),
        ),
        spec=StatefulSetSpec(replicas=spec.replicas if spec is not None else None),
        status=StatefulSetStatus(
            replicas=status.replicas or 0,
            current_replicas=status.current_replicas or 0,
            ready_replicas=status.ready_replicas or 0,
            updated_replicas=status.updated_replicas or 0,
            observed_generation=status.observed_generation or 0,
            current_revision=status.current_revision or "",
            update_revision=status.update_revision or "",
        )
        if status is not None
        else StatefulSetStatus(),
    )


def _watch_event(event: dict[str, Any]) -> WatchEvent:
    if event["type"] == "BOOKMARK":
        raw = event.get("raw_object") or event["object"]
        metadata = (raw.get("metadata") if isinstance(raw, dict) else None) or {}
        return WatchEvent(
            type="BOOKMARK",
            object=None,
            resource_version=metadata.get("resourceVersion") or "",
        )
    obj = event["object"]
    return WatchEvent(
        type=event["type"],
        object=statefulset_from_api(obj),
        resource_version=obj.metadata.resource_version or "",
    )


class StatefulSetListWatch:
    """List/watch pair bound to StatefulSets in one namespace scope.

    Args:
        api: Client exposing the AppsV1Api StatefulSet list calls.
        namespace: Namespace to scope to; "" selects all namespaces.
        watch_factory: Creates the watch used by ``watch()``. Defaults to
            ``kubernetes.watch.Watch``.
    """

    def __init__(
        self,
        api: StatefulSetsAPI,
        namespace: str = "",
        watch_factory: Callable[[], WatchPort] = Watch,
    ) -> None:
        self._api = api
        self._namespace = namespace
        self._watch_factory = watch_factory
        self._watches: list[WatchPort] = []

    @property
    def namespace(self) -> str:
        return self._namespace

    def _list_call(self) -> tuple[Callable[..., Any], tuple[Any, ...]]:
        if self._namespace:
            return self._api.list_namespaced_stateful_set, (self._namespace,)
        return self._api.list_stateful_set_for_all_namespaces, ()

    def list(self, **options: Any) -> list[StatefulSet]:
        """List StatefulSets in scope.

        Args:
            **options: Passed to the client (label_selector, field_selector,
                resource_version, limit, ...).
        """
        func, args = self._list_call()
        result = func(*args, **options)
        items = [statefulset_from_api(item) for item in result.items or []]
        logger.debug(
            "Listed %d StatefulSets in namespace %r",
            len(items),
            self._namespace or "*",
        )
        return items

    def watch(self, **options: Any) -> Iterator[WatchEvent]:
        """Stream StatefulSet change events.

        The stream blocks between events and ends when the server closes it,
        ``timeout_seconds`` elapses or ``stop()`` is called. BOOKMARK events
        (requested with ``allow_watch_bookmarks=True``) carry only a resource
        version, so they are yielded with ``object=None``.

        Args:
            **options: Passed to the client (resource_version,
                timeout_seconds, allow_watch_bookmarks, label_selector, ...).
        """
        func, args = self._list_call()
        stream_watch = self._watch_factory()
        self._watches.append(stream_watch)
        logger.debug("Watching StatefulSets in namespace %r", self._namespace or "*")
        try:
            for event in stream_watch.stream(func, *args, **options):
                yield _watch_event(event)
        finally:
            self._watches.remove(stream_watch)

    def stop(self) -> None:
        """Stop every watch stream started from this object that is still open."""
        for stream_watch in list(self._watches):
            stream_watch.stop()


def create_statefulset_list_watch(
    api: StatefulSetsAPI,
    namespace: str = "",
    watch_factory: Callable[[], WatchPort] = Watch,
) -> StatefulSetListWatch:
    """Create a list/watch pair for StatefulSets.

    Args:
        api: ``kubernetes.client.AppsV1Api`` or a compatible object.
        namespace: Namespace scope; "" for all namespaces.
        watch_factory: Factory for the watch stream.

    Returns:
        StatefulSetListWatch bound to the given scope.
    """
    return StatefulSetListWatch(api, namespace, watch_factory)
