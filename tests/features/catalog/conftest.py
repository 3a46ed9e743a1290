"""BDD step definitions for the StatefulSet catalog feature."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from kubestatepy.core.generator import FamilyGenerator
from kubestatepy.core.models import (
    Family,
    ObjectMeta,
    StatefulSet,
    StatefulSetSpec,
    StatefulSetStatus,
)
from kubestatepy.core.statefulset import statefulset_metric_families


@dataclass
class CatalogScenarioContext:
    """Mutable state shared between the steps of one scenario."""

    catalog: tuple[FamilyGenerator, ...] = ()
    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    replicas: int | None = None
    status: dict[str, object] = field(default_factory=dict)
    families: dict[str, Family] = field(default_factory=dict)
    error: Exception | None = None

    def statefulset(self) -> StatefulSet:
        return StatefulSet(
            metadata=ObjectMeta(
                name=self.name,
                namespace=self.namespace,
                labels=self.labels,
                annotations=self.annotations,
            ),
            spec=StatefulSetSpec(replicas=self.replicas),
            status=StatefulSetStatus(**self.status),
        )


def _pairs(text: str) -> dict[str, str]:
    """Parse "k=v,k2=v2" into an ordered dict."""
    result = {}
    for item in text.split(","):
        key, _, value = item.partition("=")
        result[key] = value
    return result


@pytest.fixture
def ctx() -> CatalogScenarioContext:
    """Fresh scenario context for each test."""
    return CatalogScenarioContext()


# === Catalog ===
@given("a catalog built with empty allow-lists")
def step_empty_catalog(ctx: CatalogScenarioContext) -> None:
    ctx.catalog = statefulset_metric_families([], [])


@given(parsers.parse('a catalog built with label allow-list "{keys}"'))
def step_label_catalog(ctx: CatalogScenarioContext, keys: str) -> None:
    ctx.catalog = statefulset_metric_families(keys.split(","), [])


@given(parsers.parse('a catalog built with annotation allow-list "{keys}"'))
def step_annotation_catalog(ctx: CatalogScenarioContext, keys: str) -> None:
    ctx.catalog = statefulset_metric_families([], keys.split(","))


@when(parsers.parse('a catalog is built with label allow-list "{keys}"'))
def when_catalog_built(ctx: CatalogScenarioContext, keys: str) -> None:
    try:
        ctx.catalog = statefulset_metric_families(keys.split(","), [])
    except ValueError as e:
        ctx.error = e


# === Objects ===
@given(
    parsers.parse(
        'a StatefulSet "{name}" in namespace "{namespace}" '
        "without a creation timestamp"
    )
)
def step_statefulset(ctx: CatalogScenarioContext, name: str, namespace: str) -> None:
    ctx.name = name
    ctx.namespace = namespace


@given(
    parsers.parse(
        'a StatefulSet "{name}" in namespace "{namespace}" labelled "{labels}"'
    )
)
def step_labelled_statefulset(
    ctx: CatalogScenarioContext, name: str, namespace: str, labels: str
) -> None:
    ctx.name = name
    ctx.namespace = namespace
    ctx.labels = _pairs(labels)


@given(
    parsers.parse(
        'a StatefulSet "{name}" in namespace "{namespace}" annotated "{annotations}"'
    )
)
def step_annotated_statefulset(
    ctx: CatalogScenarioContext, name: str, namespace: str, annotations: str
) -> None:
    ctx.name = name
    ctx.namespace = namespace
    ctx.annotations = _pairs(annotations)


@given(
    parsers.parse(
        'a StatefulSet "{name}" in namespace "{namespace}" '
        'at revisions "{current}" and "{update}"'
    )
)
def step_revisioned_statefulset(
    ctx: CatalogScenarioContext, name: str, namespace: str, current: str, update: str
) -> None:
    ctx.name = name
    ctx.namespace = namespace
    ctx.status.update(current_revision=current, update_revision=update)


@given("the StatefulSet has no desired replica count")
def step_no_desired_replicas(ctx: CatalogScenarioContext) -> None:
    ctx.replicas = None


@given(parsers.parse("the StatefulSet reports {n:d} ready replicas"))
def step_ready_replicas(ctx: CatalogScenarioContext, n: int) -> None:
    ctx.status["ready_replicas"] = n


# === Extraction ===
@when("the catalog is applied to the StatefulSet")
def when_catalog_applied(ctx: CatalogScenarioContext) -> None:
    sts = ctx.statefulset()
    ctx.families = {g.name: g.generate(sts) for g in ctx.catalog}


@then(
    parsers.re(r'the family "(?P<name>[^"]+)" has (?P<n>\d+) records?'),
    converters={"n": int},
)
def then_family_record_count(ctx: CatalogScenarioContext, name: str, n: int) -> None:
    assert len(ctx.families[name].metrics) == n


@then(
    parsers.parse(
        'the record of "{name}" has labels "{labels}" and value {value:g}'
    )
)
def then_record_labels(
    ctx: CatalogScenarioContext, name: str, labels: str, value: float
) -> None:
    (metric,) = ctx.families[name].metrics
    expected = _pairs(labels)
    assert list(metric.label_keys) == list(expected)
    assert list(metric.label_values) == list(expected.values())
    assert metric.value == value


@then(parsers.parse('the catalog has no family "{name}"'))
def then_no_family(ctx: CatalogScenarioContext, name: str) -> None:
    assert name not in [g.name for g in ctx.catalog]


@then(parsers.parse('building the catalog fails with "{message}"'))
def then_build_fails(ctx: CatalogScenarioContext, message: str) -> None:
    assert ctx.error is not None
    assert message in str(ctx.error)
