"""Metric helper functions for creating Metric records and families."""

from collections.abc import Sequence

from kubestatepy.core.models import Family, Metric


def gauge(
    value: float,
    label_keys: Sequence[str] = (),
    label_values: Sequence[str] = (),
) -> Metric:
    """Create a gauge record.

    Args:
        value: Current gauge value
        label_keys: Optional extra label names
        label_values: Values paired with label_keys

    Returns:
        Metric with the given labels and value
    """
    return Metric(label_keys=label_keys, label_values=label_values, value=value)


def info(label_keys: Sequence[str], label_values: Sequence[str]) -> Metric:
    """Create an info record: string state carried as labels, value fixed at 1.

    Args:
        label_keys: Label names (e.g., ["revision"])
        label_values: Values paired with label_keys

    Returns:
        Metric with value 1.0
    """
    return Metric(label_keys=label_keys, label_values=label_values, value=1.0)


def single(metric: Metric) -> Family:
    """Wrap one record in an otherwise unnamed family."""
    return Family(metrics=(metric,))


def optional(value: float | None) -> Family:
    """Family with one gauge record, or none when value is None."""
    if value is None:
        return Family()
    return Family(metrics=(gauge(value),))
