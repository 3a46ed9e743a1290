"""Family generators: named, typed, documented metric extractors."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace

from kubestatepy.core.models import Family, MetricType

GenerateFunc = Callable[[object], Family]


@dataclass(frozen=True)
class FamilyGenerator:
    """Describes one metric family and how to extract it from an object.

    Attributes:
        name: Family name, unique within the exposition namespace.
        help: Help text shown alongside the family.
        type: Exposition type.
        deprecated_version: Version the family was deprecated in, or "".
        generate_func: Pure function from an object to its family records.
    """

    name: str
    help: str
    type: MetricType
    deprecated_version: str
    generate_func: GenerateFunc

    def __post_init__(self) -> None:
        if self.deprecated_version:
            object.__setattr__(
                self,
                "help",
                f"(Deprecated since {self.deprecated_version}) {self.help}",
            )

    def generate(self, obj: object) -> Family:
        """Run the extractor and stamp this descriptor's metadata on the result."""
        family = self.generate_func(obj)
        return replace(
            family,
            name=self.name,
            help=self.help,
            type=self.type,
            deprecated_version=self.deprecated_version,
        )


def extract_metric_families(
    generators: Iterable[FamilyGenerator], obj: object
) -> list[Family]:
    """Generate every family for one object, in catalog order."""
    return [generator.generate(obj) for generator in generators]


def compose_metric_gen_funcs(
    generators: Sequence[FamilyGenerator],
) -> Callable[[object], list[Family]]:
    """Combine a catalog into a single object-to-families function."""
    catalog = tuple(generators)

    def generate_all(obj: object) -> list[Family]:
        return extract_metric_families(catalog, obj)

    return generate_all


def filter_family_generators(
    generators: Iterable[FamilyGenerator],
    allow: Iterable[str] = (),
    deny: Iterable[str] = (),
) -> tuple[FamilyGenerator, ...]:
    """Keep generators whose family name is allowed and not denied.

    An empty allow set allows every family. Deny wins over allow.
    """
    allowed = frozenset(allow)
    denied = frozenset(deny)
    return tuple(
        generator
        for generator in generators
        if (not allowed or generator.name in allowed) and generator.name not in denied
    )
