"""
Component clusters: named, ordered component arrangements per layout.

A cluster maps merged component data to the descriptors the composer renders,
top to bottom. Clusters are pure functions of their input.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class ComponentDescriptor:
    type: str
    section_id: str
    props: dict[str, Any] = field(default_factory=dict)


class UnknownClusterError(KeyError):
    pass


def _section(data: dict[str, Any], key: str) -> Any:
    value = data.get(key)
    return value if value is not None else {}


def esg_guardian_cluster(data: dict[str, Any]) -> list[ComponentDescriptor]:
    """Hero, impact figures, pillars, priorities, certifications, governance, news, contact."""
    esg = _section(data, "esg")
    governance = _section(data, "governance")
    components = [
        ComponentDescriptor("hero", "top", dict(_section(data, "hero"))),
        ComponentDescriptor(
            "impactMetrics",
            "impact",
            {"metrics": dict(_section(data, "metrics")), "esgMetrics": dict(esg.get("metrics") or {})},
        ),
        ComponentDescriptor("pillars", "pillars", {"pillars": list(data.get("pillars") or [])}),
        ComponentDescriptor("esgPriorities", "esg", {"priorities": list(esg.get("priorities") or [])}),
        ComponentDescriptor(
            "sustainabilityHub",
            "sustainability",
            {"certifications": list(esg.get("certifications") or [])},
        ),
        ComponentDescriptor(
            "governance",
            "governance",
            {
                "boardMembers": list(governance.get("boardMembers") or []),
                "committees": list(governance.get("committees") or []),
                "policies": list(governance.get("policies") or []),
            },
        ),
    ]
    press_releases = list(data.get("pressReleases") or [])
    if press_releases:
        components.append(ComponentDescriptor("pressReleases", "news", {"pressReleases": press_releases}))
    components.append(ComponentDescriptor("contact", "contact", dict(_section(data, "contact"))))
    return components


class ComponentClusters:
    """Registry of clusters by name (camelCase, as stored on templates)."""

    esgGuardian = staticmethod(esg_guardian_cluster)

    _registry: dict[str, Callable[[dict[str, Any]], list[ComponentDescriptor]]] = {
        "esgGuardian": esg_guardian_cluster,
    }

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls._registry)

    @classmethod
    def resolve(cls, name: str, data: dict[str, Any]) -> list[ComponentDescriptor]:
        try:
            cluster = cls._registry[name]
        except KeyError:
            raise UnknownClusterError(name) from None
        return cluster(data)


def resolve_cluster(name: str, data: dict[str, Any]) -> list[ComponentDescriptor]:
    return ComponentClusters.resolve(name, data)
