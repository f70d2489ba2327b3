"""
ambari-extras Mapping - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from ambari_extras.core.exceptions import MappingError


@dataclass(frozen=True)
class ComponentMapping:
    """A component bound to the host group it is installed on.

    Immutable; both fields are guaranteed non-blank once constructed.
    """

    component: str
    host: str

    def __post_init__(self) -> None:
        if not isinstance(self.component, str) or not self.component.strip():
            raise MappingError(
                "Component name must be a non-empty string",
                component=str(self.component),
            )
        if not isinstance(self.host, str) or not self.host.strip():
            raise MappingError(
                f'Component "{self.component}" must be bound to a non-empty host group',
                component=self.component,
            )

    def to_blueprint_component(self) -> dict[str, str]:
        """Component entry as it appears in a blueprint host group."""
        return {"name": self.component}

    def __str__(self) -> str:
        return f"{self.component}|{self.host}"
