"""
Component mapping resolver.

Grammar of a mapping expression::

    <component>                  bound to the default host group
    <component>|<host-group>     bound to an explicit host group

Only the first ``|`` splits the expression; anything after it, further
delimiters included, is the host-group token. Both sides are trimmed.

Resolution is a pure function of its inputs and is safe to call from
any number of threads.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from ambari_extras.core.exceptions import InvalidArgumentError, MappingError
from ambari_extras.mapping.models import ComponentMapping

MAPPING_DELIMITER = "|"
BIND_TO_KEY = "bindTo"


def _unbound_message(component: str) -> str:
    return (
        f'Extra component "{component}" is not bound to any host group. '
        f'Please use "{BIND_TO_KEY}" configuration key for global binding or specify it '
        f'by adding "{MAPPING_DELIMITER}<host-group-name>" after the component name'
    )


def split_expression(expression: str) -> tuple[str, str | None]:
    """
    Split a mapping expression into its component and host-group tokens.

    Args:
        expression: Raw mapping expression.

    Returns:
        Tuple of (component, host_group); host_group is None when the
        expression carries no delimiter. Both tokens are trimmed.
    """
    if MAPPING_DELIMITER not in expression:
        return expression.strip(), None

    component, host = expression.split(MAPPING_DELIMITER, 1)
    return component.strip(), host.strip()


def resolve(expression: str, default_host: str) -> ComponentMapping:
    """
    Resolve one mapping expression into a validated ComponentMapping.

    Args:
        expression: ``<component>`` or ``<component>|<host-group>``.
        default_host: Host group used when the expression names none.
            May be empty; only the resolved host group is validated.

    Returns:
        ComponentMapping for the expression.

    Raises:
        InvalidArgumentError: If either argument is None or not a string.
        MappingError: If the component name or resolved host group is blank.
    """
    if expression is None:
        raise InvalidArgumentError("expression", "Mapping is required")
    if default_host is None:
        raise InvalidArgumentError("default_host", "Default host is required")
    if not isinstance(expression, str):
        raise InvalidArgumentError(
            "expression", f"Mapping must be a string, got {type(expression).__name__}"
        )
    if not isinstance(default_host, str):
        raise InvalidArgumentError(
            "default_host", f"Default host must be a string, got {type(default_host).__name__}"
        )

    component, host = split_expression(expression)
    if host is None:
        host = default_host

    if not component:
        raise MappingError(
            f'Mapping "{expression}" does not name a component',
            component=component,
            expression=expression,
        )
    if not host.strip():
        raise MappingError(_unbound_message(component), component=component, expression=expression)

    return ComponentMapping(component=component, host=host)


def resolve_all(expressions: Iterable[str], default_host: str) -> list[ComponentMapping]:
    """
    Resolve a sequence of expressions, preserving order and duplicates.

    The first failing expression aborts resolution.
    """
    mappings = [resolve(expression, default_host) for expression in expressions]
    logger.debug(f"🔗 Resolved {len(mappings)} component mappings (default host group: {default_host!r})")
    return mappings
