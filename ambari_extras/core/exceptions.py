"""
Core Exceptions - Unified error hierarchy for ambari-extras.

Follows SRP: each exception type handles one category of errors.
None of these are transient: they all require an operator to fix
configuration or the deployment, so nothing here is ever retried.
"""


class AmbariExtrasError(Exception):
    """Base exception for all ambari-extras errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | {self.details}"
        return self.message


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(AmbariExtrasError):
    """Input validation failed."""
    pass


class InvalidArgumentError(ValidationError):
    """A required argument was missing or of the wrong type."""

    def __init__(self, argument: str, message: str):
        super().__init__(message, {"argument": argument})
        self.argument = argument


class MappingError(ValidationError):
    """A component mapping expression could not be resolved to a host group."""

    def __init__(self, message: str, component: str = "", expression: str | None = None):
        details = {"component": component}
        if expression is not None:
            details["expression"] = expression
        super().__init__(message, details)
        self.component = component
        self.expression = expression


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(AmbariExtrasError):
    """Configuration error."""
    pass


class InvalidConfigError(ConfigurationError):
    """Invalid configuration value or file."""
    pass


# =============================================================================
# Extension Errors
# =============================================================================

class ExtensionError(AmbariExtrasError):
    """Extension registration or execution error."""
    pass


class ExtensionNotFoundError(ExtensionError):
    """Extension type not registered."""

    def __init__(self, extension_type: str, available: list[str] | None = None):
        available_str = ", ".join(available or []) or "none"
        super().__init__(
            f"Extension type '{extension_type}' not found. Available: {available_str}",
            {"extension_type": extension_type}
        )
        self.extension_type = extension_type


class ExtensionLifecycleError(ExtensionError):
    """A pre/post cluster deploy hook failed.

    Extensions raise this from their hooks; the coordinator propagates it
    to its caller untouched.
    """

    def __init__(self, message: str, service_name: str | None = None, phase: str | None = None):
        details = {}
        if service_name:
            details["service_name"] = service_name
        if phase:
            details["phase"] = phase
        super().__init__(message, details)
        self.service_name = service_name
        self.phase = phase


class LifecycleOrderError(ExtensionError):
    """A lifecycle step was invoked out of order, twice, or after an abort."""

    def __init__(self, service_name: str, step: str, state: str, reason: str = ""):
        message = f"Cannot run '{step}' for extension '{service_name}' in state '{state}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            {"service_name": service_name, "step": step, "state": state}
        )
        self.service_name = service_name
        self.step = step
        self.state = state
