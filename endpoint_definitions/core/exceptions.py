"""
Custom exception hierarchy for endpoint definitions.

Every error raised by discovery, the service provider and the two
registration phases derives from EndpointDefinitionException so hosts can
treat them uniformly as startup failures.
"""

from __future__ import annotations


class EndpointDefinitionException(Exception):
    """
    Base exception for all endpoint definition errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (types, parameters, hooks)
        exit_code: Suggested exit code for the CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Argument Errors
# =============================================================================


class InvalidArgumentError(EndpointDefinitionException, ValueError):
    """
    A required argument was None or empty.

    Always raised before any side effect. Inherits from ValueError so callers
    that already catch ValueError keep working.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        param_name: str,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["param_name"] = param_name
        super().__init__(message, context=ctx, cause=cause)
        self.param_name = param_name


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(EndpointDefinitionException):
    """
    A discovered endpoint definition could not be loaded, constructed or run.

    Raised for instantiation failures, failing define_services/define_endpoints
    hooks and scan markers that cannot be imported. Fatal to application
    startup.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        definition_type: str | None = None,
        hook: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if definition_type:
            ctx["definition_type"] = definition_type
        if hook:
            ctx["hook"] = hook
        super().__init__(message, context=ctx, cause=cause)
        self.definition_type = definition_type
        self.hook = hook


# =============================================================================
# Service Provider Errors
# =============================================================================


class ServiceResolutionError(EndpointDefinitionException, LookupError):
    """
    A service could not be resolved from a ServiceProvider.

    Raised for unregistered services, unresolvable constructor parameters,
    circular dependencies and resolution after the provider was closed.
    """

    def __init__(
        self,
        message: str,
        *,
        service_type: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if service_type:
            ctx["service_type"] = service_type
        super().__init__(message, context=ctx, cause=cause)
        self.service_type = service_type


def qualified_name(obj: object) -> str:
    """Return the fully-qualified name of a class (or of an object's class)."""
    cls = obj if isinstance(obj, type) else type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"
