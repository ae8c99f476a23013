"""
Dependency injection helpers for endpoint definitions.

Provides constructor injection (building an object whose __init__
parameters are resolved from a ServiceProvider by type annotation) and the
resolve-or-fallback pattern used for optional collaborators like the logger.
"""

from __future__ import annotations

import inspect
import types
import typing
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import ServiceResolutionError, qualified_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from .container import ServiceProvider

T = TypeVar("T")

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def create_instance(provider: ServiceProvider, cls: type[T]) -> T:
    """Construct cls, resolving its constructor parameters from provider.

    Each parameter is resolved by its type annotation. ``X | None`` is
    treated as ``X``. A parameter with a default keeps the default when the
    provider cannot supply it. ``*args`` and ``**kwargs`` are ignored.

    Args:
        provider: Provider to resolve constructor dependencies from
        cls: Concrete class to construct

    Returns:
        The new instance

    Raises:
        ServiceResolutionError: If a required parameter has no annotation or
            its type is not registered
        Exception: Whatever the constructor itself raises

    Example:
        >>> class Greeter:
        ...     def __init__(self, logger: ILogger) -> None:
        ...         self.logger = logger
        >>> greeter = create_instance(provider, Greeter)
    """
    if not isinstance(cls, type):
        raise ServiceResolutionError(f"{cls!r} is not a class and cannot be constructed.")

    init = cls.__init__
    if init is object.__init__:
        return cls()

    try:
        signature = inspect.signature(init)
    except (TypeError, ValueError) as e:
        raise ServiceResolutionError(
            f"{qualified_name(cls)} has no usable constructor.",
            service_type=qualified_name(cls),
            cause=e,
        ) from e

    hints = _constructor_hints(init)
    args: list[Any] = []
    kwargs: dict[str, Any] = {}

    # Skip self
    for name, param in list(signature.parameters.items())[1:]:
        if param.kind in _SKIPPED_KINDS:
            continue

        has_default = param.default is not inspect.Parameter.empty
        annotation = hints.get(name, param.annotation)

        if annotation is inspect.Parameter.empty or isinstance(annotation, str):
            if has_default:
                continue
            raise ServiceResolutionError(
                f"Cannot resolve parameter '{name}' of {qualified_name(cls)}: "
                "it has no resolvable type annotation.",
                service_type=qualified_name(cls),
            )

        service_type = _unwrap_optional(annotation)
        if not provider.is_registered(service_type):
            if has_default:
                continue
            raise ServiceResolutionError(
                f"Cannot resolve parameter '{name}' of {qualified_name(cls)}: "
                f"no service registered for {_type_name(service_type)}.",
                service_type=qualified_name(cls),
            )

        value = provider.resolve(service_type)
        if param.kind is inspect.Parameter.POSITIONAL_ONLY:
            args.append(value)
        else:
            kwargs[name] = value

    return cls(*args, **kwargs)


def resolve_or_default(
    provider: ServiceProvider | None,
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from provider or create a default.

    Falls back to default_factory when there is no provider, the provider is
    closed, or the service isn't registered.

    Example:
        >>> from endpoint_definitions.services.logging import NullLogger
        >>> logger = resolve_or_default(provider, ILogger, NullLogger)
    """
    if provider is not None and not provider.is_closed:
        instance = provider.try_resolve(interface)
        if instance is not None:
            return instance
    return default_factory()


def _constructor_hints(init: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(init)
    except Exception:
        pass

    # Evaluate one annotation at a time; one that cannot be evaluated stays a string
    globalns = getattr(init, "__globals__", {})
    hints: dict[str, Any] = {}
    for name, annotation in getattr(init, "__annotations__", {}).items():
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, dict(globalns))
            except Exception:
                pass
        hints[name] = annotation
    return hints


def _unwrap_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        members = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _type_name(annotation: Any) -> str:
    if isinstance(annotation, type):
        return qualified_name(annotation)
    return repr(annotation)
