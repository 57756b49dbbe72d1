from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Callable, Iterable, List, Sequence, Set, get_type_hints

from .client import MicroCMSClient
from .resources import RESOURCES, ResourceSpec

log = logging.getLogger("microcms_mcp.core.registry")

ClientProvider = Callable[[], MicroCMSClient]


# --- Discovery helpers ----------------------------------------------------- #


def discover_tool_modules(
    package_name: str = "microcms_mcp.core.tools",
) -> List[ModuleType]:
    """Import all modules under the given tools package, skipping failures."""
    modules: List[ModuleType] = []
    base_pkg = importlib.import_module(package_name)

    for finder in pkgutil.iter_modules(base_pkg.__path__, base_pkg.__name__ + "."):
        name = finder.name
        try:
            module = importlib.import_module(name)
            modules.append(module)
        except Exception as exc:  # pragma: no cover - logged, not fatal
            log.error("Failed importing tool module %s: %s", name, exc)
            continue

    return modules


def iter_tool_functions(module: ModuleType) -> Iterable[Callable]:
    """Yield public coroutines of ``module`` taking ``client`` first."""
    for _, func in inspect.getmembers(module, inspect.iscoroutinefunction):
        if func.__name__.startswith("_"):
            continue
        if func.__module__ != module.__name__:
            # Skip imported functions
            continue

        params = list(inspect.signature(func).parameters.values())
        if not params or params[0].name != "client":
            log.debug(
                "Skipping %s.%s: first parameter must be 'client'",
                module.__name__,
                func.__name__,
            )
            continue

        yield func


# --- Wrapping / registration ---------------------------------------------- #


def _inject_client(func: Callable, client_provider: ClientProvider) -> Callable:
    """Return a wrapper that injects client and hides it from the signature."""
    original_sig = inspect.signature(func)
    # Keep Annotated[...] so Field descriptions reach the generated schema.
    type_hints = get_type_hints(func, include_extras=True)

    new_params = []
    for i, (name, param) in enumerate(original_sig.parameters.items()):
        if i == 0 and name == "client":
            continue  # drop injected client
        ann = type_hints.get(name, param.annotation)
        new_params.append(param.replace(annotation=ann))

    return_ann = type_hints.get("return", original_sig.return_annotation)
    new_sig = inspect.Signature(parameters=new_params, return_annotation=return_ann)

    async def wrapped(*args, **kwargs):
        client = client_provider()
        return await func(client, *args, **kwargs)

    wrapped.__name__ = func.__name__
    wrapped.__doc__ = func.__doc__
    wrapped.__module__ = func.__module__
    wrapped.__signature__ = new_sig  # type: ignore[attr-defined]
    # validate_call (used for resource templates) reads __annotations__, not
    # __signature__.
    wrapped.__annotations__ = {
        p.name: p.annotation
        for p in new_params
        if p.annotation is not inspect.Parameter.empty
    }
    if return_ann is not inspect.Signature.empty:
        wrapped.__annotations__["return"] = return_ann
    return wrapped


def _as_provider(client_provider: ClientProvider | MicroCMSClient) -> ClientProvider:
    if isinstance(client_provider, MicroCMSClient):
        _client = client_provider

        def provider() -> MicroCMSClient:
            return _client

        return provider
    return client_provider


def register_discovered_tools(
    app,
    client_provider: ClientProvider | MicroCMSClient,
    modules: List[ModuleType] | None = None,
) -> None:
    """Register discovered tools on an app that exposes a .tool decorator."""
    provider = _as_provider(client_provider)

    if not hasattr(app, "tool"):
        raise TypeError("app must expose a 'tool' decorator")

    modules = modules or discover_tool_modules()
    seen_names: Set[str] = set()

    for module in modules:
        for func in iter_tool_functions(module):
            name = func.__name__
            if name in seen_names:
                raise ValueError(f"Duplicate tool name detected: {name}")

            wrapped = _inject_client(func, provider)
            app.tool(name=name, description=func.__doc__)(wrapped)
            seen_names.add(name)
            log.info("Registered tool: %s (%s)", name, module.__name__)


def register_resources(
    app,
    client_provider: ClientProvider | MicroCMSClient,
    resources: Sequence[ResourceSpec] = RESOURCES,
) -> None:
    """Register resource templates on an app that exposes a .resource decorator."""
    provider = _as_provider(client_provider)

    if not hasattr(app, "resource"):
        raise TypeError("app must expose a 'resource' decorator")

    for spec in resources:
        wrapped = _inject_client(spec.reader, provider)
        app.resource(
            spec.uri_template, name=spec.name, description=spec.description
        )(wrapped)
        log.info("Registered resource: %s (%s)", spec.name, spec.uri_template)


__all__ = [
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
    "register_resources",
]
