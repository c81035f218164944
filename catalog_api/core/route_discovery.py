"""FastAPI route auto-discovery.

Conventions:
- Route modules live in the `catalog_api.routes` package.
- Each module exports a `router: APIRouter` with its own `prefix` and `tags`.
- Modules starting with `_` are ignored.
"""

import importlib
import pkgutil
from types import ModuleType

import structlog
from fastapi import APIRouter, FastAPI

logger = structlog.get_logger(__name__)

ROUTES_PACKAGE = "catalog_api.routes"


class RouterDiscoveryError(Exception):
    """Raised when router discovery fails."""


def _import_routes_package(package_name: str) -> ModuleType:
    try:
        return importlib.import_module(package_name)
    except ImportError as e:
        raise RouterDiscoveryError(f"Routes package '{package_name}' cannot be imported") from e


def discover_routers(package_name: str = ROUTES_PACKAGE) -> list[APIRouter]:
    """Import every route module of ``package_name`` and collect its router.

    Modules are visited in name order so the OpenAPI document is stable.
    """
    package = _import_routes_package(package_name)
    routers: list[APIRouter] = []

    for module_info in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        if module_info.name.startswith("_"):
            continue

        module_path = f"{package_name}.{module_info.name}"
        try:
            module = importlib.import_module(module_path)
        except Exception as e:
            msg = (
                f"Failed to import route module '{module_path}'.\n"
                f"  Hint: Ensure dependencies are installed"
            )
            raise RouterDiscoveryError(msg) from e

        router = getattr(module, "router", None)
        if not isinstance(router, APIRouter):
            msg = (
                f"Route module '{module_path}' must export 'router' as an APIRouter, "
                f"got {type(router).__name__}"
            )
            raise RouterDiscoveryError(msg)

        routers.append(router)

    return routers


def register_routers(app: FastAPI, package_name: str = ROUTES_PACKAGE) -> None:
    """Discover and register routers with a FastAPI app.

    Fails fast on startup if a route module can't be imported or doesn't export a
    valid `router`.
    """
    routers = discover_routers(package_name)
    if not routers:
        logger.warning("no_routers_discovered", package=package_name)
        return

    for router in routers:
        app.include_router(router)
        logger.debug("router_registered", prefix=router.prefix, tags=list(router.tags or []))

    logger.info("routers_registered", package=package_name, count=len(routers))
