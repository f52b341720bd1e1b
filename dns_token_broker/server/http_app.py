"""
HTTP front end for the binding manager.

Exposes /create, /update and /delete; fields come from the query string
on GET and from the form-encoded body on POST.
"""

import asyncio
import logging
from typing import Dict

from aiohttp import web

from ..core.binding_manager import BindingManager

logger = logging.getLogger(__name__)

MANAGER_KEY = web.AppKey("manager", BindingManager)

FIELDS = ("hostname", "token", "ip")


async def _read_fields(request: web.Request) -> Dict[str, str]:
    if request.method == "POST":
        source = await request.post()
    else:
        source = request.query

    fields = {}
    for name in FIELDS:
        value = source.get(name)
        if isinstance(value, str):
            fields[name] = value
    return fields


def _json_response(result: Dict) -> web.Response:
    status = 400 if result.get("error") is not None else 200
    return web.json_response(result, status=status)


async def _run(request: web.Request, operation: str, fields: Dict[str, str]) -> web.Response:
    manager = request.app[MANAGER_KEY]
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, manager.handle, operation, fields)
    return _json_response(result)


async def service_create(request: web.Request) -> web.Response:
    return await _run(request, "create", await _read_fields(request))


async def service_update(request: web.Request) -> web.Response:
    fields = await _read_fields(request)
    ip = fields.get("ip") or request.headers.get("X-Real-IP") or request.remote
    if ip:
        fields["ip"] = ip.strip()
    return await _run(request, "update", fields)


async def service_delete(request: web.Request) -> web.Response:
    return await _run(request, "delete", await _read_fields(request))


async def service_unknown(request: web.Request) -> web.Response:
    logger.warning(f"No route for {request.path}")
    return _json_response({"error": "Invalid URL"})


@web.middleware
async def error_middleware(request: web.Request, handler):
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unhandled error serving {request.path}")
        return _json_response({"error": str(e) or e.__class__.__name__})


def create_app(manager: BindingManager) -> web.Application:
    """Build the aiohttp application around a binding manager."""
    app = web.Application(middlewares=[error_middleware])
    app[MANAGER_KEY] = manager

    for path, handler in (
        ("/create", service_create),
        ("/update", service_update),
        ("/delete", service_delete),
    ):
        app.router.add_get(path, handler)
        app.router.add_post(path, handler)
    app.router.add_route("*", "/{tail:.*}", service_unknown)

    return app


def run_server(manager: BindingManager, host: str, port: int):
    """Serve the application until interrupted."""
    logger.info(f"Server running at http://{host}:{port}/")
    web.run_app(create_app(manager), host=host, port=port, print=None)
