#!/usr/bin/env python3
"""
Route Loader
Maps URL paths to the serverless handler classes under api/
"""

import importlib.util
import os
from typing import List, Optional, Type
from http.server import BaseHTTPRequestHandler

API_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'api'))


def load_handler(route: str, api_dir: str = API_DIR) -> Type[BaseHTTPRequestHandler]:
    """Import api/<route>.py and return its `handler` class"""
    relative = route.strip('/')
    if relative.startswith('api/'):
        relative = relative[len('api/'):]

    module_path = os.path.join(api_dir, *relative.split('/')) + '.py'
    if not os.path.isfile(module_path):
        raise FileNotFoundError(f"No serverless function for route /api/{relative}")

    module_name = 'api_' + relative.replace('/', '_').replace('-', '_')
    spec = importlib.util.spec_from_file_location(module_name, module_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.handler


def discover_routes(api_dir: str = API_DIR) -> List[str]:
    """Walk api/ the way Vercel does: one route per .py file"""
    routes = []
    for root, _dirs, files in os.walk(api_dir):
        for name in sorted(files):
            if not name.endswith('.py') or name.startswith('_'):
                continue
            relative = os.path.relpath(os.path.join(root, name[:-3]), api_dir)
            route = '/api/' + relative.replace(os.sep, '/')
            routes.append(route)
    return sorted(routes)


def match_route(path: str, routes: List[str]) -> Optional[str]:
    """Strip the query string and trailing slash, then look the path up"""
    clean = path.split('?', 1)[0].rstrip('/')
    return clean if clean in routes else None
