import os
import sys
import threading
from http.server import HTTPServer

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from route_loader import load_handler

WATCHED_VARS = [
    'AIRTABLE_TOKEN', 'AIRTABLE_BASE_ID', 'ANTHROPIC_API_KEY', 'NODE_ENV',
    'NEXT_PUBLIC_SUPABASE_URL', 'NEXT_PUBLIC_SUPABASE_ANON_KEY',
    'SUPABASE_SERVICE_ROLE_KEY', 'SUPABASE_URL', 'SUPABASE_ANON_KEY',
    'CLAUDE_MODEL',
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in WATCHED_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def serve():
    """Start a route's handler on an ephemeral port and return its base URL"""
    servers = []

    def _serve(route):
        server = HTTPServer(('127.0.0.1', 0), load_handler(route))
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_port}{route}"

    yield _serve

    for server in servers:
        server.shutdown()
        server.server_close()
