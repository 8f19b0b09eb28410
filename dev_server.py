#!/usr/bin/env python3
"""
Local Development Server
Serves every function under api/ on one port

Usage:
    python3 dev_server.py

Reads environment variables from .env, so the debug endpoints report the
same configuration Vercel would see.
"""

import json
import os
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src to path
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from route_loader import discover_routes, load_handler, match_route

PORT = int(os.getenv('PORT', '3000'))


class DispatchHandler(BaseHTTPRequestHandler):
    """Parses the request line, then hands the request to the route's handler"""

    def handle_one_request(self):
        self.raw_requestline = self.rfile.readline(65537)
        if not self.raw_requestline:
            self.close_connection = True
            return
        if len(self.raw_requestline) > 65536:
            self.send_error(414)
            return
        if not self.parse_request():
            return

        route = match_route(self.path, list(self.server.handlers))
        if route is None:
            self._not_found()
            return

        # Route handlers are plain BaseHTTPRequestHandler subclasses, so the instance can take their class
        self.__class__ = self.server.handlers[route]
        method = getattr(self, 'do_' + self.command, None)
        if method is None:
            self.send_error(501, f"Unsupported method ({self.command!r})")
            return
        method()
        self.wfile.flush()

    def _not_found(self):
        self.send_response(404)
        self.send_header('Content-type', 'application/json')
        self.end_headers()
        self.wfile.write(json.dumps({'error': f"No route for {self.path}"}).encode())


class DevServer(ThreadingHTTPServer):
    def __init__(self, address, api_dir=None):
        super().__init__(address, DispatchHandler)
        kwargs = {'api_dir': api_dir} if api_dir else {}
        self.handlers = {route: load_handler(route, **kwargs)
                         for route in discover_routes(**kwargs)}


def main():
    server = DevServer(('', PORT))
    print(f"🚀 Dev server running at http://localhost:{PORT}")
    for route in server.handlers:
        print(f"   {route}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nShutting down.")
        server.server_close()


if __name__ == "__main__":
    main()
