from http.server import BaseHTTPRequestHandler
import json
import os
import sys

# Add src to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from env_status import build_env_status

class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        """Report which Airtable and Claude environment variables are set"""
        env_status = build_env_status()

        self.send_response(200)
        self.send_header('Content-type', 'application/json')
        self.send_header('Access-Control-Allow-Origin', '*')
        self.end_headers()
        self.wfile.write(json.dumps(env_status, indent=2).encode())
