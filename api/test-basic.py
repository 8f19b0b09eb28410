#!/usr/bin/env python3
"""
Basic API Test Endpoint
Confirms the serverless functions are reachable and echoes POST payloads
"""

from http.server import BaseHTTPRequestHandler
import json
import os
import sys
from datetime import datetime
import pytz

# Add src to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from env_status import build_basic_environment

def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string with millisecond precision"""
    now = datetime.now(pytz.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f"{now.microsecond // 1000:03d}Z"

class handler(BaseHTTPRequestHandler):
    def _send_json(self, status: int, payload: dict):
        self.send_response(status)
        self.send_header('Content-type', 'application/json')
        self.send_header('Access-Control-Allow-Origin', '*')
        self.end_headers()
        self.wfile.write(json.dumps(payload, indent=2).encode())

    def do_GET(self):
        """Handle GET request for the basic health check"""
        print("🧪 BASIC TEST: API endpoint hit successfully")

        self._send_json(200, {
            'message': 'API is working!',
            'timestamp': utc_timestamp(),
            'environment': build_basic_environment()
        })

    def do_POST(self):
        """Echo the JSON payload back to the caller"""
        print("🧪 BASIC TEST: POST endpoint hit")

        try:
            content_length = int(self.headers.get('Content-Length', 0))
            post_data = self.rfile.read(content_length)
            data = json.loads(post_data.decode('utf-8'))
            print(f"🧪 BASIC TEST: Request body: {data}")

            self._send_json(200, {
                'message': 'POST request successful!',
                'receivedData': data,
                'timestamp': utc_timestamp()
            })

        except Exception as e:
            print(f"🧪 BASIC TEST: Error: {e}")
            self._send_json(500, {
                'error': 'Test failed',
                'details': str(e)
            })
