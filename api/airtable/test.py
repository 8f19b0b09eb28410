#!/usr/bin/env python3
"""
Airtable Connection Test Endpoint
"""

from http.server import BaseHTTPRequestHandler
import json
import os
import sys

# Add src to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from airtable_client import AirtableClient

class handler(BaseHTTPRequestHandler):
    def _send_json(self, status: int, payload: dict):
        self.send_response(status)
        self.send_header('Content-type', 'application/json')
        self.send_header('Access-Control-Allow-Origin', '*')
        self.end_headers()
        self.wfile.write(json.dumps(payload, indent=2).encode())

    def do_GET(self):
        """Run the Airtable connection test"""
        print("🧪 AIRTABLE TEST API: Starting connection test...")

        try:
            airtable = AirtableClient()
            result = airtable.test_connection()

            if result['success']:
                print("✅ AIRTABLE TEST API: Connection successful")
                self._send_json(200, result)
            else:
                print("❌ AIRTABLE TEST API: Connection failed")
                self._send_json(500, result)

        except Exception as e:
            print(f"💥 AIRTABLE TEST API: Unexpected error: {e}")
            self._send_json(500, {
                'success': False,
                'message': str(e),
                'error': type(e).__name__
            })
