#!/usr/bin/env python3
"""
Airtable API Client
Connection checks against the campaign base
"""

import os
import requests
from typing import Dict, Any

class AirtableClient:
    """Client for the Airtable REST API"""

    API_URL = 'https://api.airtable.com/v0'
    TABLE_NAME = 'Retention'
    TIMEOUT = 10

    def __init__(self):
        self.token = os.getenv('AIRTABLE_TOKEN')
        self.base_id = os.getenv('AIRTABLE_BASE_ID')

        if not self.token or not self.base_id:
            raise ValueError("Missing Airtable configuration. Please set AIRTABLE_TOKEN and AIRTABLE_BASE_ID environment variables.")

        self.base_url = f"{self.API_URL}/{self.base_id}"
        self.headers = {
            'Authorization': f"Bearer {self.token}",
            'Content-Type': 'application/json'
        }

    def test_connection(self) -> Dict[str, Any]:
        """Fetch a single record to confirm the token can read the base"""
        print("🧪 AIRTABLE: Testing connection...")

        try:
            response = requests.get(
                f"{self.base_url}/{self.TABLE_NAME}",
                headers=self.headers,
                params={'maxRecords': 1},
                timeout=self.TIMEOUT
            )

            if not response.ok:
                print(f"❌ AIRTABLE: Test connection failed: {response.text}")
                return {
                    'success': False,
                    'message': f"Connection failed: {response.status_code} {response.reason}",
                    'data': {'error': response.text}
                }

            data = response.json()
            records = data.get('records') or []
            print("✅ AIRTABLE: Connection successful")

            return {
                'success': True,
                'message': f"Connected successfully! Found {len(records)} records.",
                'data': data
            }

        except requests.RequestException as e:
            print(f"❌ AIRTABLE: Test connection error: {e}")
            return {
                'success': False,
                'message': f"Connection error: {e}",
                'data': {'error': str(e)}
            }
