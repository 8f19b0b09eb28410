#!/usr/bin/env python3
"""
Database Client for Campaign Copy Diagnostics
Read-only Supabase access used by the connection test
"""

import os
from typing import List, Dict, Optional
from supabase import create_client, Client

class DatabaseClient:
    """Handle Supabase reads for the clients table"""

    def __init__(self, client: Optional[Client] = None):
        if client is not None:
            self.client = client
            return

        self.supabase_url = os.getenv('NEXT_PUBLIC_SUPABASE_URL') or os.getenv('SUPABASE_URL')
        self.supabase_key = os.getenv('NEXT_PUBLIC_SUPABASE_ANON_KEY') or os.getenv('SUPABASE_ANON_KEY')

        if not self.supabase_url or not self.supabase_key:
            raise ValueError("NEXT_PUBLIC_SUPABASE_URL and NEXT_PUBLIC_SUPABASE_ANON_KEY environment variables are required")

        self.client = create_client(self.supabase_url, self.supabase_key)

    def get_clients(self) -> List[Dict]:
        """Get all clients, newest first"""
        result = (self.client.table('clients')
                 .select("*")
                 .order('created_at', desc=True)
                 .execute())
        return result.data
