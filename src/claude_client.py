#!/usr/bin/env python3
"""
Anthropic Messages API Client
"""

import os
import anthropic
from typing import Dict, Any, Optional

class ClaudeClient:
    """Thin wrapper around the Anthropic SDK for connection checks"""

    DEFAULT_MODEL = 'claude-3-5-sonnet-20241022'
    TIMEOUT = 30

    def __init__(self, api_key: Optional[str] = None, client: Optional[anthropic.Anthropic] = None):
        self.model = os.getenv('CLAUDE_MODEL', self.DEFAULT_MODEL)

        if client is not None:
            self.client = client
            return

        self.api_key = api_key or os.getenv('ANTHROPIC_API_KEY')
        if not self.api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable is required")

        self.client = anthropic.Anthropic(api_key=self.api_key, timeout=self.TIMEOUT)

    def create_message(self, prompt: str, max_tokens: int = 300):
        """Send a single user message and return the SDK message"""
        return self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            messages=[{'role': 'user', 'content': prompt}]
        )

    def test_connection(self) -> Dict[str, Any]:
        """Round-trip a tiny prompt to confirm the key works"""
        message = self.create_message(
            'Test connection - respond with "Connection successful"',
            max_tokens=50
        )

        first = message.content[0] if message.content else None
        if first is not None and first.type == 'text':
            test_response = first.text
        else:
            test_response = 'Response received'

        return {
            'status': 'connected',
            'message': 'Claude AI connection successful',
            'test_response': test_response
        }
