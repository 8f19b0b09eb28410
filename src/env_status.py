#!/usr/bin/env python3
"""
Environment Status Checks
Builds the diagnostic payloads reported by the debug endpoints
"""

import os
from typing import Dict, Any, Mapping, Optional

SET = 'SET'
NOT_SET = 'NOT SET'
MISSING = 'MISSING'
PREFIX_LENGTH = 6


def presence_flag(value: Optional[str]) -> str:
    """Return SET for a non-empty value, NOT SET otherwise"""
    return SET if value else NOT_SET


def value_prefix(value: Optional[str], length: int = PREFIX_LENGTH) -> str:
    """
    Return the first `length` characters of a value.

    Values shorter than `length` come back whole; an absent or empty
    value comes back as MISSING.
    """
    return value[:length] if value else MISSING


def build_env_status(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Build the /api/debug/env payload from the process environment"""
    if environ is None:
        environ = os.environ

    token = environ.get('AIRTABLE_TOKEN')
    base_id = environ.get('AIRTABLE_BASE_ID')

    status = {
        'airtableToken': presence_flag(token),
        'airtableBaseId': presence_flag(base_id),
        'claudeKey': presence_flag(environ.get('ANTHROPIC_API_KEY')),
    }

    # An unset NODE_ENV leaves the key out of the JSON body
    node_env = environ.get('NODE_ENV')
    if node_env is not None:
        status['nodeEnv'] = node_env

    # Don't expose actual values, just short prefixes
    status['tokenPrefix'] = value_prefix(token)
    status['baseIdPrefix'] = value_prefix(base_id)
    return status


def build_basic_environment(environ: Optional[Mapping[str, str]] = None) -> Dict[str, bool]:
    """Booleans for the services the basic test endpoint reports on"""
    if environ is None:
        environ = os.environ

    return {
        'hasSupabaseUrl': bool(environ.get('NEXT_PUBLIC_SUPABASE_URL')),
        'hasSupabaseKey': bool(environ.get('NEXT_PUBLIC_SUPABASE_ANON_KEY')),
        'hasServiceKey': bool(environ.get('SUPABASE_SERVICE_ROLE_KEY')),
        'hasClaudeKey': bool(environ.get('ANTHROPIC_API_KEY')),
    }
