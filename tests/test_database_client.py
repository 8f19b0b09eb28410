#!/usr/bin/env python3
"""
Tests for the Supabase client and /api/test/supabase endpoint
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest
import requests

import database_client
from database_client import DatabaseClient

class FakeQuery:
    def __init__(self, rows):
        self.rows = rows
        self.calls = []

    def table(self, name):
        self.calls.append(('table', name))
        return self

    def select(self, columns):
        self.calls.append(('select', columns))
        return self

    def order(self, column, desc=False):
        self.calls.append(('order', column, desc))
        return self

    def execute(self):
        return type('Result', (), {'data': self.rows})()

def test_requires_configuration():
    with pytest.raises(ValueError):
        DatabaseClient()

def test_get_clients_newest_first():
    fake = FakeQuery([{'id': 2, 'name': 'Acme'}, {'id': 1, 'name': 'Globex'}])

    clients = DatabaseClient(client=fake).get_clients()

    assert [c['id'] for c in clients] == [2, 1]
    assert fake.calls == [('table', 'clients'), ('select', '*'), ('order', 'created_at', True)]

def test_falls_back_to_plain_supabase_vars(monkeypatch):
    created = {}

    def fake_create_client(url, key):
        created.update(url=url, key=key)
        return FakeQuery([])

    monkeypatch.setenv('SUPABASE_URL', 'https://demo.supabase.co')
    monkeypatch.setenv('SUPABASE_ANON_KEY', 'anon-key')
    monkeypatch.setattr(database_client, 'create_client', fake_create_client)

    DatabaseClient()

    assert created == {'url': 'https://demo.supabase.co', 'key': 'anon-key'}

def test_endpoint_success(serve, monkeypatch):
    monkeypatch.setenv('NEXT_PUBLIC_SUPABASE_URL', 'https://demo.supabase.co')
    monkeypatch.setenv('NEXT_PUBLIC_SUPABASE_ANON_KEY', 'anon-key')
    monkeypatch.setattr(database_client, 'create_client', lambda url, key: FakeQuery([]))

    response = requests.get(serve('/api/test/supabase'))

    assert response.status_code == 200
    assert response.json() == {'status': 'connected', 'message': 'Supabase connection successful'}

def test_endpoint_missing_configuration(serve):
    response = requests.get(serve('/api/test/supabase'))
    body = response.json()

    assert response.status_code == 500
    assert response.headers['Access-Control-Allow-Origin'] == '*'
    assert body['status'] == 'error'
    assert body['message'] == 'Supabase connection failed'
    assert 'NEXT_PUBLIC_SUPABASE_URL' in body['error']
