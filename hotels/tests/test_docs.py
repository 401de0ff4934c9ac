import pytest
from django.test import Client

pytestmark = pytest.mark.django_db


def test_openapi_schema_lists_hotel_routes():
    r = Client().get('/swagger/?format=openapi')
    assert r.status_code == 200
    schema = r.json()
    routes = [schema.get('basePath', '').rstrip('/') + p for p in schema['paths']]
    assert any(p.rstrip('/').endswith('hotels') for p in routes)
    assert any(p.endswith('{pk}') for p in routes)


def test_swagger_ui_renders():
    r = Client().get('/swagger/')
    assert r.status_code == 200
    assert b'swagger' in r.content.lower()


def test_redoc_renders():
    r = Client().get('/redoc/')
    assert r.status_code == 200
    assert b'redoc' in r.content.lower()


def test_admin_login_renders():
    r = Client().get('/admin/login/')
    assert r.status_code == 200
    assert b'/static/admin/' in r.content


def test_metrics_exposed():
    Client().get('/hotels')
    r = Client().get('/metrics')
    assert r.status_code == 200
    assert b'django_http_requests' in r.content
