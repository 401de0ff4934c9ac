import pytest
from io import StringIO

from django.core.management import call_command
from django.db import connection
from rest_framework.test import APIClient

from hotels.models import Hotel
from hotels.serializers.hotel import first_error
from hotels.services import hotels as svc

pytestmark = pytest.mark.django_db


def test_create_and_find_hotel():
    hotel = svc.create_hotel(name='Grand Plaza', address='12 Market Street')
    assert hotel.id is not None
    assert hotel.created_at is not None and hotel.updated_at is not None
    assert svc.find_hotel(hotel.id) == hotel


def test_find_hotel_returns_none_when_absent():
    assert svc.find_hotel(12345) is None


def test_update_hotel_touches_updated_at():
    hotel = svc.create_hotel(name='Old', address='Old Road')
    before = hotel.updated_at
    svc.update_hotel(hotel, name='New', address='New Road')
    hotel.refresh_from_db()
    assert (hotel.name, hotel.address) == ('New', 'New Road')
    assert hotel.updated_at >= before


def test_delete_hotel_returns_former_id():
    hotel = svc.create_hotel(name='Gone', address='Nowhere')
    hotel_id = hotel.id
    assert svc.delete_hotel(hotel) == hotel_id
    assert not Hotel.objects.filter(pk=hotel_id).exists()
    assert list(svc.list_hotels()) == []


def test_list_hotels_orders_by_id():
    a = svc.create_hotel(name='A', address='a')
    b = svc.create_hotel(name='B', address='b')
    assert [h.id for h in svc.list_hotels()] == [a.id, b.id]


def test_first_error_walks_nested_structures():
    assert first_error({'name': ['name is required'], 'address': ['address is required']}) == 'name is required'
    assert first_error({'non_field_errors': [], 'address': ['bad']}) == 'bad'
    assert first_error([]) == ''


def test_seed_hotels_is_idempotent():
    out = StringIO()
    call_command('seed_hotels', stdout=out)
    call_command('seed_hotels', stdout=out)
    assert Hotel.objects.count() == 6
    assert 'Created 0 hotels' in out.getvalue()


def test_seed_hotels_flush_and_count():
    svc.create_hotel(name='Custom', address='Somewhere')
    call_command('seed_hotels', '--flush', '--count', '2', stdout=StringIO())
    assert list(Hotel.objects.values_list('name', flat=True)) == ['Grand Plaza', 'Harbor View Inn']


def test_healthz_reports_database():
    r = APIClient().get('/healthz')
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': True, 'hotels_table': True}


def test_hotels_table_columns():
    with connection.cursor() as cursor:
        columns = [c.name for c in connection.introspection.get_table_description(cursor, 'hotels')]
    assert columns == ['id', 'name', 'address', 'created_at', 'updated_at']


@pytest.mark.django_db(transaction=True)
def test_migration_is_reversible():
    call_command('migrate', 'hotels', 'zero', verbosity=0)
    assert 'hotels' not in connection.introspection.table_names()
    call_command('migrate', 'hotels', verbosity=0)
    assert 'hotels' in connection.introspection.table_names()


@pytest.mark.django_db(transaction=True)
def test_healthz_reports_missing_hotels_table():
    call_command('migrate', 'hotels', 'zero', verbosity=0)
    try:
        r = APIClient().get('/healthz')
        assert r.status_code == 503
        assert r.json() == {'ok': False, 'db': True, 'hotels_table': False}
    finally:
        call_command('migrate', 'hotels', verbosity=0)
