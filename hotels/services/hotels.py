import logging
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet

from hotels.models import Hotel

logger = logging.getLogger(__name__)


def list_hotels() -> QuerySet:
    return Hotel.objects.all().order_by('id')


def find_hotel(hotel_id) -> Optional[Hotel]:
    """Return the hotel with ``hotel_id`` or ``None`` when there is none."""
    return Hotel.objects.filter(pk=hotel_id).first()


def create_hotel(*, name: str, address: str) -> Hotel:
    with transaction.atomic():
        hotel = Hotel.objects.create(name=name, address=address)
    logger.info("hotel created id=%s", hotel.id)
    return hotel


def update_hotel(hotel: Hotel, *, name: str, address: str) -> Hotel:
    """Overwrite both fields of ``hotel`` and persist it."""
    with transaction.atomic():
        hotel.name = name
        hotel.address = address
        hotel.save(update_fields=['name', 'address', 'updated_at'])
    logger.info("hotel updated id=%s", hotel.id)
    return hotel


def delete_hotel(hotel: Hotel) -> int:
    """Delete ``hotel`` and return the id it had.

    Django clears ``hotel.pk`` after the delete, so callers that need the
    former values must read them first.
    """
    hotel_id = hotel.id
    with transaction.atomic():
        hotel.delete()
    logger.info("hotel deleted id=%s", hotel_id)
    return hotel_id
