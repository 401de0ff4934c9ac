"""
Management command to populate the database with sample hotels.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from hotels.models import Hotel

SAMPLE_HOTELS = [
    ("Grand Plaza", "12 Market Street, Springfield"),
    ("Harbor View Inn", "4 Quay Road, Port Ellis"),
    ("Maple Lodge", "77 Forest Lane, Cedar Falls"),
    ("City Central Hotel", "1 Station Square, Riverton"),
    ("Sunset Resort", "300 Ocean Drive, Bay Point"),
    ("Mountain Rest", "9 Summit Way, Highridge"),
]


class Command(BaseCommand):
    help = "Insert sample hotels (idempotent by name)."

    def add_arguments(self, parser):
        parser.add_argument('--count', type=int, default=len(SAMPLE_HOTELS),
                            help='How many sample hotels to ensure (max %d).' % len(SAMPLE_HOTELS))
        parser.add_argument('--flush', action='store_true', help='Delete every hotel first.')

    def handle(self, *args, **opts):
        count = max(0, min(opts['count'], len(SAMPLE_HOTELS)))
        with transaction.atomic():
            if opts['flush']:
                deleted, _ = Hotel.objects.all().delete()
                self.stdout.write(f"deleted {deleted} hotels")
            created_total = 0
            for name, address in SAMPLE_HOTELS[:count]:
                _, created = Hotel.objects.get_or_create(name=name, defaults={'address': address})
                if created:
                    created_total += 1
        self.stdout.write(self.style.SUCCESS(f"Created {created_total} hotels ({count} ensured)."))
