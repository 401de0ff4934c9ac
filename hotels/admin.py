"""
Django admin registration for the hotel model.

Registering :class:`Hotel` lets superusers inspect and edit records
via the ``/admin/`` URL during development.
"""

from django.contrib import admin

from .models import Hotel


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'address', 'created_at', 'updated_at')
    search_fields = ('name', 'address')
    readonly_fields = ('created_at', 'updated_at')
