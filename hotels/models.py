"""
Database models for the hotels API.

A single entity is stored: :class:`Hotel`, a name and an address plus
the creation and modification timestamps maintained by the ORM.
"""
from __future__ import annotations

from django.db import models


class Hotel(models.Model):
    """A hotel record in the ``hotels`` table.

    ``id`` is the auto-increment primary key generated by the database.
    ``created_at`` is set on insert and ``updated_at`` on every save.
    """
    name = models.CharField(max_length=255)
    address = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'hotels'
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
