"""Hotels application.

This package contains the hotel model, its migration, serializers,
storage services, views and route registrations.
"""
