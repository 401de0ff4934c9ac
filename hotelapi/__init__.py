"""Django project package for the hotels API."""
