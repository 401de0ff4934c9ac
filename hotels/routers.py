"""
URL mappings for the hotels API.

Trailing slashes are deliberately omitted: the resource lives at
``/hotels`` and ``/hotels/<id>``.
"""
from django.urls import path, include

from .views import health
from .views.hotels import hotels_list, hotel_detail


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),
    # Hotels
    path('hotels', hotels_list, name='hotels-list'),
    path('hotels/<int:pk>', hotel_detail, name='hotels-detail'),
]
