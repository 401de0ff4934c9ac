"""
Hotel resource views.

``/hotels`` lists and creates hotels; ``/hotels/<id>`` reads, updates
and deletes a single one.  Every response is a JSON envelope
``{message, data}``; validation failures return ``{message}`` alone.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

from hotels.serializers.hotel import HotelSerializer, HotelWriteSerializer, first_error
from hotels.services import hotels as svc

NOT_FOUND_MESSAGE = 'Hotel with id {id} is not found or has not been created'


def _not_found(hotel_id) -> Response:
    return Response(
        {'message': NOT_FOUND_MESSAGE.format(id=hotel_id), 'data': {}},
        status=status.HTTP_404_NOT_FOUND,
    )


def _validate(request):
    ser = HotelWriteSerializer(data=request.data)
    if not ser.is_valid():
        return None, Response({'message': first_error(ser.errors)}, status=status.HTTP_400_BAD_REQUEST)
    return ser.validated_data, None


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def hotels_list(request):
    """GET lists every hotel; POST creates one from ``name`` and ``address``."""
    if request.method == 'GET':
        return index(request)
    return store(request)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([AllowAny])
def hotel_detail(request, pk: int):
    if request.method == 'GET':
        return show(request, pk)
    if request.method in ('PUT', 'PATCH'):
        return update(request, pk)
    return destroy(request, pk)


def index(request) -> Response:
    data = HotelSerializer(svc.list_hotels(), many=True).data
    return Response({'message': 'Hotel has been listed successfully.', 'data': data}, status=status.HTTP_200_OK)


def store(request) -> Response:
    payload, error = _validate(request)
    if error is not None:
        return error
    hotel = svc.create_hotel(name=payload['name'], address=payload['address'])
    return Response(
        {'message': 'Hotel has been created successfully.', 'data': HotelSerializer(hotel).data},
        status=status.HTTP_201_CREATED,
    )


def show(request, pk: int) -> Response:
    hotel = svc.find_hotel(pk)
    if hotel is None:
        return _not_found(pk)
    return Response({'message': 'Hotel has been fetched successfully.', 'data': HotelSerializer(hotel).data})


def update(request, pk: int) -> Response:
    # no partial updates: PATCH must carry both fields as well
    payload, error = _validate(request)
    if error is not None:
        return error
    hotel = svc.find_hotel(pk)
    if hotel is None:
        return _not_found(pk)
    hotel = svc.update_hotel(hotel, name=payload['name'], address=payload['address'])
    return Response({'message': 'Hotel has been updated successfully.', 'data': HotelSerializer(hotel).data})


def destroy(request, pk: int) -> Response:
    hotel = svc.find_hotel(pk)
    if hotel is None:
        return _not_found(pk)
    data = HotelSerializer(hotel).data
    svc.delete_hotel(hotel)
    return Response({'message': f'Hotel with id {pk} has been deleted successfully.', 'data': data})
