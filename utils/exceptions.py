# ==================== UTILS/EXCEPTIONS.PY ====================
from rest_framework.exceptions import APIException
from rest_framework import status


class PricingNotConfigured(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'No pricing tier configured for this property.'
    default_code = 'pricing_not_configured'


class InvalidBookingWindow(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Booking end time must not be before its start time.'
    default_code = 'invalid_booking_window'
