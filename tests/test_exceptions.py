"""
Error handler: every failure becomes {"error": message, ...}.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from rest_framework import exceptions as drf_exceptions

from electgo.exceptions import (
    InsufficientStock,
    Misconfigured,
    NotFound,
    SendFailure,
    _first_message,
    api_exception_handler,
)

CONTEXT = {'view': None}


class TestErrorTaxonomy:

    def test_status_codes(self):
        assert NotFound().status_code == 404
        assert InsufficientStock(1, 2).status_code == 400
        assert Misconfigured().status_code == 500
        assert SendFailure().status_code == 502

    def test_default_and_custom_messages(self):
        assert NotFound().message == "Record not found"
        assert NotFound("Sale not found").message == "Sale not found"


class TestExceptionHandler:

    def test_domain_error(self):
        response = api_exception_handler(NotFound("Sale not found"), CONTEXT)

        assert response.status_code == 404
        assert response.data == {'error': "Sale not found"}

    def test_insufficient_stock_payload(self):
        response = api_exception_handler(InsufficientStock(available=2, requested=5), CONTEXT)

        assert response.data == {
            'error': "Insufficient inventory. Available: 2, Requested: 5",
            'available': 2,
            'requested': 5,
        }

    def test_django_validation_error(self):
        response = api_exception_handler(DjangoValidationError("Quantity must be positive"), CONTEXT)

        assert response.status_code == 400
        assert response.data == {'error': "Quantity must be positive", 'details': ["Quantity must be positive"]}

    def test_drf_validation_error(self):
        exc = drf_exceptions.ValidationError({'price': ["Ensure this value is greater than or equal to 0.01."]})

        response = api_exception_handler(exc, CONTEXT)

        assert response.status_code == 400
        assert response.data['error'] == "price: Ensure this value is greater than or equal to 0.01."
        assert 'price' in response.data['details']

    def test_database_error(self):
        response = api_exception_handler(DatabaseError("disk I/O error"), CONTEXT)

        assert response.status_code == 500
        assert response.data == {'error': "Database operation failed"}

    def test_method_not_allowed(self):
        response = api_exception_handler(drf_exceptions.MethodNotAllowed('PATCH'), CONTEXT)

        assert response.status_code == 405
        assert response.data == {'error': 'Method "PATCH" not allowed.'}

    def test_unexpected_error(self):
        response = api_exception_handler(RuntimeError("boom"), CONTEXT)

        assert response.status_code == 500
        assert response.data == {'error': "Internal server error"}


class TestFirstMessage:

    def test_nested_list_errors(self):
        detail = {'alerts': [{'itemName': ["This field is required."]}]}

        assert _first_message(detail) == "alerts: itemName: This field is required."

    def test_skips_valid_entries_in_many_lists(self):
        detail = {'alerts': [{}, {'itemName': ["This field is required."]}]}

        assert _first_message(detail) == "alerts: itemName: This field is required."

    def test_index_keyed_list_errors(self):
        detail = {'alerts': {1: {'itemName': ["This field is required."]}}}

        assert _first_message(detail) == "alerts: 1: itemName: This field is required."

    def test_empty_detail(self):
        assert _first_message({'alerts': [{}, {}]}) == ''

    def test_plain_string(self):
        assert _first_message("nope") == "nope"
