"""
Unit tests for the error taxonomy.
"""
import pytest

from tournament_api.errors import (
    AccessDenied,
    AccountNotFound,
    CredentialMismatch,
    InvalidToken,
    MissingToken,
    StoreError,
    ValidationError,
    require_fields,
)


class TestStatusCodes:

    @pytest.mark.parametrize('error_class,status', [
        (ValidationError, 400),
        (MissingToken, 401),
        (InvalidToken, 403),
        (AccessDenied, 403),
        (AccountNotFound, 404),
        (CredentialMismatch, 401),
        (StoreError, 500),
    ])
    def test_status(self, error_class, status):
        assert error_class('x').status_code == status


class TestToDict:

    def test_message_only(self):
        assert ValidationError('falta').to_dict() == {'message': 'falta'}

    def test_detail_included(self):
        body = StoreError('Error en el servidor', detail='boom').to_dict()
        assert body == {'message': 'Error en el servidor', 'error': 'boom'}

    def test_detail_hidden(self):
        body = StoreError('Error en el servidor', detail='boom').to_dict(expose_detail=False)
        assert body == {'message': 'Error en el servidor'}


class TestRequireFields:

    def test_all_present(self):
        require_fields({'a': 'x', 'b': 1}, ('a', 'b'), 'missing')

    def test_missing_field(self):
        with pytest.raises(ValidationError) as exc:
            require_fields({'a': 'x'}, ('a', 'b'), 'missing')
        assert exc.value.message == 'missing'

    def test_empty_values_count_as_missing(self):
        for empty in ('', None, 0):
            with pytest.raises(ValidationError):
                require_fields({'a': empty}, ('a',), 'missing')

    def test_non_object_body_counts_as_missing(self):
        for body in ([1, 2], 'ana', 42, None):
            with pytest.raises(ValidationError):
                require_fields(body, ('a',), 'missing')
