"""Tests for the conditional validation predicates."""

from pydantic import BaseModel, model_validator
import pytest

from dtokit import (
    UNDEFINED,
    DtoValidationError,
    is_falsy,
    is_not_null,
    is_not_undefined,
    is_null,
    is_truthy,
    is_undefined,
    to_dto,
)


class PaymentDto(BaseModel):
    method: str
    card_number: str | None = None

    @model_validator(mode="after")
    def check_card(self):
        if is_not_null(self, self.card_number) and len(self.card_number) != 16:
            raise ValueError("card_number must have 16 digits")
        return self


class TestPredicates:
    """Test each predicate on the values they distinguish."""

    @pytest.mark.parametrize("value", [1, "x", [0], True])
    def test_truthy_values(self, value):
        assert is_truthy(None, value)
        assert not is_falsy(None, value)

    @pytest.mark.parametrize("value", [0, "", [], None, UNDEFINED, False])
    def test_falsy_values(self, value):
        assert is_falsy(None, value)
        assert not is_truthy(None, value)

    def test_null_is_not_undefined(self):
        assert is_null({}, None)
        assert not is_null({}, UNDEFINED)
        assert is_not_undefined({}, None)

    def test_undefined(self):
        assert is_undefined({}, UNDEFINED)
        assert not is_undefined({}, None)
        assert not is_not_undefined({}, UNDEFINED)
        assert is_not_null({}, UNDEFINED)


class TestConditionalValidation:
    """Test predicates driving a model validator."""

    def test_check_skipped_when_null(self):
        payment = to_dto(PaymentDto, {"method": "cash"}, validate=True)

        assert payment.card_number is None

    def test_check_applied_when_present(self):
        with pytest.raises(DtoValidationError) as exc_info:
            to_dto(PaymentDto, {"method": "card", "card_number": "123"}, validate=True)

        assert "16 digits" in exc_info.value.errors[0].message
