"""Tests for the create and update request shapes."""

import pytest
from pydantic import ValidationError

from bookstore.schemas.author import CreateAuthorInput, UpdateAuthorInput
from bookstore.schemas.base import format_validation_errors
from bookstore.schemas.country import CreateCountryInput, UpdateCountryInput


class TestCreateAuthorInput:
    def test_valid(self):
        data = CreateAuthorInput.model_validate(
            {"country_id": 1, "author": "Jane Doe", "city": "Jakarta"}
        )

        assert data.model_dump() == {
            "country_id": 1,
            "author": "Jane Doe",
            "city": "Jakarta",
        }

    def test_empty_body_lists_every_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateAuthorInput.model_validate({})

        message = format_validation_errors(exc_info.value)
        assert "country_id: Field required" in message
        assert "author: Field required" in message
        assert "city: Field required" in message

    @pytest.mark.parametrize(
        "field, value",
        [
            ("author", "Jo"),
            ("author", "x" * 51),
            ("city", ""),
            ("country_id", 0),
            ("country_id", 256),
        ],
    )
    def test_out_of_bounds(self, field, value):
        payload = {"country_id": 1, "author": "Jane Doe", "city": "Jakarta"}
        payload[field] = value

        with pytest.raises(ValidationError) as exc_info:
            CreateAuthorInput.model_validate(payload)

        assert exc_info.value.errors()[0]["loc"] == (field,)

    @pytest.mark.parametrize("value", ["1", True, 1.0])
    def test_country_id_must_be_a_json_integer(self, value):
        with pytest.raises(ValidationError) as exc_info:
            CreateAuthorInput.model_validate(
                {"country_id": value, "author": "Jane Doe", "city": "Jakarta"}
            )

        assert exc_info.value.errors()[0]["loc"] == ("country_id",)


class TestUpdateAuthorInput:
    def test_changes_contain_only_supplied_fields(self):
        data = UpdateAuthorInput.model_validate({"id": 4, "city": "Bandung"})

        assert data.changes() == {"city": "Bandung"}

    def test_id_is_required(self):
        with pytest.raises(ValidationError):
            UpdateAuthorInput.model_validate({"city": "Bandung"})

    def test_supplied_empty_string_is_rejected(self):
        """A present field is validated like on create, never ignored."""
        with pytest.raises(ValidationError):
            UpdateAuthorInput.model_validate({"id": 4, "author": ""})

    def test_supplied_null_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            UpdateAuthorInput.model_validate({"id": 4, "city": None})

        assert "may not be null" in format_validation_errors(exc_info.value)

    def test_id_range(self):
        with pytest.raises(ValidationError):
            UpdateAuthorInput.model_validate({"id": 65536})

    def test_supplied_country_id_is_strict(self):
        with pytest.raises(ValidationError) as exc_info:
            UpdateAuthorInput.model_validate({"id": 4, "country_id": "2"})

        assert exc_info.value.errors()[0]["loc"] == ("country_id",)


class TestCountryInputs:
    def test_create_requires_three_letter_iso3(self):
        payload = {
            "iso3": "ID",
            "country": "Indonesia",
            "nice_country": "Indonesia",
            "currency": "IDR",
        }

        with pytest.raises(ValidationError) as exc_info:
            CreateCountryInput.model_validate(payload)

        assert format_validation_errors(exc_info.value).startswith("iso3: ")

    def test_update_changes(self):
        data = UpdateCountryInput.model_validate(
            {"id": 2, "currency": "EUR", "nice_country": "France"}
        )

        assert data.changes() == {"currency": "EUR", "nice_country": "France"}

    def test_update_id_range(self):
        with pytest.raises(ValidationError):
            UpdateCountryInput.model_validate({"id": 256})


def test_format_validation_errors_joins_pairs():
    with pytest.raises(ValidationError) as exc_info:
        CreateAuthorInput.model_validate(
            {"country_id": 1, "author": "Jo", "city": "Jakarta"}
        )

    assert format_validation_errors(exc_info.value) == (
        "author: String should have at least 3 characters"
    )
