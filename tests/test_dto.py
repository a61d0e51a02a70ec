"""Tests for DTO conversion: to_dto, from_dto, to_dto_list, validate_dto."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
import pytest

from dtokit import (
    DtoConversionError,
    DtoValidationError,
    MalformedInputError,
    Transform,
    ValidationResult,
    copy_from,
    default_data,
    empty_string_to_undefined,
    from_dto,
    string_to_array,
    string_to_boolean,
    string_to_integer,
    to_dto,
    to_dto_list,
    validate_dto,
)


class CacheSettings(BaseModel):
    ttl: Annotated[int, Transform(string_to_integer)] = Field(default=60, ge=1)
    enabled: Annotated[bool, Transform(string_to_boolean)] = True


class ServiceSettings(BaseModel):
    name: str = Field(default="service", min_length=1)
    port: Annotated[int, Transform(string_to_integer)] = Field(default=8080, ge=1, le=65535)
    hosts: Annotated[list[str], Transform(string_to_array())] = ["localhost"]
    cache: CacheSettings = Field(default_factory=CacheSettings)


class UserDto(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user_id: int = Field(alias="userId", gt=0)
    email: str = Field(min_length=3)
    nickname: Annotated[str, Transform(copy_from("email", overwrite=False))] = ""
    bio: Annotated[str, Transform(empty_string_to_undefined)] = "n/a"


class TestDefaultData:
    """Test building plain defaults from a model."""

    def test_scalar_and_nested_defaults(self):
        assert default_data(ServiceSettings) == {
            "name": "service",
            "port": 8080,
            "hosts": ["localhost"],
            "cache": {"ttl": 60, "enabled": True},
        }

    def test_required_fields_left_out(self):
        assert default_data(UserDto) == {"nickname": "", "bio": "n/a"}

    def test_defaults_are_fresh_copies(self):
        first = default_data(ServiceSettings)
        first["hosts"].append("other")

        assert default_data(ServiceSettings)["hosts"] == ["localhost"]


class TestToDto:
    """Test plain data to model conversion."""

    def test_transforms_applied(self):
        dto = to_dto(
            ServiceSettings,
            {"port": "9000", "hosts": "a, b", "cache": {"ttl": "5", "enabled": "false"}},
            validate=True,
        )

        assert dto.port == 9000
        assert dto.hosts == ["a", "b"]
        assert dto.cache.ttl == 5
        assert dto.cache.enabled is False

    def test_extraneous_keys_dropped(self):
        dto = to_dto(
            UserDto,
            {"userId": 1, "email": "a@b.c", "password": "secret"},
            validate=True,
        )

        assert not hasattr(dto, "password")
        assert dto.model_dump() == {
            "user_id": 1,
            "email": "a@b.c",
            "nickname": "a@b.c",
            "bio": "n/a",
        }

    def test_nested_extraneous_keys_dropped(self):
        dto = to_dto(ServiceSettings, {"cache": {"ttl": 1, "unknown": True}}, validate=True)

        assert dto.cache.model_dump() == {"ttl": 1, "enabled": True}

    def test_undefined_result_uses_default(self):
        dto = to_dto(UserDto, {"userId": 1, "email": "a@b.c", "bio": ""}, validate=True)

        assert dto.bio == "n/a"

    def test_copy_from_keeps_explicit_value(self):
        dto = to_dto(
            UserDto, {"userId": 1, "email": "a@b.c", "nickname": "neo"}, validate=True
        )

        assert dto.nickname == "neo"

    def test_validation_errors_aggregated(self):
        with pytest.raises(DtoValidationError) as exc_info:
            to_dto(ServiceSettings, {"name": "", "port": "70000", "cache": {"ttl": 0}}, True)

        error = exc_info.value
        fields = [field for field, _ in error.errors]
        assert fields == ["name", "port", "cache.ttl"]
        message = str(error)
        assert message.startswith("DTO ServiceSettings validation failed:\n")
        assert "- name: " in message
        assert "- port: " in message
        assert "- cache.ttl: " in message
        assert len(message.strip().splitlines()) == 4

    def test_missing_required_field_reported(self):
        with pytest.raises(DtoValidationError) as exc_info:
            to_dto(UserDto, {"email": "a@b.c"}, validate=True)

        assert [field for field, _ in exc_info.value.errors] == ["userId"]

    def test_without_validation_constraints_skipped(self):
        dto = to_dto(ServiceSettings, {"port": "70000", "cache": {"ttl": "0"}})

        assert dto.port == 70000
        assert dto.cache.ttl == 0
        assert isinstance(dto.cache, CacheSettings)

    def test_without_validation_defaults_filled(self):
        dto = to_dto(ServiceSettings, {})

        assert dto.name == "service"
        assert dto.cache == CacheSettings()

    def test_validate_options_passed_through(self):
        with pytest.raises(DtoValidationError):
            to_dto(CacheSettings, {"ttl": 5.0}, validate={"strict": True})

        assert to_dto(CacheSettings, {"ttl": 5.0}, validate=True).ttl == 5

    def test_transform_failure(self):
        with pytest.raises(MalformedInputError) as exc_info:
            to_dto(ServiceSettings, {"port": "eighty"}, validate=True)

        assert exc_info.value.field == "port"

    def test_non_mapping_rejected(self):
        with pytest.raises(MalformedInputError, match="expects a mapping"):
            to_dto(ServiceSettings, ["not", "a", "mapping"])


class TestValidateDto:
    """Test the non-raising validation result."""

    def test_ok_result(self):
        result = validate_dto(CacheSettings, {"ttl": 10})

        assert result.ok
        assert result.instance == CacheSettings(ttl=10)
        assert result.raise_for_errors() is result.instance

    def test_failed_result(self):
        result = validate_dto(CacheSettings, {"ttl": 0, "enabled": "maybe"})

        assert not result.ok
        assert result.instance is None
        assert [error.field for error in result.errors] == ["ttl", "enabled"]
        with pytest.raises(DtoValidationError) as exc_info:
            result.raise_for_errors()
        assert exc_info.value.model_name == "CacheSettings"

    def test_result_is_dataclass(self):
        assert isinstance(validate_dto(CacheSettings, {}), ValidationResult)


class TestFromDto:
    """Test model to plain data conversion."""

    def test_dump_by_alias(self):
        dto = UserDto(userId=3, email="x@y.z")

        assert from_dto(dto) == {"userId": 3, "email": "x@y.z", "nickname": "", "bio": "n/a"}

    def test_dump_by_name(self):
        dto = UserDto(userId=3, email="x@y.z")

        assert from_dto(dto, by_alias=False)["user_id"] == 3

    def test_validation_before_dump(self):
        dto = to_dto(CacheSettings, {"ttl": 0})

        assert from_dto(dto) == {"ttl": 0, "enabled": True}
        with pytest.raises(DtoValidationError):
            from_dto(dto, validate=True)


class TestToDtoList:
    """Test list conversion."""

    def test_converts_each_item(self):
        dtos = to_dto_list(CacheSettings, [{"ttl": "1"}, {"ttl": "2"}], validate=True)

        assert [dto.ttl for dto in dtos] == [1, 2]

    def test_error_names_index(self):
        with pytest.raises(DtoConversionError) as exc_info:
            to_dto_list(CacheSettings, [{"ttl": "1"}, {"ttl": "0"}], validate=True)

        assert exc_info.value.index == 1
        assert "Failed to convert CacheSettings[1]" in str(exc_info.value)
        assert isinstance(exc_info.value.original_error, DtoValidationError)
