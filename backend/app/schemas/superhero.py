"""Superhero Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - JSON keys are camelCase (imageUrl, powerLevel, isActive, ...); Python attributes are snake_case
    - SuperheroCreate: name, alias, powers, city, powerLevel required; unknown keys rejected
    - powers accepted as a list or a comma-separated string; always a non-empty list after validation
    - powerLevel bounded 1–10 before anything reaches the store
    - SuperheroUpdate: every field optional; explicit null only for description and imageUrl

Design Decisions:
    - field_validator for side-effect-free transforms (strip, split)
    - imageUrl validated as an http(s) URL but stored exactly as sent
"""

from typing import Any

from pydantic import (
    AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from app.core.domain_types import (
    MAX_POWER_LEVEL, MIN_POWER_LEVEL, POWERS_SEPARATOR,
)
from app.core.hero_fields import clean_powers

_http_url = TypeAdapter(AnyHttpUrl)

# Columns that may be cleared with an explicit null on update
_NULLABLE_FIELDS = frozenset({"description", "image_url"})


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _SuperheroPayload(_CamelModel):
    """Shared validators for create and update payloads."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
    )

    @field_validator("name", "alias", "city", check_fields=False)
    @classmethod
    def strip_required_text(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v

    @field_validator("powers", mode="before", check_fields=False)
    @classmethod
    def parse_powers(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, str):
            v = v.split(POWERS_SEPARATOR)
        elif isinstance(v, (list, tuple)):
            for power in v:
                if not isinstance(power, str):
                    raise ValueError("each power must be a string")
                if POWERS_SEPARATOR in power:
                    raise ValueError("a power cannot contain a comma")
        else:
            raise ValueError("powers must be a list or a comma-separated string")
        powers = clean_powers(v)
        if not powers:
            raise ValueError("at least one power is required")
        return powers

    @field_validator("image_url", check_fields=False)
    @classmethod
    def validate_image_url(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        try:
            _http_url.validate_python(v)
        except ValueError:
            raise ValueError("must be a valid http(s) URL") from None
        return v


class SuperheroCreate(_SuperheroPayload):
    """Superhero creation payload."""
    name: str = Field(max_length=100)
    alias: str = Field(max_length=100)
    powers: list[str]
    city: str = Field(max_length=100)
    description: str | None = None
    image_url: str | None = Field(None, max_length=255)
    power_level: int = Field(ge=MIN_POWER_LEVEL, le=MAX_POWER_LEVEL)
    is_active: bool = True


class SuperheroUpdate(_SuperheroPayload):
    """Partial update payload — only fields present in the body are applied."""
    name: str | None = Field(None, max_length=100)
    alias: str | None = Field(None, max_length=100)
    powers: list[str] | None = None
    city: str | None = Field(None, max_length=100)
    description: str | None = None
    image_url: str | None = Field(None, max_length=255)
    power_level: int | None = Field(None, ge=MIN_POWER_LEVEL, le=MAX_POWER_LEVEL)
    is_active: bool | None = None

    @model_validator(mode="after")
    def reject_null_for_required_columns(self) -> "SuperheroUpdate":
        for name in self.model_fields_set - _NULLABLE_FIELDS:
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields explicitly sent by the client, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class SuperheroResponse(_CamelModel):
    """Client-facing superhero, including derived fields."""
    id: int
    name: str
    alias: str
    powers: list[str]
    city: str
    description: str | None = None
    image_url: str | None = None
    power_level: int
    is_active: bool
    created_at: str
    updated_at: str
    power_count: int
    power_level_description: str


class PaginationInfo(_CamelModel):
    limit: int
    offset: int
    total: int
    has_next: bool
    has_prev: bool


class SuperheroListResponse(_CamelModel):
    """Page of superheroes with the total size of the filtered set."""
    data: list[SuperheroResponse]
    total: int
    pagination: PaginationInfo


class SuperheroStats(_CamelModel):
    total: int
    active: int
    inactive: int
    by_power_level: dict[str, int]
    by_cities: dict[str, int]


class MessageResponse(BaseModel):
    message: str
