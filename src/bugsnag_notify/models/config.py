"""
Notifier configuration — built once, threaded to every notify call.
"""

from typing import Any, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from bugsnag_notify.errors import ConfigurationError


class User(BaseModel):
    """Identity of the current end user. Fields are opaque and passed through verbatim."""
    model_config = ConfigDict(frozen=True)

    id: str
    username: str = Field(validation_alias=AliasChoices("username", "name"))
    email: str


class Configuration(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token: str = Field(repr=False, validation_alias=AliasChoices("token", "apiKey", "api_key"))
    code_version: str = Field(validation_alias=AliasChoices("code_version", "codeVersion"))
    context: str
    release_stage: str = Field(validation_alias=AliasChoices("release_stage", "releaseStage"))
    notify_release_stages: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("notify_release_stages", "notifyReleaseStages"),
    )
    user: Optional[User] = None

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _invalid(e) from e

    @field_validator("notify_release_stages", mode="after")
    @classmethod
    def _dedupe_stages(cls, stages: tuple[str, ...]) -> tuple[str, ...]:
        # ordered set: keep first occurrence
        return tuple(dict.fromkeys(stages))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Configuration":
        """Validate a loose mapping (snake_case or camelCase keys)."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise _invalid(e) from e


def _invalid(e: ValidationError) -> ConfigurationError:
    fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
    return ConfigurationError(f"Invalid configuration: {', '.join(fields)}", details={"fields": fields})
