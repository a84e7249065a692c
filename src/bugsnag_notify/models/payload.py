"""
Event ingestion schema — payload version 5.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_serializer


class NotifierInfo(BaseModel):
    name: str
    version: str
    url: str


class ExceptionInfo(BaseModel):
    error_class: str = Field(serialization_alias="errorClass")
    stacktrace: list[dict[str, Any]] = []  # no frames are ever captured


class AppInfo(BaseModel):
    version: str
    release_stage: str = Field(serialization_alias="releaseStage")
    type: str


class UserInfo(BaseModel):
    id: str
    name: str
    email: str


class EventInfo(BaseModel):
    exceptions: list[ExceptionInfo]
    context: str
    severity: str
    meta_data: dict[str, Any] = Field(serialization_alias="metaData")
    app: AppInfo
    user: Optional[UserInfo] = None

    @model_serializer(mode="wrap")
    def _omit_anonymous_user(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        if self.user is None:
            data.pop("user", None)
        return data


class EventPayload(BaseModel):
    payload_version: str = Field(serialization_alias="payloadVersion")
    notifier: NotifierInfo
    events: list[EventInfo]
