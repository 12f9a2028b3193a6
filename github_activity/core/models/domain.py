from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

UNKNOWN_REPOSITORY = "unknown repository"
UNKNOWN_MEMBER = "unknown user"
DEFAULT_ISSUE_ACTION = "updated"
DEFAULT_REF_TYPE = "resource"


def _string_keys(value: Mapping[Any, Any]) -> Dict[str, Any]:
    # JSON objects only have string keys; anything else cannot be a field
    return {key: item for key, item in value.items() if isinstance(key, str)}


class EventKind(str, Enum):
    """
    Event kinds with a dedicated display rule.
    Any other `type` is OTHER and goes through the generic rule.
    """
    PUSH = "PushEvent"
    ISSUES = "IssuesEvent"
    WATCH = "WatchEvent"
    CREATE = "CreateEvent"
    MEMBER = "MemberEvent"
    PUBLIC = "PublicEvent"
    OTHER = "Other"

    @classmethod
    def from_type(cls, type_name: str) -> "EventKind":
        try:
            return cls(type_name)
        except ValueError:
            return cls.OTHER


class EventRepo(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _drop_non_string_name(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


class ActivityEvent(BaseModel):
    """
    One record of the GitHub events API.

    Only `type`, `repo` and `payload` are read. Everything else the API sends
    (id, actor, created_at...) is kept as extra data and ignored.
    Sub-fields are read through the accessors below, each of which returns a
    fixed fallback instead of failing when the field is absent.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = ""
    repo: Optional[EventRepo] = None
    payload: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("repo", mode="before")
    @classmethod
    def _drop_malformed_repo(cls, value: Any) -> Any:
        if isinstance(value, EventRepo):
            return value
        return _string_keys(value) if isinstance(value, Mapping) else None

    @field_validator("payload", mode="before")
    @classmethod
    def _drop_malformed_payload(cls, value: Any) -> Dict[str, Any]:
        return _string_keys(value) if isinstance(value, Mapping) else {}

    @classmethod
    def from_raw(cls, record: Union["ActivityEvent", Mapping[str, Any]]) -> "ActivityEvent":
        if isinstance(record, cls):
            return record
        return cls.model_validate(_string_keys(record))

    @property
    def kind(self) -> EventKind:
        return EventKind.from_type(self.type)

    @property
    def repo_name(self) -> str:
        if self.repo is not None and self.repo.name:
            return self.repo.name
        return UNKNOWN_REPOSITORY

    def commit_count(self) -> int:
        commits = self.payload.get("commits")
        if isinstance(commits, Sequence) and not isinstance(commits, (str, bytes)):
            return len(commits)
        return 0

    def issue_action(self, default: str = DEFAULT_ISSUE_ACTION) -> str:
        action = self.payload.get("action")
        return action if isinstance(action, str) and action else default

    def ref_type(self, default: str = DEFAULT_REF_TYPE) -> str:
        ref_type = self.payload.get("ref_type")
        return ref_type if isinstance(ref_type, str) and ref_type else default

    def member_login(self, default: str = UNKNOWN_MEMBER) -> str:
        member = self.payload.get("member")
        if isinstance(member, Mapping):
            login = member.get("login")
            if isinstance(login, str) and login:
                return login
        return default
