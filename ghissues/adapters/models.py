"""Pydantic models for issues API payloads."""

from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, model_validator

Label: TypeAlias = str


class _Base(BaseModel):
    """Shared config: immutable records, no type coercion, unknown fields ignored.

    Every field has a zero-value default, so a JSON ``null`` is dropped before
    validation and the field keeps that default.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Issue(_Base):
    number: int = 0
    title: str = ""
    body: str = ""
    state: str = ""
    user: str = ""
    gravatar_id: str = ""
    votes: int = 0
    comments: int = 0
    # Ordering hint within a list, sent as a float by the server.
    position: float = 0.0
    created_at: str = ""
    updated_at: str = ""
    html_url: str = ""
    labels: tuple[Label, ...] = ()


class Comment(_Base):
    id: int = 0
    body: str = ""
    user: str = ""
    gravatar_id: str = ""
    created_at: str = ""
    updated_at: str = ""


class PullRequest(_Base):
    """An issue with pull-request URLs attached.

    Not returned by any IssuesClient operation yet: the pull request endpoints
    are not wrapped.
    """

    issue: Issue = Field(default_factory=Issue)
    pull_request_url: str = ""
    html_url: str = ""
    patch_url: str = ""
