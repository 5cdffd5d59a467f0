"""Envelope variants wrapping issues API responses.

Every response body is a JSON object with a single key naming the payload,
e.g. ``{"issue": {...}}`` or ``{"labels": [...]}``. The key is the only
structural signal, so callers pick the expected shape up front and
``decode`` validates against exactly that variant.
"""

from enum import StrEnum

import pydantic
from pydantic import BaseModel, ConfigDict

from ghissues.adapters.errors import DecodeError
from ghissues.adapters.models import Comment, Issue, Label


class EnvelopeShape(StrEnum):
    single_issue = "issue"
    multi_issue = "issues"
    single_comment = "comment"
    multi_comment = "comments"
    multi_label = "labels"


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)


class SingleIssueEnvelope(_Envelope):
    issue: Issue

    def unwrap(self) -> Issue:
        return self.issue


class MultiIssueEnvelope(_Envelope):
    issues: list[Issue]

    def unwrap(self) -> list[Issue]:
        return self.issues


class SingleCommentEnvelope(_Envelope):
    comment: Comment

    def unwrap(self) -> Comment:
        return self.comment


class MultiCommentEnvelope(_Envelope):
    comments: list[Comment]

    def unwrap(self) -> list[Comment]:
        return self.comments


class MultiLabelEnvelope(_Envelope):
    labels: list[Label]

    def unwrap(self) -> list[Label]:
        return self.labels


Envelope = (
    SingleIssueEnvelope
    | MultiIssueEnvelope
    | SingleCommentEnvelope
    | MultiCommentEnvelope
    | MultiLabelEnvelope
)

_ENVELOPES: dict[EnvelopeShape, type[_Envelope]] = {
    EnvelopeShape.single_issue: SingleIssueEnvelope,
    EnvelopeShape.multi_issue: MultiIssueEnvelope,
    EnvelopeShape.single_comment: SingleCommentEnvelope,
    EnvelopeShape.multi_comment: MultiCommentEnvelope,
    EnvelopeShape.multi_label: MultiLabelEnvelope,
}


def decode(body: bytes, shape: EnvelopeShape) -> Envelope:
    """Validate a raw response body against the envelope for ``shape``.

    Raises DecodeError when the body is not JSON, lacks the envelope key, or
    carries a payload of the wrong type. Unknown keys are ignored.
    """
    model = _ENVELOPES[shape]
    try:
        return model.model_validate_json(body)  # type: ignore[return-value]
    except pydantic.ValidationError as exc:
        raise DecodeError(
            f"Response does not match the {str(shape)!r} envelope: {exc}",
            shape=str(shape),
            body=body,
        ) from exc
