"""Typed client for the issues API: issues, comments and labels per user/repo."""

from ghissues.adapters.credentials import inject_credentials
from ghissues.adapters.envelopes import Envelope, EnvelopeShape, decode
from ghissues.adapters.errors import DecodeError, IssuesClientError, TransportError
from ghissues.adapters.issues_client import IssuesClient, IssueState
from ghissues.adapters.models import Comment, Issue, Label, PullRequest
from ghissues.adapters.transport import HttpTransport, Transport

__all__ = [
    "Comment",
    "DecodeError",
    "Envelope",
    "EnvelopeShape",
    "HttpTransport",
    "Issue",
    "IssueState",
    "IssuesClient",
    "IssuesClientError",
    "Label",
    "PullRequest",
    "Transport",
    "TransportError",
    "decode",
    "inject_credentials",
]
