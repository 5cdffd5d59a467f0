"""Client for the issues API (issues, comments and labels of one user/repo)."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal, cast
from urllib.parse import quote

from ghissues.adapters.credentials import inject_credentials
from ghissues.adapters.envelopes import EnvelopeShape, decode
from ghissues.adapters.models import Comment, Issue, Label
from ghissues.adapters.transport import HttpTransport, Transport
from ghissues.config.config import settings

IssueState = Literal["open", "closed"]
_STATES = ("open", "closed")


@dataclass(frozen=True)
class Route:
    method: Literal["GET", "POST"]
    template: str
    shape: EnvelopeShape


ROUTES: dict[str, Route] = {
    "search": Route("GET", "/issues/search/{user}/{repo}/{state}/{term}/", EnvelopeShape.multi_issue),
    "list": Route("GET", "/issues/list/{user}/{repo}/{state}/", EnvelopeShape.multi_issue),
    "create": Route("POST", "/issues/open/{user}/{repo}/", EnvelopeShape.single_issue),
    "detail": Route("GET", "/issues/show/{user}/{repo}/{number}", EnvelopeShape.single_issue),
    "edit": Route("POST", "/issues/edit/{user}/{repo}/{number}/", EnvelopeShape.single_issue),
    "close": Route("POST", "/issues/close/{user}/{repo}/{number}/", EnvelopeShape.single_issue),
    "reopen": Route("POST", "/issues/reopen/{user}/{repo}/{number}/", EnvelopeShape.single_issue),
    "list_comments": Route("GET", "/issues/comments/{user}/{repo}/{number}/", EnvelopeShape.multi_comment),
    "add_comment": Route("POST", "/issues/comment/{user}/{repo}/{number}/", EnvelopeShape.single_comment),
    "list_labels": Route("GET", "/issues/labels/{user}/{repo}/", EnvelopeShape.multi_label),
    "add_label_to_repo": Route("POST", "/issues/label/add/{user}/{repo}/{label}/", EnvelopeShape.multi_label),
    "add_label_to_issue": Route(
        "POST", "/issues/label/add/{user}/{repo}/{label}/{number}/", EnvelopeShape.multi_label
    ),
    "remove_label_from_repo": Route(
        "POST", "/issues/label/remove/{user}/{repo}/{label}/", EnvelopeShape.multi_label
    ),
    "remove_label_from_issue": Route(
        "POST", "/issues/label/remove/{user}/{repo}/{label}/{number}/", EnvelopeShape.multi_label
    ),
}


class IssuesClient:
    """Typed client for the issues API.

    Reads are plain GETs; writes are form-encoded POSTs carrying the client's
    ``login`` and ``token``. Each call makes exactly one request and either
    returns the decoded payload or raises TransportError / DecodeError.

    Usage:
        with IssuesClient("octocat", "secret") as client:
            issues = client.list_issues("octocat", "hello-world", "open")
    """

    def __init__(
        self,
        username: str,
        token: str,
        transport: Transport | None = None,
        *,
        api_root: str | None = None,
        escape_path_segments: bool | None = None,
    ) -> None:
        self._username = username
        self._token = token
        self._transport = transport if transport is not None else HttpTransport()
        self._api_root = (api_root or settings.api_root).rstrip("/")
        self._escape = settings.escape_path_segments if escape_path_segments is None else escape_path_segments

    def __enter__(self) -> "IssuesClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the transport. Use close_issue() to close an issue."""
        self._transport.close()

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    def search_issues(self, user: str, repo: str, state: IssueState, term: str) -> list[Issue]:
        self._check_state(state)
        return cast(list[Issue], self._call("search", user=user, repo=repo, state=state, term=term))

    def list_issues(self, user: str, repo: str, state: IssueState) -> list[Issue]:
        self._check_state(state)
        return cast(list[Issue], self._call("list", user=user, repo=repo, state=state))

    def create_issue(self, user: str, repo: str, title: str, body: str) -> Issue:
        return cast(Issue, self._call("create", {"title": title, "body": body}, user=user, repo=repo))

    def get_issue(self, user: str, repo: str, number: int) -> Issue:
        return cast(Issue, self._call("detail", user=user, repo=repo, number=number))

    def edit_issue(self, user: str, repo: str, number: int, title: str, body: str) -> Issue:
        fields = {"title": title, "body": body}
        return cast(Issue, self._call("edit", fields, user=user, repo=repo, number=number))

    def close_issue(self, user: str, repo: str, number: int) -> Issue:
        return cast(Issue, self._call("close", user=user, repo=repo, number=number))

    def reopen_issue(self, user: str, repo: str, number: int) -> Issue:
        return cast(Issue, self._call("reopen", user=user, repo=repo, number=number))

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def list_comments(self, user: str, repo: str, number: int) -> list[Comment]:
        return cast(list[Comment], self._call("list_comments", user=user, repo=repo, number=number))

    def add_comment(self, user: str, repo: str, number: int, comment: str) -> Comment:
        fields = {"comment": comment}
        return cast(Comment, self._call("add_comment", fields, user=user, repo=repo, number=number))

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    def list_labels(self, user: str, repo: str) -> list[Label]:
        return cast(list[Label], self._call("list_labels", user=user, repo=repo))

    def add_label_to_repo(self, user: str, repo: str, label: Label) -> list[Label]:
        return cast(list[Label], self._call("add_label_to_repo", user=user, repo=repo, label=label))

    def add_label_to_issue(self, user: str, repo: str, number: int, label: Label) -> list[Label]:
        return cast(
            list[Label],
            self._call("add_label_to_issue", user=user, repo=repo, label=label, number=number),
        )

    def remove_label_from_repo(self, user: str, repo: str, label: Label) -> list[Label]:
        return cast(list[Label], self._call("remove_label_from_repo", user=user, repo=repo, label=label))

    def remove_label_from_issue(self, user: str, repo: str, number: int, label: Label) -> list[Label]:
        return cast(
            list[Label],
            self._call("remove_label_from_issue", user=user, repo=repo, label=label, number=number),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def url_for(self, route_name: str, **params: str | int) -> str:
        """Build the absolute URL for a route, substituting path segments."""
        segments = {key: self._segment(value) for key, value in params.items()}
        return self._api_root + ROUTES[route_name].template.format(**segments)

    def _call(self, route_name: str, fields: Mapping[str, str] | None = None, **params: str | int) -> Any:
        route = ROUTES[route_name]
        url = self.url_for(route_name, **params)
        if route.method == "GET":
            body = self._transport.fetch(url)
        else:
            body = self._transport.submit(url, inject_credentials(fields, self._username, self._token))
        return decode(body, route.shape).unwrap()

    def _segment(self, value: str | int) -> str:
        text = str(value)
        return quote(text, safe="") if self._escape else text

    @staticmethod
    def _check_state(state: str) -> None:
        if state not in _STATES:
            raise ValueError(f"state must be one of {_STATES}, got {state!r}")
