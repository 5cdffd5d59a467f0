from collections.abc import Mapping


def inject_credentials(fields: Mapping[str, str] | None, login: str, token: str) -> dict[str, str]:
    """Return a copy of ``fields`` carrying ``login`` and ``token`` entries.

    Values the caller already put under either key are kept as-is.
    """
    merged = dict(fields or {})
    merged.setdefault("login", login)
    merged.setdefault("token", token)
    return merged
