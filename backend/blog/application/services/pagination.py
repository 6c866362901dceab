"""Turns loose query-string values into a bounded QueryParams."""

from blog.domain.entities import QueryParams

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


def _positive_int(raw: str | int | None) -> int:
    if raw is None:
        return 0
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return 0
    return value if value > 0 else 0


def parse_query_params(
    page: str | int | None = None,
    limit: str | int | None = None,
    published: str | None = None,
    search: str | None = None,
    default_limit: int = DEFAULT_PAGE_LIMIT,
    max_limit: int = MAX_PAGE_LIMIT,
) -> QueryParams:
    """Build listing params the way the HTTP layer receives them.

    Invalid or out-of-range page/limit values are treated as unset; once a
    page is given, a missing limit falls back to ``default_limit``. Only the
    exact strings "true" and "false" set the published filter.
    """
    parsed_page = _positive_int(page)

    parsed_limit = _positive_int(limit)
    if parsed_limit > max_limit:
        parsed_limit = 0
    if parsed_limit == 0 and parsed_page > 0:
        parsed_limit = default_limit

    published_filter: bool | None = None
    if published == "true":
        published_filter = True
    elif published == "false":
        published_filter = False

    return QueryParams(
        page=parsed_page,
        limit=parsed_limit,
        published=published_filter,
        search=search or "",
    )
