from django.core.paginator import EmptyPage, Paginator

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _positive_int(value, default: int, maximum: int | None = None) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    return min(number, maximum) if maximum else number


def paginate(queryset, page=None, size=None, serialize=list) -> dict:
    """
    Slice ``queryset`` into a 1-based page.

    A page past the end comes back empty rather than raising, with the totals
    still filled in.
    """
    page_number = _positive_int(page, 1)
    page_size = _positive_int(size, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE)
    paginator = Paginator(queryset, page_size)
    try:
        items = paginator.page(page_number).object_list
    except EmptyPage:
        items = []

    return {
        "count": paginator.count,
        "total_pages": paginator.num_pages if paginator.count else 0,
        "page": page_number,
        "size": page_size,
        "results": serialize(items),
    }
