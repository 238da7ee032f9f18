"""Search and resource filtering over the record store."""

from typing import Iterable

from minemap.catalog.models import Deposit, resource_color

ALL_RESOURCES = "all"


def matches_search(deposit: Deposit, search: str) -> bool:
    """True if search is a case-insensitive substring of company, project or country."""
    if not search:
        return True
    needle = search.lower()
    return (
        needle in deposit.company_name.lower()
        or needle in deposit.project_name.lower()
        or needle in deposit.country.lower()
    )


def filter_deposits(
    deposits: Iterable[Deposit],
    search: str = "",
    resource: str = ALL_RESOURCES,
) -> list[Deposit]:
    """Filter deposits by search text and resource kind, preserving order."""
    filtered = [d for d in deposits if matches_search(d, search)]
    if resource != ALL_RESOURCES:
        filtered = [d for d in filtered if d.resource == resource]
    return filtered


def unique_resources(deposits: Iterable[Deposit]) -> list[str]:
    """Distinct resource kinds in first-seen order."""
    seen: list[str] = []
    for d in deposits:
        if d.resource not in seen:
            seen.append(d.resource)
    return seen


def legend(deposits: Iterable[Deposit]) -> list[tuple[str, str]]:
    """(resource, color) pairs for the resources present."""
    return [(r, resource_color(r)) for r in unique_resources(deposits)]
