"""Text search policy shared by list views."""


def matches_query(query: str | None, *fields: str | None) -> bool:
    """Return True when any field contains the query, ignoring case.

    Args:
        query: Raw search text typed by the user.
        *fields: Candidate text fields, missing values are skipped.

    Returns:
        bool: True for an empty query or a case-insensitive substring match.
    """
    needle = (query or "").strip().casefold()
    if not needle:
        return True
    return any(
        needle in value.casefold()
        for value in fields
        if value
    )


__all__ = ["matches_query"]
