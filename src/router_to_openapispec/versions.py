"""Ordering of handler version tokens.

Internal versions are plain integers ("1", "2", "10") and compare
numerically. Public versions are ISO dates ("2023-10-31") and compare
as strings.
"""


def sort_versions(versions: list[str]) -> list[str]:
    """Return ``versions`` sorted oldest first."""
    if versions and all(v.isdigit() for v in versions):
        return sorted(versions, key=int)
    return sorted(versions)


def newest(versions: list[str]) -> str | None:
    ordered = sort_versions(versions)
    return ordered[-1] if ordered else None
