"""Text Match — dialect-aware, case-insensitive substring predicates.

Invariants:
    - A matcher is resolved once per dialect and reused for every predicate of a request
    - LIKE wildcards in the search term are escaped: the term always matches literally
    - Empty terms are not special-cased here (the filter normalizer never produces one)

Design Decisions:
    - SQLite has no ILIKE: compare UPPER(column) against UPPER(pattern), both sides
      uppercased by the database so the case folding rules agree
    - Every other dialect gets ColumnOperators.ilike (native ILIKE on PostgreSQL)
    - Strategy objects over per-query `if dialect == ...` branches
"""

from functools import lru_cache
from typing import Protocol

from sqlalchemy import ColumnElement, func, literal

LIKE_ESCAPE = "\\"

# Dialects without a native case-insensitive LIKE operator
_NO_NATIVE_ILIKE = frozenset({"sqlite"})


class TextMatcher(Protocol):
    """Builds `column contains term` ignoring case."""
    supports_native_ilike: bool

    def contains(self, column: ColumnElement[str], term: str) -> ColumnElement[bool]: ...


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def _contains_pattern(term: str) -> str:
    return f"%{escape_like(term)}%"


class UpperLikeMatcher:
    """UPPER(column) LIKE UPPER('%term%')."""
    supports_native_ilike = False

    def contains(self, column: ColumnElement[str], term: str) -> ColumnElement[bool]:
        pattern = func.upper(literal(_contains_pattern(term)))
        return func.upper(column).like(pattern, escape=LIKE_ESCAPE)


class ILikeMatcher:
    """column ILIKE '%term%'."""
    supports_native_ilike = True

    def contains(self, column: ColumnElement[str], term: str) -> ColumnElement[bool]:
        return column.ilike(_contains_pattern(term), escape=LIKE_ESCAPE)


@lru_cache
def text_matcher_for(dialect_name: str) -> TextMatcher:
    """Matcher for a SQLAlchemy dialect name (engine.dialect.name)."""
    if dialect_name in _NO_NATIVE_ILIKE:
        return UpperLikeMatcher()
    return ILikeMatcher()
