"""Predicate rendering for SQL dialects and SurrealQL."""

from .dialect import Dialect
from .render import render_value, render_filter, render_search, render_where

__all__ = [
    "Dialect",
    "render_value",
    "render_filter",
    "render_search",
    "render_where"
]
