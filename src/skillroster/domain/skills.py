"""Skill-name rules — trimming, case-insensitive keys, and de-duplication."""

from __future__ import annotations

from collections.abc import Iterable


def clean_skill_name(name: str | None) -> str | None:
    """Trim *name*; return None when nothing is left.

    Examples:
        >>> clean_skill_name("  React ")
        'React'
        >>> clean_skill_name("   ") is None
        True
    """
    if name is None:
        return None
    trimmed = str(name).strip()
    return trimmed or None


def skill_key(name: str) -> str:
    """Comparison key for case-insensitive skill matching."""
    return name.strip().lower()


def clean_skill_names(names: Iterable[str | None]) -> list[str]:
    """Trim every entry and drop the empty ones. Order and repeats are kept."""
    cleaned: list[str] = []
    for name in names:
        value = clean_skill_name(name)
        if value is not None:
            cleaned.append(value)
    return cleaned


def find_duplicate_keys(names: Iterable[str]) -> list[str]:
    """Return the names whose key was already seen earlier in *names*."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for name in names:
        key = skill_key(name)
        if key in seen:
            duplicates.append(name)
        seen.add(key)
    return duplicates


def unique_ids(ids: Iterable[int]) -> list[int]:
    """Drop repeated ids, keeping first-seen order."""
    seen: set[int] = set()
    ordered: list[int] = []
    for skill_id in ids:
        if skill_id not in seen:
            seen.add(skill_id)
            ordered.append(skill_id)
    return ordered
