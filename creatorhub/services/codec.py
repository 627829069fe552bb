"""Translate between nested API payloads and flat persisted rows.

Grouped objects (``social_links``, ``seeking``, ``notification_preferences``)
are stored as one scalar column per key, named ``{group}_{key}``. Lists of
heterogeneous objects on projects are stored as JSON text, one column per
list.

``flatten`` never raises on missing optional data and ``unflatten`` never
raises on malformed JSON text: both fall back to the group/list defaults.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping

from sqlalchemy import inspect


logger = logging.getLogger(__name__)


SOCIAL_LINKS: dict[str, Any] = {
    "youtube": "",
    "instagram": "",
    "github": "",
    "twitter": "",
    "linkedin": "",
}

NOTIFICATION_PREFERENCES: dict[str, Any] = {
    "email": False,
    "push": False,
    "digest": False,
}

SEEKING: dict[str, Any] = {
    "creator": False,
    "brand": False,
    "freelancer": False,
    "contractor": False,
}

USER_GROUPS: dict[str, dict[str, Any]] = {
    "social_links": SOCIAL_LINKS,
    "notification_preferences": NOTIFICATION_PREFERENCES,
}

PROJECT_GROUPS: dict[str, dict[str, Any]] = {
    "seeking": SEEKING,
    "social_links": SOCIAL_LINKS,
    "notification_preferences": NOTIFICATION_PREFERENCES,
}

PROJECT_JSON_FIELDS: tuple[str, ...] = (
    "team_members",
    "collaborators",
    "advisors",
    "partners",
    "testimonials",
    "deliverables",
    "milestones",
)

USER_LIST_FIELDS: tuple[str, ...] = (
    "skills",
    "expertise",
    "target_audience",
    "solutions_offered",
    "interest_tags",
    "experience_tags",
    "education_tags",
    "website_links",
)

PROJECT_LIST_FIELDS: tuple[str, ...] = (
    "skills_required",
    "expertise_needed",
    "target_audience",
    "solutions_offered",
    "project_tags",
    "industry_tags",
    "technology_tags",
    "website_links",
)

USER_INT_FIELDS: tuple[str, ...] = ("career_experience", "social_media_followers")
PROJECT_INT_FIELDS: tuple[str, ...] = ("project_followers",)

# Never leaves the persistence layer.
USER_PRIVATE_FIELDS: tuple[str, ...] = ("password_hash",)


def coerce_int(value: Any) -> int:
    """Base-10 integer parse; anything unparseable becomes 0."""

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    text = str(value).strip()
    if not text:
        return 0
    # Accept a leading integer like "12 years", mirroring a lenient parse.
    digits = ""
    for i, ch in enumerate(text):
        if ch.isdigit() or (i == 0 and ch in "+-"):
            digits += ch
        else:
            break
    try:
        return int(digits, 10)
    except ValueError:
        return 0


def ensure_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, (tuple, set)):
        return list(value)
    if isinstance(value, str) and not value.strip():
        return []
    return [value]


def encode_json_list(value: Any) -> str:
    return json.dumps(ensure_list(value), ensure_ascii=False)


def decode_json_list(raw: Any, *, field: str = "") -> list:
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        return raw
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("codec: invalid JSON in %s, using []", field or "field")
        return []
    if not isinstance(value, list):
        logger.warning("codec: %s is not a JSON array, using []", field or "field")
        return []
    return value


def _coerce_group_value(value: Any, default: Any) -> Any:
    if value is None:
        return default
    if isinstance(default, bool):
        return bool(value)
    return str(value)


def flatten(
    nested: Mapping[str, Any],
    *,
    groups: Mapping[str, Mapping[str, Any]],
    json_fields: Iterable[str] = (),
    list_fields: Iterable[str] = (),
    int_fields: Iterable[str] = (),
    partial: bool = False,
) -> dict[str, Any]:
    """Nested payload -> flat row.

    With ``partial=True`` (patches) only groups and JSON lists present in
    ``nested`` are emitted, so a patch never resets data it does not mention.
    """

    row: dict[str, Any] = {k: v for k, v in nested.items() if k not in groups}

    for group, defaults in groups.items():
        if partial and group not in nested:
            continue
        values = nested.get(group) or {}
        if not isinstance(values, Mapping):
            values = {}
        for key, default in defaults.items():
            row[f"{group}_{key}"] = _coerce_group_value(values.get(key), default)

    for field in json_fields:
        if partial and field not in nested:
            continue
        row[field] = encode_json_list(nested.get(field))

    for field in list_fields:
        if field in row:
            row[field] = ensure_list(row[field])

    for field in int_fields:
        if field in row:
            row[field] = coerce_int(row[field])

    return row


def unflatten(
    row: Mapping[str, Any],
    *,
    groups: Mapping[str, Mapping[str, Any]],
    json_fields: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> dict[str, Any]:
    """Flat row -> nested payload (inverse of :func:`flatten`)."""

    flat_keys = {f"{group}_{key}" for group, defaults in groups.items() for key in defaults}
    excluded = set(exclude)
    nested: dict[str, Any] = {k: v for k, v in row.items() if k not in flat_keys and k not in excluded}

    for group, defaults in groups.items():
        nested[group] = {key: _coerce_group_value(row.get(f"{group}_{key}"), default) for key, default in defaults.items()}

    for field in json_fields:
        nested[field] = decode_json_list(row.get(field), field=field)

    return nested


def model_to_row(obj: Any) -> dict[str, Any]:
    """Column attributes of an ORM instance as a plain dict (relationships excluded)."""

    mapper = inspect(obj).mapper
    return {attr.key: getattr(obj, attr.key) for attr in mapper.column_attrs}


def user_to_nested(row: Mapping[str, Any]) -> dict[str, Any]:
    return unflatten(row, groups=USER_GROUPS, exclude=USER_PRIVATE_FIELDS)


def user_to_row(nested: Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    row = flatten(
        nested,
        groups=USER_GROUPS,
        list_fields=USER_LIST_FIELDS,
        int_fields=USER_INT_FIELDS,
        partial=partial,
    )
    for field in USER_PRIVATE_FIELDS:
        row.pop(field, None)
    return row


def project_to_nested(row: Mapping[str, Any]) -> dict[str, Any]:
    return unflatten(row, groups=PROJECT_GROUPS, json_fields=PROJECT_JSON_FIELDS)


def project_to_row(nested: Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    return flatten(
        nested,
        groups=PROJECT_GROUPS,
        json_fields=PROJECT_JSON_FIELDS,
        list_fields=PROJECT_LIST_FIELDS,
        int_fields=PROJECT_INT_FIELDS,
        partial=partial,
    )
