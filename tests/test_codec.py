import json

from creatorhub.services.codec import (
    PROJECT_JSON_FIELDS,
    coerce_int,
    decode_json_list,
    project_to_nested,
    project_to_row,
    user_to_nested,
    user_to_row,
)


def test_user_groups_flatten_to_prefixed_columns() -> None:
    row = user_to_row(
        {
            "bio": "hi",
            "social_links": {"github": "gh/alice"},
            "notification_preferences": {"email": True},
        }
    )
    assert row["bio"] == "hi"
    assert row["social_links_github"] == "gh/alice"
    assert row["social_links_youtube"] == ""
    assert row["notification_preferences_email"] is True
    assert row["notification_preferences_push"] is False
    assert "social_links" not in row


def test_user_row_unflattens_with_defaults_and_hides_password() -> None:
    nested = user_to_nested(
        {
            "id": 1,
            "username": "alice",
            "password_hash": "secret",
            "social_links_instagram": "@alice",
            "notification_preferences_digest": 1,
        }
    )
    assert "password_hash" not in nested
    assert nested["social_links"]["instagram"] == "@alice"
    assert nested["social_links"]["twitter"] == ""
    assert nested["notification_preferences"] == {"email": False, "push": False, "digest": True}


def test_partial_flatten_leaves_absent_groups_out() -> None:
    row = user_to_row({"bio": "only bio"}, partial=True)
    assert row == {"bio": "only bio"}

    row = project_to_row({"project_name": "X"}, partial=True)
    assert row == {"project_name": "X"}
    for field in PROJECT_JSON_FIELDS:
        assert field not in row


def test_full_project_flatten_fills_every_group_and_list() -> None:
    row = project_to_row({"project_name": "X", "seeking": {"brand": True}})
    assert row["seeking_brand"] is True
    assert row["seeking_creator"] is False
    for field in PROJECT_JSON_FIELDS:
        assert row[field] == "[]"


def test_project_json_lists_survive_the_round_trip() -> None:
    members = [{"name": "Bo", "role": "Editor", "media": None}]
    row = project_to_row({"team_members": members, "project_followers": "1200"})
    assert json.loads(row["team_members"]) == members
    assert row["project_followers"] == 1200

    nested = project_to_nested(row)
    assert nested["team_members"] == members
    assert isinstance(nested["milestones"], list)


def test_malformed_json_decodes_to_empty_list() -> None:
    assert decode_json_list("{not json", field="team_members") == []
    assert decode_json_list('{"a": 1}', field="team_members") == []
    assert decode_json_list(None) == []
    nested = project_to_nested({"team_members": "oops", "advisors": "[1, 2]"})
    assert nested["team_members"] == []
    assert nested["advisors"] == [1, 2]


def test_coerce_int_parses_leniently() -> None:
    assert coerce_int("42") == 42
    assert coerce_int(" 12 years") == 12
    assert coerce_int("-3") == -3
    assert coerce_int("abc") == 0
    assert coerce_int("") == 0
    assert coerce_int(None) == 0
    assert coerce_int(7.9) == 7


def test_list_fields_are_wrapped() -> None:
    row = user_to_row({"skills": "editing"}, partial=True)
    assert row["skills"] == ["editing"]


def test_full_user_survives_the_round_trip() -> None:
    user = {
        "id": 3,
        "username": "alice",
        "email": "alice@example.com",
        "bio": "Editor",
        "social_links": {"youtube": "yt/a", "instagram": "@a", "github": "gh/a", "twitter": "@at", "linkedin": "in/a"},
        "notification_preferences": {"email": True, "push": False, "digest": True},
        "skills": ["editing", "color"],
        "expertise": ["film"],
        "target_audience": ["gamers"],
        "solutions_offered": ["edits"],
        "interest_tags": ["music"],
        "experience_tags": ["senior"],
        "education_tags": ["ba"],
        "website_links": ["https://a.example"],
        "career_experience": 7,
        "social_media_followers": 15000,
    }

    row = user_to_row({**user, "password_hash": "secret", "career_experience": "7 years"})
    assert "password_hash" not in row
    assert row["career_experience"] == 7

    nested = user_to_nested({**row, "password_hash": "secret"})
    assert nested == user
