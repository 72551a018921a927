from unittest.mock import patch

import pytest

from waterwise.core.exceptions import (
    ExternalServiceException,
    ResourceNotFoundException,
    ValidationException,
)
from waterwise.models.community import Comment, Post
from waterwise.schemas.community import CommentCreate, PostCreate
from waterwise.services.community_service import CommunityService, toggle_user

ASHA = {"sub": "u1", "email": "asha@example.com", "user_metadata": {}}
RAVI = {"sub": "u2", "email": "ravi@example.com", "user_metadata": {}}


@pytest.fixture
def post(db_session):
    return CommunityService.create_post(
        db_session, ASHA, PostCreate(content="Our first rain barrel!", tags=["harvesting"])
    )


def test_toggle_user():
    assert toggle_user([], "u1") == ["u1"]
    assert toggle_user(["u2", "u1"], "u1") == ["u2"]


def test_create_post_defaults(post):
    assert post.likes == []
    assert post.shares == 0
    assert post.tags == ["harvesting"]
    assert post.author.username == "asha"


def test_list_posts_newest_first(db_session, post):
    newer = CommunityService.create_post(db_session, RAVI, PostCreate(content="Drip kit installed"))

    posts = CommunityService.list_posts(db_session)

    assert [p.id for p in posts] == [newer.id, post.id]


def test_like_twice_restores_likes(db_session, post):
    liked = CommunityService.toggle_like(db_session, post.id, "u2")
    assert liked.likes == ["u2"]

    unliked = CommunityService.toggle_like(db_session, post.id, "u2")
    assert unliked.likes == []


def test_like_missing_post(db_session):
    with pytest.raises(ResourceNotFoundException):
        CommunityService.toggle_like(db_session, 404, "u2")


def test_share_increments_by_one(db_session, post):
    result = CommunityService.share(db_session, post.id)

    assert result["shares"] == 1
    assert result["share_url"].endswith(f"/post/{post.id}")
    assert CommunityService.share(db_session, post.id)["shares"] == 2


@patch("waterwise.services.community_service.ModerationService.is_relevant", return_value=True)
def test_add_relevant_comment(mock_relevant, db_session, post):
    comment = CommunityService.add_comment(
        db_session, post.id, RAVI, CommentCreate(content="How big is the tank?")
    )

    assert comment.post_id == post.id
    assert comment.author.username == "ravi"
    mock_relevant.assert_called_once_with("How big is the tank?")


@patch("waterwise.services.community_service.ModerationService.is_relevant", return_value=False)
def test_off_topic_comment_is_never_inserted(mock_relevant, db_session, post):
    with pytest.raises(ValidationException) as exc:
        CommunityService.add_comment(
            db_session, post.id, RAVI, CommentCreate(content="Buy sneakers")
        )

    assert exc.value.message == "Comment must be related to the project."
    assert db_session.query(Comment).count() == 0


@patch(
    "waterwise.services.community_service.ModerationService.is_relevant",
    side_effect=ExternalServiceException("Comment moderation unavailable"),
)
def test_moderation_outage_inserts_nothing(mock_relevant, db_session, post):
    with pytest.raises(ExternalServiceException):
        CommunityService.add_comment(db_session, post.id, RAVI, CommentCreate(content="Nice"))
    assert db_session.query(Comment).count() == 0


@patch("waterwise.services.community_service.ModerationService.is_relevant")
def test_comment_on_missing_post_skips_moderation(mock_relevant, db_session):
    with pytest.raises(ResourceNotFoundException):
        CommunityService.add_comment(db_session, 404, RAVI, CommentCreate(content="Hi"))
    mock_relevant.assert_not_called()


@patch("waterwise.services.community_service.ModerationService.is_relevant", return_value=True)
def test_comments_are_oldest_first(mock_relevant, db_session, post):
    first = CommunityService.add_comment(db_session, post.id, RAVI, CommentCreate(content="One"))
    second = CommunityService.add_comment(db_session, post.id, ASHA, CommentCreate(content="Two"))

    db_session.expire_all()
    loaded = db_session.get(Post, post.id)
    assert [c.id for c in loaded.comments] == [first.id, second.id]


def test_stats(db_session, post):
    CommunityService.create_post(db_session, RAVI, PostCreate(content="Second"))
    CommunityService.toggle_like(db_session, post.id, "u2")
    CommunityService.toggle_like(db_session, post.id, "u1")
    CommunityService.share(db_session, post.id)

    assert CommunityService.stats(db_session) == {
        "members": 2,
        "discussions": 2,
        "shares": 1,
        "likes": 2,
    }


def test_stats_empty(db_session):
    assert CommunityService.stats(db_session) == {
        "members": 0,
        "discussions": 0,
        "shares": 0,
        "likes": 0,
    }
