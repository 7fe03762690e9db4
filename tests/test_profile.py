"""Unit tests for scraped profile decoding."""

import pytest

from threadroast.exceptions import UpstreamShapeError
from threadroast.models.profile import ThreadsProfile, ThreadsPost, decode_profile


class TestDecodeProfileValid:
    """Items that match the bio/posts shape."""

    def test_minimal_item(self):
        profile = decode_profile({"bio": "Space agency", "posts": [{"text": "We launched a rocket"}]})
        assert isinstance(profile, ThreadsProfile)
        assert profile.bio == "Space agency"
        assert profile.posts == [ThreadsPost(text="We launched a rocket")]

    def test_extra_fields_ignored(self):
        item = {
            "bio": "B",
            "followers": 1200,
            "posts": [{"text": "P1", "likes": 3, "id": "abc"}],
        }
        profile = decode_profile(item)
        assert [p.text for p in profile.posts] == ["P1"]

    def test_empty_posts_allowed(self):
        profile = decode_profile({"bio": "", "posts": []})
        assert profile.bio == ""
        assert profile.posts == []

    def test_profile_instance_passes_through(self):
        profile = ThreadsProfile(bio="B", posts=[])
        assert decode_profile(profile) is profile


class TestDecodeProfileInvalid:
    """Items that must be rejected as an upstream shape mismatch."""

    @pytest.mark.parametrize(
        "item",
        [
            None,
            "bio",
            ["bio", "posts"],
            {"posts": [{"text": "P1"}]},
            {"bio": "B"},
            {"bio": None, "posts": []},
            {"bio": 42, "posts": []},
            {"bio": "B", "posts": "P1, P2"},
            {"bio": "B", "posts": {"text": "P1"}},
            {"bio": "B", "posts": ({"text": "P1"},)},
            {"bio": "B", "posts": [{"text": "P1"}, {"body": "P2"}]},
            {"bio": "B", "posts": [{"text": 7}]},
            {"bio": "B", "posts": ["P1"]},
            {"bio": "B", "posts": [None]},
        ],
    )
    def test_rejected(self, item):
        with pytest.raises(UpstreamShapeError) as exc_info:
            decode_profile(item)
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Invalid data structure returned by the scraper."
