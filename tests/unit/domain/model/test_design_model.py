"""Unit tests for gallery domain models and values."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from gallery.domain.model import Design
from gallery.domain.value import DesignId, Reaction, UserId, reaction_weight


class TestReaction:
    """Tests for reaction weights."""

    def test_weights(self):
        assert Reaction.LIKE.weight == 1
        assert Reaction.DISLIKE.weight == -1
        assert reaction_weight(None) == 0

    def test_opposite(self):
        assert Reaction.LIKE.opposite is Reaction.DISLIKE
        assert Reaction.DISLIKE.opposite is Reaction.LIKE


class TestDesign:
    """Tests for Design validation."""

    def _design(self, **overrides) -> Design:
        fields = {
            "id": DesignId(uuid4()),
            "title": "Helmet-1",
            "image_url": "https://i.example.com/helmet.png",
            "owner_id": UserId(str(uuid4())),
            "owner_display_name": "Ada",
        }
        fields.update(overrides)
        return Design(**fields)

    def test_defaults(self):
        design = self._design()

        assert design.score == 0
        assert design.owner_avatar_url is None

    def test_negative_score_allowed(self):
        assert self._design(score=-4).score == -4

    @pytest.mark.parametrize("title", ["", "   ", "x" * 201])
    def test_invalid_titles(self, title):
        with pytest.raises(ValidationError):
            self._design(title=title)

    @pytest.mark.parametrize(
        "url", ["ftp://host/a.png", "helmet.png", "https://", "javascript:alert(1)"]
    )
    def test_invalid_image_urls(self, url):
        with pytest.raises(ValidationError):
            self._design(image_url=url)

    def test_is_immutable(self):
        design = self._design()

        with pytest.raises(ValidationError):
            design.score = 5
