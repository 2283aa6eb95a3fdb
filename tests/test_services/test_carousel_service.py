"""
Unit tests for CarouselService ordering (move up / move down)
"""
import uuid
from unittest.mock import patch

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from app.schemas.carousel import CarouselImageCreate, CarouselImageUpdate


@pytest.fixture
def slides(session, carousel_service):
    """
    Provides three slides created in order (display_order 0, 1, 2)
    """
    return [
        carousel_service.create_image(
            session, CarouselImageCreate(image=f"https://img.example/{i}.jpg", title=f"Slide {i}")
        )
        for i in range(3)
    ]


def _titles(images):
    return [image.title for image in images]


def _orders(images):
    return [image.display_order for image in images]


class TestCarouselCrud:
    """Test slide creation defaults and updates"""

    def test_create_requires_image(self):
        """Test create({}) fails before any store write"""
        with pytest.raises(ValidationError):
            CarouselImageCreate()
        with pytest.raises(ValidationError):
            CarouselImageCreate(image=" ")

    def test_new_slides_are_appended(self, session, carousel_service, slides):
        assert _orders(slides) == [0, 1, 2]
        assert slides[0].button_text == "Shop Now"
        assert slides[0].button_link == "/?section=featured"

    def test_explicit_order_is_kept(self, session, carousel_service, slides):
        image = carousel_service.create_image(
            session, CarouselImageCreate(image="https://img.example/x.jpg", title="First", display_order=-5)
        )

        assert image.display_order == -5
        assert _titles(carousel_service.list_images(session))[0] == "First"

    def test_update_fields(self, session, carousel_service, slides):
        updated = carousel_service.update_image(
            session,
            slides[1].id,
            CarouselImageUpdate(button_link="/?category=Wall Panels", subtitle=None),
        )

        assert updated.button_link == "/?category=Wall Panels"
        assert updated.image == "https://img.example/1.jpg"

    def test_delete(self, session, carousel_service, slides):
        assert carousel_service.delete_image(session, slides[0].id) is True
        assert _titles(carousel_service.list_images(session)) == ["Slide 1", "Slide 2"]
        assert carousel_service.delete_image(session, slides[0].id) is False


class TestCarouselOrdering:
    """Test pairwise swap semantics"""

    def test_move_up_first_is_noop(self, session, carousel_service, slides):
        """Test moving the lowest-ordered slide up changes nothing"""
        with patch.object(carousel_service.repo, "save_orders") as save:
            result = carousel_service.move_up(session, slides[0].id)

        save.assert_not_called()
        assert _titles(result) == ["Slide 0", "Slide 1", "Slide 2"]
        assert _orders(result) == [0, 1, 2]

    def test_move_down_last_is_noop(self, session, carousel_service, slides):
        """Test moving the highest-ordered slide down changes nothing"""
        with patch.object(carousel_service.repo, "save_orders") as save:
            result = carousel_service.move_down(session, slides[2].id)

        save.assert_not_called()
        assert _titles(result) == ["Slide 0", "Slide 1", "Slide 2"]

    def test_move_up_swaps_with_predecessor(self, session, carousel_service, slides):
        """Test move up is a pure swap of two order values"""
        before = sorted(_orders(carousel_service.list_images(session)))

        result = carousel_service.move_up(session, slides[2].id)

        assert _titles(result) == ["Slide 0", "Slide 2", "Slide 1"]
        moved = next(s for s in result if s.title == "Slide 2")
        former_predecessor = next(s for s in result if s.title == "Slide 1")
        assert moved.display_order < former_predecessor.display_order
        assert sorted(_orders(result)) == before

    def test_move_down_swaps_with_successor(self, session, carousel_service, slides):
        result = carousel_service.move_down(session, slides[0].id)

        assert _titles(result) == ["Slide 1", "Slide 0", "Slide 2"]
        assert sorted(_orders(result)) == [0, 1, 2]

    def test_gaps_are_preserved(self, session, carousel_service, slides):
        """Test non-contiguous orders swap without renumbering"""
        carousel_service.update_image(session, slides[2].id, CarouselImageUpdate(display_order=10))

        result = carousel_service.move_up(session, slides[2].id)

        assert _titles(result) == ["Slide 0", "Slide 2", "Slide 1"]
        assert _orders(result) == [0, 1, 10]

    def test_equal_orders_are_spread_before_swap(self, session, carousel_service, slides):
        """Test a tie with the neighbour still produces a visible move"""
        carousel_service.update_image(session, slides[2].id, CarouselImageUpdate(display_order=1))

        result = carousel_service.move_up(session, slides[2].id)

        assert _titles(result) == ["Slide 0", "Slide 2", "Slide 1"]
        assert _orders(result) == [0, 1, 2]

    def test_move_unknown_slide_is_404(self, session, carousel_service, slides):
        with pytest.raises(HTTPException) as exc:
            carousel_service.move_up(session, uuid.uuid4())

        assert exc.value.status_code == 404
