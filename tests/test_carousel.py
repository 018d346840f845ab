"""Tests for the featured photo carousel."""

import asyncio

import pytest

from wedding_site.domain.photos import GalleryPhoto
from wedding_site.services.carousel import FEATURED_PHOTOS, Carousel


def _photos(count: int) -> tuple[GalleryPhoto, ...]:
    return tuple(
        GalleryPhoto(id=str(i), url=f"https://cdn.example.com/{i}.jpg")
        for i in range(count)
    )


def test_single_photo_never_advances() -> None:
    carousel = Carousel(photos=_photos(1))

    assert not any(carousel.tick() for _ in range(5))
    assert carousel.current_index == 0


def test_tick_advances_modulo_length() -> None:
    carousel = Carousel(photos=_photos(3))

    indexes = []
    for _ in range(4):
        assert carousel.tick()
        indexes.append(carousel.current_index)

    assert indexes == [1, 2, 0, 1]


def test_hover_pauses_rotation() -> None:
    carousel = Carousel(photos=_photos(3))
    carousel.set_hovering(True)

    assert not carousel.tick()
    carousel.set_hovering(False)
    assert carousel.tick()
    assert carousel.current_index == 1


def test_autoplay_off_does_not_rotate() -> None:
    carousel = Carousel(photos=_photos(3), autoplay=False)

    assert not carousel.tick()


def test_manual_navigation_wraps() -> None:
    carousel = Carousel(photos=_photos(3))

    carousel.previous()
    assert carousel.current_index == 2
    carousel.next()
    assert carousel.current_index == 0
    carousel.go_to(1)
    assert carousel.current is carousel.photos[1]


def test_go_to_rejects_out_of_range() -> None:
    with pytest.raises(IndexError):
        Carousel(photos=_photos(2)).go_to(5)


def test_empty_carousel_is_inert() -> None:
    carousel = Carousel(photos=())

    carousel.next()
    carousel.previous()
    carousel.open_fullscreen()

    assert carousel.current is None
    assert not carousel.fullscreen
    assert not carousel.tick()


def test_fullscreen_toggles() -> None:
    carousel = Carousel()

    carousel.open_fullscreen()
    assert carousel.fullscreen
    carousel.close_fullscreen()
    assert not carousel.fullscreen


def test_run_ticks_on_interval() -> None:
    carousel = Carousel(photos=_photos(4), interval_seconds=0)

    asyncio.run(carousel.run(ticks=3))

    assert carousel.current_index == 3


def test_default_photos_are_featured() -> None:
    assert Carousel().photos == FEATURED_PHOTOS
    assert len(FEATURED_PHOTOS) == 13
