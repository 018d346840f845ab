"""Featured photo carousel."""

import asyncio
from dataclasses import dataclass

from wedding_site.domain.photos import GalleryPhoto

_CDN = "https://d64gsuwffb70l.cloudfront.net/695dabdd5473eeaae1c08a56"

FEATURED_PHOTOS: tuple[GalleryPhoto, ...] = (
    GalleryPhoto("1", f"{_CDN}_1767746625848_17d12f1e.png", "The beginning of forever"),
    GalleryPhoto("2", f"{_CDN}_1767746642730_bfb34c01.jpg", "Love in every glance"),
    GalleryPhoto("3", f"{_CDN}_1767746642650_fdad9f6b.jpg", "Two hearts, one love"),
    GalleryPhoto(
        "4", f"{_CDN}_1767746650168_498167c8.png", "Together is our favorite place"
    ),
    GalleryPhoto("5", f"{_CDN}_1767746649514_c4bb9322.png", "Written in the stars"),
    GalleryPhoto(
        "6", f"{_CDN}_1767746646028_771943ca.jpg", "A love story for the ages"
    ),
    GalleryPhoto("7", f"{_CDN}_1767746651206_f51c17c9.png", "Forever starts now"),
    GalleryPhoto("8", f"{_CDN}_1767746671931_8d9193dd.png", "My heart found its home"),
    GalleryPhoto("9", f"{_CDN}_1767746670014_af750d11.jpg", "Love beyond words"),
    GalleryPhoto("10", f"{_CDN}_1767746680454_6da814a9.png", "Our beautiful journey"),
    GalleryPhoto("11", f"{_CDN}_1767746669599_7f18435e.jpg", "Endless love"),
    GalleryPhoto("12", f"{_CDN}_1767746678918_cb102212.png", "Soulmates forever"),
    GalleryPhoto("13", f"{_CDN}_1767746676939_6e0a949f.png", "Our happily ever after"),
)


@dataclass
class Carousel:
    """Timed rotation over a fixed list of photos.

    The timer only advances while autoplay is on, the pointer is not
    hovering and there is more than one photo. Manual navigation works
    regardless and wraps around both ends.
    """

    photos: tuple[GalleryPhoto, ...] = FEATURED_PHOTOS
    interval_seconds: float = 5.0
    autoplay: bool = True
    current_index: int = 0
    hovering: bool = False
    fullscreen: bool = False

    @property
    def current(self) -> GalleryPhoto | None:
        if not self.photos:
            return None
        return self.photos[self.current_index]

    @property
    def rotating(self) -> bool:
        return self.autoplay and not self.hovering and len(self.photos) > 1

    def tick(self) -> bool:
        """Advance on a timer tick; return whether the index moved."""
        if not self.rotating:
            return False
        self.current_index = (self.current_index + 1) % len(self.photos)
        return True

    def next(self) -> None:
        if self.photos:
            self.current_index = (self.current_index + 1) % len(self.photos)

    def previous(self) -> None:
        if self.photos:
            self.current_index = (self.current_index - 1 + len(self.photos)) % len(
                self.photos
            )

    def go_to(self, index: int) -> None:
        if index < 0 or index >= len(self.photos):
            raise IndexError(f"No photo at position {index}")
        self.current_index = index

    def set_hovering(self, hovering: bool) -> None:
        self.hovering = hovering

    def open_fullscreen(self) -> None:
        if self.photos:
            self.fullscreen = True

    def close_fullscreen(self) -> None:
        self.fullscreen = False

    async def run(self, ticks: int | None = None) -> None:
        """Drive the timer, optionally for a fixed number of ticks."""
        remaining = ticks
        while remaining is None or remaining > 0:
            await asyncio.sleep(self.interval_seconds)
            self.tick()
            if remaining is not None:
                remaining -= 1
