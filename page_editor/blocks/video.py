"""Bloc Vidéo — iframe YouTube / Vimeo / URL directe."""
import re

from ..core.schemas import BlockDefinition
from .base import BlockProps

_YOUTUBE_WATCH = re.compile(r"[?&]v=([^&#]+)")


def video_embed_url(url: str) -> str:
    """
    Convertit une URL vidéo brute en URL intégrable.

    youtube.com/watch?v=ID / youtu.be/ID → https://www.youtube.com/embed/ID
    vimeo.com/ID                           → https://player.vimeo.com/video/ID
    Toute autre URL est renvoyée telle quelle.
    """
    if not url:
        return url
    if "youtu.be/" in url:
        video_id = url.split("youtu.be/", 1)[1].split("?")[0].split("#")[0].strip("/")
        if video_id:
            return f"https://www.youtube.com/embed/{video_id}"
    elif "youtube.com/watch" in url:
        m = _YOUTUBE_WATCH.search(url)
        if m:
            return f"https://www.youtube.com/embed/{m.group(1)}"
    elif "vimeo.com/" in url and "player.vimeo.com" not in url:
        video_id = url.rstrip("/").rsplit("/", 1)[-1].split("?")[0]
        if video_id:
            return f"https://player.vimeo.com/video/{video_id}"
    return url


class VideoProps(BlockProps):
    video_url: str = ""
    autoplay: bool = False
    controls: bool = True
    aspect_ratio: str = "16/9"

    @property
    def css_aspect_ratio(self) -> str:
        # "16:9" (catalogue) → "16/9" (CSS)
        return self.aspect_ratio.replace(":", "/")


DEFINITION = BlockDefinition(
    id="video-embed",
    type="video",
    category="media",
    name="Video Player",
    description="Embed videos from YouTube, Vimeo, or upload your own",
    default_props={
        "videoUrl": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "autoplay": False,
        "controls": True,
        "aspectRatio": "16:9",
    },
)
