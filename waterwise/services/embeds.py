"""
Video link helpers.
"""

from urllib.parse import parse_qs, urlparse

YOUTUBE_HOSTS = ("youtube.com", "youtu.be")
YOUTUBE_EMBED = "https://www.youtube.com/embed/{video_id}"


def is_youtube(url: str) -> bool:
    return any(host in url for host in YOUTUBE_HOSTS)


def embed_url_for(url: str) -> str:
    """
    Return an embeddable player URL.

    YouTube watch and short links become ``/embed/<id>`` links, taking the id
    from the ``v`` query parameter or else the last path segment. Any other
    URL is returned unchanged.
    """
    if not url or not is_youtube(url):
        return url

    parsed = urlparse(url)
    video_id = parse_qs(parsed.query).get("v", [None])[0]
    if not video_id:
        video_id = parsed.path.rstrip("/").split("/")[-1]
    return YOUTUBE_EMBED.format(video_id=video_id)
