"""
Image URL resolution for certification mark images.
"""

from typing import Iterable, Optional
from urllib.parse import urljoin, urlparse

DEFAULT_ORIGIN = "https://www.kosharot.co.il"

# The source site serves this file when a product has no picture
NO_PICTURE_FILENAMES = frozenset({"no_pic.gif", "no_pic.jpg"})


def resolve_image_url(
    src: Optional[str],
    origin: str = DEFAULT_ORIGIN,
    no_picture_filenames: Optional[Iterable[str]] = None,
) -> str:
    """
    Resolve an image reference to an absolute URL.

    Args:
        src: Raw src attribute value
        origin: Scheme and host of the source site
        no_picture_filenames: Filenames treated as "no image"

    Returns:
        Absolute URL, or empty string for missing/placeholder images

    Example:
        >>> resolve_image_url("//cdn.example/x.jpg")
        'https://cdn.example/x.jpg'
        >>> resolve_image_url("/img/x.jpg")
        'https://www.kosharot.co.il/img/x.jpg'
        >>> resolve_image_url("/images/no_pic.gif")
        ''
    """
    src = (src or "").strip()
    if not src:
        return ""

    placeholders = (
        NO_PICTURE_FILENAMES if no_picture_filenames is None
        else frozenset(name.lower() for name in no_picture_filenames)
    )
    filename = urlparse(src).path.rsplit('/', 1)[-1].lower()
    if filename in placeholders:
        return ""

    if src.startswith('//'):
        return f"https:{src}"
    if src.startswith(('http://', 'https://')):
        return src

    return urljoin(origin.rstrip('/') + '/', src)
