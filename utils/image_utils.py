# utils/image_utils.py
import base64

# Leading base64 characters of common image signatures
_SIGNATURES = (
    ("/9j/", "image/jpeg"),
    ("iVBORw0KGgo", "image/png"),
    ("R0lGOD", "image/gif"),
    ("UklGR", "image/webp"),
    ("Qk", "image/bmp"),
)


def encode_image(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def guess_image_type(encoded: str) -> str:
    for prefix, content_type in _SIGNATURES:
        if encoded.startswith(prefix):
            return content_type
    return "application/octet-stream"


def image_data_url(encoded: str) -> str:
    """Build the `imageUrl` a page can put straight into an <img> tag."""
    if not encoded:
        return ""
    if encoded.startswith(("data:", "http://", "https://")):
        return encoded
    return f"data:{guess_image_type(encoded)};base64,{encoded}"
