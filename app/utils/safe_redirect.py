"""Post-login redirect validation."""

from urllib.parse import urlparse

# Pages a login may send the user back to
REDIRECT_PREFIXES = ("/dashboard", "/orders", "/me")


def safe_redirect_url(url: str, fallback: str = "/dashboard") -> str:
    """Return url if it is a relative path into the app, else fallback.

    Rejects absolute and protocol-relative URLs (//host) and any path
    outside REDIRECT_PREFIXES.
    """
    if not isinstance(url, str):
        return fallback

    url = url.strip()
    if not url.startswith("/") or url.startswith("//"):
        return fallback

    parsed = urlparse(url)
    if parsed.scheme or parsed.netloc:
        return fallback

    if not any(
        parsed.path == prefix or parsed.path.startswith(prefix + "/")
        for prefix in REDIRECT_PREFIXES
    ):
        return fallback

    return url
