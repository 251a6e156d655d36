"""Utility for joining URL segments."""


def join_url(segments: list[str]) -> str:
    """Join URL segments with single slashes.

    A leading slash on the first segment and a trailing slash on the last
    segment are kept.
    """
    if len(segments) == 1:
        return segments[0]
    joined = "/".join(s.strip("/") for s in segments if s.strip("/"))
    if segments[0].startswith("/"):
        joined = "/" + joined
    if segments[-1].endswith("/") and not joined.endswith("/"):
        joined += "/"
    return joined
