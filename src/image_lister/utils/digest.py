"""Digest validation and image id utilities."""

import re

# Regex pattern for valid digest format (algorithm:hex)
DIGEST_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*(?:[-_+.][A-Za-z][A-Za-z0-9]*)*:[0-9a-fA-F]{32,}$")

# Hex length per supported algorithm
DIGEST_HEX_LENGTHS = {"sha256": 64, "sha384": 96, "sha512": 128}

SHORT_ID_LENGTH = 12


def check_digest(digest: str) -> str | None:
    """Return why a digest is unacceptable, or None when it is valid."""
    if not DIGEST_PATTERN.fullmatch(digest):
        return "invalid checksum digest format"

    algorithm, hex_part = digest.split(":", 1)
    expected = DIGEST_HEX_LENGTHS.get(algorithm)
    if expected is None:
        return "unsupported digest algorithm"
    if len(hex_part) != expected:
        return "invalid checksum digest length"
    return None


def truncate_id(image_id: str) -> str:
    """Shorten an image id to its display form.

    Anything up to the first ':' (the algorithm prefix) is dropped and the
    first 12 characters are kept.

    Args:
        image_id: Full id (e.g. "sha256:0123456789abcdef...")

    Returns:
        Short id (e.g. "0123456789ab")
    """
    if ":" in image_id:
        image_id = image_id.split(":", 1)[1]
    return image_id[:SHORT_ID_LENGTH]
