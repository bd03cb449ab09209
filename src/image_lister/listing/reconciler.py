"""Flatten an image's tags and digests into listing triples."""

from ..core.types import NONE, NONE_DIGEST, NONE_TAG, ImageRecord, ReferenceTriple
from ..utils.reference import Digested, Tagged, parse_named


def is_dangling(repo_tags: list[str], repo_digests: list[str]) -> bool:
    """Check for the single untagged, undigested image case."""
    return repo_tags == [NONE_TAG] and repo_digests == [NONE_DIGEST]


def combined_references(record: ImageRecord) -> list[str]:
    """Tags followed by digests, with a dangling image counted once."""
    repo_tags = list(record.repo_tags)
    repo_digests = list(record.repo_digests)

    if is_dangling(repo_tags, repo_digests):
        repo_digests = []

    return repo_tags + repo_digests


def reference_triple(repo_and_ref: str) -> ReferenceTriple:
    """Build the triple for one reference string.

    Raises:
        ReferenceParseError: If the string is not a valid reference
    """
    if repo_and_ref.startswith(NONE):
        return ReferenceTriple()

    ref = parse_named(repo_and_ref)
    if isinstance(ref, Digested):
        return ReferenceTriple(repository=ref.name, digest=ref.digest)
    if isinstance(ref, Tagged):
        return ReferenceTriple(repository=ref.name, tag=ref.tag)
    return ReferenceTriple(repository=ref.name)


def reconcile_references(record: ImageRecord) -> list[ReferenceTriple]:
    """Turn an image record into its ordered listing triples.

    Args:
        record: Image as reported by the engine

    Returns:
        list[ReferenceTriple]: One triple per tag, then one per digest

    Raises:
        ReferenceParseError: If any tag or digest string is malformed
    """
    return [reference_triple(ref) for ref in combined_references(record)]
