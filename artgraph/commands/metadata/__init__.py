"""
Resolves artwork descriptor documents that are referenced by IPFS URIs
"""

# CIDv0 marker
CONTENT_HASH_PREFIX = "Qm"


def extract_content_hash(uri: str | None) -> str | None:
    """
    Returns the last path segment of the URI, if it looks like a CIDv0 hash.

    This is a narrow heuristic, not a URI parser:

    >>> extract_content_hash("ipfs://ipfs/QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG")
    'QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG'
    >>> extract_content_hash("https://example.com/metadata/7.json") is None
    True
    """
    if uri is None:
        return None

    content_hash = uri.split("/")[-1]
    if content_hash.startswith(CONTENT_HASH_PREFIX):
        return content_hash
    return None
