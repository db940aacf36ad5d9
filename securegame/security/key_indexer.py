"""One-way key transform used to index the secure data store."""

import hashlib

# Length of a SHA-256 digest rendered as hex
DIGEST_SIZE = 64


def digest(key: str) -> str:
    """
    Hash a key into its storage index.

    Args:
        key: Arbitrary string (the empty string included)

    Returns:
        SHA-256 of the UTF-8 encoded key as 64 lowercase hex characters
    """
    # Lone surrogates are encoded rather than rejected; valid text is plain UTF-8
    return hashlib.sha256(key.encode("utf-8", "surrogatepass")).hexdigest()


class KeyIndexer:
    """Callable wrapper around `digest` so stores can hold an explicit indexer."""

    def digest(self, key: str) -> str:
        return digest(key)

    def __call__(self, key: str) -> str:
        return self.digest(key)
