import hashlib


class Hasher:
    """
    Hasher provides static methods for generating SHA256 hashes from strings and bytes.

    Methods
    -------
    hash_string(input_string: str) -> str
        Returns a SHA256 hash of the input string.
    hash_bytes(input_bytes: bytes) -> str
        Returns a SHA256 hash of the input bytes.
    """

    @staticmethod
    def hash_string(input_string: str) -> str:
        """Returns a SHA256 hash of the input string."""

        return hashlib.sha256(input_string.encode("utf-8")).hexdigest()

    @staticmethod
    def hash_bytes(input_bytes: bytes) -> str:
        """Returns a SHA256 hash of the input bytes."""

        return hashlib.sha256(input_bytes).hexdigest()
