"""This module wraps the hash primitives used by the SRP client."""
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

CRYPTO_BACKEND = default_backend()


class SRP_CRYPTO:
    DIGEST = hashes.SHA256  # Default protocol hash H
    HKDF_KEYLEN = 32  # bytes, length of expanded HKDF keys
    HKDF_HASH = hashes.SHA512()  # Hash function to use in key expansion


def srp_hkdf(key, salt, info, length=SRP_CRYPTO.HKDF_KEYLEN):
    """Expand an SRP shared secret into a key of ``length`` bytes."""
    hkdf = HKDF(
        algorithm=SRP_CRYPTO.HKDF_HASH,
        length=length,
        salt=salt,
        info=info,
        backend=CRYPTO_BACKEND,
    )
    return hkdf.derive(key)


class Digest:
    """The protocol hash ``H``.

    The protocol hashes text: hex strings joined together, or identity and
    password. Text is always encoded as UTF-8 before hashing.
    """

    def __init__(self, algorithm=None) -> None:
        self.algorithm = algorithm or SRP_CRYPTO.DIGEST()

    @property
    def digest_size(self) -> int:
        return self.algorithm.digest_size

    def digest(self, data: bytes) -> bytes:
        """Return the digest of ``data``."""
        ctx = hashes.Hash(self.algorithm, backend=CRYPTO_BACKEND)
        ctx.update(data)
        return ctx.finalize()

    def hash_text(self, text: str) -> bytes:
        return self.digest(text.encode("utf-8"))

    def hexdigest(self, text: str) -> str:
        """Digest of ``text`` as hex, two digits per byte."""
        return self.hash_text(text).hex()

    def long_digest(self, text: str) -> int:
        """Digest of ``text`` read as a big endian integer."""
        return int.from_bytes(self.hash_text(text), byteorder="big")
