"""Tests for srpclient."""
import os

from srpclient import util
from srpclient.srp_crypto import Digest

IDENTITY = "alice"
PASSWORD = "correct-password"


class MockServer:
    """The server half of the handshake, on top of the built-in ``pow``."""

    def __init__(self, ctx, salt_hex, v, b=None):
        self.N = ctx.N
        self.g = ctx.g
        self.k = ctx.k
        self.digest = Digest(ctx.hashfunc)
        self.s = salt_hex
        self.v = v
        self.b = b or util.bytes_to_long(os.urandom(32))
        self.B = (self.k * self.v + pow(self.g, self.b, self.N)) % self.N

        self.Ah = None
        self.S = None
        self.Sh = None
        self.K = None

    def get_challenge(self):
        """Salt and B, base64 encoded."""
        return util.base64_of_hex(self.s), util.base64_of_long(self.B)

    def set_A(self, A_b64):
        self.Ah = util.hex_of_base64(A_b64)
        A = util.long_of_hex(self.Ah)
        u = self.digest.long_digest(self.Ah + util.hex_of_long(self.B))
        self.S = pow(A * pow(self.v, u, self.N), self.b, self.N)
        self.Sh = util.hex_of_long(self.S)
        self.K = self.digest.hash_text(self.Sh)

    def expected_M1(self):
        return self.digest.hexdigest(self.Ah + util.hex_of_long(self.B) + self.Sh)

    def get_proof(self, M1_b64):
        """M2 for the received M1, whether M1 checks out or not."""
        M1 = util.hex_of_bytes(util.base64_to_bytes(M1_b64))
        return util.base64_of_hex(self.digest.hexdigest(self.Ah + M1 + self.Sh))

    def verify(self, M1_b64):
        M1 = util.hex_of_bytes(util.base64_to_bytes(M1_b64))
        return self.get_proof(M1_b64) if M1 == self.expected_M1() else None
