# Client Side SRP-6a implementation

import hmac
import logging
import os
import time
from typing import NamedTuple, Optional

from . import util
from .const import (
    DEFAULT_SERVER_SALT,
    ERR_BAD_SCRAMBLER,
    ERR_BAD_SERVER_PROOF,
    ERR_BAD_SERVER_PUBLIC,
    PRIVATE_KEY_RANDOM_BYTES,
    SALT_RANDOM_BYTES,
)
from .modmath import ZERO, mod_pow, to_zn
from .srp_crypto import SRP_CRYPTO, Digest, srp_hkdf

logger = logging.getLogger(__name__)


# a    Secret ephemeral value (long)
# A    Public ephemeral value (long)
# Ah   Public ephemeral value (canonical hex)
# B    Server public ephemeral value (long)
# g    A generator modulo N (long)
# I    Username (str)
# k    Multiplier parameter (long)
# K    Hashed session key (bytes)
# M1   Client evidence (hex)
# M2   Server evidence (hex)
# N    Large safe prime (long)
# p    Cleartext Password (str)
# s    Salt (canonical hex)
# S    Premaster secret (long)
# u    Random scrambling parameter (long)
# v    Password verifier (long)
# x    Private key derived from s, I and p (long)


class SRPStateError(RuntimeError):
    """Raised when a session is driven out of order or reused."""


class SessionState:
    CREATED = "created"
    STEP1_COMPLETE = "step1_complete"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


class SRPProof(NamedTuple):
    """What the client sends after step 1, both values base64."""

    A: str
    M1: str


class SRPResult:
    """Outcome of a protocol step: a value or the reason it was rejected."""

    __slots__ = ("is_ok", "value", "err_msg")

    def __init__(self, is_ok, value=None, err_msg=None):
        self.is_ok = is_ok
        self.value = value
        self.err_msg = err_msg

    @classmethod
    def ok(cls, value):
        return cls(True, value=value)

    @classmethod
    def fail(cls, err_msg):
        return cls(False, err_msg=err_msg)

    def __bool__(self):
        return self.is_ok

    def __repr__(self):
        if self.is_ok:
            return "<SRPResult ok>"
        return f"<SRPResult failed: {self.err_msg}>"


class _Handshake(NamedTuple):
    """Values only step 1 produces and step 2 consumes."""

    Ah: str
    M1: str
    S: int
    K: bytes


class Client:
    """One login or registration attempt.

    A session runs ``step1`` then ``step2`` exactly once. After any failure it
    has to be thrown away and a new one created.
    """

    def __init__(self, ctx, randfunc=None):
        """
        :param ctx: The agreed group parameters.
        :type ctx: srpclient.params.SRPContext

        :param randfunc: Source of secure random bytes, ``os.urandom`` by default.
        :type randfunc: callable
        """
        self.N = ctx.N
        self.g = ctx.g
        self.k = ctx.k
        self.digest = Digest(ctx.hashfunc)
        self.randfunc = randfunc or os.urandom

        self.state = SessionState.CREATED
        self.I = None  # noqa: E741
        self.p = None
        self.s = None
        self.v = None
        self.B = None
        self._handshake: Optional[_Handshake] = None

    def _hash_hex(self, text):
        return self.digest.hexdigest(text)

    def _hash_long(self, text):
        return self.digest.long_digest(text)

    def generate_random_salt(self, server_context=None):
        """Return a fresh salt as canonical hex.

        The salt is the digest of the current time, ``server_context`` and
        random bytes, so it is as long as the digest.
        """
        if server_context is None:
            server_context = DEFAULT_SERVER_SALT
        seed = "{}:{}:{}".format(
            time.ctime(),
            server_context,
            util.random_hex(SALT_RANDOM_BYTES, self.randfunc),
        )
        return util.trim_hex_zeroes(self._hash_hex(seed))

    def derive_x(self, salt_hex, identity, password):
        """x = H(s | H(I ":" p)) mod N, the inner hash being uppercased with s."""
        inner = self._hash_hex(identity + ":" + password)
        return self._hash_long((salt_hex + inner).upper()) % self.N

    def generate_verifier(self, salt_hex, identity, password):
        """Return the verifier ``v = g^x mod N`` to register with the server.

        The session is left untouched, so the same inputs always give the same
        verifier.
        """
        x = self.derive_x(salt_hex, identity, password)
        return mod_pow(self.g, x, self.N)

    def _generate_private_key(self):
        """Draw the ephemeral secret ``a``.

        Random bytes are mixed with a hash of identity, salt and clock, and a
        zero draw is rejected.
        """
        a = ZERO
        while a == ZERO:
            random_part = util.bytes_to_long(self.randfunc(PRIVATE_KEY_RANDOM_BYTES))
            one_time = self._hash_long(
                "{}:{}:{}".format(self.I, self.s, int(time.time() * 1000))
            )
            a = (one_time + random_part) % self.N
        return a

    def _compute_u(self, Ah, Bh):
        return self._hash_long(Ah + Bh)

    def compute_session_key(self, x, u, a, B=None, v=None):
        """Client premaster secret ``S = (B - k*v)^(a + u*x) mod N``.

        ``B`` and ``v`` default to the values held by this session.
        """
        B = self.B if B is None else B
        v = self.v if v is None else v
        if B is None or v is None:
            raise SRPStateError("B and v are required to compute the session key")
        exp = a + u * x
        base = to_zn(B - self.k * v, self.N)
        return mod_pow(base, exp, self.N)

    def _fail(self, err_msg):
        self.state = SessionState.FAILED
        logger.warning("SRP authentication aborted: %s", err_msg)
        return SRPResult.fail(err_msg)

    def step1(self, identity, password, salt_b64, server_public_b64):
        """Answer the server challenge ``(s, B)``.

        Malformed input raises and leaves the session ``FAILED``.

        :param identity: The user identity I.
        :type identity: str

        :param password: The cleartext password.
        :type password: str

        :param salt_b64: The salt sent by the server, base64.
        :type salt_b64: str

        :param server_public_b64: The server public value B, base64.
        :type server_public_b64: str

        :return: A result holding a :class:`SRPProof` to send to the server.
        :rtype: SRPResult
        """
        if self.state != SessionState.CREATED:
            raise SRPStateError(f"step1 called on a session in state {self.state}")
        logger.debug("SRP step [1/2]")
        try:
            return self._step1(identity, password, salt_b64, server_public_b64)
        except Exception:
            self.state = SessionState.FAILED
            raise

    def _step1(self, identity, password, salt_b64, server_public_b64):
        self.I = identity  # noqa: E741
        self.p = password
        self.s = util.hex_of_base64(salt_b64)

        a = self._generate_private_key()
        A = mod_pow(self.g, a, self.N)
        Ah = util.hex_of_long(A)

        self.B = util.long_of_base64(server_public_b64)
        if to_zn(self.B, self.N) == ZERO:
            return self._fail(ERR_BAD_SERVER_PUBLIC)

        x = self.derive_x(self.s, identity, password)
        Bh = util.hex_of_long(self.B)
        u = self._compute_u(Ah, Bh)
        if u == ZERO:
            return self._fail(ERR_BAD_SCRAMBLER)

        # Recomputed from x so that s, I and p are checked against each other.
        self.v = mod_pow(self.g, x, self.N)

        S = self.compute_session_key(x, u, a)
        Sh = util.hex_of_long(S)
        K = self.digest.hash_text(Sh)
        M1 = self._hash_hex(Ah + Bh + Sh)

        self._handshake = _Handshake(Ah, M1, S, K)
        self.state = SessionState.STEP1_COMPLETE
        return SRPResult.ok(SRPProof(util.base64_of_hex(Ah), util.base64_of_hex(M1)))

    def step2(self, server_proof_b64):
        """Check the server evidence M2 and return the premaster secret ``S``.

        M2 has to be exactly one digest long. Malformed input raises and leaves
        the session ``FAILED``.

        :param server_proof_b64: M2 as sent by the server, base64.
        :type server_proof_b64: str

        :raises SRPStateError: If step 1 did not complete on this session.

        :return: A result holding ``S``, the raw premaster secret.
        :rtype: SRPResult
        """
        if self.state != SessionState.STEP1_COMPLETE:
            raise SRPStateError(f"step2 called on a session in state {self.state}")
        logger.debug("SRP step [2/2]")
        try:
            received = util.base64_to_bytes(server_proof_b64)
        except Exception:
            self.state = SessionState.FAILED
            raise

        hs = self._handshake
        expected = self.digest.hash_text(hs.Ah + hs.M1 + util.hex_of_long(hs.S))
        # compare_digest is False for a length mismatch too.
        if not hmac.compare_digest(expected, received):
            return self._fail(ERR_BAD_SERVER_PROOF)

        self.state = SessionState.AUTHENTICATED
        return SRPResult.ok(hs.S)

    def get_session_key(self, salt=None, info=None, length=SRP_CRYPTO.HKDF_KEYLEN):
        """Return ``K = H(S)`` once the server has been authenticated.

        With ``info`` given, ``K`` is expanded with HKDF into a key of
        ``length`` bytes bound to ``salt`` and ``info``.
        """
        if self.state != SessionState.AUTHENTICATED:
            raise SRPStateError("Session is not authenticated")
        if info is None:
            return self._handshake.K
        return srp_hkdf(self._handshake.K, salt, info, length)
