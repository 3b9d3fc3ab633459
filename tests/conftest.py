"""Test fixtures and mocks."""
import pytest

from srpclient.params import RFC5054_2048, derive_k, get_srp_context
from srpclient.srp import Client

from . import IDENTITY, PASSWORD, MockServer


@pytest.fixture(scope="session")
def srp_context():
    N = int(RFC5054_2048["N"])
    g = int(RFC5054_2048["g"])
    k_hex = format(derive_k(N, g), "x")
    return get_srp_context(RFC5054_2048["N"], RFC5054_2048["g"], k_hex)


@pytest.fixture
def registration(srp_context):
    """Salt (hex) and verifier registered for alice."""
    registrar = Client(srp_context)
    salt_hex = registrar.generate_random_salt()
    verifier = registrar.generate_verifier(salt_hex, IDENTITY, PASSWORD)
    return salt_hex, verifier


@pytest.fixture
def server(srp_context, registration):
    salt_hex, verifier = registration
    return MockServer(srp_context, salt_hex, verifier)


@pytest.fixture
def client(srp_context):
    return Client(srp_context)
