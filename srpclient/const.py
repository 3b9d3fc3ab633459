"""This module contains constants used by other modules."""
MAJOR_VERSION = 1
MINOR_VERSION = 0
PATCH_VERSION = 0
__short_version__ = f"{MAJOR_VERSION}.{MINOR_VERSION}"
__version__ = f"{__short_version__}.{PATCH_VERSION}"
REQUIRED_PYTHON_VER = (3, 8)

# ### Misc ###
DEFAULT_SERVER_SALT = "serverSalt"  # Mixed into salts when the server gives none
SALT_RANDOM_BYTES = 32
PRIVATE_KEY_RANDOM_BYTES = 256  # 2048 bits drawn for the ephemeral key "a"


# ### Protocol failures ###
ERR_BAD_SERVER_PUBLIC = "invalid server public value"
ERR_BAD_SCRAMBLER = "invalid scrambling parameter"
ERR_BAD_SERVER_PROOF = "server credential mismatch"
