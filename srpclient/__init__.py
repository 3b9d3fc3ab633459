"""Client side of the SRP-6a password authenticated key exchange."""
