"""Limb-based arithmetic modulo 2^255 - 19 and modulo the Curve25519 group order."""

__version__ = "0.1.0"