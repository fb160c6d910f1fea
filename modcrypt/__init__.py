"""Modular exponentiation, primality checks, toy ElGamal encryption and Diophantine solving."""

__version__ = "0.1.0"
__all__ = ["compare", "diophantine", "elgamal", "modexp", "primality"]