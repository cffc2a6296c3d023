"""
aura_weaver/seeds.py
Deterministic seed hashing

Do NOT use Python's built-in hash() here - it is salted per process.
Hashes must match across runs, platforms and other implementations.
"""

import hashlib


def seed_hash(seed: str) -> int:
    """
    Reduce a mood seed to a stable unsigned integer.

    Position-weighted sum of code points, so "calm" and "malc" differ.
    Iterates code points (not UTF-16 units or bytes).

    Example:
        seed_hash("ab") -> 97 * 1 + 98 * 2 = 293
    """
    return sum((i + 1) * ord(ch) for i, ch in enumerate(seed))


def artifact_fingerprint(data: bytes) -> str:
    """SHA-256 fingerprint of an encoded artifact."""
    return f"sha256:{hashlib.sha256(data).hexdigest()}"
