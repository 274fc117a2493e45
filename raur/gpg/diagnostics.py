"""
makepkg failure diagnostics
Recognizes source signatures that could not be verified because the signing
key is missing from the user's keyring, and suggests how to fix it.
"""

import string
from typing import Optional

# makepkg prints this (under LC_ALL=C) when validpgpkeys checks fail
PGP_FAILURE_MARKER = "One or more PGP signatures could not be verified"

# Shown when the marker is present but no key id could be picked out
KEY_PLACEHOLDER = "<KEY>"

MIN_KEY_ID_LENGTH = 16

HEX_DIGITS = frozenset(string.hexdigits)


def _is_hex(value: str) -> bool:
    return bool(value) and all(char in HEX_DIGITS for char in value)


def extract_missing_key(stderr: str) -> Optional[str]:
    """
    Find the id of the unknown signing key in makepkg error output.

    Only the first line mentioning both "key" and "unknown" is examined,
    e.g. "FAILED (unknown public key ABCDEF0123456789AB)". Its whitespace
    separated words are checked left to right and the first one that is
    either at least 16 hex digits, or at least 16 hex digits followed by a
    closing parenthesis, is returned without the parenthesis.
    """
    line = next(
        (line for line in stderr.splitlines() if "key" in line and "unknown" in line),
        None,
    )
    if line is None:
        return None

    for word in line.split():
        if len(word) >= MIN_KEY_ID_LENGTH and _is_hex(word):
            return word

        if len(word) >= MIN_KEY_ID_LENGTH + 1 and word.endswith(")"):
            trimmed = word.rstrip(")")
            if _is_hex(trimmed):
                return trimmed

    return None


def remediation_hint(pkg_name: str, key_id: Optional[str] = None) -> str:
    """Two ways out: import the key, or build without verifying signatures"""
    return (
        "Try running:\n"
        f"    A. `gpg --recv-keys {key_id or KEY_PLACEHOLDER}`\n"
        f"    B. `raur --skip-pgp-check install {pkg_name}`"
    )


def diagnose_build_failure(stderr: str, pkg_name: str) -> Optional[str]:
    """
    Explain a failed makepkg run, if the failure is one we recognize

    Returns:
        Multi-line advice for a PGP verification failure, otherwise None
    """
    if PGP_FAILURE_MARKER not in stderr:
        return None

    return (
        "PGP error! You might need to import the missing GPG key manually or skip PGP check\n"
        + remediation_hint(pkg_name, extract_missing_key(stderr))
    )
