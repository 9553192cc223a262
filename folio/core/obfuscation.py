# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Obfuscation Cipher

A small SHA-512 keystream used to keep résumé contact details out of plain
sight in the committed input file. It is an obfuscation, not encryption.

The key state is SHA-512 of the passphrase, re-hashed 10,000 times. Each
byte is XORed with the low 7 bits of the first state byte, then the state
advances by one more SHA-512 round. Only the low 7 bits are used so ASCII
text stays ASCII.

Every call to pad() starts from the key state, so applying the cipher twice
with the same passphrase restores the input.
"""

import hashlib

_KEY_ROUNDS = 10000


class ObfsCipher:
    """XOR keystream cipher keyed by a passphrase."""

    __slots__ = ('state',)

    def __init__(self, passphrase: str) -> None:
        state = hashlib.sha512(passphrase.encode('utf-8')).digest()
        for _ in range(_KEY_ROUNDS):
            state = hashlib.sha512(state).digest()
        self.state = state

    def pad(self, data: bytes) -> bytes:
        """Obfuscate or restore *data*."""
        state = self.state
        out = bytearray(data)
        for i in range(len(out)):
            out[i] ^= state[0] & 0x7F
            state = hashlib.sha512(state).digest()
        return bytes(out)

    def pad_str(self, text: str) -> str:
        """Obfuscate or restore a string through its UTF-8 bytes.

        XOR can turn valid UTF-8 into invalid sequences; those bytes are
        carried as surrogate escapes so the transform stays reversible.
        """
        data = text.encode('utf-8', errors='surrogateescape')
        return self.pad(data).decode('utf-8', errors='surrogateescape')
