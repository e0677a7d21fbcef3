"""
Blockpad — CBC Usage Example

Pads data, encrypts it with AES-256-CBC, decrypts it and removes the padding.
Arbitrary tail byte padding is used, the only padding that a padding oracle
can not exploit.
"""

import os
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from blockpad import BlockPad, PadAlgorithm

AES_BLOCK_SIZE = 16


def encrypt(key: bytes, iv: bytes, padder: BlockPad, clear_data: bytes) -> bytes:
    """Pad and encrypt. Only the last block is copied for padding."""
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    full_blocks, last_block = padder.pad_last_block(clear_data)
    return encryptor.update(full_blocks) + encryptor.update(last_block) + encryptor.finalize()


def decrypt(key: bytes, iv: bytes, padder: BlockPad, encrypted_data: bytes) -> bytes:
    """Decrypt and unpad."""
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded_data = decryptor.update(encrypted_data) + decryptor.finalize()
    return padder.unpad(padded_data)


def main():
    data = b"Beware the ides of march"

    print("=" * 50)
    print("  Blockpad — AES-256-CBC with padding")
    print("=" * 50)

    # A fresh key and a fresh IV for every encryption. Never hard-code either.
    key = os.urandom(32)

    for algorithm in PadAlgorithm:
        padder = BlockPad(algorithm, AES_BLOCK_SIZE)
        iv = os.urandom(AES_BLOCK_SIZE)

        encrypted = encrypt(key, iv, padder, data)
        decrypted = decrypt(key, iv, padder, encrypted)

        status = "OK" if decrypted == data else "MISMATCH"
        print(f"  [{status}] {padder.name}: {len(data)}B -> {len(encrypted)}B encrypted")


if __name__ == "__main__":
    main()
