"""Simple example showing ES256 signing and verification."""

import asyncio

from ecjose import Key, VerificationFailed, get_algorithm


async def main():
    """Basic sign/verify example."""
    # Generate a key on the curve ES256 requires
    key = Key.generate("P-256", kid="example-key")

    es256 = get_algorithm("ES256")
    print(f"🔧 ES256 served by backend: {es256.backend}")

    # Sign
    result = await es256.sign(key, b"hello world")
    print(f"✍️  Signature ({len(result.mac)} bytes): {result.mac.hex()}")

    # Verify with the public half only
    verified = await es256.verify(key.public_key(), b"hello world", result.mac)
    print(f"✅ Valid: {verified.valid}")

    # Tampered data fails loudly
    try:
        await es256.verify(key.public_key(), b"hello world!", result.mac)
    except VerificationFailed:
        print("❌ Tampered message rejected")


if __name__ == "__main__":
    asyncio.run(main())
