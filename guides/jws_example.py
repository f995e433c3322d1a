"""Example showing detached JWS signatures over canonical messages."""

import asyncio

from ecjose import Key
from ecjose.security import CanonicalMessage, JwsService, StaticKeyProvider


async def main():
    """Detached JWS example."""
    signer = Key.generate("P-384", kid="signer-2024")
    service = JwsService(StaticKeyProvider(signing_key=signer))

    message = CanonicalMessage(
        payload={"order_id": "ord-123", "amount": 42},
        headers={"content-type": "application/json"},
    )

    envelope = await service.sign(message)
    print(f"📋 Algorithm: {envelope.signature.algorithm}")
    print(f"🔗 Detached JWS: {envelope.signature.signature}")

    result = await service.verify(envelope)
    print(f"✅ Valid: {result.valid}")


if __name__ == "__main__":
    asyncio.run(main())
