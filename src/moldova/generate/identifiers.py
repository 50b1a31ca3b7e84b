"""Random version 4 UUIDs drawn from the secure source."""

from __future__ import annotations

from .base import CachedGenerator, Command, Options, RenderContext


def uuid4_from_bytes(raw: bytes) -> str:
    """Shape 16 random bytes as a version 4, variant 2 UUID string."""

    if len(raw) != 16:
        raise ValueError("a UUID needs exactly 16 bytes")
    b = bytearray(raw)
    b[6] = (b[6] & 0x0F) | 0x40
    b[8] = (b[8] & ~0x40 & 0xFF) | 0x80
    h = b.hex()
    return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"


class GuidGenerator(CachedGenerator[str]):
    """``{guid}``: a canonical 8-4-4-4-12 hex identifier."""

    command = Command.GUID

    def generate(self, options: Options, context: RenderContext) -> str:
        return uuid4_from_bytes(context.sources.secure.randbytes(16))


__all__ = ["GuidGenerator", "uuid4_from_bytes"]
