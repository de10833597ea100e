"""Borsh encoding for the registry program's arguments and accounts.

Covers the types the program uses: u8, bool, u32, u64, string, pubkey and
vectors of action policies. Integers are little-endian.
"""

import hashlib
import struct

from solders.pubkey import Pubkey  # type: ignore

from ..constants import U64_MAX
from ..types import ActionPolicy


def discriminator(namespace: str, name: str) -> bytes:
    """Anchor discriminator: first 8 bytes of sha256("<namespace>:<name>")."""
    return hashlib.sha256(f"{namespace}:{name}".encode()).digest()[:8]


def encode_u8(value: int) -> bytes:
    return struct.pack("<B", value)


def encode_bool(value: bool) -> bytes:
    return b"\x01" if value else b"\x00"


def encode_u32(value: int) -> bytes:
    return struct.pack("<I", value)


def encode_u64(value: int) -> bytes:
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"u64 out of range: {value}")
    return struct.pack("<Q", value)


def encode_string(value: str) -> bytes:
    raw = value.encode("utf-8")
    return encode_u32(len(raw)) + raw


def encode_pubkey(address: str) -> bytes:
    return bytes(Pubkey.from_string(address))


def encode_action(action: ActionPolicy) -> bytes:
    return (
        encode_string(action.name)
        + encode_u64(action.price)
        + encode_u8(action.fee_percent)
        + encode_bool(action.is_variable)
        + encode_bool(action.is_platform_action)
    )


def encode_actions(actions: list[ActionPolicy]) -> bytes:
    return encode_u32(len(actions)) + b"".join(encode_action(a) for a in actions)


class BorshReader:
    """Sequential reader over Borsh-encoded bytes."""

    def __init__(self, data: bytes, offset: int = 0):
        self._data = data
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    def _take(self, size: int) -> bytes:
        end = self._offset + size
        if end > len(self._data):
            raise ValueError(
                f"Unexpected end of data: need {size} bytes at offset {self._offset}"
            )
        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk

    def read_u8(self) -> int:
        return self._take(1)[0]

    def read_bool(self) -> bool:
        value = self.read_u8()
        if value > 1:
            raise ValueError(f"Invalid bool byte: {value}")
        return value == 1

    def read_u32(self) -> int:
        return struct.unpack("<I", self._take(4))[0]

    def read_u64(self) -> int:
        return struct.unpack("<Q", self._take(8))[0]

    def read_string(self) -> str:
        length = self.read_u32()
        return self._take(length).decode("utf-8")

    def read_pubkey(self) -> str:
        return str(Pubkey.from_bytes(self._take(32)))

    def read_action(self) -> ActionPolicy:
        return ActionPolicy(
            name=self.read_string(),
            price=self.read_u64(),
            fee_percent=self.read_u8(),
            is_variable=self.read_bool(),
            is_platform_action=self.read_bool(),
        )

    def read_actions(self) -> list[ActionPolicy]:
        count = self.read_u32()
        return [self.read_action() for _ in range(count)]
