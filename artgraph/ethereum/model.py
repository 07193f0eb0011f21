"""
Ethereum domain model
"""

from typing import NewType

# Ethereum account address in canonical form: lower-case hex, '0x' prefixed, 40 hex digits (20 bytes)
Address = NewType("Address", str)

# ERC-721 token ID (uint256)
TokenId = NewType("TokenId", int)

# uint256 amount denominated in wei
Wei = NewType("Wei", int)

# block timestamp in unix seconds
BlockTimestamp = NewType("BlockTimestamp", int)

ZERO_ADDRESS = Address("0x" + "00" * 20)

UINT256_MAX = 2**256 - 1


def to_address(value: str | bytes) -> Address:
    """
    Converts a raw address into its canonical form.

    :param value: 20 raw bytes, or a hex string with or without the '0x' prefix
    :exception ValueError: if the value is not a 20-byte address
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 20:
            raise ValueError(f"address must be 20 bytes: {value!r}")
        return Address("0x" + bytes(value).hex())

    hex_digits = value[2:] if value[:2].lower() == "0x" else value
    if len(hex_digits) != 40:
        raise ValueError(f"address must be 40 hex digits: {value}")
    try:
        int(hex_digits, 16)
    except ValueError as err:
        raise ValueError(f"address is not hex encoded: {value}") from err
    return Address("0x" + hex_digits.lower())


def is_zero_address(address: Address) -> bool:
    """
    The zero address is the sentinel for "no account", i.e., a mint when it is the sender and a burn when it
    is the recipient of a transfer.
    """
    return address == ZERO_ADDRESS


def address_bytes(address: Address) -> bytes:
    """
    :return: the raw 20-byte value
    """
    return bytes.fromhex(address[2:])
