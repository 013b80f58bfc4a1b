"""Constants for the 24-bit RGB TGA codec."""

HEADER_LENGTH = 18
HEADER_STRUCT = "<BBBHHBHHHHBB"

TYPE_UNCOMPRESSED_RGB = 2
TYPE_RLE_RGB = 10
SUPPORTED_TYPE_CODES = (TYPE_UNCOMPRESSED_RGB, TYPE_RLE_RGB)
SUPPORTED_BITS_PER_PIXEL = 24
BYTES_PER_PIXEL = SUPPORTED_BITS_PER_PIXEL // 8

# 8 zero bytes (extension + developer area offsets), signature, NUL
FOOTER_SIGNATURE = b"\x00" * 8 + b"TRUEVISION-XFILE." + b"\x00"
FOOTER_LENGTH = len(FOOTER_SIGNATURE)

RLE_PACKET_FLAG = 0x80  # high bit set -> run packet
RLE_COUNT_MASK = 0x7F   # count - 1
RLE_MAX_COUNT = 128

DESCRIPTOR_TOP_TO_BOTTOM = 0x20
DESCRIPTOR_RIGHT_TO_LEFT = 0x10

DEFAULT_CHUNK_SIZE = 64 * 1024
