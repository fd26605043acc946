"""WebAssembly binary reader.

This module reads the export section of a compiled WebAssembly module.
It does not validate or instantiate the module: it decodes just enough of
the binary format (header, section framing, export entries) to report the
names the module exposes, in the order the module declares them.
"""

from dataclasses import dataclass
from enum import Enum

WASM_MAGIC = b"\x00asm"
WASM_VERSION = 1

CUSTOM_SECTION_ID = 0
EXPORT_SECTION_ID = 7
MAX_SECTION_ID = 13  # tag section (exception handling proposal)


class WasmFormatError(Exception):
    """Raised when a WebAssembly binary is malformed."""

    pass


class ExportKind(str, Enum):
    """Kind of entity an export refers to."""

    FUNCTION = "function"
    TABLE = "table"
    MEMORY = "memory"
    GLOBAL = "global"
    TAG = "tag"


_EXPORT_KIND_CODES = {
    0x00: ExportKind.FUNCTION,
    0x01: ExportKind.TABLE,
    0x02: ExportKind.MEMORY,
    0x03: ExportKind.GLOBAL,
    0x04: ExportKind.TAG,
}


@dataclass(frozen=True)
class WasmExport:
    """A single entry of the export section."""

    name: str
    kind: ExportKind
    index: int


class _ByteReader:
    """Cursor over a bounded slice of the module bytes."""

    def __init__(self, data: bytes, offset: int = 0, end: int | None = None):
        self.data = data
        self.offset = offset
        self.end = len(data) if end is None else end

    def at_end(self) -> bool:
        return self.offset >= self.end

    def read_byte(self) -> int:
        if self.offset >= self.end:
            raise WasmFormatError(f"Unexpected end of data at offset {self.offset}")
        value = self.data[self.offset]
        self.offset += 1
        return value

    def read_bytes(self, count: int) -> bytes:
        if self.offset + count > self.end:
            raise WasmFormatError(
                f"Unexpected end of data: need {count} bytes at offset {self.offset}, "
                f"{self.end - self.offset} available"
            )
        chunk = self.data[self.offset:self.offset + count]
        self.offset += count
        return chunk

    def read_u32(self) -> int:
        """Read an unsigned LEB128 integer of at most 32 bits."""
        start = self.offset
        result = 0
        shift = 0
        for _ in range(5):
            byte = self.read_byte()
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                if result > 0xFFFFFFFF:
                    raise WasmFormatError(f"LEB128 integer out of u32 range at offset {start}")
                return result
            shift += 7
        raise WasmFormatError(f"LEB128 integer too long at offset {start}")

    def read_name(self) -> str:
        length = self.read_u32()
        raw = self.read_bytes(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise WasmFormatError(f"Export name is not valid UTF-8: {raw!r}") from e


def _read_export_section(reader: _ByteReader) -> list[WasmExport]:
    exports = []
    seen = set()
    count = reader.read_u32()
    for _ in range(count):
        name = reader.read_name()
        kind_code = reader.read_byte()
        kind = _EXPORT_KIND_CODES.get(kind_code)
        if kind is None:
            raise WasmFormatError(f"Unknown export kind 0x{kind_code:02x} for export '{name}'")
        index = reader.read_u32()
        if name in seen:
            raise WasmFormatError(f"Duplicate export name: '{name}'")
        seen.add(name)
        exports.append(WasmExport(name=name, kind=kind, index=index))
    if not reader.at_end():
        raise WasmFormatError("Export section has trailing bytes")
    return exports


def read_exports(data: bytes) -> list[WasmExport]:
    """Read the exports declared by a WebAssembly binary module.

    Args:
        data: Raw module bytes

    Returns:
        Exports in declaration order (empty if the module has no export section)

    Raises:
        WasmFormatError: If the binary is malformed
    """
    reader = _ByteReader(data)
    if reader.read_bytes(4) != WASM_MAGIC:
        raise WasmFormatError("Not a WebAssembly module: bad magic number")
    version = int.from_bytes(reader.read_bytes(4), "little")
    if version != WASM_VERSION:
        raise WasmFormatError(f"Unsupported WebAssembly version: {version}")

    exports: list[WasmExport] | None = None
    while not reader.at_end():
        section_id = reader.read_byte()
        if section_id > MAX_SECTION_ID:
            raise WasmFormatError(f"Unknown section id {section_id} at offset {reader.offset - 1}")
        size = reader.read_u32()
        payload_start = reader.offset
        reader.read_bytes(size)

        if section_id == EXPORT_SECTION_ID:
            if exports is not None:
                raise WasmFormatError("Module has more than one export section")
            exports = _read_export_section(_ByteReader(data, payload_start, payload_start + size))

    return exports or []
