# Ensures the project root is on sys.path so imports like `from harness...` work.
import sys
from pathlib import Path

import pytest

# tests/ -> repo root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

KIND_CODES = {"function": 0x00, "table": 0x01, "memory": 0x02, "global": 0x03, "tag": 0x04}


def encode_u32(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def encode_name(name: str) -> bytes:
    raw = name.encode("utf-8")
    return encode_u32(len(raw)) + raw


def section(section_id: int, payload: bytes) -> bytes:
    return bytes([section_id]) + encode_u32(len(payload)) + payload


def build_module(exports=(), custom: bytes = b"") -> bytes:
    """Build a minimal WebAssembly binary.

    exports is a sequence of names or (name, kind) pairs; kind defaults to
    "function".
    """
    module = b"\x00asm" + (1).to_bytes(4, "little")
    if custom:
        module += section(0, encode_name("producers") + custom)
    # type section with one () -> () signature
    module += section(1, encode_u32(1) + b"\x60\x00\x00")
    if exports:
        entries = b""
        for index, export in enumerate(exports):
            name, kind = (export, "function") if isinstance(export, str) else export
            entries += encode_name(name) + bytes([KIND_CODES[kind]]) + encode_u32(index)
        module += section(7, encode_u32(len(exports)) + entries)
    return module


@pytest.fixture
def wasm_bytes():
    """Factory building module bytes from export names."""
    return build_module


@pytest.fixture
def tool_dir(tmp_path):
    """A tool directory with an empty build/ subdirectory."""
    (tmp_path / "build").mkdir()
    return tmp_path


@pytest.fixture
def write_artifact(tool_dir):
    """Write build/debug.wasm exporting the given names."""

    def _write(exports=(), data: bytes | None = None) -> Path:
        path = tool_dir / "build" / "debug.wasm"
        path.write_bytes(build_module(exports) if data is None else data)
        return path

    return _write
