"""Tests for the WebAssembly export reader."""

import pytest

from harness.wasm import ExportKind, WasmExport, WasmFormatError, read_exports

from conftest import encode_name, encode_u32, section

HEADER = b"\x00asm" + (1).to_bytes(4, "little")


class TestReadExports:
    """Test decoding of export sections."""

    def test_exports_in_declaration_order(self, wasm_bytes):
        exports = read_exports(wasm_bytes(["transfer", "balanceOf", "mint"]))

        assert [e.name for e in exports] == ["transfer", "balanceOf", "mint"]
        assert exports[1] == WasmExport(name="balanceOf", kind=ExportKind.FUNCTION, index=1)

    def test_export_kinds(self, wasm_bytes):
        exports = read_exports(wasm_bytes([("memory", "memory"), ("main", "function"), ("counter", "global")]))

        assert [e.kind for e in exports] == [ExportKind.MEMORY, ExportKind.FUNCTION, ExportKind.GLOBAL]

    def test_module_without_export_section(self, wasm_bytes):
        assert read_exports(wasm_bytes()) == []

    def test_header_only_module(self):
        assert read_exports(HEADER) == []

    def test_custom_sections_are_skipped(self, wasm_bytes):
        exports = read_exports(wasm_bytes(["run"], custom=b"\x01\x02\x03"))

        assert [e.name for e in exports] == ["run"]

    def test_multibyte_leb128_lengths(self, wasm_bytes):
        names = [f"export_{i:03d}" for i in range(200)]

        exports = read_exports(wasm_bytes(names))

        assert [e.name for e in exports] == names
        assert exports[-1].index == 199

    def test_utf8_names(self, wasm_bytes):
        assert [e.name for e in read_exports(wasm_bytes(["überweisen"]))] == ["überweisen"]


class TestMalformedModules:
    """Test rejection of malformed binaries."""

    def test_bad_magic(self):
        with pytest.raises(WasmFormatError, match="bad magic"):
            read_exports(b"\x7fELF" + (1).to_bytes(4, "little"))

    def test_unsupported_version(self):
        with pytest.raises(WasmFormatError, match="version"):
            read_exports(b"\x00asm" + (2).to_bytes(4, "little"))

    def test_truncated_header(self):
        with pytest.raises(WasmFormatError):
            read_exports(b"\x00as")

    def test_truncated_section(self):
        data = HEADER + bytes([7]) + encode_u32(50) + b"\x00"

        with pytest.raises(WasmFormatError, match="Unexpected end"):
            read_exports(data)

    def test_unknown_section_id(self):
        with pytest.raises(WasmFormatError, match="Unknown section"):
            read_exports(HEADER + section(42, b""))

    def test_unknown_export_kind(self):
        payload = encode_u32(1) + encode_name("x") + b"\x09" + encode_u32(0)

        with pytest.raises(WasmFormatError, match="Unknown export kind"):
            read_exports(HEADER + section(7, payload))

    def test_duplicate_export_names(self):
        entry = encode_name("mint") + b"\x00" + encode_u32(0)

        with pytest.raises(WasmFormatError, match="Duplicate export"):
            read_exports(HEADER + section(7, encode_u32(2) + entry + entry))

    def test_duplicate_export_sections(self):
        payload = encode_u32(0)

        with pytest.raises(WasmFormatError, match="more than one export section"):
            read_exports(HEADER + section(7, payload) + section(7, payload))

    def test_trailing_bytes_in_export_section(self):
        with pytest.raises(WasmFormatError, match="trailing bytes"):
            read_exports(HEADER + section(7, encode_u32(0) + b"\x00"))

    def test_overlong_leb128(self):
        data = HEADER + bytes([7]) + b"\x80\x80\x80\x80\x80\x00"

        with pytest.raises(WasmFormatError, match="too long"):
            read_exports(data)

    def test_invalid_utf8_name(self):
        payload = encode_u32(1) + encode_u32(2) + b"\xff\xfe" + b"\x00" + encode_u32(0)

        with pytest.raises(WasmFormatError, match="UTF-8"):
            read_exports(HEADER + section(7, payload))