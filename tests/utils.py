from mimesniff.defaults import ZIP_LOCAL_HEADER_SIG


def local_header(name: bytes, data: bytes = b"", *, size_field: int | None = None) -> bytes:
    """
    A stored ZIP entry: 30-byte local file header, name, data.

    The compressed-size field (offset 18) is written big-endian, which is how the Office
    package scan reads it. `size_field` overrides the value written there.
    """
    size = len(data) if size_field is None else size_field
    header = (
        ZIP_LOCAL_HEADER_SIG
        + b"\x14\x00"  # version needed
        + b"\x00\x00"  # flags
        + b"\x00\x00"  # stored
        + b"\x00\x00\x00\x00"  # mod time, mod date
        + b"\x00\x00\x00\x00"  # crc-32
        + size.to_bytes(4, "big")
        + len(data).to_bytes(4, "little")
        + len(name).to_bytes(2, "little")
        + b"\x00\x00"  # extra field length
    )
    assert len(header) == 30
    return header + name + data


def zip_entries(*entries: tuple[bytes, bytes]) -> bytes:
    return b"".join(local_header(name, data) for name, data in entries)


CONTENT_TYPES = (b"[Content_Types].xml", b'<?xml version="1.0"?><Types/>')
ROOT_RELS = (b"_rels/.rels", b'<?xml version="1.0"?><Relationships/>')
CORE_PROPS = (b"docProps/core.xml", b"<cp:coreProperties/>")
APP_PROPS = (b"docProps/app.xml", b"<Properties/>")
