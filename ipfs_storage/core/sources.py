"""
File sources accepted by the upload path.

A source is a filesystem path, a byte buffer, or a blob-like object with a
``read()`` method (sync or async). Whatever the form, it is resolved to the
complete file contents in memory; nothing is streamed.
"""

import asyncio
import inspect
import os
from pathlib import Path
from typing import Any, Union

from ipfs_storage.core.errors import InvalidInput

FileSource = Union[str, os.PathLike, bytes, bytearray, memoryview, Any]


def is_blob_like(source: Any) -> bool:
    return callable(getattr(source, "read", None))


async def read_file_source(source: FileSource) -> bytes:
    """
    Resolve a file source to bytes.

    Args:
        source: Path, byte buffer or blob-like object

    Returns:
        The full contents as bytes

    Raises:
        InvalidInput: If the source type is not supported
        OSError: If the path cannot be read
    """
    if isinstance(source, (str, os.PathLike)):
        return await asyncio.to_thread(Path(source).read_bytes)

    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)

    if is_blob_like(source):
        if inspect.iscoroutinefunction(source.read):
            data = await source.read()
        else:
            data = await asyncio.to_thread(source.read)
        if inspect.isawaitable(data):
            data = await data
        if isinstance(data, str):
            return data.encode("utf-8")
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        raise InvalidInput(
            f"Blob read() returned {type(data).__name__}, expected bytes or str"
        )

    raise InvalidInput(
        f"Unsupported file source {type(source).__name__}: "
        "expected a path, a byte buffer or an object with read()"
    )
