"""
Flatten/Restore Codec

save writes the content of every file in the tree to one stream;
load reads one stream back into a single file.

The two are NOT inverses. The flattened stream holds file payloads only,
each followed by a newline, in depth-first child-list order. It carries
no names, no directory structure and no metadata, so it cannot rebuild a
tree. Restore overwrites exactly one file node with the whole stream.

Author: YSNRFD
Version: 1.0.0
"""

import io
from typing import IO, Iterator, Optional

from .node import Node
from memfs.exceptions import EmptySourceStreamError, StreamError
from memfs.logger import get_logger


_logger = get_logger('codec')


def iter_files(node: Node) -> Iterator[Node]:
    """Yield file nodes depth-first, in child-list order. Symlinks are skipped."""
    if node.is_file:
        yield node
        return

    for child in node.children:
        yield from iter_files(child)


def flatten(root: Node, stream: IO, encoding: str = 'utf-8') -> int:
    """
    Write every file's content plus a newline to `stream`.

    Args:
        root: Node to start from (the tree root for a full dump)
        stream: Binary or text stream, left open
        encoding: Used when `stream` is binary

    Returns:
        Number of files written
    """
    text_mode = isinstance(stream, io.TextIOBase)
    count = 0

    for node in iter_files(root):
        chunk = node.content + "\n"
        stream.write(chunk if text_mode else chunk.encode(encoding))
        count += 1

    _logger.debug("Flattened file contents", context={'files': count})
    return count


def restore(
    stream: IO,
    target: Node,
    encoding: str = 'utf-8',
    source: Optional[str] = None
) -> int:
    """
    Replace `target`'s content with everything left in `stream`.

    Args:
        stream: Binary or text stream, left open
        target: File node to overwrite
        encoding: Used when `stream` yields bytes
        source: Name of the stream for error reporting

    Returns:
        New size of the target in bytes

    Raises:
        EmptySourceStreamError: If the stream has no data
        StreamError: If binary data is not valid in `encoding`
        EncodingError: If text data cannot be encoded in the target encoding
    """
    data = stream.read()

    if isinstance(data, bytes):
        try:
            data = data.decode(encoding)
        except UnicodeDecodeError:
            raise StreamError(source or '<stream>', mode='decode')

    if not data:
        raise EmptySourceStreamError(source=source)

    size = target.write(data)
    _logger.debug(
        "Restored stream into node",
        context={'node': target.name, 'size': size}
    )
    return size
