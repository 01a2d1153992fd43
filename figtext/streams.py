"""
figtext.streams - file stream tools

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import logging
from pathlib import Path


def get_bytesio(bytestring):
    """Workaround as our streams objects require a buffer."""
    return io.BufferedReader(io.BytesIO(bytestring))


class StreamBase:
    """Shared base for streams."""

    def __init__(self, stream, name=''):
        self._stream = stream
        self.name = name or get_name(stream)
        self._refcount = 0
        self.closed = False

    def __enter__(self):
        self._refcount += 1
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Ensure stream is closed."""
        self._refcount -= 1
        logging.debug('Exiting %r with reference count %d.', self, self._refcount)
        if not self._refcount:
            self.close()

    def __repr__(self):
        """String representation."""
        return (
            f"<{type(self).__name__} name='{self.name}'"
            f"{' [closed]' if self.closed else ''}>"
        )

    def close(self):
        if self._stream and not self._refcount:
            self._stream.close()
        self.closed = True


class StreamWrapper(StreamBase):
    """Wrapper object to emulate a single stream."""

    def __getattr__(self, attr):
        """Delegate undefined attributes to wrapped stream."""
        return getattr(self._stream, attr)

    def __iter__(self):
        # dunder methods not delegated
        return self._stream.__iter__()


class KeepOpen(StreamWrapper):
    """Wrapper to avoid closing wrapped stream."""

    def close(self):
        """Don't close underlying stream."""
        self.closed = True


class Stream(StreamWrapper):
    """Manage readable file resource."""

    def __init__(self, file, *, name=''):
        """
        Ensure file is a peekable binary stream, open or wrap if necessary.
            file: stream, string or path-like object
        """
        if not file:
            raise ValueError('No file name, path or stream provided.')
        if isinstance(file, (str, Path)):
            logging.debug("Opening file `%s` for reading.", file)
            name = name or str(file)
            file = io.open(Path(file), 'rb')
        else:
            # don't close externally provided stream
            file = KeepOpen(file)
        super().__init__(file, name=name)
        if not self._stream.readable():
            raise ValueError('Expected readable stream, got writable.')
        self._textstream = None
        self._ensure_binary()
        self._ensure_peekable()

    @classmethod
    def from_data(cls, data, **kwargs):
        """Stream on bytes data."""
        return cls(get_bytesio(data), **kwargs)

    @classmethod
    def from_string(cls, text, **kwargs):
        """Stream on string data."""
        return cls.from_data(text.encode('utf-8'), **kwargs)

    def _ensure_binary(self):
        """Ensure we have a binary stream."""
        # a text format can be read from a binary stream with a wrapper
        if not is_binary(self._stream):
            try:
                buffer = self._stream.buffer
            except AttributeError:
                # e.g. StringIO: no buffer available, so re-encode
                buffer = get_bytesio(self._stream.read().encode('utf-8'))
            logging.debug('Getting buffer %r from text stream %r.', buffer, self._stream)
            self._stream = KeepOpen(buffer)

    def _ensure_peekable(self):
        """Ensure we can look at leading bytes without consuming them."""
        if not hasattr(self._stream, 'peek'):
            # drain to buffer; note you can only do this once on the input stream!
            self._stream = get_bytesio(self._stream.read())

    def peek(self, size):
        """Return at least `size` bytes ahead without advancing, if available."""
        data = self._stream.peek(size)
        if len(data) < size:
            # peek may return fewer bytes than asked for before the buffer is full
            data = self._stream.peek()
        return data

    @property
    def text(self):
        """Wrap underlying binary stream with utf-8 wrapper."""
        if not self._textstream:
            self._textstream = io.TextIOWrapper(
                self._stream, encoding='utf-8-sig',
                # keep one character per undecodable byte
                # so that 8-bit fonts keep their column widths
                errors='replace',
            )
        return self._textstream

    def close(self):
        """Close stream, absorb errors."""
        self.closed = True
        if self._textstream:
            # detach so that closing the text wrapper leaves the buffer to us
            try:
                self._textstream.detach()
            except (ValueError, EnvironmentError):
                pass
        try:
            super().close()
        except EnvironmentError:
            pass


def is_binary(stream):
    """Check if stream is binary."""
    # read 0 bytes - the return type will tell us if this is a text or binary stream
    return isinstance(stream.read(0), bytes)


def get_name(stream):
    """Get stream name, if available."""
    try:
        return str(stream.name)
    except AttributeError:
        # not all streams have one (e.g. BytesIO)
        return ''
