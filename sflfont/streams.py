"""
sflfont.streams - descriptor source handling

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import os
import logging
from contextlib import contextmanager

from .errors import SourceUnavailable


def get_bytesio(bytestring):
    """Workaround as our streams objects require a buffer."""
    return io.BufferedReader(io.BytesIO(bytestring))

def get_stringio(string):
    """Workaround as our streams objects require a buffer."""
    return io.TextIOWrapper(get_bytesio(string.encode('utf-8')), encoding='utf-8')


@contextmanager
def open_source(source):
    """
    Open a descriptor source for reading.

    source: path (str or path-like), binary stream or text stream
    Paths are opened here and closed on exit; streams are left open.
    """
    if isinstance(source, (str, os.PathLike)):
        try:
            file = open(source, 'rb')
        except OSError as e:
            raise SourceUnavailable(os.fspath(source), e.strerror or str(e)) from e
        stream = Stream(file, name=os.fspath(source))
    else:
        try:
            stream = KeepOpen(source)
        except (ValueError, OSError) as e:
            # closed or write-only streams
            raise SourceUnavailable(get_name(source), str(e)) from e
    with stream:
        yield stream


class Stream:
    """Read text from a binary or text stream, closing it on exit."""

    def __init__(self, file, *, name=''):
        """
        Wrap a readable binary or text stream.

        file: stream or file-like object
        name: name to report in errors (default: stream name)
        """
        if file is None:
            raise ValueError('No stream provided.')
        if isinstance(file, (str, os.PathLike)):
            raise ValueError('Argument `file` must be a Python file or stream-like object.')
        if not file.readable():
            raise ValueError('Expected readable stream, got writable.')
        self._stream = file
        self.name = name or get_name(file)
        self.closed = False
        # our own text wrapper, if we made one
        self._wrapper = None
        if is_binary(file):
            self._textstream = None
        else:
            self._textstream = file

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Ensure stream is closed."""
        self.close()

    def __repr__(self):
        """String representation."""
        return (
            f"<{type(self).__name__} name='{self.name}'"
            f"{' [closed]' if self.closed else ''}>"
        )

    @property
    def text(self):
        """Return underlying text stream or wrap binary stream with utf-8 wrapper."""
        if not self._textstream:
            # strict decoding: undecodable input is not a descriptor
            self._wrapper = io.TextIOWrapper(
                self._stream, encoding='utf-8-sig', errors='strict'
            )
            self._textstream = self._wrapper
        return self._textstream

    def read_text(self):
        """Read the full text content."""
        try:
            return self.text.read()
        except UnicodeDecodeError as e:
            raise SourceUnavailable(self.name, f'not valid UTF-8 text ({e})') from e
        except OSError as e:
            raise SourceUnavailable(self.name, str(e)) from e

    def close(self):
        """Close stream, absorb errors."""
        logging.debug('Closing %r', self)
        self.closed = True
        try:
            if self._wrapper:
                # closes the wrapped stream too
                self._wrapper.close()
            else:
                self._stream.close()
        except EnvironmentError:
            pass


class KeepOpen(Stream):
    """Wrapper to avoid closing wrapped stream."""

    def close(self):
        """Don't close underlying stream."""
        if self._wrapper and not self._wrapper.closed:
            # closing the wrapper would close the caller's stream
            self._wrapper.detach()
        self._wrapper = None
        self.closed = True


###############################################################################

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
