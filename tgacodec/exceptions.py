# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for tgacodec

This module defines the errors raised by the TGA header model and
pixel codec. Every error is raised synchronously to the immediate
caller; nothing inside the codec retries or recovers.

Copyright 2025 DNAi inc.
"""


class TGACodecError(Exception):
    """
    Base exception for all tgacodec errors.
    
    All tgacodec exceptions inherit from this class, allowing
    catch-all error handling for any codec-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.
        
        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class TGAReadError(TGACodecError):
    """
    Raised when TGA data cannot be decoded.
    
    This exception is raised when:
    - The file cannot be opened or read
    - The header is malformed or unsupported
    - The pixel data is truncated or inconsistent with the header
    """
    pass


class TGAWriteError(TGACodecError):
    """
    Raised when TGA data cannot be encoded or written.
    
    This exception is raised when:
    - The pixel buffer does not match the requested geometry
    - The image ID field is too long
    - The output file cannot be written
    """
    pass


class MalformedHeader(TGAReadError):
    """
    Raised when the 18-byte header is short or describes an image
    this codec does not handle (anything other than 24-bit raw or
    RLE true-colour).
    """
    pass


class TruncatedData(TGAReadError):
    """Raised when the byte stream ends before the expected byte or pixel count."""
    pass


class OverrunPacket(TGAReadError):
    """Raised when an RLE packet declares more pixels than the image has left."""
    pass


class InvalidDimensions(TGAWriteError):
    """
    Raised at encode time when width x height does not match the pixel
    buffer length, or a dimension does not fit the 16-bit header field.
    """
    pass
