class UploadRejectedError(ValueError):
    """Raised when an upload is refused before any text is extracted.

    The message is returned to the client verbatim as ``{"error": message}``.
    """


class UnsupportedFileTypeError(UploadRejectedError):
    """Raised when neither the content type nor the file extension is accepted"""


class FileTooLargeError(UploadRejectedError):
    """Raised when the upload exceeds the configured size limit"""


class MissingUploadError(UploadRejectedError):
    """Raised when the request carries no file"""


class ExtractionError(RuntimeError):
    """Raised when a PDF or DOCX file cannot be turned into text.

    The analyze route does not surface this to the client; it substitutes the
    placeholder text so a roast is still produced.
    """
