"""
Exceptions raised while analyzing a PE file and rendering its report.
"""


class PinfoError(Exception):
    """Base class for every error pinfo raises on purpose."""

    def __init__(self, message, code=None, details=None):
        super().__init__(message)
        self.message = message
        self.code = code or "UNKNOWN_ERROR"
        self.details = details or {}

    def __str__(self):
        return f"[{self.code}] {self.message}"

    def to_dict(self):
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details
        }


class ConfigurationError(PinfoError):
    """A setting could not be read or has the wrong type."""

    def __init__(self, message, config_key=None):
        super().__init__(
            message,
            code="CONFIG_ERROR",
            details={'config_key': config_key} if config_key else {}
        )


class AnalysisError(PinfoError):
    """Fatal problem: the report for this file cannot be produced."""

    def __init__(self, message, file_path=None, code="ANALYSIS_ERROR"):
        super().__init__(message, code=code, details={'file_path': file_path})
        self.file_path = file_path


class PEParseError(AnalysisError):
    """The content is not a valid PE image."""

    def __init__(self, message, file_path=None):
        super().__init__(message, file_path, code="PE_PARSE_ERROR")


class HashError(AnalysisError):
    """Reading the file failed while computing digests."""

    def __init__(self, message, file_path=None):
        super().__init__(message, file_path, code="HASH_ERROR")


class FileSizeError(AnalysisError):
    """The file size could not be read from the filesystem."""

    def __init__(self, message, file_path=None):
        super().__init__(message, file_path, code="FILE_SIZE_ERROR")


class ClassifierError(PinfoError):
    """The classifier gave no usable verdict. Never fatal."""

    def __init__(self, message, command=None, output=None):
        super().__init__(
            message,
            code="CLASSIFIER_ERROR",
            details={'command': command, 'output': output}
        )


class TemplateError(PinfoError):
    """The HTML template could not be loaded or filled in."""

    def __init__(self, message, template_path=None):
        super().__init__(
            message,
            code="TEMPLATE_ERROR",
            details={'template_path': template_path}
        )
        self.template_path = template_path
