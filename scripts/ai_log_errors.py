class AiLogError(Exception):
    """Base for every failure that ends an ai_log run."""


class FormatError(AiLogError):
    """Log file cannot be split into a question and an answer."""


class ConfigError(AiLogError):
    """Required setting missing or invalid."""


class ExternalToolError(AiLogError):
    """The reformatter failed or wrote to its error stream."""

    def __init__(self, message, stderr="", returncode=None):
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


class NetworkError(AiLogError):
    """A Notion API call failed. Blocks appended before it stay on the page."""

    def __init__(self, message, status=None, body=None, appended=0):
        super().__init__(message)
        self.status = status
        self.body = body
        self.appended = appended
