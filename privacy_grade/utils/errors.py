"""
Error message extraction for log payloads.

URL parsing failures on tracker endpoints are not fatal: the
endpoint is treated as obscure and the reason is logged at debug
level.  This helper turns whatever was raised into the short
string that goes into that log entry.
"""


def get_error_message(error: BaseException | object) -> str:
    """
    Return a loggable message for *error*.

    ``ValueError`` from :func:`urllib.parse.urlsplit` (for example
    an unterminated ``[`` in an IPv6 host) often carries a message,
    but port errors can be empty, so the exception class name is
    used when the message is blank.  Non-exceptions yield
    ``"Unknown error"``.
    """
    if isinstance(error, Exception):
        return str(error) or type(error).__name__
    return "Unknown error"
