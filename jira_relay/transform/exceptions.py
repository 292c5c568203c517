"""Transformation Exception Classes"""


class TransformError(Exception):
    """Base exception for webhook transformation"""
    pass


class ParseError(TransformError):
    """Raised in strict mode when a webhook payload cannot be decoded"""
    pass
