"""
Custom exceptions for the Bridge Upload SDK.
Provides specific error types for model construction and response decoding.
"""


class BridgeSDKException(Exception):
    """Base exception for all SDK errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidEntityException(BridgeSDKException):
    """Raised when a model fails validation during construction."""
    pass
