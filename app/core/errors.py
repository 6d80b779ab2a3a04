# ============================================================================
# FILE: app/core/errors.py
# ============================================================================


class RhythmCloudError(Exception):
    """Base error rendered as a plain-text response"""
    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
        self.message = message


class AuthenticationError(RhythmCloudError):
    status_code = 401

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class AuthorizationError(RhythmCloudError):
    def __init__(self, message: str, status_code: int = 403):
        super().__init__(message)
        self.status_code = status_code


class UnknownProviderError(RhythmCloudError):
    status_code = 404

    def __init__(self, provider: str):
        super().__init__(f"Unknown auth provider: {provider}")
        self.provider = provider


class StorageError(RhythmCloudError):
    status_code = 500


class StorageUploadError(StorageError):
    def __init__(self, object_key: str, reason: str = "Upload failed"):
        super().__init__(f"Failed to upload {object_key}: {reason}")
        self.object_key = object_key
        self.reason = reason
