from typing import Optional


class TeachifyAdminError(Exception):
    pass


class ConfigMissing(TeachifyAdminError):
    pass


class StoreUnavailable(TeachifyAdminError):
    pass


class StoreOperationFailed(TeachifyAdminError):
    pass


class InvalidAccountInput(TeachifyAdminError, ValueError):
    pass


class HealthCheckFailed(TeachifyAdminError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
