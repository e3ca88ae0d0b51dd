"""Error taxonomy shared by the provisioner, gateway and HTTP layer."""

from __future__ import annotations

from enum import Enum


class StoreErrorCode(str, Enum):
    CAPABILITY_UNAVAILABLE = "capability_unavailable"
    DUPLICATE = "duplicate"
    STORE = "store"


class ColprovError(Exception):
    code: str = "error"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class InvalidInput(ColprovError):
    """Rejected request; raised before any store access."""

    code = "invalid_input"


class StoreError(ColprovError):
    """Failure reported by the data store gateway."""

    def __init__(self, message: str, code: StoreErrorCode = StoreErrorCode.STORE) -> None:
        super().__init__(message, code.value)
        self.store_code = code

    @property
    def capability_unavailable(self) -> bool:
        return self.store_code is StoreErrorCode.CAPABILITY_UNAVAILABLE

    @property
    def duplicate(self) -> bool:
        return self.store_code is StoreErrorCode.DUPLICATE
