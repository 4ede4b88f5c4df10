from typing import Protocol


class CredentialVerifier(Protocol):
    def verify(self, authorization: str | None) -> bool: ...


class BearerSubstringVerifier:
    """Placeholder check: any authorization header mentioning ``Bearer`` passes."""

    marker = "Bearer"

    def verify(self, authorization: str | None) -> bool:
        if not authorization:
            return False
        return self.marker in authorization
