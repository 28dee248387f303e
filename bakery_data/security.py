from typing import Optional, Protocol

from werkzeug.security import check_password_hash, generate_password_hash


class PasswordHasher(Protocol):
    def encode(self, plaintext: str) -> str: ...


class WerkzeugPasswordHasher:
    """Salted hashes via werkzeug; output differs between calls for the same input."""

    def __init__(self, method: Optional[str] = None):
        self.method = method

    def encode(self, plaintext: str) -> str:
        if self.method is None:
            return generate_password_hash(plaintext)
        return generate_password_hash(plaintext, method=self.method)

    def check(self, password_hash: str, plaintext: str) -> bool:
        return check_password_hash(password_hash, plaintext)
