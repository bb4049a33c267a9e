"""
Crypto Service - Secret-at-rest encryption using Fernet.

Seals Backlog passwords and API keys before they are written to the
job property store.
"""

from pathlib import Path
from typing import Optional

from cryptography.fernet import Fernet

from backlog_link.domain.value_objects import Secret


class CryptoService:
    """
    Cryptographic service for secrets at rest.

    Uses Fernet symmetric encryption from the cryptography library.
    The encryption key is stored locally in a separate file.
    """

    def __init__(self, key_path: Path) -> None:
        """
        Initialize the crypto service.

        Args:
            key_path: Path to store/load the encryption key.
        """
        self.key_path = key_path
        self._fernet: Optional[Fernet] = None

    def initialize(self) -> None:
        """Initialize or load the encryption key."""
        if self.key_path.exists():
            key = self.key_path.read_bytes()
        else:
            key = Fernet.generate_key()
            self.key_path.parent.mkdir(parents=True, exist_ok=True)
            self.key_path.write_bytes(key)
            # Restrict file permissions (Unix only)
            try:
                self.key_path.chmod(0o600)
            except OSError:
                pass  # Windows doesn't support chmod

        self._fernet = Fernet(key)

    @property
    def fernet(self) -> Fernet:
        """Get the Fernet instance."""
        if not self._fernet:
            raise RuntimeError("CryptoService not initialized. Call initialize() first.")
        return self._fernet

    def encrypt(self, data: str) -> str:
        """
        Encrypt a string.

        Args:
            data: Plain text to encrypt.

        Returns:
            Base64-encoded encrypted string.
        """
        encrypted = self.fernet.encrypt(data.encode("utf-8"))
        return encrypted.decode("utf-8")

    def decrypt(self, encrypted_data: str) -> str:
        """
        Decrypt a string.

        Raises:
            InvalidToken: If decryption fails (wrong key or corrupted data).
        """
        decrypted = self.fernet.decrypt(encrypted_data.encode("utf-8"))
        return decrypted.decode("utf-8")

    def seal(self, secret: Secret) -> str:
        """Encrypt a secret for storage; the empty secret is stored as ""."""
        if not secret:
            return ""
        return self.encrypt(secret.reveal())

    def unseal(self, sealed: Optional[str]) -> Secret:
        """
        Restore a secret sealed by ``seal``.

        Raises:
            InvalidToken: If the stored token cannot be decrypted.
        """
        if not sealed:
            return Secret()
        return Secret.from_string(self.decrypt(sealed))
