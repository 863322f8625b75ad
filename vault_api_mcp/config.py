"""Connection settings for the Vault API.

Values are taken from the environment when the server starts, and a caller
can hand any invoker its own VaultConnection instead.
"""

import os
from dataclasses import dataclass
from typing import List

DEFAULT_API_VERSION = "25.2"
CLIENT_ID_HEADER = "X-VaultAPI-ClientID"


@dataclass(frozen=True)
class VaultConnection:
    """Host and credentials shared by every endpoint call

    Args:
        vault_dns: Vault host name, e.g. myvault.veevavault.com
        session_id: Session token sent as the Authorization header
        client_id: Integration identifier sent as X-VaultAPI-ClientID
        api_version: Version segment of versioned API paths
        scheme: URL scheme (https outside of tests)
        upload_dir: Local directory that file uploads are confined to; uploads
            are refused when it is empty
    """
    vault_dns: str = ""
    session_id: str = ""
    client_id: str = ""
    api_version: str = DEFAULT_API_VERSION
    scheme: str = "https"
    upload_dir: str = ""

    @classmethod
    def from_env(cls) -> "VaultConnection":
        return cls(
            vault_dns=os.getenv("VAULT_DNS", ""),
            session_id=os.getenv("VAULT_SESSION_ID", ""),
            client_id=os.getenv("VAULT_CLIENT_ID", ""),
            api_version=os.getenv("VAULT_API_VERSION", DEFAULT_API_VERSION),
            upload_dir=os.getenv("VAULT_UPLOAD_DIR", ""),
        )

    def missing_fields(self) -> List[str]:
        return [
            name for name in ("vault_dns", "session_id", "client_id", "api_version")
            if not getattr(self, name)
        ]

    def api_root(self, versioned: bool = True) -> str:
        root = f"{self.scheme}://{self.vault_dns}/api"
        return f"{root}/{self.api_version}" if versioned else root

    def __repr__(self) -> str:
        # session ids never end up in logs
        return (f"VaultConnection(vault_dns={self.vault_dns!r}, client_id={self.client_id!r}, "
                f"api_version={self.api_version!r}, scheme={self.scheme!r}, "
                f"upload_dir={self.upload_dir!r})")


__all__ = ["VaultConnection", "DEFAULT_API_VERSION", "CLIENT_ID_HEADER"]
