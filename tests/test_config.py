import os
import unittest
from unittest import mock

from vault_api_mcp.config import DEFAULT_API_VERSION, VaultConnection


class TestVaultConnection(unittest.TestCase):

    def test_from_env(self):
        env = {
            "VAULT_DNS": "myvault.veevavault.com",
            "VAULT_SESSION_ID": "SESSION",
            "VAULT_CLIENT_ID": "acme-tools",
            "VAULT_UPLOAD_DIR": "/srv/vault-uploads",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            connection = VaultConnection.from_env()

        self.assertEqual(connection.vault_dns, "myvault.veevavault.com")
        self.assertEqual(connection.session_id, "SESSION")
        self.assertEqual(connection.client_id, "acme-tools")
        self.assertEqual(connection.api_version, DEFAULT_API_VERSION)
        self.assertEqual(connection.upload_dir, "/srv/vault-uploads")
        self.assertEqual(connection.missing_fields(), [])

    def test_missing_fields(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            connection = VaultConnection.from_env()

        self.assertEqual(connection.missing_fields(), ["vault_dns", "session_id", "client_id"])

    def test_api_root(self):
        connection = VaultConnection(vault_dns="myvault.veevavault.com", api_version="25.2")

        self.assertEqual(connection.api_root(), "https://myvault.veevavault.com/api/25.2")
        self.assertEqual(connection.api_root(versioned=False), "https://myvault.veevavault.com/api")

    def test_repr_hides_session(self):
        connection = VaultConnection(vault_dns="v", session_id="SECRET-SESSION", client_id="c")

        self.assertNotIn("SECRET-SESSION", repr(connection))


if __name__ == '__main__':
    unittest.main()
