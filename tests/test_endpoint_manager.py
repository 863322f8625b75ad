import os
import tempfile
import unittest

from vault_stub import CLIENT_ID, SESSION_ID, VaultStub

from vault_api_mcp.catalog import build_endpoint_manager
from vault_api_mcp.config import VaultConnection


class TestEndpointInvocation(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.vault = VaultStub()
        await self.vault.start()
        upload_dir = tempfile.TemporaryDirectory()
        self.addCleanup(upload_dir.cleanup)
        self.upload_dir = upload_dir.name
        self.manager = build_endpoint_manager(self.vault.connection(upload_dir=self.upload_dir))

    async def asyncTearDown(self):
        await self.vault.close()

    async def test_json_response_returned_unmodified(self):
        """A 2xx JSON body comes back as the result data untouched."""
        payload = {
            "responseStatus": "SUCCESS",
            "picklistValues": [{"name": "north_america__c", "label": "North America"}],
        }
        self.vault.respond("GET", "/api/25.2/objects/picklists/region__c", json_body=payload)

        result = await self.manager.invoke("retrieve_picklist_values", {"picklist_name": "region__c"})

        self.assertTrue(result["success"])
        self.assertEqual(result["status_code"], 200)
        self.assertEqual(result["data"], payload)
        self.assertEqual(len(self.vault.requests), 1)

    async def test_fixed_headers_are_sent(self):
        self.vault.respond("GET", "/api/25.2/services/queues", json_body={"data": []})

        await self.manager.invoke("retrieve_all_queues", {})

        headers = self.vault.requests[0].headers
        self.assertEqual(headers["Authorization"], SESSION_ID)
        self.assertEqual(headers["Accept"], "application/json")
        self.assertEqual(headers["X-VaultAPI-ClientID"], CLIENT_ID)

    async def test_absent_optional_query_params_are_omitted(self):
        self.vault.respond("GET", "/api/25.2/scim/v2/Users", json_body={"Resources": []},
                           content_type="application/scim+json")

        result = await self.manager.invoke("retrieve_all_users", {"filter": 'userName eq "jdoe"', "count": 10})

        self.assertTrue(result["success"])
        self.assertEqual(result["data"], {"Resources": []})
        self.assertEqual(self.vault.requests[0].query, [("filter", 'userName eq "jdoe"'), ("count", "10")])
        self.assertEqual(self.vault.requests[0].headers["Accept"], "application/scim+json")

    async def test_declared_default_is_sent(self):
        self.vault.respond("GET", "/api/25.2/logs/code/debug", json_body={"data": []})

        await self.manager.invoke("retrieve_all_debug_logs", {})

        self.assertEqual(self.vault.requests[0].query, [("include_inactive", "false")])

    async def test_false_flag_without_default_is_omitted(self):
        self.vault.respond("GET", "/api/25.2/audittrail/login_audit_trail", json_body={"data": []})

        await self.manager.invoke("retrieve_audit_details", {"audit_trail_type": "login_audit_trail", "all_dates": False})
        await self.manager.invoke("retrieve_audit_details", {"audit_trail_type": "login_audit_trail", "all_dates": True})

        self.assertEqual(self.vault.requests[0].query, [])
        self.assertEqual(self.vault.requests[1].query, [("all_dates", "true")])

    async def test_explicit_false_with_declared_default_is_sent(self):
        self.vault.respond("GET", "/api/25.2/logs/code/debug", json_body={"data": []})

        await self.manager.invoke("retrieve_all_debug_logs", {"include_inactive": False})

        self.assertEqual(self.vault.requests[0].query, [("include_inactive", "false")])

    async def test_tool_function_applies_signature_defaults(self):
        self.vault.respond("GET", "/api/25.2/logs/code/debug", json_body={"data": []})
        tool = self.manager.get_tools()["retrieve_all_debug_logs"]

        result = await tool.func(user_id="61603")

        self.assertTrue(result["success"])
        self.assertEqual(self.vault.requests[0].query, [("user_id", "61603"), ("include_inactive", "false")])

    async def test_remote_error_embeds_body_verbatim(self):
        error_body = '{"responseStatus": "FAILURE", "errors": [{"type": "INVALID_DATA", "message": "Bad picklist"}]}'
        self.vault.respond("GET", "/api/25.2/objects/picklists/nope__c", status=400, body=error_body.encode())

        result = await self.manager.invoke("retrieve_picklist_values", {"picklist_name": "nope__c"})

        self.assertFalse(result["success"])
        self.assertEqual(result["error_type"], "remote")
        self.assertEqual(result["status_code"], 400)
        self.assertIn(error_body, result["message"])
        self.assertTrue(result["message"].startswith("An error occurred while retrieving picklist values"))
        self.assertEqual(result["data"]["errors"][0]["type"], "INVALID_DATA")

    async def test_remote_error_with_plain_text_body(self):
        self.vault.respond("PUT", "/api/25.2/services/queues/q__c/actions/reset", status=503,
                           body=b"Service Unavailable", content_type="text/plain")

        result = await self.manager.invoke("reset_queue", {"queue_name": "q__c"})

        self.assertEqual(result["error_type"], "remote")
        self.assertEqual(result["data"], "Service Unavailable")
        self.assertIn("Service Unavailable", result["message"])

    async def test_remote_error_with_undecodable_body(self):
        self.vault.respond("GET", "/api/25.2/services/queues", status=500, body=b"\xff\xfe bad", content_type="text/plain")

        result = await self.manager.invoke("retrieve_all_queues", {})

        self.assertEqual(result["error_type"], "remote")
        self.assertEqual(result["status_code"], 500)
        self.assertIn(" bad", result["message"])
        self.assertTrue(result["message"].startswith("An error occurred while "))

    async def test_missing_required_argument_sends_nothing(self):
        result = await self.manager.invoke("retrieve_picklist_values", {})

        self.assertFalse(result["success"])
        self.assertEqual(result["error_type"], "validation")
        self.assertEqual(result["missing"], ["picklist_name"])
        self.assertIn("picklist_name", result["message"])
        self.assertEqual(self.vault.requests, [])

    async def test_missing_connection_setting_sends_nothing(self):
        result = await self.manager.invoke(
            "retrieve_all_picklists", {}, connection=self.vault.connection(session_id="")
        )

        self.assertEqual(result["error_type"], "validation")
        self.assertEqual(result["missing"], ["session_id"])
        self.assertEqual(self.vault.requests, [])

    async def test_unknown_endpoint(self):
        result = await self.manager.invoke("retrieve_everything", {})

        self.assertFalse(result["success"])
        self.assertEqual(result["error_type"], "validation")
        self.assertIn("not found", result["message"])

    async def test_connection_override_applies_to_one_call(self):
        self.vault.respond("GET", "/api/24.3/objects/picklists", json_body={"picklists": []})

        result = await self.manager.invoke(
            "retrieve_all_picklists", {}, connection=self.vault.connection(api_version="24.3", session_id="other")
        )

        self.assertTrue(result["success"])
        self.assertEqual(self.vault.requests[0].headers["Authorization"], "other")
        self.assertEqual(self.manager.connection.api_version, "25.2")

    async def test_binary_download_returns_raw_bytes(self):
        archive = b"PK\x03\x04\x14\x00\x00\x00binary-log"
        self.vault.respond("GET", "/api/25.2/logs/code/debug/0LD000000000101/files", body=archive,
                           content_type="application/json")

        result = await self.manager.invoke("download_debug_log_files", {"id": "0LD000000000101"})

        self.assertTrue(result["success"])
        self.assertEqual(result["data"], archive)
        self.assertIsInstance(result["data"], bytes)

    async def test_profiler_results_download(self):
        self.vault.respond("GET", "/api/25.2/code/profiler/baseline__c/results", body=b"\x00\x01csv",
                           content_type="application/octet-stream")

        result = await self.manager.invoke("download_profiling_session_results", {"session_name": "baseline__c"})

        self.assertEqual(result["data"], b"\x00\x01csv")

    async def test_confirmation_endpoint_returns_literal_message(self):
        self.vault.respond("DELETE", "/api/25.2/objects/sandbox/snapshot/snap__c", body=b"")

        result = await self.manager.invoke("delete_snapshot", {"api_name": "snap__c"})

        self.assertTrue(result["success"])
        self.assertIsNone(result["data"])
        self.assertEqual(result["message"], "Snapshot deleted successfully.")

    async def test_non_json_success_body_is_returned_as_text(self):
        mdl = "RECREATE Picklist color__c (label('Color'));"
        self.vault.respond("GET", "/api/mdl/components/Picklist.color__c", body=mdl.encode(),
                           content_type="text/plain")

        result = await self.manager.invoke("retrieve_component_record_mdl",
                                           {"componentTypeAndRecordName": "Picklist.color__c"})

        self.assertTrue(result["success"])
        self.assertEqual(result["data"], mdl)

    async def test_form_body_repeats_array_values(self):
        self.vault.respond("POST", "/api/25.2/objects/picklists/color__c", json_body={"responseStatus": "SUCCESS"})

        await self.manager.invoke("create_picklist_values", {"picklist_name": "color__c", "values": ["Red", "Blue"]})

        request = self.vault.requests[0]
        self.assertEqual(request.headers["Content-Type"], "application/x-www-form-urlencoded")
        self.assertEqual(request.form, [("values[]", "Red"), ("values[]", "Blue")])

    async def test_form_body_stringifies_booleans_and_skips_absent_fields(self):
        self.vault.respond("POST", "/api/25.2/objects/sandbox/snapshot", json_body={"responseStatus": "SUCCESS"})

        await self.manager.invoke("create_sandbox_snapshot", {"source_sandbox": "Sandbox A", "name": "Snap 1",
                                                              "include_data": True})

        self.assertEqual(self.vault.requests[0].form,
                         [("source_sandbox", "Sandbox A"), ("name", "Snap 1"), ("include_data", "true")])

    async def test_multipart_body(self):
        self.vault.respond("POST", "/api/25.2/logs/code/debug", json_body={"responseStatus": "SUCCESS"})

        await self.manager.invoke("create_debug_log", {"name": "Trigger debug", "user_id": "61603"})

        request = self.vault.requests[0]
        self.assertTrue(request.headers["Content-Type"].startswith("multipart/form-data"))
        self.assertEqual(request.form, [("name", "Trigger debug"), ("user_id", "61603"), ("log_level", "all__sys")])

    async def test_upload_content_file(self):
        self.vault.respond("POST", "/api/mdl/files", json_body={"responseStatus": "SUCCESS"})
        with open(os.path.join(self.upload_dir, "color.mdl"), "wb") as handle:
            handle.write(b"vault content")

        result = await self.manager.invoke("upload_content_file", {"file": "color.mdl"})

        self.assertTrue(result["success"])
        self.assertEqual(self.vault.requests[0].form, [("file", ("color.mdl", b"vault content"))])

    async def test_upload_accepts_absolute_path_inside_upload_directory(self):
        self.vault.respond("POST", "/api/mdl/files", json_body={"responseStatus": "SUCCESS"})
        path = os.path.join(self.upload_dir, "notes.txt")
        with open(path, "wb") as handle:
            handle.write(b"notes")

        result = await self.manager.invoke("upload_content_file", {"file": path})

        self.assertTrue(result["success"])
        self.assertEqual(self.vault.requests[0].form, [("file", ("notes.txt", b"notes"))])

    async def test_upload_of_missing_file_is_a_validation_error(self):
        result = await self.manager.invoke("upload_content_file", {"file": "missing.txt"})

        self.assertEqual(result["error_type"], "validation")
        self.assertEqual(self.vault.requests, [])

    async def test_upload_outside_upload_directory_is_rejected(self):
        with tempfile.NamedTemporaryFile(suffix=".txt", delete=False) as handle:
            handle.write(b"private")
        self.addCleanup(os.unlink, handle.name)

        for path in (handle.name, os.path.join("..", os.path.basename(handle.name))):
            with self.subTest(path=path):
                result = await self.manager.invoke("upload_content_file", {"file": path})

                self.assertEqual(result["error_type"], "validation")
                self.assertIn("outside the upload directory", result["message"])
        self.assertEqual(self.vault.requests, [])

    async def test_upload_without_upload_directory_is_rejected(self):
        with open(os.path.join(self.upload_dir, "color.mdl"), "wb") as handle:
            handle.write(b"vault content")

        result = await self.manager.invoke(
            "upload_content_file", {"file": os.path.join(self.upload_dir, "color.mdl")},
            connection=self.vault.connection(),
        )

        self.assertEqual(result["error_type"], "validation")
        self.assertIn("no upload directory is configured", result["message"])
        self.assertEqual(self.vault.requests, [])

    async def test_scim_user_creation_body(self):
        self.vault.respond("POST", "/api/25.2/scim/v2/Users", status=201, json_body={"id": "61603"},
                           content_type="application/scim+json")
        user = {
            "userName": "jdoe@example.com",
            "emails": [{"value": "jdoe@example.com", "type": "work"}],
            "name": {"familyName": "Doe", "givenName": "Jo"},
            "preferredLanguage": "en",
            "locale": "en_US",
            "timezone": "America/Los_Angeles",
            "securityProfile": "system_admin__v",
        }

        result = await self.manager.invoke("create_user_scim", {"user": user})

        self.assertTrue(result["success"])
        self.assertEqual(result["status_code"], 201)
        request = self.vault.requests[0]
        self.assertEqual(request.headers["Content-Type"], "application/scim+json")
        body = request.json()
        self.assertEqual(body["schemas"], [
            "urn:ietf:params:scim:schemas:extension:veevavault:2.0:User",
            "urn:ietf:params:scim:schemas:core:2.0:User",
        ])
        self.assertEqual(
            body["urn:ietf:params:scim:schemas:extension:veevavault:2.0:User"],
            {"securityProfile": {"value": "system_admin__v"}},
        )
        self.assertEqual(body["name"], {"familyName": "Doe", "givenName": "Jo"})

    async def test_scim_user_creation_with_incomplete_user(self):
        result = await self.manager.invoke("create_user_scim", {"user": {"userName": "jdoe@example.com"}})

        self.assertEqual(result["error_type"], "validation")
        self.assertIn("securityProfile", result["message"])
        self.assertEqual(self.vault.requests, [])

    async def test_transport_failure_is_normalized(self):
        result = await self.manager.invoke(
            "retrieve_all_picklists", {}, connection=VaultConnection(
                vault_dns="127.0.0.1:1", session_id=SESSION_ID, client_id=CLIENT_ID, scheme="http"
            )
        )

        self.assertFalse(result["success"])
        self.assertEqual(result["error_type"], "transport")
        self.assertTrue(result["message"].startswith("An error occurred while retrieving picklists"))


if __name__ == '__main__':
    unittest.main()
