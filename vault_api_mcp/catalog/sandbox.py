"""Sandbox vault and sandbox snapshot endpoints."""

from ..dynamic.models import APIEndpoint, APIParameter, BodyEncoding, HTTPMethod, ResponseType

SNAPSHOT_API_NAME = APIParameter("api_name", "string", "The Vault API name of the sandbox snapshot.")

ENDPOINTS = [
    APIEndpoint(
        name="retrieve_sandbox_snapshots",
        path="/objects/sandbox/snapshot",
        method=HTTPMethod.GET,
        description="Retrieve sandbox snapshots from Veeva Vault.",
        action="retrieving sandbox snapshots",
    ),
    APIEndpoint(
        name="create_sandbox_snapshot",
        path="/objects/sandbox/snapshot",
        method=HTTPMethod.POST,
        description="Create a new snapshot for the indicated sandbox Vault.",
        action="creating the sandbox snapshot",
        parameters=[
            APIParameter("source_sandbox", "string", "The name of the sandbox Vault to take a snapshot of."),
            APIParameter("name", "string", "The name of the new snapshot."),
            APIParameter("description", "string", "The description of the new snapshot.", required=False),
            APIParameter("include_data", "boolean", "Set to true to include data as part of the snapshot.",
                         required=False, default=False),
        ],
        body_encoding=BodyEncoding.FORM,
    ),
    APIEndpoint(
        name="delete_snapshot",
        path="/objects/sandbox/snapshot/{api_name}",
        method=HTTPMethod.DELETE,
        description="Delete a sandbox snapshot in Veeva Vault.",
        action="deleting the snapshot",
        parameters=[SNAPSHOT_API_NAME],
        response_type=ResponseType.CONFIRMATION,
        confirmation_message="Snapshot deleted successfully.",
    ),
    APIEndpoint(
        name="update_sandbox_snapshot",
        path="/objects/sandbox/snapshot/{api_name}/actions/update",
        method=HTTPMethod.POST,
        description="Recreate a sandbox snapshot from the current state of its source sandbox.",
        action="updating the sandbox snapshot",
        parameters=[SNAPSHOT_API_NAME],
    ),
    APIEndpoint(
        name="upgrade_sandbox_snapshot",
        path="/objects/sandbox/snapshot/{api_name}/actions/upgrade",
        method=HTTPMethod.POST,
        description="Upgrade a sandbox snapshot to match the release version of its source sandbox.",
        action="upgrading the sandbox snapshot",
        parameters=[SNAPSHOT_API_NAME],
    ),
    APIEndpoint(
        name="build_production_vault",
        path="/objects/sandbox/actions/buildproduction",
        method=HTTPMethod.POST,
        description="Build a production vault in Veeva Vault from a source sandbox.",
        action="building the production vault",
        parameters=[APIParameter("source", "string", "The name of the source sandbox vault to build from.")],
        body_encoding=BodyEncoding.FORM,
    ),
    APIEndpoint(
        name="promote_to_production",
        path="/objects/sandbox/actions/promoteproduction",
        method=HTTPMethod.POST,
        description="Promote a built pre-production vault to a production vault in Veeva Vault.",
        action="promoting the vault to production",
        parameters=[APIParameter("name", "string", "The name of the pre-production vault to promote.")],
        body_encoding=BodyEncoding.FORM,
    ),
]
