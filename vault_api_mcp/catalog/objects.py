"""Object record user action and multi-record workflow endpoints."""

from ..dynamic.models import APIEndpoint, APIParameter, BodyEncoding, HTTPMethod

OBJECT_NAME = APIParameter("object_name", "string", "The object name__v field value.")
OBJECT_RECORD_ID = APIParameter("object_record_id", "string", "The object record id field value.")
ACTION_NAME = APIParameter(
    "action_name", "string",
    "The name of the Objectaction or Objectlifecyclestateuseraction to initiate.",
)
WORKFLOW_NAME = APIParameter("workflow_name", "string", "The name of the multi-record workflow.")

ENDPOINTS = [
    APIEndpoint(
        name="retrieve_object_record_user_actions",
        path="/vobjects/{object_name}/{object_record_id}/actions",
        method=HTTPMethod.GET,
        description="Retrieve all available user actions for a specific object record in Veeva Vault.",
        action="retrieving object record user actions",
        parameters=[
            OBJECT_NAME,
            OBJECT_RECORD_ID,
            APIParameter("loc", "boolean", "When true, retrieves localized (translated) strings for the label.",
                         required=False, default=False),
        ],
    ),
    APIEndpoint(
        name="retrieve_object_user_actions_details",
        path="/vobjects/{object_name}/{object_record_id}/actions/{action_name}",
        method=HTTPMethod.GET,
        description="Retrieve details for a specific user action in Veeva Vault.",
        action="retrieving object user action details",
        parameters=[OBJECT_NAME, OBJECT_RECORD_ID, ACTION_NAME],
    ),
    APIEndpoint(
        name="initiate_object_action",
        path="/vobjects/{object_name}/{object_record_id}/actions/{action_name}",
        method=HTTPMethod.POST,
        description="Initiate an action on a specific object record in Veeva Vault.",
        action="initiating the object action",
        parameters=[
            OBJECT_NAME,
            OBJECT_RECORD_ID,
            ACTION_NAME,
            APIParameter("storyEventkey", "string", "The ID of the target Story Event object record.",
                         required=False),
        ],
        body_encoding=BodyEncoding.FORM,
    ),
    APIEndpoint(
        name="initiate_object_action_on_multiple_records",
        path="/vobjects/{object_name}/actions/{action_name}",
        method=HTTPMethod.POST,
        description="Initiate an object action on multiple records in Veeva Vault.",
        action="initiating the object action on multiple records",
        parameters=[
            OBJECT_NAME,
            ACTION_NAME,
            APIParameter("ids", "string",
                         "Comma separated list of object record ids on which to initiate the action."),
        ],
        body_encoding=BodyEncoding.FORM,
    ),
    APIEndpoint(
        name="retrieve_multi_record_workflows",
        path="/objects/objectworkflows/actions",
        method=HTTPMethod.GET,
        description="Retrieve all available multi-record workflows from Veeva Vault.",
        action="retrieving multi-record workflows",
    ),
    APIEndpoint(
        name="retrieve_multi_record_workflow_details",
        path="/objects/objectworkflows/actions/{workflow_name}",
        method=HTTPMethod.GET,
        description="Retrieve the fields required to initiate a specific multi-record workflow.",
        action="retrieving multi-record workflow details",
        parameters=[WORKFLOW_NAME],
    ),
    APIEndpoint(
        name="initiate_multi_record_workflow",
        path="/objects/objectworkflows/actions/{workflow_name}",
        method=HTTPMethod.POST,
        description="Initiate a multi-record workflow in Veeva Vault.",
        action="initiating the multi-record workflow",
        parameters=[
            WORKFLOW_NAME,
            APIParameter("contents__sys", "string",
                         "A comma-separated list of records in the format Object:{objectname}.{record_ID}."),
            APIParameter("description__sys", "string", "Description of the workflow."),
        ],
        body_encoding=BodyEncoding.FORM,
    ),
]
