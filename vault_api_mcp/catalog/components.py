"""Configuration migration endpoints: component records, MDL and raw objects.

MDL endpoints live directly below /api and are not versioned.
"""

import mimetypes
from pathlib import Path

from ..dynamic.models import (
    APIEndpoint,
    APIParameter,
    BodyEncoding,
    FilePart,
    HTTPMethod,
    ParamLocation,
)


def upload_file_fields(args):
    path = Path(args["file"]).expanduser()
    content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return [("file", FilePart(filename=path.name, path=path, content_type=content_type))]


ENDPOINTS = [
    APIEndpoint(
        name="retrieve_component_records",
        path="/configuration/{component_type}",
        method=HTTPMethod.GET,
        description="Retrieve all records for a specific component type from Veeva Vault.",
        action="retrieving component records",
        parameters=[APIParameter("component_type", "string", "The component type name (Picklist, Docfield, etc.).")],
    ),
    APIEndpoint(
        name="retrieve_component_record",
        path="/configuration/{componentTypeAndRecordName}",
        method=HTTPMethod.GET,
        description="Retrieve metadata of a specific component record from Veeva Vault as JSON.",
        action="retrieving the component record",
        parameters=[
            APIParameter("componentTypeAndRecordName", "string",
                         "The component type name followed by the name of the record (e.g., `Picklist.color__c`)."),
            APIParameter("loc", "boolean", "When localized strings are available, set to true to retrieve them.",
                         required=False),
        ],
    ),
    APIEndpoint(
        name="retrieve_component_record_mdl",
        path="/mdl/components/{componentTypeAndRecordName}",
        method=HTTPMethod.GET,
        description="Retrieve a component record from Veeva Vault as MDL.",
        action="retrieving the component record MDL",
        parameters=[
            APIParameter("componentTypeAndRecordName", "string",
                         "The component type name followed by the name of the record (e.g., `Picklist.color__c`)."),
        ],
        versioned=False,
    ),
    APIEndpoint(
        name="retrieve_content_file",
        path="/mdl/components/{component_type_and_record_name}/files",
        method=HTTPMethod.GET,
        description="Retrieve the content file of a specified component from Veeva Vault.",
        action="retrieving the content file",
        parameters=[
            APIParameter("component_type_and_record_name", "string",
                         "The component type and record name in the format `{Componenttype}.{record_name}`."),
        ],
        versioned=False,
    ),
    APIEndpoint(
        name="upload_content_file",
        path="/mdl/files",
        method=HTTPMethod.POST,
        description="Upload a content file to Veeva Vault for use by a subsequent MDL command.",
        action="uploading the file",
        parameters=[
            APIParameter("file", "string", "Path of the file to upload, relative to the server upload directory.", location=ParamLocation.BODY),
        ],
        body_encoding=BodyEncoding.MULTIPART,
        body_builder=upload_file_fields,
        versioned=False,
    ),
    APIEndpoint(
        name="execute_mdl_async",
        path="/mdl/execute_async",
        method=HTTPMethod.POST,
        description="Execute an MDL script asynchronously on Veeva Vault.",
        action="executing the MDL script",
        versioned=False,
    ),
    APIEndpoint(
        name="retrieve_async_mdl_results",
        path="/mdl/execute_async/{job_id}/results",
        method=HTTPMethod.GET,
        description="Retrieve asynchronous MDL script results from Veeva Vault.",
        action="retrieving asynchronous MDL script results",
        parameters=[APIParameter("job_id", "string", "The job ID for which to retrieve results.")],
        versioned=False,
    ),
    APIEndpoint(
        name="cancel_raw_object_deployment",
        path="/metadata/vobjects/{object_name}/actions/canceldeployment",
        method=HTTPMethod.POST,
        description="Cancel a deployment of configuration changes to a raw object in Veeva Vault.",
        action="cancelling the raw object deployment",
        parameters=[APIParameter("object_name", "string",
                                 "The name of the raw object for which to cancel the deployment.")],
    ),
]
