"""Audit trail endpoints."""

from ..dynamic.models import APIEndpoint, APIParameter, HTTPMethod

AUDIT_TRAIL_TYPE = APIParameter(
    "audit_trail_type", "string",
    "The name of the audit type (document_audit_trail, object_audit_trail, etc).",
)


def _date(name, which):
    return APIParameter(name, "string",
                        f"Specify {which} date to retrieve audit information in YYYY-MM-DDTHH:MM:SSZ format.",
                        required=False)


ENDPOINTS = [
    APIEndpoint(
        name="retrieve_audit_types",
        path="/metadata/audittrail",
        method=HTTPMethod.GET,
        description="Retrieve all available audit types you have permission to access.",
        action="retrieving audit types",
    ),
    APIEndpoint(
        name="retrieve_audit_metadata",
        path="/metadata/audittrail/{audit_trail_type}",
        method=HTTPMethod.GET,
        description="Retrieve all fields and their metadata for a specified audit trail type.",
        action="retrieving audit metadata",
        parameters=[AUDIT_TRAIL_TYPE],
    ),
    APIEndpoint(
        name="retrieve_audit_details",
        path="/audittrail/{audit_trail_type}",
        method=HTTPMethod.GET,
        description="Retrieve audit details for a specific audit type from Veeva Vault.",
        action="retrieving audit details",
        parameters=[
            AUDIT_TRAIL_TYPE,
            _date("start_date", "a start"),
            _date("end_date", "an end"),
            APIParameter("all_dates", "boolean", "Set to true to request audit information for all dates.",
                         required=False),
            APIParameter("format_result", "string", "Set to csv to request a downloadable CSV file of audit details.",
                         required=False),
            APIParameter("limit", "integer", "Maximum number of histories per page in the response (1-1000).",
                         required=False),
            APIParameter("offset", "integer", "Amount of offset from the entry returned for pagination.",
                         required=False),
            APIParameter("objects", "string", "A comma-separated list of object names to retrieve audit details for.",
                         required=False),
            APIParameter("events", "string", "A comma-separated list of audit events to retrieve audit details for.",
                         required=False),
        ],
    ),
    APIEndpoint(
        name="retrieve_audit_history",
        path="/vobjects/{object_name}/{object_record_id}/audittrail",
        method=HTTPMethod.GET,
        description="Retrieve complete audit history for a single object record in Veeva Vault.",
        action="retrieving audit history",
        parameters=[
            APIParameter("object_name", "string", "The object name__v field value."),
            APIParameter("object_record_id", "string", "The object record id field value."),
            _date("start_date", "a start"),
            _date("end_date", "an end"),
            APIParameter("format_result", "string", "Set to csv to request a CSV file of the audit history.",
                         required=False),
            APIParameter("limit", "integer", "Maximum number of histories per page in the response (1-1000).",
                         required=False),
            APIParameter("offset", "integer", "Amount of offset from the entry returned for pagination.",
                         required=False),
            APIParameter("events", "string",
                         "Comma-separated list of one or more audit events to retrieve their audit history.",
                         required=False),
        ],
    ),
]
