"""Debug log and SDK request profiler endpoints."""

from ..dynamic.models import APIEndpoint, APIParameter, BodyEncoding, HTTPMethod, ResponseType

DEBUG_LOG_ID = APIParameter("id", "string", "The ID of the debug log.")
SESSION_NAME = APIParameter("session_name", "string", "The name of the profiling session, for example baseline__c.")

DEBUG_LOG_ENDPOINTS = [
    APIEndpoint(
        name="retrieve_all_debug_logs",
        path="/logs/code/debug",
        method=HTTPMethod.GET,
        description="Retrieve all debug logs from Veeva Vault.",
        action="retrieving debug logs",
        parameters=[
            APIParameter("user_id", "string", "Filter results to retrieve the debug log for this user ID only.",
                         required=False),
            APIParameter("include_inactive", "boolean",
                         "Set to `true` to include inactive debug log sessions in the response.",
                         required=False, default=False),
        ],
    ),
    APIEndpoint(
        name="retrieve_single_debug_log",
        path="/logs/code/debug/{id}",
        method=HTTPMethod.GET,
        description="Retrieve details about a single debug log from Veeva Vault.",
        action="retrieving the debug log",
        parameters=[DEBUG_LOG_ID],
    ),
    APIEndpoint(
        name="create_debug_log",
        path="/logs/code/debug",
        method=HTTPMethod.POST,
        description="Create a new debug log session for a user in Veeva Vault.",
        action="creating the debug log",
        parameters=[
            APIParameter("name", "string", "The UI-friendly name for the debug log (max 128 characters)."),
            APIParameter("user_id", "string", "The ID of the user who will trigger entries into this debug log."),
            APIParameter("log_level", "string", "The level of error messages to capture in this log.",
                         required=False, default="all__sys"),
            APIParameter("class_filters", "string", "Class filters to restrict log entries to specific classes.",
                         required=False),
        ],
        body_encoding=BodyEncoding.MULTIPART,
    ),
    APIEndpoint(
        name="reset_debug_log",
        path="/logs/code/debug/{id}/actions/reset",
        method=HTTPMethod.POST,
        description="Reset a debug log in Veeva Vault, deleting all of its log files.",
        action="resetting the debug log",
        parameters=[DEBUG_LOG_ID],
    ),
    APIEndpoint(
        name="delete_debug_log",
        path="/logs/code/debug/{id}",
        method=HTTPMethod.DELETE,
        description="Delete a debug log in Veeva Vault.",
        action="deleting the debug log",
        parameters=[DEBUG_LOG_ID],
    ),
    APIEndpoint(
        name="download_debug_log_files",
        path="/logs/code/debug/{id}/files",
        method=HTTPMethod.GET,
        description="Download the files of a debug log from Veeva Vault as a ZIP archive.",
        action="downloading debug log files",
        parameters=[DEBUG_LOG_ID],
        response_type=ResponseType.BINARY,
    ),
]

PROFILER_ENDPOINTS = [
    APIEndpoint(
        name="retrieve_all_profiling_sessions",
        path="/code/profiler",
        method=HTTPMethod.GET,
        description="Retrieve all profiling sessions from Veeva Vault.",
        action="retrieving profiling sessions",
    ),
    APIEndpoint(
        name="retrieve_profiling_session",
        path="/code/profiler/{session_name}",
        method=HTTPMethod.GET,
        description="Retrieve details about a specific SDK request profiling session.",
        action="retrieving the profiling session",
        parameters=[SESSION_NAME],
    ),
    APIEndpoint(
        name="create_profiling_session",
        path="/code/profiler",
        method=HTTPMethod.POST,
        description="Create a new SDK request profiling session in Veeva Vault.",
        action="creating the profiling session",
        parameters=[
            APIParameter("label", "string", "The UI label for this session."),
            APIParameter("user_id", "string", "The user ID of the user to associate with this session.",
                         required=False),
            APIParameter("description", "string", "An Admin-facing description of the session.", required=False),
        ],
        body_encoding=BodyEncoding.FORM,
    ),
    APIEndpoint(
        name="end_profiling_session",
        path="/code/profiler/{session_name}/actions/end",
        method=HTTPMethod.POST,
        description="End a profiling session in Veeva Vault.",
        action="ending the profiling session",
        parameters=[SESSION_NAME],
    ),
    APIEndpoint(
        name="delete_profiling_session",
        path="/code/profiler/{session_name}",
        method=HTTPMethod.DELETE,
        description="Delete an inactive profiling session in Veeva Vault.",
        action="deleting the profiling session",
        parameters=[SESSION_NAME],
    ),
    APIEndpoint(
        name="download_profiling_session_results",
        path="/code/profiler/{session_name}/results",
        method=HTTPMethod.GET,
        description="Download the Profiler Log for a specific profiling session.",
        action="downloading profiling session results",
        parameters=[SESSION_NAME],
        response_type=ResponseType.BINARY,
    ),
]

ENDPOINTS = DEBUG_LOG_ENDPOINTS + PROFILER_ENDPOINTS
