"""SCIM 2.0 identity endpoints.

Vault's SCIM service speaks application/scim+json in both directions and
expects user payloads to list the core and Vault extension schemas.
"""

from ..dynamic.models import APIEndpoint, APIParameter, BodyEncoding, HTTPMethod

SCIM_MEDIA_TYPE = "application/scim+json"
CORE_USER_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:User"
VAULT_USER_SCHEMA = "urn:ietf:params:scim:schemas:extension:veevavault:2.0:User"

USER_FIELDS = ("userName", "emails", "name", "preferredLanguage", "locale", "timezone", "securityProfile")

ATTRIBUTES = APIParameter("attributes", "string", "Include specified attributes only.", required=False)
EXCLUDED_ATTRIBUTES = APIParameter("excludedAttributes", "string",
                                   "Exclude specific attributes from the response.", required=False)
FILTER = APIParameter("filter", "string", "Filter for a specific attribute value.", required=False)


def _require_object(args, key, fields):
    value = args[key]
    if not isinstance(value, dict):
        raise ValueError(f"`{key}` must be an object")
    missing = [name for name in fields if value.get(name) in (None, "")]
    if missing:
        raise ValueError(f"`{key}` is missing {', '.join(missing)}")
    return value


def create_user_body(args):
    user = _require_object(args, "user", USER_FIELDS)
    return {
        "schemas": [VAULT_USER_SCHEMA, CORE_USER_SCHEMA],
        "userName": user["userName"],
        "emails": user["emails"],
        "name": user["name"],
        "preferredLanguage": user["preferredLanguage"],
        "locale": user["locale"],
        "timezone": user["timezone"],
        VAULT_USER_SCHEMA: {
            "securityProfile": {"value": user["securityProfile"]},
        },
    }


def update_current_user_body(args):
    user_data = _require_object(args, "userData", ("familyName", "givenName"))
    return {
        "schemas": [VAULT_USER_SCHEMA, CORE_USER_SCHEMA],
        "name": {
            "familyName": user_data["familyName"],
            "givenName": user_data["givenName"],
        },
    }


def update_user_body(args):
    return _require_object(args, "userData", ())


def _scim(**kwargs) -> APIEndpoint:
    if kwargs.get("body_encoding") is BodyEncoding.JSON:
        kwargs.setdefault("content_type", SCIM_MEDIA_TYPE)
    return APIEndpoint(accept=SCIM_MEDIA_TYPE, **kwargs)


ENDPOINTS = [
    _scim(
        name="retrieve_scim_provider",
        path="/scim/v2/ServiceProviderConfig",
        method=HTTPMethod.GET,
        description="Retrieve SCIM Provider information from Veeva Vault.",
        action="retrieving SCIM provider information",
    ),
    _scim(
        name="retrieve_scim_resource_types",
        path="/scim/v2/ResourceTypes",
        method=HTTPMethod.GET,
        description="Retrieve all SCIM resource types from Veeva Vault.",
        action="retrieving SCIM resource types",
    ),
    _scim(
        name="retrieve_scim_resource_type",
        path="/scim/v2/ResourceTypes/{type}",
        method=HTTPMethod.GET,
        description="Retrieve a single SCIM resource type from Veeva Vault.",
        action="retrieving the SCIM resource type",
        parameters=[APIParameter("type", "string", "The specific resource type to retrieve (User, SecurityProfile).")],
    ),
    _scim(
        name="retrieve_scim_schema",
        path="/scim/v2/Schemas/{id}",
        method=HTTPMethod.GET,
        description="Retrieve information about a single SCIM schema specification supported by a Vault SCIM service provider.",
        action="retrieving the SCIM schema",
        parameters=[APIParameter("id", "string", "The ID of the specific schema to retrieve.")],
    ),
    _scim(
        name="retrieve_all_users",
        path="/scim/v2/Users",
        method=HTTPMethod.GET,
        description="Retrieve all users with SCIM from Veeva Vault.",
        action="retrieving users",
        parameters=[
            FILTER,
            ATTRIBUTES,
            EXCLUDED_ATTRIBUTES,
            APIParameter("sortBy", "string", "Specify an attribute to order the response.", required=False),
            APIParameter("sortOrder", "string", "Specify the order in which the sortBy parameter is applied.",
                         required=False),
            APIParameter("count", "integer", "Specify the number of query results per page.", required=False),
            APIParameter("startIndex", "integer", "Specify the index of the first result.", required=False),
        ],
    ),
    _scim(
        name="retrieve_single_user",
        path="/scim/v2/Users/{id}",
        method=HTTPMethod.GET,
        description="Retrieve a specific user with SCIM from Veeva Vault.",
        action="retrieving the user",
        parameters=[
            APIParameter("id", "string", "The ID of the user to retrieve."),
            FILTER,
            ATTRIBUTES,
            EXCLUDED_ATTRIBUTES,
        ],
    ),
    _scim(
        name="retrieve_current_user",
        path="/scim/v2/Me",
        method=HTTPMethod.GET,
        description="Retrieve the currently authenticated user with SCIM from Veeva Vault.",
        action="retrieving the current user",
        parameters=[ATTRIBUTES, EXCLUDED_ATTRIBUTES],
    ),
    _scim(
        name="create_user_scim",
        path="/scim/v2/Users",
        method=HTTPMethod.POST,
        description=(
            "Create a user with SCIM in Veeva Vault. `user` must contain userName, emails "
            "(list of {value, type}), name ({familyName, givenName}), preferredLanguage, locale, "
            "timezone and securityProfile."
        ),
        action="creating the user",
        parameters=[APIParameter("user", "object", "The user details to create.")],
        body_encoding=BodyEncoding.JSON,
        body_builder=create_user_body,
    ),
    _scim(
        name="update_user",
        path="/scim/v2/Users/{id}",
        method=HTTPMethod.PUT,
        description="Update a user in Veeva Vault using SCIM.",
        action="updating the user",
        parameters=[
            APIParameter("id", "string", "The ID of the user to update."),
            APIParameter("userData", "object", "The SCIM user resource to send, including its schemas."),
        ],
        body_encoding=BodyEncoding.JSON,
        body_builder=update_user_body,
    ),
    _scim(
        name="update_current_user",
        path="/scim/v2/Me",
        method=HTTPMethod.PUT,
        description="Update the name of the currently authenticated user with SCIM. `userData` holds familyName and givenName.",
        action="updating the current user",
        parameters=[APIParameter("userData", "object", "The familyName and givenName of the user.")],
        body_encoding=BodyEncoding.JSON,
        body_builder=update_current_user_body,
    ),
]
