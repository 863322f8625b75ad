"""Picklist endpoints."""

from ..dynamic.models import APIEndpoint, APIParameter, BodyEncoding, HTTPMethod

PICKLIST_NAME = APIParameter(
    "picklist_name", "string",
    "The picklist name field value (license_type__v, product_family__c, region__c, etc.).",
)
PICKLIST_VALUE_NAME = APIParameter(
    "picklist_value_name", "string", "The picklist value name field value (north_america__c, etc.).",
)


def _values_form(args):
    values = args["values"]
    if isinstance(values, str) or not isinstance(values, (list, tuple)) or not values:
        raise ValueError("`values` must be a non-empty list of strings")
    return [("values[]", str(value)) for value in values]


def _label_form(args):
    data = args["data"]
    if not isinstance(data, dict) or not data:
        raise ValueError("`data` must be a non-empty object of value names to labels")
    return [(str(key), str(value)) for key, value in data.items()]


ENDPOINTS = [
    APIEndpoint(
        name="retrieve_all_picklists",
        path="/objects/picklists",
        method=HTTPMethod.GET,
        description="Retrieve all picklists from Veeva Vault.",
        action="retrieving picklists",
    ),
    APIEndpoint(
        name="retrieve_picklist_values",
        path="/objects/picklists/{picklist_name}",
        method=HTTPMethod.GET,
        description="Retrieve all available values configured on a picklist.",
        action="retrieving picklist values",
        parameters=[PICKLIST_NAME],
    ),
    APIEndpoint(
        name="create_picklist_values",
        path="/objects/picklists/{picklist_name}",
        method=HTTPMethod.POST,
        description="Create new values for a specified picklist in Veeva Vault.",
        action="creating picklist values",
        parameters=[
            PICKLIST_NAME,
            APIParameter("values", "array", "An array of value labels to add to the picklist.", items="string"),
        ],
        body_encoding=BodyEncoding.FORM,
        body_builder=_values_form,
    ),
    APIEndpoint(
        name="update_picklist_value_label",
        path="/objects/picklists/{picklist_name}",
        method=HTTPMethod.PUT,
        description="Update the label of one or more picklist values in Veeva Vault.",
        action="updating picklist value labels",
        parameters=[
            PICKLIST_NAME,
            APIParameter("data", "object", "Picklist value names mapped to their new labels."),
        ],
        body_encoding=BodyEncoding.FORM,
        body_builder=_label_form,
    ),
    APIEndpoint(
        name="update_picklist_value",
        path="/objects/picklists/{picklist_name}/{picklist_value_name}",
        method=HTTPMethod.PUT,
        description="Update the name or status of a picklist value in Veeva Vault.",
        action="updating the picklist value",
        parameters=[
            PICKLIST_NAME,
            PICKLIST_VALUE_NAME,
            APIParameter(
                "name", "string",
                "The new name for the picklist value. Special characters and double underscores __ are not allowed.",
                required=False,
            ),
            APIParameter("status", "string", "The new status for the picklist value (active or inactive).",
                         required=False),
        ],
        body_encoding=BodyEncoding.FORM,
    ),
    APIEndpoint(
        name="inactivate_picklist_value",
        path="/objects/picklists/{picklist_name}/{picklist_value_name}",
        method=HTTPMethod.DELETE,
        description="Inactivate a picklist value in Veeva Vault.",
        action="inactivating the picklist value",
        parameters=[PICKLIST_NAME, PICKLIST_VALUE_NAME],
    ),
]
