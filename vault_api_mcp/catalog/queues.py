"""Spark messaging queue endpoints."""

from ..dynamic.models import APIEndpoint, APIParameter, HTTPMethod

QUEUE_NAME = APIParameter("queue_name", "string", "The name of a specific queue.")

ENDPOINTS = [
    APIEndpoint(
        name="retrieve_all_queues",
        path="/services/queues",
        method=HTTPMethod.GET,
        description="Retrieve all queues from Veeva Vault.",
        action="retrieving queues",
    ),
    APIEndpoint(
        name="retrieve_queue_status",
        path="/services/queues/{queue_name}",
        method=HTTPMethod.GET,
        description="Retrieve the status of a specific queue from Veeva Vault.",
        action="retrieving the queue status",
        parameters=[QUEUE_NAME],
    ),
    APIEndpoint(
        name="disable_delivery",
        path="/services/queues/{queue_name}/actions/disable_delivery",
        method=HTTPMethod.PUT,
        description="Disable delivery of messages in a specified queue on Veeva Vault.",
        action="disabling delivery",
        parameters=[QUEUE_NAME],
    ),
    APIEndpoint(
        name="reset_queue",
        path="/services/queues/{queue_name}/actions/reset",
        method=HTTPMethod.PUT,
        description="Delete all messages in a specific queue on Veeva Vault.",
        action="resetting the queue",
        parameters=[QUEUE_NAME],
    ),
]
