"""Rendering of botocore errors into user-facing messages."""
from urllib.parse import urlparse

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    EndpointConnectionError,
    InvalidRegionError,
)

AWS_TRANSPORT_ERRORS = (BotoCoreError, ClientError)


def _unknown_endpoint_message(host: str, region: str) -> str:
    return (
        f"UnknownEndpoint: Inaccessible host: `{host}'. "
        f"This service may not be available in the `{region}' region."
    )


def describe_aws_error(error: BaseException, region: str) -> str:
    """
    Describe an AWS SDK error in one line.

    Args:
        error: Exception raised by boto3/botocore
        region: Region the failing call targeted

    Returns:
        Message naming the error code and, for endpoint failures, the
        unreachable host and region
    """
    if isinstance(error, EndpointConnectionError):
        endpoint_url = error.kwargs.get("endpoint_url", "")
        host = urlparse(endpoint_url).netloc or endpoint_url
        return _unknown_endpoint_message(host, region)

    if isinstance(error, InvalidRegionError):
        return _unknown_endpoint_message(f"ec2.{region}.amazonaws.com", region)

    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        code = details.get("Code", "Unknown")
        message = details.get("Message", str(error))
        return f"{code}: {message}"

    return f"{type(error).__name__}: {str(error)}"
