import boto3

from albertonet.settings import settings


def get_s3_client():
    """
    Create an S3 client from settings.
    Called at runtime to avoid import-time connections.
    """
    kwargs = settings.aws_client_kwargs
    if settings.S3_ENDPOINT_URL:
        # Local object store during development
        kwargs["endpoint_url"] = settings.S3_ENDPOINT_URL
    return boto3.client("s3", **kwargs)


def get_lambda_client():
    return boto3.client("lambda", **settings.aws_client_kwargs)
