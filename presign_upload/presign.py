"""Build the S3 client and sign a put_object request with boto3."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import boto3
import botocore.config

from presign_upload.regions import s3_endpoint


@dataclass(frozen=True)
class UploadUrlRequest:
    bucket_name: str
    object_key: str
    region: str
    access_key_id: str
    secret_access_key: str
    expires_at: datetime
    expires_in: int
    session_token: Optional[str] = None

    def params(self):
        return {'Bucket': self.bucket_name, 'Key': self.object_key}


def build_client(region_info, access_key_id, secret_access_key, session_token=None):
    """S3 client pinned to the regional endpoint, signing with SigV4."""
    # Force SigV4 (s3v4) signing and use the regional endpoint
    config = botocore.config.Config(signature_version='s3v4')
    return boto3.client(
        's3',
        region_name=region_info.code,
        endpoint_url=s3_endpoint(region_info),
        aws_access_key_id=access_key_id,
        aws_secret_access_key=secret_access_key,
        aws_session_token=session_token,
        config=config,
    )


def generate_presigned_url(s3_client, request):
    """Generate a presigned PUT URL valid for ``request.expires_in`` seconds."""
    return s3_client.generate_presigned_url(
        'put_object',
        Params=request.params(),
        ExpiresIn=request.expires_in,
    )
