#!/usr/bin/env python3
"""
Generate a presigned PUT URL for a single S3 object.

Inputs come from arguments, then AWS_* environment variables, then prompts.
"""

import argparse
import logging
import os
import sys
from datetime import datetime

from botocore.exceptions import BotoCoreError, ClientError

from presign_upload import __version__, resolvers
from presign_upload.config import DEFAULT_REGION, MAX_HOURS
from presign_upload.errors import ValidationFailure
from presign_upload.presign import UploadUrlRequest, build_client, generate_presigned_url

logger = logging.getLogger('presign_upload')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='presign-upload',
        description='Generate an AWS S3 presigned upload URL')
    parser.add_argument('bucket_name', nargs='?', help='S3 bucket name')
    parser.add_argument('file_key', nargs='?', help='S3 object key to create the presigned URL for')
    parser.add_argument('-r', '--region',
                        help='AWS region (default: $AWS_REGION or %s)' % DEFAULT_REGION)
    parser.add_argument('-k', '--key', help='AWS Access Key ID (default: $AWS_ACCESS_KEY_ID)')
    parser.add_argument('-s', '--secret', help='AWS Secret Access Key (default: $AWS_SECRET_ACCESS_KEY)')
    parser.add_argument('-t', '--token', help='AWS Session Token for temporary credentials '
                                              '(default: $AWS_SESSION_TOKEN)')
    parser.add_argument('--hours', help='Hours the URL stays valid, at most %d' % MAX_HOURS)
    parser.add_argument('--curl', action='store_true', help='Also print an example curl upload command')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only print the URL and errors')
    parser.add_argument('--version', action='version', version='%(prog)s ' + __version__)
    return parser


def configure_logging(verbose=False, quiet=False):
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(stream=sys.stderr, format='%(message)s')
    logger.setLevel(level)
    for name in ('boto3', 'botocore', 'urllib3'):
        logging.getLogger(name).setLevel(logging.WARNING)


def report(failure):
    if failure.headline:
        print(failure.headline, file=sys.stderr)
        for message in failure.messages:
            print(f"  - {message}", file=sys.stderr)
    else:
        for message in failure.messages:
            print(message, file=sys.stderr)


def main(argv=None, prompt=None, environ=None):
    args = build_parser().parse_args(argv)
    prompt = prompt or input
    environ = os.environ if environ is None else environ
    configure_logging(args.verbose, args.quiet)

    logger.info('Generate an AWS S3 presigned upload URL')
    logger.info('Current Datetime: %s', datetime.now().strftime('%Y-%m-%d %H:%M:%S'))

    try:
        region = resolvers.resolve_region(args.region, environ)
        access_key_id = resolvers.resolve_access_key_id(args.key, environ)
        secret_access_key = resolvers.resolve_secret_access_key(args.secret, environ)
        session_token = resolvers.resolve_session_token(args.token, environ)
        s3_client = build_client(region, access_key_id, secret_access_key, session_token)

        bucket_name = resolvers.resolve_bucket_name(args.bucket_name, prompt)
        object_key = resolvers.resolve_object_key(args.file_key, prompt)
        expiration = resolvers.resolve_expiration(args.hours, prompt)
    except ValidationFailure as e:
        report(e)
        return 1
    except (BotoCoreError, ClientError, ValueError) as e:
        print(e, file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nAborted: no input received.", file=sys.stderr)
        return 1

    request = UploadUrlRequest(
        bucket_name=bucket_name,
        object_key=object_key,
        region=region.code,
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
        expires_at=expiration.expires_at,
        expires_in=expiration.expires_in,
    )
    logger.debug('Signing put_object for s3://%s/%s until %s',
                 request.bucket_name, request.object_key, request.expires_at.isoformat())

    try:
        url = generate_presigned_url(s3_client, request)
    except (BotoCoreError, ClientError, ValueError) as e:
        print(e, file=sys.stderr)
        return 1

    print("Generated presigned URL:")
    print(url)
    if args.curl:
        print(f"\nExample usage with curl:\ncurl --upload-file \"/path/to/your/file\" \"{url}\"")
    return 0


if __name__ == "__main__":
    sys.exit(main())
