"""Resolve each input from its flag, the environment or the terminal.

Precedence is always explicit value -> environment / default -> prompt.
``None`` means "not supplied"; an empty string was supplied and is empty.
"""

import logging
import math
import os
from collections import namedtuple
from datetime import datetime, timedelta, timezone

from presign_upload import config
from presign_upload.errors import ValidationFailure
from presign_upload.regions import describe_region
from presign_upload.validation import (
    mask,
    validate_access_key_id,
    validate_bucket_name,
    validate_hours,
    validate_secret_access_key,
)

logger = logging.getLogger(__name__)

Expiration = namedtuple('Expiration', ['hours', 'expires_at', 'expires_in'])


def _first_set(value, environ, name):
    return value if value is not None else environ.get(name)


def resolve_region(value=None, environ=os.environ):
    """Return the RegionInfo for the flag, ``AWS_REGION`` or the default region."""
    region = _first_set(value, environ, config.REGION_ENV)
    if region is None:
        region = config.DEFAULT_REGION

    if not region:
        raise ValidationFailure.single(
            'region',
            'AWS Region must be specified either through the --region option '
            'or the %s environment variable.' % config.REGION_ENV)

    info = describe_region(region)
    if info is None:
        raise ValidationFailure.single(
            'region', 'Invalid AWS Region: "%s". Please specify a valid region.' % region)

    logger.info('Using AWS Region: %s - %s', info.code, info.description)
    return info


def resolve_access_key_id(value=None, environ=os.environ):
    key = _first_set(value, environ, config.ACCESS_KEY_ENV)
    if not key:
        raise ValidationFailure.single(
            'access_key_id',
            'AWS Access Key ID must be specified either through the --key option '
            'or the %s environment variable.' % config.ACCESS_KEY_ENV)

    validate_access_key_id(key)
    logger.info('Using AWS Access Key ID: %s', mask(key, *config.ACCESS_KEY_MASK))
    return key


def resolve_secret_access_key(value=None, environ=os.environ):
    secret = _first_set(value, environ, config.SECRET_KEY_ENV)
    if not secret:
        raise ValidationFailure.single(
            'secret_access_key',
            'AWS Secret Access Key must be specified either through the --secret option '
            'or the %s environment variable.' % config.SECRET_KEY_ENV)

    validate_secret_access_key(secret)
    logger.info('Using AWS Secret Access Key: %s', mask(secret, *config.SECRET_KEY_MASK))
    return secret


def resolve_session_token(value=None, environ=os.environ):
    """Optional token for temporary (ASIA) credentials; not validated."""
    token = _first_set(value, environ, config.SESSION_TOKEN_ENV)
    if not token:
        return None
    logger.info('Using AWS Session Token: %s', mask(token, 4, max(len(token) - 8, 0)))
    return token


def resolve_bucket_name(value=None, prompt=input):
    """Validate the argument as given; only a typed answer is stripped."""
    if value is None:
        value = (prompt(config.BUCKET_PROMPT + ': ') or '').strip()
    return validate_bucket_name(value)


def resolve_object_key(value=None, prompt=input):
    key = value if value is not None else prompt(config.OBJECT_KEY_PROMPT + ': ')
    return key or config.DEFAULT_OBJECT_KEY


def resolve_expiration(value=None, prompt=input, now=None):
    """Return hours, the absolute expiry and the lifetime in seconds."""
    if value is None:
        value = prompt(config.HOURS_PROMPT + ': ')
    hours = validate_hours(value)

    if now is None:
        now = datetime.now(timezone.utc)
    lifetime = timedelta(hours=hours)

    logger.info('URL will expire after %s hours.', hours)
    return Expiration(hours, now + lifetime, math.ceil(lifetime.total_seconds()))
