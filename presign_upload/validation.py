"""Format checks for bucket names, credentials and expiry windows.

Every check here is pure: it takes a value, returns the accepted value and
raises ValidationFailure otherwise. Reading flags, the environment and the
terminal happens in :mod:`presign_upload.resolvers`.
"""

import math
import re

from presign_upload.config import MAX_HOURS, PROHIBITED_PREFIXES, PROHIBITED_SUFFIXES
from presign_upload.errors import ValidationError, ValidationFailure

BUCKET_EDGE = re.compile(r'[a-z0-9]')
BUCKET_CHARSET = re.compile(r'^[a-z0-9.-]+$')
IPV4_PATTERN = re.compile(r'^\d+\.\d+\.\d+\.\d+$')
ACCESS_KEY_PATTERN = re.compile(r'^(AKIA|ASIA)[0-9A-Z]{16}$')
SECRET_KEY_PATTERN = re.compile(r'^[A-Za-z0-9/+=]{40}$')
DECIMAL_PATTERN = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$', re.ASCII)


def _or_join(items):
    """'a, b, or c' for display."""
    items = list(items)
    if len(items) < 2:
        return ''.join(items)
    return ', '.join(items[:-1]) + ', or ' + items[-1]


def bucket_name_errors(name):
    """Return every rule the bucket name breaks, in a stable order."""
    if not name:
        return ['Bucket name is required.']

    messages = []
    if not 3 <= len(name) <= 63:
        messages.append('Bucket name must be between 3 and 63 characters long.')
    if not (BUCKET_EDGE.fullmatch(name[0]) and BUCKET_EDGE.fullmatch(name[-1])):
        messages.append('Bucket name must start and end with a lowercase letter or number.')
    if IPV4_PATTERN.match(name):
        messages.append('Bucket name cannot be formatted as an IP address.')
    if name.startswith(PROHIBITED_PREFIXES) or name.endswith(PROHIBITED_SUFFIXES):
        messages.append('Bucket name cannot start with %s or end with %s.' % (
            _or_join(PROHIBITED_PREFIXES), _or_join(PROHIBITED_SUFFIXES)))
    if '..' in name:
        messages.append('Bucket name cannot contain adjacent periods.')
    if '-.' in name or '.-' in name:
        messages.append('Bucket name cannot contain dashes next to periods.')
    if not BUCKET_CHARSET.match(name):
        messages.append('Bucket name can only contain lowercase letters, numbers, dots, and hyphens.')
    return messages


def validate_bucket_name(name):
    """Return ``name`` if it is a legal S3 bucket name.

    All violations are collected before raising, so the operator sees the
    whole list at once.
    """
    messages = bucket_name_errors(name)
    if messages:
        raise ValidationFailure(
            [ValidationError('bucket_name', m) for m in messages],
            headline='Invalid S3 bucket name:')
    return name


def validate_access_key_id(key):
    if not ACCESS_KEY_PATTERN.match(key):
        raise ValidationFailure.single(
            'access_key_id',
            'Invalid AWS Access Key ID format. It must start with "AKIA" or "ASIA" '
            'followed by 16 alphanumeric characters.')
    return key


def validate_secret_access_key(secret):
    if not SECRET_KEY_PATTERN.match(secret):
        raise ValidationFailure.single(
            'secret_access_key',
            'Invalid AWS Secret Access Key format. It must be 40 characters long and '
            'contain only alphanumeric characters, forward slashes, plus signs, or equals signs.')
    return secret


def validate_hours(value):
    """Parse an expiry window in hours; accepts ints, floats and decimal strings.

    The window must last at least one second once converted.
    """
    if isinstance(value, str):
        hours = float(value) if DECIMAL_PATTERN.match(value) else None
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        hours = float(value)
    else:
        hours = None

    if (hours is None or not math.isfinite(hours) or hours * 3600 < 1
            or hours > MAX_HOURS):
        raise ValidationFailure.single(
            'hours', 'Invalid hours value. Please specify a number between 1 and %d.' % MAX_HOURS)
    return int(hours) if hours.is_integer() else hours


def mask(value, visible, length, char='*'):
    """Hide ``length`` characters of ``value`` starting at index ``visible``."""
    hidden = value[visible:visible + length]
    return value[:visible] + char * len(hidden) + value[visible + len(hidden):]
