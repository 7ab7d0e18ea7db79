"""Static settings for the presign-upload command."""

DEFAULT_REGION = 'us-east-1'
DEFAULT_OBJECT_KEY = 'todo'
MAX_HOURS = 168  # 7 days, the SigV4 presign ceiling

REGION_ENV = 'AWS_REGION'
ACCESS_KEY_ENV = 'AWS_ACCESS_KEY_ID'
SECRET_KEY_ENV = 'AWS_SECRET_ACCESS_KEY'
SESSION_TOKEN_ENV = 'AWS_SESSION_TOKEN'

PROHIBITED_PREFIXES = (
    'xn--',
    'sthree-',
    'amzn-s3-demo-',
)
PROHIBITED_SUFFIXES = (
    '-s3alias',
    '--ol-s3',
    '.mrap',
    '--x-s3',
)

# (visible prefix, masked run)
ACCESS_KEY_MASK = (4, 12)
SECRET_KEY_MASK = (4, 32)

BUCKET_PROMPT = 'Enter the S3 bucket name to create presigned upload URL for'
OBJECT_KEY_PROMPT = 'Enter the S3 file to create presigned upload URL for'
HOURS_PROMPT = ('Enter the number of hours for the URL to expire after '
                '(max 168 hours (7 days))')
