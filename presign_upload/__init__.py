"""Generate presigned S3 upload URLs from the command line."""

__version__ = '0.1.0'
