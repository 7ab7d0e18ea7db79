"""Region lookups against the partition table bundled with botocore."""

from collections import namedtuple
from functools import lru_cache

from botocore.loaders import create_loader

RegionInfo = namedtuple('RegionInfo', ['code', 'description', 'partition', 'dns_suffix'])


@lru_cache(maxsize=1)
def load_partitions():
    """Return the ``partitions`` list from botocore's ``endpoints`` data."""
    return create_loader().load_data('endpoints')['partitions']


def describe_region(region, partitions=None):
    """Find ``region`` in any partition; ``None`` when it is unknown."""
    if partitions is None:
        partitions = load_partitions()
    for partition in partitions:
        regions = partition.get('regions', {})
        if region in regions:
            return RegionInfo(
                code=region,
                description=regions[region].get('description', region),
                partition=partition['partition'],
                dns_suffix=partition['dnsSuffix'],
            )
    return None


def s3_endpoint(info):
    """Regional S3 endpoint, e.g. https://s3.eu-west-1.amazonaws.com."""
    return 'https://s3.%s.%s' % (info.code, info.dns_suffix)
