"""DNS data sources and resources."""

from .base import DataSource, Resource


class ResourceRecordSetsDataSource(DataSource):
    """Lists the resource record sets of a domain."""

    type_suffix = "dns_resource_record_sets"


class ResourceRecordSetsResource(Resource):
    type_suffix = "dns_resource_record_sets"
