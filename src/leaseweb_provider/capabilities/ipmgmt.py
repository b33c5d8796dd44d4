"""IP management data sources and resources."""

from .base import DataSource, Resource


class IPsDataSource(DataSource):
    type_suffix = "ipmgmt_ips"


class NullRouteHistoryDataSource(DataSource):
    """Past and current null routes of IPs."""

    type_suffix = "ipmgmt_null_route_history"


class IPResource(Resource):
    """Reverse lookup of an IP."""

    type_suffix = "ipmgmt_ip"


class NullRouteResource(Resource):
    type_suffix = "ipmgmt_null_route"
