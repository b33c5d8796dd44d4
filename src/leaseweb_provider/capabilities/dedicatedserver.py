"""Dedicated Server data sources and resources."""

from .base import DataSource, Resource


class ServerDataSource(DataSource):
    type_suffix = "dedicated_server"


class ServersDataSource(DataSource):
    """Lists dedicated servers, optionally filtered."""

    type_suffix = "dedicated_servers"


class ControlPanelsDataSource(DataSource):
    type_suffix = "dedicated_server_control_panels"


class OperatingSystemsDataSource(DataSource):
    type_suffix = "dedicated_server_operating_systems"


class CredentialDataSource(DataSource):
    type_suffix = "dedicated_server_credential"


class ServerResource(Resource):
    """Reference, reverse lookup and power settings of an existing server."""

    type_suffix = "dedicated_server"


class CredentialResource(Resource):
    type_suffix = "dedicated_server_credential"


class NotificationSettingDatatrafficResource(Resource):
    type_suffix = "dedicated_server_notification_setting_datatraffic"


class NotificationSettingBandwidthResource(Resource):
    type_suffix = "dedicated_server_notification_setting_bandwidth"


class InstallationResource(Resource):
    """Operating system installation job."""

    type_suffix = "dedicated_server_installation"
