"""Public Cloud data sources and resources."""

from .base import DataSource, Resource


class InstancesDataSource(DataSource):
    """Lists Public Cloud instances."""

    type_suffix = "public_cloud_instances"


class CredentialDataSource(DataSource):
    """Reads a stored credential of a Public Cloud instance."""

    type_suffix = "public_cloud_credential"


class ImagesDataSource(DataSource):
    type_suffix = "public_cloud_images"


class LoadBalancersDataSource(DataSource):
    type_suffix = "public_cloud_load_balancers"


class LoadBalancerListenersDataSource(DataSource):
    type_suffix = "public_cloud_load_balancer_listeners"


class TargetGroupsDataSource(DataSource):
    type_suffix = "public_cloud_target_groups"


class ISOsDataSource(DataSource):
    """Lists the ISOs that can be attached to an instance."""

    type_suffix = "public_cloud_isos"


class InstanceResource(Resource):
    """Launches, updates and terminates a Public Cloud instance."""

    type_suffix = "public_cloud_instance"


class CredentialResource(Resource):
    type_suffix = "public_cloud_credential"


class ImageResource(Resource):
    """Custom image created from an instance."""

    type_suffix = "public_cloud_image"


class LoadBalancerResource(Resource):
    type_suffix = "public_cloud_load_balancer"


class LoadBalancerListenerResource(Resource):
    type_suffix = "public_cloud_load_balancer_listener"


class TargetGroupResource(Resource):
    type_suffix = "public_cloud_target_group"


class IPResource(Resource):
    """Reverse lookup settings of an instance IP."""

    type_suffix = "public_cloud_ip"


class InstanceIsoResource(Resource):
    """Attaches an ISO to an instance."""

    type_suffix = "public_cloud_instance_iso"
