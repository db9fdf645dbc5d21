"""
Root endpoint with API information.
"""

from fastapi import Depends
from fastapi.responses import Response

from app import AUTHORS, DESCRIPTION, LICENSE, NAME, REPOSITORY, __version__
from app.config import Settings, get_settings
from app.core import envelope
from app.models import ServiceInfo, UsageHints


async def root(settings: Settings = Depends(get_settings)) -> Response:
    """
    Describe the service and how to call it.

    Returns:
        Envelope with name, version and example URLs for the main endpoints
    """
    deploy_url = settings.DEPLOYMENT_URL.rstrip("/")
    return envelope.success(ServiceInfo(
        name=NAME,
        description=DESCRIPTION,
        version=__version__,
        authors=AUTHORS,
        repository=REPOSITORY,
        license=LICENSE,
        usage=UsageHints(
            search_api=f"{deploy_url}/search/{{product_name}}",
            product_api=f"{deploy_url}/product/{{product_link_argument}}",
        ),
    ))
