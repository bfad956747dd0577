import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from fleet_collector.models.host import HostReport
from fleet_collector.services.host_registry import HostRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


def get_registry(request: Request) -> HostRegistry:
    """Return the registry the application was created with."""
    return request.app.state.registry


@router.get(
    "",
    response_model=List[HostReport],
    response_model_exclude_none=True,
    summary="Latest report of every host",
)
async def list_hosts(registry: HostRegistry = Depends(get_registry)) -> List[HostReport]:
    """
    Return the most recent report of every host that has ever pushed one.

    The order of the list is not defined. GPU fields are omitted for hosts
    that did not report them.
    """
    logger.info("Incoming /hosts GET request")
    return registry.snapshot()


@router.post(
    "",
    response_class=PlainTextResponse,
    summary="Push a host report",
)
async def update_host(
    report: HostReport,
    registry: HostRegistry = Depends(get_registry),
) -> str:
    """
    Store a host report, replacing the previous report for the same ip.

    Bodies that cannot be decoded into a HostReport never reach this handler;
    FastAPI answers them with 422 and the registry stays untouched.
    """
    logger.info("Incoming /hosts POST:\n%s", report.to_json(indent=2))
    registry.upsert(report)
    return "ok"
