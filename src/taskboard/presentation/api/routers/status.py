"""Service and database health endpoints.

Neither endpoint touches the database: ``/dbstatus`` only reads the
health monitor's current state.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from taskboard.application.ports import ConnectionState
from taskboard.presentation.api.dependencies import HealthMonitorDep, SettingsDep
from taskboard.presentation.api.schemas.common import (
    DatabaseStatusResponse,
    HealthResponse,
)

router = APIRouter()


@router.get("/", summary="Service health")
@router.get("/health", summary="Service health (load balancer alias)")
async def health_check(settings: SettingsDep) -> HealthResponse:
    return HealthResponse(
        status="ok",
        message="Service is healthy",
        environment=settings.environment.value,
    )


@router.get(
    "/dbstatus",
    summary="Database connection status",
    response_model=DatabaseStatusResponse,
    responses={
        503: {"model": DatabaseStatusResponse, "description": "Database not connected"},
    },
)
async def database_status(monitor: HealthMonitorDep) -> JSONResponse:
    state = monitor.current_state()
    connected = state is ConnectionState.CONNECTED

    body = DatabaseStatusResponse(
        connected=connected,
        state=state.value,
        host=monitor.host,
        database=monitor.database,
        message=(
            "Database is connected and ready"
            if connected
            else "Database is not connected. Check the database server and connection settings."
        ),
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if connected else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )
