"""Public landing endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from secure_api.controllers.dependencies import ClientAddressDep, EventLoggerDep

router = APIRouter(tags=["home"])

WELCOME_MESSAGE = "Bienvenue sur l'API sécurisée"
SIMULATED_ERROR_MESSAGE = "Une erreur est survenue"


@router.get("/", response_class=PlainTextResponse)
async def welcome(event_logger: EventLoggerDep, client: ClientAddressDep) -> PlainTextResponse:
    event_logger.info(f"Accès à la page principale depuis {client}")
    return PlainTextResponse(WELCOME_MESSAGE)


@router.get("/error", response_class=PlainTextResponse)
async def simulated_error(
    event_logger: EventLoggerDep,
    client: ClientAddressDep,
) -> PlainTextResponse:
    """Answer with a 500 to exercise the error log; nothing has failed."""

    event_logger.error(f"Erreur simulée - Requête de {client}")
    return PlainTextResponse(
        SIMULATED_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
