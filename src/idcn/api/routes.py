"""
FastAPI routes for the idcn service.

Exposes validation, information extraction, 15-to-18 upgrade, region
resolution and synthetic generation over HTTP/JSON.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from idcn import __version__
from idcn.api.middleware import RequestLoggingMiddleware
from idcn.api.models import (
    AreaResponse,
    ErrorDetail,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    HealthResponse,
    IdNumberRequest,
    InfoResponse,
    UpgradeResponse,
    ValidateResponse,
)
from idcn.core.address import AddressResolver
from idcn.core.errors import IdCardError, UnknownRegionError
from idcn.core.info import IdCardInfoExtractor
from idcn.core.synthetic.id_card_generator import GenerationConstraints, IdCardGenerator
from idcn.core.validator import upgrade_to_18, validate_safe
from idcn.gazetteer.base import Gazetteer
from idcn.gazetteer.default import get_default_gazetteer
from idcn.idcard import get_default_generator
from idcn.logging.setup import get_logger, setup_logging
from idcn.metrics.collectors import GENERATED, UNKNOWN_REGIONS, VALIDATIONS

# Initialize logging
setup_logging()
logger = get_logger(__name__)


def get_gazetteer() -> Gazetteer:
    """Gazetteer dependency, overridable in tests."""
    return get_default_gazetteer()


def get_generator() -> IdCardGenerator:
    """Generator dependency, overridable in tests."""
    return get_default_generator()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    gazetteer = get_default_gazetteer()
    logger.info(
        "Starting idcn service",
        extra={"version": __version__, "gazetteer": repr(gazetteer)},
    )
    yield
    logger.info("Shutting down idcn service")


app = FastAPI(
    title="idcn",
    description="Chinese Resident Identity Number validation, parsing and generation",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

INVALID_NUMBER_RESPONSES = {422: {"model": ErrorResponse, "description": "Invalid identity number"}}


def _error_body(kind: str, message: str) -> dict:
    return ErrorResponse(error=ErrorDetail(kind=kind, message=message)).model_dump()


@app.exception_handler(IdCardError)
async def id_card_error_handler(request: Request, exc: IdCardError):
    """Map identity number failures to structured JSON errors."""
    status_code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(exc, UnknownRegionError)
        else status.HTTP_422_UNPROCESSABLE_ENTITY
    )
    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.kind.value, str(exc)),
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


@app.get("/metrics", tags=["Monitoring"])
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


@app.post("/v1/idcard/validate", response_model=ValidateResponse, tags=["Identity Number"])
async def validate_id_card(body: IdNumberRequest):
    """Validate an identity number. Always 200; the verdict is in the body."""
    valid, kind = validate_safe(body.id_number)
    VALIDATIONS.labels(result="valid" if valid else kind.value).inc()
    return ValidateResponse(valid=valid, error_kind=kind.value if kind else None)


@app.post(
    "/v1/idcard/info",
    response_model=InfoResponse,
    responses=INVALID_NUMBER_RESPONSES,
    tags=["Identity Number"],
)
async def id_card_info(body: IdNumberRequest, gazetteer: Gazetteer = Depends(get_gazetteer)):
    """Extract region, birthday, age and sex from a valid identity number."""
    info = IdCardInfoExtractor(gazetteer).extract(body.id_number)
    if info.area.is_empty():
        UNKNOWN_REGIONS.inc()
    return info.to_dict()


@app.post(
    "/v1/idcard/upgrade",
    response_model=UpgradeResponse,
    responses=INVALID_NUMBER_RESPONSES,
    tags=["Identity Number"],
)
async def upgrade_id_card(body: IdNumberRequest):
    """Convert a 15-digit number to its 18-digit form."""
    return UpgradeResponse(card_no=upgrade_to_18(body.id_number))


@app.get(
    "/v1/area/{code}",
    response_model=AreaResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown region code"},
        **INVALID_NUMBER_RESPONSES,
    },
    tags=["Region"],
)
async def resolve_area(code: str, gazetteer: Gazetteer = Depends(get_gazetteer)):
    """Resolve a 6-digit region code."""
    try:
        area = AddressResolver(gazetteer).resolve_str(code)
    except UnknownRegionError:
        UNKNOWN_REGIONS.inc()
        raise
    return AreaResponse(**area.to_dict())


@app.post(
    "/v1/idcard/generate",
    response_model=GenerateResponse,
    responses={503: {"model": ErrorResponse, "description": "No region code available"}},
    tags=["Generation"],
)
async def generate_id_card(
    body: GenerateRequest,
    generator: IdCardGenerator = Depends(get_generator),
):
    """Generate a synthetic identity number honoring the constraints."""
    constraints = GenerationConstraints(
        eighteen=body.eighteen,
        address=body.address,
        birthday=body.birthday,
        sex=body.sex,
    )
    number = generator.generate(constraints)
    if not number:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=_error_body("generation_failed", "No district-level region code available"),
        )

    GENERATED.labels(length=str(len(number))).inc()
    return GenerateResponse(id_number=number)
