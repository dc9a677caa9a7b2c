"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from fi_calculator import __version__
from fi_calculator.core.strategies import calculate
from fi_calculator.core.timeline import generate_timeline
from fi_calculator.models import CalculationMode
from fi_calculator.schemas.calculator import (
    CalculationResultsPayload,
    FinancialInputsRequest,
    TimelinePointPayload,
    TimelineRequest,
    TimelineResponse,
)
from fi_calculator.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected request path=%s errors=%d", request.path, exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(force=True, silent=False)
    if not isinstance(payload, dict):
        raise BadRequest("request body must be a JSON object")
    return payload


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status="ok", service="fi-calculator", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/modes")
def modes() -> Any:
    return jsonify({"modes": [mode.value for mode in CalculationMode]})


@api_bp.post("/calc/<mode>")
def calculate_mode(mode: str) -> Any:
    """Run one calculation mode against the posted household inputs."""
    try:
        calc_mode = CalculationMode(mode)
    except ValueError:
        return jsonify({"detail": f"unknown calculation mode '{mode}'"}), HTTPStatus.NOT_FOUND

    payload = FinancialInputsRequest.model_validate(_json_body())
    results = calculate(payload.to_inputs(), calc_mode)
    response = CalculationResultsPayload.from_results(results)
    return jsonify(response.model_dump(mode="json", by_alias=True))


@api_bp.post("/timeline")
def timeline() -> Any:
    """Year-by-year chart series for the posted inputs and (optional) results."""
    payload = TimelineRequest.model_validate(_json_body())
    results = payload.results.to_results() if payload.results is not None else None

    points = generate_timeline(payload.inputs.to_inputs(), payload.mode, results)
    response = TimelineResponse(
        mode=payload.mode,
        points=[TimelinePointPayload.from_point(point) for point in points],
    )
    return jsonify(response.model_dump(mode="json", by_alias=True))
