"""
formulaops Main module - CLI and HTTP API
"""

import logging
import time
from typing import Any, List, Optional

import typer
import uvicorn
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRouter
from pydantic import BaseModel

from formulaops.features import FeatureRegistry, OperationResult
from formulaops.version import get_version

# Module-level logger
logger = logging.getLogger("formulaops.main")


# Create CLI app with Typer
app = typer.Typer(
    name="formulaops",
    help="formulaops - evaluate spreadsheet formula operators",
    add_completion=False,
)

# Create FastAPI app for API server
api_app = FastAPI(
    title="formulaops API",
    description="API for evaluating spreadsheet formula operators",
    version=get_version(),
)

# Add CORS middleware
api_app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API router for versioned endpoints
api_router = APIRouter(prefix="/api/v1")


# Request models
class EvaluateRequest(BaseModel):
    symbol: str
    operands: List[Any] = []


class EvaluateResponse(BaseModel):
    symbol: str
    value: Any = None
    error: Optional[str] = None


# ----------------- Helper Functions -----------------


class ElapsedMsFormatter(logging.Formatter):
    """Formatter that shows milliseconds since program start, right-aligned for up to 9999 seconds."""
    def __init__(self, fmt=None, datefmt=None, *args, **kwargs):
        super().__init__(fmt, datefmt, *args, **kwargs)
        self.start_time = time.monotonic()
        self.width = 8  # Enough for '9999000ms'

    def format(self, record):
        elapsed_ms = int((time.monotonic() - self.start_time) * 1000)
        if elapsed_ms < 10**7:  # up to 9999.999s
            elapsed = f"[{elapsed_ms:>{self.width}}ms]"
        else:
            elapsed = f"[{elapsed_ms}ms]"
        record.elapsed = elapsed
        return super().format(record)


VERBOSE_LEVEL = 15  # Between INFO (20) and DEBUG (10)
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """Set up logging configuration"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = VERBOSE_LEVEL
    else:
        log_level = logging.INFO
    formatter = ElapsedMsFormatter('%(elapsed)s %(message)s')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers = []  # Remove any existing handlers
    root.addHandler(handler)
    root.setLevel(log_level)

    # uvicorn installs its own handlers; keep its access log quiet unless debugging
    logging.getLogger("uvicorn.access").setLevel(
        logging.DEBUG if debug else logging.WARNING
    )


def parse_operand(token: str) -> Any:
    """Turn a command-line token into an operand value.

    Integer and decimal literals become numbers, ``TRUE``/``FALSE`` become
    booleans and everything else stays text.
    """
    upper = token.strip().upper()
    if upper == "TRUE":
        return True
    if upper == "FALSE":
        return False
    for convert in (int, float):
        try:
            return convert(token)
        except ValueError:
            continue
    return token


def _feature_or_exit(feature_name: str):
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=1)
    return feature


def _handle_cli_result(feature_name: str, result: OperationResult) -> Any:
    if not result.success:
        logger.error("Operation failed: %s", result.error or "Unknown error")
        raise typer.Exit(code=1)
    logger.debug("Feature %s completed", feature_name)
    return result.data


def _call_feature(feature_name: str, **kwargs: Any) -> Any:
    """Run a feature handler and translate its result for the API"""
    try:
        feature = FeatureRegistry.get_feature(feature_name)
        if not feature:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{feature_name} feature not found",
            )
        result = feature.handler(**kwargs)
        if not result.success:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=result.error or "An error occurred",
            )
        return result.data
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Error in %s endpoint: %s", feature_name, str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from e


# ----------------- CLI Commands -----------------


@app.command()
def version() -> None:
    """Show the formulaops version"""
    setup_logging(False)
    data = _handle_cli_result("version", _feature_or_exit("version").handler())
    logger.info("formulaops version: %s", data.get("version", "unknown"))


@app.command()
def evaluate(
    symbol: str = typer.Argument(..., help="Operator symbol, e.g. '/'"),
    operands: List[str] = typer.Argument(..., help="Operand values"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Evaluate an operator over its operands"""
    setup_logging(debug, verbose)

    values = [parse_operand(token) for token in operands]
    logger.log(VERBOSE_LEVEL, "Evaluating %s over %r", symbol, values)

    feature = _feature_or_exit("evaluate")
    try:
        result = feature.handler(symbol=symbol, operands=values)
    except Exception as e:
        logger.exception("Unexpected error")
        raise typer.Exit(code=1) from e
    data = _handle_cli_result("evaluate", result)
    if data["error"] is not None:
        print(data["error"])
    else:
        print(data["value"])


@app.command("list-operators")
def list_operators() -> None:
    """List available operators"""
    setup_logging(False)

    data = _handle_cli_result(
        "list_operators", _feature_or_exit("list_operators").handler()
    )
    operators = data.get("operators", {})
    if not operators:
        print("  No operators found.")
        return
    print("Available operators:")
    for symbol, info in operators.items():
        print(f"  {symbol:<4} {info['name']:<24} {info['description']}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Host to bind the API server"),
    port: int = typer.Option(8000, help="Port to bind the API server"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
):
    """Start the formulaops API server"""
    setup_logging(debug)

    logger.info(
        f"Starting formulaops API server version {get_version()} on {host}:{port}"
    )
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(api_app, host=host, port=port)


# ----------------- API Endpoints -----------------


@api_router.get("/version")
async def get_version_endpoint():
    """Get formulaops version"""
    return _call_feature("version")


@api_router.get("/operators")
async def list_operators_endpoint():
    """List available operators"""
    return _call_feature("list_operators")


@api_router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_endpoint(request: EvaluateRequest):
    """Evaluate an operator; formula errors come back in the ``error`` field"""
    return _call_feature("evaluate", symbol=request.symbol, operands=request.operands)


# Include the router in the FastAPI app
api_app.include_router(api_router)


if __name__ == "__main__":
    app()
