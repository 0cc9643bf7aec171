"""
commonlib Main module - command line interface and API server
"""

import logging
import time
from pathlib import Path
from typing import Any, List, Optional

import typer
import uvicorn
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRouter
from lark.exceptions import LarkError
from pydantic import BaseModel, Field

from commonlib import value_codec
from commonlib.evaluator import Environment, evaluate_expression
from commonlib.error_msg import CommonLibException
from commonlib.features import (
    Feature,
    FeatureRegistry,
    OperationResult,
    handle_list_primitives,
)
from commonlib.parser import EReference, parse_expression
from commonlib.primitives.registry import get_registry
from commonlib.version import get_version

# Module-level logger
logger = logging.getLogger("commonlib.main")


class ErrorResponse(BaseModel):
    """Standard error response model"""

    detail: str


class CommonLibJSONResponse(JSONResponse):
    """JSON response that keeps NaN, the infinities and -0.0 distinguishable"""

    def render(self, content: Any) -> bytes:
        return value_codec.dumps(content, separators=(",", ":")).encode("utf-8")


# Create CLI app with Typer
app = typer.Typer(
    name="commonlib",
    help="commonlib - conformance-pinned arithmetic, comparison, logical and string primitives",
    add_completion=False,
)

# Create FastAPI app for API server
api_app = FastAPI(
    title="commonlib API",
    description="Invoke commonlib primitives and run the conformance matrix",
    version=get_version(),
    default_response_class=CommonLibJSONResponse,
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
class InvokeRequest(BaseModel):
    primitive: str
    arguments: List[Any] = Field(default_factory=list)


class RunRequest(BaseModel):
    program: str
    filename: Optional[str] = None


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

    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access", "asyncio"):
        logging.getLogger(logger_name).setLevel(logging.DEBUG if debug else logging.WARNING)


def _feature_or_exit(feature_name: str) -> Feature:
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=1)
    return feature


def _handle_cli_result(feature_name: str, result: OperationResult) -> Any:
    if not result.success:
        logger.error("%s failed: %s", feature_name, result.error or "Unknown error")
        raise typer.Exit(code=1)
    return result.data


def parse_cli_argument(text: str) -> Any:
    """Turn one command line argument into a primitive argument.

    Script literals are accepted (`3`, `-0.5`, `NaN`, `-Infinity`, `true`,
    `"quoted"`, `["a", "b"]`). Anything that does not parse as a literal,
    or parses as a bare name, is passed through as text.
    """
    try:
        expression = parse_expression(text)
    except LarkError:
        return text
    if isinstance(expression, EReference):
        return text
    return evaluate_expression(Environment(), get_registry(), expression)


# ----------------- CLI Commands -----------------


@app.command()
def version() -> None:
    """Show the commonlib version"""
    setup_logging(False)
    data = _handle_cli_result("version", _feature_or_exit("version").handler())
    logger.info("commonlib version: %s", data.get("version", "unknown"))


@app.command("list-primitives")
def list_primitives(
    namespace: Optional[str] = typer.Argument(None, help="Namespace to filter primitives (optional)")
) -> None:
    """List available primitives"""
    setup_logging(False)

    data = _handle_cli_result("list_primitives", handle_list_primitives(namespace=namespace))

    if data.get('namespace_filter'):
        print(f"Primitives in namespace '{data['namespace_filter']}':")
    else:
        print("All available primitives:")

    primitives = data.get('primitives', {})
    if not primitives:
        print("  No primitives found.")
    else:
        for name, description in sorted(primitives.items()):
            print(f"  {name:<30} {description}")

    if not data.get('namespace_filter'):
        namespaces = data.get('namespaces', [])
        if namespaces:
            print(f"\nAvailable namespaces: {', '.join(sorted(namespaces))}")
            print("Use 'commonlib list-primitives <namespace>' to filter by namespace.")


@app.command()
def invoke(
    primitive: str = typer.Argument(..., help="Primitive name, e.g. arithmetic.modulo"),
    arguments: Optional[List[str]] = typer.Argument(None, help="Literal arguments"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Call one primitive and print its result"""
    setup_logging(debug)

    try:
        values = [parse_cli_argument(argument) for argument in arguments or []]
    except CommonLibException as e:
        logger.error("Invalid argument: %s", e)
        raise typer.Exit(code=1)

    data = _handle_cli_result(
        "invoke",
        _feature_or_exit("invoke").handler(primitive=primitive, arguments=values),
    )
    print(value_codec.render(data["result"]))


@app.command()
def run(
    filename: str = typer.Argument(..., help="commonlib script file"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Run a commonlib script"""
    setup_logging(debug, verbose)

    try:
        program = Path(filename).read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.error("File not found: %s", filename)
        raise typer.Exit(code=1)
    except OSError as e:
        logger.error("Error reading file %s: %s", filename, str(e))
        raise typer.Exit(code=1)

    data = _handle_cli_result(
        "run",
        _feature_or_exit("run").handler(program=program, filename=filename),
    )
    for item in data["printed"]:
        print(f"{item['label']}={value_codec.render(item['value'])}")


@app.command()
def conformance(
    namespace: Optional[str] = typer.Option(None, "--namespace", help="Only run cases of this namespace"),
    tolerance: Optional[float] = typer.Option(
        None,
        "--tolerance",
        help="Absolute tolerance for approximate float cases (default: $COMMONLIB_TOLERANCE or 1e-4)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Run the conformance matrix against the built-in primitives"""
    setup_logging(debug)

    data = _handle_cli_result(
        "conformance",
        _feature_or_exit("conformance").handler(namespace=namespace, tolerance=tolerance),
    )
    for failure in data["failures"]:
        print(f"FAIL {failure['case']}: {failure['reason']}")
    print(f"{data['passed']}/{data['total']} conformance cases passed")
    if data["failed"]:
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Host to bind the API server"),
    port: int = typer.Option(8000, help="Port to bind the API server"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
):
    """Start the commonlib API server"""
    setup_logging(debug)

    logger.info(
        f"Starting commonlib API server version {get_version()} on {host}:{port}"
    )
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(api_app, host=host, port=port)


# ----------------- API Endpoints -----------------


def _api_result(feature_name: str, **kwargs: Any) -> Any:
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{feature_name} feature not found",
        )
    try:
        result = feature.handler(**kwargs)
    except Exception as e:
        logger.error("Error in %s endpoint: %s", feature_name, str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from e
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.error or "An error occurred",
        )
    return result.data


@api_router.get("/version")
async def get_version_endpoint():
    """Get commonlib version"""
    return _api_result("version")


@api_router.get("/primitives")
async def list_primitives_endpoint(namespace: Optional[str] = None):
    """List primitives, optionally restricted to one namespace"""
    return _api_result("list_primitives", namespace=namespace)


@api_router.post("/invoke", responses={400: {"model": ErrorResponse}})
async def invoke_endpoint(request: InvokeRequest):
    """Call a primitive; NaN, infinities and -0.0 travel as {"$float": "..."}"""
    try:
        arguments = value_codec.decode_value(request.arguments)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return _api_result("invoke", primitive=request.primitive, arguments=arguments)


@api_router.post("/run", responses={400: {"model": ErrorResponse}})
async def run_program_endpoint(request: RunRequest):
    """Evaluate a script and return its printed values"""
    return _api_result("run", program=request.program, filename=request.filename)


@api_router.get("/conformance")
async def conformance_endpoint(namespace: Optional[str] = None, tolerance: Optional[float] = None):
    """Run the conformance matrix"""
    return _api_result("conformance", namespace=namespace, tolerance=tolerance)


# Include the router in the FastAPI app
api_app.include_router(api_router)


if __name__ == "__main__":
    app()
