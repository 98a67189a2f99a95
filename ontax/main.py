import argparse
import logging
import sys
from decimal import Decimal
from typing import Any, Sequence

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from ontax.config import get_settings
from ontax.core.breakdown import BreakdownField, compute_breakdown, resolve_field
from ontax.core.federal import FEDERAL_BRACKETS_2021
from ontax.core.money import to_income
from ontax.core.provinces import supported_provinces
from ontax.errors import DomainError, TaxCalculationError
from ontax.lifespan import build_application_lifespan

logger = logging.getLogger("ontax")

app = FastAPI(
    title="Ontario Income Tax",
    version="0.1.0",
    description="Federal and Ontario income tax, surtax, CPP and EI for employment income.",
    lifespan=build_application_lifespan("api"),
)


@app.exception_handler(TaxCalculationError)
async def _tax_error_handler(request: Request, exc: TaxCalculationError) -> JSONResponse:
    status_code = 422 if isinstance(exc, DomainError) else 400
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "code": exc.code})


def _default_field() -> BreakdownField:
    settings = getattr(app.state, "settings", None) or get_settings()
    return settings.default_field


def _as_number(value: Decimal | None) -> float | None:
    return None if value is None else float(value)


def _bracket_rows(brackets) -> list[dict[str, float | None]]:
    return [
        {"lower": float(b.lower), "upper": _as_number(b.upper), "rate": float(b.rate)}
        for b in brackets
    ]


@app.get("/tax/breakdown")
def breakdown(
    income: Decimal = Query(..., ge=0, description="Gross employment income"),
    field: str | None = Query(None, description="Breakdown field to return"),
):
    selected = resolve_field(field) if field else _default_field()
    value = compute_breakdown(income).value(selected)
    return {"income": float(income), "field": selected.value, "value": float(value)}


@app.get("/tax/summary")
def summary(income: Decimal = Query(..., ge=0, description="Gross employment income")):
    result = compute_breakdown(income).as_dict(skip_undefined=True)
    return {"income": float(income), "breakdown": {name: _as_number(v) for name, v in result.items()}}


@app.get("/tax/provinces")
def provinces():
    return {
        "federal": {"brackets": _bracket_rows(FEDERAL_BRACKETS_2021)},
        "provinces": [
            {
                "code": calc.code,
                "name": calc.name,
                "brackets": _bracket_rows(calc.brackets),
                "surtax": [
                    {"threshold": float(s.threshold), "rate": float(s.rate)} for s in calc.surtax
                ],
            }
            for calc in supported_provinces().values()
        ],
    }


@app.get("/health")
def health():
    settings = getattr(app.state, "settings", None) or get_settings()
    return {
        "ok": True,
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
            "default_field": settings.default_field.value,
        },
    }


def _format_value(value: Decimal | None) -> str:
    return "n/a" if value is None else str(value)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ontax",
        description="Federal and Ontario income tax and payroll deductions for employment income.",
    )
    parser.add_argument("income", help="Gross employment income.")
    parser.add_argument(
        "--field",
        help=f"Breakdown field to print (one of: {', '.join(f.value for f in BreakdownField)}).",
    )
    parser.add_argument("--all", action="store_true", help="Print every breakdown field.")
    return parser.parse_args(argv)


def _parse_serve_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ontax serve", description="Run the HTTP API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def _serve(argv: Sequence[str]) -> int:
    import uvicorn

    args = _parse_serve_args(argv)
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    settings = get_settings()
    logging.basicConfig(level=settings.log_level_value, format="%(levelname)s %(name)s - %(message)s")
    if args_list and args_list[0] == "serve":
        return _serve(args_list[1:])

    args = _parse_args(args_list)
    try:
        income = to_income(args.income)
        result = compute_breakdown(income)
        if args.all:
            rows: dict[str, Any] = result.as_dict(skip_undefined=True)
            for name, value in rows.items():
                print(f"{name}: {_format_value(value)}")
            return 0
        selected = resolve_field(args.field) if args.field else settings.default_field
        print(_format_value(result.value(selected)))
    except TaxCalculationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
