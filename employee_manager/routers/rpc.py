# employee_manager/routers/rpc.py
"""tRPC-style HTTP binding for the employee procedures.

Queries are ``GET /<prefix>/<name>?input=<json>``, mutations are
``POST /<prefix>/<name>`` with a JSON body. Successful calls answer
``{"result": {"data": ...}}``; failures answer the tRPC error envelope.
"""
import json
import logging
from typing import Any
from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from employee_manager.core.errors import JSONRPC_CODES, MethodNotSupported, NotFound, ParseFailure, RPCFailure
from employee_manager.service import PROCEDURES, EmployeeService

router = APIRouter()
logger = logging.getLogger(__name__)

METHOD_FOR_KIND = {"query": "GET", "mutation": "POST"}


def get_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


def error_response(failure: RPCFailure, path: str) -> JSONResponse:
    data = failure.to_data()
    data["path"] = path
    body = {
        "error": {
            "message": failure.message,
            "code": JSONRPC_CODES[failure.code],
            "data": data,
        }
    }
    return JSONResponse(status_code=failure.http_status, content=body)


async def _read_input(request: Request) -> Any:
    if request.method == "GET":
        raw = request.query_params.get("input")
    else:
        raw = await request.body() or None
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        raise ParseFailure("Input is not valid JSON") from None


@router.api_route("/{procedure}", methods=["GET", "POST"], tags=["RPC"],
                  summary="Call an employee procedure")
async def call_procedure(procedure: str, request: Request,
                         service: EmployeeService = Depends(get_service)):
    try:
        proc = PROCEDURES.get(procedure)
        if proc is None:
            raise NotFound(f'No "{procedure}" procedure on path "{procedure}"')
        expected = METHOD_FOR_KIND[proc.kind]
        if request.method != expected:
            raise MethodNotSupported(f"Unsupported {request.method}-request to {proc.kind} procedure at path \"{procedure}\"")
        payload = await _read_input(request)
        result = await run_in_threadpool(getattr(service, proc.method), payload)
    except RPCFailure as failure:
        logger.debug("rpc %s failed: %s %s", procedure, failure.code, failure.message)
        return error_response(failure, procedure)
    return JSONResponse(content={"result": {"data": jsonable_encoder(result)}})
