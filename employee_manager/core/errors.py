# employee_manager/core/errors.py
"""Typed failures raised by the RPC service.

Each failure carries the tRPC error name and the HTTP status the transport
answers with. The JSON-RPC numeric codes mirror the ones tRPC clients expect.
"""
from typing import Any

JSONRPC_CODES = {
    "PARSE_ERROR": -32700,
    "BAD_REQUEST": -32600,
    "INTERNAL_SERVER_ERROR": -32603,
    "NOT_FOUND": -32004,
    "METHOD_NOT_SUPPORTED": -32005,
}


class RPCFailure(Exception):
    code = "INTERNAL_SERVER_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_data(self) -> dict[str, Any]:
        return {"code": self.code, "httpStatus": self.http_status}


class ValidationFailed(RPCFailure):
    code = "BAD_REQUEST"
    http_status = 400

    def __init__(self, issues: list[dict[str, Any]]):
        fields = ", ".join(".".join(str(p) for p in i["path"]) or "input" for i in issues)
        super().__init__(f"Invalid input: {fields}")
        self.issues = issues

    def to_data(self) -> dict[str, Any]:
        data = super().to_data()
        data["issues"] = self.issues
        return data


class NotFound(RPCFailure):
    code = "NOT_FOUND"
    http_status = 404


class StoreFailure(RPCFailure):
    code = "INTERNAL_SERVER_ERROR"
    http_status = 500


class ParseFailure(RPCFailure):
    code = "PARSE_ERROR"
    http_status = 400


class MethodNotSupported(RPCFailure):
    code = "METHOD_NOT_SUPPORTED"
    http_status = 405
