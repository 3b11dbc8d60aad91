from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError

from app.agents import ConvertTimeAgent
from app.config import settings
from app.shared.profiles import ProfileDirectory
from app.timezones import HostContext
from models.a2a import A2AMessage, JSONRPCRequest, JSONRPCResponse, TaskResult

load_dotenv()

logger.remove()
logger.add(sys.stderr, level=settings.log_level.upper())

app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version="2.0.0",
)

convert_agent = ConvertTimeAgent(
    host=HostContext.from_settings(settings),
    favorite_timezones=settings.favorite_timezones,
    profile_directory=ProfileDirectory(
        Path(settings.profiles_csv) if settings.profiles_csv else None
    ),
)


@app.get("/health")
async def health_check():
    """Health check endpoint listing available agents."""
    return {
        "status": "healthy",
        "agents": ["convert-time"],
    }


@app.post("/a2a/convert-time")
async def convert_time_endpoint(request: Request):
    return await _handle_agent_request(request, convert_agent.handle)


def _rpc_error(status_code: int, request_id, code: int, message: str, data=None):
    error = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return JSONResponse(
        status_code=status_code,
        content={"jsonrpc": "2.0", "id": request_id, "error": error},
    )


async def _handle_agent_request(request: Request, handler):
    try:
        body = await request.json()
    except ValueError:
        return _rpc_error(400, None, -32700, "Parse error: body must be JSON")

    if not isinstance(body, dict) or body.get("jsonrpc") != "2.0" or "id" not in body:
        request_id = body.get("id") if isinstance(body, dict) else None
        return _rpc_error(
            400,
            request_id,
            -32600,
            "Invalid Request: jsonrpc must be '2.0' and id is required",
        )

    try:
        rpc_request = JSONRPCRequest(**body)
    except ValidationError as exc:
        logger.warning("Rejected malformed JSON-RPC params", error=str(exc))
        return _rpc_error(
            400,
            body.get("id"),
            -32602,
            "Request missing required message payload.",
        )

    message = _extract_message(rpc_request)
    if message is None:
        return _rpc_error(
            400,
            rpc_request.id,
            -32602,
            "Request missing required message payload.",
        )

    try:
        result: TaskResult = await handler(
            message,
            context_id=getattr(rpc_request.params, "contextId", None),
            task_id=getattr(rpc_request.params, "taskId", None),
        )
    except Exception as exc:
        logger.exception("Agent failed while handling request", request_id=rpc_request.id)
        return _rpc_error(
            500,
            rpc_request.id,
            -32603,
            "Internal error",
            data={"details": str(exc)},
        )

    response = JSONRPCResponse(id=rpc_request.id, result=result)
    return response.model_dump()


def _extract_message(request_obj: JSONRPCRequest) -> Optional[A2AMessage]:
    params = request_obj.params
    if hasattr(params, "message"):
        return params.message
    if hasattr(params, "messages"):
        messages = params.messages
        if messages:
            return messages[-1]
    return None


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 5001))
    uvicorn.run(app, host="0.0.0.0", port=port)
