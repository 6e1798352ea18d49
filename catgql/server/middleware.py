import time
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from catgql.core.errors import classify_exception
from catgql.core.logger import setup_logger

logger = setup_logger(__name__, include_location=True)


async def catch_exceptions_middleware(request: Request, call_next):
    start_time = time.time()
    try:
        response: Response = await call_next(request)
    except Exception as err:
        process_time_sec = time.time() - start_time
        error_info = classify_exception(err)
        logger.exception(
            f"{request.method} {request.url} ({round(process_time_sec, 3)}):\nstatus_code: 500\nresponse: {err}",
            extra={"error": error_info.to_dict()},
        )
        return JSONResponse(content={"error": error_info.message}, status_code=500)

    process_time_sec = time.time() - start_time
    # Read response body safely (handles both Response and StreamingResponse)
    response_body = b""
    async for chunk in response.body_iterator:
        response_body += chunk
    logger.info(f"{request.method} {request.url} ({round(process_time_sec, 3)}): status_code: {response.status_code}")
    logger.debug(f"response: {response_body.decode(errors='replace')}")
    # Rebuild response (since the original stream is consumed)
    return Response(
        content=response_body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
