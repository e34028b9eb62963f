import logging

from app.application.errors.exceptions import AppException
from app.interfaces.schemas import ErrorResponse
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


def _error_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=msg).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """统一处理项目中所有的异常，涵盖：自定义业务异常、请求校验异常、HTTP异常、通用异常"""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request, exc: AppException
    ) -> JSONResponse:
        """自定义应用异常处理器，消息原样返回给调用方"""
        logger.info(f"App exception: {exc.status_code} {exc.msg}")
        return _error_response(exc.status_code, exc.msg)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """请求体/参数格式错误统一按400处理"""
        errors = exc.errors()
        msg = errors[0].get("msg", "Bad request") if errors else "Bad request"
        logger.info(f"Request validation failed: {msg}")
        return _error_response(400, msg)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        """HTTP异常处理器，捕获HTTPException并返回标准化响应"""
        logger.error(f"HTTP exception: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail)).model_dump(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """通用异常处理器，捕获所有未处理的异常并返回500"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return _error_response(500, "Internal Server Error")
