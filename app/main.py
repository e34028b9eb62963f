import logging
from contextlib import asynccontextmanager
from pathlib import Path

from alembic import command
from alembic.config import Config
from app.infrastructure.logging import setup_logging
from app.infrastructure.storage.postgres import get_postgres
from app.infrastructure.storage.redis import get_redis
from app.interfaces.endpoints.routes import router as api_router
from app.interfaces.errors.exception_handlers import register_exception_handlers
from core.config import get_settings
from fastapi import FastAPI
from sqlalchemy.engine import make_url
from starlette.middleware.cors import CORSMiddleware

# 加载配置信息
settings = get_settings()

# 初始化日志记录
setup_logging()
logger = logging.getLogger()

logger.info("应用程序启动中...")

# 定义FastApi路由tags标签
openapi_tags = [
    {
        "name": "文件模块",
        "description": "包含 **文件上传/列表/公开/内容读取** 等API 接口。",
    },
    {
        "name": "用户模块",
        "description": "包含 **用户注册/当前用户信息** 等API 接口。",
    },
    {
        "name": "认证模块",
        "description": "包含 **登录换取令牌/注销令牌** 等API 接口。",
    },
    {
        "name": "状态模块",
        "description": "包含 **状态监测** 等API 接口，用于监测系统的运行状态。",
    },
]

ALEMBIC_INI_PATH = Path(__file__).resolve().parent.parent / "alembic.ini"


def _run_migrations() -> None:
    """使用同步驱动(psycopg2)执行alembic迁移到最新版本"""
    url = make_url(settings.sqlalchemy_database_url)
    if url.drivername == "postgresql+asyncpg":
        url = url.set(drivername="postgresql+psycopg2")
    url = url.update_query_dict({"connect_timeout": url.query.get("connect_timeout", "5")})

    alembic_cfg = Config(str(ALEMBIC_INI_PATH))
    # set_main_option会经过configparser插值，%需要转义
    alembic_cfg.set_main_option(
        "sqlalchemy.url", url.render_as_string(hide_password=False).replace("%", "%%")
    )
    alembic_cfg.attributes["configure_logger"] = False

    logger.info(f"数据库迁移开始，连接地址: {url.render_as_string(hide_password=True)}")
    command.upgrade(alembic_cfg, "head")
    logger.info("数据库迁移完成")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """创建FastAPI应用生命周期上下文管理器"""
    logger.info("文件管理服务正在初始化")

    # 1.运行数据库迁移
    _run_migrations()

    # 2.初始化Redis客户端(会话令牌+任务队列)
    redis_client = get_redis()
    await redis_client.init()

    # 3.初始化Postgres数据库客户端
    postgres_client = get_postgres()
    await postgres_client.init()

    logger.info(f"文件存储根目录: {settings.storage_root}")

    try:
        yield
    finally:
        # 4.应用关闭前的清理工作
        logger.info("文件管理服务正在关闭")
        await redis_client.shutdown()
        await postgres_client.shutdown()
        logger.info("文件管理服务关闭成功")


app = FastAPI(
    title="Files Manager",
    description="文件存储服务：以层级结构管理文件和文件夹，支持公开/私有、分页列表以及缩略图读取",
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    version="1.0.0",
)

# 配置CORS中间件，解决跨域问题
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 允许所有来源
    allow_credentials=True,
    allow_methods=["*"],  # 允许所有方法
    allow_headers=["*"],  # 允许所有头部
)

# 注册全局异常处理器
register_exception_handlers(app)

app.include_router(api_router)

logger.info("FastAPI应用程序实例已创建。")
