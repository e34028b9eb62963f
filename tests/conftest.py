from typing import Any, Dict, List, Optional, Tuple

import pytest
from app.application.services.auth_service import AuthService
from app.application.services.file_service import FileService
from app.application.services.status_service import StatusService
from app.application.services.user_service import UserService
from app.domain.models.file import File
from app.domain.models.health_status import HealthStatus
from app.domain.models.identifier import new_object_id
from app.domain.models.user import User
from app.infrastructure.external.file_storage.local_file_storage import LocalFileStorage
from app.interfaces import service_dependencies
from app.main import app
from core.security import get_password_hash
from fastapi.testclient import TestClient


class InMemoryDB:
    """进程内的"数据库"，多个UoW共享同一份数据"""

    def __init__(self) -> None:
        self.files: Dict[str, File] = {}
        self.users: Dict[str, User] = {}
        self.fail_on_file_create = False


class FakeFileRepo:
    def __init__(self, db: InMemoryDB) -> None:
        self._db = db

    async def create(self, file: File) -> File:
        if self._db.fail_on_file_create:
            raise RuntimeError("insert failed")
        stored = file.model_copy(update={"id": new_object_id()})
        self._db.files[stored.id] = stored
        return stored.model_copy()

    async def get_by_id(self, file_id: str, user_id: Optional[str] = None) -> Optional[File]:
        file = self._db.files.get(file_id)
        if not file or (user_id is not None and file.user_id != user_id):
            return None
        return file.model_copy()

    async def list_by_parent(
        self, user_id: str, parent_id: str, skip: int = 0, limit: int = 20
    ) -> List[File]:
        files = [
            file
            for file in self._db.files.values()
            if file.user_id == user_id and file.storage_parent_id == parent_id
        ]
        files.sort(key=lambda file: file.id, reverse=True)
        return [file.model_copy() for file in files[skip : skip + limit]]

    async def update_public(self, file_id: str, user_id: str, is_public: bool) -> None:
        file = self._db.files.get(file_id)
        if file and file.user_id == user_id:
            file.is_public = is_public

    async def count(self) -> int:
        return len(self._db.files)


class FakeUserRepo:
    def __init__(self, db: InMemoryDB) -> None:
        self._db = db

    async def create(self, user: User) -> User:
        stored = user.model_copy(update={"id": new_object_id()})
        self._db.users[stored.id] = stored
        return stored

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return self._db.users.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._db.users.values() if u.email == email), None)

    async def count(self) -> int:
        return len(self._db.users)


class FakeUnitOfWork:
    def __init__(self, db: InMemoryDB) -> None:
        self.file = FakeFileRepo(db)
        self.user = FakeUserRepo(db)

    async def commit(self):
        return None

    async def rollback(self):
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None


class FakeJobQueue:
    def __init__(self) -> None:
        self.jobs: List[Tuple[str, Dict[str, Any]]] = []

    async def enqueue(self, job_name: str, payload: Dict[str, Any]) -> str:
        self.jobs.append((job_name, payload))
        return f"{len(self.jobs)}-0"


class FakeSessionStore:
    def __init__(self) -> None:
        self.tokens: Dict[str, str] = {}

    async def create(self, user_id: str) -> str:
        token = f"token-{len(self.tokens) + 1}"
        self.tokens[token] = user_id
        return token

    async def get_user_id(self, token: str) -> Optional[str]:
        return self.tokens.get(token)

    async def delete(self, token: str) -> None:
        self.tokens.pop(token, None)


class FakeHealthChecker:
    def __init__(self, service_name: str, ok: bool = True) -> None:
        self.service_name = service_name
        self.ok = ok

    async def check(self) -> HealthStatus:
        return HealthStatus(service=self.service_name, status="ok" if self.ok else "error")


@pytest.fixture
def db() -> InMemoryDB:
    return InMemoryDB()


@pytest.fixture
def uow_factory(db: InMemoryDB):
    def factory() -> FakeUnitOfWork:
        return FakeUnitOfWork(db)

    return factory


@pytest.fixture
def storage_root(tmp_path) -> str:
    return str(tmp_path / "files_manager")


@pytest.fixture
def file_storage(storage_root: str) -> LocalFileStorage:
    return LocalFileStorage(root_dir=storage_root)


@pytest.fixture
def thumbnail_queue() -> FakeJobQueue:
    return FakeJobQueue()


@pytest.fixture
def email_queue() -> FakeJobQueue:
    return FakeJobQueue()


@pytest.fixture
def session_store() -> FakeSessionStore:
    return FakeSessionStore()


@pytest.fixture
def file_service(uow_factory, file_storage, thumbnail_queue) -> FileService:
    return FileService(
        uow_factory=uow_factory,
        file_storage=file_storage,
        job_queue=thumbnail_queue,
    )


@pytest.fixture
def user_service(uow_factory, email_queue) -> UserService:
    return UserService(uow_factory=uow_factory, job_queue=email_queue)


@pytest.fixture
def auth_service(uow_factory, session_store) -> AuthService:
    return AuthService(uow_factory=uow_factory, session_store=session_store)


@pytest.fixture
def make_user(db: InMemoryDB, session_store: FakeSessionStore):
    """在内存库中创建用户并返回 (用户, 会话令牌)"""

    def factory(email: str, password: str = "secret") -> Tuple[User, str]:
        user = User(id=new_object_id(), email=email, password_hash=get_password_hash(password))
        db.users[user.id] = user
        token = f"token-{user.id}"
        session_store.tokens[token] = user.id
        return user, token

    return factory


@pytest.fixture
def client(file_service, user_service, auth_service, uow_factory):
    """所有服务依赖替换为内存实现的 TestClient，不触发应用生命周期(数据库迁移等)"""
    status_service = StatusService(
        checkers=[FakeHealthChecker("redis"), FakeHealthChecker("db")],
        uow_factory=uow_factory,
    )
    app.dependency_overrides[service_dependencies.get_file_service] = lambda: file_service
    app.dependency_overrides[service_dependencies.get_user_service] = lambda: user_service
    app.dependency_overrides[service_dependencies.get_auth_service] = lambda: auth_service
    app.dependency_overrides[service_dependencies.get_status_service] = lambda: status_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
