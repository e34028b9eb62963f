from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

# users/files两张表的约束命名规则，需要和alembic迁移脚本中的名字保持一致
naming_convention = {
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s_%(column_0_name)s",
}

Base = declarative_base(metadata=MetaData(naming_convention=naming_convention))
