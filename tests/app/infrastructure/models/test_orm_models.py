from app.infrastructure.models import FileModel
from sqlalchemy import Text


def test_file_name_column_has_no_length_limit() -> None:
    column = FileModel.__table__.c.name

    assert isinstance(column.type, Text)
    assert column.type.length is None
    assert column.nullable is False
