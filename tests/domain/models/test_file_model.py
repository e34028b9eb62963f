import pytest
from app.domain.models.file import ROOT_PARENT_ID, File, FileType, is_root_parent

OWNER = "5f1e3c2b9a8d7e6f5a4b3c2d"


def test_file_type_parse() -> None:
    assert FileType.parse("folder") == FileType.FOLDER
    assert FileType.parse(FileType.IMAGE) == FileType.IMAGE
    assert FileType.parse("Folder") is None
    assert FileType.parse(None) is None


@pytest.mark.parametrize("value, expected", [(None, True), (0, True), ("0", True), ("", True), ("5f1e", False), (1, False)])
def test_is_root_parent(value, expected) -> None:
    assert is_root_parent(value) is expected


def test_parent_representations() -> None:
    root_file = File(user_id=OWNER, name="a.txt", type=FileType.FILE)
    nested = File(user_id=OWNER, name="b.txt", type=FileType.FILE, parent_id="6a2b3c4d5e6f7a8b9c0d1e2f")

    assert root_file.storage_parent_id == ROOT_PARENT_ID
    assert root_file.public_parent_id == 0
    assert nested.storage_parent_id == "6a2b3c4d5e6f7a8b9c0d1e2f"
    assert nested.public_parent_id == "6a2b3c4d5e6f7a8b9c0d1e2f"
    assert File.parent_from_storage("0") is None
    assert File.parent_from_storage(None) is None
    assert File.parent_from_storage("6a2b3c4d5e6f7a8b9c0d1e2f") == "6a2b3c4d5e6f7a8b9c0d1e2f"


def test_is_readable_by() -> None:
    private = File(user_id=OWNER, name="a.txt", type=FileType.FILE)
    public = private.model_copy(update={"is_public": True})

    assert private.is_readable_by(OWNER)
    assert not private.is_readable_by("6a2b3c4d5e6f7a8b9c0d1e2f")
    assert not private.is_readable_by(None)
    assert public.is_readable_by(None)
    assert public.is_readable_by("6a2b3c4d5e6f7a8b9c0d1e2f")
