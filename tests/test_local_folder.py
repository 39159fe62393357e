import pytest

from roster_renamer.adapters.local_folder import LocalFolderAdapter


def test_list_files_skips_directories_and_hidden_files(tmp_path) -> None:
    (tmp_path / "a.png").write_bytes(b"a")
    (tmp_path / ".DS_Store").write_bytes(b"x")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.png").write_bytes(b"n")

    files = LocalFolderAdapter().list_files(tmp_path)

    assert [f.name for f in files] == ["a.png"]
    assert files[0].extension == ".png"
    assert files[0].path == tmp_path / "a.png"


def test_list_files_missing_folder_raises(tmp_path) -> None:
    with pytest.raises(NotADirectoryError):
        LocalFolderAdapter().list_files(tmp_path / "missing")


def test_copy_file_preserves_bytes_and_refuses_overwrite(tmp_path) -> None:
    src = tmp_path / "a.png"
    src.write_bytes(b"\x89PNG data")
    dst = tmp_path / "copy.png"
    adapter = LocalFolderAdapter()

    adapter.copy_file(src, dst)

    assert dst.read_bytes() == b"\x89PNG data"
    assert src.exists()
    with pytest.raises(FileExistsError):
        adapter.copy_file(src, dst)


def test_rename_file_refuses_to_overwrite(tmp_path) -> None:
    (tmp_path / "a.png").write_bytes(b"a")
    (tmp_path / "b.png").write_bytes(b"b")
    adapter = LocalFolderAdapter()

    with pytest.raises(FileExistsError):
        adapter.rename_file(tmp_path / "a.png", tmp_path / "b.png")

    assert (tmp_path / "b.png").read_bytes() == b"b"
    adapter.rename_file(tmp_path / "a.png", tmp_path / "c.png")
    assert (tmp_path / "c.png").read_bytes() == b"a"


def test_make_dir_fails_when_present(tmp_path) -> None:
    adapter = LocalFolderAdapter()
    adapter.make_dir(tmp_path / "backup")

    with pytest.raises(FileExistsError):
        adapter.make_dir(tmp_path / "backup")
