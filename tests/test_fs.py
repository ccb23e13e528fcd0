import pytest

from osiris.fs import (
    MAX_CONTENT,
    MAX_FILES,
    FileSystem,
    FileType,
    FsError,
    Permission,
)


@pytest.fixture
def fs():
    return FileSystem()


@pytest.fixture
def seeded():
    system = FileSystem()
    system.format()
    return system


def test_empty_listing(fs):
    assert len(fs) == 0
    assert fs.list_files() == "No files found in directory /\n"


def test_create_write_read_round_trip(fs):
    fs.create_file("notes.txt", "guest")
    fs.write_file("notes.txt", "hello world")
    assert fs.read_file("notes.txt") == "hello world"
    assert fs.file_size("notes.txt") == len("hello world")
    info = fs.file_info("notes.txt")
    assert info.owner == "guest"
    assert info.created_date == "2025-05-15"
    assert info.type == FileType.REGULAR


def test_duplicate_create_fails(fs):
    fs.create_file("a", "guest")
    with pytest.raises(FsError):
        fs.create_file("a", "guest")
    assert len(fs) == 1


def test_table_full(fs):
    for n in range(MAX_FILES):
        fs.create_file(f"f{n}", "guest")
    assert len(fs) == MAX_FILES
    with pytest.raises(FsError):
        fs.create_file("extra", "guest")
    with pytest.raises(FsError):
        fs.create_directory("dir")


def test_delete_and_slot_reuse(fs):
    fs.create_file("first", "guest")
    fs.create_file("second", "guest")
    fs.delete_file("first")
    assert not fs.exists("first")
    fs.create_file("third", "guest")
    assert [e.filename for e in fs] == ["third", "second"]


def test_delete_missing_fails(fs):
    with pytest.raises(FsError):
        fs.delete_file("ghost")


def test_content_limit(fs):
    fs.create_file("big", "guest")
    fs.write_file("big", "x" * (MAX_CONTENT - 1))
    assert fs.file_size("big") == MAX_CONTENT - 1
    with pytest.raises(FsError):
        fs.write_file("big", "x" * MAX_CONTENT)
    assert fs.file_size("big") == MAX_CONTENT - 1


def test_write_without_permission(fs):
    fs.create_file("ro", "guest")
    fs.set_permission("ro", Permission.READ)
    with pytest.raises(FsError):
        fs.write_file("ro", "data")
    assert fs.check_permission("ro", Permission.READ)
    assert not fs.check_permission("ro", Permission.WRITE)


def test_read_without_permission(fs):
    fs.create_file("wo", "guest")
    fs.set_permission("wo", Permission.WRITE)
    with pytest.raises(FsError, match="Permission denied"):
        fs.read_file("wo")


def test_missing_file_errors(fs):
    with pytest.raises(FsError):
        fs.read_file("nope")
    with pytest.raises(FsError):
        fs.write_file("nope", "x")
    with pytest.raises(FsError):
        fs.file_size("nope")
    with pytest.raises(FsError):
        fs.set_permission("nope", Permission.READ)
    assert fs.check_permission("nope", Permission.READ) is False


def test_system_files(seeded):
    assert len(seeded) == 4
    for name in ("/", "system.cfg", "welcome.txt", ".secret"):
        assert seeded.exists(name)
    assert seeded.read_file("system.cfg") == "OS: OSIRIS\nVersion: 2.0\nBuild: 2025-05-15\n"
    assert seeded.file_info("system.cfg").type == FileType.SYSTEM
    assert seeded.file_info(".secret").type == FileType.HIDDEN
    assert seeded.file_info("/").type == FileType.DIRECTORY
    assert seeded.check_permission("system.cfg", Permission.ADMIN)


def test_system_file_protected(seeded):
    with pytest.raises(FsError):
        seeded.delete_file("system.cfg")
    with pytest.raises(FsError):
        seeded.write_file("system.cfg", "changed")
    assert seeded.exists("system.cfg")


def test_format_resets(seeded):
    seeded.create_file("temp", "guest")
    seeded.format()
    assert len(seeded) == 4
    assert not seeded.exists("temp")


def test_listing_hides_hidden_files(seeded):
    listing = seeded.list_files()
    lines = listing.splitlines()
    assert lines[0] == "Files in directory /:"
    assert ".secret" not in listing
    row = next(line for line in lines if line.startswith("welcome.txt"))
    size = seeded.file_size("welcome.txt")
    assert row.split() == ["welcome.txt", str(size), "2025-05-15", "2025-05-15", "F"]
    sys_row = next(line for line in lines if line.startswith("system.cfg"))
    assert sys_row.endswith("S")


def test_directories(fs):
    fs.create_directory("docs")
    fs.create_file("readme", "guest")
    fs.set_directory("docs")
    assert fs.current_directory == "docs"
    with pytest.raises(FsError):
        fs.set_directory("readme")
    with pytest.raises(FsError):
        fs.set_directory("missing")
    assert fs.current_directory == "docs"
    with pytest.raises(FsError):
        fs.create_directory("docs")


def test_reset_restores_root(fs):
    fs.create_directory("docs")
    fs.set_directory("docs")
    fs.reset()
    assert fs.current_directory == "/"
    assert len(fs) == 0


def test_search_by_name_and_content(seeded):
    result = seeded.search("welcome")
    assert result.startswith('Search results for "welcome":')
    assert any(line.startswith("welcome.txt") for line in result.splitlines())

    content = seeded.search("help")
    assert "F (content match)" in content


def test_search_skips_hidden_and_reports_none(seeded):
    result = seeded.search("enlightenment")
    assert result.splitlines()[-1] == 'No files found matching "enlightenment"'


def test_browser_text(seeded):
    text = seeded.browser_text()
    assert text.startswith("===== OSIRIS File Browser =====\nCurrent Directory: /\n")
    assert seeded.list_files() in text
    assert text.endswith("[O]pen, [E]dit, [D]elete, [C]reate, [B]ack, [Q]uit\n")