from pathlib import Path

NAMES = ["a.txt", "b 1.txt", "b 10.txt", "b 11.txt", "b 5.txt", "Ssm.txt"]
SORTED = ["Ssm.txt", "a.txt", "b 1.txt", "b 5.txt", "b 10.txt", "b 11.txt"]


def test_sort_stdin(run_cli, tmp_path: Path):
    result = run_cli(tmp_path, "sort", input="\n".join(NAMES) + "\n")
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == SORTED


def test_sort_reverse(run_cli, tmp_path: Path):
    result = run_cli(tmp_path, "sort", "-r", input="\n".join(NAMES))
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == list(reversed(SORTED))


def test_sort_files_unique(run_cli, tmp_path: Path):
    (tmp_path / "one.txt").write_text("pkg-1.10\npkg-1.9\n", encoding="utf-8")
    (tmp_path / "two.txt").write_text("pkg-1.9\npkg-1.0~rc1\npkg-1.0\n", encoding="utf-8")
    result = run_cli(tmp_path, "sort", "--unique", "one.txt", "two.txt")
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == ["pkg-1.0~rc1", "pkg-1.0", "pkg-1.9", "pkg-1.10"]


def test_sort_missing_file(run_cli, tmp_path: Path):
    result = run_cli(tmp_path, "sort", "does-not-exist.txt")
    assert result.returncode == 2
    assert "Failed to read does-not-exist.txt" in result.stderr


def test_sort_letters_first_from_dotenv(run_cli, tmp_path: Path):
    (tmp_path / ".env").write_text("VSORT_LETTERS_FIRST=1\n", encoding="utf-8")
    result = run_cli(tmp_path, "sort", input="a%\naz\n")
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == ["az", "a%"]
    # explicit flag overrides .env
    result = run_cli(tmp_path, "sort", "--ordinal", input="a%\naz\n")
    assert result.stdout.splitlines() == ["a%", "az"]


def test_sort_file_with_invalid_utf8(run_cli, tmp_path: Path):
    (tmp_path / "names.txt").write_bytes(b"b\xff10\nb\xff9\n")
    result = run_cli(tmp_path, "sort", "names.txt", binary=True)
    assert result.returncode == 0, result.stderr
    assert result.stdout == b"b\xff9\nb\xff10\n"


def test_sort_stdin_with_invalid_utf8(run_cli, tmp_path: Path):
    result = run_cli(tmp_path, "sort", input=b"v\xfe2\nv\xfe1.0~rc1\nv\xfe1.0\n", binary=True)
    assert result.returncode == 0, result.stderr
    assert result.stdout == b"v\xfe1.0~rc1\nv\xfe1.0\nv\xfe2\n"
