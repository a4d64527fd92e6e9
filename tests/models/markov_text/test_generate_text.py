import pytest
from unittest.mock import MagicMock
from models.markov_text import generate_text
from models.markov_text.generate_text import main, parse_args, resolve_source_path

SOURCE_TEXT = "The cat sat on the mat. The dog sat on the rug. The cat saw the dog."


@pytest.fixture(autouse=True)
def mock_logger(mocker):
    """Route CLI logging to a mock"""
    logger = MagicMock()
    mocker.patch.object(generate_text, "get_logger", return_value=logger)
    mocker.patch("models.markov_text.generator.ResourceMonitor")
    return logger


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "source.txt"
    path.write_text(SOURCE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path):
    """Config with no usable defaults so every flag is required"""
    path = tmp_path / "config.yaml"
    path.write_text(
        "sequence_length: null\nsample_size: null\nsource_file: null\n"
        f"samples_dir: {tmp_path}\n",
        encoding="utf-8")
    return str(path)


def test_parse_args():
    args = parse_args(["--length", "10", "--size", "3", "--file", "a.txt", "--seed", "5"])
    assert args.length == 10
    assert args.size == 3
    assert args.file == "a.txt"
    assert args.seed == 5
    assert args.env == "development"

    args = parse_args([])
    assert args.length is None and args.size is None and args.file is None


def test_parse_args_rejects_non_integer():
    with pytest.raises(SystemExit):
        parse_args(["--length", "many"])


def test_generates_output(source_file, capsys):
    exit_code = main(["--length", "12", "--size", "2", "--file", str(source_file), "--seed", "1"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("Generated output: \n")
    assert len(out.splitlines()) >= 2


def test_same_seed_same_output(source_file, capsys):
    argv = ["--length", "30", "--size", "2", "--file", str(source_file), "--seed", "9"]

    main(argv)
    first = capsys.readouterr().out
    main(argv)
    second = capsys.readouterr().out

    assert first == second


def test_file_looked_up_in_samples_dir(tmp_path, config_file, capsys):
    (tmp_path / "named.txt").write_text(SOURCE_TEXT, encoding="utf-8")

    exit_code = main(["--config", config_file, "--length", "5", "--size", "2",
                      "--file", "named.txt"])

    assert exit_code == 0
    assert "Generated output:" in capsys.readouterr().out


def test_missing_length(config_file, source_file, capsys):
    exit_code = main(["--config", config_file, "--size", "2", "--file", str(source_file)])

    assert exit_code == 2
    assert "Use `--length` option to specify sentence length" in capsys.readouterr().out


def test_missing_size(config_file, source_file, capsys):
    exit_code = main(["--config", config_file, "--length", "5", "--file", str(source_file)])

    assert exit_code == 2
    assert "Use `--size` option to specify sample size" in capsys.readouterr().out


def test_missing_file_flag(config_file, capsys):
    exit_code = main(["--config", config_file, "--length", "5", "--size", "2"])

    assert exit_code == 2
    assert "Use `--file` option to specify source file" in capsys.readouterr().out


def test_unreadable_file(config_file, capsys, mock_logger):
    exit_code = main(["--config", config_file, "--length", "5", "--size", "2",
                      "--file", "does_not_exist.txt"])

    assert exit_code == 1
    assert "Error while reading source file:" in capsys.readouterr().out
    mock_logger.error.assert_called_once()


def test_empty_file(tmp_path, capsys):
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")

    exit_code = main(["--length", "5", "--size", "2", "--file", str(empty)])

    assert exit_code == 1
    assert "File with source text is empty!" in capsys.readouterr().out


def test_invalid_sample_size(source_file, capsys):
    exit_code = main(["--length", "5", "--size", "0", "--file", str(source_file)])

    assert exit_code == 1
    assert "Sample size must be a positive integer" in capsys.readouterr().out


def test_source_too_short(tmp_path, capsys):
    short = tmp_path / "short.txt"
    short.write_text("hello", encoding="utf-8")

    exit_code = main(["--length", "5", "--size", "3", "--file", str(short)])

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().out


def test_bundled_sample_with_test_env(capsys):
    exit_code = main(["--env", "test"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("Generated output:")


def test_resolve_source_path(tmp_path, source_file):
    assert resolve_source_path(str(source_file), "/nowhere") == str(source_file)
    assert resolve_source_path("other.txt", str(tmp_path)) == str(tmp_path / "other.txt")
