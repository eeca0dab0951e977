import pytest

from hn_comments.config import parse_cli_arguments, load_config
from hn_comments.models import DEFAULT_FEED_URL, DEFAULT_OUTPUT_PATH, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run every test away from any `.env` file and without HN_COMMENTS_ variables."""
    monkeypatch.chdir(tmp_path)
    for key in ("HN_COMMENTS_TIMEOUT", "HN_COMMENTS_OUTPUT", "HN_COMMENTS_DEBUG", "HN_COMMENTS_FEED_URL"):
        monkeypatch.delenv(key, raising=False)

def test_load_config_defaults():
    config = load_config(parse_cli_arguments([]))

    assert config.feed_url == DEFAULT_FEED_URL
    assert config.timeout == DEFAULT_TIMEOUT == 60
    assert config.output == DEFAULT_OUTPUT_PATH == "comments.rss"
    assert config.debug is False
    assert config.user_agent == DEFAULT_USER_AGENT == "HNcomments/0.1"

def test_load_config_cli_arguments():
    config = load_config(parse_cli_arguments([
        "--timeout", "5",
        "--output", "out/feed.rss",
        "--debug",
        "--url", "http://localhost:8000/rss",
    ]))

    assert config.timeout == 5
    assert config.output == "out/feed.rss"
    assert config.debug is True
    assert config.feed_url == "http://localhost:8000/rss"

def test_load_config_short_cli_arguments():
    config = load_config(parse_cli_arguments(["-t", "7", "-o", "short.rss", "-d"]))

    assert config.timeout == 7
    assert config.output == "short.rss"
    assert config.debug is True

def test_load_config_environment(monkeypatch):
    monkeypatch.setenv("HN_COMMENTS_TIMEOUT", "15")
    monkeypatch.setenv("HN_COMMENTS_OUTPUT", "env.rss")
    monkeypatch.setenv("HN_COMMENTS_DEBUG", "true")

    config = load_config(parse_cli_arguments([]))

    assert config.timeout == 15
    assert config.output == "env.rss"
    assert config.debug is True

def test_load_config_cli_overrides_environment(monkeypatch):
    monkeypatch.setenv("HN_COMMENTS_TIMEOUT", "15")
    monkeypatch.setenv("HN_COMMENTS_OUTPUT", "env.rss")

    config = load_config(parse_cli_arguments(["--timeout", "30", "--output", "cli.rss"]))

    assert config.timeout == 30
    assert config.output == "cli.rss"

def test_load_config_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("HN_COMMENTS_OUTPUT=dotenv.rss\n")

    config = load_config(parse_cli_arguments([]))

    assert config.output == "dotenv.rss"

@pytest.mark.parametrize("timeout", ["0", "-1"])
def test_load_config_rejects_non_positive_timeout(timeout):
    with pytest.raises(ValueError):
        load_config(parse_cli_arguments(["--timeout", timeout]))

def test_parse_cli_arguments_rejects_non_integer_timeout():
    with pytest.raises(SystemExit):
        parse_cli_arguments(["--timeout", "soon"])
