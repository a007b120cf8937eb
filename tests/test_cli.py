"""CLI tests covering both commands"""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from ydict.cli import create_parser, main
from ydict.core.factory import create_dict_engine, create_suggest_engine
from ydict.core.interfaces import RequesterInterface

SOURCE = Path(__file__).resolve().parent / "source"


@pytest.fixture(autouse=True)
def reset_logging():
    """main() installs handlers bound to the captured streams"""
    yield
    logger = logging.getLogger("ydict")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)


class CannedRequester(RequesterInterface):
    def __init__(self, body):
        self.body = body

    def request(self, url, done, fail):
        done(self.body)


class TestCLIArgumentParsing:
    """Test CLI argument parsing"""

    def test_dict_defaults(self):
        args = create_parser().parse_args(["dict", "hello"])

        assert args.command == "dict"
        assert args.text == "hello"
        assert args.src == "en"
        assert args.tgt == "zh"
        assert args.annotations is False

    def test_dict_languages(self):
        args = create_parser().parse_args(["dict", "你好", "--src", "zh", "--tgt", "en"])
        assert (args.src, args.tgt) == ("zh", "en")

    def test_suggest_limit(self):
        args = create_parser().parse_args(["suggest", "hel", "--limit", "3"])

        assert args.command == "suggest"
        assert args.limit == 3

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestCLIExecution:
    """Test CLI runs against canned responses"""

    @patch("ydict.cli.create_dict_engine")
    def test_dict_prints_plain_text(self, mock_factory, capsys):
        body = (SOURCE / "youdao_dict_hello.html").read_bytes()
        mock_factory.return_value = create_dict_engine(CannedRequester(body))

        main(["dict", "hello"])

        out = capsys.readouterr().out
        assert out.startswith("hello  英 /həˈləʊ/")
        assert "初中 / 高中 / CET4" in out

    @patch("ydict.cli.create_suggest_engine")
    def test_suggest_annotations_json(self, mock_factory, capsys):
        body = (SOURCE / "youdao_suggest_hel.json").read_bytes()
        mock_factory.return_value = create_suggest_engine(CannedRequester(body))

        main(["suggest", "hel", "--annotations"])

        data = json.loads(capsys.readouterr().out)
        assert data["text"].startswith("hello\n")
        tags = {a["tag"] for a in data["annotations"]}
        assert {"entry", "plain", "part_of_speech", "line_height"} <= tags

    @patch("ydict.cli.create_suggest_engine")
    def test_upstream_failure_exits_with_message(self, mock_factory, capsys):
        body = json.dumps({"result": {"code": 500}})
        mock_factory.return_value = create_suggest_engine(CannedRequester(body))

        with pytest.raises(SystemExit) as exc:
            main(["suggest", "hel"])

        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Suggestion request failed with status 500" in captured.err

    def test_unsupported_pair_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["dict", "bonjour", "--src", "en", "--tgt", "fr"])

        assert exc.value.code == 1
        assert "Only Chinese-paired translation is supported" in capsys.readouterr().err
