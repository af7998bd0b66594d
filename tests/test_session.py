import io
import json

from unitconv.cli.session import is_exit_command, run_session
from unitconv.config import DEFAULT_PROMPT
from unitconv.dispatcher import UnitConverter
from unitconv.utils.logging import configure_json_logger, flush_handlers


class _Recorder:
    def __init__(self) -> None:
        self.chunks: list[str] = []

    def __call__(self, message: str = "", nl: bool = True) -> None:
        self.chunks.append(message + ("\n" if nl else ""))

    @property
    def text(self) -> str:
        return "".join(self.chunks)


def _run(text: str, **kwargs) -> tuple[int, str]:
    recorder = _Recorder()
    handled = run_session(
        io.StringIO(text),
        UnitConverter(),
        prompt=DEFAULT_PROMPT,
        echo=recorder,
        **kwargs,
    )
    return handled, recorder.text


def test_session_converts_until_exit() -> None:
    handled, output = _run("100 C to F\n1 kg to g\nexit\n10 C to F\n")
    assert handled == 2
    assert output == (
        f"{DEFAULT_PROMPT}100.0 degrees Celsius is 212.0 degrees Fahrenheit\n"
        f"{DEFAULT_PROMPT}1.0 kilogram is 1000.0 grams\n"
        f"{DEFAULT_PROMPT}"
    )


def test_blank_lines_are_parse_errors() -> None:
    handled, output = _run("\n   \nexit\n")
    assert handled == 0
    assert output.count("Parse error\n") == 2


def test_session_stops_at_end_of_input() -> None:
    handled, output = _run("banana\n")
    assert handled == 1
    assert output == f"{DEFAULT_PROMPT}Parse error\n{DEFAULT_PROMPT}"


def test_windows_line_endings_are_stripped() -> None:
    _, output = _run("0 C in K\r\nexit\r\n")
    assert "0.0 degrees Celsius is 273.15 Kelvins\n" in output


def test_exit_command_matching() -> None:
    assert is_exit_command("exit", "exit")
    assert is_exit_command("exit now", "exit")
    assert not is_exit_command(" exit", "exit")
    assert not is_exit_command("exiting", "exit")
    assert not is_exit_command("EXIT", "exit")


def test_custom_exit_command() -> None:
    handled, _ = _run("1 kg to g\nquit\n1 kg to g\n", exit_command="quit")
    assert handled == 1


def test_session_logs_start_and_end(tmp_path) -> None:
    log_file = tmp_path / "session.jsonl"
    logger = configure_json_logger(log_file)
    run_session(
        io.StringIO("1 kg to g\nexit\n"),
        UnitConverter(logger=logger),
        prompt=DEFAULT_PROMPT,
        echo=_Recorder(),
        logger=logger,
    )
    flush_handlers(logger)

    events = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert [event["event"] for event in events] == ["session.start", "request.converted", "session.end"]
    assert len({event["trace_id"] for event in events}) == 1
    assert events[-1]["requests"] == 1
    assert events[-1]["reason"] == "exit"
