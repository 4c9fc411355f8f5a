from __future__ import annotations

import pytest

from api.__main__ import build_parser, main

pytestmark = pytest.mark.usefixtures("clean_hdl_env")


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.width is None and args.height is None
    assert args.fps is None and args.seed is None
    assert args.init_only is False


@pytest.mark.smoke
def test_main_init_only_succeeds() -> None:
    assert main(["--init-only", "--width", "320", "--height", "240", "--seed", "4"]) == 0


def test_main_invalid_argument_returns_error_code(caplog: pytest.LogCaptureFixture) -> None:
    assert main(["--init-only", "--fps", "0"]) == 2
    assert any("invalid argument" in r.getMessage() for r in caplog.records)
