"""Smoke test for the scripted demonstration."""

from shoptech.app import main
from shoptech.logger import LoggerFactory


def test_demo_runs(capsys):
    loggers = LoggerFactory.get_all_loggers()
    before = {logger.name: list(logger.appenders) for logger in loggers}
    try:
        main()
    finally:
        for logger in loggers:
            logger.appenders[:] = before[logger.name]

    out = capsys.readouterr().out
    assert "SHOPTECH E-COMMERCE" in out
    assert "Declined:" in out
    assert "Order status: PAID" in out
    assert "Revenue recorded: $1585.00 MXN" in out
