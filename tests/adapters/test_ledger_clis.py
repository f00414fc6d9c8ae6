"""Tests for the reminders and init-db CLI adapters."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import init_db_cli, reminders_cli
from src.domain.models.finance import Reminder, ReminderKind


def _reminder(days_left: int, amount: str | None) -> Reminder:
    return Reminder(
        id=f"r{days_left}",
        kind=ReminderKind.CARD_REPAY,
        account_id="c1",
        title="Repay CMB",
        subtitle="Card ending 1234",
        days_left=days_left,
        amount=Decimal(amount) if amount is not None else None,
    )


def test_format_reminder():
    assert reminders_cli.format_reminder(_reminder(0, "150")) == (
        "[today] Repay CMB (Card ending 1234) amount=150"
    )
    assert reminders_cli.format_reminder(_reminder(3, None)) == (
        "[in 3d] Repay CMB (Card ending 1234)"
    )


def test_reminders_main_prints_reminders_and_total(monkeypatch, capsys):
    repository = MagicMock()
    use_case = MagicMock()
    use_case.execute.return_value = [
        _reminder(1, "5000"),
        _reminder(2, None),
        _reminder(7, "120.5"),
    ]
    monkeypatch.setattr(reminders_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        reminders_cli,
        "build_ledger_repository",
        lambda: repository,
    )

    def _fake_use_case(repo):
        assert repo is repository
        return use_case

    monkeypatch.setattr(reminders_cli, "build_reminders_use_case", _fake_use_case)

    reminders_cli.main()

    repository.ensure_schema.assert_called_once()
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("[in 1d]")
    assert lines[-1] == "Pending repayments: 5120.5"


def test_reminders_main_without_reminders(monkeypatch, capsys):
    use_case = MagicMock()
    use_case.execute.return_value = []
    monkeypatch.setattr(reminders_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        reminders_cli,
        "build_ledger_repository",
        MagicMock,
    )
    monkeypatch.setattr(
        reminders_cli,
        "build_reminders_use_case",
        lambda repo: use_case,
    )

    reminders_cli.main()

    assert "No upcoming reminders." in capsys.readouterr().out


def test_init_db_main_creates_schema(monkeypatch, capsys):
    repository = MagicMock()
    fake_logger = MagicMock()
    monkeypatch.setattr(init_db_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        init_db_cli,
        "build_ledger_repository",
        lambda: repository,
    )

    init_db_cli.main()

    repository.ensure_schema.assert_called_once_with()
    fake_logger.info.assert_called_once()
    assert "ready" in capsys.readouterr().out
