"""Tests for the command line interface."""

from pathlib import Path
from typing import Iterator

import pendulum
import pytest
from typer.testing import CliRunner

from caretrack import configuration, time
from caretrack.repository.configuration import CONFIGURATION_REPO
from caretrack.repository.store import MemoryStore
from caretrack.session import Session, set_session
from caretrack.terminal.app import app

runner = CliRunner()


@pytest.fixture
def cli_session(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Session]:
    """Run commands against an in-memory session and a temporary config file."""
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    CONFIGURATION_REPO._config = None
    session = Session(MemoryStore())
    set_session(session)
    yield session
    set_session(None)
    CONFIGURATION_REPO._config = None


class TestActivityCommands:
    def test_add_and_complete(self, cli_session: Session) -> None:
        result = runner.invoke(
            app,
            [
                "--no-header",
                "activity",
                "add",
                "Checkup",
                "-t",
                "9:30",
                "-d",
                "2024-03-01",
                "-c",
                "doctor",
            ],
        )
        assert result.exit_code == 0, result.output

        activities = cli_session.activities.get_all_activities()
        assert len(activities) == 1
        id = activities[0]["id"]

        result = runner.invoke(app, ["ac", "d", id[:6]])
        assert result.exit_code == 0, result.output
        assert "+20 pts" in result.output
        assert cli_session.ledger.balance == 20

    def test_add_rejects_bad_time(self, cli_session: Session) -> None:
        result = runner.invoke(
            app, ["activity", "add", "Bath", "-t", "25:00", "-d", "2024-03-01"]
        )
        assert result.exit_code != 0
        assert cli_session.activities.get_all_activities() == []

    def test_add_rejects_unknown_category(self, cli_session: Session) -> None:
        result = runner.invoke(
            app, ["activity", "add", "Bath", "-t", "19:00", "-c", "spa"]
        )
        assert result.exit_code != 0
        assert cli_session.activities.get_all_activities() == []

    def test_unknown_id_prefix_is_rejected(self, cli_session: Session) -> None:
        result = runner.invoke(app, ["activity", "delete", "nope"])
        assert result.exit_code != 0

    def test_clear_day(self, cli_session: Session) -> None:
        cli_session.activities.add("A", "2024-03-01", "08:00")
        cli_session.activities.add("B", "2024-03-02", "08:00")

        result = runner.invoke(app, ["activity", "clear", "2024-03-01"])

        assert result.exit_code == 0, result.output
        assert "removed 1" in result.output
        assert [a["title"] for a in cli_session.activities.get_all_activities()] == [
            "B"
        ]


class TestViewCommands:
    def test_day_view_moves_cursor(self, cli_session: Session) -> None:
        cli_session.activities.add("Bottle", "2024-03-01", "08:30", "feeding")

        result = runner.invoke(app, ["--no-header", "view", "day", "2024-03-01"])

        assert result.exit_code == 0, result.output
        assert "Bottle" in result.output
        assert cli_session.view_state.get_day_date() == "2024-03-01"

    def test_month_view_sets_cursor(self, cli_session: Session) -> None:
        result = runner.invoke(app, ["v", "m", "-y", "2024", "-m", "2", "-o", "1"])

        assert result.exit_code == 0, result.output
        assert cli_session.view_state.get_month_cursor() == (2024, 2)

    def test_month_today_resets_cursor(self, cli_session: Session) -> None:
        cli_session.view_state.set_month_cursor(1999, 4)
        today = pendulum.today("local")

        result = runner.invoke(app, ["view", "month", "--today", "-o", "-1"])

        assert result.exit_code == 0, result.output
        assert cli_session.view_state.get_month_cursor() == time.shift_month(
            today.year, today.month - 1, -1
        )

    def test_year_today_resets_cursor(self, cli_session: Session) -> None:
        cli_session.view_state.set_year_cursor(1999)

        result = runner.invoke(app, ["view", "year", "--today"])

        assert result.exit_code == 0, result.output
        assert cli_session.view_state.get_year_cursor() == pendulum.today("local").year

    def test_year_view(self, cli_session: Session) -> None:
        result = runner.invoke(app, ["v", "y", "2024"])

        assert result.exit_code == 0, result.output
        assert cli_session.view_state.get_year_cursor() == 2024


class TestRewardCommands:
    def test_redeem_and_use_coupon(self, cli_session: Session) -> None:
        cli_session.ledger.credit(20, "test funds")

        result = runner.invoke(app, ["reward", "redeem", "foot"])
        assert result.exit_code == 0, result.output
        assert cli_session.ledger.balance == 10

        coupons = cli_session.coupons.get_all_coupons()
        assert len(coupons) == 1
        result = runner.invoke(app, ["coupon", "use", coupons[0]["id"]])
        assert result.exit_code == 0, result.output
        assert cli_session.coupons.get_all_coupons() == []

    def test_redeem_without_points_fails(self, cli_session: Session) -> None:
        result = runner.invoke(app, ["r", "r", "foot"])

        assert result.exit_code == 1
        assert cli_session.coupons.get_all_coupons() == []
        assert cli_session.ledger.balance == 0

    def test_redeem_reports_failed_coupon_and_refunds(
        self, cli_session: Session
    ) -> None:
        session = Session(MemoryStore(), id_factory=lambda: "same-id")
        session.ledger.credit(30, "test funds")
        session.economy.redeem("back")
        set_session(session)

        result = runner.invoke(app, ["reward", "redeem", "foot"])

        assert result.exit_code == 1
        assert "refunded" in result.output
        assert session.ledger.balance == 15
        assert len(session.coupons.get_all_coupons()) == 1

    def test_redeem_unknown_reward(self, cli_session: Session) -> None:
        result = runner.invoke(app, ["reward", "redeem", "pony"])
        assert result.exit_code != 0

    def test_listings(self, cli_session: Session) -> None:
        for args in (
            ["reward", "list"],
            ["reward", "history"],
            ["points", "balance"],
            ["points", "history", "-l", "5"],
            ["coupon", "list"],
            ["checklist", "list"],
        ):
            result = runner.invoke(app, args)
            assert result.exit_code == 0, (args, result.output)


class TestChecklistCommands:
    def test_add_list_and_item(self, cli_session: Session) -> None:
        result = runner.invoke(app, ["checklist", "add-list", "Daycare"])
        assert result.exit_code == 0, result.output
        checklist = next(
            c
            for c in cli_session.checklists.get_all_checklists()
            if c["name"] == "Daycare"
        )

        result = runner.invoke(
            app, ["cl", "add-item", "Wipes", "--list", checklist["id"]]
        )
        assert result.exit_code == 0, result.output

        updated = cli_session.checklists.get_checklist(checklist["id"])
        assert updated is not None
        assert [item["text"] for item in updated["items"]] == ["Wipes"]


class TestConfigCommands:
    def test_set_writes_config_file(
        self, cli_session: Session, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            app, ["config", "set", "--month-cell-limit", "5", "--hide-header"]
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "config.yaml").is_file()
        config = CONFIGURATION_REPO.get_config()
        assert config["month_cell_limit"] == 5
        assert config["show_header"] is False

    def test_view_lists_settings(self, cli_session: Session) -> None:
        result = runner.invoke(app, ["config", "view"])

        assert result.exit_code == 0, result.output
        assert "month_cell_limit" in result.output
        assert "default_category" in result.output

    def test_set_rejects_unknown_category(self, cli_session: Session) -> None:
        result = runner.invoke(app, ["config", "set", "--default-category", "spa"])
        assert result.exit_code != 0
