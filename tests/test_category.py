"""Tests for category commands."""

from ecodamage.cli.main import cli
from ecodamage.database.factories import create_sqlite_database


def test_init_categories(cli_runner, temp_db):
    """Test initializing categories."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "init-categories"]
    )

    assert result.exit_code == 0
    assert "Successfully created 8 categories." in result.output
    assert temp_db.count_categories() == 8


def test_init_categories_duplicate(cli_runner, temp_db):
    """Test initializing categories twice."""
    result1 = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "init-categories"]
    )
    assert result1.exit_code == 0

    # Second init (should warn)
    result2 = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "init-categories"]
    )

    assert result2.exit_code == 0
    assert "already exist" in result2.output.lower()
    assert temp_db.count_categories() == 8


def test_init_categories_force_adds_missing(cli_runner, temp_db, category_service):
    """Test --force only adds the defaults that are missing."""
    from decimal import Decimal

    category_service.create_category(
        name="Water Pollution", base_cost_per_unit=Decimal("999"), unit_type="volume"
    )

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "init-categories", "--force"]
    )

    assert result.exit_code == 0
    assert "Successfully created 7 categories." in result.output
    assert temp_db.count_categories() == 8
    assert temp_db.get_category_by_name("Water Pollution").base_cost_per_unit == Decimal("999.00")


def test_category_list(cli_runner, temp_db, sample_categories):
    """Test listing categories."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "list"]
    )

    assert result.exit_code == 0
    assert "Water Pollution" in result.output
    assert "Wildlife Impact" in result.output
    assert "volume" in result.output


def test_category_list_empty(cli_runner, temp_db):
    """Test listing categories before any exist."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "list"]
    )

    assert result.exit_code == 0
    assert "No categories found" in result.output


def test_category_create(cli_runner, temp_db):
    """Test creating a category."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "category",
            "create",
            "Oil Spill",
            "--cost",
            "420.00",
            "--unit",
            "volume",
            "--multiplier",
            "3.5",
            "--description",
            "Oil released into water",
        ],
    )

    assert result.exit_code == 0
    assert "Created category 'Oil Spill'" in result.output
    category = temp_db.get_category_by_name("Oil Spill")
    assert category.unit_type.value == "volume"
    assert str(category.severity_multiplier) == "3.50"


def test_category_create_invalid_unit(cli_runner, temp_db):
    """Test creating a category with an unknown unit."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "category",
            "create",
            "Odd",
            "--cost",
            "1",
            "--unit",
            "hectare",
        ],
    )

    assert result.exit_code == 2
    assert temp_db.count_categories() == 0


def test_category_create_invalid_cost(cli_runner, temp_db):
    """Test creating a category with an unparseable cost."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "category",
            "create",
            "Odd",
            "--cost",
            "cheap",
            "--unit",
            "area",
        ],
    )

    assert result.exit_code == 1
    assert "Invalid number" in result.output


def test_category_create_zero_multiplier(cli_runner, temp_db):
    """Test creating a category with a zero multiplier."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "category",
            "create",
            "Odd",
            "--cost",
            "1",
            "--unit",
            "area",
            "--multiplier",
            "0",
        ],
    )

    assert result.exit_code == 1
    assert "greater than zero" in result.output


def test_category_deactivate_and_activate(cli_runner, temp_db, sample_categories):
    """Test hiding and restoring a category."""
    category_id = sample_categories["Noise Pollution"]

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "deactivate", str(category_id)]
    )
    assert result.exit_code == 0
    assert f"Deactivated category {category_id}" in result.output

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "category", "list"])
    assert "Noise Pollution" not in result.output

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "list", "--all"]
    )
    assert "Noise Pollution" in result.output

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "activate", str(category_id)]
    )
    assert result.exit_code == 0

    fresh = create_sqlite_database(temp_db.database_path)
    assert fresh.get_category(category_id).active is True
    fresh.disconnect()


def test_category_deactivate_missing(cli_runner, temp_db):
    """Test deactivating a category that does not exist."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "deactivate", "999"]
    )

    assert result.exit_code == 1
    assert "not found" in result.output.lower()


def test_validation_error_names_option(cli_runner, temp_db):
    """Test that validation errors point at the offending option."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "category",
            "create",
            "Odd",
            "--cost",
            "1",
            "--unit",
            "area",
            "--multiplier",
            "0",
        ],
    )

    assert result.exit_code == 1
    assert "(--multiplier)" in result.output
