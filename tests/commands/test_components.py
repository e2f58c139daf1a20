"""Tests for components command."""

import logging

from click.testing import CliRunner
import pandas as pd
import pytest

from union_find.commands.components import build_forest, components
from union_find.core.forest import DisjointSetForest


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def pairs_csv(tmp_path):
    """Create sample pairs CSV."""
    csv_file = tmp_path / "pairs.csv"
    df = pd.DataFrame(
        {
            "left": ["a", "b", "x", "m"],
            "right": ["b", "c", "y", "m"],
        }
    )
    df.to_csv(csv_file, index=False)
    return csv_file


class TestBuildForest:
    """Tests for build_forest helper."""

    def test_named_columns(self):
        """Test grouping with left/right columns."""
        pairs = pd.DataFrame({"left": ["a", "b"], "right": ["b", "c"]})
        forest = DisjointSetForest()
        handles = build_forest(pairs, forest)

        assert set(handles) == {"a", "b", "c"}
        assert forest.connected(handles["a"], handles["c"])
        assert forest.num_groups() == 1

    def test_positional_columns(self):
        """Test grouping with the first two columns."""
        pairs = pd.DataFrame({"src": [1, 3], "dst": [2, 4], "weight": [0.5, 0.9]})
        forest = DisjointSetForest()
        handles = build_forest(pairs, forest)

        assert set(handles) == {"1", "2", "3", "4"}
        assert forest.connected(handles["1"], handles["2"])
        assert not forest.connected(handles["1"], handles["3"])

    def test_incomplete_pair_kept_as_singleton(self):
        """Test a missing partner still registers the element."""
        pairs = pd.DataFrame({"left": ["a", "b"], "right": ["b", None]})
        forest = DisjointSetForest()
        handles = build_forest(pairs, forest)

        assert set(handles) == {"a", "b"}
        assert forest.num_groups() == 1

    def test_numeric_ids_with_blank_partner(self, tmp_path):
        """Numeric IDs stay one element each when a column has a blank cell."""
        csv_file = tmp_path / "numeric.csv"
        csv_file.write_text("left,right\n1,2\n2,3\n4,\n")
        pairs = pd.read_csv(csv_file, dtype=str)
        forest = DisjointSetForest()
        handles = build_forest(pairs, forest)

        assert sorted(handles) == ["1", "2", "3", "4"]
        assert forest.connected(handles["1"], handles["3"])
        assert forest.num_groups() == 2

    def test_keys_are_stripped(self):
        """Surrounding whitespace does not create a separate element."""
        pairs = pd.DataFrame({"left": ["a", " b"], "right": ["b ", "c"]})
        forest = DisjointSetForest()
        handles = build_forest(pairs, forest)

        assert set(handles) == {"a", "b", "c"}
        assert forest.num_groups() == 1

    def test_single_column_rejected(self):
        """Test that one column is not enough."""
        with pytest.raises(ValueError):
            build_forest(pd.DataFrame({"left": ["a"]}), DisjointSetForest())


class TestComponentsCommand:
    """Tests for components command."""

    def test_components(self, runner, pairs_csv):
        """Test table output."""
        result = runner.invoke(components, [str(pairs_csv)])

        assert result.exit_code == 0
        assert "Grouping pairs" in result.output
        assert "Connected Components" in result.output
        assert "Elements: 6, groups: 3" in result.output
        assert "Components computed!" in result.output

    def test_components_output_csv(self, runner, pairs_csv, tmp_path):
        """Test CSV export."""
        output = tmp_path / "out" / "groups.csv"
        result = runner.invoke(components, [str(pairs_csv), "-o", str(output)])

        assert result.exit_code == 0
        df = pd.read_csv(output)
        assert list(df.columns) == ["element", "group"]
        assert len(df) == 6
        groups = dict(zip(df["element"], df["group"]))
        assert groups["a"] == groups["b"] == groups["c"]
        assert groups["x"] == groups["y"]
        assert groups["m"] == "m"

    def test_components_with_strategy(self, runner, pairs_csv):
        """Test strategy flags are accepted."""
        result = runner.invoke(
            components, [str(pairs_csv), "--union-by", "size", "--path-compression"]
        )
        assert result.exit_code == 0
        assert "groups: 3" in result.output

    def test_components_with_config(self, runner, pairs_csv, tmp_path):
        """Test loading a config file."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"union_by": "rank"}')
        result = runner.invoke(components, [str(pairs_csv), "--config", str(config_file)])
        assert result.exit_code == 0

    def test_components_invalid_config(self, runner, pairs_csv, tmp_path):
        """Test invalid config aborts."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"union_by": "height"}')
        result = runner.invoke(components, [str(pairs_csv), "--config", str(config_file)])
        assert result.exit_code != 0
        assert "Error" in result.output

    def test_components_nonexistent_file(self, runner):
        """Test with nonexistent file."""
        result = runner.invoke(components, ["nonexistent.csv"])
        assert result.exit_code != 0

    def test_components_single_column(self, runner, tmp_path):
        """Test a file with too few columns aborts."""
        csv_file = tmp_path / "single.csv"
        pd.DataFrame({"left": ["a"]}).to_csv(csv_file, index=False)
        result = runner.invoke(components, [str(csv_file)])

        assert result.exit_code != 0
        assert "at least two columns" in result.output

    def test_components_numeric_ids(self, runner, tmp_path):
        """Test numeric IDs with a blank cell group correctly."""
        csv_file = tmp_path / "numeric.csv"
        csv_file.write_text("left,right\n1,2\n2,3\n4,\n")
        result = runner.invoke(components, [str(csv_file)])

        assert result.exit_code == 0
        assert "Elements: 4, groups: 2" in result.output

    def test_components_no_header(self, runner, tmp_path):
        """Test --no-header keeps the first row as a pair."""
        csv_file = tmp_path / "headerless.csv"
        csv_file.write_text("a,b\nb,c\n")

        result = runner.invoke(components, [str(csv_file), "--no-header"])
        assert result.exit_code == 0
        assert "Elements: 3, groups: 1" in result.output

        result = runner.invoke(components, [str(csv_file)])
        assert result.exit_code == 0
        assert "Elements: 2, groups: 1" in result.output

    def test_components_verbose_config_restores_level(self, runner, pairs_csv, tmp_path):
        """Test verbose config does not leak the logger level."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"verbose": true}')
        package_logger = logging.getLogger("union_find")
        previous_level = package_logger.level

        result = runner.invoke(components, [str(pairs_csv), "--config", str(config_file)])

        assert result.exit_code == 0
        assert package_logger.level == previous_level
