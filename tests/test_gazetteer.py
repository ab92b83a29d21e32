"""Tests for gazetteer tables and the YAML loader."""

import pytest
import yaml

from idcn.config.gazetteer_loader import load_gazetteer_from_yaml, load_gazetteer_from_yaml_safe
from idcn.config.settings import DEFAULT_GAZETTEER_PATH, get_gazetteer_path, get_generator_seed
from idcn.gazetteer.default import get_default_gazetteer
from idcn.gazetteer.memory import InMemoryGazetteer
from idcn.gazetteer.models import Area, TimelineEntry

SAMPLE_YAML = """
current:
  110000: 北京市
  "110101": 东城区
timeline:
  110104:
    - name: 宣武区旧称
      start_year: 1952
      end_year: 1958
    - name: 宣武区
      start_year: 1958
      end_year: 2010
history:
  110103:
    province: 北京市
    city: 北京市
    district: 崇文区
  420800:
    province: 湖北省
    city: 荆门市
"""


class TestArea:
    """Tests for Area."""

    def test_most_specific(self):
        assert Area("北京市", "北京市", "东城区").most_specific() == "东城区"
        assert Area("湖北省", "荆门市").most_specific() == "荆门市"
        assert Area("上海市").most_specific() == "上海市"

    def test_empty(self):
        assert Area.empty().is_empty()
        assert not Area("上海市").is_empty()

    def test_to_dict(self):
        assert Area("上海市").to_dict() == {"province": "上海市", "city": "", "district": ""}


class TestInMemoryGazetteer:
    """Tests for InMemoryGazetteer."""

    def test_lookups(self, small_gazetteer):
        assert small_gazetteer.current_name(110101) == "东城区"
        assert small_gazetteer.current_name(999999) is None
        assert small_gazetteer.timeline(999999) == ()
        assert small_gazetteer.historical_area(999999) is None
        assert small_gazetteer.historical_name(999999) == ""

    def test_codes_sorted(self):
        gazetteer = InMemoryGazetteer(current={440305: "南山区", 110000: "北京市", 440000: "广东省"})
        assert list(gazetteer.current_codes()) == [110000, 440000, 440305]
        assert len(gazetteer) == 3

    def test_timeline_most_recent_first(self):
        gazetteer = InMemoryGazetteer(
            timeline={
                1: [
                    TimelineEntry("a", start_year=1950),
                    TimelineEntry("c", start_year=2010),
                    TimelineEntry("b", start_year=1980),
                    TimelineEntry("undated"),
                ]
            }
        )
        assert [e.name for e in gazetteer.timeline(1)] == ["c", "b", "a", "undated"]

    def test_timeline_undated_entries_keep_position(self):
        gazetteer = InMemoryGazetteer(
            timeline={
                110199: [
                    TimelineEntry("新名"),
                    TimelineEntry("旧名", start_year=1958, end_year=2010),
                    TimelineEntry("更早", start_year=1990),
                ]
            }
        )
        assert [e.name for e in gazetteer.timeline(110199)] == ["新名", "更早", "旧名"]


    def test_find_code_first_in_code_order(self, small_gazetteer):
        """北京市 is both a province and a city name; the lower code wins."""
        assert small_gazetteer.find_code("北京市") == 110000
        assert small_gazetteer.find_code("南山区") == 440305
        assert small_gazetteer.find_code("火星") is None

    def test_tables_are_copied(self):
        current = {110000: "北京市"}
        gazetteer = InMemoryGazetteer(current=current)
        current[110000] = "changed"
        assert gazetteer.current_name(110000) == "北京市"


class TestGazetteerLoader:
    """Tests for load_gazetteer_from_yaml."""

    def test_load(self, tmp_path):
        path = tmp_path / "gazetteer.yaml"
        path.write_text(SAMPLE_YAML, encoding="utf-8")

        gazetteer = load_gazetteer_from_yaml(path)

        assert gazetteer.current_name(110000) == "北京市"
        assert gazetteer.current_name(110101) == "东城区"
        assert gazetteer.timeline(110104)[0] == TimelineEntry("宣武区", 1958, 2010)
        assert gazetteer.historical_area(110103) == Area("北京市", "北京市", "崇文区")
        assert gazetteer.historical_area(420800) == Area("湖北省", "荆门市", "")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert len(load_gazetteer_from_yaml(path)) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_gazetteer_from_yaml(tmp_path / "missing.yaml")

    @pytest.mark.parametrize(
        "content,message",
        [
            ("- a\n- b\n", "expected dict"),
            ("current: [1, 2]\n", "Invalid current structure"),
            ("current:\n  1101: 北京\n", "Invalid region code"),
            ("current:\n  abcdef: 北京\n", "Invalid region code"),
            ("current:\n  110000: [x]\n", "must be a string"),
            ("timeline:\n  110104: 宣武区\n", "is not a list"),
            ("timeline:\n  110104:\n    - start_year: 1958\n", "missing required field: name"),
            ("timeline:\n  110104:\n    - name: x\n      start_year: soon\n", "must be an integer"),
            ("history:\n  110103:\n    city: 北京市\n", "missing required field: province"),
        ],
    )
    def test_invalid_structure(self, tmp_path, content, message):
        path = tmp_path / "bad.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ValueError, match=message):
            load_gazetteer_from_yaml(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("current: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_gazetteer_from_yaml(path)

    def test_safe_success(self, tmp_path):
        path = tmp_path / "gazetteer.yaml"
        path.write_text(SAMPLE_YAML, encoding="utf-8")

        gazetteer, error = load_gazetteer_from_yaml_safe(path)
        assert error is None
        assert gazetteer.current_name(110000) == "北京市"

    def test_safe_errors(self, tmp_path):
        gazetteer, error = load_gazetteer_from_yaml_safe(tmp_path / "missing.yaml")
        assert gazetteer is None
        assert "not found" in error

        path = tmp_path / "bad.yaml"
        path.write_text("- a\n", encoding="utf-8")
        gazetteer, error = load_gazetteer_from_yaml_safe(path)
        assert gazetteer is None
        assert error.startswith("Configuration error")

        path.write_text("current: [unclosed\n", encoding="utf-8")
        _, error = load_gazetteer_from_yaml_safe(path)
        assert error.startswith("YAML parsing error")


class TestSettings:
    """Tests for environment-driven settings."""

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv("IDCN_GAZETTEER_PATH", raising=False)
        assert get_gazetteer_path() == DEFAULT_GAZETTEER_PATH
        assert DEFAULT_GAZETTEER_PATH.exists()

    def test_path_override(self, monkeypatch, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("current:\n  110000: 自定义\n", encoding="utf-8")
        monkeypatch.setenv("IDCN_GAZETTEER_PATH", str(path))

        get_default_gazetteer.cache_clear()
        try:
            assert get_default_gazetteer().current_name(110000) == "自定义"
        finally:
            monkeypatch.delenv("IDCN_GAZETTEER_PATH")
            get_default_gazetteer.cache_clear()

    def test_generator_seed(self, monkeypatch):
        monkeypatch.delenv("IDCN_GENERATOR_SEED", raising=False)
        assert get_generator_seed() is None

        monkeypatch.setenv("IDCN_GENERATOR_SEED", "42")
        assert get_generator_seed() == 42

        monkeypatch.setenv("IDCN_GENERATOR_SEED", "forty-two")
        with pytest.raises(ValueError, match="IDCN_GENERATOR_SEED"):
            get_generator_seed()


class TestBundledTables:
    """Sanity checks on the shipped data."""

    def test_all_provinces_present(self, default_gazetteer):
        provinces = [c for c in default_gazetteer.current_codes() if c % 10000 == 0]
        assert len(provinces) == 34

    def test_history_entries_have_province(self, default_gazetteer):
        assert default_gazetteer.historical_area(110103).province == "北京市"
