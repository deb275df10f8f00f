"""Tests for configuration loading, merging and sanitizing."""

import logging

import pytest

from tw_patterns.analysis import compute_likelihood
from tw_patterns.config import (
    DEFAULT_IGNORE_GLOBS,
    AnalyzerConfig,
    OutputConfig,
    ScoringWeights,
    load_config,
)
from tw_patterns.exceptions import InvalidConfigError, InvalidPatternError


def _write_config(root, text):
    path = root / "tw-patterns.toml"
    path.write_text(text)
    return path


class TestAnalyzerConfigDefaults:
    def test_defaults(self):
        config = AnalyzerConfig()
        assert config.similarity_threshold == 0.75
        assert config.min_occurrences == 1
        assert config.min_variants == 1
        assert config.output.console_top == 20
        assert config.output.json_path == "reports/tw-patterns.json"
        assert config.scoring == ScoringWeights(variants=60.0, frequency=40.0)
        assert "**/node_modules/**" in config.ignore_globs

    def test_frozen(self):
        config = AnalyzerConfig()
        with pytest.raises(AttributeError):
            config.similarity_threshold = 0.5

    def test_summary(self):
        config = AnalyzerConfig(similarity_threshold=0.5, min_occurrences=2)
        assert config.summary() == {
            "similarityThreshold": 0.5,
            "minOccurrences": 2,
            "minVariants": 1,
        }


class TestSanitizing:
    @pytest.mark.parametrize("value", [1.5, -0.1, "high", None, True])
    def test_bad_threshold_falls_back(self, value, caplog):
        with caplog.at_level(logging.WARNING):
            config = AnalyzerConfig(similarity_threshold=value)
        assert config.similarity_threshold == 0.75
        assert "similarity_threshold" in caplog.text

    @pytest.mark.parametrize("value", [0, -3, 2.5, "two", float("nan"), False])
    def test_bad_counts_fall_back(self, value, caplog):
        with caplog.at_level(logging.WARNING):
            config = AnalyzerConfig(min_occurrences=value, min_variants=value)
        assert config.min_occurrences == 1
        assert config.min_variants == 1

    def test_integral_float_count_accepted(self):
        assert AnalyzerConfig(min_occurrences=3.0).min_occurrences == 3

    def test_threshold_bounds_accepted(self):
        assert AnalyzerConfig(similarity_threshold=0).similarity_threshold == 0.0
        assert AnalyzerConfig(similarity_threshold=1).similarity_threshold == 1.0

    def test_negative_weight_falls_back(self):
        assert ScoringWeights(variants=-5).variants == 60.0

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_weight_falls_back(self, value, caplog):
        with caplog.at_level(logging.WARNING):
            weights = ScoringWeights(variants=value, frequency=value)
        assert weights == ScoringWeights()
        assert "scoring.variants" in caplog.text

    def test_bad_console_top_falls_back(self):
        assert OutputConfig(console_top=0).console_top == 20

    def test_writes_json(self):
        assert OutputConfig().writes_json
        assert not OutputConfig(json_enabled=False).writes_json
        assert not OutputConfig(json_path=None).writes_json


class TestLoadConfig:
    def test_no_config_file_uses_defaults(self, tmp_path):
        config = load_config(workspace_root=tmp_path)
        assert config == AnalyzerConfig()

    def test_project_file(self, tmp_path):
        _write_config(
            tmp_path,
            """
globs = ["web/**/*.tsx"]
similarity_threshold = 0.5
min_occurrences = 2

[output.console]
top = 5

[output.json]
path = "out/report.json"

[parsing.file_types]
ts = ["react"]

[clustering.scoring]
variants = 50
""",
        )
        config = load_config(workspace_root=tmp_path)
        assert config.globs == ("web/**/*.tsx",)
        assert config.similarity_threshold == 0.5
        assert config.min_occurrences == 2
        assert config.output.console_top == 5
        assert config.output.json_path == "out/report.json"
        assert config.parsing.file_types == {".ts": ("react",)}
        assert config.scoring.variants == 50.0
        assert config.scoring.frequency == 40.0

    def test_custom_pattern(self, tmp_path):
        _write_config(tmp_path, "[parsing.patterns]\nreact = 'tw=\"([^\"]+)\"'\n")
        config = load_config(workspace_root=tmp_path)
        assert config.parsing.strategies["react"].source == 'tw="([^"]+)"'
        assert "vue" in config.parsing.strategies

    def test_invalid_pattern_is_fatal(self, tmp_path):
        _write_config(tmp_path, "[parsing.patterns]\nreact = 'className=(['\n")
        with pytest.raises(InvalidPatternError):
            load_config(workspace_root=tmp_path)

    def test_malformed_file_warns_and_uses_defaults(self, tmp_path, caplog):
        _write_config(tmp_path, "similarity_threshold = = 0.5\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(workspace_root=tmp_path)
        assert config == AnalyzerConfig()
        assert "Failed to load config file" in caplog.text

    def test_wrong_shape_warns_and_uses_defaults(self, tmp_path, caplog):
        _write_config(tmp_path, 'globs = "src/**/*.tsx"\n')
        with caplog.at_level(logging.WARNING):
            config = load_config(workspace_root=tmp_path)
        assert config.globs == AnalyzerConfig().globs
        assert "Failed to load config file" in caplog.text

    def test_explicit_missing_file_warns(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_config(config_file=tmp_path / "nope.toml")
        assert config == AnalyzerConfig()
        assert "Config file not found" in caplog.text

    def test_unknown_top_level_key_warns(self, tmp_path, caplog):
        _write_config(tmp_path, "colour = 'red'\nmin_variants = 2\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(workspace_root=tmp_path)
        assert config.min_variants == 2
        assert "colour" in caplog.text

    def test_infinite_weight_in_file_does_not_inflate_scores(self, tmp_path):
        _write_config(tmp_path, "[clustering.scoring]\nvariants = inf\n")
        config = load_config(workspace_root=tmp_path)
        assert config.scoring.variants == 60.0
        assert compute_likelihood(1, 1, 100, config.scoring) == 4

    def test_out_of_range_file_value_sanitized(self, tmp_path, caplog):
        _write_config(tmp_path, "similarity_threshold = 3\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(workspace_root=tmp_path)
        assert config.similarity_threshold == 0.75

    def test_overrides_beat_file(self, tmp_path):
        _write_config(tmp_path, "similarity_threshold = 0.5\nmin_variants = 3\n")
        config = load_config(workspace_root=tmp_path, similarity_threshold=0.9, min_variants=None)
        assert config.similarity_threshold == 0.9
        assert config.min_variants == 3

    def test_ignore_override_is_appended(self, tmp_path):
        config = load_config(workspace_root=tmp_path, ignore_globs=["**/stories/**"])
        assert config.ignore_globs == DEFAULT_IGNORE_GLOBS + ("**/stories/**",)

    def test_unknown_override_raises(self, tmp_path):
        with pytest.raises(InvalidConfigError):
            load_config(workspace_root=tmp_path, threshold=0.5)

    def test_project_config_skipped(self, tmp_path):
        _write_config(tmp_path, "min_variants = 3\n")
        config = load_config(workspace_root=tmp_path, use_project_config=False)
        assert config.min_variants == 1

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("min_occurrences = 4\n")
        assert load_config(config_file=path).min_occurrences == 4


class TestEnvironment:
    def test_env_layer(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TW_PATTERNS_SIMILARITY_THRESHOLD", "0.6")
        monkeypatch.setenv("TW_PATTERNS_MIN_OCCURRENCES", "3")
        config = load_config(workspace_root=tmp_path)
        assert config.similarity_threshold == 0.6
        assert config.min_occurrences == 3

    def test_env_beats_file_and_override_beats_env(self, tmp_path, monkeypatch):
        _write_config(tmp_path, "min_variants = 2\n")
        monkeypatch.setenv("TW_PATTERNS_MIN_VARIANTS", "3")
        assert load_config(workspace_root=tmp_path).min_variants == 3
        assert load_config(workspace_root=tmp_path, min_variants=4).min_variants == 4

    def test_unparseable_env_value_skipped(self, tmp_path, monkeypatch, caplog):
        monkeypatch.setenv("TW_PATTERNS_MIN_OCCURRENCES", "lots")
        with caplog.at_level(logging.WARNING):
            config = load_config(workspace_root=tmp_path)
        assert config.min_occurrences == 1
        assert "TW_PATTERNS_MIN_OCCURRENCES" in caplog.text
