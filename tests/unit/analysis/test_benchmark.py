"""
Unit tests for the composition benchmark.
"""

from unittest.mock import patch

import pytest

from lensgraph.analysis.benchmark import BenchmarkResult, run_composition_benchmark


class TestRunCompositionBenchmark:
    def test_small_run(self):
        result = run_composition_benchmark(node_count=50, iterations=5, focus_depth=1, seed=11)

        assert isinstance(result, BenchmarkResult)
        assert result.node_count == 50
        assert result.heatmap_values == 50
        assert result.iterations == 5
        assert result.focus_depth == 1
        assert 0 <= result.avg_ms <= result.max_ms
        assert result.p95_ms <= result.max_ms

    def test_heatmap_values_capped(self):
        with patch("lensgraph.analysis.benchmark.config.BENCHMARK_MAX_HEATMAP_VALUES", 10):
            result = run_composition_benchmark(node_count=40, iterations=1, seed=2)
        assert result.heatmap_values == 10

    def test_composes_warmup_plus_iterations(self):
        with patch("lensgraph.analysis.benchmark.compose_renderable") as mock_compose:
            run_composition_benchmark(node_count=20, iterations=4, seed=1)
        assert mock_compose.call_count == 5

    @pytest.mark.parametrize("kwargs", [{"node_count": 0}, {"iterations": 0}])
    def test_rejects_empty_workloads(self, kwargs):
        with pytest.raises(ValueError):
            run_composition_benchmark(**kwargs)

    def test_depth_defaults_to_configured_value(self, monkeypatch):
        monkeypatch.setenv("LENSGRAPH_DEFAULT_FOCUS_DEPTH", "3")
        result = run_composition_benchmark(node_count=20, iterations=1, seed=3)
        assert result.focus_depth == 3

    def test_depth_falls_back_to_built_in_default(self, monkeypatch):
        monkeypatch.delenv("LENSGRAPH_DEFAULT_FOCUS_DEPTH", raising=False)
        result = run_composition_benchmark(node_count=20, iterations=1, seed=3)
        assert result.focus_depth == 2
