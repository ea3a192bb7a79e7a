"""
Tests for analyze_pairs(): one engine run per survey variable pair.
"""

import numpy as np
import pytest

from corrboot import (
    SURVEY_PAIRS,
    DegenerateInputError,
    InvalidInputError,
    UnknownColumnError,
    analyze_pairs,
    bootstrap,
    correlation,
    format_report,
)


class TestAnalyzePairs:

    def test_default_pairs(self, survey_columns):
        results = analyze_pairs(survey_columns, n_sim=200)
        assert list(results) == list(SURVEY_PAIRS)
        for (col_x, col_y), analysis in results.items():
            assert analysis.columns == (col_x, col_y)
            assert analysis.solution.n_sim == 200
            assert analysis.summary.conf_level == pytest.approx(0.90)

    def test_matches_individual_runs(self, survey_columns):
        results = analyze_pairs(survey_columns, n_sim=150, seed=314159)
        for col_x, col_y in SURVEY_PAIRS:
            single = bootstrap(survey_columns, col_x, col_y, n_sim=150, seed=314159)
            np.testing.assert_array_equal(
                results[(col_x, col_y)].solution.samples, single.samples,
            )

    def test_pair_order_does_not_matter(self, survey_columns):
        forward = analyze_pairs(survey_columns, n_sim=100)
        backward = analyze_pairs(survey_columns, tuple(reversed(SURVEY_PAIRS)), n_sim=100)
        for pair in SURVEY_PAIRS:
            np.testing.assert_array_equal(
                forward[pair].solution.samples, backward[pair].solution.samples,
            )

    def test_each_pair_owns_its_samples(self, survey_columns):
        results = analyze_pairs(survey_columns, n_sim=50)
        arrays = [a.solution.samples for a in results.values()]
        assert arrays[0] is not arrays[1]
        assert not np.shares_memory(arrays[0], arrays[2])

    def test_known_associations(self, survey_columns):
        results = analyze_pairs(survey_columns, n_sim=500, alpha=0.10)
        age_prog = results[('age', 'progressivism')].summary
        sust_loc = results[('sustainability', 'localism')].summary
        assert age_prog.point_estimate == pytest.approx(-0.0418, abs=1e-9)
        assert age_prog.lower < -0.0418 < age_prog.upper
        assert sust_loc.point_estimate == pytest.approx(0.35, abs=1e-9)
        assert sust_loc.lower > 0.0
        assert sust_loc.prob_below == 0.0

    def test_records_input(self):
        rows = [
            {'a': float(i), 'b': float(i % 3), 'c': float((i * 7) % 5)}
            for i in range(30)
        ]
        results = analyze_pairs(rows, [('a', 'b'), ('b', 'c')], n_sim=20)
        assert set(results) == {('a', 'b'), ('b', 'c')}

    def test_dataframe_with_text_columns(self, survey_columns):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame(survey_columns)
        df['respondent'] = [f"r{i:04d}" for i in range(len(df))]
        df['region'] = pd.Categorical(['north', 'south', 'east'] * (len(df) // 3))
        results = analyze_pairs(df, n_sim=50)
        expected = analyze_pairs(survey_columns, n_sim=50)
        for pair in SURVEY_PAIRS:
            np.testing.assert_array_equal(
                results[pair].solution.samples, expected[pair].solution.samples,
            )

    def test_records_with_flag_field(self):
        rows = [
            {'id': f"p{i}", 'opted_in': i % 2 == 0, 'a': float(i), 'b': float(i % 4)}
            for i in range(40)
        ]
        results = analyze_pairs(rows, [('a', 'b')], n_sim=20)
        assert results[('a', 'b')].solution.n == 40

    def test_report(self, survey_columns):
        results = analyze_pairs(survey_columns, n_sim=100)
        report = format_report(results)
        assert len(report.splitlines()) == 3
        assert report.startswith("age ~ progressivism: r = -0.0418")


class TestErrors:

    def test_no_pairs(self, survey_columns):
        with pytest.raises(InvalidInputError, match="at least one"):
            analyze_pairs(survey_columns, [], n_sim=10)

    def test_duplicate_pairs(self, survey_columns):
        with pytest.raises(InvalidInputError, match="duplicate"):
            analyze_pairs(survey_columns, [('age', 'localism')] * 2, n_sim=10)

    def test_malformed_pair(self, survey_columns):
        with pytest.raises(InvalidInputError, match="col_x, col_y"):
            analyze_pairs(survey_columns, [('age',)], n_sim=10)

    def test_missing_column(self):
        data = {'age': [1.0, 2.0, 3.0], 'progressivism': [3.0, 1.0, 2.0]}
        with pytest.raises(UnknownColumnError, match="sustainability"):
            analyze_pairs(data, n_sim=10)

    def test_missing_column_fails_before_any_resampling(self, survey_columns):
        calls = []

        def spy(x, y):
            calls.append(1)
            return correlation(x, y)

        data = {k: v for k, v in survey_columns.items() if k != 'localism'}
        with pytest.raises(UnknownColumnError) as exc_info:
            analyze_pairs(data, estimator=spy, n_sim=10)
        assert exc_info.value.column == 'localism'
        assert calls == []

    def test_non_finite_later_pair_fails_before_resampling(self, survey_columns):
        calls = []

        def spy(x, y):
            calls.append(1)
            return correlation(x, y)

        data = dict(survey_columns)
        data['localism'] = data['localism'].copy()
        data['localism'][5] = np.nan
        with pytest.raises(InvalidInputError, match="localism"):
            analyze_pairs(data, estimator=spy, n_sim=10)
        assert calls == []

    def test_degenerate_pair_propagates(self, survey_columns):
        data = dict(survey_columns)
        data['localism'] = np.full(len(data['age']), 3.0)
        with pytest.raises(DegenerateInputError):
            analyze_pairs(data, n_sim=10)
