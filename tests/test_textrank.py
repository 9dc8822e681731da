import math
import pickle
import unittest

import networkx as nx

from tfidfrank.exceptions import ConfigurationError
from tfidfrank.textrank import TextRank, TextRankConfig, RankState
from tfidfrank.tfidf import TfIdf


class TestTextRankConfig(unittest.TestCase):

    def test_defaults(self):
        config = TextRankConfig()
        assert config.damping == 0.85
        assert config.max_iter == 200
        assert config.min_diff == 0.0001
        assert config.window_size == 5

    def test_invalid_damping(self):
        for damping in [0, 1, 1.5, -0.1, "0.5", None, True, float("nan")]:
            with self.assertRaises(ConfigurationError):
                TextRankConfig(damping=damping)

    def test_invalid_max_iter(self):
        for max_iter in [0, -1, 1.5, "10", None, True]:
            with self.assertRaises(ConfigurationError):
                TextRankConfig(max_iter=max_iter)

    def test_invalid_min_diff(self):
        for min_diff in [-0.1, "0.1", None, float("nan")]:
            with self.assertRaises(ConfigurationError):
                TextRankConfig(min_diff=min_diff)

    def test_invalid_window_size(self):
        for window_size in [-1, 2.5, "2", None, False]:
            with self.assertRaises(ConfigurationError):
                TextRankConfig(window_size=window_size)

    def test_boundary_values(self):
        config = TextRankConfig(damping=0.5, max_iter=1, min_diff=0, window_size=0)
        assert config.min_diff == 0, "0 disables early stopping"
        assert config.window_size == 0

    def test_configuration_error_is_value_error(self):
        with self.assertRaises(ValueError):
            TextRankConfig(damping=2)

    def test_equality_and_pickle(self):
        config = TextRankConfig(damping=0.7, window_size=2)
        assert config == TextRankConfig(damping=0.7, window_size=2)
        assert config != TextRankConfig()
        assert pickle.loads(pickle.dumps(config)) == config
        assert "window_size=2" in repr(config)


class TestTextRank(unittest.TestCase):

    def test_options(self):
        text_rank = TextRank(damping=0.5, window_size=2)
        assert text_rank.config == TextRankConfig(damping=0.5, window_size=2)

        config = TextRankConfig(max_iter=10)
        assert TextRank(config).config is config

        with self.assertRaises(ConfigurationError):
            TextRank(config, damping=0.5)
        with self.assertRaises(ConfigurationError):
            TextRank(unknown_option=1)
        with self.assertRaises(ConfigurationError):
            TextRank(max_iter=0)
        with self.assertRaises(ConfigurationError):
            TextRank(config={"damping": 0.5})

    def test_state_machine(self):
        text_rank = TextRank()
        assert text_rank.state == RankState.IDLE
        assert text_rank.get_top_keywords(5) == []

        text_rank.build_graph(["linear", "constraints"])
        assert text_rank.state == RankState.BUILT
        assert text_rank.scores == {}

        text_rank.run(["linear", "constraints"])
        assert text_rank.state == RankState.STABLE

    def test_build_cooccurrence_graph(self):
        text_rank = TextRank(window_size=2)
        graph = text_rank.build_graph(["a", "b", "c", "d"])

        assert graph.nodes() == ["a", "b", "c", "d"]
        for from_node, to_node in [("a", "b"), ("a", "c"), ("b", "c"), ("b", "d"), ("c", "d")]:
            assert graph.out_neighbors(from_node)[to_node] == 1, "%s -> %s expected" % (from_node, to_node)
            assert graph.out_neighbors(to_node)[from_node] == 1, "%s -> %s expected" % (to_node, from_node)
        assert "d" not in graph.out_neighbors("a")
        assert "a" not in graph.out_neighbors("d")
        assert graph.number_of_edges() == 10

    def test_cooccurrence_multiplicity(self):
        text_rank = TextRank(window_size=1)
        graph = text_rank.build_graph(["a", "b", "a"])

        assert graph.nodes() == ["a", "b"]
        assert graph.out_neighbors("a") == {"b": 2}
        assert graph.out_neighbors("b") == {"a": 2}

    def test_cooccurrence_self_loop(self):
        graph = TextRank(window_size=1).build_graph(["again", "again"])
        assert graph.out_neighbors("again") == {"again": 2}

    def test_cooccurrence_window_clipped(self):
        graph = TextRank(window_size=10).build_graph(["a", "b", "c"])
        assert graph.out_neighbors("a") == {"b": 1, "c": 1}
        assert graph.out_neighbors("c") == {"a": 1, "b": 1}

    def test_zero_window(self):
        text_rank = TextRank(window_size=0)
        text_rank.run(["a", "b"])

        assert text_rank.graph.number_of_edges() == 0
        assert text_rank.converged
        assert text_rank.iterations == 2
        self.assertAlmostEqual(text_rank.scores["a"], 0.15 * 0.5)
        self.assertAlmostEqual(text_rank.scores["b"], 0.15 * 0.5)

    def test_uniform_priors(self):
        text_rank = TextRank()
        text_rank.run(["a", "b", "c", "a"])

        priors = text_rank.priors
        assert list(priors) == ["a", "b", "c"]
        for prior in priors.values():
            self.assertAlmostEqual(prior, 1 / 3)

    def test_priors_normalised(self):
        text_rank = TextRank()
        text_rank.run(["a", "b", "c"], {"a": 2.0, "b": 1.0, "c": 1.0, "unrelated": 10.0})

        priors = text_rank.priors
        self.assertAlmostEqual(sum(priors.values()), 1.0)
        self.assertAlmostEqual(priors["a"], 0.5)
        self.assertAlmostEqual(priors["b"], 0.25)
        assert "unrelated" not in priors

    def test_missing_prior_defaults_to_one(self):
        text_rank = TextRank()
        text_rank.run(["a", "b", "c"], {"a": 2.0})

        priors = text_rank.priors
        self.assertAlmostEqual(priors["a"], 0.5)
        self.assertAlmostEqual(priors["b"], 0.25)
        self.assertAlmostEqual(priors["c"], 0.25)

    def test_zero_prior_is_kept(self):
        text_rank = TextRank()
        text_rank.run(["a", "b"], {"a": 0.0})

        priors = text_rank.priors
        assert priors["a"] == 0
        self.assertAlmostEqual(priors["b"], 1.0)

    def test_all_zero_priors(self):
        text_rank = TextRank()
        with self.assertLogs("tfidfrank.textrank", level="WARNING"):
            text_rank.run(["a", "b", "c"], {"a": 0, "b": 0, "c": 0})

        assert text_rank.priors == {"a": 0, "b": 0, "c": 0}, "priors remain unnormalised zeros"
        assert text_rank.state == RankState.STABLE
        assert all(score == 0 for score in text_rank.scores.values())
        assert len(text_rank.get_top_keywords(3)) == 3

    def test_empty_document(self):
        text_rank = TextRank()
        text_rank.run([])

        assert text_rank.state == RankState.STABLE
        assert len(text_rank.graph) == 0
        assert text_rank.scores == {}
        assert text_rank.get_top_keywords(10) == []

    def test_single_word_document(self):
        text_rank = TextRank()
        text_rank.run(["equations"])

        assert text_rank.graph.number_of_edges() == 0
        self.assertAlmostEqual(text_rank.scores["equations"], 0.15)

    def test_central_word_ranks_first(self):
        text_rank = TextRank(window_size=1)
        text_rank.run(["a", "b", "c"])

        assert text_rank.get_top_keywords(1)[0][0] == "b"

    def test_scores_sum_to_one(self):
        tokens = ["compatibility", "systems", "linear", "constraints", "set", "natural", "numbers",
                  "criteria", "compatibility", "system", "linear", "diophantine", "equations"]
        text_rank = TextRank(window_size=2)
        text_rank.run(tokens, {"linear": 3.0, "systems": 2.0})

        self.assertAlmostEqual(sum(text_rank.scores.values()), 1.0, places=6)

    def test_max_iter_bounds_iterations(self):
        text_rank = TextRank(max_iter=1, window_size=1)
        text_rank.run(["a", "b", "c"])

        assert text_rank.iterations == 1
        assert not text_rank.converged
        self.assertAlmostEqual(text_rank.scores["b"], 0.15 / 3 + 0.85 * (1 / 3 + 1 / 3))

    def test_convergence(self):
        text_rank = TextRank(window_size=2)
        text_rank.run(["linear", "constraints", "set", "natural", "numbers", "linear", "set"])

        assert text_rank.converged
        assert 1 < text_rank.iterations < 200

    def test_fixed_point(self):
        tokens = ["upper", "bounds", "components", "minimal", "set", "solutions", "algorithms",
                  "construction", "minimal", "generating", "sets", "solutions", "types", "systems"]
        damping = 0.85
        text_rank = TextRank(damping=damping, max_iter=1000, min_diff=0, window_size=2)
        text_rank.run(tokens, {"minimal": 5.0, "solutions": 2.0, "systems": 0.5})

        assert text_rank.iterations == 1000
        graph = text_rank.graph
        scores = text_rank.scores
        priors = text_rank.priors
        for word in graph.nodes():
            inbound = sum(weight / graph.total_out_weight(neighbor) * scores[neighbor]
                          for neighbor, weight in graph.in_neighbors(word).items())
            expected = (1 - damping) * priors[word] + damping * inbound
            self.assertAlmostEqual(scores[word], expected, places=9)

    def test_matches_networkx_personalized_pagerank(self):
        corpus = [["compatibility", "systems", "linear", "constraints", "set", "natural", "numbers",
                   "criteria", "compatibility", "system", "linear", "diophantine", "equations", "strict",
                   "inequations", "nonstrict", "inequations"],
                  ["minimal", "set", "solutions", "systems", "types"]]
        tfidf = TfIdf(corpus)
        text_rank = TextRank(max_iter=1000, min_diff=0, window_size=3)
        text_rank.run(corpus[0], tfidf.document_scores(0))

        expected = nx.pagerank(text_rank.graph.to_networkx(), alpha=0.85, personalization=text_rank.priors,
                               weight="weight", max_iter=1000, tol=1.0e-12)
        for word, score in text_rank.scores.items():
            self.assertAlmostEqual(score, expected[word], places=6)

    def test_run_resets_state(self):
        text_rank = TextRank()
        text_rank.run(["linear", "constraints", "linear"], {"linear": 2.0})
        text_rank.run(["natural", "numbers"])

        assert text_rank.graph.nodes() == ["natural", "numbers"]
        assert set(text_rank.scores) == {"natural", "numbers"}
        assert set(text_rank.priors) == {"natural", "numbers"}
        self.assertAlmostEqual(text_rank.priors["natural"], 0.5)

    def test_idempotence(self):
        tokens = ["types", "systems", "systems", "mixed", "types", "solutions", "systems"]
        weights = {"types": 0.3, "systems": 0.5}

        text_rank = TextRank(window_size=2)
        text_rank.run(tokens, weights)
        first_scores = text_rank.scores
        text_rank.run(tokens, weights)

        assert text_rank.scores == first_scores

        other_text_rank = TextRank(window_size=2)
        other_text_rank.run(tokens, weights)
        assert other_text_rank.scores == first_scores
        assert other_text_rank.get_top_keywords(3) == text_rank.get_top_keywords(3)

    def test_get_top_keywords(self):
        text_rank = TextRank(window_size=2)
        text_rank.run(["linear", "diophantine", "equations", "strict", "inequations", "nonstrict",
                       "inequations", "linear", "constraints"])

        top_keywords = text_rank.get_top_keywords()
        assert len(top_keywords) == 5, "default top N should be 5"
        scores = [score for _, score in top_keywords]
        assert scores == sorted(scores, reverse=True)
        assert len(text_rank.get_top_keywords(100)) == 7

        for invalid_top_n in [0, -1, 2.5, None]:
            with self.assertRaises(ConfigurationError):
                text_rank.get_top_keywords(invalid_top_n)

    def test_ties_keep_first_seen_order(self):
        text_rank = TextRank()
        text_rank.run(["b", "a"])

        assert text_rank.scores["a"] == text_rank.scores["b"]
        assert [word for word, _ in text_rank.get_top_keywords(2)] == ["b", "a"]

    def test_nan_prior_never_converges(self):
        text_rank = TextRank(max_iter=5)
        text_rank.run(["a", "b"], {"a": math.nan})

        assert all(math.isnan(score) for score in text_rank.scores.values())
        assert not text_rank.converged, "NaN scores should not be reported as converged"
        assert text_rank.iterations == 5
        assert text_rank.state == RankState.STABLE

    def test_scores_are_copies(self):
        text_rank = TextRank()
        text_rank.run(["a", "b"])
        text_rank.scores["c"] = 1.0

        assert "c" not in text_rank.scores


if __name__ == '__main__':
    unittest.main()
