"""Tests for first- and second-line schema matching."""

import numpy as np
import pytest
from conftest import make_relation

from relprofile.matching import FirstLineSchemaMatcher, SecondLineSchemaMatcher, SimilarityMatrix


@pytest.fixture
def source():
    return make_relation("source", ["id", "name"], [("1", "a"), ("2", "b"), ("3", "c")])


@pytest.fixture
def target():
    return make_relation("target", ["label", "key"], [("a", "1"), ("b", "2"), ("c", "4")])


class TestFirstLineSchemaMatcher:
    """Tests for the value-based similarity matrix."""

    def test_similarity_matrix(self, source, target):
        """Test that column value overlap drives the scores."""
        similarities = FirstLineSchemaMatcher().match(source, target)

        assert similarities.shape == (2, 2)
        np.testing.assert_allclose(similarities.matrix, [[0.0, 0.5], [1.0, 0.0]])
        assert similarities.source is source
        assert similarities.target is target

    def test_shape_is_validated(self, source, target):
        with pytest.raises(ValueError):
            SimilarityMatrix(matrix=np.zeros((3, 2)), source=source, target=target)


class TestSecondLineSchemaMatcher:
    """Tests for one-to-one attribute assignment."""

    def test_assignment(self, source, target):
        similarities = FirstLineSchemaMatcher().match(source, target)
        correspondences = SecondLineSchemaMatcher().match(similarities)

        np.testing.assert_array_equal(correspondences.matrix, [[0, 1], [1, 0]])
        pairs = [(c.source_name, c.target_name) for c in correspondences.correspondences()]
        assert pairs == [("id", "key"), ("name", "label")]

    def test_min_similarity_drops_weak_pairs(self, source, target):
        similarities = FirstLineSchemaMatcher().match(source, target)
        correspondences = SecondLineSchemaMatcher(min_similarity=0.6).match(similarities)

        matched = correspondences.correspondences()
        assert [(c.source_name, c.target_name) for c in matched] == [("name", "label")]
        assert matched[0].similarity == pytest.approx(1.0)

    def test_one_to_one_on_non_square_matrix(self, source):
        target = make_relation("narrow", ["only"], [("a",), ("b",), ("z",)])
        similarities = FirstLineSchemaMatcher().match(source, target)
        correspondences = SecondLineSchemaMatcher().match(similarities)

        assert correspondences.matrix.sum() == 1
        assert correspondences.matrix.sum(axis=0).max() <= 1
        assert correspondences.matrix.sum(axis=1).max() <= 1
        assert correspondences.correspondences()[0].source_name == "name"

    def test_empty_relation(self, target):
        empty = make_relation("empty", [], [])
        similarities = FirstLineSchemaMatcher().match(empty, target)
        correspondences = SecondLineSchemaMatcher().match(similarities)
        assert correspondences.matrix.shape == (0, 2)
        assert correspondences.correspondences() == []
