import pytest

from smart_search.embedding.combiner import combine_embeddings
from smart_search.exceptions import DimensionMismatchError, EmbeddingContractError


def test_combine_single_embedding_is_identity() -> None:
    assert combine_embeddings([[0.25, -1.5, 3.0]]) == [0.25, -1.5, 3.0]


def test_combine_averages_elementwise() -> None:
    assert combine_embeddings([[1.0, 2.0], [3.0, 4.0]]) == [2.0, 3.0]


def test_combine_averages_three_embeddings() -> None:
    combined = combine_embeddings([[0.0, 3.0], [3.0, 0.0], [3.0, 3.0]])

    assert combined == pytest.approx([2.0, 2.0])


def test_combine_rejects_dimension_mismatch() -> None:
    with pytest.raises(DimensionMismatchError, match="차원"):
        combine_embeddings([[1.0, 2.0], [1.0, 2.0, 3.0]])


def test_combine_rejects_empty_input() -> None:
    with pytest.raises(EmbeddingContractError):
        combine_embeddings([])
